"""Model client and writing service tests with the Gemini SDK faked out."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace
from typing import Any

import httpx
import pytest
from google.genai import errors as genai_errors

from app.config import GenerationSettings, ModelConfig
from app.models.client import ModelClient, ModelClientError
from app.services.writing import WritingService

MODEL = ModelConfig(name="gemini-test", top_k=40, max_output_tokens=1024)
GENERATION = GenerationSettings(temperature=0.7, top_p=0.8, top_k=40, max_output_tokens=1024)


class FakeModels:
    """Stands in for ``client.aio.models``."""

    def __init__(self, *, text: str | None = "done", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def generate_content(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


def make_client(models: FakeModels) -> ModelClient:
    client = ModelClient(MODEL, api_key="test-key")
    client._client = SimpleNamespace(aio=SimpleNamespace(models=models))  # type: ignore[assignment]
    return client


def test_generate_sends_prompt_and_config() -> None:
    models = FakeModels(text="Polished text")
    client = make_client(models)

    output = asyncio.run(client.generate("Rewrite this", GENERATION))

    assert output == "Polished text"
    call = models.calls[0]
    assert call["model"] == "gemini-test"
    assert call["contents"] == "Rewrite this"
    assert call["config"].temperature == 0.7
    assert call["config"].top_p == 0.8
    assert call["config"].top_k == 40
    assert call["config"].max_output_tokens == 1024


@pytest.mark.parametrize("text", [None, ""])
def test_empty_response_raises(text: str | None) -> None:
    client = make_client(FakeModels(text=text))
    with pytest.raises(ModelClientError):
        asyncio.run(client.generate("Rewrite this", GENERATION))


@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectError("connection refused"),
        genai_errors.ServerError(503, {"error": {"message": "overloaded", "status": "UNAVAILABLE"}}),
    ],
)
def test_upstream_errors_are_wrapped(error: Exception) -> None:
    client = make_client(FakeModels(error=error))
    with pytest.raises(ModelClientError) as excinfo:
        asyncio.run(client.generate("Rewrite this", GENERATION))
    assert excinfo.value.__cause__ is error


def test_missing_api_key_raises() -> None:
    client = ModelClient(MODEL, api_key="")
    with pytest.raises(ModelClientError, match="GOOGLE_AI_KEY"):
        asyncio.run(client.generate("Rewrite this", GENERATION))


def test_service_uses_proofread_sampling() -> None:
    models = FakeModels(text="Their going home.")
    service = WritingService(model_config=MODEL, api_key="test-key", timeout=5.0)
    service._client = make_client(models)

    result = asyncio.run(service.rewrite(text="there going home", style="proofread"))

    assert result.style == "proofread"
    assert result.model_name == "gemini-test"
    assert result.output_text == "Their going home."
    assert result.latency_ms >= 0
    call = models.calls[0]
    assert call["config"].temperature == 0.1
    assert 'Text to proofread: "there going home"' in call["contents"]

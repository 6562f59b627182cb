"""Writing service orchestrating prompt assembly and model invocation."""

from __future__ import annotations

import time
from dataclasses import dataclass

from app.config import ModelConfig
from app.logging_utils import get_logger
from app.models.client import ModelClient
from app.prompts import build_prompt, generation_settings
from app.types import Style

logger = get_logger(__name__)


@dataclass
class WritingResult:
    """Structured response returned by the writing service."""

    style: Style
    model_name: str
    output_text: str
    latency_ms: float


class WritingService:
    """Service combining prompts, sampling settings, and the model call."""

    def __init__(self, *, model_config: ModelConfig, api_key: str, timeout: float) -> None:
        self._model_config = model_config
        self._client = ModelClient(model_config, api_key=api_key, timeout=timeout)

    async def rewrite(
        self,
        *,
        text: str,
        style: Style,
        freestyle: str | None = None,
    ) -> WritingResult:
        """Rewrite text in the requested style and return a structured result."""
        prompt = build_prompt(text=text, style=style, freestyle=freestyle)
        generation = generation_settings(style, self._model_config)

        start = time.perf_counter()
        output_text = await self._client.generate(prompt, generation)
        latency_ms = (time.perf_counter() - start) * 1000

        logger.debug(
            "Rewrite completed | style=%s model=%s temperature=%.1f latency_ms=%.2f text_len=%d",
            style,
            self._model_config.name,
            generation.temperature,
            latency_ms,
            len(text),
        )

        return WritingResult(
            style=style,
            model_name=self._model_config.name,
            output_text=output_text,
            latency_ms=latency_ms,
        )

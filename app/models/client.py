"""Model client abstraction layer."""

from __future__ import annotations

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

from app.config import GenerationSettings, ModelConfig


class ModelClientError(RuntimeError):
    """Raised when a downstream model call fails."""


class ModelClient:
    """Async client for the Gemini generate-content endpoint."""

    def __init__(self, config: ModelConfig, *, api_key: str, timeout: float = 120.0) -> None:
        self.config = config
        self.timeout = timeout
        self._api_key = api_key
        self._client: genai.Client | None = None

    def _get_client(self) -> genai.Client:
        if self._client is None:
            if not self._api_key:
                raise ModelClientError("GOOGLE_AI_KEY is not configured.")
            self._client = genai.Client(
                api_key=self._api_key,
                http_options=genai_types.HttpOptions(timeout=int(self.timeout * 1000)),
            )
        return self._client

    async def generate(self, prompt: str, generation: GenerationSettings) -> str:
        """Send the prompt to the model and return the generated text."""
        client = self._get_client()

        try:
            response = await client.aio.models.generate_content(
                model=self.config.name,
                contents=prompt,
                config=self._build_config(generation),
            )
        except (genai_errors.APIError, httpx.HTTPError) as exc:
            raise ModelClientError(str(exc)) from exc

        return self._parse_response(response)

    def _build_config(self, generation: GenerationSettings) -> genai_types.GenerateContentConfig:
        """Translate sampling settings to the SDK config shape."""
        return genai_types.GenerateContentConfig(
            temperature=generation.temperature,
            top_p=generation.top_p,
            top_k=generation.top_k,
            max_output_tokens=generation.max_output_tokens,
        )

    def _parse_response(self, response: genai_types.GenerateContentResponse) -> str:
        """Extract text from the response."""
        text = response.text
        if not text:
            # Blocked prompts and safety stops come back without any text parts.
            raise ModelClientError("Malformed Gemini response: no text returned.")
        return text

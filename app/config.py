"""Application configuration."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.types import Style


@dataclass(slots=True)
class ModelConfig:
    """Configuration for the upstream Gemini model."""

    name: str
    top_k: int
    max_output_tokens: int


@dataclass(slots=True)
class GenerationSettings:
    """Sampling parameters sent with a single generation call."""

    temperature: float
    top_p: float
    top_k: int
    max_output_tokens: int


class Settings(BaseSettings):
    """Pydantic settings wrapper."""

    environment: str = Field(default="development", alias="ENVIRONMENT")
    request_timeout_seconds: float = Field(default=120.0, alias="REQUEST_TIMEOUT_SECONDS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_content_enabled: bool = Field(default=False, alias="LOG_CONTENT_ENABLED")

    google_ai_key: str = Field(default="", alias="GOOGLE_AI_KEY")
    gemini_model: str = Field(default="gemini-2.5-flash", alias="GEMINI_MODEL")
    top_k: int = Field(default=40, alias="TOP_K")
    max_output_tokens: int = Field(default=1024, alias="MAX_OUTPUT_TOKENS")
    default_style: Style = Field(default="professional", alias="DEFAULT_STYLE")

    api_prefix: str = Field(default="/api", alias="API_PREFIX")
    cors_allow_origin: str = Field(default="*", alias="CORS_ALLOW_ORIGIN")
    cors_allow_methods: str = Field(default="GET, POST, OPTIONS", alias="CORS_ALLOW_METHODS")
    cors_allow_headers: str = Field(default="Content-Type", alias="CORS_ALLOW_HEADERS")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    def get_model_config(self) -> ModelConfig:
        """Return the configured upstream model target."""
        return ModelConfig(
            name=self.gemini_model.strip(),
            top_k=self.top_k,
            max_output_tokens=self.max_output_tokens,
        )


settings = Settings()

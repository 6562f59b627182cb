"""Pydantic models for API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from app.config import settings
from app.types import STYLES, Style

TEXT_REQUIRED = "Text is required"


class HealthResponse(BaseModel):
    """Response model for /health."""

    status: str
    environment: str
    version: str
    model: str


class WritingRequest(BaseModel):
    """Request payload for /api/writing."""

    text: str | None = Field(
        default=None,
        validate_default=True,
        description="Original text to rewrite.",
    )
    style: Style = Field(
        default_factory=lambda: settings.default_style,
        validate_default=True,
        description="Writing style to apply.",
    )
    freestyle: str | None = Field(
        default=None,
        description="Custom instructions, required when style=freestyle.",
    )

    @field_validator("text")
    @classmethod
    def require_text(cls, value: str | None) -> str:
        """Ensure text contains non-whitespace characters."""
        if value is None or not value.strip():
            raise ValueError(TEXT_REQUIRED)
        return value

    @field_validator("style", mode="before")
    @classmethod
    def known_style(cls, value: object) -> object:
        """Reject styles outside the supported set with a readable message."""
        if value is None:
            return settings.default_style
        if value not in STYLES:
            raise ValueError(f"Unsupported style {value!r}. Choose one of: {', '.join(STYLES)}.")
        return value

    @model_validator(mode="after")
    def validate_style_specific_fields(self) -> "WritingRequest":
        """Ensure freestyle instructions are set when needed."""
        if self.style == "freestyle" and not (self.freestyle and self.freestyle.strip()):
            msg = "Freestyle instructions are required when style is 'freestyle'."
            raise ValueError(msg)
        return self


class WritingResponse(BaseModel):
    """Response payload for writing calls."""

    result: str = Field(..., description="Text produced by the model.")


class ErrorResponse(BaseModel):
    """Error payload returned by API routes."""

    error: str

"""FastAPI entrypoint for the writing assistant backend."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app import __version__, schemas
from app.config import settings
from app.logging_utils import configure_logging, get_logger
from app.middleware import apply_cors_headers, install_cors_middleware, is_api_path
from app.models.client import ModelClientError
from app.services.writing import WritingResult, WritingService

configure_logging(level=settings.log_level)
logger = get_logger(__name__)

PROCESSING_FAILED = "Failed to process writing request"
INVALID_JSON = "Request body must be valid JSON"

API_PREFIX = settings.api_prefix.rstrip("/")

app = FastAPI(title="Writing Assistant Backend", version=__version__)
install_cors_middleware(app)


@lru_cache(maxsize=1)
def get_writing_service() -> WritingService:
    """Instantiate the writing service."""
    return WritingService(
        model_config=settings.get_model_config(),
        api_key=settings.google_ai_key,
        timeout=settings.request_timeout_seconds,
    )


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the ``{"error": ...}`` body used by every API route."""
    return JSONResponse(
        status_code=status_code,
        content=schemas.ErrorResponse(error=message).model_dump(),
    )


def validation_message(errors: list[dict[str, Any]]) -> str:
    """Turn the first pydantic error into a single client-facing message."""
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if error.get("type") == "json_invalid":
            return INVALID_JSON
        if error.get("type") == "missing" and loc == ("body",):
            return schemas.TEXT_REQUIRED
        ctx_error = (error.get("ctx") or {}).get("error")
        if ctx_error is not None:
            return str(ctx_error)
        field = ".".join(str(part) for part in loc if part != "body")
        return f"{field}: {error['msg']}" if field else error["msg"]
    return "Invalid request"


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
    """Report API validation failures as 400 with an error message."""
    if not is_api_path(request.url.path):
        return await request_validation_exception_handler(request, exc)
    return error_response(status.HTTP_400_BAD_REQUEST, validation_message(exc.errors()))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> Response:
    """Last-resort handler; runs outside the middleware stack so CORS is set here."""
    logger.exception("Error processing writing request", exc_info=exc)
    response = error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, PROCESSING_FAILED)
    if is_api_path(request.url.path):
        apply_cors_headers(response)
    return response


@app.get("/health", response_model=schemas.HealthResponse)
async def health() -> schemas.HealthResponse:
    """Simple health-check endpoint."""
    return schemas.HealthResponse(
        status="ok",
        environment=settings.environment,
        version=__version__,
        model=settings.gemini_model,
    )


@app.options(f"{API_PREFIX}/writing", status_code=status.HTTP_204_NO_CONTENT)
async def writing_preflight() -> Response:
    """Answer CORS preflight requests."""
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.post(
    f"{API_PREFIX}/writing",
    response_model=schemas.WritingResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": schemas.ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": schemas.ErrorResponse},
    },
)
async def rewrite_text(
    payload: schemas.WritingRequest,
    service: WritingService = Depends(get_writing_service),
) -> schemas.WritingResponse | JSONResponse:
    """Main writing endpoint."""
    try:
        result: WritingResult = await service.rewrite(
            text=payload.text,
            style=payload.style,
            freestyle=payload.freestyle,
        )
    except ModelClientError:
        logger.exception("Error processing writing request")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, PROCESSING_FAILED)

    text_preview = ""
    if settings.log_content_enabled:  # pragma: no cover
        text_preview = f" preview={payload.text[:200]!r}"

    logger.info(
        "Writing request processed | style=%s model=%s latency_ms=%.2f text_len=%d%s",
        result.style,
        result.model_name,
        result.latency_ms,
        len(payload.text),
        text_preview,
    )

    return schemas.WritingResponse(result=result.output_text)

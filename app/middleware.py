"""Cross-origin header injection for API routes."""

from __future__ import annotations

from fastapi import FastAPI, Request, Response

from app.config import settings


def is_api_path(path: str, prefix: str | None = None) -> bool:
    """Return True when the path falls under the API prefix."""
    prefix = (settings.api_prefix if prefix is None else prefix).rstrip("/")
    return path == prefix or path.startswith(f"{prefix}/")


def cors_headers() -> dict[str, str]:
    """Headers added to every API response."""
    return {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Methods": settings.cors_allow_methods,
        "Access-Control-Allow-Headers": settings.cors_allow_headers,
    }


def apply_cors_headers(response: Response) -> Response:
    """Set the CORS headers on a response in place."""
    for name, value in cors_headers().items():
        response.headers[name] = value
    return response


def install_cors_middleware(app: FastAPI) -> None:
    """Register the middleware that tags API responses with CORS headers.

    Unlike Starlette's CORSMiddleware the headers are set unconditionally,
    whether or not the request carries an ``Origin`` header.
    """

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next) -> Response:
        response = await call_next(request)
        if is_api_path(request.url.path):
            apply_cors_headers(response)
        return response

"""Logging helpers."""

from __future__ import annotations

import logging

# SDK and transport loggers that log every upstream request at INFO.
NOISY_LOGGERS = ("httpx", "httpcore", "google_genai")


def configure_logging(*, level: str = "INFO") -> None:
    """Configure application-wide logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)

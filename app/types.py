"""Shared typing helpers."""

from typing import Literal, get_args

Style = Literal["casual", "proofread", "professional", "persuasive", "freestyle"]

STYLES: tuple[str, ...] = get_args(Style)

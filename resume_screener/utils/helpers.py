"""Helper utilities for the resume screener."""

import uuid
from pathlib import PurePath
from typing import Any


def require_text(value: Any, name: str = "text") -> str:
    """Return value unchanged if it is a str; raise TypeError otherwise (no coercion)."""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def display_name(filename: str) -> str:
    """Candidate name from an uploaded file name: strip directories and extension."""
    if not filename:
        return ""
    name = PurePath(filename.replace("\\", "/")).name
    stem = PurePath(name).stem
    return stem or name


def new_document_id() -> str:
    """Random unique document id."""
    return uuid.uuid4().hex


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (round() rounds half to even)."""
    return int(value + 0.5)

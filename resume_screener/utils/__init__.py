"""Utility exports."""

from .helpers import display_name, new_document_id, require_text, round_half_up
from .logger import get_logger

__all__ = [
    "get_logger",
    "require_text",
    "display_name",
    "new_document_id",
    "round_half_up",
]

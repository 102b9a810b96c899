"""Pydantic models used across the project."""

from __future__ import annotations

from directive_outline.models.outline import DocumentType, Outline
from directive_outline.models.paragraph import MAX_LEVEL, MIN_LEVEL, Paragraph, normalize_content

__all__ = [
    "DocumentType",
    "MAX_LEVEL",
    "MIN_LEVEL",
    "Outline",
    "Paragraph",
    "normalize_content",
]

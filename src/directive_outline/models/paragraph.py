"""Paragraph model."""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

MIN_LEVEL = 1
MAX_LEVEL = 8

# Non-breaking, figure and narrow no-break spaces, plus line breaks.
_SPACE_LIKE_RE = re.compile(r"[\u00a0\u2007\u202f\r\n]")


def normalize_content(text: str) -> str:
    """Flatten paragraph text to a single logical line.

    Each special space or line-break character becomes one ordinary space.
    Regular spaces are preserved as typed.
    """

    return _SPACE_LIKE_RE.sub(" ", text)


class Paragraph(BaseModel):
    """A single outline paragraph.

    Hierarchy is not stored here; it follows from the paragraph's position in
    the outline and its ``level``.
    """

    id: int = Field(ge=1)
    level: int = Field(ge=MIN_LEVEL, le=MAX_LEVEL)
    content: str = ""

    is_mandatory: bool = False
    title: str | None = None

    # Recomputed by the acronym rescan; empty means no problem found.
    acronym_error: str = ""

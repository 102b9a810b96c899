"""Paragraph numbering: letter sequences and hierarchical citations."""

from __future__ import annotations

from directive_outline.numbering.citations import (
    MAX_LEVEL,
    citation_part,
    citations,
    count_at_level,
    full_citation,
    strip_punctuation,
)
from directive_outline.numbering.letters import to_letters

__all__ = [
    "MAX_LEVEL",
    "citation_part",
    "citations",
    "count_at_level",
    "full_citation",
    "strip_punctuation",
    "to_letters",
]

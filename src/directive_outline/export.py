"""Hand-off to the document generator.

The generator receives ``(citation, level, text)`` entries in outline order
and owns all typography. Empty optional paragraphs are left out before
citations are computed, so numbering in the document has no gaps.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

from directive_outline.models.outline import Outline
from directive_outline.models.paragraph import Paragraph
from directive_outline.numbering.citations import citations
from directive_outline.templates import placeholder_for


class ExportEntry(NamedTuple):
    citation: str
    level: int
    text: str


def active_paragraphs(paragraphs: Sequence[Paragraph]) -> list[Paragraph]:
    """Paragraphs that appear in the document: non-blank or mandatory."""

    return [p for p in paragraphs if p.content.strip() or p.is_mandatory]


def export_entries(outline: Outline) -> list[ExportEntry]:
    """Entries for the document generator."""

    active = active_paragraphs(outline.paragraphs)
    return [
        ExportEntry(citation=c, level=p.level, text=p.content)
        for c, p in zip(citations(active), active)
    ]


def render_text(outline: Outline, *, indent_width: int = 4, placeholders: bool = True) -> str:
    """Plain-text preview of the whole outline, one paragraph per line.

    Titled paragraphs lead with their title. Empty paragraphs show the
    placeholder guidance in angle brackets when ``placeholders`` is set.
    """

    lines: list[str] = []
    for citation, p in zip(citations(outline.paragraphs), outline.paragraphs):
        body = p.content.strip()
        if not body and placeholders:
            body = f"<{placeholder_for(p, outline.document_type)}>"
        if p.title:
            body = f"{p.title}.  {body}".rstrip()
        indent = " " * (indent_width * (p.level - 1))
        lines.append(f"{indent}{citation}  {body}".rstrip())
    return "\n".join(lines)

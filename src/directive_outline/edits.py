"""Outline edit operations.

Every operation is a pure transform: it returns a new :class:`Outline` when
the edit applies and the very same object when it is refused. Nothing here
raises for an illegal edit; callers compare identity (or use the ``check_*``
helpers) to decide whether to show a notice.
"""

from __future__ import annotations

from typing import Literal

from directive_outline import acronyms
from directive_outline.models.outline import Outline
from directive_outline.models.paragraph import MAX_LEVEL, MIN_LEVEL, Paragraph, normalize_content

InsertKind = Literal["main", "same", "sub", "up"]

# Mandatory paragraph that may still be deleted.
REMOVABLE_MANDATORY_TITLES = frozenset({"Cancellation"})

NOTICE_FIRST_PARAGRAPH = "Cannot delete the first paragraph."
NOTICE_MANDATORY = (
    "Cannot delete mandatory paragraphs. Mandatory paragraphs like \"Situation\", "
    "\"Mission\", etc. are required for the document format."
)
NOTICE_ABOVE_PARENT = "Cannot move a subparagraph above its parent paragraph."
NOTICE_AT_TOP = "Paragraph is already at the top."
NOTICE_AT_BOTTOM = "Paragraph is already at the bottom."


def _notice_unknown(paragraph_id: int) -> str:
    return f"Paragraph {paragraph_id} does not exist."


def new_level(kind: InsertKind, current_level: int) -> int:
    """Level of a paragraph inserted relative to one at ``current_level``."""

    if kind == "main":
        return MIN_LEVEL
    if kind == "same":
        return current_level
    if kind == "sub":
        return min(current_level + 1, MAX_LEVEL)
    if kind == "up":
        return max(current_level - 1, MIN_LEVEL)
    raise ValueError(f"unknown insert kind: {kind!r}")


def check_insert(outline: Outline, after_id: int) -> str | None:
    if outline.index_of(after_id) is None:
        return _notice_unknown(after_id)
    return None


def insert(outline: Outline, after_id: int, kind: InsertKind) -> Outline:
    """Insert an empty paragraph right after ``after_id``."""

    idx = outline.index_of(after_id)
    if idx is None:
        return outline

    level = new_level(kind, outline.paragraphs[idx].level)
    paragraph = Paragraph(id=outline.next_id(), level=level)
    paragraphs = list(outline.paragraphs)
    paragraphs.insert(idx + 1, paragraph)
    return outline.with_paragraphs(paragraphs)


def insert_main(outline: Outline, after_id: int) -> Outline:
    return insert(outline, after_id, "main")


def insert_same(outline: Outline, after_id: int) -> Outline:
    return insert(outline, after_id, "same")


def insert_sub(outline: Outline, after_id: int) -> Outline:
    return insert(outline, after_id, "sub")


def insert_up(outline: Outline, after_id: int) -> Outline:
    return insert(outline, after_id, "up")


def check_remove(outline: Outline, paragraph_id: int) -> str | None:
    """Return why ``paragraph_id`` cannot be deleted, or None if it can."""

    idx = outline.index_of(paragraph_id)
    if idx is None:
        return _notice_unknown(paragraph_id)

    paragraph = outline.paragraphs[idx]
    if paragraph.is_mandatory and paragraph.title not in REMOVABLE_MANDATORY_TITLES:
        return NOTICE_MANDATORY
    if idx == 0 or paragraph_id == outline.seed_id:
        return NOTICE_FIRST_PARAGRAPH
    return None


def remove(outline: Outline, paragraph_id: int) -> Outline:
    """Delete a paragraph unless it is protected."""

    if check_remove(outline, paragraph_id) is not None:
        return outline
    return outline.with_paragraphs([p for p in outline.paragraphs if p.id != paragraph_id])


def check_move_up(outline: Outline, paragraph_id: int) -> str | None:
    idx = outline.index_of(paragraph_id)
    if idx is None:
        return _notice_unknown(paragraph_id)
    if idx == 0:
        return NOTICE_AT_TOP
    if outline.paragraphs[idx].level > outline.paragraphs[idx - 1].level:
        return NOTICE_ABOVE_PARENT
    return None


def check_move_down(outline: Outline, paragraph_id: int) -> str | None:
    idx = outline.index_of(paragraph_id)
    if idx is None:
        return _notice_unknown(paragraph_id)
    if idx == len(outline.paragraphs) - 1:
        return NOTICE_AT_BOTTOM
    return None


def _swap(outline: Outline, i: int, j: int) -> Outline:
    paragraphs = list(outline.paragraphs)
    paragraphs[i], paragraphs[j] = paragraphs[j], paragraphs[i]
    return outline.with_paragraphs(paragraphs)


def move_up(outline: Outline, paragraph_id: int) -> Outline:
    """Swap a paragraph with the one above it."""

    if check_move_up(outline, paragraph_id) is not None:
        return outline
    idx = outline.index_of(paragraph_id)
    assert idx is not None
    return _swap(outline, idx - 1, idx)


def move_down(outline: Outline, paragraph_id: int) -> Outline:
    """Swap a paragraph with the one below it."""

    if check_move_down(outline, paragraph_id) is not None:
        return outline
    idx = outline.index_of(paragraph_id)
    assert idx is not None
    return _swap(outline, idx, idx + 1)


def check_set_content(outline: Outline, paragraph_id: int) -> str | None:
    if outline.index_of(paragraph_id) is None:
        return _notice_unknown(paragraph_id)
    return None


def set_content(outline: Outline, paragraph_id: int, text: str) -> Outline:
    """Replace a paragraph's text and rescan acronyms across the outline."""

    if outline.index_of(paragraph_id) is None:
        return outline

    cleaned = normalize_content(text)
    paragraphs = [
        p.model_copy(update={"content": cleaned}) if p.id == paragraph_id else p
        for p in outline.paragraphs
    ]
    return outline.with_paragraphs(acronyms.rescan(paragraphs))

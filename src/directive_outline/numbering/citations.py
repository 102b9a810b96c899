"""Hierarchical paragraph citations.

Citations are derived from the flat, ordered paragraph list on every call.
There is no parent pointer: a paragraph's parent is the nearest preceding
paragraph one level shallower, and its siblings are the same-level paragraphs
since the nearest preceding shallower paragraph.

Level styles::

    1  1.      5  1.
    2  a       6  a.
    3  (1)     7  (1)
    4  (a)     8  (a)

A level-3 paragraph under ``3.`` and ``c`` renders as ``3c(2)``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from directive_outline.models.paragraph import MAX_LEVEL, Paragraph
from directive_outline.numbering.letters import to_letters

_Style = tuple[Literal["number", "letters"], str, str]

LEVEL_STYLES: dict[int, _Style] = {
    1: ("number", "", "."),
    2: ("letters", "", ""),
    3: ("number", "(", ")"),
    4: ("letters", "(", ")"),
    5: ("number", "", "."),
    6: ("letters", "", "."),
    7: ("number", "(", ")"),
    8: ("letters", "(", ")"),
}

_PUNCTUATION = str.maketrans("", "", ".()")


def citation_part(level: int, count: int) -> str:
    """Render the label for the ``count``-th paragraph of a scope at ``level``."""

    style = LEVEL_STYLES.get(level)
    if style is None:
        raise ValueError(f"level must be within 1..{MAX_LEVEL}, got {level}")
    if count <= 0:
        raise ValueError(f"sibling count must be positive, got {count}")

    kind, prefix, suffix = style
    body = str(count) if kind == "number" else to_letters(count)
    return f"{prefix}{body}{suffix}"


def strip_punctuation(part: str) -> str:
    """Drop periods and parentheses from a citation part."""

    return part.translate(_PUNCTUATION)


def count_at_level(paragraphs: Sequence[Paragraph], index: int, level: int) -> int:
    """Count same-level paragraphs from the start of the scope through ``index``.

    The scope starts right after the nearest preceding paragraph shallower
    than ``level``, or at the beginning of the outline when there is none.
    """

    scope_start = 0
    if level > 1:
        for i in range(index - 1, -1, -1):
            if paragraphs[i].level < level:
                scope_start = i + 1
                break

    return sum(1 for p in paragraphs[scope_start : index + 1] if p.level == level)


def _part_at(paragraphs: Sequence[Paragraph], index: int) -> str:
    level = paragraphs[index].level
    return citation_part(level, count_at_level(paragraphs, index, level))


def ancestor_indices(paragraphs: Sequence[Paragraph], index: int) -> list[int]:
    """Indices of the paragraph's ancestors, outermost first.

    Scans backward for exactly ``level - 1``, then ``level - 2`` and so on.
    A skipped level contributes nothing.
    """

    out: list[int] = []
    expected = paragraphs[index].level - 1
    for i in range(index - 1, -1, -1):
        if expected <= 0:
            break
        if paragraphs[i].level == expected:
            out.append(i)
            expected -= 1
    out.reverse()
    return out


def full_citation(paragraphs: Sequence[Paragraph], index: int) -> str:
    """Compose the full citation of the paragraph at ``index``.

    Level 1 keeps its own part (``"3."``). Deeper levels prepend every
    ancestor's part without punctuation (``"3c(2)(a)"``).
    """

    level = paragraphs[index].level
    own = _part_at(paragraphs, index)
    if level == 1:
        return own

    path = [strip_punctuation(_part_at(paragraphs, i)) for i in ancestor_indices(paragraphs, index)]
    return "".join(path) + own


def citations(paragraphs: Sequence[Paragraph]) -> list[str]:
    """Full citation for every paragraph, in document order."""

    return [full_citation(paragraphs, i) for i in range(len(paragraphs))]

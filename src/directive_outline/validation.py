"""Structural checks on paragraph numbering.

A subparagraph may not stand alone: if there is a ``1a`` there must be a
``1b``, if there is a ``1a(1)`` there must be a ``1a(2)``. Top-level
paragraphs are exempt. Findings are advisory and never block an edit.
"""

from __future__ import annotations

from collections.abc import Sequence

from directive_outline.models.paragraph import Paragraph
from directive_outline.numbering.citations import ancestor_indices, full_citation, strip_punctuation


def scope_key(paragraphs: Sequence[Paragraph], index: int) -> str:
    """Key shared by all paragraphs of one sibling group.

    Built from the ancestors' citations (without punctuation) and the
    paragraph's own level.
    """

    path = "/".join(
        strip_punctuation(full_citation(paragraphs, i)) for i in ancestor_indices(paragraphs, index)
    )
    return f"{path}_level{paragraphs[index].level}"


def sibling_groups(paragraphs: Sequence[Paragraph]) -> dict[str, list[int]]:
    """Group paragraph indices by scope key, in order of first appearance."""

    groups: dict[str, list[int]] = {}
    for i in range(len(paragraphs)):
        groups.setdefault(scope_key(paragraphs, i), []).append(i)
    return groups


def validate_numbering(paragraphs: Sequence[Paragraph]) -> list[str]:
    """Report every subparagraph that has no sibling at its level.

    Returns:
        Human-readable warnings, e.g.
        ``"Paragraph 1a requires at least one sibling paragraph at the same level."``
    """

    warnings: list[str] = []
    for indices in sibling_groups(paragraphs).values():
        if len(indices) != 1:
            continue
        index = indices[0]
        if paragraphs[index].level > 1:
            citation = full_citation(paragraphs, index)
            warnings.append(
                f"Paragraph {citation} requires at least one sibling paragraph at the same level."
            )
    return warnings

"""Acronym usage checks.

An ALL-CAPS token of two or more letters must be spelled out as
``Full Name (ACRONYM)`` before, or in the same paragraph as, its first use.
Legality of a later paragraph depends on every earlier one, so the whole
outline is rescanned after each content change.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from directive_outline.logging import get_logger
from directive_outline.models.paragraph import Paragraph

logger = get_logger(__name__)

_CANDIDATE_RE = re.compile(r"\b[A-Z]{2,}\b")


def _definition_re(acronym: str) -> re.Pattern[str]:
    return re.compile(
        r"\b([A-Za-z][a-z]+(?:\s[A-Za-z][a-z]+)*)\s*\(\s*" + re.escape(acronym) + r"\s*\)"
    )


def acronym_error(acronym: str) -> str:
    return (
        f'Acronym "{acronym}" used without being defined first. '
        f'Please define it as "Full Name ({acronym})".'
    )


def is_defined_in(text: str, acronym: str) -> bool:
    """Return True if ``text`` spells out ``acronym`` as ``Full Name (ACRONYM)``."""

    return _definition_re(acronym).search(text) is not None


def check_paragraph(text: str, defined: set[str]) -> str:
    """Check one paragraph against the acronyms defined so far.

    ``defined`` is updated in place with acronyms this paragraph defines, up
    to the first offending token. Returns the error for that token, or ``""``.
    """

    for acronym in _CANDIDATE_RE.findall(text):
        defining_now = is_defined_in(text, acronym)
        if acronym not in defined and not defining_now:
            return acronym_error(acronym)
        if defining_now:
            defined.add(acronym)
    return ""


def rescan(paragraphs: Sequence[Paragraph]) -> list[Paragraph]:
    """Recompute ``acronym_error`` for every paragraph in document order.

    Returns new paragraph objects; the input is left untouched.
    """

    defined: set[str] = set()
    out: list[Paragraph] = []
    for p in paragraphs:
        error = check_paragraph(p.content, defined)
        if error:
            logger.debug("Paragraph %d: %s", p.id, error)
        out.append(p.model_copy(update={"acronym_error": error}))
    return out


def defined_acronyms(paragraphs: Sequence[Paragraph]) -> set[str]:
    """Acronyms legally defined anywhere in the outline."""

    defined: set[str] = set()
    for p in paragraphs:
        check_paragraph(p.content, defined)
    return defined

"""Mandatory paragraph templates for orders (MCO) and bulletins (MCBul)."""

from __future__ import annotations

from directive_outline import acronyms
from directive_outline.models.outline import DocumentType, Outline
from directive_outline.models.paragraph import Paragraph, normalize_content

CONTINGENCY_TITLE = "Cancellation Contingency"
NOTICE_NOT_BULLETIN = "Only bulletins have a Cancellation Contingency paragraph."

MCO_TITLES = (
    "Situation",
    "Cancellation",
    "Mission",
    "Execution",
    "Administration and Logistics",
    "Command and Signal",
)

MCBUL_TITLES = (
    "Purpose",
    "Cancellation",
    "Background",
    "Action",
    "Reserve Applicability",
)

DEFAULT_TITLES = (
    "Situation",
    "Mission",
    "Execution",
    "Administration and Logistics",
    "Command and Signal",
)

_CANCELLATION_HINT = (
    "List directives being canceled. Show SSIC codes and include dates for bulletins. "
    "Only cancel directives you sponsor."
)

PLACEHOLDERS: dict[str, dict[str, str]] = {
    "mco": {
        "Situation": (
            "Enter the purpose and background for this directive. "
            "Describe what this order addresses and why it is needed."
        ),
        "Cancellation": _CANCELLATION_HINT,
        "Mission": (
            "Describe the task to be accomplished with clear, concise statements. "
            "When cancellation is included, this becomes paragraph 3."
        ),
        "Execution": (
            "Provide clear statements of commander's intent to implement the directive. "
            "Include: (1) Commander's Intent and Concept of Operations, "
            "(2) Subordinate Element Missions, (3) Coordinating Instructions."
        ),
        "Administration and Logistics": (
            "Describe logistics, specific responsibilities, and support requirements."
        ),
        "Command and Signal": (
            "Include: a. Command - Applicability statement (e.g., \"This Order is applicable "
            "to the Marine Corps Total Force\"). b. Signal - \"This Order is effective the "
            "date signed.\""
        ),
    },
    "mcbul": {
        "Purpose": (
            "Enter the reason for this bulletin. This paragraph gives the purpose and must be first."
        ),
        "Cancellation": _CANCELLATION_HINT,
        "Background": (
            "Provide background information when needed to explain the context or history."
        ),
        "Action": (
            "Advise organizations/commands of specific action required. Note: Actions required "
            "by bulletins are canceled when the bulletin cancels unless incorporated into "
            "another directive."
        ),
        "Reserve Applicability": (
            "Enter applicability statement, e.g., \"This Directive is applicable to the Marine "
            "Corps Total Force\" or \"This Directive is applicable to the Marine Corps Reserve.\""
        ),
    },
}

GENERIC_PLACEHOLDER = "Enter your paragraph content here... Use <u>text</u> for underlined text."


def _mandatory(titles: tuple[str, ...]) -> list[Paragraph]:
    return [
        Paragraph(id=i, level=1, is_mandatory=True, title=title)
        for i, title in enumerate(titles, start=1)
    ]


def new_outline(document_type: DocumentType | None = None, *, contingent: bool = False) -> Outline:
    """Build the seed outline for a directive type.

    ``None`` gives the generic five-paragraph order. A contingent bulletin
    also gets a trailing Cancellation Contingency paragraph.
    """

    if document_type == "mcbul":
        paragraphs = _mandatory(MCBUL_TITLES)
        if contingent:
            paragraphs.append(
                Paragraph(id=len(paragraphs) + 1, level=1, is_mandatory=True, title=CONTINGENCY_TITLE)
            )
        return Outline(paragraphs=paragraphs, document_type="mcbul")

    if document_type == "mco":
        return Outline(paragraphs=_mandatory(MCO_TITLES), document_type="mco")

    return Outline(paragraphs=_mandatory(DEFAULT_TITLES), document_type="mco")


def placeholder_for(paragraph: Paragraph, document_type: DocumentType) -> str:
    """Guidance text shown for an empty paragraph."""

    if not paragraph.title:
        return GENERIC_PLACEHOLDER
    by_title = PLACEHOLDERS.get(document_type, PLACEHOLDERS["mco"])
    return by_title.get(paragraph.title, f"Enter content for {paragraph.title}...")


def check_contingency(outline: Outline) -> str | None:
    if outline.document_type != "mcbul":
        return NOTICE_NOT_BULLETIN
    return None


def contingency_id(outline: Outline) -> int | None:
    """Id of the Cancellation Contingency paragraph, if the outline has one."""

    return next((p.id for p in outline.paragraphs if p.title == CONTINGENCY_TITLE), None)


def sync_contingency(outline: Outline, *, contingent: bool, text: str = "") -> Outline:
    """Keep a bulletin's Cancellation Contingency paragraph in step with its cancellation type.

    Adds it as the last paragraph when a contingent bulletin lacks one,
    drops it when the bulletin is no longer contingent, and otherwise copies
    ``text`` into it when given. Orders are returned unchanged.
    """

    if outline.document_type != "mcbul":
        return outline

    has_para = any(p.title == CONTINGENCY_TITLE for p in outline.paragraphs)

    if contingent and not has_para:
        paragraph = Paragraph(
            id=outline.next_id(),
            level=1,
            content=normalize_content(text),
            is_mandatory=True,
            title=CONTINGENCY_TITLE,
        )
        return outline.with_paragraphs(acronyms.rescan([*outline.paragraphs, paragraph]))

    if not contingent and has_para:
        kept = [p for p in outline.paragraphs if p.title != CONTINGENCY_TITLE]
        if not kept:
            return outline
        return outline.with_paragraphs(kept)

    if contingent and text:
        cleaned = normalize_content(text)
        paragraphs = [
            p.model_copy(update={"content": cleaned}) if p.title == CONTINGENCY_TITLE else p
            for p in outline.paragraphs
        ]
        return outline.with_paragraphs(acronyms.rescan(paragraphs))

    return outline

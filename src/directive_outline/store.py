"""Stateful outline store.

Wraps the pure edit functions with the bookkeeping an editor needs: the
current outline, the notice for the last refused edit, structural warnings,
and an optional edit journal.
"""

from __future__ import annotations

from collections.abc import Callable

from directive_outline import edits, templates
from directive_outline.events import EditEvent, EditOp
from directive_outline.logging import get_logger
from directive_outline.models.outline import Outline
from directive_outline.numbering.citations import citations
from directive_outline.storage import EditJournal, iter_events
from directive_outline.validation import validate_numbering

logger = get_logger(__name__)

_INSERT_OPS: dict[edits.InsertKind, EditOp] = {
    "main": EditOp.INSERT_MAIN,
    "same": EditOp.INSERT_SAME,
    "sub": EditOp.INSERT_SUB,
    "up": EditOp.INSERT_UP,
}


class OutlineStore:
    """Current outline plus edit history."""

    def __init__(self, outline: Outline, journal: EditJournal | None = None) -> None:
        self._outline = outline
        self._journal = journal
        self._seq = len(iter_events(journal.path)) if journal is not None else 0
        self.last_notice: str | None = None
        self.warnings: list[str] = validate_numbering(outline.paragraphs)

    @property
    def outline(self) -> Outline:
        return self._outline

    def citations(self) -> list[str]:
        return citations(self._outline.paragraphs)

    def insert(self, after_id: int, kind: edits.InsertKind) -> int | None:
        """Insert a paragraph; returns the new paragraph id, or None if refused."""

        op = _INSERT_OPS[kind]
        updated = edits.insert(self._outline, after_id, kind)
        if updated is self._outline:
            self._record(op, after_id, updated, notice=edits.check_insert(self._outline, after_id))
            return None

        idx = updated.index_of(after_id)
        assert idx is not None
        new_id = updated.paragraphs[idx + 1].id
        self._record(op, after_id, updated, new_id=new_id)

        self.warnings = validate_numbering(updated.paragraphs)
        if self.warnings:
            logger.warning("Paragraph numbering warnings: %s", self.warnings)
        return new_id

    def remove(self, paragraph_id: int) -> bool:
        return self._apply(EditOp.REMOVE, paragraph_id, edits.remove, edits.check_remove)

    def move_up(self, paragraph_id: int) -> bool:
        return self._apply(EditOp.MOVE_UP, paragraph_id, edits.move_up, edits.check_move_up)

    def move_down(self, paragraph_id: int) -> bool:
        return self._apply(EditOp.MOVE_DOWN, paragraph_id, edits.move_down, edits.check_move_down)

    def set_content(self, paragraph_id: int, text: str) -> bool:
        return self._apply(
            EditOp.SET_CONTENT,
            paragraph_id,
            lambda outline, pid: edits.set_content(outline, pid, text),
            edits.check_set_content,
        )

    def sync_contingency(self, contingent: bool, text: str = "") -> bool:
        """Add, update or drop a bulletin's Cancellation Contingency paragraph."""

        notice = templates.check_contingency(self._outline)
        updated = self._outline
        if notice is None:
            updated = templates.sync_contingency(self._outline, contingent=contingent, text=text)
        paragraph_id = templates.contingency_id(updated) or templates.contingency_id(self._outline) or 0
        self._record(EditOp.SYNC_CONTINGENCY, paragraph_id, updated, notice=notice)
        if notice is None:
            self.warnings = validate_numbering(updated.paragraphs)
        return notice is None

    def _apply(
        self,
        op: EditOp,
        paragraph_id: int,
        edit: Callable[[Outline, int], Outline],
        check: Callable[[Outline, int], str | None],
    ) -> bool:
        notice = check(self._outline, paragraph_id)
        updated = self._outline if notice else edit(self._outline, paragraph_id)
        self._record(op, paragraph_id, updated, notice=notice)
        if notice is None:
            self.warnings = validate_numbering(updated.paragraphs)
        return notice is None

    def _record(
        self,
        op: EditOp,
        paragraph_id: int,
        updated: Outline,
        *,
        notice: str | None = None,
        new_id: int | None = None,
    ) -> None:
        self._seq += 1
        self.last_notice = notice
        if notice:
            logger.warning("Refused %s on paragraph %d: %s", op.value, paragraph_id, notice)
        else:
            logger.debug("Applied %s on paragraph %d (v%d)", op.value, paragraph_id, updated.version)
            self._outline = updated

        if self._journal is not None:
            self._journal.append(
                EditEvent(
                    seq=self._seq,
                    op=op,
                    paragraph_id=paragraph_id,
                    applied=notice is None,
                    notice=notice,
                    version=self._outline.version,
                    new_id=new_id,
                )
            )

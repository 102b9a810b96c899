"""Edit events.

Every edit attempted through :class:`~directive_outline.store.OutlineStore`
produces an event. Events can be appended to a JSONL journal so a session can
be audited or replayed later.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field


class EditOp(str, Enum):
    """Edit operations on an outline."""

    INSERT_MAIN = "insert_main"
    INSERT_SAME = "insert_same"
    INSERT_SUB = "insert_sub"
    INSERT_UP = "insert_up"
    REMOVE = "remove"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    SET_CONTENT = "set_content"
    SYNC_CONTINGENCY = "sync_contingency"


class EditEvent(BaseModel):
    """A single attempted edit."""

    seq: int = Field(ge=1)
    ts: datetime = Field(default_factory=lambda: datetime.now(UTC))

    op: EditOp
    paragraph_id: int
    applied: bool
    notice: str | None = None

    # Outline version after the edit
    version: int = Field(ge=1)
    # Paragraph created by an insert
    new_id: int | None = None

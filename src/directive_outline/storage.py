"""Outline persistence.

Outlines are stored as a single JSON snapshot. The edit journal is an
append-only JSONL file of :class:`EditEvent` records.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from directive_outline.errors import OutlineFileError
from directive_outline.events import EditEvent
from directive_outline.logging import get_logger
from directive_outline.models.outline import Outline

logger = get_logger(__name__)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise OutlineFileError(path, f"not valid UTF-8 (byte {e.start})") from e
    except OSError as e:
        raise OutlineFileError(path, e.strerror or type(e).__name__) from e


def save_outline(outline: Outline, path: Path) -> None:
    """Write an outline snapshot."""

    path.parent.mkdir(parents=True, exist_ok=True)
    payload = outline.model_dump(mode="json")
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    logger.info("Saved outline v%d (%d paragraphs) to %s", outline.version, len(outline.paragraphs), path)


def load_outline(path: Path) -> Outline:
    """Read an outline snapshot.

    Raises:
        OutlineFileError: If the file is missing, unreadable, not JSON, or not a valid outline.
    """

    if not path.exists():
        raise OutlineFileError(path, "file not found")
    text = _read_text(path)
    try:
        outline = Outline.model_validate_json(text)
    except ValidationError as e:
        raise OutlineFileError(path, f"invalid outline: {e.error_count()} error(s)") from e

    logger.info("Loaded outline v%d (%d paragraphs) from %s", outline.version, len(outline.paragraphs), path)
    return outline


@dataclass
class EditJournal:
    """Append-only JSONL journal."""

    path: Path

    def __post_init__(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, event: EditEvent) -> None:
        """Append an event."""

        line = json.dumps(event.model_dump(mode="json"), ensure_ascii=False)
        with self.path.open("a", encoding="utf-8") as f:
            f.write(line + "\n")


def iter_events(path: Path) -> list[EditEvent]:
    """Load all events from a JSONL journal."""

    events: list[EditEvent] = []
    if not path.exists():
        return events
    for line in _read_text(path).splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            events.append(EditEvent.model_validate_json(line))
        except ValidationError as e:
            raise OutlineFileError(path, f"invalid journal line: {line[:80]}") from e
    return events

"""Exception types."""

from __future__ import annotations

from pathlib import Path


class DirectiveOutlineError(Exception):
    """Base class for errors raised by this package."""


class OutlineFileError(DirectiveOutlineError):
    """An outline or journal file is missing or cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason

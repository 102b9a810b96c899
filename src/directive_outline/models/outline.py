"""Outline model."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from directive_outline.models.paragraph import Paragraph

DocumentType = Literal["mco", "mcbul"]


class Outline(BaseModel):
    """Ordered paragraphs of a directive body.

    List order is document order. The first paragraph is the seed and can
    never be removed, so an outline is never empty.
    """

    paragraphs: list[Paragraph] = Field(min_length=1)
    document_type: DocumentType = "mco"
    version: int = Field(default=1, ge=1)

    # Highest id ever handed out, so ids of deleted paragraphs are not reused.
    last_id: int = Field(default=0, ge=0)
    # Id of the paragraph the outline was created with; 0 until validated.
    seed_id: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_ids(self) -> "Outline":
        ids = [p.id for p in self.paragraphs]
        if len(ids) != len(set(ids)):
            raise ValueError("paragraph ids must be unique")
        self.last_id = max([self.last_id, *ids])
        if not self.seed_id:
            self.seed_id = ids[0]
        return self

    def index_of(self, paragraph_id: int) -> int | None:
        """Return the position of a paragraph id, or None if absent."""

        for i, p in enumerate(self.paragraphs):
            if p.id == paragraph_id:
                return i
        return None

    def get(self, paragraph_id: int) -> Paragraph | None:
        idx = self.index_of(paragraph_id)
        return None if idx is None else self.paragraphs[idx]

    def next_id(self) -> int:
        return max([self.last_id, *(p.id for p in self.paragraphs)]) + 1

    def with_paragraphs(self, paragraphs: list[Paragraph]) -> "Outline":
        """Copy with a new paragraph list and a bumped version."""

        last_id = max([self.last_id, *(p.id for p in paragraphs)])
        return self.model_copy(
            update={"paragraphs": paragraphs, "version": self.version + 1, "last_id": last_id}
        )

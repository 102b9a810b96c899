"""Tests for the document generator hand-off."""

from __future__ import annotations

from directive_outline.export import ExportEntry, active_paragraphs, export_entries, render_text
from directive_outline.models.outline import Outline
from directive_outline.models.paragraph import Paragraph


def _outline() -> Outline:
    return Outline(
        paragraphs=[
            Paragraph(id=1, level=1, is_mandatory=True, title="Situation"),
            Paragraph(id=2, level=2),
            Paragraph(id=3, level=2, content="First."),
            Paragraph(id=4, level=2, content="Second."),
            Paragraph(id=5, level=1, is_mandatory=True, title="Mission", content="Mission text"),
        ]
    )


def test_active_paragraphs_skip_empty_optional_ones() -> None:
    """It should keep mandatory and non-blank paragraphs only."""

    assert [p.id for p in active_paragraphs(_outline().paragraphs)] == [1, 3, 4, 5]


def test_export_entries_renumber_active_paragraphs() -> None:
    """It should compute citations over the filtered paragraphs."""

    assert export_entries(_outline()) == [
        ExportEntry("1.", 1, ""),
        ExportEntry("1a", 2, "First."),
        ExportEntry("1b", 2, "Second."),
        ExportEntry("2.", 1, "Mission text"),
    ]


def test_render_text_indents_by_level() -> None:
    """It should indent each level and lead titled paragraphs with the title."""

    text = render_text(_outline(), placeholders=False)
    assert text.splitlines() == [
        "1.  Situation.",
        "    1a",
        "    1b  First.",
        "    1c  Second.",
        "2.  Mission.  Mission text",
    ]


def test_render_text_shows_placeholders() -> None:
    """It should show guidance for empty paragraphs."""

    lines = render_text(_outline(), indent_width=2).splitlines()
    assert lines[0].startswith("1.  Situation.  <Enter the purpose and background")
    assert lines[1] == "  1a  <Enter your paragraph content here... Use <u>text</u> for underlined text.>"

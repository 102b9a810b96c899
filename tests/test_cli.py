"""Tests for the CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from directive_outline.cli import app
from directive_outline.events import EditOp
from directive_outline.storage import iter_events, load_outline

runner = CliRunner()


@pytest.fixture(autouse=True)
def _quiet_logs(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DIRECTIVE_OUTLINE_LOG_LEVEL", "ERROR")
    monkeypatch.delenv("DIRECTIVE_OUTLINE_JOURNAL_PATH", raising=False)


def _new(path: Path, *args: str) -> None:
    result = runner.invoke(app, ["new", "--file", str(path), *args])
    assert result.exit_code == 0, result.output


def test_new_and_show(tmp_path: Path) -> None:
    """It should create an order outline and print it with citations."""

    path = tmp_path / "outline.json"
    _new(path, "--type", "mco")

    result = runner.invoke(app, ["show", "--no-placeholders", "--file", str(path)])
    assert result.exit_code == 0, result.output
    assert "1.  Situation." in result.output
    assert "6.  Command and Signal." in result.output


def test_new_refuses_to_overwrite(tmp_path: Path) -> None:
    """It should not clobber an existing outline without --force."""

    path = tmp_path / "outline.json"
    _new(path)
    result = runner.invoke(app, ["new", "--file", str(path)])
    assert result.exit_code != 0

    result = runner.invoke(app, ["new", "--type", "mcbul", "--force", "--file", str(path)])
    assert result.exit_code == 0
    assert load_outline(path).document_type == "mcbul"


def test_edit_session(tmp_path: Path) -> None:
    """It should apply edits, refuse illegal ones and validate structure."""

    path = tmp_path / "outline.json"
    _new(path, "--type", "mco")

    result = runner.invoke(app, ["add", "sub", "1", "--file", str(path)])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip().splitlines()[-1] == "7"

    result = runner.invoke(app, ["validate", "--file", str(path)])
    assert result.exit_code == 1
    assert "Paragraph 1a requires at least one sibling paragraph at the same level." in result.output

    result = runner.invoke(app, ["add", "same", "7", "--text", "Second point.", "--file", str(path)])
    assert result.exit_code == 0, result.output

    result = runner.invoke(app, ["validate", "--file", str(path)])
    assert result.exit_code == 0

    result = runner.invoke(app, ["remove", "1", "--file", str(path)])
    assert result.exit_code == 0
    assert "Cannot delete mandatory paragraphs" in result.output
    assert len(load_outline(path).paragraphs) == 8

    result = runner.invoke(app, ["move-up", "7", "--file", str(path)])
    assert "Cannot move a subparagraph above its parent paragraph." in result.output

    result = runner.invoke(app, ["remove", "2", "--file", str(path)])
    assert result.exit_code == 0
    assert [p.title for p in load_outline(path).paragraphs if p.level == 1][1] == "Mission"


def test_set_and_export(tmp_path: Path) -> None:
    """It should store content and export entries for the document generator."""

    path = tmp_path / "outline.json"
    _new(path, "--type", "mco")

    result = runner.invoke(app, ["set", "1", "Use of MCDMP is required.", "--file", str(path)])
    assert result.exit_code == 0
    assert 'Acronym "MCDMP" used without being defined first.' in result.output

    out = tmp_path / "entries.json"
    result = runner.invoke(app, ["export", "--output", str(out), "--file", str(path)])
    assert result.exit_code == 0, result.output

    entries = json.loads(out.read_text(encoding="utf-8"))
    assert entries[0] == {"citation": "1.", "level": 1, "text": "Use of MCDMP is required."}
    assert [e["citation"] for e in entries] == ["1.", "2.", "3.", "4.", "5.", "6."]


def test_contingency_command(tmp_path: Path) -> None:
    """It should add and drop the bulletin contingency paragraph."""

    path = tmp_path / "outline.json"
    _new(path, "--type", "mcbul")

    result = runner.invoke(app, ["contingency", "--text", "Upon publication.", "--file", str(path)])
    assert result.exit_code == 0, result.output
    assert load_outline(path).paragraphs[-1].content == "Upon publication."

    result = runner.invoke(app, ["contingency", "--fixed", "--file", str(path)])
    assert result.exit_code == 0
    assert len(load_outline(path).paragraphs) == 5


def test_missing_outline_file(tmp_path: Path) -> None:
    """It should fail cleanly when the outline file does not exist."""

    result = runner.invoke(app, ["show", "--file", str(tmp_path / "missing.json")])
    assert result.exit_code != 0


def test_contingency_on_order_prints_notice(tmp_path: Path) -> None:
    """It should refuse the contingency paragraph for orders and leave the file alone."""

    path = tmp_path / "outline.json"
    _new(path, "--type", "mco")
    before = path.read_text(encoding="utf-8")

    result = runner.invoke(app, ["contingency", "--file", str(path)])
    assert result.exit_code == 0
    assert "Notice: Only bulletins have a Cancellation Contingency paragraph." in result.output
    assert path.read_text(encoding="utf-8") == before


def test_contingency_is_journaled(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """It should record contingency changes in the edit journal."""

    path = tmp_path / "outline.json"
    journal = tmp_path / "journal.jsonl"
    _new(path, "--type", "mcbul")
    monkeypatch.setenv("DIRECTIVE_OUTLINE_JOURNAL_PATH", str(journal))

    result = runner.invoke(app, ["contingency", "--file", str(path)])
    assert result.exit_code == 0, result.output

    events = iter_events(journal)
    assert [(e.op, e.applied, e.paragraph_id) for e in events] == [(EditOp.SYNC_CONTINGENCY, True, 6)]


def test_malformed_journal_is_a_usage_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """It should report a broken journal as a bad parameter, not crash."""

    path = tmp_path / "outline.json"
    journal = tmp_path / "journal.jsonl"
    journal.write_text("garbage\n", encoding="utf-8")
    _new(path, "--type", "mco")
    monkeypatch.setenv("DIRECTIVE_OUTLINE_JOURNAL_PATH", str(journal))

    result = runner.invoke(app, ["remove", "2", "--file", str(path)])
    assert result.exit_code == 2
    assert len(load_outline(path).paragraphs) == 6


def test_undecodable_outline_is_a_usage_error(tmp_path: Path) -> None:
    """It should report an outline with invalid bytes as a bad parameter."""

    path = tmp_path / "outline.json"
    path.write_bytes(b"\xff\xfe")

    result = runner.invoke(app, ["show", "--file", str(path)])
    assert result.exit_code == 2

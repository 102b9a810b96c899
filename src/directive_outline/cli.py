"""CLI entrypoints for directive-outline."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from directive_outline.config import Settings, load_settings
from directive_outline.edits import InsertKind
from directive_outline.errors import OutlineFileError
from directive_outline.export import export_entries, render_text
from directive_outline.logging import configure_logging, get_logger, outline_context
from directive_outline.models.outline import DocumentType
from directive_outline.storage import EditJournal, load_outline, save_outline
from directive_outline.store import OutlineStore
from directive_outline.templates import new_outline
from directive_outline.validation import validate_numbering

app = typer.Typer(add_completion=False, help="Marine Corps directive paragraph outline tool")
logger = get_logger(__name__)

_FILE_OPTION = typer.Option(None, "--file", "-f", help="Outline JSON file (overrides DIRECTIVE_OUTLINE_OUTLINE_PATH)")


def _settings(file: Path | None) -> Settings:
    settings = load_settings()
    if file is not None:
        settings.outline_path = file
    configure_logging(settings.log_level)
    return settings


def _open_store(settings: Settings) -> OutlineStore:
    try:
        outline = load_outline(settings.outline_path)
    except OutlineFileError as e:
        raise typer.BadParameter(str(e), param_hint="--file") from e
    logger.debug("Opened %s (%d paragraphs)", settings.outline_path, len(outline.paragraphs))

    journal = EditJournal(settings.journal_path) if settings.journal_path else None
    try:
        return OutlineStore(outline, journal=journal)
    except OutlineFileError as e:
        raise typer.BadParameter(str(e), param_hint="DIRECTIVE_OUTLINE_JOURNAL_PATH") from e


def _finish(store: OutlineStore, settings: Settings, applied: bool) -> None:
    if not applied:
        typer.echo(f"Notice: {store.last_notice}", err=True)
        return
    save_outline(store.outline, settings.outline_path)
    for warning in store.warnings:
        typer.echo(f"Warning: {warning}", err=True)


@app.command()
def new(
    document_type: str | None = typer.Option(None, "--type", "-t", help="mco or mcbul (default from settings)"),
    contingent: bool = typer.Option(False, "--contingent", help="Bulletin with a contingent cancellation"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing outline file"),
    file: Path | None = _FILE_OPTION,
) -> None:
    """Create an outline seeded with the mandatory paragraphs."""

    if document_type not in (None, "mco", "mcbul"):
        raise typer.BadParameter("type must be mco or mcbul", param_hint="--type")

    settings = _settings(file)
    path = settings.outline_path
    if path.exists() and not force:
        raise typer.BadParameter(f"{path} already exists; pass --force to overwrite.", param_hint="--file")

    doc_type: DocumentType = document_type or settings.document_type  # type: ignore[assignment]
    outline = new_outline(doc_type, contingent=contingent)
    save_outline(outline, path)
    typer.echo(str(path))


@app.command()
def show(
    placeholders: bool = typer.Option(True, "--placeholders/--no-placeholders"),
    file: Path | None = _FILE_OPTION,
) -> None:
    """Print the outline with citations, acronym errors and numbering warnings."""

    settings = _settings(file)
    store = _open_store(settings)
    typer.echo(render_text(store.outline, indent_width=settings.indent_width, placeholders=placeholders))

    for citation, p in zip(store.citations(), store.outline.paragraphs):
        if p.acronym_error:
            typer.echo(f"Paragraph {citation}: {p.acronym_error}", err=True)
    for warning in store.warnings:
        typer.echo(f"Warning: {warning}", err=True)


@app.command()
def add(
    kind: str = typer.Argument(..., help="main, same, sub or up"),
    after_id: int = typer.Argument(..., help="Id of the paragraph to insert after"),
    text: str = typer.Option("", "--text", help="Content of the new paragraph"),
    file: Path | None = _FILE_OPTION,
) -> None:
    """Insert a paragraph after another one."""

    if kind not in ("main", "same", "sub", "up"):
        raise typer.BadParameter("kind must be one of: main, same, sub, up", param_hint="KIND")
    insert_kind: InsertKind = kind  # type: ignore[assignment]

    settings = _settings(file)
    store = _open_store(settings)
    with outline_context(outline=str(settings.outline_path), op=f"insert_{kind}"):
        new_id = store.insert(after_id, insert_kind)
        if new_id is not None and text:
            store.set_content(new_id, text)
    _finish(store, settings, new_id is not None)
    if new_id is not None:
        typer.echo(str(new_id))


@app.command()
def remove(paragraph_id: int = typer.Argument(...), file: Path | None = _FILE_OPTION) -> None:
    """Delete a paragraph."""

    settings = _settings(file)
    store = _open_store(settings)
    with outline_context(outline=str(settings.outline_path), op="remove"):
        applied = store.remove(paragraph_id)
    _finish(store, settings, applied)


@app.command("move-up")
def move_up(paragraph_id: int = typer.Argument(...), file: Path | None = _FILE_OPTION) -> None:
    """Swap a paragraph with the one above it."""

    settings = _settings(file)
    store = _open_store(settings)
    with outline_context(outline=str(settings.outline_path), op="move_up"):
        applied = store.move_up(paragraph_id)
    _finish(store, settings, applied)


@app.command("move-down")
def move_down(paragraph_id: int = typer.Argument(...), file: Path | None = _FILE_OPTION) -> None:
    """Swap a paragraph with the one below it."""

    settings = _settings(file)
    store = _open_store(settings)
    with outline_context(outline=str(settings.outline_path), op="move_down"):
        applied = store.move_down(paragraph_id)
    _finish(store, settings, applied)


@app.command("set")
def set_text(
    paragraph_id: int = typer.Argument(...),
    text: str = typer.Argument(..., help="New paragraph content"),
    file: Path | None = _FILE_OPTION,
) -> None:
    """Replace a paragraph's content."""

    settings = _settings(file)
    store = _open_store(settings)
    with outline_context(outline=str(settings.outline_path), op="set_content"):
        applied = store.set_content(paragraph_id, text)
    _finish(store, settings, applied)

    paragraph = store.outline.get(paragraph_id)
    if applied and paragraph is not None and paragraph.acronym_error:
        typer.echo(paragraph.acronym_error, err=True)


@app.command()
def contingency(
    contingent: bool = typer.Option(True, "--contingent/--fixed", help="Cancellation type of the bulletin"),
    text: str = typer.Option("", "--text", help="Contingency description"),
    file: Path | None = _FILE_OPTION,
) -> None:
    """Add, update or drop a bulletin's Cancellation Contingency paragraph."""

    settings = _settings(file)
    store = _open_store(settings)
    with outline_context(outline=str(settings.outline_path), op="sync_contingency"):
        applied = store.sync_contingency(contingent, text)
    _finish(store, settings, applied)


@app.command()
def validate(file: Path | None = _FILE_OPTION) -> None:
    """List numbering warnings; exits 1 when there are any."""

    settings = _settings(file)
    store = _open_store(settings)
    warnings = validate_numbering(store.outline.paragraphs)
    for warning in warnings:
        typer.echo(warning)
    if warnings:
        raise typer.Exit(code=1)


@app.command()
def export(
    output: Path | None = typer.Option(None, "--output", "-o", help="Write entries to this JSON file"),
    file: Path | None = _FILE_OPTION,
) -> None:
    """Emit (citation, level, text) entries for the document generator."""

    settings = _settings(file)
    store = _open_store(settings)
    payload = [entry._asdict() for entry in export_entries(store.outline)]
    data = json.dumps(payload, ensure_ascii=False, indent=2)
    if output is None:
        typer.echo(data)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(data + "\n", encoding="utf-8")
    typer.echo(str(output))


if __name__ == "__main__":
    app()

"""CLI entrypoints for treedrag."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from pydantic import ValidationError

from treedrag.config import load_settings
from treedrag.intent import DropIntent, classify_drop_intent
from treedrag.logging import configure_logging, get_logger
from treedrag.models.node import Forest, forest_from_rows, forest_to_rows
from treedrag.recording import FileEventRecorder, iter_events, replay_events
from treedrag.session import DragSession

app = typer.Typer(add_completion=False, help="Drag-and-drop tree reordering tools")
logger = get_logger(__name__)


def _load_rows(path: Path) -> Forest:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise typer.BadParameter(f"Cannot read rows from {path}: {e}") from e
    if not isinstance(raw, list):
        raise typer.BadParameter(f"{path} must contain a JSON array of rows.")
    try:
        return forest_from_rows(raw)
    except ValidationError as e:
        raise typer.BadParameter(f"Invalid rows in {path}: {e}") from e


def _emit(rows: Forest, output: Path | None) -> None:
    text = json.dumps(forest_to_rows(rows), ensure_ascii=False, indent=2)
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    typer.echo(str(output))


@app.command()
def classify(
    offset: float = typer.Argument(..., help="Pointer offset from the top of the row"),
    height: float = typer.Argument(..., help="Row height"),
    gutter: float | None = typer.Option(None, "--gutter", help="Edge zone size (overrides TREEDRAG_GUTTER_SIZE)"),
) -> None:
    """Print the drop intent for a pointer position inside a row."""

    settings = load_settings()
    configure_logging(settings.log_level)

    intent = classify_drop_intent(offset, height, gutter if gutter is not None else settings.gutter_size)
    typer.echo(intent.value)


@app.command()
def move(
    rows_file: Path = typer.Argument(..., help="JSON file with an array of rows"),
    source: str = typer.Argument(..., help="Id of the dragged row"),
    target: str = typer.Argument(..., help="Id of the row dropped on"),
    intent: DropIntent = typer.Argument(..., help="above, over or below"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the new tree here instead of stdout"),
    record: Path | None = typer.Option(
        None,
        "--record",
        help="Append the drag events to this JSONL file (overrides TREEDRAG_EVENTS_PATH)",
    ),
) -> None:
    """Apply a single drag-and-drop move to a tree."""

    settings = load_settings()
    configure_logging(settings.log_level)

    rows = _load_rows(rows_file)
    events_path = record or settings.events_path
    recorder = FileEventRecorder(events_path) if events_path is not None else None

    session = DragSession(rows, gutter_size=settings.gutter_size, recorder=recorder)
    session.drag_start(source)
    session.hover(target, intent)
    new_rows = session.drop(target)

    if new_rows is rows:
        logger.warning("Move had no effect: source=%s target=%s intent=%s", source, target, intent.value)
    _emit(new_rows, output)


@app.command()
def replay(
    events_file: Path = typer.Argument(..., help="JSONL file of recorded drag events"),
    rows_file: Path = typer.Argument(..., help="JSON file with the tree the events were recorded on"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the new tree here instead of stdout"),
) -> None:
    """Replay recorded drag events and print the resulting tree."""

    settings = load_settings()
    configure_logging(settings.log_level)

    if not events_file.exists():
        raise typer.BadParameter(f"Events file not found: {events_file}")
    rows = _load_rows(rows_file)
    events = iter_events(events_file)
    _emit(replay_events(events, rows, gutter_size=settings.gutter_size), output)


if __name__ == "__main__":
    app()

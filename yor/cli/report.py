"""Report command."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from yor.api.config.ColorConfig import ColorConfig
from yor.api.config.YorConfig import YorConfig
from yor.api.report.ReportService import ReportService
from yor.api.tags.TagChangeAccumulator import TagChangeAccumulator

OUTPUT_FORMATS = ("cli", "json")


def report(
    snapshot: Annotated[Path, typer.Argument(help="Tag change snapshot (JSON) written by a scan")],
    output: Annotated[str | None, typer.Option("--output", "-o", help="Output format: cli or json")] = None,
    output_json_file: Annotated[
        Path | None, typer.Option("--output-json-file", help="Also write the JSON report to this file")
    ] = None,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colors in cli output")] = False,
) -> None:
    """Build a report from a snapshot and print it."""
    try:
        config = YorConfig.load().report
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    output = output or config.output
    if output not in OUTPUT_FORMATS:
        typer.echo(f"Error: --output must be 'cli' or 'json', got '{output}'", err=True)
        raise typer.Exit(1)

    try:
        accumulator = _load_snapshot(snapshot)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    service = ReportService()
    service.create_report(accumulator)

    if output == "json":
        service.print_json_to_stdout()
    else:
        service.print_to_stdout(colors=ColorConfig(no_color=no_color or config.no_color))

    json_file = output_json_file or config.output_json_file
    if json_file:
        service.print_json_to_file(json_file)


def _load_snapshot(path: Path) -> TagChangeAccumulator:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ValueError(f"Cannot read snapshot {path}: {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in snapshot {path}: {e}") from e
    return TagChangeAccumulator.from_dict(raw)

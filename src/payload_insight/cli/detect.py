"""Detect command: rank semantic categories for a single field."""

import json
from pathlib import Path
from typing import Any, List, Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..exceptions import PayloadInsightError
from ..logging_config import setup_logging
from ..schema.models import PrimitiveType
from ..serializers import confidence_to_dict
from . import app
from ._common import console, resolve_config

_FIELD_TYPES = [t.value for t in PrimitiveType if t is not PrimitiveType.UNKNOWN] + [
    "array",
    "object",
]


def _parse_sample(raw: str) -> Any:
    """Samples are JSON literals where possible (``19.99``, ``null``), else strings."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


@app.command()
def detect(
    name: str = typer.Argument(..., help="Field name, e.g. avatar_url"),
    field_type: str = typer.Option(
        "string",
        "--type",
        "-t",
        help=f"Primitive type of the field: {', '.join(_FIELD_TYPES)}",
    ),
    samples: Optional[List[str]] = typer.Option(
        None,
        "--sample",
        "-s",
        help="Sample value (repeatable); parsed as JSON when valid",
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Declared format hint, e.g. uri, email, date-time",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show signal breakdowns"),
):
    """
    Score one field against every semantic category.

    [bold cyan]Examples:[/bold cyan]

      payload-insight detect price --type number -s 19.99 -s 24.50

      payload-insight detect avatarUrl -s https://cdn.example.com/u/1.png
    """
    setup_logging(verbose=verbose)

    if field_type not in _FIELD_TYPES:
        console.print(f"[red]Error:[/red] unknown type '{escape(field_type)}'")
        raise typer.Exit(2)

    try:
        settings = resolve_config(config=config, verbose=verbose)
    except PayloadInsightError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    detector = settings.detector.build_detector()
    values = [_parse_sample(s) for s in samples or []]
    results = detector.detect(f"$.{name}", name, field_type, values, format_hint=fmt)

    if as_json:
        print(json.dumps([confidence_to_dict(r) for r in results], indent=2))
        return

    if not results:
        console.print(f"[dim]{escape(name)}: no category reached medium confidence[/dim]")
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("Category")
    table.add_column("Confidence", justify="right")
    table.add_column("Level")
    if verbose:
        table.add_column("Signals")
    for rank, result in enumerate(results, 1):
        row = [str(rank), result.category.value, f"{result.confidence:.2f}", result.level.value]
        if verbose:
            row.append(
                ", ".join(f"{s.name}+{s.contribution:.2f}" for s in result.signals if s.matched)
            )
        table.add_row(*row)
    console.print(table)

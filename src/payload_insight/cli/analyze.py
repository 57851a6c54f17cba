"""Analyze command: full analysis of a JSON document."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..analysis import should_group
from ..exceptions import PayloadInsightError
from ..logging_config import setup_logging
from ..orchestrator import ApiAnalysisResult, PathAnalysis, analyze_api_response
from ..serializers import result_to_dict
from . import app
from ._common import console, read_json_document, resolve_config

_TIER_STYLES = {"primary": "bold green", "secondary": "yellow", "tertiary": "dim"}
_LEVEL_STYLES = {"high": "green", "medium": "yellow", "low": "dim", "none": "dim"}


@app.command()
def analyze(
    source: str = typer.Argument(
        ...,
        help="JSON file to analyze, or - to read stdin",
    ),
    url: str = typer.Option(
        "",
        "--url",
        "-u",
        help="Source URL recorded on the inferred schema",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the full result as JSON",
    ),
    sample_cap: Optional[int] = typer.Option(
        None,
        "--sample-cap",
        "-n",
        help="Array elements sampled per field",
        min=1,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging and show alternative categories",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress logging",
    ),
):
    """
    Infer the schema of an API response and classify every field.

    [bold cyan]Examples:[/bold cyan]

      payload-insight analyze response.json --url https://api.example.com/users

      curl -s https://api.example.com/users | payload-insight analyze - --json
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = resolve_config(
            config=config, sample_cap=sample_cap, verbose=verbose, quiet=quiet
        )
        data = read_json_document(source)
        result = analyze_api_response(data, url, config=settings)

        if as_json:
            print(json.dumps(result_to_dict(result), indent=2))
        else:
            _output_rich(result, settings.grouping, verbose=verbose)

    except PayloadInsightError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _output_rich(result: ApiAnalysisResult, grouping_config, verbose: bool = False):
    """Human-readable output: one table per analyzable path."""
    schema = result.schema
    console.print()
    console.print(
        f"[bold cyan]{escape(schema.url or 'response')}[/bold cyan]  "
        f"{schema.root_type.kind}, {schema.sample_count} sampled, "
        f"{len(result.paths)} analyzable paths"
    )

    if not result.paths:
        console.print("  [dim]Nothing to analyze[/dim]")
        return

    for path, analysis in result.paths.items():
        console.print()
        console.print(f"[bold]{escape(path)}[/bold]")
        console.print(_path_table(analysis, verbose))
        _print_grouping(analysis, grouping_config)


def _path_table(analysis: PathAnalysis, verbose: bool) -> Table:
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Field")
    table.add_column("Category")
    table.add_column("Confidence", justify="right")
    table.add_column("Tier")
    table.add_column("Score", justify="right")
    if verbose:
        table.add_column("Alternatives")

    for field_path, metadata in analysis.semantics.items():
        category = metadata.detected_category.value if metadata.detected_category else "-"
        level = metadata.level.value
        score = analysis.importance.get(field_path)
        row = [
            escape(field_path),
            category,
            f"[{_LEVEL_STYLES[level]}]{metadata.confidence:.2f} {level}[/]",
            f"[{_TIER_STYLES[score.tier.value]}]{score.tier.value}[/]" if score else "-",
            f"{score.score:.2f}" if score else "-",
        ]
        if verbose:
            row.append(
                ", ".join(f"{a.category.value} {a.confidence:.2f}" for a in metadata.alternatives)
            )
        table.add_row(*row)
    return table


def _print_grouping(analysis: PathAnalysis, grouping_config) -> None:
    grouping = analysis.grouping
    if not should_group(grouping, len(analysis.importance), grouping_config):
        return
    for group in grouping.groups:
        names = ", ".join(f.name for f in group.fields)
        console.print(f"  [cyan]{group.label}[/cyan] ({group.kind}): {names}")
    if grouping.ungrouped:
        console.print(f"  [dim]Other: {', '.join(f.name for f in grouping.ungrouped)}[/dim]")

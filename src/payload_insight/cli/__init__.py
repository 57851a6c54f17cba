"""CLI entry point: registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="payload-insight",
    help="Payload Insight - Structural and Semantic API Response Analyzer",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool):
    if value:
        console.print(f"payload-insight {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Analyze JSON API responses: schema, semantics, importance, grouping."""


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .detect import detect as _detect  # noqa: F401, E402
from .normalize import normalize as _normalize  # noqa: F401, E402

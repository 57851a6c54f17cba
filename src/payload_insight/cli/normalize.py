"""Normalize command: canonical form of a path."""

import typer

from ..paths import normalize_path
from . import app


@app.command()
def normalize(
    path: str = typer.Argument(..., help="Concrete or canonical path, e.g. '$[3].tags[1]'"),
):
    """Print the canonical form of a path (every [N] becomes [])."""
    print(normalize_path(path))

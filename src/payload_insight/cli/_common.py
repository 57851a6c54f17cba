"""Shared CLI helpers."""

import json
import sys
from pathlib import Path
from typing import Any, Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config
from ..exceptions import PayloadInsightError

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    sample_cap: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build configuration from CLI options."""
    overrides: dict[str, Any] = {}
    if sample_cap is not None:
        overrides["sample_cap"] = sample_cap
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)


def read_json_document(source: str) -> Any:
    """Decode JSON from a file path, or from stdin when ``source`` is ``-``.

    Raises:
        PayloadInsightError: If the file can't be read or isn't valid JSON
    """
    try:
        if source == "-":
            return json.load(sys.stdin)
        with open(source, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise PayloadInsightError(f"Cannot read {source}", details={"reason": str(e)})
    except json.JSONDecodeError as e:
        raise PayloadInsightError(
            f"Invalid JSON in {source}", details={"line": str(e.lineno), "reason": e.msg}
        )

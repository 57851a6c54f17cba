"""Data models for importance scoring and field grouping."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from ..semantics.models import SemanticCategory


class ImportanceTier(Enum):
    """Visual prominence of a field.

    - PRIMARY: main content, displayed prominently
    - SECONDARY: supporting fields, displayed normally
    - TERTIARY: metadata and utility fields, de-emphasized
    """

    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"


@dataclass(frozen=True)
class ImportanceSignal:
    """One signal's share of an importance score.

    Attributes:
        name: 'name_pattern', 'visual_richness', 'data_presence' or 'position'
        matched: Whether the raw signal value was above zero
        weight: Configured weight of the signal
        raw: Unweighted signal value in [0, 1]
        contribution: ``raw * weight``
    """

    name: str
    matched: bool
    weight: float
    raw: float
    contribution: float


@dataclass(frozen=True)
class ImportanceScore:
    tier: ImportanceTier
    score: float
    signals: tuple[ImportanceSignal, ...] = ()
    metadata_override: bool = False


@dataclass(frozen=True)
class FieldInfo:
    """Sampled descriptor of one sibling field, built fresh per analysis.

    Attributes:
        path: Canonical path of the field
        name: Field name (last path segment)
        semantic_category: Detected category, or None
        sample_values: Bounded sample of observed values
        position: Zero-based index among its siblings
        total_fields: Number of siblings, the field included
    """

    path: str
    name: str
    semantic_category: Optional[SemanticCategory]
    sample_values: tuple[Any, ...] = ()
    position: int = 0
    total_fields: int = 1


@dataclass(frozen=True)
class PrefixGroup:
    """Fields sharing a name prefix, e.g. ``billing_street``, ``billing_city``."""

    prefix: str
    label: str
    fields: tuple[FieldInfo, ...]
    kind: str = field(default="prefix", init=False)


@dataclass(frozen=True)
class SemanticCluster:
    """Fields whose detected categories fall under one cluster rule."""

    label: str
    categories: tuple[SemanticCategory, ...]
    fields: tuple[FieldInfo, ...]
    kind: str = field(default="semantic", init=False)


FieldGroup = Union[PrefixGroup, SemanticCluster]


@dataclass(frozen=True)
class GroupingResult:
    groups: tuple[FieldGroup, ...] = ()
    ungrouped: tuple[FieldInfo, ...] = ()

    @property
    def grouped_paths(self) -> set[str]:
        return {f.path for group in self.groups for f in group.fields}


@dataclass(frozen=True)
class AnalysisResult:
    """Importance per field path plus the grouping of the sibling set."""

    importance: dict[str, ImportanceScore]
    grouping: GroupingResult

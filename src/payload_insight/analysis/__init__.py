"""Field importance and grouping analysis.

Usage:
    from payload_insight.analysis import analyze_fields

    result = analyze_fields(field_infos)
    result.importance["$.name"].tier   # ImportanceTier.PRIMARY
    result.grouping.groups             # prefix groups, then semantic clusters
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..config import AnalysisConfig
from .grouping import (
    analyze_grouping,
    detect_prefix_groups,
    detect_semantic_clusters,
    format_group_label,
    should_group,
)
from .importance import calculate_importance, is_metadata_field
from .models import (
    AnalysisResult,
    FieldGroup,
    FieldInfo,
    GroupingResult,
    ImportanceScore,
    ImportanceSignal,
    ImportanceTier,
    PrefixGroup,
    SemanticCluster,
)


def analyze_fields(
    fields: Sequence[FieldInfo], config: Optional[AnalysisConfig] = None
) -> AnalysisResult:
    """Score every field's importance and group the sibling set."""
    config = config or AnalysisConfig()
    importance = {info.path: calculate_importance(info, config.importance) for info in fields}
    grouping = analyze_grouping(fields, config.grouping)
    return AnalysisResult(importance=importance, grouping=grouping)


__all__ = [
    "analyze_fields",
    "analyze_grouping",
    "calculate_importance",
    "detect_prefix_groups",
    "detect_semantic_clusters",
    "format_group_label",
    "is_metadata_field",
    "should_group",
    "AnalysisResult",
    "FieldGroup",
    "FieldInfo",
    "GroupingResult",
    "ImportanceScore",
    "ImportanceSignal",
    "ImportanceTier",
    "PrefixGroup",
    "SemanticCluster",
]

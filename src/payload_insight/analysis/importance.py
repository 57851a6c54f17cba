"""Field importance scoring.

Four independent signals are combined into a weighted score in [0, 1]:

    name pattern      1.0 when the name matches a primary indicator, else 0.0
    visual richness   keyed off the detected semantic category
    data presence     share of non-null, non-empty sample values
    position          logarithmic decay favouring earlier fields

The score picks a provisional tier. A name matching a metadata pattern then
forces the tier to tertiary, whatever the score.
"""

from __future__ import annotations

import math
from typing import Any, Optional, Sequence

from ..config import ImportanceConfig
from ..semantics.models import SemanticCategory
from .models import FieldInfo, ImportanceScore, ImportanceSignal, ImportanceTier

HIGH_RICHNESS = frozenset(
    {
        SemanticCategory.IMAGE,
        SemanticCategory.VIDEO,
        SemanticCategory.THUMBNAIL,
        SemanticCategory.AVATAR,
    }
)
MEDIUM_RICHNESS = frozenset(
    {SemanticCategory.TITLE, SemanticCategory.NAME, SemanticCategory.DESCRIPTION}
)
LOW_RICHNESS = frozenset(
    {SemanticCategory.UUID, SemanticCategory.TIMESTAMP, SemanticCategory.DATE}
)
DEFAULT_RICHNESS = 0.4

MIN_POSITION_SCORE = 0.2


def score_name_pattern(field_name: str, config: ImportanceConfig) -> float:
    """1.0 if any primary indicator matches the name, else 0.0."""
    for pattern in config.indicator_regexes:
        if pattern.search(field_name):
            return 1.0
    return 0.0


def score_visual_richness(category: Optional[SemanticCategory]) -> float:
    if category is None:
        return DEFAULT_RICHNESS
    if category in HIGH_RICHNESS:
        return 1.0
    if category in MEDIUM_RICHNESS:
        return 0.6
    if category in LOW_RICHNESS:
        return 0.2
    return DEFAULT_RICHNESS


def score_data_presence(sample_values: Sequence[Any]) -> float:
    """Share of samples that are neither None nor the empty string."""
    if not sample_values:
        return 0.0
    present = sum(1 for v in sample_values if v is not None and v != "")
    return present / len(sample_values)


def score_position(position: int, total_fields: int) -> float:
    """``max(0.2, 1 - log10(position / total * 10 + 1) * 0.5)``.

    Gives roughly 1.0 for the first fields, 0.7-0.8 around the middle and
    bottoms out at 0.2. A lone field scores 1.0.
    """
    if total_fields <= 1:
        return 1.0
    normalized = max(0, position) / total_fields
    return max(MIN_POSITION_SCORE, 1.0 - math.log10(normalized * 10 + 1) * 0.5)


def is_metadata_field(field_name: str, config: ImportanceConfig) -> bool:
    return any(pattern.search(field_name) for pattern in config.metadata_regexes)


def calculate_importance(
    field: FieldInfo, config: Optional[ImportanceConfig] = None
) -> ImportanceScore:
    """Score one field and assign its tier.

    Args:
        field: Sampled field descriptor
        config: Weights, thresholds and name rules (defaults apply if None)

    Returns:
        ImportanceScore with the per-signal breakdown. ``metadata_override``
        records whether a metadata pattern forced the tertiary tier.
    """
    config = config or ImportanceConfig()

    raw_scores = (
        ("name_pattern", score_name_pattern(field.name, config), config.name_pattern_weight),
        (
            "visual_richness",
            score_visual_richness(field.semantic_category),
            config.visual_richness_weight,
        ),
        ("data_presence", score_data_presence(field.sample_values), config.data_presence_weight),
        (
            "position",
            score_position(field.position, field.total_fields),
            config.position_weight,
        ),
    )

    signals = []
    total = 0.0
    for name, raw, weight in raw_scores:
        contribution = raw * weight
        signals.append(
            ImportanceSignal(
                name=name, matched=raw > 0, weight=weight, raw=raw, contribution=contribution
            )
        )
        total += contribution

    if total >= config.primary_threshold:
        tier = ImportanceTier.PRIMARY
    elif total >= config.secondary_threshold:
        tier = ImportanceTier.SECONDARY
    else:
        tier = ImportanceTier.TERTIARY

    override = is_metadata_field(field.name, config)
    if override:
        tier = ImportanceTier.TERTIARY

    return ImportanceScore(
        tier=tier, score=total, signals=tuple(signals), metadata_override=override
    )

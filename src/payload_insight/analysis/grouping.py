"""Field grouping: shared name prefixes and semantic clusters.

Prefix grouping runs first. Semantic clustering then runs over the fields
no prefix group captured. If the combination would strand only one or two
fields outside every group, the grouping is dropped entirely: a couple of
orphaned fields reads worse than a flat layout.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

from ..config import GroupingConfig
from .models import FieldInfo, GroupingResult, PrefixGroup, SemanticCluster

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[_.]")


def name_prefix(field_name: str) -> Optional[str]:
    """Name up to and including its last ``_`` or ``.``; None without one.

    >>> name_prefix("shipping_address_city")
    'shipping_address_'
    """
    index = max(field_name.rfind("_"), field_name.rfind("."))
    if index <= 0:
        return None
    return field_name[: index + 1]


def format_group_label(prefix: str, config: GroupingConfig) -> str:
    """Title-case a prefix, dropping a trailing filler word.

    ``billing_`` becomes ``Billing``, ``contact_info_`` becomes ``Contact``
    and ``shipping_address_`` becomes ``Shipping Address``.
    """
    words = [w for w in _SEPARATORS.split(prefix.rstrip("_.")) if w]
    if len(words) > 1 and words[-1].lower() in config.suffixes_to_strip:
        words.pop()
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def detect_prefix_groups(
    fields: Sequence[FieldInfo], config: Optional[GroupingConfig] = None
) -> list[PrefixGroup]:
    config = config or GroupingConfig()
    if len(fields) < config.min_fields_for_grouping:
        return []

    by_prefix: dict[str, list[FieldInfo]] = {}
    for info in fields:
        prefix = name_prefix(info.name)
        if prefix is not None:
            by_prefix.setdefault(prefix, []).append(info)

    return [
        PrefixGroup(prefix=prefix, label=format_group_label(prefix, config), fields=tuple(members))
        for prefix, members in by_prefix.items()
        if len(members) >= config.min_fields_per_group
    ]


def detect_semantic_clusters(
    fields: Sequence[FieldInfo], config: Optional[GroupingConfig] = None
) -> list[SemanticCluster]:
    """One cluster per rule whose categories match enough fields.

    Rules are independent, so a field may appear in more than one cluster
    (an email counts toward both Contact and Identity).
    """
    config = config or GroupingConfig()
    if len(fields) < config.min_fields_for_grouping:
        return []

    clusters = []
    for rule in config.semantic_clusters:
        members = tuple(
            info
            for info in fields
            if info.semantic_category is not None and info.semantic_category in rule.categories
        )
        if len(members) >= rule.min_fields:
            clusters.append(
                SemanticCluster(label=rule.name, categories=rule.categories, fields=members)
            )
    return clusters


def analyze_grouping(
    fields: Sequence[FieldInfo], config: Optional[GroupingConfig] = None
) -> GroupingResult:
    """Combine prefix groups and semantic clusters for one sibling set.

    Returns:
        GroupingResult with prefix groups first, then semantic clusters,
        and the fields left in no group. Objects below
        ``min_fields_for_grouping`` and results that would orphan one or
        two fields come back with no groups and every field ungrouped.
    """
    config = config or GroupingConfig()
    fields = tuple(fields)
    flat = GroupingResult(groups=(), ungrouped=fields)
    if len(fields) < config.min_fields_for_grouping:
        return flat

    prefix_groups = detect_prefix_groups(fields, config)
    prefixed = {info.path for group in prefix_groups for info in group.fields}

    remaining = [info for info in fields if info.path not in prefixed]
    clusters = detect_semantic_clusters(remaining, config)
    clustered = {info.path for cluster in clusters for info in cluster.fields}

    ungrouped = tuple(
        info for info in fields if info.path not in prefixed and info.path not in clustered
    )
    groups = (*prefix_groups, *clusters)

    if groups and 1 <= len(ungrouped) <= 2:
        logger.debug(
            "Dropping %d groups to avoid orphaning %d fields", len(groups), len(ungrouped)
        )
        return flat

    return GroupingResult(groups=groups, ungrouped=ungrouped)


def should_group(
    result: Optional[GroupingResult], field_count: int, config: Optional[GroupingConfig] = None
) -> bool:
    """Whether a grouped layout is warranted for an object of ``field_count`` fields.

    Grouping is advisory: consumers switch layouts only when the object is
    large enough and at least one group was found.
    """
    config = config or GroupingConfig()
    if result is None or not result.groups:
        return False
    return field_count >= config.min_fields_for_grouping

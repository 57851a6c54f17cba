"""Semantic pattern catalogue and the registry that orders it.

Registration order is significant: the detector sorts by score with a
stable sort, so on equal scores the earlier-registered (more specific)
category wins. Specific categories are registered before general ones,
e.g. ``avatar`` and ``image`` before ``url``.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterator, Mapping, Optional, Union

from ..models import CompositePattern, SemanticCategory, SemanticPattern, Thresholds
from .commerce import COMMERCE_PATTERNS
from .engagement import COMPOSITE_PATTERNS, ENGAGEMENT_PATTERNS
from .identity import IDENTITY_PATTERNS
from .media import MEDIA_PATTERNS
from .spatial import SPATIAL_PATTERNS
from .temporal import TEMPORAL_PATTERNS

ThresholdOverride = Union[Thresholds, tuple[float, float]]


class PatternRegistry:
    """Immutable, ordered collection of semantic patterns.

    Built once at import time (``DEFAULT_REGISTRY``) and injected into the
    detector. Threshold overrides from configuration produce a new
    registry rather than mutating this one.
    """

    def __init__(
        self,
        patterns: tuple[SemanticPattern, ...],
        composites: tuple[CompositePattern, ...] = (),
    ):
        seen: set[SemanticCategory] = set()
        for pattern in (*patterns, *composites):
            if pattern.category in seen:
                raise ValueError(f"Duplicate pattern for category {pattern.category.value!r}")
            seen.add(pattern.category)
        self._patterns = tuple(patterns)
        self._composites = tuple(composites)

    @property
    def patterns(self) -> tuple[SemanticPattern, ...]:
        return self._patterns

    @property
    def composites(self) -> tuple[CompositePattern, ...]:
        return self._composites

    def get(self, category: Union[SemanticCategory, str]) -> Optional[SemanticPattern]:
        """Look up a field or composite pattern by category (enum or value)."""
        key = SemanticCategory(category)
        for pattern in (*self._patterns, *self._composites):
            if pattern.category is key:
                return pattern
        return None

    def categories(self) -> list[SemanticCategory]:
        return [p.category for p in self._patterns] + [p.category for p in self._composites]

    def with_thresholds(
        self, overrides: Mapping[Union[SemanticCategory, str], ThresholdOverride]
    ) -> PatternRegistry:
        """Return a copy with per-category thresholds replaced.

        Raises:
            ValueError: If an override names an unknown category
            ThresholdOrderError: If an override has ``high < medium``
        """
        resolved: dict[SemanticCategory, Thresholds] = {}
        for category, thresholds in overrides.items():
            key = SemanticCategory(category)
            if isinstance(thresholds, Thresholds):
                resolved[key] = thresholds
            else:
                high, medium = thresholds
                resolved[key] = Thresholds(high=float(high), medium=float(medium))

        def apply(pattern):
            if pattern.category in resolved:
                return replace(pattern, thresholds=resolved[pattern.category])
            return pattern

        return PatternRegistry(
            tuple(apply(p) for p in self._patterns),
            tuple(apply(p) for p in self._composites),
        )

    def __iter__(self) -> Iterator[SemanticPattern]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __repr__(self) -> str:
        return f"PatternRegistry(patterns={len(self._patterns)}, composites={len(self._composites)})"


ALL_PATTERNS: tuple[SemanticPattern, ...] = (
    *COMMERCE_PATTERNS,
    *MEDIA_PATTERNS,
    *IDENTITY_PATTERNS,
    *ENGAGEMENT_PATTERNS,
    *TEMPORAL_PATTERNS,
    *SPATIAL_PATTERNS,
)

DEFAULT_REGISTRY = PatternRegistry(ALL_PATTERNS, COMPOSITE_PATTERNS)

__all__ = [
    "ALL_PATTERNS",
    "COMPOSITE_PATTERNS",
    "DEFAULT_REGISTRY",
    "PatternRegistry",
]

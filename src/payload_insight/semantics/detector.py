"""Semantic detection: rank every registered category for a field.

Example:
    >>> detector = SemanticDetector()
    >>> results = detector.detect("$[].price", "price", "number", [19.99, 24.5, 9.99])
    >>> results[0].category
    <SemanticCategory.PRICE: 'price'>
    >>> detector.to_metadata(results).level
    <ConfidenceLevel.HIGH: 'high'>
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from ..schema.models import PrimitiveType
from .models import (
    Alternative,
    AppliedAt,
    ConfidenceLevel,
    ConfidenceResult,
    SemanticMetadata,
)
from .patterns import DEFAULT_REGISTRY, PatternRegistry
from .scorer import calculate_confidence, evaluate_composite

logger = logging.getLogger(__name__)

DEFAULT_MAX_ALTERNATIVES = 2

_RETAINED = (ConfidenceLevel.HIGH, ConfidenceLevel.MEDIUM)


def _type_name(primitive_type: Union[PrimitiveType, str]) -> str:
    if isinstance(primitive_type, PrimitiveType):
        return primitive_type.value
    return str(primitive_type)


class SemanticDetector:
    """Scores fields against a pattern registry.

    Stateless apart from the injected registry; one instance can be shared
    freely across analyses.
    """

    def __init__(
        self,
        registry: PatternRegistry = DEFAULT_REGISTRY,
        max_alternatives: int = DEFAULT_MAX_ALTERNATIVES,
    ):
        self.registry = registry
        self.max_alternatives = max_alternatives

    def detect(
        self,
        path: str,
        field_name: str,
        primitive_type: Union[PrimitiveType, str],
        sample_values: Sequence[Any],
        format_hint: Optional[str] = None,
    ) -> list[ConfidenceResult]:
        """Rank categories whose score reaches their ``medium`` threshold.

        Results are sorted by descending confidence. The sort is stable, so
        equal scores keep registration order.
        """
        field_type = _type_name(primitive_type)
        results = []
        for pattern in self.registry:
            result = calculate_confidence(field_name, field_type, sample_values, format_hint, pattern)
            if result.level in _RETAINED:
                results.append(result)
        results.sort(key=lambda r: r.confidence, reverse=True)
        if results:
            logger.debug(
                "%s: %s (%.2f, %d candidates)",
                path,
                results[0].category.value,
                results[0].confidence,
                len(results),
            )
        return results

    def detect_composite(
        self,
        path: str,
        field_name: str,
        item_fields: Mapping[str, Union[PrimitiveType, str]],
        sample_items: Sequence[Any],
    ) -> Optional[ConfidenceResult]:
        """Best composite match for an array of objects, or None.

        Like ``detect``, only matches at or above ``medium`` count; the
        first registered composite wins ties.
        """
        item_types = {name: _type_name(t) for name, t in item_fields.items()}
        best: Optional[ConfidenceResult] = None
        for pattern in self.registry.composites:
            result = evaluate_composite(field_name, item_types, sample_items, pattern)
            if result.level not in _RETAINED:
                continue
            if best is None or result.confidence > best.confidence:
                best = result
        if best is not None:
            logger.debug("%s: composite %s (%.2f)", path, best.category.value, best.confidence)
        return best

    @staticmethod
    def best_match(results: Sequence[ConfidenceResult]) -> Optional[ConfidenceResult]:
        return results[0] if results else None

    def to_metadata(self, results: Sequence[ConfidenceResult]) -> SemanticMetadata:
        """Reduce ranked results to the per-path metadata record."""
        best = self.best_match(results)
        if best is None:
            return SemanticMetadata.none()
        alternatives = tuple(
            Alternative(category=r.category, confidence=r.confidence)
            for r in results[1 : 1 + self.max_alternatives]
        )
        return SemanticMetadata(
            detected_category=best.category,
            confidence=best.confidence,
            level=best.level,
            applied_at=AppliedAt.SMART_DEFAULT,
            alternatives=alternatives,
        )


_DEFAULT_DETECTOR = SemanticDetector()


def detect_semantics(
    path: str,
    field_name: str,
    primitive_type: Union[PrimitiveType, str],
    sample_values: Sequence[Any],
    format_hint: Optional[str] = None,
) -> list[ConfidenceResult]:
    """``SemanticDetector.detect`` against the default registry."""
    return _DEFAULT_DETECTOR.detect(path, field_name, primitive_type, sample_values, format_hint)


def get_best_match(results: Sequence[ConfidenceResult]) -> Optional[ConfidenceResult]:
    return SemanticDetector.best_match(results)

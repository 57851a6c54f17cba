"""Semantic category detection.

Scores a field (name, primitive type, sample values, optional format hint)
against a fixed catalogue of weighted multi-signal patterns and reports
the ranked categories that clear their confidence thresholds.

Usage:
    from payload_insight.semantics import SemanticDetector

    detector = SemanticDetector()
    results = detector.detect("$.avatar_url", "avatar_url", "string", ["https://x.io/a.png"])
    metadata = detector.to_metadata(results)
"""

from .detector import SemanticDetector, detect_semantics, get_best_match
from .models import (
    Alternative,
    AppliedAt,
    CompositePattern,
    ConfidenceLevel,
    ConfidenceResult,
    SemanticCategory,
    SemanticMetadata,
    SemanticPattern,
    SignalMatch,
    Thresholds,
)
from .patterns import DEFAULT_REGISTRY, PatternRegistry
from .scorer import calculate_confidence, evaluate_composite, tokenize_name

__all__ = [
    # Detection
    "SemanticDetector",
    "detect_semantics",
    "get_best_match",
    "calculate_confidence",
    "evaluate_composite",
    "tokenize_name",
    # Registry
    "DEFAULT_REGISTRY",
    "PatternRegistry",
    # Models
    "Alternative",
    "AppliedAt",
    "CompositePattern",
    "ConfidenceLevel",
    "ConfidenceResult",
    "SemanticCategory",
    "SemanticMetadata",
    "SemanticPattern",
    "SignalMatch",
    "Thresholds",
]

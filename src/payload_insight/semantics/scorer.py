"""Multi-signal confidence scoring for one field against one pattern.

Every signal contributes its weight when it fires and nothing otherwise;
unmatched signals are not averaged away. The total is capped at 1.0 and
rounded so that comparisons against thresholds are exact.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Optional, Sequence

from .models import (
    CompositePattern,
    ConfidenceLevel,
    ConfidenceResult,
    SemanticPattern,
    SignalMatch,
)

logger = logging.getLogger(__name__)

SCORE_PRECISION = 6

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SEPARATORS = re.compile(r"[\s_\-.\[\]$]+")


def tokenize_name(field_name: str) -> str:
    """Normalize a field name into lowercase space-separated words.

    ``avatarUrl``, ``avatar_url``, ``avatar-url`` and ``AvatarURL`` all
    become ``avatar url`` so that word-bounded name regexes behave the same
    across naming conventions.
    """
    spaced = _CAMEL_BOUNDARY.sub(" ", field_name)
    return _SEPARATORS.sub(" ", spaced).strip().lower()


def _name_signal(tokens: str, pattern: SemanticPattern) -> SignalMatch:
    max_weight = max((p.weight for p in pattern.name_patterns), default=0.0)
    best = 0.0
    for name_pattern in pattern.name_patterns:
        if name_pattern.regex.search(tokens) and name_pattern.weight > best:
            best = name_pattern.weight
    return SignalMatch(name="name", matched=best > 0, weight=max_weight, contribution=best)


def _passes(predicate, sample: Any) -> bool:
    try:
        return bool(predicate(sample))
    except Exception as e:
        logger.debug(f"Validator {getattr(predicate, '__name__', predicate)!r} raised: {e}")
        return False


def _finish(
    pattern: SemanticPattern, signals: list[SignalMatch], total: float
) -> ConfidenceResult:
    confidence = round(min(1.0, total), SCORE_PRECISION)
    return ConfidenceResult(
        category=pattern.category,
        confidence=confidence,
        level=pattern.thresholds.level_for(confidence),
        signals=tuple(signals),
    )


def calculate_confidence(
    field_name: str,
    field_type: str,
    sample_values: Sequence[Any],
    format_hint: Optional[str],
    pattern: SemanticPattern,
) -> ConfidenceResult:
    """Score a field against a single pattern.

    Args:
        field_name: Raw field name (tokenised internally)
        field_type: Primitive type name (``string``, ``number``, ``date``, ``array`` ...)
        sample_values: Observed values; None entries never satisfy a validator
        format_hint: Optional declared format such as ``uri`` or ``email``
        pattern: The category definition to score against

    Returns:
        ConfidenceResult with the per-signal breakdown. A required type
        mismatch yields confidence 0.0 and level NONE.
    """
    tokens = tokenize_name(field_name)
    signals: list[SignalMatch] = []
    total = 0.0

    name = _name_signal(tokens, pattern)
    signals.append(name)
    total += name.contribution

    constraint = pattern.type_constraint
    type_ok = field_type in constraint.allowed
    signals.append(
        SignalMatch(
            name=f"type:{field_type}",
            matched=type_ok,
            weight=constraint.weight,
            contribution=constraint.weight if type_ok else 0.0,
        )
    )
    if not type_ok and constraint.required:
        return ConfidenceResult(
            category=pattern.category,
            confidence=0.0,
            level=ConfidenceLevel.NONE,
            signals=tuple(signals),
        )
    if type_ok:
        total += constraint.weight

    present = [v for v in sample_values if v is not None]
    for validator in pattern.value_validators:
        matched = any(_passes(validator.predicate, v) for v in present)
        signals.append(
            SignalMatch(
                name=f"value:{validator.name}",
                matched=matched,
                weight=validator.weight,
                contribution=validator.weight if matched else 0.0,
            )
        )
        if matched:
            total += validator.weight

    hint = format_hint.lower() if format_hint else None
    for format_signal in pattern.format_hints:
        matched = hint is not None and format_signal.format == hint
        signals.append(
            SignalMatch(
                name=f"format:{format_signal.format}",
                matched=matched,
                weight=format_signal.weight,
                contribution=format_signal.weight if matched else 0.0,
            )
        )
        if matched:
            total += format_signal.weight

    return _finish(pattern, signals, total)


def evaluate_composite(
    field_name: str,
    item_fields: Mapping[str, str],
    sample_items: Sequence[Any],
    pattern: CompositePattern,
) -> ConfidenceResult:
    """Score an array-of-objects field against a composite pattern.

    ``item_fields`` maps each item field name to its primitive type name.
    Every required field must be matched (by name regex and exact type)
    for the structure signal to fire. Fewer sample items than
    ``min_items`` halves the score.
    """
    signals: list[SignalMatch] = []
    total = 0.0

    name = _name_signal(tokenize_name(field_name), pattern)
    signals.append(name)
    total += name.contribution

    # only arrays reach this point
    constraint = pattern.type_constraint
    signals.append(
        SignalMatch(name="type:array", matched=True, weight=constraint.weight, contribution=constraint.weight)
    )
    total += constraint.weight

    tokenised = {tokenize_name(item_name): item_type for item_name, item_type in item_fields.items()}
    structure_ok = bool(pattern.required_fields) and all(
        any(
            required.name_regex.search(item_name) and item_type == required.type
            for item_name, item_type in tokenised.items()
        )
        for required in pattern.required_fields
    )
    signals.append(
        SignalMatch(
            name="structure",
            matched=structure_ok,
            weight=pattern.structure_weight,
            contribution=pattern.structure_weight if structure_ok else 0.0,
        )
    )
    if structure_ok:
        total += pattern.structure_weight

    if len(sample_items) < pattern.min_items:
        total *= 0.5

    return _finish(pattern, signals, total)

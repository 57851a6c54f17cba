"""Semantic detection models.

A SemanticPattern describes one category (price, email, avatar, ...) as a
set of independently weighted signals:
- name patterns: regexes over the tokenised field name (best match counts)
- a type constraint: allowed primitive types, optionally disqualifying
- value validators: named predicates run against sample values
- format hints: extra weight when the caller's format string matches

Scoring a field against a pattern yields a ConfidenceResult; the detector
reduces the ranked results to a SemanticMetadata record per field path.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from ..exceptions import InvalidConfigError, ThresholdOrderError


class SemanticCategory(Enum):
    """Named domain concepts a field's data can represent.

    Declaration order groups categories by domain; detection order is
    the pattern registry's order, not this one.
    """

    # Commerce
    PRICE = "price"
    CURRENCY_CODE = "currency_code"
    SKU = "sku"
    COUNT = "count"
    PERCENTAGE = "percentage"
    # Media
    AVATAR = "avatar"
    THUMBNAIL = "thumbnail"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    # Identity
    EMAIL = "email"
    PHONE = "phone"
    UUID = "uuid"
    NAME = "name"
    ADDRESS = "address"
    URL = "url"
    # Engagement and content
    RATING = "rating"
    REVIEWS = "reviews"
    TAGS = "tags"
    STATUS = "status"
    TITLE = "title"
    DESCRIPTION = "description"
    # Temporal
    DATE = "date"
    TIMESTAMP = "timestamp"
    # Visual and spatial
    COLOR = "color"
    COORDINATES = "coordinates"


class ConfidenceLevel(Enum):
    """Discrete bucket of a continuous detector score."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"


class AppliedAt(Enum):
    """How a field's semantics were decided."""

    SMART_DEFAULT = "smart-default"
    TYPE_BASED = "type-based"


@dataclass(frozen=True)
class Thresholds:
    """Per-category score cutoffs. ``high`` must not sit below ``medium``."""

    high: float = 0.75
    medium: float = 0.50

    def __post_init__(self) -> None:
        for name in ("high", "medium"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise InvalidConfigError(name, value, "threshold must be between 0.0 and 1.0")
        if self.high < self.medium:
            raise ThresholdOrderError("semantic thresholds", self.high, self.medium)

    def level_for(self, score: float) -> ConfidenceLevel:
        if score >= self.high:
            return ConfidenceLevel.HIGH
        if score >= self.medium:
            return ConfidenceLevel.MEDIUM
        if score > 0:
            return ConfidenceLevel.LOW
        return ConfidenceLevel.NONE


@dataclass(frozen=True)
class NamePattern:
    """Regex over the tokenised field name.

    Attributes:
        regex: Compiled pattern, matched with ``search``
        weight: Contribution when matched
        languages: Natural languages the pattern targets (documentation only)
    """

    regex: re.Pattern
    weight: float
    languages: tuple[str, ...] = ("en",)


@dataclass(frozen=True)
class TypeConstraint:
    """Allowed primitive type names (``string``, ``number``, ``array`` ...).

    With ``required`` set, a mismatched type disqualifies the category.
    """

    allowed: frozenset[str]
    weight: float
    required: bool = False


@dataclass(frozen=True)
class ValueValidator:
    name: str
    predicate: Callable[[Any], bool]
    weight: float


@dataclass(frozen=True)
class FormatHint:
    format: str
    weight: float


@dataclass(frozen=True)
class SemanticPattern:
    """Complete multi-signal definition of one semantic category."""

    category: SemanticCategory
    name_patterns: tuple[NamePattern, ...]
    type_constraint: TypeConstraint
    value_validators: tuple[ValueValidator, ...] = ()
    format_hints: tuple[FormatHint, ...] = ()
    thresholds: Thresholds = field(default_factory=Thresholds)


@dataclass(frozen=True)
class RequiredField:
    """A field that items of a composite array must carry."""

    name_regex: re.Pattern
    type: str


@dataclass(frozen=True)
class CompositePattern(SemanticPattern):
    """Pattern for arrays of objects, e.g. a list of reviews.

    Attributes:
        required_fields: Item fields that must all be present (name + type)
        structure_weight: Contribution when every required field is found
        min_items: Sample items needed for full credit; fewer halves the score
    """

    required_fields: tuple[RequiredField, ...] = ()
    structure_weight: float = 0.4
    min_items: int = 1


@dataclass(frozen=True)
class SignalMatch:
    """One signal's contribution to a category score.

    Attributes:
        name: Signal identifier (e.g. 'name:price', 'type', 'value:is_email')
        matched: Whether the signal fired
        weight: Maximum contribution of this signal
        contribution: Weight actually added (0 when unmatched)
    """

    name: str
    matched: bool
    weight: float
    contribution: float


@dataclass(frozen=True)
class ConfidenceResult:
    """Score of one field against one pattern."""

    category: SemanticCategory
    confidence: float
    level: ConfidenceLevel
    signals: tuple[SignalMatch, ...] = ()


@dataclass(frozen=True)
class Alternative:
    category: SemanticCategory
    confidence: float


@dataclass(frozen=True)
class SemanticMetadata:
    """Semantic verdict for one field path.

    Attributes:
        detected_category: Best category, or None when nothing cleared ``medium``
        confidence: Score of the best category (0.0 when none)
        level: Discrete level of the best category
        applied_at: SMART_DEFAULT when a category was detected, else TYPE_BASED
        alternatives: Up to two runner-up categories with their scores
    """

    detected_category: Optional[SemanticCategory]
    confidence: float
    level: ConfidenceLevel
    applied_at: AppliedAt
    alternatives: tuple[Alternative, ...] = ()

    @classmethod
    def none(cls) -> SemanticMetadata:
        return cls(
            detected_category=None,
            confidence=0.0,
            level=ConfidenceLevel.NONE,
            applied_at=AppliedAt.TYPE_BASED,
            alternatives=(),
        )

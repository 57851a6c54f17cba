"""Small constructors that keep pattern definitions declarative."""

from __future__ import annotations

import re
from typing import Any, Callable

from ..models import FormatHint, NamePattern, TypeConstraint, ValueValidator

NAME_WEIGHT = 0.4
TYPE_WEIGHT = 0.2
VALUE_WEIGHT = 0.25
SPECIFIC_VALUE_WEIGHT = 0.3
FORMAT_WEIGHT = 0.15


def names(regex: str, *languages: str, weight: float = NAME_WEIGHT) -> NamePattern:
    """Word-bounded regex over the tokenised, lowercased field name."""
    return NamePattern(
        regex=re.compile(rf"\b(?:{regex})\b", re.IGNORECASE),
        weight=weight,
        languages=tuple(languages) or ("en",),
    )


def types(*allowed: str, weight: float = TYPE_WEIGHT, required: bool = False) -> TypeConstraint:
    return TypeConstraint(allowed=frozenset(allowed), weight=weight, required=required)


def value(
    predicate: Callable[[Any], bool], weight: float = VALUE_WEIGHT, name: str = ""
) -> ValueValidator:
    return ValueValidator(name=name or predicate.__name__, predicate=predicate, weight=weight)


def fmt(format_name: str, weight: float = FORMAT_WEIGHT) -> FormatHint:
    return FormatHint(format=format_name, weight=weight)

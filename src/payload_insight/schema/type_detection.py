"""Primitive type detection for single JSON values.

Arrays and objects are handled by the inferrer; this module only answers
"which primitive is this leaf".
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any

from .models import PrimitiveType

ISO_8601_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}(T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:?\d{2})?)?$"
)


def detect_field_type(value: Any) -> PrimitiveType:
    """Detect the primitive type of a value.

    ``bool`` is checked before numbers because it subclasses ``int``.
    ISO-8601 strings that name a real calendar date are reported as DATE.
    Containers and any other Python object fall back to UNKNOWN.
    """
    if value is None:
        return PrimitiveType.NULL
    if isinstance(value, bool):
        return PrimitiveType.BOOLEAN
    if isinstance(value, (int, float)):
        return PrimitiveType.NUMBER
    if isinstance(value, str):
        if ISO_8601_PATTERN.match(value) and _parses_as_date(value):
            return PrimitiveType.DATE
        return PrimitiveType.STRING
    return PrimitiveType.UNKNOWN


def _parses_as_date(value: str) -> bool:
    """Reject pattern matches such as 2024-13-45 that are not real dates."""
    try:
        date.fromisoformat(value[:10])
    except ValueError:
        return False
    if len(value) == 10:
        return True
    time_part = value[11:]
    hour, minute, second = int(time_part[0:2]), int(time_part[3:5]), int(time_part[6:8])
    try:
        datetime(2000, 1, 1, hour, minute, second)
    except ValueError:
        return False
    return True

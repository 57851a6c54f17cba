"""Temporal patterns: calendar dates and timestamps.

Values that the inferrer already recognised as ISO-8601 carry the
``date`` primitive type, so both patterns accept it alongside ``string``.
"""

from ..models import SemanticCategory, SemanticPattern
from ..validators import is_date, is_timestamp
from .base import SPECIFIC_VALUE_WEIGHT, fmt, names, types, value

_AUDIT_NAMES = r"(?:created|updated|modified|deleted|published|expires|expired) (?:at|on)"

DATE = SemanticPattern(
    category=SemanticCategory.DATE,
    name_patterns=(
        names(
            rf"date|dates|day|birthday|birth date|dob|start date|end date|due date|{_AUDIT_NAMES}|"
            r"created date|updated date|fecha|datum|jour",
            "en", "es", "fr", "de",
        ),
    ),
    type_constraint=types("string", "date"),
    value_validators=(value(is_date, SPECIFIC_VALUE_WEIGHT),),
    format_hints=(fmt("date"),),
)

TIMESTAMP = SemanticPattern(
    category=SemanticCategory.TIMESTAMP,
    name_patterns=(
        names(
            rf"timestamp|datetime|date time|time|ts|{_AUDIT_NAMES}|last modified|last seen|"
            r"marca de tiempo|horodatage|zeitstempel",
            "en", "es", "fr", "de",
        ),
    ),
    type_constraint=types("string", "date", "number"),
    value_validators=(value(is_timestamp, SPECIFIC_VALUE_WEIGHT),),
    format_hints=(fmt("date-time"),),
)

TEMPORAL_PATTERNS = (DATE, TIMESTAMP)

"""Engagement and content patterns: rating, tags, status, title, description.

Also holds the composite ``reviews`` pattern, which inspects the item
fields of an array of objects rather than a single value.
"""

import re

from ..models import CompositePattern, RequiredField, SemanticCategory, SemanticPattern
from ..validators import (
    is_long_text,
    is_non_empty_string,
    is_rating,
    is_status_value,
    is_string_list,
    is_tag_value,
)
from .base import SPECIFIC_VALUE_WEIGHT, fmt, names, types, value


def is_tag_collection(sample) -> bool:
    """A list of short strings, or one short string drawn from such a list."""
    return is_string_list(sample) or is_tag_value(sample)


RATING = SemanticPattern(
    category=SemanticCategory.RATING,
    name_patterns=(
        names(
            r"rating|ratings|score|stars|average rating|"
            r"puntuacion|valoracion|note|bewertung|avaliacao",
            "en", "es", "fr", "de", "pt",
        ),
        # a lone "rate"; "exchange_rate" and "tax_rate" are not ratings
        names(r"^rate$"),
    ),
    type_constraint=types("number", required=True),
    value_validators=(value(is_rating),),
    format_hints=(fmt("float", 0.1), fmt("double", 0.1)),
)

TAGS = SemanticPattern(
    category=SemanticCategory.TAGS,
    name_patterns=(
        names(
            r"tags?|labels?|categories|keywords?|topics?|genres?|hashtags?|"
            r"etiquetas?|palabras clave|mots cles|schlagworte|stichworte",
            "en", "es", "fr", "de",
        ),
    ),
    type_constraint=types("array", required=True),
    value_validators=(value(is_tag_collection, SPECIFIC_VALUE_WEIGHT),),
)

STATUS = SemanticPattern(
    category=SemanticCategory.STATUS,
    name_patterns=(
        names(r"status|state|stage|phase|condition|estado|statut|etat|zustand", "en", "es", "fr", "de"),
    ),
    type_constraint=types("string"),
    value_validators=(value(is_status_value, SPECIFIC_VALUE_WEIGHT),),
)

TITLE = SemanticPattern(
    category=SemanticCategory.TITLE,
    name_patterns=(
        names(r"title|headline|subject|heading|caption|name|titulo|titre|titel|uberschrift", "en", "es", "fr", "de"),
    ),
    type_constraint=types("string"),
    # any text qualifies, so this signal stays weak
    value_validators=(value(is_non_empty_string, 0.2),),
)

DESCRIPTION = SemanticPattern(
    category=SemanticCategory.DESCRIPTION,
    name_patterns=(
        names(
            r"description|desc|summary|content|body|text|bio|biography|about|overview|abstract|details|"
            r"descripcion|resumen|resume|beschreibung|zusammenfassung",
            "en", "es", "fr", "de",
        ),
    ),
    type_constraint=types("string"),
    value_validators=(value(is_long_text),),
)

REVIEWS = CompositePattern(
    category=SemanticCategory.REVIEWS,
    name_patterns=(
        names(r"reviews?|comments?|feedback|testimonials?|opiniones|avis|bewertungen", "en", "es", "fr", "de"),
    ),
    type_constraint=types("array", required=True),
    required_fields=(
        RequiredField(re.compile(r"\b(?:rating|score|stars)\b", re.IGNORECASE), "number"),
        RequiredField(re.compile(r"\b(?:comment|text|body|content|review|message)\b", re.IGNORECASE), "string"),
    ),
    structure_weight=0.4,
    min_items=1,
)

ENGAGEMENT_PATTERNS = (RATING, TAGS, STATUS, TITLE, DESCRIPTION)
COMPOSITE_PATTERNS = (REVIEWS,)

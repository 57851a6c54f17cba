"""Visual and spatial patterns: colors and geographic coordinates."""

from ..models import SemanticCategory, SemanticPattern
from ..validators import is_color, is_coordinate
from .base import SPECIFIC_VALUE_WEIGHT, names, types, value

COLOR = SemanticPattern(
    category=SemanticCategory.COLOR,
    name_patterns=(
        names(r"color|colour|colors|hex|rgb|hex code|farbe|couleur|cor", "en", "fr", "de", "pt"),
    ),
    type_constraint=types("string", required=True),
    value_validators=(value(is_color, SPECIFIC_VALUE_WEIGHT),),
)

COORDINATES = SemanticPattern(
    category=SemanticCategory.COORDINATES,
    name_patterns=(
        names(
            r"lat|lng|lon|latitude|longitude|coords?|coordinates?|geo|geolocation|geopoint|latlng|"
            r"position|ubicacion|coordenadas|coordonnees|koordinaten|breitengrad|laengengrad|localizacao",
            "en", "es", "fr", "de", "pt",
        ),
    ),
    type_constraint=types("number", "string", "object", "array"),
    value_validators=(value(is_coordinate),),
)

SPATIAL_PATTERNS = (COLOR, COORDINATES)

"""Identity patterns: email, phone, UUID, name, address, URL."""

from ..models import SemanticCategory, SemanticPattern
from ..validators import (
    is_address_like,
    is_email,
    is_name_like,
    is_phone,
    is_url,
    is_uuid,
)
from .base import SPECIFIC_VALUE_WEIGHT, fmt, names, types, value

EMAIL = SemanticPattern(
    category=SemanticCategory.EMAIL,
    name_patterns=(
        names(r"email|emails|e mail|mail|email address|correo|courriel|adresse mail", "en", "es", "fr"),
    ),
    type_constraint=types("string"),
    value_validators=(value(is_email, SPECIFIC_VALUE_WEIGHT),),
    format_hints=(fmt("email"),),
)

PHONE = SemanticPattern(
    category=SemanticCategory.PHONE,
    name_patterns=(
        names(
            r"phone|phones|tel|telephone|mobile|cell|cellphone|fax|phone number|"
            r"telefono|telefon|handy|celular|telephone portable",
            "en", "es", "de", "fr",
        ),
    ),
    type_constraint=types("string"),
    value_validators=(value(is_phone),),
    format_hints=(fmt("phone"),),
)

UUID = SemanticPattern(
    category=SemanticCategory.UUID,
    name_patterns=(
        names(r"uuid|guid|unique id"),
        names(
            r"identificador unico|identifiant unique|eindeutige id|eindeutige kennung|identificador universal",
            "es", "fr", "de", "pt",
        ),
        # a bare "id" leans on value validation
        names(r"id", weight=0.2),
    ),
    type_constraint=types("string", required=True),
    value_validators=(value(is_uuid, SPECIFIC_VALUE_WEIGHT),),
    format_hints=(fmt("uuid", 0.1),),
)

NAME = SemanticPattern(
    category=SemanticCategory.NAME,
    name_patterns=(
        names(
            r"name|fullname|full name|username|user name|display name|first name|last name|"
            r"firstname|lastname|nickname|nombre|apellido|nom|prenom|vorname|nachname",
            "en", "es", "fr", "de",
        ),
    ),
    type_constraint=types("string"),
    value_validators=(value(is_name_like),),
)

ADDRESS = SemanticPattern(
    category=SemanticCategory.ADDRESS,
    name_patterns=(
        names(
            r"address|addr|street|street address|city|zip|zip code|zipcode|postal|postal code|postcode|"
            r"location|direccion|calle|ciudad|adresse|rue|ville|strasse|stadt|anschrift",
            "en", "es", "fr", "de",
        ),
    ),
    type_constraint=types("string"),
    value_validators=(value(is_address_like),),
)

URL = SemanticPattern(
    category=SemanticCategory.URL,
    name_patterns=(
        names(r"url|uri|link|links|href|website|webpage|homepage|permalink|enlace|lien", "en", "es", "fr"),
    ),
    type_constraint=types("string"),
    value_validators=(value(is_url, SPECIFIC_VALUE_WEIGHT),),
    format_hints=(fmt("uri", 0.1), fmt("url", 0.1)),
)

IDENTITY_PATTERNS = (EMAIL, PHONE, UUID, NAME, ADDRESS, URL)

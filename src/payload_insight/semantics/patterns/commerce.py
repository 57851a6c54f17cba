"""Commerce patterns: price, currency code, SKU, count, percentage."""

from ..models import SemanticCategory, SemanticPattern
from ..validators import (
    is_iso_currency_code,
    is_non_negative_integer,
    is_percentage,
    is_positive_amount,
    is_product_code,
)
from .base import SPECIFIC_VALUE_WEIGHT, fmt, names, types, value

PRICE = SemanticPattern(
    category=SemanticCategory.PRICE,
    name_patterns=(
        names(
            r"price|cost|amount|fee|subtotal|msrp|"
            r"precio|costo|importe|prix|cout|montant|preis|kosten|betrag|preco",
            "en", "es", "fr", "de", "pt",
        ),
        # "order_total" but not "total_count" or "total_pages"
        names(r"total$"),
    ),
    # 19.99 or "$19.99"
    type_constraint=types("number", "string"),
    value_validators=(value(is_positive_amount),),
    format_hints=(fmt("currency"), fmt("decimal", 0.1)),
)

CURRENCY_CODE = SemanticPattern(
    category=SemanticCategory.CURRENCY_CODE,
    name_patterns=(
        names(r"currency|curr|currency code|moneda|divisa|devise|wahrung|waehrung", "en", "es", "fr", "de"),
    ),
    type_constraint=types("string", required=True),
    value_validators=(value(is_iso_currency_code, SPECIFIC_VALUE_WEIGHT),),
    format_hints=(fmt("currency", 0.1),),
)

SKU = SemanticPattern(
    category=SemanticCategory.SKU,
    name_patterns=(
        names(r"sku|product code|item code|article|upc|ean|gtin|mpn|part number|part no"),
        names(
            r"codigo de producto|codigo producto|codigo articulo|referencia|"
            r"reference produit|ref produit|artikelnummer|artikelnr|codigo do produto",
            "es", "fr", "de", "pt",
        ),
    ),
    type_constraint=types("string"),
    value_validators=(value(is_product_code),),
)

COUNT = SemanticPattern(
    category=SemanticCategory.COUNT,
    name_patterns=(
        names(
            r"count|counts|quantity|qty|stock|inventory|num|number of|total count|"
            r"cantidad|anzahl|menge|quantite|nombre de",
            "en", "es", "de", "fr",
        ),
    ),
    type_constraint=types("number", required=True),
    value_validators=(value(is_non_negative_integer),),
    format_hints=(fmt("int32", 0.1), fmt("int64", 0.1)),
)

PERCENTAGE = SemanticPattern(
    category=SemanticCategory.PERCENTAGE,
    name_patterns=(
        names(
            r"percent|percentage|pct|ratio|share|progress|completion|"
            r"porcentaje|pourcentage|prozent|anteil|porcentagem",
            "en", "es", "fr", "de", "pt",
        ),
    ),
    type_constraint=types("number", "string"),
    value_validators=(value(is_percentage),),
    format_hints=(fmt("percent"),),
)

COMMERCE_PATTERNS = (PRICE, CURRENCY_CODE, SKU, COUNT, PERCENTAGE)

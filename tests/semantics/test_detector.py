"""Tests for SemanticDetector ranking and metadata."""

import re

import pytest

from payload_insight.schema import PrimitiveType
from payload_insight.semantics import (
    AppliedAt,
    ConfidenceLevel,
    PatternRegistry,
    SemanticCategory,
    SemanticDetector,
    SemanticMetadata,
    SemanticPattern,
    detect_semantics,
    get_best_match,
)
from payload_insight.semantics.models import NamePattern, TypeConstraint


def make_pattern(category: SemanticCategory, name_weight: float) -> SemanticPattern:
    """Pattern matching the field name 'flag' with a string type signal of 0.2."""
    return SemanticPattern(
        category=category,
        name_patterns=(NamePattern(re.compile(r"\bflag\b"), name_weight),),
        type_constraint=TypeConstraint(frozenset({"string"}), 0.2),
    )


def best_category(field_name, primitive_type, samples, format_hint=None):
    """Helper returning the winning category value, or None."""
    best = get_best_match(detect_semantics("$." + field_name, field_name, primitive_type, samples, format_hint))
    return best.category.value if best else None


class TestDefaultCatalogue:
    """Representative fields land in the expected category."""

    def test_price(self):
        detector = SemanticDetector()
        results = detector.detect("$[].price", "price", "number", [19.99, 24.5, 9.99])
        assert results[0].category is SemanticCategory.PRICE
        assert results[0].level in (ConfidenceLevel.HIGH, ConfidenceLevel.MEDIUM)

    def test_accepts_primitive_type_enum(self):
        results = detect_semantics("$.price", "price", PrimitiveType.NUMBER, [19.99])
        assert results[0].category is SemanticCategory.PRICE

    @pytest.mark.parametrize(
        "field_name,primitive_type,samples,expected",
        [
            ("email", "string", ["ada@example.com"], "email"),
            ("phone", "string", ["+1 555-123-4567"], "phone"),
            ("id", "string", ["123e4567-e89b-12d3-a456-426614174000"], "uuid"),
            ("currency", "string", ["USD"], "currency_code"),
            ("sku", "string", ["AB-1234"], "sku"),
            ("stock", "number", [12, 0], "count"),
            ("color", "string", ["#ff0000"], "color"),
            ("lat", "number", [48.85], "coordinates"),
            ("status", "string", ["active"], "status"),
            ("rating", "number", [4.5], "rating"),
            ("title", "string", ["Mechanical Keyboard"], "title"),
            ("name", "string", ["Ada Lovelace"], "name"),
            ("bio", "string", ["Mathematician and writer, known for her notes."], "description"),
            ("birthday", "date", ["1990-05-01"], "date"),
            ("created_at", "date", ["2024-01-15T09:30:00Z"], "timestamp"),
            ("image", "string", ["https://cdn.example.com/a.jpg"], "image"),
            ("tags", "array", [["python", "json"]], "tags"),
        ],
    )
    def test_categories(self, field_name, primitive_type, samples, expected):
        assert best_category(field_name, primitive_type, samples) == expected

    def test_generic_field_has_no_category(self):
        assert detect_semantics("$.foo", "foo", "string", ["bar"]) == []

    def test_numeric_id_has_no_category(self):
        assert best_category("id", "number", [1, 2, 3]) is None

    def test_required_type_excludes_category(self):
        results = detect_semantics("$.currency", "currency", "number", [1])
        assert SemanticCategory.CURRENCY_CODE not in {r.category for r in results}

    @pytest.mark.parametrize(
        "field_name,primitive_type,samples,expected",
        [
            ("codigo_producto", "string", ["AB-1234"], "sku"),
            ("referencia", "string", ["AB-1234"], "sku"),
            ("artikelnummer", "string", ["AB-1234"], "sku"),
            ("identificador_unico", "string", ["123e4567-e89b-12d3-a456-426614174000"], "uuid"),
        ],
    )
    def test_non_english_names(self, field_name, primitive_type, samples, expected):
        assert best_category(field_name, primitive_type, samples) == expected


class TestCompoundNames:
    """Modifier words inside a compound name do not decide the category."""

    @pytest.mark.parametrize("field_name", ["total_count", "totalCount", "TotalCount"])
    def test_total_count_is_a_count(self, field_name):
        results = detect_semantics("$." + field_name, field_name, "number", [120, 35])
        assert results[0].category is SemanticCategory.COUNT
        assert results[0].level is ConfidenceLevel.HIGH
        assert SemanticCategory.PRICE not in {r.category for r in results}

    @pytest.mark.parametrize("field_name", ["total", "order_total", "grandTotal"])
    def test_trailing_total_is_a_price(self, field_name):
        assert best_category(field_name, "number", [129.99]) == "price"

    @pytest.mark.parametrize("field_name", ["exchange_rate", "taxRate", "rate_limit"])
    def test_rate_compounds_are_not_ratings(self, field_name):
        results = detect_semantics("$." + field_name, field_name, "number", [1.08])
        assert SemanticCategory.RATING not in {r.category for r in results}

    def test_lone_rate_is_a_rating(self):
        assert best_category("rate", "number", [4.5]) == "rating"


class TestRanking:
    def test_sorted_descending(self):
        results = detect_semantics("$.avatar_url", "avatar_url", "string", ["https://cdn.example.com/a.png"])
        scores = [r.confidence for r in results]
        assert scores == sorted(scores, reverse=True)

    def test_only_medium_and_high_retained(self):
        results = detect_semantics("$.avatar_url", "avatar_url", "string", ["https://cdn.example.com/a.png"])
        assert results
        assert all(r.level in (ConfidenceLevel.HIGH, ConfidenceLevel.MEDIUM) for r in results)

    def test_specific_category_wins_tie(self):
        """avatar and url score the same; the earlier-registered avatar wins."""
        results = detect_semantics("$.avatar_url", "avatar_url", "string", ["https://cdn.example.com/a.png"])
        assert results[0].category is SemanticCategory.AVATAR
        assert results[1].category is SemanticCategory.URL
        assert results[0].confidence == results[1].confidence

    def test_tie_follows_registration_order(self):
        first = make_pattern(SemanticCategory.TITLE, 0.4)
        second = make_pattern(SemanticCategory.NAME, 0.4)

        forward = SemanticDetector(PatternRegistry((first, second))).detect("$.flag", "flag", "string", [])
        reverse = SemanticDetector(PatternRegistry((second, first))).detect("$.flag", "flag", "string", [])

        assert [r.category for r in forward] == [SemanticCategory.TITLE, SemanticCategory.NAME]
        assert [r.category for r in reverse] == [SemanticCategory.NAME, SemanticCategory.TITLE]


class TestThresholdBoundary:
    def test_score_exactly_at_medium_is_retained(self):
        registry = PatternRegistry((make_pattern(SemanticCategory.STATUS, 0.3),))
        results = SemanticDetector(registry).detect("$.flag", "flag", "string", [])
        assert len(results) == 1
        assert results[0].confidence == 0.5
        assert results[0].level is ConfidenceLevel.MEDIUM

    def test_score_just_below_medium_is_excluded(self):
        registry = PatternRegistry((make_pattern(SemanticCategory.STATUS, 0.29),))
        assert SemanticDetector(registry).detect("$.flag", "flag", "string", []) == []

    def test_category_threshold_override(self):
        registry = PatternRegistry((make_pattern(SemanticCategory.STATUS, 0.3),))
        strict = registry.with_thresholds({"status": (0.9, 0.6)})
        assert SemanticDetector(strict).detect("$.flag", "flag", "string", []) == []


class TestMetadata:
    def test_detected_record(self):
        detector = SemanticDetector()
        results = detector.detect("$.avatar_url", "avatar_url", "string", ["https://cdn.example.com/a.png"])
        metadata = detector.to_metadata(results)

        assert metadata.detected_category is SemanticCategory.AVATAR
        assert metadata.applied_at is AppliedAt.SMART_DEFAULT
        assert metadata.level is ConfidenceLevel.HIGH
        assert metadata.confidence == results[0].confidence
        assert [a.category for a in metadata.alternatives] == [r.category for r in results[1:3]]

    def test_at_most_two_alternatives(self):
        detector = SemanticDetector()
        results = detector.detect("$.avatar_url", "avatar_url", "string", ["https://cdn.example.com/a.png"])
        assert len(results) > 3
        assert len(detector.to_metadata(results).alternatives) == 2

    def test_alternative_count_is_configurable(self):
        detector = SemanticDetector(max_alternatives=1)
        results = detector.detect("$.avatar_url", "avatar_url", "string", ["https://cdn.example.com/a.png"])
        assert len(detector.to_metadata(results).alternatives) == 1

    def test_no_match_record(self):
        metadata = SemanticDetector().to_metadata([])
        assert metadata == SemanticMetadata.none()
        assert metadata.detected_category is None
        assert metadata.confidence == 0.0
        assert metadata.level is ConfidenceLevel.NONE
        assert metadata.applied_at is AppliedAt.TYPE_BASED
        assert metadata.alternatives == ()


class TestCompositeDetection:
    def test_reviews_array(self):
        result = SemanticDetector().detect_composite(
            "$.reviews",
            "reviews",
            {"rating": PrimitiveType.NUMBER, "comment": PrimitiveType.STRING},
            [{"rating": 5, "comment": "Great"}],
        )
        assert result is not None
        assert result.category is SemanticCategory.REVIEWS

    def test_unrelated_array(self):
        result = SemanticDetector().detect_composite(
            "$.images", "images", {"url": "string", "alt": "string"}, [{"url": "x", "alt": "y"}]
        )
        assert result is None

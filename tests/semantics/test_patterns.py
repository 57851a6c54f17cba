"""Tests for the pattern catalogue and PatternRegistry."""

import pytest

from payload_insight.exceptions import ThresholdOrderError
from payload_insight.semantics import DEFAULT_REGISTRY, PatternRegistry, SemanticCategory, Thresholds
from payload_insight.semantics.patterns import ALL_PATTERNS, COMPOSITE_PATTERNS


class TestCatalogue:
    def test_every_category_has_a_pattern(self):
        assert set(DEFAULT_REGISTRY.categories()) == set(SemanticCategory)

    def test_composites_are_separate(self):
        assert [p.category for p in DEFAULT_REGISTRY.composites] == [SemanticCategory.REVIEWS]
        assert SemanticCategory.REVIEWS not in {p.category for p in DEFAULT_REGISTRY}

    def test_specific_media_before_url(self):
        order = DEFAULT_REGISTRY.categories()
        for specific in (SemanticCategory.AVATAR, SemanticCategory.IMAGE, SemanticCategory.VIDEO):
            assert order.index(specific) < order.index(SemanticCategory.URL)

    def test_patterns_carry_default_thresholds(self):
        for pattern in DEFAULT_REGISTRY:
            assert pattern.thresholds == Thresholds(high=0.75, medium=0.5)

    def test_name_patterns_are_word_bounded(self):
        price = DEFAULT_REGISTRY.get("price")
        assert not any(p.regex.search("priceless") for p in price.name_patterns)

    def test_every_category_names_other_languages(self):
        for pattern in (*DEFAULT_REGISTRY, *DEFAULT_REGISTRY.composites):
            languages = {lang for p in pattern.name_patterns for lang in p.languages}
            assert languages - {"en"}, pattern.category


class TestPatternRegistry:
    def test_len_and_iteration(self):
        assert len(DEFAULT_REGISTRY) == len(ALL_PATTERNS)
        assert list(DEFAULT_REGISTRY) == list(ALL_PATTERNS)

    def test_get_by_value_or_enum(self):
        assert DEFAULT_REGISTRY.get("email") is DEFAULT_REGISTRY.get(SemanticCategory.EMAIL)
        assert DEFAULT_REGISTRY.get("reviews") is COMPOSITE_PATTERNS[0]

    def test_get_unknown_value_raises(self):
        with pytest.raises(ValueError):
            DEFAULT_REGISTRY.get("not-a-category")

    def test_duplicate_category_rejected(self):
        price = DEFAULT_REGISTRY.get("price")
        with pytest.raises(ValueError, match="Duplicate"):
            PatternRegistry((price, price))

    def test_with_thresholds_returns_new_registry(self):
        strict = DEFAULT_REGISTRY.with_thresholds({"price": (0.95, 0.9)})

        assert strict.get("price").thresholds == Thresholds(high=0.95, medium=0.9)
        assert DEFAULT_REGISTRY.get("price").thresholds == Thresholds()
        assert strict.categories() == DEFAULT_REGISTRY.categories()

    def test_with_thresholds_accepts_thresholds_objects(self):
        strict = DEFAULT_REGISTRY.with_thresholds({SemanticCategory.REVIEWS: Thresholds(0.9, 0.8)})
        assert strict.get("reviews").thresholds.medium == 0.8

    def test_with_thresholds_rejects_inverted_pair(self):
        with pytest.raises(ThresholdOrderError):
            DEFAULT_REGISTRY.with_thresholds({"price": (0.4, 0.6)})

    def test_with_thresholds_rejects_unknown_category(self):
        with pytest.raises(ValueError):
            DEFAULT_REGISTRY.with_thresholds({"bogus": (0.9, 0.6)})

"""Tests for field importance scoring."""

import pytest

from payload_insight.analysis import (
    FieldInfo,
    ImportanceTier,
    analyze_fields,
    calculate_importance,
    is_metadata_field,
)
from payload_insight.analysis.importance import (
    score_data_presence,
    score_name_pattern,
    score_position,
    score_visual_richness,
)
from payload_insight.config import ImportanceConfig
from payload_insight.semantics import SemanticCategory


def make_field(
    name,
    category=None,
    samples=("value",),
    position=0,
    total=1,
):
    """Helper to create a FieldInfo under the root object."""
    return FieldInfo(
        path=f"$.{name}",
        name=name,
        semantic_category=category,
        sample_values=tuple(samples),
        position=position,
        total_fields=total,
    )


class TestSignals:
    def test_name_pattern_is_binary(self):
        config = ImportanceConfig()
        assert score_name_pattern("display_name", config) == 1.0
        assert score_name_pattern("heroImage", config) == 1.0
        assert score_name_pattern("price", config) == 0.0

    @pytest.mark.parametrize(
        "name", ["avatar_url", "coverImage", "cover_photo", "COMPANY_LOGO", "images", "imgSrc"]
    )
    def test_image_words_are_primary_indicators(self, name):
        assert score_name_pattern(name, ImportanceConfig()) == 1.0

    @pytest.mark.parametrize(
        "name", ["discovery_date", "recovery_email", "photographer", "imgur_id", "logoff"]
    )
    def test_image_words_inside_other_words_do_not_match(self, name):
        assert score_name_pattern(name, ImportanceConfig()) == 0.0

    @pytest.mark.parametrize(
        "category,expected",
        [
            (SemanticCategory.IMAGE, 1.0),
            (SemanticCategory.AVATAR, 1.0),
            (SemanticCategory.VIDEO, 1.0),
            (SemanticCategory.TITLE, 0.6),
            (SemanticCategory.DESCRIPTION, 0.6),
            (SemanticCategory.UUID, 0.2),
            (SemanticCategory.TIMESTAMP, 0.2),
            (SemanticCategory.PRICE, 0.4),
            (None, 0.4),
        ],
    )
    def test_visual_richness(self, category, expected):
        assert score_visual_richness(category) == expected

    def test_data_presence(self):
        assert score_data_presence([]) == 0.0
        assert score_data_presence(["a", "b"]) == 1.0
        assert score_data_presence(["", None, "x", 0]) == 0.5

    def test_position_first_and_lone_fields(self):
        assert score_position(0, 5) == 1.0
        assert score_position(0, 1) == 1.0
        assert score_position(3, 1) == 1.0

    def test_position_decays(self):
        scores = [score_position(i, 10) for i in range(10)]
        assert scores == sorted(scores, reverse=True)
        assert score_position(5, 10) == pytest.approx(0.6109, abs=1e-4)

    def test_position_floor(self):
        assert score_position(50, 5) == 0.2


class TestCalculateImportance:
    def test_weights_are_conserved(self):
        """Signal weights always sum to one, so the score stays in [0, 1]."""
        score = calculate_importance(make_field("hero_image", SemanticCategory.IMAGE))
        assert sum(s.weight for s in score.signals) == pytest.approx(1.0)
        assert score.score == pytest.approx(sum(s.contribution for s in score.signals))
        assert 0.0 <= score.score <= 1.0

    def test_signal_names(self):
        score = calculate_importance(make_field("title"))
        assert [s.name for s in score.signals] == [
            "name_pattern",
            "visual_richness",
            "data_presence",
            "position",
        ]

    def test_primary_field(self):
        field = make_field(
            "avatar_url", SemanticCategory.AVATAR, samples=["a", "b", "c"], position=2, total=5
        )
        score = calculate_importance(field)
        assert score.tier is ImportanceTier.PRIMARY
        assert score.score == pytest.approx(0.9476, abs=1e-3)

    def test_secondary_field(self):
        score = calculate_importance(make_field("media", SemanticCategory.IMAGE))
        assert score.score == pytest.approx(0.6)
        assert score.tier is ImportanceTier.SECONDARY

    def test_tertiary_field(self):
        score = calculate_importance(make_field("price", SemanticCategory.PRICE, position=3, total=5))
        assert score.tier is ImportanceTier.TERTIARY

    def test_more_presence_never_lowers_score(self):
        samples = [
            [None, None, None, None],
            ["x", None, None, None],
            ["x", "y", None, ""],
            ["x", "y", "z", "w"],
        ]
        scores = [calculate_importance(make_field("body", samples=s)).score for s in samples]
        assert scores == sorted(scores)

    def test_custom_thresholds(self):
        config = ImportanceConfig(primary_threshold=0.5, secondary_threshold=0.3)
        score = calculate_importance(make_field("media", SemanticCategory.IMAGE), config)
        assert score.tier is ImportanceTier.PRIMARY


class TestMetadataOverride:
    @pytest.mark.parametrize(
        "name", ["id", "ID", "_links", "user_id", "userId", "created_at", "updatedAt", "deleted_on"]
    )
    def test_metadata_names(self, name):
        assert is_metadata_field(name, ImportanceConfig())

    @pytest.mark.parametrize("name", ["identity", "paid", "video_url", "name", "created", "createdBy"])
    def test_regular_names(self, name):
        assert not is_metadata_field(name, ImportanceConfig())

    def test_timestamp_field_is_tertiary(self):
        field = make_field(
            "created_at", SemanticCategory.TIMESTAMP, samples=["2024-01-15T09:30:00Z"]
        )
        score = calculate_importance(field)
        assert score.tier is ImportanceTier.TERTIARY
        assert score.metadata_override

    def test_override_beats_any_score(self):
        """A metadata name is tertiary even when its score clears primary."""
        config = ImportanceConfig(primary_indicators=(r"created",))
        field = make_field("created_at", SemanticCategory.IMAGE)
        score = calculate_importance(field, config)

        assert score.score >= config.primary_threshold
        assert score.tier is ImportanceTier.TERTIARY
        assert score.metadata_override

    def test_custom_metadata_patterns(self):
        config = ImportanceConfig(metadata_patterns=(r"^internal_",))
        assert is_metadata_field("internal_flag", config)
        assert not is_metadata_field("id", config)


class TestAnalyzeFields:
    def test_importance_keyed_by_path(self):
        fields = [
            make_field("title", SemanticCategory.TITLE, position=0, total=2),
            make_field("id", position=1, total=2),
        ]
        result = analyze_fields(fields)
        assert set(result.importance) == {"$.title", "$.id"}
        assert result.importance["$.id"].tier is ImportanceTier.TERTIARY
        assert result.grouping.groups == ()

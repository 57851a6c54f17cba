"""Tests for schema inference over sampled JSON."""

from payload_insight.schema import (
    ArraySignature,
    ObjectSignature,
    PrimitiveSignature,
    PrimitiveType,
    SchemaConfidence,
    SchemaInferrer,
    infer_schema,
)


def prim(primitive_type: PrimitiveType) -> PrimitiveSignature:
    """Helper to build a primitive signature."""
    return PrimitiveSignature(primitive_type)


class TestUnifiedSchema:
    """Top-level schema metadata."""

    def test_records_url_and_timestamp(self):
        schema = infer_schema({"a": 1}, url="https://api.example.com/x", now=1700000000000)
        assert schema.url == "https://api.example.com/x"
        assert schema.inferred_at == 1700000000000

    def test_sample_count_for_object_is_one(self):
        assert infer_schema({"a": 1}).sample_count == 1

    def test_sample_count_capped_for_arrays(self):
        data = [{"n": i} for i in range(25)]
        assert infer_schema(data).sample_count == 10
        assert infer_schema(data, sample_cap=3).sample_count == 3

    def test_sample_count_for_short_array(self):
        assert infer_schema([1, 2]).sample_count == 2

    def test_timestamp_defaults_to_now(self):
        schema = infer_schema({})
        assert schema.inferred_at > 1_600_000_000_000


class TestPrimitivesAndArrays:
    """Leaves, arrays and mixed shapes."""

    def test_primitive_root(self):
        assert infer_schema("hello").root_type == prim(PrimitiveType.STRING)

    def test_empty_array_has_unknown_items(self):
        assert infer_schema([]).root_type == ArraySignature(prim(PrimitiveType.UNKNOWN))

    def test_array_of_numbers(self):
        assert infer_schema([1, 2.5, 3]).root_type == ArraySignature(prim(PrimitiveType.NUMBER))

    def test_mixed_primitive_array_collapses_to_unknown(self):
        root = infer_schema([1, "two", True]).root_type
        assert root == ArraySignature(prim(PrimitiveType.UNKNOWN))

    def test_mixed_shapes_collapse_to_unknown(self):
        """Objects, arrays and primitives in one array cannot be merged."""
        root = infer_schema([{"a": 1}, [1], 3]).root_type
        assert root == ArraySignature(prim(PrimitiveType.UNKNOWN))

    def test_dates_mixed_with_strings_are_strings(self):
        root = infer_schema(["2024-01-01", "soon"]).root_type
        assert root == ArraySignature(prim(PrimitiveType.STRING))

    def test_all_null_array(self):
        assert infer_schema([None, None]).root_type == ArraySignature(prim(PrimitiveType.NULL))

    def test_nested_arrays_recurse(self):
        root = infer_schema([[1, 2], [3]]).root_type
        assert root == ArraySignature(ArraySignature(prim(PrimitiveType.NUMBER)))


class TestObjectMerging:
    """Field-wise merging of sampled array elements."""

    def test_field_order_follows_first_appearance(self):
        root = infer_schema([{"b": 1, "a": 2}, {"c": 3, "a": 4}]).root_type
        assert list(root.items.fields) == ["b", "a", "c"]

    def test_consistent_field_is_high_confidence(self):
        root = infer_schema([{"price": 1.5}, {"price": 2.0}]).root_type
        price = root.items.fields["price"]
        assert price.type == prim(PrimitiveType.NUMBER)
        assert not price.optional
        assert not price.nullable
        assert price.confidence is SchemaConfidence.HIGH

    def test_missing_key_is_optional_medium(self):
        root = infer_schema([{"a": 1, "b": "x"}, {"a": 2}]).root_type
        b = root.items.fields["b"]
        assert b.optional
        assert b.type == prim(PrimitiveType.STRING)
        assert b.confidence is SchemaConfidence.MEDIUM

    def test_null_is_nullable_without_changing_type(self):
        root = infer_schema([{"bio": "text"}, {"bio": None}]).root_type
        bio = root.items.fields["bio"]
        assert bio.nullable
        assert not bio.optional
        assert bio.type == prim(PrimitiveType.STRING)
        assert bio.confidence is SchemaConfidence.MEDIUM

    def test_disagreeing_types_are_low_confidence_unknown(self):
        root = infer_schema([{"v": 1}, {"v": "one"}]).root_type
        v = root.items.fields["v"]
        assert v.type == prim(PrimitiveType.UNKNOWN)
        assert v.confidence is SchemaConfidence.LOW

    def test_sample_values_are_retained_and_bounded(self):
        data = [{"n": i} for i in range(20)]
        n = infer_schema(data, sample_cap=5).root_type.items.fields["n"]
        assert n.sample_values == (0, 1, 2, 3, 4)

    def test_only_sampled_elements_contribute(self):
        """A key appearing only beyond the sample cap is not seen."""
        data = [{"a": 1}] * 3 + [{"a": 1, "late": True}]
        root = infer_schema(data, sample_cap=3).root_type
        assert "late" not in root.items.fields

    def test_nested_objects(self):
        root = infer_schema({"user": {"address": {"city": "Paris"}}}).root_type
        city = root.fields["user"].type.fields["address"].type.fields["city"]
        assert city.type == prim(PrimitiveType.STRING)

    def test_empty_object(self):
        assert infer_schema({}).root_type == ObjectSignature({})


class TestDepthBound:
    """Nesting beyond max_depth degrades to unknown instead of recursing."""

    def test_deep_nesting_becomes_unknown(self):
        data: dict = {}
        node = data
        for _ in range(10):
            node["child"] = {}
            node = node["child"]
        root = SchemaInferrer(max_depth=3).infer_signature(data)

        depth = 0
        sig = root
        while isinstance(sig, ObjectSignature) and "child" in sig.fields:
            sig = sig.fields["child"].type
            depth += 1
        assert depth <= 4
        assert sig == prim(PrimitiveType.UNKNOWN)

    def test_never_raises_on_odd_values(self):
        schema = infer_schema({"a": object(), "b": {1, 2}})
        assert schema.root_type.fields["a"].type == prim(PrimitiveType.UNKNOWN)

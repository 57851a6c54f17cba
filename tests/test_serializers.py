"""Tests for JSON rendering of analysis results."""

import json

from payload_insight import analyze_api_response
from payload_insight.semantics import SemanticMetadata
from payload_insight.serializers import result_to_dict, semantics_to_dict, signature_to_dict


class TestResultToDict:
    def test_json_serializable(self, product_response):
        payload = result_to_dict(analyze_api_response(product_response, now=1))
        decoded = json.loads(json.dumps(payload))
        assert decoded["schema"]["inferred_at"] == 1
        assert decoded["schema"]["root_type"]["kind"] == "object"

    def test_grouping_lists_paths(self, product_response):
        payload = result_to_dict(analyze_api_response(product_response, now=1))
        groups = payload["paths"]["$"]["grouping"]["groups"]
        assert groups == [
            {
                "kind": "semantic",
                "label": "Pricing",
                "categories": ["price", "currency_code", "count"],
                "fields": ["$.price", "$.currency"],
            }
        ]

    def test_primitive_array_has_null_grouping(self, product_response):
        payload = result_to_dict(analyze_api_response(product_response, now=1))
        assert payload["paths"]["$.tags"]["grouping"] is None
        assert payload["paths"]["$.tags"]["importance"] == {}


class TestPieces:
    def test_no_match_record(self):
        assert semantics_to_dict(SemanticMetadata.none()) == {
            "category": None,
            "confidence": 0.0,
            "level": "none",
            "applied_at": "type-based",
            "alternatives": [],
        }

    def test_signature_tree(self):
        from payload_insight import infer_schema

        tree = signature_to_dict(infer_schema({"tags": ["a"]}).root_type)
        tags = tree["fields"]["tags"]
        assert tags["type"] == {"kind": "array", "items": {"kind": "primitive", "type": "string"}}
        assert tags["optional"] is False
        assert tags["confidence"] == "high"

"""JSON-ready rendering of schemas and analysis results.

Enums become their values, tuples become lists, and float scores are
rounded for display. The output is plain dicts and lists, suitable for
``json.dumps``.
"""

from __future__ import annotations

from typing import Any, Optional

from .analysis.models import (
    GroupingResult,
    ImportanceScore,
    PrefixGroup,
)
from .orchestrator import ApiAnalysisResult, PathAnalysis
from .schema.models import (
    ArraySignature,
    FieldDefinition,
    ObjectSignature,
    TypeSignature,
    UnifiedSchema,
)
from .semantics.models import ConfidenceResult, SemanticMetadata

SCORE_DIGITS = 4


def signature_to_dict(signature: TypeSignature) -> dict[str, Any]:
    if isinstance(signature, ObjectSignature):
        return {
            "kind": "object",
            "fields": {name: field_to_dict(d) for name, d in signature.fields.items()},
        }
    if isinstance(signature, ArraySignature):
        return {"kind": "array", "items": signature_to_dict(signature.items)}
    return {"kind": "primitive", "type": signature.type.value}


def field_to_dict(definition: FieldDefinition) -> dict[str, Any]:
    return {
        "type": signature_to_dict(definition.type),
        "optional": definition.optional,
        "nullable": definition.nullable,
        "confidence": definition.confidence.value,
    }


def schema_to_dict(schema: UnifiedSchema) -> dict[str, Any]:
    return {
        "url": schema.url,
        "sample_count": schema.sample_count,
        "inferred_at": schema.inferred_at,
        "root_type": signature_to_dict(schema.root_type),
    }


def semantics_to_dict(metadata: SemanticMetadata) -> dict[str, Any]:
    category = metadata.detected_category
    return {
        "category": category.value if category is not None else None,
        "confidence": round(metadata.confidence, SCORE_DIGITS),
        "level": metadata.level.value,
        "applied_at": metadata.applied_at.value,
        "alternatives": [
            {"category": alt.category.value, "confidence": round(alt.confidence, SCORE_DIGITS)}
            for alt in metadata.alternatives
        ],
    }


def confidence_to_dict(result: ConfidenceResult) -> dict[str, Any]:
    """Detector output with its signal breakdown, for the ``detect`` command."""
    return {
        "category": result.category.value,
        "confidence": round(result.confidence, SCORE_DIGITS),
        "level": result.level.value,
        "signals": [
            {
                "name": s.name,
                "matched": s.matched,
                "weight": s.weight,
                "contribution": round(s.contribution, SCORE_DIGITS),
            }
            for s in result.signals
        ],
    }


def importance_to_dict(score: ImportanceScore) -> dict[str, Any]:
    return {
        "tier": score.tier.value,
        "score": round(score.score, SCORE_DIGITS),
        "metadata_override": score.metadata_override,
        "signals": {
            s.name: {
                "raw": round(s.raw, SCORE_DIGITS),
                "weight": s.weight,
                "contribution": round(s.contribution, SCORE_DIGITS),
            }
            for s in score.signals
        },
    }


def grouping_to_dict(grouping: Optional[GroupingResult]) -> Optional[dict[str, Any]]:
    if grouping is None:
        return None
    groups = []
    for group in grouping.groups:
        entry: dict[str, Any] = {"kind": group.kind, "label": group.label}
        if isinstance(group, PrefixGroup):
            entry["prefix"] = group.prefix
        else:
            entry["categories"] = [c.value for c in group.categories]
        entry["fields"] = [f.path for f in group.fields]
        groups.append(entry)
    return {"groups": groups, "ungrouped": [f.path for f in grouping.ungrouped]}


def path_analysis_to_dict(analysis: PathAnalysis) -> dict[str, Any]:
    return {
        "semantics": {p: semantics_to_dict(m) for p, m in analysis.semantics.items()},
        "importance": {p: importance_to_dict(s) for p, s in analysis.importance.items()},
        "grouping": grouping_to_dict(analysis.grouping),
    }


def result_to_dict(result: ApiAnalysisResult) -> dict[str, Any]:
    return {
        "schema": schema_to_dict(result.schema),
        "paths": {path: path_analysis_to_dict(a) for path, a in result.paths.items()},
    }

"""Schema inference package.

Turns a decoded JSON document into a recursive type tree with per-field
optionality, nullability and cross-sample confidence.

Usage:
    from payload_insight.schema import infer_schema

    schema = infer_schema(response_json, url="https://api.example.com/users")
    schema.root_type.kind  # "array"
"""

from .inferrer import DEFAULT_MAX_DEPTH, DEFAULT_SAMPLE_CAP, SchemaInferrer, infer_schema
from .models import (
    UNKNOWN,
    ArraySignature,
    FieldDefinition,
    ObjectSignature,
    PrimitiveSignature,
    PrimitiveType,
    SchemaConfidence,
    TypeSignature,
    UnifiedSchema,
    type_name,
)
from .type_detection import detect_field_type

__all__ = [
    # Inference
    "SchemaInferrer",
    "infer_schema",
    "detect_field_type",
    "DEFAULT_SAMPLE_CAP",
    "DEFAULT_MAX_DEPTH",
    # Models
    "ArraySignature",
    "FieldDefinition",
    "ObjectSignature",
    "PrimitiveSignature",
    "PrimitiveType",
    "SchemaConfidence",
    "TypeSignature",
    "UnifiedSchema",
    "UNKNOWN",
    "type_name",
]

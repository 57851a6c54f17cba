"""Schema data models: the inferred type tree of a JSON document.

A TypeSignature is one of three frozen variants distinguished by ``kind``:
- PrimitiveSignature: a leaf value (string, number, boolean, null, date, unknown)
- ArraySignature: a homogeneous array with a single item signature
- ObjectSignature: an ordered mapping of field name to FieldDefinition

Signatures are immutable once inferred and owned by the UnifiedSchema
that produced them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class PrimitiveType(Enum):
    """Primitive field types detected from JSON values."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    DATE = "date"
    UNKNOWN = "unknown"


class SchemaConfidence(Enum):
    """How consistently a field held its type and presence across samples.

    HIGH   - every sampled element agreed on type and presence
    MEDIUM - types agreed, but the field was sometimes absent or null
    LOW    - non-null types disagreed; the type collapsed to unknown
    """

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class PrimitiveSignature:
    type: PrimitiveType
    kind: str = field(default="primitive", init=False)


@dataclass(frozen=True)
class ArraySignature:
    items: TypeSignature
    kind: str = field(default="array", init=False)


@dataclass(frozen=True)
class ObjectSignature:
    fields: dict[str, FieldDefinition]
    kind: str = field(default="object", init=False)


TypeSignature = Union[PrimitiveSignature, ArraySignature, ObjectSignature]

UNKNOWN = PrimitiveSignature(PrimitiveType.UNKNOWN)


@dataclass(frozen=True)
class FieldDefinition:
    """A single field of an inferred object.

    Attributes:
        name: Field key in the source object
        type: Inferred type signature (null observations excluded)
        optional: Key was absent from at least one sampled sibling
        nullable: Value was null in at least one sampled sibling
        confidence: Cross-sample consistency of type and presence
        sample_values: Raw values observed, bounded by the sample cap
    """

    name: str
    type: TypeSignature
    optional: bool = False
    nullable: bool = False
    confidence: SchemaConfidence = SchemaConfidence.HIGH
    sample_values: tuple[Any, ...] = ()


@dataclass(frozen=True)
class UnifiedSchema:
    """The complete inferred schema for one API response.

    Attributes:
        root_type: Type signature of the whole document
        url: Source URL the document was fetched from
        sample_count: Number of top-level items sampled (1 for non-arrays)
        inferred_at: Inference time in epoch milliseconds
    """

    root_type: TypeSignature
    url: str
    sample_count: int
    inferred_at: int


def type_name(signature: TypeSignature) -> str:
    """Flat type name used by the semantic detector.

    Primitives report their primitive type; containers report
    ``array`` or ``object``.
    """
    if isinstance(signature, PrimitiveSignature):
        return signature.type.value
    return signature.kind

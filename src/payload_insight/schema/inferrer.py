"""Schema inference over sampled JSON values.

Arrays are inferred from a bounded sample of their elements. Object
elements are merged key by key: a key missing from some sampled sibling
becomes optional, a null value marks the field nullable without changing
its type, and disagreeing types collapse to ``primitive:unknown`` with low
confidence. Inference never raises; the worst outcome is a coarse,
under-confident schema.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

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
)
from .type_detection import detect_field_type

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_CAP = 10
DEFAULT_MAX_DEPTH = 32


class SchemaInferrer:
    """Builds a UnifiedSchema from a decoded JSON document.

    Args:
        sample_cap: Maximum array elements (and per-field values) inspected
        max_depth: Nesting depth beyond which nodes become ``unknown``
    """

    def __init__(self, sample_cap: int = DEFAULT_SAMPLE_CAP, max_depth: int = DEFAULT_MAX_DEPTH):
        self.sample_cap = max(1, sample_cap)
        self.max_depth = max(1, max_depth)

    def infer(self, data: Any, url: str, now: Optional[int] = None) -> UnifiedSchema:
        root = self.infer_signature(data)
        sample_count = min(len(data), self.sample_cap) if isinstance(data, list) else 1
        inferred_at = now if now is not None else int(time.time() * 1000)
        logger.debug(f"Inferred {root.kind} schema for {url or '<unknown url>'} from {sample_count} samples")
        return UnifiedSchema(
            root_type=root,
            url=url,
            sample_count=sample_count,
            inferred_at=inferred_at,
        )

    def infer_signature(self, value: Any, depth: int = 0) -> TypeSignature:
        """Infer the signature of a single value."""
        signature, _ = self._merge([value], depth)
        return signature

    # ------------------------------------------------------------------
    # Merging
    # ------------------------------------------------------------------

    def _merge(self, values: list[Any], depth: int) -> tuple[TypeSignature, bool]:
        """Merge observations of one location into a signature.

        Returns the signature and whether the non-null observations agreed
        on their shape and primitive type.
        """
        if depth > self.max_depth:
            return UNKNOWN, False

        observed = [v for v in values if v is not None]
        if not values:
            return UNKNOWN, True
        if not observed:
            return PrimitiveSignature(PrimitiveType.NULL), True

        shapes = {_shape(v) for v in observed}
        if len(shapes) > 1:
            return UNKNOWN, False

        shape = shapes.pop()
        if shape == "object":
            return self._merge_objects(observed, depth + 1), True
        if shape == "array":
            elements: list[Any] = []
            for array in observed:
                elements.extend(array[: self.sample_cap])
                if len(elements) >= self.sample_cap:
                    break
            items, agreed = self._merge(elements[: self.sample_cap], depth + 1)
            return ArraySignature(items), agreed

        return _merge_primitives(observed)

    def _merge_objects(self, objects: list[dict], depth: int) -> ObjectSignature:
        sampled = objects[: self.sample_cap]
        keys: dict[str, None] = {}
        for obj in sampled:
            for key in obj:
                keys.setdefault(key, None)

        fields: dict[str, FieldDefinition] = {}
        for key in keys:
            present = [obj[key] for obj in sampled if key in obj]
            optional = len(present) < len(sampled)
            nullable = any(v is None for v in present)
            signature, agreed = self._merge(present, depth)

            if not agreed:
                confidence = SchemaConfidence.LOW
            elif optional or nullable:
                confidence = SchemaConfidence.MEDIUM
            else:
                confidence = SchemaConfidence.HIGH

            fields[key] = FieldDefinition(
                name=key,
                type=signature,
                optional=optional,
                nullable=nullable,
                confidence=confidence,
                sample_values=tuple(present[: self.sample_cap]),
            )
        return ObjectSignature(fields)


def _shape(value: Any) -> str:
    if isinstance(value, dict):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return "primitive"


def _merge_primitives(values: list[Any]) -> tuple[TypeSignature, bool]:
    types = {detect_field_type(v) for v in values}
    if len(types) == 1:
        return PrimitiveSignature(types.pop()), True
    # Dates are strings with a recognizable format; a mix is still a string
    if types == {PrimitiveType.DATE, PrimitiveType.STRING}:
        return PrimitiveSignature(PrimitiveType.STRING), True
    return UNKNOWN, False


def infer_schema(
    data: Any,
    url: str = "",
    sample_cap: int = DEFAULT_SAMPLE_CAP,
    max_depth: int = DEFAULT_MAX_DEPTH,
    now: Optional[int] = None,
) -> UnifiedSchema:
    """Infer a UnifiedSchema from decoded JSON data.

    Args:
        data: Decoded JSON value (dict, list or primitive)
        url: Source URL, recorded on the schema
        sample_cap: Maximum array elements sampled per location
        max_depth: Nesting bound; deeper nodes become ``unknown``
        now: Override for the inference timestamp (epoch ms)

    Returns:
        UnifiedSchema describing ``data``
    """
    return SchemaInferrer(sample_cap=sample_cap, max_depth=max_depth).infer(data, url, now=now)

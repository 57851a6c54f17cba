"""Analysis orchestration over a whole API response.

Infers the schema, walks it alongside the live data, and runs semantic
detection, importance scoring and grouping for every analyzable path:

    object             each field analysed, samples from the single object
    array of objects   each item field analysed, samples from up to
                       ``sample_cap`` elements; the array itself is also
                       checked against composite patterns (e.g. reviews)
    array of primitives  the array is one pseudo-field, semantics only

Every key in the result is a canonical path (``[]``, never ``[N]``).

Example:
    >>> result = analyze_api_response([{"name": "Ada", "price": 9.5}], "https://api.example.com")
    >>> result.paths["$"].semantics["$[].price"].detected_category.value
    'price'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional

from .analysis import analyze_fields
from .analysis.models import FieldInfo, GroupingResult, ImportanceScore
from .config import AnalysisConfig
from .paths import ROOT, child_path, item_path, leaf_name, normalize_path
from .schema import SchemaInferrer, UnifiedSchema
from .schema.models import ArraySignature, ObjectSignature, PrimitiveSignature, TypeSignature, type_name
from .semantics.detector import SemanticDetector
from .semantics.models import SemanticMetadata

logger = logging.getLogger(__name__)


class PathKind(Enum):
    OBJECT = "object"
    ARRAY_OF_OBJECTS = "array-of-objects"
    PRIMITIVE_ARRAY = "primitive-array"


@dataclass(frozen=True)
class AnalyzablePath:
    """A schema location eligible for field-level analysis, with its live data."""

    path: str
    kind: PathKind
    signature: TypeSignature
    data: Any


@dataclass(frozen=True)
class PathAnalysis:
    """Per-path output, keyed by canonical field paths.

    ``grouping`` is None for arrays of primitives, which have no sibling
    fields to group; their ``importance`` map is empty.
    """

    semantics: dict[str, SemanticMetadata]
    importance: dict[str, ImportanceScore]
    grouping: Optional[GroupingResult]


@dataclass(frozen=True)
class ApiAnalysisResult:
    schema: UnifiedSchema
    paths: dict[str, PathAnalysis]


def find_analyzable_paths(
    signature: TypeSignature, data: Any, base_path: str = ROOT
) -> list[AnalyzablePath]:
    """Walk a type tree paired with matching data, parents before children.

    Arrays are walked through their first element only; a mismatch
    between schema and data simply yields ``None`` data below that point.
    """
    return list(_walk(signature, data, base_path))


def _walk(signature: TypeSignature, data: Any, path: str) -> Iterator[AnalyzablePath]:
    if isinstance(signature, ObjectSignature):
        yield AnalyzablePath(path, PathKind.OBJECT, signature, data)
        values = data if isinstance(data, dict) else {}
        for name, definition in signature.fields.items():
            yield from _walk(definition.type, values.get(name), child_path(path, name))

    elif isinstance(signature, ArraySignature):
        if isinstance(signature.items, ObjectSignature):
            yield AnalyzablePath(path, PathKind.ARRAY_OF_OBJECTS, signature, data)
        elif isinstance(signature.items, PrimitiveSignature):
            yield AnalyzablePath(path, PathKind.PRIMITIVE_ARRAY, signature, data)
        first = data[0] if isinstance(data, list) and data else None
        yield from _walk(signature.items, first, item_path(path))


class _PathAnalyzer:
    """Runs detection and analysis for one response under one config."""

    def __init__(self, config: AnalysisConfig):
        self.config = config
        self.detector: SemanticDetector = config.detector.build_detector()

    def analyze(self, node: AnalyzablePath) -> Optional[PathAnalysis]:
        if node.kind is PathKind.PRIMITIVE_ARRAY:
            return self._analyze_primitive_array(node)

        if node.kind is PathKind.ARRAY_OF_OBJECTS:
            item_sig = node.signature.items
            field_base = item_path(node.path)
            elements = node.data[: self.config.sample_cap] if isinstance(node.data, list) else []
            samples = {
                name: tuple(e[name] for e in elements if isinstance(e, dict) and name in e)
                for name in item_sig.fields
            }
        else:
            item_sig = node.signature
            field_base = node.path
            values = node.data if isinstance(node.data, dict) else {}
            samples = {
                name: (values[name],) if name in values else () for name in item_sig.fields
            }

        if not item_sig.fields:
            return None

        semantics: dict[str, SemanticMetadata] = {}
        infos: list[FieldInfo] = []
        total = len(item_sig.fields)
        for position, (name, definition) in enumerate(item_sig.fields.items()):
            path = child_path(field_base, name)
            results = self.detector.detect(path, name, type_name(definition.type), samples[name])
            metadata = self.detector.to_metadata(results)
            semantics[path] = metadata
            infos.append(
                FieldInfo(
                    path=path,
                    name=name,
                    semantic_category=metadata.detected_category,
                    sample_values=samples[name],
                    position=position,
                    total_fields=total,
                )
            )

        if node.kind is PathKind.ARRAY_OF_OBJECTS:
            composite = self.detector.detect_composite(
                node.path,
                leaf_name(node.path),
                {name: type_name(d.type) for name, d in item_sig.fields.items()},
                elements,
            )
            if composite is not None:
                semantics[node.path] = self.detector.to_metadata([composite])

        analysis = analyze_fields(infos, self.config)
        logger.debug("%s: %d fields, %d groups", node.path, total, len(analysis.grouping.groups))
        return PathAnalysis(
            semantics=semantics, importance=analysis.importance, grouping=analysis.grouping
        )

    def _analyze_primitive_array(self, node: AnalyzablePath) -> Optional[PathAnalysis]:
        elements = node.data[: self.config.sample_cap] if isinstance(node.data, list) else []
        if not elements:
            # an empty array has no element type to describe
            return None
        results = self.detector.detect(node.path, leaf_name(node.path), "array", elements)
        return PathAnalysis(
            semantics={node.path: self.detector.to_metadata(results)},
            importance={},
            grouping=None,
        )


def analyze_schema(
    schema: UnifiedSchema, data: Any, config: Optional[AnalysisConfig] = None
) -> dict[str, PathAnalysis]:
    """Run the per-path analysis for an already inferred schema."""
    config = config or AnalysisConfig()
    analyzer = _PathAnalyzer(config)
    paths: dict[str, PathAnalysis] = {}
    for node in find_analyzable_paths(schema.root_type, data):
        analysis = analyzer.analyze(node)
        if analysis is not None:
            paths[normalize_path(node.path)] = analysis
    return paths


def analyze_api_response(
    data: Any,
    url: str = "",
    config: Optional[AnalysisConfig] = None,
    now: Optional[int] = None,
) -> ApiAnalysisResult:
    """Infer the schema of an API response and analyse every analyzable path.

    Args:
        data: Decoded JSON value
        url: Source URL, recorded on the schema
        config: Analysis configuration (defaults apply if None)
        now: Inference timestamp in epoch milliseconds; current time if None

    Returns:
        ApiAnalysisResult with the schema and a canonical path -> PathAnalysis map.
        Malformed or empty data yields fewer entries, never an exception.
    """
    config = config or AnalysisConfig()
    inferrer = SchemaInferrer(sample_cap=config.sample_cap, max_depth=config.max_depth)
    schema = inferrer.infer(data, url, now=now)
    paths = analyze_schema(schema, data, config)
    logger.info("Analyzed %d paths for %s", len(paths), url or "<unknown url>")
    return ApiAnalysisResult(schema=schema, paths=paths)


def lookup(result: ApiAnalysisResult, path: str) -> Optional[PathAnalysis]:
    """Find the analysis for a concrete or canonical path.

    ``$[3].tags`` and ``$[].tags`` resolve to the same entry.
    """
    return result.paths.get(normalize_path(path))

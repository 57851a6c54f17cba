"""
Payload Insight - Structural and Semantic Analysis of API Responses

Infers a type tree from sampled JSON, classifies each field into a semantic
category with a confidence score, ranks fields by importance and groups
related siblings. The output is a path-indexed description a presentation
layer can use to pick and configure widgets.
"""

__version__ = "0.1.0"

from .orchestrator import ApiAnalysisResult, PathAnalysis, analyze_api_response, analyze_schema, lookup
from .paths import normalize_path
from .schema import UnifiedSchema, infer_schema
from .semantics import SemanticCategory, SemanticDetector, SemanticMetadata

__all__ = [
    "analyze_api_response",  # Main entry point
    "analyze_schema",
    "lookup",
    "normalize_path",
    "infer_schema",
    "ApiAnalysisResult",
    "PathAnalysis",
    "SemanticCategory",
    "SemanticDetector",
    "SemanticMetadata",
    "UnifiedSchema",
]

"""Configuration loading and management for Payload Insight.

This module provides configuration discovery and validation. Configuration
sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig and its nested configs)
    2. Global config (~/.payload-insight.toml)
    3. Project config (./payload-insight.toml)
    4. Explicit config file
    5. Environment variables (PAYLOAD_INSIGHT_* prefix)
    6. Keyword overrides (typically CLI flags)

Configuration is validated once, when the dataclasses are constructed.
Analysis itself never raises for configuration reasons.

Example:
    >>> config = load_config(verbose=True, sample_cap=5)
    >>> config.verbosity
    'verbose'
    >>> config.importance.primary_threshold
    0.8
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Literal, Mapping, Optional, get_type_hints

from .exceptions import (
    ConfigFileError,
    InvalidConfigError,
    ThresholdOrderError,
    WeightSumError,
)
from .semantics.models import SemanticCategory, Thresholds

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "PAYLOAD_INSIGHT_"
WEIGHT_TOLERANCE = 1e-6

DEFAULT_METADATA_PATTERNS = (
    r"(?i)^id$",
    r"^_",
    r"(?i)^[a-z]+_id$",
    r"^[a-z]+Id$",
    r"(?i)^(created|updated|deleted|modified)_(at|on|date)$",
    r"^(created|updated|deleted|modified)(At|On|Date)$",
)

DEFAULT_PRIMARY_INDICATORS = (
    r"(?i)(name|title|headline|heading|label|summary)",
    # whole words only: "coverImage" and "cover_photo" but not "discovery_date"
    r"(?:^|(?<=[^A-Za-z])|(?<=[a-z])(?=[A-Z]))"
    r"(?i:image|img|photo|picture|avatar|thumbnail|logo|cover)(?i:s)?(?![a-z])",
)


def _compile_all(key: str, patterns: tuple[str, ...]) -> tuple[re.Pattern, ...]:
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise InvalidConfigError(key, pattern, f"invalid regex: {e}")
    return tuple(compiled)


@dataclass(frozen=True)
class ImportanceConfig:
    """Importance scoring weights, tier thresholds and name rules.

    Attributes:
        Signal weights (must sum to 1.0):
            name_pattern_weight: Field name matches a primary indicator
            visual_richness_weight: Detected category is visually rich
            data_presence_weight: Share of non-empty sample values
            position_weight: Earlier fields score higher

        Tiers:
            primary_threshold: Score at or above this is primary
            secondary_threshold: Score at or above this is secondary

        Name rules (regex source strings):
            metadata_patterns: Names forced to tertiary after scoring
            primary_indicators: Names that fire the name-pattern signal
    """

    name_pattern_weight: float = 0.40
    visual_richness_weight: float = 0.25
    data_presence_weight: float = 0.20
    position_weight: float = 0.15

    primary_threshold: float = 0.80
    secondary_threshold: float = 0.50

    metadata_patterns: tuple[str, ...] = DEFAULT_METADATA_PATTERNS
    primary_indicators: tuple[str, ...] = DEFAULT_PRIMARY_INDICATORS

    _metadata_regexes: tuple[re.Pattern, ...] = field(
        default=(), init=False, repr=False, compare=False
    )
    _indicator_regexes: tuple[re.Pattern, ...] = field(
        default=(), init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Validate weights and thresholds, compile the name rules."""
        weights = self.weights
        for name, value in weights.items():
            if not 0.0 <= value <= 1.0:
                raise InvalidConfigError(name, value, "weight must be between 0.0 and 1.0")
        if abs(sum(weights.values()) - 1.0) > WEIGHT_TOLERANCE:
            raise WeightSumError(weights)

        for name in ("primary_threshold", "secondary_threshold"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise InvalidConfigError(name, value, "threshold must be between 0.0 and 1.0")
        if self.primary_threshold < self.secondary_threshold:
            raise ThresholdOrderError(
                "importance tiers", self.primary_threshold, self.secondary_threshold
            )

        # TOML arrays arrive as lists
        object.__setattr__(self, "metadata_patterns", tuple(self.metadata_patterns))
        object.__setattr__(self, "primary_indicators", tuple(self.primary_indicators))
        object.__setattr__(
            self, "_metadata_regexes", _compile_all("metadata_patterns", self.metadata_patterns)
        )
        object.__setattr__(
            self, "_indicator_regexes", _compile_all("primary_indicators", self.primary_indicators)
        )

    @property
    def weights(self) -> dict[str, float]:
        return {
            "name_pattern_weight": self.name_pattern_weight,
            "visual_richness_weight": self.visual_richness_weight,
            "data_presence_weight": self.data_presence_weight,
            "position_weight": self.position_weight,
        }

    @property
    def metadata_regexes(self) -> tuple[re.Pattern, ...]:
        return self._metadata_regexes

    @property
    def indicator_regexes(self) -> tuple[re.Pattern, ...]:
        return self._indicator_regexes


@dataclass(frozen=True)
class SemanticClusterRule:
    """Clusters fields whose detected category is one of ``categories``."""

    name: str
    categories: tuple[SemanticCategory, ...]
    min_fields: int = 2

    def __post_init__(self) -> None:
        try:
            categories = tuple(SemanticCategory(c) for c in self.categories)
        except ValueError as e:
            raise InvalidConfigError(f"semantic_clusters.{self.name}", self.categories, str(e))
        object.__setattr__(self, "categories", categories)
        if self.min_fields < 1:
            raise InvalidConfigError(
                f"semantic_clusters.{self.name}.min_fields", self.min_fields, "must be at least 1"
            )


DEFAULT_CLUSTER_RULES = (
    SemanticClusterRule(
        "Contact",
        (SemanticCategory.EMAIL, SemanticCategory.PHONE, SemanticCategory.ADDRESS),
    ),
    SemanticClusterRule(
        "Identity",
        (SemanticCategory.NAME, SemanticCategory.EMAIL, SemanticCategory.AVATAR),
    ),
    SemanticClusterRule(
        "Pricing",
        (SemanticCategory.PRICE, SemanticCategory.CURRENCY_CODE, SemanticCategory.COUNT),
    ),
    SemanticClusterRule(
        "Temporal",
        (SemanticCategory.DATE, SemanticCategory.TIMESTAMP),
    ),
    SemanticClusterRule(
        "Media",
        (
            SemanticCategory.IMAGE,
            SemanticCategory.THUMBNAIL,
            SemanticCategory.VIDEO,
            SemanticCategory.AUDIO,
        ),
    ),
)


@dataclass(frozen=True)
class GroupingConfig:
    """Grouping analysis parameters.

    Attributes:
        min_fields_for_grouping: Objects with fewer fields are never grouped
        min_fields_per_group: Minimum size of a prefix group
        suffixes_to_strip: Filler words dropped from the end of group labels
        semantic_clusters: Category cluster rules, in output order
    """

    min_fields_for_grouping: int = 8
    min_fields_per_group: int = 3
    suffixes_to_strip: tuple[str, ...] = (
        "info",
        "details",
        "data",
        "config",
        "settings",
        "options",
        "params",
        "parameters",
    )
    semantic_clusters: tuple[SemanticClusterRule, ...] = DEFAULT_CLUSTER_RULES

    def __post_init__(self) -> None:
        if self.min_fields_for_grouping < 1:
            raise InvalidConfigError(
                "min_fields_for_grouping", self.min_fields_for_grouping, "must be at least 1"
            )
        if self.min_fields_per_group < 1:
            raise InvalidConfigError(
                "min_fields_per_group", self.min_fields_per_group, "must be at least 1"
            )
        object.__setattr__(
            self, "suffixes_to_strip", tuple(s.lower() for s in self.suffixes_to_strip)
        )
        rules = []
        for rule in self.semantic_clusters:
            if isinstance(rule, Mapping):
                try:
                    rule = SemanticClusterRule(**rule)
                except TypeError as e:
                    raise InvalidConfigError("semantic_clusters", dict(rule), str(e))
            rules.append(rule)
        object.__setattr__(self, "semantic_clusters", tuple(rules))


@dataclass(frozen=True)
class DetectorConfig:
    """Semantic detector options.

    Attributes:
        category_thresholds: Per-category ``(high, medium)`` overrides, keyed
            by category value (e.g. ``"price"``)
        max_alternatives: Runner-up categories kept on each metadata record
    """

    category_thresholds: Mapping[str, Any] = field(default_factory=dict)
    max_alternatives: int = 2

    def __post_init__(self) -> None:
        resolved: dict[str, Thresholds] = {}
        for key, value in self.category_thresholds.items():
            try:
                category = SemanticCategory(key)
            except ValueError:
                raise InvalidConfigError(
                    f"category_thresholds.{key}", value, "unknown semantic category"
                )
            resolved[category.value] = _to_thresholds(category.value, value)
        object.__setattr__(self, "category_thresholds", resolved)
        if self.max_alternatives < 0:
            raise InvalidConfigError(
                "max_alternatives", self.max_alternatives, "must be non-negative"
            )

    def build_registry(self, base=None):
        """Pattern registry with this config's threshold overrides applied."""
        from .semantics.patterns import DEFAULT_REGISTRY

        registry = base if base is not None else DEFAULT_REGISTRY
        if not self.category_thresholds:
            return registry
        return registry.with_thresholds(self.category_thresholds)

    def build_detector(self):
        from .semantics.detector import SemanticDetector

        return SemanticDetector(self.build_registry(), max_alternatives=self.max_alternatives)


def _to_thresholds(category: str, value: Any) -> Thresholds:
    """Accept a Thresholds, a ``(high, medium)`` pair or a ``{high, medium}`` table."""
    if isinstance(value, Thresholds):
        return value
    try:
        if isinstance(value, Mapping):
            high, medium = value["high"], value["medium"]
        else:
            high, medium = value
        return Thresholds(high=float(high), medium=float(medium))
    except ThresholdOrderError as e:
        raise ThresholdOrderError(f"category {category!r}", e.high, e.medium)
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidConfigError(
            f"category_thresholds.{category}", value, f"expected (high, medium): {e}"
        )


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        sample_cap: Values retained per field and array elements sampled
        max_depth: Nesting depth beyond which types become unknown
        verbosity: Logging verbosity level
        importance: Importance scoring settings
        grouping: Grouping analysis settings
        detector: Semantic detector settings
    """

    sample_cap: int = 10
    max_depth: int = 32
    verbosity: Verbosity = "normal"

    importance: ImportanceConfig = field(default_factory=ImportanceConfig)
    grouping: GroupingConfig = field(default_factory=GroupingConfig)
    detector: DetectorConfig = field(default_factory=DetectorConfig)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.sample_cap < 1:
            raise InvalidConfigError("sample_cap", self.sample_cap, "must be at least 1")
        if self.max_depth < 1:
            raise InvalidConfigError("max_depth", self.max_depth, "must be at least 1")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )


_SECTIONS = {
    "importance": ImportanceConfig,
    "grouping": GroupingConfig,
    "detector": DetectorConfig,
}


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Configuration sources are merged in priority order (lowest to highest):
        1. Defaults (dataclass field defaults)
        2. Global config (~/.payload-insight.toml)
        3. Project config (./payload-insight.toml)
        4. Explicit config file (if config_file provided)
        5. Environment variables (PAYLOAD_INSIGHT_* prefix)
        6. Keyword overrides

    The ``[importance]``, ``[grouping]`` and ``[detector]`` tables map onto
    the nested configs and merge key by key across sources.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides; ``verbose``/``quiet`` booleans are
            translated to ``verbosity``

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigFileError: If a config file is missing or unparsable
        ConfigurationError: If any value fails validation

    Example:
        >>> config = load_config(config_file=Path("payload-insight.toml"))
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".payload-insight.toml"
    if global_config.exists():
        _merge(merged, _load_toml_file(global_config))

    project_config = Path.cwd() / "payload-insight.toml"
    if project_config.exists():
        _merge(merged, _load_toml_file(project_config))

    if config_file is not None:
        config_file = Path(config_file)
        if not config_file.exists():
            raise ConfigFileError(config_file, "file not found")
        _merge(merged, _load_toml_file(config_file))

    _merge(merged, _load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    _merge(merged, {k: v for k, v in overrides.items() if v is not None})

    for section, config_cls in _SECTIONS.items():
        value = merged.pop(section, None)
        if value is None:
            continue
        if isinstance(value, config_cls):
            merged[section] = value
        elif isinstance(value, Mapping):
            try:
                merged[section] = config_cls(**value)
            except TypeError as e:
                raise InvalidConfigError(section, dict(value), f"invalid [{section}] table: {e}")
        else:
            raise InvalidConfigError(section, value, "expected a table")

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        raise InvalidConfigError("config", sorted(merged), f"unknown option: {e}")


def _merge(target: dict[str, Any], source: Mapping[str, Any]) -> None:
    """Update ``target`` in place; section tables merge key by key."""
    for key, value in source.items():
        existing = target.get(key)
        if key in _SECTIONS and isinstance(existing, Mapping) and isinstance(value, Mapping):
            target[key] = {**existing, **value}
        else:
            target[key] = value


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from PAYLOAD_INSIGHT_* environment variables.

    Top-level scalars use ``PAYLOAD_INSIGHT_<FIELD>`` (e.g.
    ``PAYLOAD_INSIGHT_SAMPLE_CAP=5``). Scalars of the nested configs use
    ``PAYLOAD_INSIGHT_<SECTION>_<FIELD>`` (e.g.
    ``PAYLOAD_INSIGHT_IMPORTANCE_PRIMARY_THRESHOLD=0.75``). Tuple and
    mapping options are only configurable through TOML.

    Returns:
        Dict of field_name -> parsed_value for any variables found.
    """
    result: dict[str, Any] = _env_fields(AnalysisConfig, ENV_PREFIX)
    for section, config_cls in _SECTIONS.items():
        section_values = _env_fields(config_cls, f"{ENV_PREFIX}{section.upper()}_")
        if section_values:
            result[section] = section_values
    return result


def _env_fields(config_cls: type, prefix: str) -> dict[str, Any]:
    type_hints = get_type_hints(config_cls)
    result: dict[str, Any] = {}

    for f in fields(config_cls):
        if not f.init:
            continue
        env_key = f"{prefix}{f.name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        type_hint = type_hints.get(f.name)
        if type_hint is None or is_dataclass(type_hint):
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[f.name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns None for types that cannot come from the environment
    (tuples, mappings).

    Raises:
        ValueError: If the value can't be parsed to the expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is Literal:
        if value not in type_hint.__args__:
            raise ValueError(f"expected one of {', '.join(type_hint.__args__)}, got '{value}'")
        return value

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigFileError: If TOML support is missing or parsing fails
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            # Python < 3.11
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigFileError(
                path,
                "TOML support requires Python 3.11+ or the 'tomli' package",
            )

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigFileError(path, str(e))

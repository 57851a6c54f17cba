"""Configuration exceptions: invalid values, weights, threshold ordering.

These are the only errors the engine surfaces. They are raised when a
configuration object is constructed or loaded, never during analysis.
"""

from pathlib import Path
from typing import Any

from .base import PayloadInsightError


class ConfigurationError(PayloadInsightError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class ConfigFileError(ConfigurationError):
    """Raised when a config file is missing or cannot be parsed."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid config file: {path}", details={"path": str(path), "reason": reason})
        self.path = path
        self.reason = reason


class WeightSumError(ConfigurationError):
    """Raised when importance signal weights do not sum to 1.0."""

    def __init__(self, weights: dict[str, float]):
        total = sum(weights.values())
        super().__init__(
            f"Importance weights must sum to 1.0, got {total:.3f}",
            details={name: f"{value:.3f}" for name, value in weights.items()},
        )
        self.weights = dict(weights)
        self.total = total


class ThresholdOrderError(ConfigurationError):
    """Raised when a high threshold sits below its medium/secondary partner."""

    def __init__(self, owner: str, high: float, medium: float):
        super().__init__(
            f"Threshold ordering inverted for {owner}",
            details={"owner": owner, "high": str(high), "medium": str(medium)},
        )
        self.owner = owner
        self.high = high
        self.medium = medium

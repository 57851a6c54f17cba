"""Exception hierarchy for Payload Insight."""

from .base import PayloadInsightError
from .config import (
    ConfigFileError,
    ConfigurationError,
    InvalidConfigError,
    ThresholdOrderError,
    WeightSumError,
)

__all__ = [
    "PayloadInsightError",
    "ConfigurationError",
    "ConfigFileError",
    "InvalidConfigError",
    "ThresholdOrderError",
    "WeightSumError",
]

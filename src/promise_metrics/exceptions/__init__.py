"""Exception hierarchy for promise-metrics."""

from .analysis import (
    AnalysisError,
    EmptyResultError,
    ExportError,
    FileAccessError,
    MetricComputationError,
    ParsingError,
)
from .base import PromiseMetricsError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "PromiseMetricsError",
    "AnalysisError",
    "FileAccessError",
    "ParsingError",
    "MetricComputationError",
    "EmptyResultError",
    "ExportError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]

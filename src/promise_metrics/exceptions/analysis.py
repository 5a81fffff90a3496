"""Analysis-related exceptions: file access, parsing, per-type metrics, export."""

from pathlib import Path

from .base import PromiseMetricsError


class AnalysisError(PromiseMetricsError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a source file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParsingError(AnalysisError):
    """Raised when a file produces no usable syntax tree at all."""

    def __init__(self, filepath: str, reason: str):
        super().__init__(
            f"Failed to parse Java file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class MetricComputationError(AnalysisError):
    """Raised when CC, LOC or NPM cannot be computed for one type."""

    def __init__(self, type_name: str, reason: str):
        super().__init__(
            f"Error calculating metrics for {type_name}",
            details={"type": type_name, "reason": reason},
        )
        self.type_name = type_name
        self.reason = reason


class EmptyResultError(AnalysisError):
    """Raised when a run produces no class metrics."""

    def __init__(self, reason: str):
        super().__init__(f"No metrics calculated: {reason}", details={"reason": reason})
        self.reason = reason


class ExportError(AnalysisError):
    """Raised when the metrics file cannot be written."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot write metrics to {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason

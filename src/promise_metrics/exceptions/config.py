"""Configuration exceptions: source paths and settings."""

from pathlib import Path
from typing import Any

from .base import PromiseMetricsError


class ConfigurationError(PromiseMetricsError):
    """Raised when settings cannot be loaded or the run cannot be set up."""

    pass


class InvalidPathError(ConfigurationError):
    """Raised when the source directory is missing or is not a directory."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid source directory: {path}", details={"reason": reason})
        self.path = path
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """Raised when a setting has an unusable value."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(f"Invalid value for '{key}': {value!r}", details={"reason": reason})
        self.key = key
        self.value = value
        self.reason = reason

"""Root of the promise-metrics error hierarchy."""

from typing import Any, Dict, Optional


class PromiseMetricsError(Exception):
    """Base exception for all promise-metrics errors.

    ``details`` carries structured context such as paths, type names and
    reasons. Values are stored as strings and appended to the message when
    the error is printed.
    """

    # Process exit status used by the CLI
    exit_code = 1

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = {key: str(value) for key, value in (details or {}).items()}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"

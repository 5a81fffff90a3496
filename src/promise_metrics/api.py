"""Programmatic entry points.

Example:
    >>> from promise_metrics import analyze_source
    >>> [m.name for m in analyze_source("package p; class A { class B {} }")]
    ['p.A', 'p.A$B']
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .analysis.engine import MetricsEngine
from .config import MetricsConfig
from .metrics.models import ClassMetrics


def analyze_source(source: str, file_name: str = "<string>") -> list[ClassMetrics]:
    """Metrics for the types of one Java source buffer, in declaration order."""
    return MetricsEngine().analyze_source(source, file_name)


def analyze_file(path: Union[str, Path], config: Optional[MetricsConfig] = None) -> list[ClassMetrics]:
    """Metrics for the types of one Java file, in declaration order."""
    return MetricsEngine(config).analyze_file(Path(path))


def analyze_directory(
    path: Union[str, Path], config: Optional[MetricsConfig] = None
) -> list[ClassMetrics]:
    """Metrics for every Java type below ``path``, sorted by name."""
    return MetricsEngine(config).analyze_directory(Path(path))

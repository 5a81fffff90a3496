"""
promise-metrics - PROMISE defect-prediction metrics for Java sources

Parses each ``.java`` file with tree-sitter and computes, per declared type,
cyclomatic complexity (WMC, MAX_CC, AMC), number of public methods and
PROMISE lines of code.
"""

__version__ = "1.0.0"

from .api import analyze_directory, analyze_file, analyze_source
from .metrics.models import ClassMetrics

__all__ = [
    "analyze_directory",
    "analyze_file",
    "analyze_source",
    "ClassMetrics",
]

"""Metric extraction engine: CC, LOC, NPM, type enumeration and aggregation."""

from .aggregator import MetricAggregator, method_complexities
from .complexity import cyclomatic_complexity, decision_points
from .enumerator import enumerate_types, qualified_name
from .loc import count_file_loc, count_loc
from .models import ClassMetrics
from .npm import count_public_methods

__all__ = [
    "ClassMetrics",
    "MetricAggregator",
    "count_file_loc",
    "count_loc",
    "count_public_methods",
    "cyclomatic_complexity",
    "decision_points",
    "enumerate_types",
    "method_complexities",
    "qualified_name",
]

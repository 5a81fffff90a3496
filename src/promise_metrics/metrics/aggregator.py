"""Per-type metric aggregation.

Top-level types take their complexity from every method in the file
(member types and anonymous classes in field initializers included).
Member types use only their own methods.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from ..exceptions import MetricComputationError
from ..logging_config import get_logger
from ..scanning.syntax import CompilationUnit, MethodNode, TypeNode
from .complexity import cyclomatic_complexity
from .enumerator import enumerate_types
from .loc import count_loc
from .models import ClassMetrics
from .npm import count_public_methods


def method_complexities(methods: Iterable[MethodNode]) -> list[int]:
    return [cyclomatic_complexity(m) for m in methods]


class MetricAggregator:
    """Builds one ClassMetrics per type of a compilation unit."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or get_logger(__name__)

    def aggregate(self, unit: CompilationUnit) -> list[ClassMetrics]:
        """Compute records for all types; failing types are logged and dropped."""
        records: list[ClassMetrics] = []
        for name, type_node in enumerate_types(unit):
            try:
                records.append(self.compute(unit, name, type_node))
            except MetricComputationError as e:
                self.logger.error(f"Error calculating metrics for {name}: {e.reason}")
                continue
            self.logger.info(f"  - {name}")
        return records

    def compute(self, unit: CompilationUnit, name: str, type_node: TypeNode) -> ClassMetrics:
        """Metrics for a single type.

        Raises:
            MetricComputationError: If any of CC, NPM or LOC fails
        """
        methods = unit.file_methods if type_node.is_top_level else type_node.methods
        try:
            return ClassMetrics.from_complexities(
                name,
                method_complexities(methods),
                npm=count_public_methods(type_node),
                loc=self._type_loc(unit, type_node),
            )
        except Exception as e:
            raise MetricComputationError(name, str(e) or type(e).__name__) from e

    @staticmethod
    def _type_loc(unit: CompilationUnit, type_node: TypeNode) -> int:
        start, length = type_node.span
        return count_loc(unit.lines, unit.line_of(start), unit.line_of(start + length - 1))

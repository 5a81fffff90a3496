"""Per-type metric record."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ClassMetrics:
    """PROMISE metrics for one type.

    Attributes:
        name: Fully qualified name (``p.q.Outer$Inner`` for member types)
        wmc: Sum of per-method cyclomatic complexity
        npm: Number of public methods
        loc: PROMISE lines of code over the type's span
        method_count: Number of methods that contributed to ``wmc``
        max_cc: Largest per-method complexity, 0 without methods
        amc: Average method complexity, ``wmc / method_count``
        avg_cc: Same value as ``amc``
    """

    name: str
    wmc: int = 0
    npm: int = 0
    loc: int = 0
    method_count: int = 0
    max_cc: int = 0
    amc: float = 0.0
    avg_cc: float = 0.0

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name must not be empty")
        for field_name in ("wmc", "npm", "loc", "method_count", "max_cc"):
            if getattr(self, field_name) < 0:
                raise ValueError(f"{field_name} must be non-negative")
        if self.wmc < self.max_cc:
            raise ValueError("wmc must be at least max_cc")
        if self.amc != self.avg_cc:
            raise ValueError("amc and avg_cc must be equal")
        if self.method_count == 0 and (self.wmc or self.max_cc or self.amc):
            raise ValueError("a type without methods has zero complexity")

    @classmethod
    def from_complexities(
        cls, name: str, complexities: Sequence[int], npm: int = 0, loc: int = 0
    ) -> ClassMetrics:
        """Derive the complexity columns from per-method CC values."""
        wmc = sum(complexities)
        method_count = len(complexities)
        average = wmc / method_count if method_count > 0 else 0.0
        return cls(
            name=name,
            wmc=wmc,
            npm=npm,
            loc=loc,
            method_count=method_count,
            max_cc=max(complexities, default=0),
            amc=average,
            avg_cc=average,
        )

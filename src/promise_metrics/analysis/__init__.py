"""Analysis pipeline."""

from .engine import MetricsEngine, RunStats

__all__ = ["MetricsEngine", "RunStats"]

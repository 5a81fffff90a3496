"""Output formatters for promise-metrics."""

from .csv_formatter import FULL_COLUMNS, SHORT_COLUMNS, CsvFormatter, sort_records

__all__ = [
    "CsvFormatter",
    "FULL_COLUMNS",
    "SHORT_COLUMNS",
    "sort_records",
]

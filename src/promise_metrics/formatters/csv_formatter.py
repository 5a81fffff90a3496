"""CSV formatter for PROMISE metric records."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable
from operator import attrgetter
from pathlib import Path

from ..exceptions import ExportError
from ..metrics.models import ClassMetrics

SHORT_COLUMNS = ("name", "npm", "loc")

FULL_COLUMNS = (
    "name", "wmc", "dit", "noc", "cbo", "rfc", "lcom", "ca", "ce", "npm",
    "lcom3", "loc", "dam", "moa", "mfa", "cam", "ic", "cbm", "amc", "max_cc",
    "avg_cc", "bug",
)


def sort_records(records: Iterable[ClassMetrics]) -> list[ClassMetrics]:
    """Order by name; code-point order matches UTF-8 byte order."""
    return sorted(records, key=attrgetter("name"))


class CsvFormatter:
    """Render metric records as CSV.

    The short layout carries ``name,npm,loc``. The full layout has the 22
    PROMISE columns with every column other than name, npm and loc written
    as 0.
    """

    def __init__(self, full_format: bool = False) -> None:
        self.full_format = full_format

    @property
    def columns(self) -> tuple[str, ...]:
        return FULL_COLUMNS if self.full_format else SHORT_COLUMNS

    def row(self, metrics: ClassMetrics) -> list[object]:
        if not self.full_format:
            return [metrics.name, metrics.npm, metrics.loc]
        values = {"name": metrics.name, "npm": metrics.npm, "loc": metrics.loc}
        return [values.get(column, 0) for column in FULL_COLUMNS]

    def _write_rows(self, records: Iterable[ClassMetrics], stream) -> int:
        writer = csv.writer(stream)
        writer.writerow(self.columns)
        count = 0
        for metrics in sort_records(records):
            writer.writerow(self.row(metrics))
            count += 1
        return count

    def format(self, records: Iterable[ClassMetrics]) -> str:
        output = io.StringIO()
        self._write_rows(records, output)
        return output.getvalue()

    def write(self, records: Iterable[ClassMetrics], path: Path) -> int:
        """Write records to ``path``, creating parent directories.

        Returns:
            Number of data rows written

        Raises:
            ExportError: If the directory or file cannot be written
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", newline="", encoding="utf-8") as f:
                return self._write_rows(records, f)
        except OSError as e:
            raise ExportError(path, str(e))

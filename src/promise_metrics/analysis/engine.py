"""MetricsEngine: runs discovery, parsing and aggregation over a source tree.

Usage:
    engine = MetricsEngine(config)
    records = engine.analyze_directory(Path("src/main"))
    # records are sorted by fully qualified name

Each file is analyzed independently. With more than one worker the file set
is spread over a thread pool; every task returns its own record list and the
lists are merged and sorted at the end.
"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from threading import Lock
from typing import Optional

from ..config import MetricsConfig
from ..exceptions import EmptyResultError, FileAccessError
from ..formatters.csv_formatter import sort_records
from ..logging_config import get_logger
from ..metrics.aggregator import MetricAggregator
from ..metrics.loc import count_file_loc
from ..metrics.models import ClassMetrics
from ..scanning.discovery import discover_sources
from ..scanning.normalizer import JavaNormalizer
from ..scanning.syntax import CompilationUnit

logger = get_logger(__name__)

ProgressCallback = Callable[[Path, list[ClassMetrics]], None]


@dataclass
class RunStats:
    """Counters for one run."""

    files_found: int = 0
    files_analyzed: int = 0
    files_failed: int = 0
    files_with_problems: int = 0
    source_loc: int = 0


class MetricsEngine:
    """Computes ClassMetrics for Java sources."""

    def __init__(self, config: Optional[MetricsConfig] = None) -> None:
        self.config = config or MetricsConfig()
        self._normalizer = JavaNormalizer()
        self._aggregator = MetricAggregator(logger=get_logger("promise_metrics.metrics"))
        self._lock = Lock()
        self.stats = RunStats()

    def discover(self, source_dir: Path) -> list[Path]:
        return discover_sources(source_dir, self.config.extensions)

    def read_source(self, path: Path) -> str:
        """Read and decode a source file.

        Raises:
            FileAccessError: If the file cannot be read
        """
        try:
            data = path.read_bytes()
        except OSError as e:
            raise FileAccessError(path, str(e))
        return data.decode(self.config.encoding, errors="replace")

    def parse(self, source: str, file_name: str) -> CompilationUnit:
        """Parse source text, logging recoverable problems as warnings."""
        unit = self._normalizer.parse_source(source, file_name)
        if unit.problems:
            logger.warning(f"Parse problems in {file_name}")
            for problem in unit.problems:
                logger.warning(f"  {problem}")
        return unit

    def analyze_source(self, source: str, file_name: str = "<string>") -> list[ClassMetrics]:
        """Metrics for every type in one source buffer, in enumeration order."""
        unit = self.parse(source, file_name)
        records = self._aggregator.aggregate(unit)
        with self._lock:
            self.stats.source_loc += count_file_loc(source)
            if unit.problems:
                self.stats.files_with_problems += 1
        return records

    def analyze_file(self, path: Path) -> list[ClassMetrics]:
        """Metrics for every type in one file.

        Raises:
            FileAccessError: If the file cannot be read
        """
        logger.debug(f"Processing: {path}")
        return self.analyze_source(self.read_source(path), str(path))

    def _analyze_or_skip(self, path: Path) -> list[ClassMetrics]:
        try:
            records = self.analyze_file(path)
        except Exception as e:
            logger.error(f"Error processing {path}: {e}")
            with self._lock:
                self.stats.files_failed += 1
            return []
        with self._lock:
            self.stats.files_analyzed += 1
        return records

    def analyze_paths(
        self, paths: list[Path], on_file: Optional[ProgressCallback] = None
    ) -> list[ClassMetrics]:
        """Analyze the given files and return all records sorted by name.

        Records are merged in ``paths`` order before the stable sort, so types
        sharing a name keep the same relative order for any worker count.
        """
        workers = self.config.effective_workers
        per_file: list[list[ClassMetrics]] = [[] for _ in paths]

        if workers == 1 or len(paths) < 2:
            for index, path in enumerate(paths):
                per_file[index] = self._analyze_or_skip(path)
                if on_file is not None:
                    on_file(path, per_file[index])
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = {
                    executor.submit(self._analyze_or_skip, path): index
                    for index, path in enumerate(paths)
                }
                for future in as_completed(futures):
                    index = futures[future]
                    per_file[index] = future.result()
                    if on_file is not None:
                        on_file(paths[index], per_file[index])

        return sort_records(record for records in per_file for record in records)

    def analyze_directory(
        self,
        source_dir: Path,
        on_file: Optional[ProgressCallback] = None,
        on_discovered: Optional[Callable[[int], None]] = None,
    ) -> list[ClassMetrics]:
        """Analyze every matching file below ``source_dir``.

        Args:
            source_dir: Root of the source tree
            on_file: Called after each file with its records
            on_discovered: Called once with the number of files found

        Raises:
            InvalidPathError: If ``source_dir`` is missing or not a directory
            EmptyResultError: If no records were produced
        """
        self.stats = RunStats()
        paths = self.discover(source_dir)
        self.stats.files_found = len(paths)
        logger.info(f"Found {len(paths)} source files in {source_dir}")
        if on_discovered is not None:
            on_discovered(len(paths))

        records = self.analyze_paths(paths, on_file=on_file)
        logger.info(f"Total classes found: {len(records)}")

        if not records:
            if not paths:
                raise EmptyResultError(f"no Java files found in {source_dir}")
            raise EmptyResultError(f"no types declared in {len(paths)} files")
        return records

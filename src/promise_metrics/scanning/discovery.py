"""Source file discovery."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from ..exceptions import InvalidPathError


def validate_source_dir(source_dir: Path) -> Path:
    """Ensure ``source_dir`` exists and is a directory.

    Raises:
        InvalidPathError: If it does not exist or is not a directory
    """
    if not source_dir.exists():
        raise InvalidPathError(source_dir, "Source directory does not exist")
    if not source_dir.is_dir():
        raise InvalidPathError(source_dir, "Source path is not a directory")
    return source_dir


def discover_sources(source_dir: Path, extensions: Iterable[str] = (".java",)) -> list[Path]:
    """Recursively find regular files whose path ends with one of ``extensions``.

    Returns paths sorted so that runs process files in a stable order.
    """
    suffixes = tuple(extensions)
    found: list[Path] = []
    for dirpath, _dirnames, filenames in os.walk(validate_source_dir(source_dir)):
        for filename in filenames:
            if not filename.endswith(suffixes):
                continue
            path = Path(dirpath) / filename
            if path.is_file():
                found.append(path)
    return sorted(found)

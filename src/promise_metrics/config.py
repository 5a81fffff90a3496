"""Configuration loading and management for promise-metrics.

Configuration sources are merged in priority order:
    1. Defaults (defined in MetricsConfig)
    2. Project config (./promise-metrics.toml)
    3. Explicit config file (--config)
    4. Environment variables (PROMISE_METRICS_* prefix)
    5. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(full_format=True)
    >>> config.full_format
    True
    >>> config.output_file
    'output/metrics.csv'
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

DEFAULT_OUTPUT_FILE = "output/metrics.csv"
PROJECT_CONFIG_NAME = "promise-metrics.toml"
ENV_PREFIX = "PROMISE_METRICS_"

_VERBOSITY_LEVELS = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class MetricsConfig:
    """Configuration for a metrics run.

    Attributes:
        output_file: CSV destination; parent directories are created on write
        full_format: Emit the 22-column PROMISE layout instead of name,npm,loc
        workers: Number of parallel file workers (None = sequential)
        extensions: File suffixes selected during discovery
        encoding: Text encoding used to decode source files
        verbosity: Logging verbosity level
        log_file: Optional file that also receives log records
    """

    output_file: str = DEFAULT_OUTPUT_FILE
    full_format: bool = False
    workers: Optional[int] = None
    extensions: list[str] = field(default_factory=lambda: [".java"])
    encoding: str = "utf-8"
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.output_file:
            raise InvalidConfigError("output_file", self.output_file, "must not be empty")
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if not self.extensions:
            raise InvalidConfigError("extensions", self.extensions, "must list at least one suffix")
        if self.verbosity not in _VERBOSITY_LEVELS:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"expected one of {', '.join(_VERBOSITY_LEVELS)}"
            )
        try:
            "".encode(self.encoding)
        except LookupError:
            raise InvalidConfigError("encoding", self.encoding, "unknown codec")

    @property
    def effective_workers(self) -> int:
        """Worker count with the sequential default applied."""
        return self.workers or 1


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> MetricsConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored so unset CLI options do not mask file settings

    Returns:
        Validated MetricsConfig instance

    Raises:
        ConfigurationError: If a config file is missing or malformed
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_config_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_config_file(config_file))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return MetricsConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_config_file(path: Path) -> dict[str, Any]:
    """Read a TOML file, accepting either a top-level table or [promise-metrics]."""
    try:
        data = _load_toml_file(path)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file '{path}': {e}")
    except ValueError as e:
        # tomllib.TOMLDecodeError subclasses ValueError
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    section = data.get("promise-metrics")
    if isinstance(section, dict):
        return dict(section)
    return data


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from PROMISE_METRICS_* environment variables.

    Supported environment variables:
        PROMISE_METRICS_OUTPUT_FILE: str
        PROMISE_METRICS_FULL_FORMAT: bool (true/false/1/0)
        PROMISE_METRICS_WORKERS: int
        PROMISE_METRICS_ENCODING: str
        PROMISE_METRICS_VERBOSITY: quiet/normal/verbose
        PROMISE_METRICS_LOG_FILE: str

    Returns:
        Dict of field_name -> parsed_value for any PROMISE_METRICS_* vars found.
    """
    type_hints = get_type_hints(MetricsConfig)

    result: dict[str, Any] = {}

    for field_name in MetricsConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    # Lists are comma separated
    if origin is list:
        return [item.strip() for item in value.split(",") if item.strip()]

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict."""
    try:
        import tomllib
    except ModuleNotFoundError:
        # Python < 3.11
        import tomli as tomllib  # type: ignore

    with open(path, "rb") as f:
        return tomllib.load(f)

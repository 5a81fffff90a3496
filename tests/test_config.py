"""Tests for configuration loading."""

import pytest

from promise_metrics.config import MetricsConfig, load_config
from promise_metrics.exceptions import ConfigurationError, InvalidConfigError


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("OUTPUT_FILE", "FULL_FORMAT", "WORKERS", "EXTENSIONS", "ENCODING", "VERBOSITY", "LOG_FILE"):
        monkeypatch.delenv(f"PROMISE_METRICS_{name}", raising=False)


class TestMetricsConfig:
    """Test defaults and validation."""

    def test_defaults(self):
        config = MetricsConfig()
        assert config.output_file == "output/metrics.csv"
        assert config.full_format is False
        assert config.workers is None
        assert config.effective_workers == 1
        assert config.extensions == [".java"]
        assert config.verbosity == "normal"

    def test_invalid_workers(self):
        with pytest.raises(InvalidConfigError):
            MetricsConfig(workers=0)

    def test_empty_extensions(self):
        with pytest.raises(InvalidConfigError):
            MetricsConfig(extensions=[])

    def test_unknown_encoding(self):
        with pytest.raises(InvalidConfigError):
            MetricsConfig(encoding="no-such-codec")

    def test_invalid_verbosity(self):
        with pytest.raises(InvalidConfigError):
            MetricsConfig(verbosity="loud")


class TestLoadConfig:
    """Test source merging."""

    def test_defaults_without_sources(self):
        assert load_config() == MetricsConfig()

    def test_project_config(self, tmp_path):
        (tmp_path / "promise-metrics.toml").write_text("full_format = true\nworkers = 2\n")
        config = load_config()
        assert config.full_format is True
        assert config.workers == 2

    def test_project_config_section(self, tmp_path):
        (tmp_path / "promise-metrics.toml").write_text('[promise-metrics]\noutput_file = "x.csv"\n')
        assert load_config().output_file == "x.csv"

    def test_explicit_file_overrides_project(self, tmp_path):
        (tmp_path / "promise-metrics.toml").write_text("workers = 2\n")
        explicit = tmp_path / "other.toml"
        explicit.write_text("workers = 3\n")
        assert load_config(config_file=explicit).workers == 3

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Config file not found"):
            load_config(config_file=tmp_path / "missing.toml")

    def test_malformed_file(self, tmp_path):
        bad = tmp_path / "bad.toml"
        bad.write_text("workers = = 2\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file=bad)

    def test_unknown_key(self, tmp_path):
        (tmp_path / "promise-metrics.toml").write_text("colour = 'blue'\n")
        with pytest.raises(ConfigurationError):
            load_config()

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        (tmp_path / "promise-metrics.toml").write_text("workers = 2\n")
        monkeypatch.setenv("PROMISE_METRICS_WORKERS", "5")
        monkeypatch.setenv("PROMISE_METRICS_FULL_FORMAT", "yes")
        monkeypatch.setenv("PROMISE_METRICS_EXTENSIONS", ".java, .jav")
        config = load_config()
        assert config.workers == 5
        assert config.full_format is True
        assert config.extensions == [".java", ".jav"]

    def test_bad_env_value(self, monkeypatch):
        monkeypatch.setenv("PROMISE_METRICS_FULL_FORMAT", "maybe")
        with pytest.raises(InvalidConfigError):
            load_config()

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("PROMISE_METRICS_OUTPUT_FILE", "env.csv")
        assert load_config(output_file="cli.csv").output_file == "cli.csv"

    def test_none_overrides_ignored(self, monkeypatch):
        monkeypatch.setenv("PROMISE_METRICS_OUTPUT_FILE", "env.csv")
        assert load_config(output_file=None, workers=None).output_file == "env.csv"

    def test_verbosity_flags(self):
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=False, quiet=False).verbosity == "normal"

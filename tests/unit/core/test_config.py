"""Unit tests for FsStatConfig and related functions."""

import tomllib
from pathlib import Path
from unittest.mock import patch

import pytest
from fsstat.core.config import (
    DEFAULT_MAX_WORKERS,
    FsStatConfig,
    get_default_config,
    load_config,
    load_config_or_default,
    save_config,
)
from fsstat.core.errors import ConfigError, ConfigNotFoundError, ConfigParseError
from pydantic import ValidationError


class TestFsStatConfig:
    """Tests for FsStatConfig Pydantic model."""

    def test_default_values(self) -> None:
        config = FsStatConfig()
        assert config.max_workers == DEFAULT_MAX_WORKERS
        assert config.output_format == "table"

    def test_custom_values(self) -> None:
        config = FsStatConfig(max_workers=8, output_format="json")
        assert config.max_workers == 8
        assert config.output_format == "json"

    @pytest.mark.parametrize("workers", [0, 65])
    def test_max_workers_bounds(self, workers: int) -> None:
        with pytest.raises(ValidationError):
            FsStatConfig(max_workers=workers)

    def test_invalid_output_format(self) -> None:
        with pytest.raises(ValidationError):
            FsStatConfig(output_format="yaml")  # type: ignore[arg-type]

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            FsStatConfig(unknown_field=True)  # type: ignore[call-arg]

    def test_get_default_config(self) -> None:
        assert get_default_config() == FsStatConfig()


class TestLoadConfig:
    """Tests for load_config and load_config_or_default."""

    def test_load_valid(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('max_workers = 2\noutput_format = "json"\n')

        config = load_config(path)

        assert config.max_workers == 2
        assert config.output_format == "json"

    def test_load_partial_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('output_format = "json"\n')
        assert load_config(path).max_workers == DEFAULT_MAX_WORKERS

    def test_load_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_load_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("max_workers = [")
        with pytest.raises(ConfigParseError, match="Invalid TOML"):
            load_config(path)

    def test_load_invalid_content(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("max_workers = 0\n")
        with pytest.raises(ConfigError, match="Invalid config content"):
            load_config(path)

    def test_load_default_path(self, config_home: Path) -> None:
        (config_home / "fsstat").mkdir(parents=True)
        (config_home / "fsstat" / "config.toml").write_text("max_workers = 3\n")
        assert load_config().max_workers == 3

    def test_or_default_when_missing(self, config_home: Path) -> None:
        assert load_config_or_default() == FsStatConfig()

    def test_or_default_propagates_parse_errors(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("=")
        with pytest.raises(ConfigParseError):
            load_config_or_default(path)


class TestSaveConfig:
    """Tests for save_config."""

    def test_save_and_reload(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "config.toml"
        config = FsStatConfig(max_workers=6, output_format="json")

        saved = save_config(config, path)

        assert saved == path
        assert load_config(path) == config
        with open(path, "rb") as f:
            assert tomllib.load(f) == {"max_workers": 6, "output_format": "json"}

    def test_save_default_path(self, config_home: Path) -> None:
        saved = save_config(FsStatConfig())
        assert saved == config_home / "fsstat" / "config.toml"
        assert saved.exists()

    def test_save_failure_cleans_up(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        with (
            patch("fsstat.core.config.os.replace", side_effect=OSError("read-only")),
            pytest.raises(ConfigError, match="Failed to write config"),
        ):
            save_config(FsStatConfig(), path)
        assert not path.exists()
        assert list(tmp_path.glob("*.tmp")) == []

"""Unit tests for rawcsv configuration."""

import json
from pathlib import Path

import pytest

from rawcsv.config import RawCsvConfig, get_config, load_config, set_config
from rawcsv.exceptions import ConfigurationError, InvalidConfigurationError


class TestRawCsvConfig:
    """Test RawCsvConfig behaviour."""

    def test_defaults(self) -> None:
        """Test the default values."""
        config = RawCsvConfig()

        assert config.default_encoding is None
        assert config.log_level == "INFO"
        assert config.quadrant_aware_phase is False
        assert config.output_format == "csv"
        config.validate()

    def test_update_from_dict_ignores_unknown_keys(self) -> None:
        """Test only known attributes are updated."""
        config = RawCsvConfig()
        config.update_from_dict({"output_format": "json", "bogus": 1})

        assert config.output_format == "json"
        assert not hasattr(config, "bogus")

    def test_validate_rejects_unknown_format(self) -> None:
        """Test an unsupported output format."""
        config = RawCsvConfig(output_format="xlsx")

        with pytest.raises(InvalidConfigurationError) as exc_info:
            config.validate()
        assert exc_info.value.details["valid_options"] == ["csv", "json"]

    def test_validate_rejects_unknown_log_level(self) -> None:
        """Test an unknown log level."""
        with pytest.raises(InvalidConfigurationError):
            RawCsvConfig(log_level="LOUD").validate()

    def test_file_round_trip(self, temp_dir: Path) -> None:
        """Test saving then loading a configuration file."""
        path = temp_dir / "nested" / "rawcsv.json"
        RawCsvConfig(default_encoding="utf-16", quadrant_aware_phase=True).save_to_file(
            path
        )

        loaded = RawCsvConfig.from_file(path)
        assert loaded.default_encoding == "utf-16"
        assert loaded.quadrant_aware_phase is True

    def test_from_file_missing(self, temp_dir: Path) -> None:
        """Test a missing configuration file."""
        with pytest.raises(ConfigurationError):
            RawCsvConfig.from_file(temp_dir / "missing.json")

    def test_from_file_invalid_json(self, temp_dir: Path) -> None:
        """Test a configuration file that is not JSON."""
        path = temp_dir / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(InvalidConfigurationError):
            RawCsvConfig.from_file(path)

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test RAWCSV_ environment variables."""
        monkeypatch.setenv("RAWCSV_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("RAWCSV_QUADRANT_AWARE_PHASE", "true")
        monkeypatch.setenv("RAWCSV_OUTPUT_FORMAT", "json")

        config = RawCsvConfig.from_environment()
        assert config.log_level == "DEBUG"
        assert config.quadrant_aware_phase is True
        assert config.output_format == "json"


class TestGlobalConfig:
    """Test the module level configuration helpers."""

    def test_get_config_is_cached(self) -> None:
        """Test the global instance is created once."""
        assert get_config() is get_config()

    def test_set_config(self) -> None:
        """Test replacing the global instance."""
        config = RawCsvConfig(output_format="json")
        set_config(config)

        assert get_config() is config

    def test_load_config_from_path(self, temp_dir: Path) -> None:
        """Test load_config installs the loaded configuration."""
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"log_level": "WARNING"}), encoding="utf-8")

        config = load_config(path)
        assert config.log_level == "WARNING"
        assert get_config() is config

    def test_load_config_default_locations(
        self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test rawcsv.json in the working directory is picked up."""
        monkeypatch.chdir(temp_dir)
        monkeypatch.setenv("HOME", str(temp_dir / "home"))
        (temp_dir / "rawcsv.json").write_text(
            json.dumps({"output_format": "json"}), encoding="utf-8"
        )

        assert load_config().output_format == "json"

"""
Tests for configuration loading and validation.
"""

import pytest
from pydantic import ValidationError

from slotsuggester.config import AppConfig, SearchSettings, load_config, resolve_timezone
from slotsuggester.domain.exceptions import InvalidTimezoneError


class TestSearchSettings:
    """Tests for SearchSettings."""

    def test_defaults(self):
        settings = SearchSettings()

        assert settings.days_ahead == 7
        assert settings.start_hour == 9
        assert settings.end_hour == 18
        assert settings.buffer_minutes == 15
        assert settings.timezone == "UTC"
        assert settings.limit == 5

    def test_hour_out_of_range_is_rejected(self):
        with pytest.raises(ValidationError, match="Hour must be between 0 and 23"):
            SearchSettings(end_hour=24)

    def test_start_hour_after_end_hour_is_allowed(self):
        settings = SearchSettings(start_hour=20, end_hour=8)

        assert settings.start_hour == 20

    def test_negative_buffer_is_rejected(self):
        with pytest.raises(ValidationError):
            SearchSettings(buffer_minutes=-5)

    def test_zero_limit_is_rejected(self):
        with pytest.raises(ValidationError, match="limit must be greater than zero"):
            SearchSettings(limit=0)

    def test_with_overrides_skips_none(self):
        base = SearchSettings(days_ahead=3, timezone="Europe/London")

        merged = base.with_overrides(days_ahead=None, buffer_minutes=0, timezone=None)

        assert merged.days_ahead == 3
        assert merged.buffer_minutes == 0
        assert merged.timezone == "Europe/London"

    def test_with_overrides_validates(self):
        with pytest.raises(ValidationError):
            SearchSettings().with_overrides(start_hour=30)


class TestAppConfig:
    """Tests for AppConfig YAML loading."""

    def test_load_from_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "defaults:\n  days_ahead: 14\n  timezone: Europe/Berlin\n",
            encoding="utf-8",
        )

        config = AppConfig.load_from_yaml(path)

        assert config.defaults.days_ahead == 14
        assert config.defaults.timezone == "Europe/Berlin"
        assert config.defaults.start_hour == 9

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")

        assert AppConfig.load_from_yaml(path) == AppConfig()

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AppConfig.load_from_yaml(tmp_path / "nope.yaml")

    def test_invalid_yaml_raises_value_error(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("defaults: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.load_from_yaml(path)

    def test_non_mapping_root_raises_value_error(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping at the root"):
            AppConfig.load_from_yaml(path)

    def test_load_config_uses_default_file_when_present(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "slotsuggester.yaml").write_text("defaults:\n  buffer_minutes: 5\n", encoding="utf-8")

        assert load_config().defaults.buffer_minutes == 5

    def test_load_config_without_file_uses_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert load_config() == AppConfig()


class TestResolveTimezone:
    """Tests for resolve_timezone."""

    def test_valid_names(self):
        assert resolve_timezone("UTC") is not None
        assert resolve_timezone("America/New_York").name == "America/New_York"

    @pytest.mark.parametrize("name", ["Mars/Olympus_Mons", "", "   ", "Not A Zone"])
    def test_invalid_names_raise(self, name):
        with pytest.raises(InvalidTimezoneError, match="Invalid timezone"):
            resolve_timezone(name)

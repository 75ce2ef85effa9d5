"""
Configuration management using Pydantic models and optional YAML files.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import pendulum
import yaml
from pendulum.tz.timezone import Timezone
from pydantic import BaseModel, Field, field_validator

from .domain.exceptions import InvalidTimezoneError

DEFAULT_CONFIG_FILENAME = "slotsuggester.yaml"


class SearchSettings(BaseModel):
    """Settings for one slot search."""
    days_ahead: int = 7
    start_hour: int = 9
    end_hour: int = 18
    buffer_minutes: int = 15
    timezone: str = "UTC"
    limit: int = 5

    @field_validator("start_hour", "end_hour")
    @classmethod
    def validate_hour(cls, v: int) -> int:
        """Validate hour is between 0 and 23."""
        if not 0 <= v <= 23:
            raise ValueError(f"Hour must be between 0 and 23, got {v}")
        return v

    @field_validator("days_ahead", "buffer_minutes")
    @classmethod
    def validate_non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError(f"must not be negative, got {value}")
        return value

    @field_validator("limit")
    @classmethod
    def validate_limit(cls, value: int) -> int:
        """Ensure at least one suggestion can be shown."""
        if value <= 0:
            raise ValueError("limit must be greater than zero")
        return value

    def with_overrides(self, **overrides: Optional[Any]) -> "SearchSettings":
        """Return a validated copy with every non-None override applied."""
        data = self.model_dump()
        data.update({key: value for key, value in overrides.items() if value is not None})
        return SearchSettings(**data)


class AppConfig(BaseModel):
    """Application configuration."""
    defaults: SearchSettings = Field(default_factory=SearchSettings)

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data: Dict[str, Any] = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load the explicit config file, else the default one if present, else defaults.
    """
    if config_path is not None:
        return AppConfig.load_from_yaml(config_path)

    default_path = get_default_config_path()
    if default_path.exists():
        return AppConfig.load_from_yaml(default_path)

    return AppConfig()


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.cwd() / DEFAULT_CONFIG_FILENAME


def resolve_timezone(name: str) -> Timezone:
    """
    Resolve an IANA timezone identifier.

    Raises:
        InvalidTimezoneError: If the identifier is malformed or unknown
    """
    if not name or not name.strip():
        raise InvalidTimezoneError("Invalid timezone: empty identifier. Use an IANA name like 'Europe/London'.")

    try:
        return pendulum.timezone(name)
    except (ValueError, LookupError) as exc:
        raise InvalidTimezoneError(
            f"Invalid timezone '{name}'. Use an IANA name like 'Europe/London'."
        ) from exc

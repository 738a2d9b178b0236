"""Configuration management for marksift."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .output import FIELD_NAMES

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "marksift" / "config.yaml"


class Settings(BaseSettings):
    """Application settings loaded from environment, .env and YAML file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MARKSIFT_",
        extra="ignore",
    )

    # Output
    fields: str = "tu"
    separator: str = " "
    record_separator: str = "\n"

    # Extraction
    schemeless: bool = False
    strict: bool = False
    plist_command: list[str] = ["plutil", "-p"]

    @field_validator("fields")
    @classmethod
    def check_fields(cls, value: str) -> str:
        unknown = set(value) - set(FIELD_NAMES)
        if not value or unknown:
            raise ValueError(f"fields must use only {''.join(FIELD_NAMES)}: {value!r}")
        if len(set(value)) != len(value):
            raise ValueError(f"fields must not repeat: {value!r}")
        return value


def load_config_file(path: Path) -> dict:
    """Read settings from a YAML file; a missing file means no overrides."""
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(data).__name__}")
    return data


def get_settings(config_file: Optional[Path] = None, **overrides) -> Settings:
    """Get application settings.

    Values from the YAML config file take precedence over environment
    variables; explicit ``overrides`` (e.g. CLI options) win over both.
    """
    values = load_config_file(config_file or DEFAULT_CONFIG_PATH)
    values.update({key: value for key, value in overrides.items() if value is not None})
    return Settings(**values)

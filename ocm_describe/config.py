"""Configuration management for ocm-describe."""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Type

from pydantic import Field, ValidationError
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .ocm.client import DEFAULT_URL

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "ocm" / "ocm.json"


class ConfigError(Exception):
    """Configuration is missing or invalid."""


def default_config_path() -> Path:
    """Location of the configuration file, honoring ``OCM_CONFIG``."""
    override = os.getenv("OCM_CONFIG")
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config_file(path: Path) -> Dict[str, Any]:
    """Read the JSON configuration file, returning nothing when it doesn't exist."""
    if not path.exists():
        return {}

    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"can't read configuration file '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"configuration file '{path}' must contain a JSON object")
    return data


class OCMConfigFileSource(PydanticBaseSettingsSource):
    """Settings stored in the JSON file written by ``ocm login``."""

    # settings field -> key in the file
    FILE_KEYS = {"url": "url", "token": "access_token"}

    def __init__(self, settings_cls: Type[BaseSettings], path: Path):
        super().__init__(settings_cls)
        self.path = path
        self.data = load_config_file(path)

    def get_field_value(self, field: FieldInfo, field_name: str) -> Tuple[Any, str, bool]:
        key = self.FILE_KEYS.get(field_name)
        value = self.data.get(key) if key else None
        return value, field_name, False

    def __call__(self) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        for field_name, field in self.settings_cls.model_fields.items():
            value, _, _ = self.get_field_value(field, field_name)
            if value:
                values[field_name] = value
        return values


class Settings(BaseSettings):
    """Connection and logging settings.

    Values come from keyword arguments, then ``OCM_*`` environment variables,
    then the OCM configuration file.
    """

    model_config = SettingsConfigDict(env_prefix="OCM_", env_ignore_empty=True, extra="ignore")

    url: str = DEFAULT_URL
    token: Optional[str] = None
    timeout: float = 30.0
    log_level: str = "WARNING"
    config_file: Optional[Path] = Field(default=None, exclude=True)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        path = init_settings.init_kwargs.get("config_file") or default_config_path()
        return (init_settings, env_settings, OCMConfigFileSource(settings_cls, Path(path)))

    def require_token(self) -> str:
        """Return the access token, failing when none is configured."""
        if not self.token:
            raise ConfigError(
                "no access token configured: use --token, set OCM_TOKEN "
                f"or add 'access_token' to {DEFAULT_CONFIG_PATH}"
            )
        return self.token


def load_settings(
    url: Optional[str] = None,
    token: Optional[str] = None,
    config_path: Optional[Path] = None,
) -> Settings:
    """Resolve settings from arguments, environment and the configuration file."""
    overrides = {"url": url, "token": token, "config_file": config_path}

    try:
        return Settings(**{name: value for name, value in overrides.items() if value})
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e

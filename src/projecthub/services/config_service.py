"""Configuration service for ProjectHub.

``ConfigService`` is the single source of truth for configuration. It loads
and saves ``config.json`` under the platform config dir, creates a default
file on first run, and applies the environment overrides:

- ``BACKEND_URL`` selects the backend origin the proxy forwards to
- ``PROJECTHUB_API_URL`` selects the proxy origin the CLI talks to
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel

from projecthub.models.config_models import AppConfig

BACKEND_URL_ENV = "BACKEND_URL"
API_URL_ENV = "PROJECTHUB_API_URL"


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        self.config_dir = Path(user_config_dir("projecthub"))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir("projecthub"))

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
            self.config_path.chmod(0o600)
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return _lookup(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name an existing setting
            pydantic.ValidationError: If the value is rejected
        """
        if self.get(key) is None:
            raise KeyError(key)

        keys = key.split(".")
        config_dict = self.config.model_dump()
        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        self._config = AppConfig.model_validate(config_dict)
        self.save_config()

    def reset(self, key: str | None = None) -> None:
        """Reset the whole configuration, or one key, to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            return

        default_value = _lookup(AppConfig(), key)
        if default_value is None:
            raise KeyError(key)
        self.set(key, default_value)

    @property
    def backend_url(self) -> str:
        """Backend origin for the proxy; ``BACKEND_URL`` wins over the file."""
        return (os.environ.get(BACKEND_URL_ENV) or self.config.proxy.backend_url).rstrip("/")

    @property
    def api_endpoint(self) -> str:
        """Proxy origin for the CLI; ``PROJECTHUB_API_URL`` wins over the file."""
        return (os.environ.get(API_URL_ENV) or self.config.api.endpoint).rstrip("/")


def _lookup(config: AppConfig, key: str) -> Any:
    value: Any = config
    for k in key.split("."):
        if isinstance(value, BaseModel) and k in type(value).model_fields:
            value = getattr(value, k)
        else:
            return None
    return value


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service

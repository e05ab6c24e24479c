"""Configuration management for Task Tracker CLI."""

import json
from pathlib import Path
from typing import Any, Literal, Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError

DEFAULT_TASKS_FILE = "tasks.json"


class StorageConfig(BaseModel):
    """Task file configuration."""

    tasks_file: str = Field(default=DEFAULT_TASKS_FILE)


class SearchConfig(BaseModel):
    """Fuzzy search configuration."""

    limit: int = Field(default=5, ge=0)


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["table", "json", "yaml", "quiet"] = Field(default="table")
    color: bool = Field(default=True)


class LoggingConfig(BaseModel):
    """Logging configuration for the stderr handler."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING"
    )


class Config(BaseModel):
    """Main configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """Manages Task Tracker CLI configuration."""

    def __init__(self, profile: str = "default"):
        self.profile = profile
        self.config_dir = Path(user_config_dir("tasktracker-cli"))
        self.config_file = self.config_dir / f"{profile}.json"

        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file; a missing or corrupt file yields defaults."""
        if self.config_file.exists():
            try:
                with open(self.config_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
                return Config.model_validate(data)
            except (OSError, ValueError):
                return Config()
        return Config()

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name a configuration field.
            ValueError: If the value does not validate for that field.
        """
        if self.get(key) is None:
            raise KeyError(key)

        keys = key.split(".")
        config_dict = self.config.model_dump()

        # Navigate to the nested dictionary
        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        try:
            self._config = Config.model_validate(config_dict)
        except ValidationError as e:
            errors = "; ".join(err["msg"] for err in e.errors())
            raise ValueError(f"Invalid value for '{key}': {errors}") from None
        self.save_config()

    def reset(self, key: Optional[str] = None) -> None:
        """Reset configuration to defaults."""
        if key is None:
            self._config = Config()
        else:
            default_value = self.get_from_config(Config(), key)
            if default_value is None:
                raise KeyError(key)
            self.set(key, default_value)
        self.save_config()

    @staticmethod
    def get_from_config(config: Config, key: str) -> Any:
        """Get value from a config object using dot notation."""
        value: Any = config
        for k in key.split("."):
            if isinstance(value, BaseModel) and k in type(value).model_fields:
                value = getattr(value, k)
            else:
                return None
        return value

    def resolve_tasks_file(self, override: Optional[str] = None) -> Path:
        """Path of the task file: explicit override, then config, then default."""
        return Path(override or self.config.storage.tasks_file or DEFAULT_TASKS_FILE)


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(profile: str = "default") -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None or _config_manager.profile != profile:
        _config_manager = ConfigManager(profile)
    return _config_manager

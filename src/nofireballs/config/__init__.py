"""Configuration: the persisted plugin document and runtime settings.

Usage:
    from nofireballs.config import ConfigStore, PluginSettings

    settings = PluginSettings()
    config = ConfigStore(settings.config_path).load(current_version="1.0.0")
"""

from nofireballs.config.models import DEFAULT_PREFAB_NAMES, PluginConfig, default_config
from nofireballs.config.settings import CONFIG_FILE_NAME, PluginSettings
from nofireballs.config.store import (
    MIGRATIONS,
    ConfigError,
    ConfigMigration,
    ConfigStore,
    migrate,
    parse_version,
)

__all__ = [
    "PluginConfig",
    "PluginSettings",
    "ConfigStore",
    "ConfigError",
    "ConfigMigration",
    "MIGRATIONS",
    "DEFAULT_PREFAB_NAMES",
    "CONFIG_FILE_NAME",
    "default_config",
    "migrate",
    "parse_version",
]

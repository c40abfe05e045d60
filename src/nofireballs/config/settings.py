"""Runtime settings using Pydantic Settings.

Usage:
    from nofireballs.config import PluginSettings

    # Load from environment variables (NOFIREBALLS_*)
    settings = PluginSettings()

    # Or override with explicit values
    settings = PluginSettings(config_dir="/srv/game/oxide/config", sweep_interval=0.1)
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_FILE_NAME = "ExplosionsWithoutFireballs.json"


class PluginSettings(BaseSettings):  # type: ignore[misc]
    """Runtime knobs for the plugin.

    Attributes:
        config_dir: Directory holding the persisted configuration document.
        sweep_interval: Pause in seconds between entities during the startup
            sweep. Keeps a large entity population from stalling the host loop.
        log_level: Level passed to configure_logging by hosts and demos.

    Environment Variables:
        NOFIREBALLS_CONFIG_DIR
        NOFIREBALLS_SWEEP_INTERVAL
        NOFIREBALLS_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="NOFIREBALLS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    config_dir: Path = Path("config")
    sweep_interval: float = 0.5
    log_level: str = "INFO"

    @property
    def config_path(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME

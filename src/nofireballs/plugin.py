"""Explosions Without Fireballs: the plugin service loaded into the host.

One instance lives from on_loaded() to on_unloaded(). It owns the config
and the patch manager; nothing is kept in module globals.

Usage:
    host = LocalHost()
    plugin = ExplosionsWithoutFireballs(PluginSettings(config_dir="config"))
    host.load_plugin(plugin)
    host.server_ready()      # starts the paced sweep
    ...
    host.unload_plugin(plugin)   # restores every fireball
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from nofireballs.config import ConfigStore, PluginConfig, PluginSettings
from nofireballs.core.identity import EntityId
from nofireballs.host.protocol import Host
from nofireballs.log import PluginLoggerAdapter
from nofireballs.patch import FireballPatchManager
from nofireballs.scheduling import CoroutineRunner


@dataclass(frozen=True, slots=True)
class PluginInfo:
    title: str
    version: str
    description: str


class ExplosionsWithoutFireballs:
    """Disables fireballs when entities like minicopters and flame turrets explode.

    Args:
        settings: Runtime settings. Defaults to PluginSettings() from the
            environment.
        store: Config store. Defaults to a JSON file under settings.config_dir.
    """

    info = PluginInfo(
        title="Explosions Without Fireballs",
        version="1.0.0",
        description=(
            "Disables the creation of fireballs when entities like minicopters "
            "and flame turrets explode."
        ),
    )

    def __init__(
        self,
        settings: PluginSettings | None = None,
        store: ConfigStore | None = None,
    ):
        self._settings = settings or PluginSettings()
        self._store = store or ConfigStore(self._settings.config_path)
        self._runner = CoroutineRunner()
        self._config: PluginConfig | None = None
        self._manager: FireballPatchManager | None = None
        self._log = PluginLoggerAdapter(logging.getLogger(__name__), {"plugin": self.info.title})

    def __repr__(self) -> str:
        return f"<{type(self).__name__} v{self.info.version}>"

    @property
    def config(self) -> PluginConfig | None:
        return self._config

    @property
    def manager(self) -> FireballPatchManager | None:
        return self._manager

    @property
    def is_loaded(self) -> bool:
        return self._manager is not None

    def on_loaded(self, host: Host) -> None:
        """Load config and prepare the patch manager.

        Raises:
            ConfigError: If the persisted configuration is malformed.
        """
        self._config = self._store.load(self.info.version)
        self._log.info(
            "Removing fireballs from: %s", ", ".join(self._config.prefab_names) or "(nothing)"
        )
        self._manager = FireballPatchManager(
            host,
            self._config.prefab_names,
            runner=self._runner,
            sweep_interval=self._settings.sweep_interval,
        )

    def on_server_ready(self, is_startup: bool = True) -> None:
        if self._manager is None:
            return
        self._log.debug("Server ready (startup=%s), sweeping existing entities", is_startup)
        self._manager.start_sweep()

    def on_entity_created(self, entity: EntityId) -> None:
        if self._manager is None:
            return
        self._manager.handle_entity_created(entity)

    def on_unloaded(self) -> None:
        """Stop all coroutines and restore every patched entity."""
        self._runner.stop_all()
        if self._manager is not None:
            self._manager.shutdown()
        self._manager = None
        self._config = None

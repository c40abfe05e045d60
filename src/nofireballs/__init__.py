"""Explosions Without Fireballs: suppress fireball effects on exploding vehicles.

Usage:
    from nofireballs import ExplosionsWithoutFireballs, LocalHost, PluginSettings

    host = LocalHost()
    plugin = ExplosionsWithoutFireballs(PluginSettings(config_dir="config"))
    host.load_plugin(plugin)
    host.server_ready()          # paced sweep over existing entities
    host.unload_plugin(plugin)   # every fireball reference restored
"""

__version__ = "1.0.0"

# Core primitives
from nofireballs.core import (
    FIREBALL_CATEGORIES,
    EntityId,
    FlameTurret,
    GameObjectRef,
    Helicopter,
    Prefab,
    fireball_ref,
)

# Configuration
from nofireballs.config import (
    ConfigError,
    ConfigStore,
    PluginConfig,
    PluginSettings,
)

# Host surface
from nofireballs.host import Host, HostPlugin, LocalHost

# Patching
from nofireballs.patch import FireballPatchManager, PatchState

# Plugin
from nofireballs.plugin import ExplosionsWithoutFireballs, PluginInfo
from nofireballs.scheduling import CoroutineRunner

__all__ = [
    # Version
    "__version__",
    # Core
    "EntityId",
    "GameObjectRef",
    "Prefab",
    "Helicopter",
    "FlameTurret",
    "FIREBALL_CATEGORIES",
    "fireball_ref",
    # Config
    "PluginConfig",
    "PluginSettings",
    "ConfigStore",
    "ConfigError",
    # Host
    "Host",
    "HostPlugin",
    "LocalHost",
    # Scheduling
    "CoroutineRunner",
    # Patching
    "FireballPatchManager",
    "PatchState",
    # Plugin
    "ExplosionsWithoutFireballs",
    "PluginInfo",
]

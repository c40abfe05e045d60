"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from nofireballs import (
    EntityId,
    FlameTurret,
    GameObjectRef,
    Helicopter,
    LocalHost,
    PluginSettings,
    Prefab,
)


@pytest.fixture
def host():
    """Fresh LocalHost instance."""
    return LocalHost()


@pytest.fixture
def spawn_helicopter(host):
    """Spawn a helicopter with a known fireball guid."""

    def spawn(short_name: str = "minicopter.entity", guid: str = "heli-fireball") -> EntityId:
        return host.spawn(Prefab(short_name), Helicopter(GameObjectRef(guid)))

    return spawn


@pytest.fixture
def spawn_flame_turret(host):
    """Spawn a flame turret with a known fireball guid."""

    def spawn(short_name: str = "flameturret.deployed", guid: str = "turret-fireball") -> EntityId:
        return host.spawn(Prefab(short_name), FlameTurret(GameObjectRef(guid)))

    return spawn


@pytest.fixture
def settings(tmp_path):
    """Settings writing config under a temp dir with an unpaced sweep."""
    return PluginSettings(config_dir=tmp_path / "config", sweep_interval=0.0)

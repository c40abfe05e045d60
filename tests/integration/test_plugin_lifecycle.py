"""End-to-end plugin lifecycle against LocalHost."""

import asyncio
import json
import logging

import pytest

from nofireballs import (
    ConfigError,
    ExplosionsWithoutFireballs,
    HostPlugin,
    PatchState,
    fireball_ref,
)


def guid_of(host, entity):
    return fireball_ref(host, entity).guid


@pytest.fixture
def plugin(settings):
    return ExplosionsWithoutFireballs(settings)


def test_plugin_satisfies_host_protocol(plugin):
    assert isinstance(plugin, HostPlugin)


def test_load_writes_default_config(host, plugin, settings):
    host.load_plugin(plugin)

    assert plugin.is_loaded
    assert plugin.config.prefab_names == [
        "minicopter.entity",
        "scraptransporthelicopter",
        "attackhelicopter.entity",
        "flameturret.deployed",
    ]
    saved = json.loads(settings.config_path.read_text(encoding="utf-8"))
    assert saved["Version"] == ExplosionsWithoutFireballs.info.version


def test_malformed_config_is_fatal_on_load(host, plugin, settings):
    settings.config_path.parent.mkdir(parents=True)
    settings.config_path.write_text("{oops", encoding="utf-8")

    with pytest.raises(ConfigError):
        host.load_plugin(plugin)

    assert host.plugins == ()
    assert not plugin.is_loaded

    settings.config_path.unlink()
    host.load_plugin(plugin)

    assert host.plugins == (plugin,)
    assert plugin.is_loaded


@pytest.mark.asyncio
async def test_flame_turret_spawned_after_sweep(host, plugin, spawn_flame_turret):
    """Default config, turret spawned post-sweep, then unload restores it."""
    host.load_plugin(plugin)
    host.server_ready()
    await plugin.manager.sweep_task
    assert plugin.manager.state is PatchState.ACTIVE

    turret = spawn_flame_turret(guid="turret-guid")

    assert plugin.manager.original_guids == {turret: "turret-guid"}
    assert guid_of(host, turret) is None

    manager = plugin.manager
    host.unload_plugin(plugin)

    assert manager.original_guids == {}
    assert guid_of(host, turret) == "turret-guid"
    assert plugin.config is None
    assert not plugin.is_loaded


@pytest.mark.asyncio
async def test_sweep_covers_preexisting_entities(
    host, plugin, spawn_helicopter, spawn_flame_turret
):
    mini = spawn_helicopter("minicopter.entity", guid="m")
    scrap = spawn_helicopter("scraptransporthelicopter", guid="s")
    attack = spawn_helicopter("attackhelicopter.entity", guid="a")
    turret = spawn_flame_turret(guid="t")
    chinook = spawn_helicopter("ch47.entity", guid="c")

    host.load_plugin(plugin)
    host.server_ready()
    await plugin.manager.sweep_task

    assert plugin.manager.original_guids == {mini: "m", scrap: "s", attack: "a", turret: "t"}
    assert guid_of(host, chinook) == "c"


@pytest.mark.asyncio
async def test_entity_destroyed_before_unload(host, plugin, spawn_helicopter):
    host.load_plugin(plugin)
    host.server_ready()
    await plugin.manager.sweep_task
    entity = spawn_helicopter(guid="h")
    manager = plugin.manager
    host.destroy(entity)

    host.unload_plugin(plugin)

    assert manager.original_guids == {}


@pytest.mark.asyncio
async def test_unload_mid_sweep_leaves_host_unmodified(host, settings, spawn_helicopter):
    settings.sweep_interval = 10.0
    plugin = ExplosionsWithoutFireballs(settings)
    entities = [spawn_helicopter(guid=f"h{i}") for i in range(3)]

    host.load_plugin(plugin)
    host.server_ready()
    task = plugin.manager.sweep_task
    await asyncio.sleep(0)

    host.unload_plugin(plugin)
    await asyncio.gather(task, return_exceptions=True)

    assert task.cancelled()
    assert [guid_of(host, e) for e in entities] == ["h0", "h1", "h2"]


@pytest.mark.asyncio
async def test_late_load_still_sweeps(host, plugin, spawn_helicopter):
    entity = spawn_helicopter(guid="h")
    host.server_ready()

    host.load_plugin(plugin)
    await plugin.manager.sweep_task

    assert plugin.manager.original_guids == {entity: "h"}
    host.unload_all()


def test_events_after_unload_are_ignored(host, plugin, spawn_helicopter):
    host.load_plugin(plugin)
    host.unload_plugin(plugin)

    entity = spawn_helicopter(guid="h")
    plugin.on_entity_created(entity)
    plugin.on_server_ready()

    assert guid_of(host, entity) == "h"


def test_migration_is_logged(host, plugin, settings, caplog):
    settings.config_path.parent.mkdir(parents=True)
    settings.config_path.write_text('{"Version": "0.1.0"}', encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="nofireballs"):
        host.load_plugin(plugin)

    assert "Config changes detected" in caplog.text
    assert plugin.config.version == "1.0.0"
    host.unload_all()

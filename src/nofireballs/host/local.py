"""Local in-memory host implementation.

Simple dict-based entity registry that drives plugin lifecycle hooks.
Suitable for single-process use, demos and testing.

Usage:
    host = LocalHost()
    host.load_plugin(plugin)
    heli = host.spawn(Prefab("minicopter.entity"), Helicopter(GameObjectRef("abc")))
    host.server_ready()
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, TypeVar, cast

from nofireballs.core.identity import EntityId
from nofireballs.host.allocator import EntityAllocator
from nofireballs.host.protocol import HostPlugin

T = TypeVar("T")

logger = logging.getLogger(__name__)


class LocalHost:
    """In-memory host using nested dicts.

    Structure:
        _components[entity][component_type] = component_instance

    Components are stored and returned by reference: callers that mutate a
    returned component mutate the entity.
    """

    def __init__(self) -> None:
        self._allocator = EntityAllocator()
        self._components: dict[EntityId, dict[type, Any]] = {}
        self._plugins: list[HostPlugin] = []
        self._ready = False

    # Entity registry

    def spawn(self, *components: Any) -> EntityId:
        """Create entity with components and notify loaded plugins."""
        entity = self._allocator.allocate()
        self._components[entity] = {type(comp): comp for comp in components}
        for plugin in list(self._plugins):
            plugin.on_entity_created(entity)
        return entity

    def destroy(self, entity: EntityId) -> None:
        """Destroy an entity. Unknown or stale handles are ignored."""
        if entity in self._components:
            del self._components[entity]
            self._allocator.deallocate(entity)

    def entity_exists(self, entity: EntityId) -> bool:
        return entity in self._components and self._allocator.is_alive(entity)

    def get_component(self, entity: EntityId, component_type: type[T]) -> T | None:
        return cast("T | None", self._components.get(entity, {}).get(component_type))

    def query(self, component_type: type[T]) -> Iterator[tuple[EntityId, T]]:
        """Find entities with the component type.

        Iterates over a snapshot so entities may be spawned or destroyed
        while the caller is suspended between items.
        """
        for entity, components in list(self._components.items()):
            if component_type in components:
                yield entity, components[component_type]

    # Plugin lifecycle

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def plugins(self) -> tuple[HostPlugin, ...]:
        return tuple(self._plugins)

    def load_plugin(self, plugin: HostPlugin) -> None:
        """Load a plugin. Late loads receive on_server_ready(is_startup=False).

        A plugin whose load hooks raise is left unregistered.

        Raises:
            ValueError: If the plugin is already loaded.
        """
        if plugin in self._plugins:
            raise ValueError(f"Plugin {plugin!r} is already loaded")

        plugin.on_loaded(self)
        self._plugins.append(plugin)
        if self._ready:
            try:
                plugin.on_server_ready(is_startup=False)
            except Exception:
                self._plugins.remove(plugin)
                plugin.on_unloaded()
                raise
        logger.debug("Loaded plugin %r", plugin)

    def server_ready(self) -> None:
        """Mark the server ready and notify loaded plugins. Runs at most once."""
        if self._ready:
            return
        self._ready = True
        for plugin in list(self._plugins):
            plugin.on_server_ready(is_startup=True)

    def unload_plugin(self, plugin: HostPlugin) -> None:
        """Unload a plugin. It receives no further events.

        Raises:
            ValueError: If the plugin is not loaded.
        """
        if plugin not in self._plugins:
            raise ValueError(f"Plugin {plugin!r} is not loaded")

        self._plugins.remove(plugin)
        plugin.on_unloaded()
        logger.debug("Unloaded plugin %r", plugin)

    def unload_all(self) -> None:
        """Unload every plugin in reverse load order."""
        for plugin in reversed(list(self._plugins)):
            self.unload_plugin(plugin)

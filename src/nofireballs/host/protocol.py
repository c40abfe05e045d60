"""Host protocols: the data surface and lifecycle hooks a plugin relies on.

The host owns every entity. Plugins hold EntityId handles only and reach
entity state through the Host protocol. Lifecycle notifications are
delivered to HostPlugin implementations on the host's event-loop thread.

Usage:
    host = LocalHost()
    host.load_plugin(ExplosionsWithoutFireballs())
    host.server_ready()
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, TypeVar, runtime_checkable

from nofireballs.core.identity import EntityId

T = TypeVar("T")


class Host(Protocol):
    """Read access to host-owned entities. Components are returned live."""

    def entity_exists(self, entity: EntityId) -> bool:
        """Check if entity is alive."""
        ...

    def get_component(self, entity: EntityId, component_type: type[T]) -> T | None:
        """Get component from entity, or None if absent or entity is dead."""
        ...

    def query(self, component_type: type[T]) -> Iterator[tuple[EntityId, T]]:
        """Find entities carrying the component type."""
        ...


@runtime_checkable
class HostPlugin(Protocol):
    """Lifecycle hooks a host invokes on a loaded plugin.

    All hooks are synchronous and run on the same thread as the host loop.
    Long-running work must be scheduled as a cooperative task.
    """

    def on_loaded(self, host: Host) -> None:
        """Called once when the plugin is loaded into the host."""
        ...

    def on_server_ready(self, is_startup: bool) -> None:
        """Called when the server has finished starting.

        Args:
            is_startup: False when the plugin was loaded after the server
                became ready.
        """
        ...

    def on_entity_created(self, entity: EntityId) -> None:
        """Called after the host spawns a new entity."""
        ...

    def on_unloaded(self) -> None:
        """Called once when the plugin is removed from the host."""
        ...

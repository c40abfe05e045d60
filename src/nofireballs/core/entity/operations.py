"""Read access to fireball references through the host's component surface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nofireballs.core.entity.models import FlameTurret, GameObjectRef, Helicopter, Prefab
from nofireballs.core.identity import EntityId

if TYPE_CHECKING:
    from nofireballs.host.protocol import Host


def fireball_ref(host: Host, entity: EntityId) -> GameObjectRef | None:
    """Return the live fireball reference of an entity.

    The returned object is owned by the host; writing its ``guid`` mutates the
    entity. Returns None for entities outside the fireball categories.
    """
    helicopter = host.get_component(entity, Helicopter)
    if helicopter is not None:
        return helicopter.fireball

    flame_turret = host.get_component(entity, FlameTurret)
    if flame_turret is not None:
        return flame_turret.fireball_prefab

    return None


def short_prefab_name(host: Host, entity: EntityId) -> str | None:
    prefab = host.get_component(entity, Prefab)
    return prefab.short_name if prefab is not None else None

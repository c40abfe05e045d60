"""Host entity components relevant to fireball suppression.

Helicopters and flame turrets both carry a reference to the fireball
sub-object spawned when they die, but under different field names.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class GameObjectRef:
    """Reference to a host sub-object. The guid is opaque; None means unset."""

    guid: str | None = None


@dataclass(slots=True)
class Prefab:
    """Archetype of an entity, e.g. ``minicopter.entity``."""

    short_name: str


@dataclass(slots=True)
class Helicopter:
    fireball: GameObjectRef


@dataclass(slots=True)
class FlameTurret:
    fireball_prefab: GameObjectRef


FIREBALL_CATEGORIES: tuple[type, ...] = (Helicopter, FlameTurret)
"""Categories that carry a fireball reference, in sweep order."""

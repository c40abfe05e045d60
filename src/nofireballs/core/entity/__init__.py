"""Entity components and accessors for fireball-carrying entities."""

from nofireballs.core.entity.models import (
    FIREBALL_CATEGORIES,
    FlameTurret,
    GameObjectRef,
    Helicopter,
    Prefab,
)
from nofireballs.core.entity.operations import fireball_ref, short_prefab_name

__all__ = [
    "FIREBALL_CATEGORIES",
    "FlameTurret",
    "GameObjectRef",
    "Helicopter",
    "Prefab",
    "fireball_ref",
    "short_prefab_name",
]

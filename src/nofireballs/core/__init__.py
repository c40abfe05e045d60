"""Core functionalities: stateless models and accessors.

Architecture Note:
    core/ contains pure, stateless building blocks with no runtime state.
    For stateful services, see host/, scheduling/ and patch/.
"""

from nofireballs.core.entity import (
    FIREBALL_CATEGORIES,
    FlameTurret,
    GameObjectRef,
    Helicopter,
    Prefab,
    fireball_ref,
    short_prefab_name,
)
from nofireballs.core.identity import EntityId

__all__ = [
    # Identity
    "EntityId",
    # Entity
    "GameObjectRef",
    "Prefab",
    "Helicopter",
    "FlameTurret",
    "FIREBALL_CATEGORIES",
    "fireball_ref",
    "short_prefab_name",
]

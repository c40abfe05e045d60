"""Entity identity: lightweight, generation-checked handles."""

from nofireballs.core.identity.models import EntityId

__all__ = [
    "EntityId",
]

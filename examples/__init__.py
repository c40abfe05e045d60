"""Example entities and a demo server run for Explosions Without Fireballs.

This package demonstrates plugin usage but is not part of the core API.
"""

from .entities import spawn_flame_turret, spawn_helicopter

__all__ = [
    "spawn_helicopter",
    "spawn_flame_turret",
]

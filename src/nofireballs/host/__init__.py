"""Host surface: protocols plus an in-memory host.

Architecture Note:
    host/ models the game server the plugin runs inside. The real server is
    external; LocalHost is the in-process stand-in used by demos and tests.
"""

from nofireballs.host.allocator import EntityAllocator
from nofireballs.host.local import LocalHost
from nofireballs.host.protocol import Host, HostPlugin

__all__ = [
    "Host",
    "HostPlugin",
    "LocalHost",
    "EntityAllocator",
]

"""Cooperative task scheduling on the host loop."""

from nofireballs.scheduling.coroutines import CoroutineRunner

__all__ = [
    "CoroutineRunner",
]

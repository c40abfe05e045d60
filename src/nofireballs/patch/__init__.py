"""Fireball patching: the stateful service that mutates and restores entities."""

from nofireballs.patch.manager import SWEEP_TASK_NAME, FireballPatchManager, PatchState

__all__ = [
    "FireballPatchManager",
    "PatchState",
    "SWEEP_TASK_NAME",
]

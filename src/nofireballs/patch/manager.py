"""Fireball patch manager: record, clear and restore fireball references.

Lifecycle:
    UNLOADED --start_sweep()--> SWEEPING --sweep finishes--> ACTIVE
    any state --shutdown()--> UNLOADED

Usage:
    manager = FireballPatchManager(host, config.prefab_names, runner)
    manager.start_sweep()                    # on server ready
    manager.handle_entity_created(entity)    # on every spawn
    manager.shutdown()                       # on unload, restores everything
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping
from enum import Enum, auto
from types import MappingProxyType
from typing import Any

from nofireballs.core.entity import FIREBALL_CATEGORIES, fireball_ref, short_prefab_name
from nofireballs.core.identity import EntityId
from nofireballs.host.protocol import Host
from nofireballs.scheduling import CoroutineRunner

logger = logging.getLogger(__name__)

SWEEP_TASK_NAME = "nullify-fireballs"


class PatchState(Enum):
    UNLOADED = auto()
    """Not started, or shut down and fully restored."""

    SWEEPING = auto()
    """Startup sweep over pre-existing entities is in flight."""

    ACTIVE = auto()
    """Sweep finished; only spawn notifications patch entities now."""


class FireballPatchManager:
    """Clears fireball references on recognised entities and owes them a restore.

    Every entity this manager mutates is recorded with its original guid.
    An entity is recorded at most once, so repeated observations are no-ops
    and restore_all() always writes back the value seen before the first
    patch.

    Args:
        host: Host owning the entities.
        recognized_names: Short prefab names eligible for patching.
        runner: Task runner the sweep is scheduled on.
        sweep_interval: Pause in seconds after each entity during the sweep.
    """

    def __init__(
        self,
        host: Host,
        recognized_names: Iterable[str],
        runner: CoroutineRunner | None = None,
        sweep_interval: float = 0.5,
    ):
        self._host = host
        self._recognized = frozenset(recognized_names)
        self._runner = runner or CoroutineRunner()
        self._sweep_interval = sweep_interval
        self._original_guids: dict[EntityId, str | None] = {}
        self._sweep_task: asyncio.Task[Any] | None = None

    @property
    def state(self) -> PatchState:
        if self._sweep_task is None:
            return PatchState.UNLOADED
        if not self._sweep_task.done():
            return PatchState.SWEEPING
        return PatchState.ACTIVE

    @property
    def sweep_task(self) -> asyncio.Task[Any] | None:
        return self._sweep_task

    @property
    def original_guids(self) -> Mapping[EntityId, str | None]:
        """Read-only view of patched entities and their original guids."""
        return MappingProxyType(dict(self._original_guids))

    def is_patched(self, entity: EntityId) -> bool:
        return entity in self._original_guids

    def recognizes(self, entity: EntityId) -> bool:
        return short_prefab_name(self._host, entity) in self._recognized

    def patch(self, entity: EntityId) -> bool:
        """Record the entity's fireball guid and clear it.

        Returns:
            True if the entity was patched by this call, False if it was
            already tracked or has no fireball reference.
        """
        if entity in self._original_guids:
            return False

        ref = fireball_ref(self._host, entity)
        if ref is None:
            return False

        self._original_guids[entity] = ref.guid
        ref.guid = None
        return True

    def handle_entity_created(self, entity: EntityId) -> bool:
        """Patch a freshly spawned entity if its prefab is recognised."""
        if not self.recognizes(entity):
            return False
        return self.patch(entity)

    def start_sweep(self) -> asyncio.Task[Any]:
        """Schedule the paced sweep over all existing fireball entities.

        Any sweep already in flight is cancelled first.
        """
        self._sweep_task = self._runner.start(SWEEP_TASK_NAME, self._sweep())
        return self._sweep_task

    async def _sweep(self) -> int:
        patched = 0
        for category in FIREBALL_CATEGORIES:
            for entity, _ in list(self._host.query(category)):
                # The entity may have died while we were paused.
                if self._host.entity_exists(entity) and self.handle_entity_created(entity):
                    patched += 1
                await asyncio.sleep(self._sweep_interval)

        logger.info("Removed fireballs from %d existing entities", patched)
        return patched

    def restore_all(self) -> int:
        """Write every recorded guid back and forget all entities.

        Entities the host destroyed since they were patched are skipped.

        Returns:
            Number of entities restored.
        """
        restored = 0
        for entity, guid in self._original_guids.items():
            ref = fireball_ref(self._host, entity) if self._host.entity_exists(entity) else None
            if ref is None:
                logger.debug("Skipping restore for vanished entity %s", entity)
                continue
            ref.guid = guid
            restored += 1

        self._original_guids.clear()
        return restored

    def shutdown(self) -> int:
        """Stop the sweep, then restore every patched entity.

        Returns:
            Number of entities restored.
        """
        self._runner.stop(SWEEP_TASK_NAME)
        self._sweep_task = None
        restored = self.restore_all()
        logger.info("Restored fireballs on %d entities", restored)
        return restored

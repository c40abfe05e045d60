"""Tests for entity identity and allocation.

Critical Invariants:
- Generation increments on recycle
- Stale handles are detected
"""

import pytest

from nofireballs.core.identity import EntityId
from nofireballs.host.allocator import EntityAllocator


@pytest.fixture
def allocator():
    return EntityAllocator()


def test_generation_increments_on_recycle(allocator):
    """CRITICAL: Recycled entity must have generation+1.

    Why: A patched entity's handle must not resolve to a new entity that
    reused its index.
    """
    entity1 = allocator.allocate()
    assert entity1.generation == 0

    allocator.deallocate(entity1)

    entity2 = allocator.allocate()
    assert entity2.index == entity1.index, "Should reuse same index"
    assert entity2.generation == 1, "INVARIANT: generation must increment"


def test_stale_handle_detection(allocator):
    entity_old = allocator.allocate()
    allocator.deallocate(entity_old)

    assert not allocator.is_alive(entity_old)

    entity_new = allocator.allocate()
    assert allocator.is_alive(entity_new)
    assert entity_new != entity_old


def test_fresh_indices_are_unique(allocator):
    entities = [allocator.allocate() for _ in range(10)]
    assert len({e.index for e in entities}) == 10


def test_deallocate_stale_handle_raises(allocator):
    entity = allocator.allocate()
    allocator.deallocate(entity)

    with pytest.raises(ValueError, match="stale"):
        allocator.deallocate(entity)


def test_entity_id_is_hashable_value():
    assert EntityId(3, 1) == EntityId(index=3, generation=1)
    assert len({EntityId(3, 1), EntityId(3, 1), EntityId(3, 2)}) == 2

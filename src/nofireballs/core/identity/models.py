"""Entity identity models.

Usage:
    entity = EntityId(index=42, generation=1)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EntityId:
    """Lightweight, non-owning handle to a host entity.

    The generation guards against handle reuse: once the host destroys an
    entity and recycles its index, old handles no longer resolve.
    """

    index: int = 0
    generation: int = 0

    def __hash__(self) -> int:
        return hash((self.index, self.generation))

"""
Identity map holding at most one in-memory instance per entity id.
"""

from __future__ import annotations

import uuid
from typing import Dict, Iterator, List, Optional

from ..core.entity import Entity


class IdentityMap:
    """
    Stores entities keyed by their id, preserving insertion order.

    Not thread-safe: a map belongs to one unit of work, which belongs to one caller.
    """

    def __init__(self) -> None:
        self._store: Dict[uuid.UUID, Entity] = {}

    def add(self, entity: Entity) -> None:
        self._store[entity.id] = entity

    def get(self, id: uuid.UUID) -> Optional[Entity]:
        return self._store.get(id)

    def remove(self, entity: Entity) -> None:
        self._store.pop(entity.id, None)

    def has_id(self, id: uuid.UUID) -> bool:
        return id in self._store

    def clear(self) -> None:
        self._store.clear()

    def values(self) -> List[Entity]:
        return list(self._store.values())

    def __contains__(self, entity: Entity) -> bool:
        return entity.id in self._store

    def __iter__(self) -> Iterator[Entity]:
        return iter(self.values())

    def __len__(self) -> int:
        return len(self._store)

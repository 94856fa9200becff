"""
Unit of Work implementation batching persistence operations.
"""

from __future__ import annotations

import uuid
from typing import Callable, Iterable, List, Optional, Tuple, Type, TypeVar, Union

from ..core.entity import Entity
from ..mapping.base import EntityMapper
from ..mapping.registry import MapperRegistry
from ..utils import get_logger, time_call
from .connection import ConnectionProvider
from .identity_map import IdentityMap
from .transaction import Transaction

E = TypeVar("E", bound=Entity)

PendingOperation = Tuple[Callable[[Transaction, Entity], None], Entity]


class UnitOfWork:
    """
    Session-scoped identity map and change tracker.

    Entities live in exactly one of three maps:

    * ``new``: registered, never persisted;
    * ``tracked``: loaded from storage, clean or dirty;
    * ``deleted``: scheduled for removal and invisible to lookups.

    :meth:`commit` writes everything in one transaction, inserts first, then
    updates of tracked entities whose snapshot changed, then deletes. Only a
    successful commit clears the maps, so a failed commit can be retried
    as-is. A unit of work is meant for a single caller and does no locking.
    """

    def __init__(
        self,
        mappers: Union[MapperRegistry, Iterable[EntityMapper]],
        connection_provider: ConnectionProvider,
        *,
        slow_commit_ms: int = 500,
    ) -> None:
        self.registry = mappers if isinstance(mappers, MapperRegistry) else MapperRegistry(mappers)
        self.connection_provider = connection_provider
        self.slow_commit_ms = slow_commit_ms
        self._new = IdentityMap()
        self._tracked = IdentityMap()
        self._deleted = IdentityMap()
        self.logger = get_logger("persistence.unit_of_work")

    # ------------------------------------------------------------------ #
    # Context management
    # ------------------------------------------------------------------ #
    def __enter__(self) -> "UnitOfWork":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.commit()
        else:
            self.logger.warning("Discarding pending changes after %s", exc_type.__name__)
            self.clear()

    # ------------------------------------------------------------------ #
    # Registration
    # ------------------------------------------------------------------ #
    def register_new(self, entity: Entity) -> None:
        # keep the three maps disjoint; a conflicting row surfaces at commit
        self._deleted.remove(entity)
        self._tracked.remove(entity)
        self._new.add(entity)

    def delete(self, entity: Entity) -> None:
        if entity in self._deleted:
            return
        self._deleted.add(entity)
        self._new.remove(entity)
        self._tracked.remove(entity)

    def clear(self) -> None:
        self._new.clear()
        self._tracked.clear()
        self._deleted.clear()

    # ------------------------------------------------------------------ #
    # Lookup
    # ------------------------------------------------------------------ #
    def get_by_id(self, entity_type: Type[E], id: Union[uuid.UUID, str]) -> Optional[E]:
        """
        Return the session's instance for ``id``, loading it on first access.

        Deleted ids resolve to ``None`` even when the row still exists. An
        instance already in the session is returned without touching storage,
        so repeated lookups yield the same object.
        """

        if not isinstance(id, uuid.UUID):
            id = uuid.UUID(str(id))

        if self._deleted.has_id(id):
            self.logger.debug("Lookup of %s %s hit a pending delete", entity_type.__name__, id)
            return None

        entity = self._tracked.get(id)
        if entity is None:
            entity = self._new.get(id)
        if entity is not None:
            if not isinstance(entity, entity_type):
                self.logger.debug(
                    "Id %s belongs to %s, not %s",
                    id,
                    entity.__class__.__name__,
                    entity_type.__name__,
                )
                return None
            return entity

        mapper = self.registry.mapper_for(entity_type)
        with self.connection_provider.connection() as connection:
            loaded = mapper.fetch(id, connection)
        if loaded is None:
            self.logger.debug("No stored %s with id %s", entity_type.__name__, id)
            return None
        self._tracked.add(loaded)
        return loaded

    # ------------------------------------------------------------------ #
    # Commit
    # ------------------------------------------------------------------ #
    def commit(self) -> None:
        inserts = self._new.values()
        updates = [entity for entity in self._tracked if entity.has_changes()]
        deletes = self._deleted.values()

        # resolve every mapper before opening a connection
        operations: List[PendingOperation] = []
        operations += [(self._mapper_of(entity).insert, entity) for entity in inserts]
        operations += [(self._mapper_of(entity).update, entity) for entity in updates]
        operations += [(self._mapper_of(entity).delete, entity) for entity in deletes]

        committed = False
        try:
            with time_call("uow.commit", self.logger, threshold_ms=self.slow_commit_ms):
                with self.connection_provider.connection() as connection:
                    with Transaction.scope(connection) as transaction:
                        for operation, entity in operations:
                            operation(transaction, entity)
                        transaction.commit()
                        committed = True
        except Exception:
            if not committed:
                self.logger.warning(
                    "Commit rolled back; %s pending operation(s) kept for retry", len(operations)
                )
                raise
            # the data is stored; only connection cleanup failed
            self._finish_commit(inserts, updates, deletes)
            self.logger.warning("Connection cleanup failed after a successful commit")
            raise

        self._finish_commit(inserts, updates, deletes)

    def _finish_commit(
        self, inserts: List[Entity], updates: List[Entity], deletes: List[Entity]
    ) -> None:
        for entity in inserts:
            entity.mark_clean()
        for entity in updates:
            entity.mark_clean()
        self.clear()
        self.logger.info(
            "Committed %s insert(s), %s update(s), %s delete(s)",
            len(inserts),
            len(updates),
            len(deletes),
        )

    def _mapper_of(self, entity: Entity) -> EntityMapper:
        return self.registry.mapper_for(type(entity))

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #
    @property
    def new(self) -> Tuple[Entity, ...]:
        return tuple(self._new)

    @property
    def tracked(self) -> Tuple[Entity, ...]:
        return tuple(self._tracked)

    @property
    def deleted(self) -> Tuple[Entity, ...]:
        return tuple(self._deleted)

    def has_pending_changes(self) -> bool:
        if len(self._new) or len(self._deleted):
            return True
        return any(entity.has_changes() for entity in self._tracked)

    def __contains__(self, entity: Entity) -> bool:
        return entity in self._new or entity in self._tracked

    def __repr__(self) -> str:
        return (
            f"<UnitOfWork new={len(self._new)} tracked={len(self._tracked)} "
            f"deleted={len(self._deleted)}>"
        )

"""
Entity mapper contract translating entities to and from stored rows.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Generic, Optional, Type, TypeVar

from ..core.entity import Entity

if TYPE_CHECKING:
    from ..adapters.base import DatabaseAdapter
    from ..persistence.transaction import Transaction


E = TypeVar("E", bound=Entity)


class EntityMapper(ABC, Generic[E]):
    """
    Persistence mapping for one entity type.

    Write operations run inside the unit of work's commit transaction.
    ``update`` and ``delete`` matching zero rows are not errors. ``fetch``
    returns ``None`` when no row matches and otherwise must hand back an
    entity whose baseline is already set, so ``has_changes()`` is ``False``
    right after loading.
    """

    entity_type: ClassVar[Type[Entity]]

    @abstractmethod
    def insert(self, transaction: "Transaction", entity: E) -> None: ...

    @abstractmethod
    def update(self, transaction: "Transaction", entity: E) -> None: ...

    @abstractmethod
    def delete(self, transaction: "Transaction", entity: E) -> None: ...

    @abstractmethod
    def fetch(self, id: uuid.UUID, connection: "DatabaseAdapter") -> Optional[E]: ...

    def handles(self, entity_type: type) -> bool:
        return entity_type is self.entity_type

    def __repr__(self) -> str:
        entity_type = getattr(self, "entity_type", None)
        label = entity_type.__name__ if isinstance(entity_type, type) else "?"
        return f"{self.__class__.__name__}[{label}]"

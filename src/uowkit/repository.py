"""
Typed repository facade over a unit of work.
"""

from __future__ import annotations

import uuid
from typing import ClassVar, Generic, Optional, Type, TypeVar, Union

from .core.entity import Entity
from .persistence.unit_of_work import UnitOfWork

E = TypeVar("E", bound=Entity)


class Repository(Generic[E]):
    """
    Calling convention for one entity type; every call goes straight to the unit of work.

    Subclasses set ``entity_type``::

        class Users(Repository[User]):
            entity_type = User
    """

    entity_type: ClassVar[Type[Entity]]

    def __init__(self, unit_of_work: UnitOfWork) -> None:
        self.unit_of_work = unit_of_work

    def add(self, entity: E) -> None:
        self.unit_of_work.register_new(entity)

    def get_by_id(self, id: Union[uuid.UUID, str]) -> Optional[E]:
        return self.unit_of_work.get_by_id(self.entity_type, id)  # type: ignore[return-value]

    def delete(self, entity: E) -> None:
        self.unit_of_work.delete(entity)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}[{self.entity_type.__name__}]"

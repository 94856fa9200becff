"""
Entity base class with snapshot-based dirty checking.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


def new_identity() -> uuid.UUID:
    """
    Return a fresh random identity for a new entity.
    """
    return uuid.uuid4()


@dataclass(frozen=True)
class EntityState:
    """
    Immutable capture of an entity's persistable fields.

    Subclasses are frozen dataclasses listing the captured fields, identity
    included. Equality is structural and only holds between snapshots of the
    same class.
    """


class Entity(ABC):
    """
    Base class for objects tracked by a :class:`~uowkit.persistence.UnitOfWork`.

    Two entities are equal when their ids are equal, regardless of the
    values of their other fields. Change detection compares the current
    snapshot with ``original_state``, the baseline taken at load or commit
    time; an entity without a baseline always reports changes.
    """

    def __init__(self, id: Optional[uuid.UUID] = None) -> None:
        self._id = id if id is not None else new_identity()
        self.original_state: Optional[EntityState] = None

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @abstractmethod
    def current_state(self) -> EntityState:
        """
        Build a snapshot of the current field values. Must not mutate the entity.
        """

    def has_changes(self) -> bool:
        if self.original_state is None:
            return True
        return self.original_state != self.current_state()

    def mark_clean(self) -> None:
        self.original_state = self.current_state()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self._id}>"

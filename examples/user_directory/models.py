"""
User entity for the user directory example.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Optional

from uowkit.core import Entity, EntityState


@dataclass(frozen=True)
class UserState(EntityState):
    id: uuid.UUID
    name: str


class User(Entity):
    def __init__(self, name: str, *, id: Optional[uuid.UUID] = None) -> None:
        super().__init__(id)
        self.name = name

    def current_state(self) -> UserState:
        return UserState(self.id, self.name)

    def __repr__(self) -> str:
        return f"<User id={self.id} name={self.name!r}>"

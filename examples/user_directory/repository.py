from __future__ import annotations

from uowkit.repository import Repository

from .models import User


class Users(Repository[User]):
    entity_type = User

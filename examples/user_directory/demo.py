"""
User directory example walking one user through its whole lifecycle.
"""

from __future__ import annotations

from typing import Any, Dict, List

from uowkit.persistence import ConnectionProvider, UnitOfWork

from .mappers import UserMapper, create_schema
from .models import User
from .repository import Users


def bootstrap_provider(dsn: str) -> ConnectionProvider:
    provider = ConnectionProvider.from_dsn(dsn)
    create_schema(provider)
    return provider


def run_demo(dsn: str) -> List[Dict[str, Any]]:
    """
    Create, rename, and delete a user, one unit of work per step.

    Every connection is short-lived, so ``dsn`` must point at a database
    file rather than ``:memory:``.
    """

    provider = bootstrap_provider(dsn)
    feed: List[Dict[str, Any]] = []

    with UnitOfWork([UserMapper()], provider) as uow:
        user = User("John Doe")
        Users(uow).add(user)
    feed.append({"step": "created", "id": str(user.id), "name": user.name})

    with UnitOfWork([UserMapper()], provider) as uow:
        loaded = Users(uow).get_by_id(user.id)
        loaded.name = "Jane Doe"
    feed.append({"step": "renamed", "id": str(user.id), "name": loaded.name})

    with UnitOfWork([UserMapper()], provider) as uow:
        users = Users(uow)
        users.delete(users.get_by_id(user.id))

    remaining = Users(UnitOfWork([UserMapper()], provider)).get_by_id(user.id)
    feed.append({"step": "deleted", "id": str(user.id), "present": remaining is not None})
    return feed

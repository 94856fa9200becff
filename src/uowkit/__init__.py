"""
uowkit public package initialization.

Unit of Work and Identity Map building blocks: entities with snapshot-based
dirty checking, pluggable entity mappers, and a session that commits all
pending changes in one transaction.
"""

from .adapters import ConnectionConfig, PostgresAdapter, SQLiteAdapter  # noqa: F401
from .core import Entity, EntityState, new_identity  # noqa: F401
from .errors import (  # noqa: F401
    ConfigurationError,
    MapperConfigurationError,
    PersistenceError,
    TransactionError,
)
from .mapping import EntityMapper, MapperRegistry  # noqa: F401
from .persistence import ConnectionProvider, IdentityMap, Transaction, UnitOfWork  # noqa: F401
from .repository import Repository  # noqa: F401

__all__ = [
    "ConnectionConfig",
    "ConnectionProvider",
    "ConfigurationError",
    "Entity",
    "EntityMapper",
    "EntityState",
    "IdentityMap",
    "MapperConfigurationError",
    "MapperRegistry",
    "PersistenceError",
    "PostgresAdapter",
    "Repository",
    "SQLiteAdapter",
    "Transaction",
    "TransactionError",
    "UnitOfWork",
    "new_identity",
]

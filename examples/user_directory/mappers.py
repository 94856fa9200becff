"""
Row mapping for :class:`User` against a ``users`` table.
"""

from __future__ import annotations

import uuid
from typing import Optional

from uowkit.adapters import DatabaseAdapter
from uowkit.mapping import EntityMapper
from uowkit.persistence import ConnectionProvider, Transaction

from .models import User

TABLE = "users"

_ID_COLUMN_TYPES = {"sqlite": "TEXT", "postgresql": "UUID"}


class UserMapper(EntityMapper[User]):
    entity_type = User

    def insert(self, transaction: Transaction, entity: User) -> None:
        dialect = transaction.dialect
        placeholder = dialect.parameter_placeholder()
        sql = (
            f"INSERT INTO {dialect.format_table(TABLE)} (id, name) "
            f"VALUES ({placeholder}, {placeholder})"
        )
        transaction.execute(sql, (dialect.adapt_value(entity.id), entity.name))

    def update(self, transaction: Transaction, entity: User) -> None:
        dialect = transaction.dialect
        placeholder = dialect.parameter_placeholder()
        sql = f"UPDATE {dialect.format_table(TABLE)} SET name = {placeholder} WHERE id = {placeholder}"
        transaction.execute(sql, (entity.name, dialect.adapt_value(entity.id)))

    def delete(self, transaction: Transaction, entity: User) -> None:
        dialect = transaction.dialect
        sql = f"DELETE FROM {dialect.format_table(TABLE)} WHERE id = {dialect.parameter_placeholder()}"
        transaction.execute(sql, (dialect.adapt_value(entity.id),))

    def fetch(self, id: uuid.UUID, connection: DatabaseAdapter) -> Optional[User]:
        dialect = connection.dialect
        sql = f"SELECT id, name FROM {dialect.format_table(TABLE)} WHERE id = {dialect.parameter_placeholder()}"
        row = connection.execute(sql, (dialect.adapt_value(id),)).fetchone()
        if row is None:
            return None
        user = User(row[1], id=uuid.UUID(str(row[0])))
        user.mark_clean()
        return user


def create_schema(provider: ConnectionProvider) -> None:
    with provider.transaction() as transaction:
        dialect = transaction.dialect
        id_type = _ID_COLUMN_TYPES.get(dialect.name, "TEXT")
        transaction.execute(
            f"CREATE TABLE IF NOT EXISTS {dialect.format_table(TABLE)} "
            f"(id {id_type} PRIMARY KEY, name TEXT NOT NULL)"
        )
        transaction.commit()

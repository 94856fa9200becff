"""
SQLite dialect implementation.
"""

from __future__ import annotations

import uuid
from typing import Final


class SQLiteDialect:
    """
    SQLite dialect using qmark param style.

    SQLite has no native UUID column type, so identities travel as their
    canonical string form.
    """

    name: Final[str] = "sqlite"
    param_style: Final[str] = "qmark"

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

    def format_table(self, table_name: str) -> str:
        return self.quote_identifier(table_name)

    def parameter_placeholder(self, position: int | None = None) -> str:
        return "?"

    def adapt_value(self, value: object) -> object:
        if isinstance(value, uuid.UUID):
            return str(value)
        return value

"""
Dialect strategy interface describing how mappers render portable SQL.
"""

from __future__ import annotations

from typing import Protocol


class Dialect(Protocol):
    """
    Strategy interface consumed by adapters and entity mappers.
    """

    @property
    def name(self) -> str: ...

    @property
    def param_style(self) -> str: ...

    def quote_identifier(self, identifier: str) -> str: ...

    def format_table(self, table_name: str) -> str: ...

    def parameter_placeholder(self, position: int | None = None) -> str: ...

    def adapt_value(self, value: object) -> object: ...

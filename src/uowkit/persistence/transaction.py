"""
Transaction scope bound to a single adapter connection.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator, Sequence

from ..adapters.base import DatabaseAdapter
from ..dialects.base import Dialect
from ..errors import TransactionError
from ..utils import get_logger

_IDLE = "idle"
_ACTIVE = "active"
_COMMITTED = "committed"
_ROLLED_BACK = "rolled_back"


class Transaction:
    """
    One begin/commit/rollback cycle on an open connection.

    Mappers receive the transaction and run their statements through
    :meth:`execute`; the raw adapter stays reachable as ``connection``.
    """

    def __init__(self, connection: DatabaseAdapter) -> None:
        self.connection = connection
        self._status = _IDLE
        self.logger = get_logger("persistence.transaction")

    @property
    def dialect(self) -> Dialect:
        return self.connection.dialect

    @property
    def active(self) -> bool:
        return self._status == _ACTIVE

    @property
    def status(self) -> str:
        return self._status

    def begin(self) -> None:
        if self._status != _IDLE:
            raise TransactionError(f"Cannot begin a transaction that is {self._status}.")
        self.connection.begin()
        self._status = _ACTIVE

    def commit(self) -> None:
        if not self.active:
            raise TransactionError("No active transaction to commit.")
        self.connection.commit()
        self._status = _COMMITTED

    def rollback(self) -> None:
        if not self.active:
            raise TransactionError("No active transaction to roll back.")
        self.connection.rollback()
        self._status = _ROLLED_BACK

    def execute(self, sql: str, params: Sequence[Any] | None = None) -> Any:
        if not self.active:
            raise TransactionError("Statements require an active transaction.")
        return self.connection.execute(sql, params)

    @classmethod
    @contextmanager
    def scope(cls, connection: DatabaseAdapter) -> Generator["Transaction", None, None]:
        """
        Begin a transaction and roll it back unless the block commits it.
        """

        transaction = cls(connection)
        transaction.begin()
        try:
            yield transaction
        except BaseException:
            if transaction.active:
                try:
                    transaction.rollback()
                except Exception:
                    # the original failure is the one the caller needs to see
                    transaction.logger.exception("Rollback failed after an aborted transaction")
            raise
        if transaction.active:
            transaction.rollback()

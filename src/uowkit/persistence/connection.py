"""
Connection provider opening short-lived adapter connections.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Generator, Optional

from ..adapters.base import ConnectionConfig, DatabaseAdapter, adapter_for_config
from ..utils import get_logger
from .transaction import Transaction

AdapterFactory = Callable[[], DatabaseAdapter]


class ConnectionProvider:
    """
    Hands out freshly opened connections that are always closed on exit.
    """

    def __init__(
        self,
        config: ConnectionConfig,
        *,
        adapter_factory: Optional[AdapterFactory] = None,
    ) -> None:
        self.config = config
        self.adapter_factory = adapter_factory or adapter_for_config(config)
        self.logger = get_logger("persistence.connection")

    @classmethod
    def from_dsn(
        cls, dsn: str, *, adapter_factory: Optional[AdapterFactory] = None, **kwargs: Any
    ) -> "ConnectionProvider":
        return cls(ConnectionConfig.from_dsn(dsn, **kwargs), adapter_factory=adapter_factory)

    @classmethod
    def from_env(
        cls, env_var: str, *, adapter_factory: Optional[AdapterFactory] = None, **kwargs: Any
    ) -> "ConnectionProvider":
        return cls(ConnectionConfig.from_env(env_var, **kwargs), adapter_factory=adapter_factory)

    @contextmanager
    def connection(self) -> Generator[DatabaseAdapter, None, None]:
        adapter = self.adapter_factory()
        adapter.connect(self.config)
        self.logger.debug("Connection opened (%s)", self.config.descriptive_label())
        try:
            yield adapter
        finally:
            adapter.close()
            self.logger.debug("Connection closed (%s)", self.config.descriptive_label())

    @contextmanager
    def transaction(self) -> Generator[Transaction, None, None]:
        """
        Open a connection and a transaction scope on it; commit is left to the caller.
        """

        with self.connection() as connection:
            with Transaction.scope(connection) as transaction:
                yield transaction

    def __repr__(self) -> str:
        return f"ConnectionProvider[{self.config.redacted_dsn()}]"

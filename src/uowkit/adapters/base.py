"""
Adapter protocol definitions and connection configuration for uowkit.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Callable, Protocol, Sequence

from ..dialects.base import Dialect
from ..errors import PersistenceError
from ..security.dsns import DSNConfig, parse_dsn


class AdapterError(PersistenceError):
    """Base error for adapter-related failures."""


class AdapterConfigurationError(AdapterError):
    """Raised when configuration or required dependencies are invalid."""


class AdapterConnectionError(AdapterError):
    """Raised when establishing or using a connection fails."""


class AdapterExecutionError(AdapterError):
    """Raised when SQL execution or parameter validation fails."""


@dataclass
class SSLConfig:
    mode: str | None = None
    rootcert: str | None = None
    cert: str | None = None
    key: str | None = None

    def postgres_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {}
        if self.mode:
            options["sslmode"] = self.mode
        if self.rootcert:
            options["sslrootcert"] = self.rootcert
        if self.cert:
            options["sslcert"] = self.cert
        if self.key:
            options["sslkey"] = self.key
        return options


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_SSL_KEYS = {"sslmode": "mode", "sslrootcert": "rootcert", "sslcert": "cert", "sslkey": "key"}


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise AdapterConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def _parse_number(value: str, *, key: str, kind: Callable[[str], Any]) -> Any:
    try:
        return kind(value)
    except ValueError as exc:
        raise AdapterConfigurationError(
            f"Invalid {kind.__name__} value for '{key}': {value!r}"
        ) from exc


def _parse_ssl(query: dict[str, str]) -> SSLConfig | None:
    found = {attr: query.pop(key) for key, attr in _SSL_KEYS.items() if key in query}
    if not found:
        return None
    return SSLConfig(**found)


@dataclass
class ConnectionConfig:
    """
    Normalized connection configuration for adapters.
    """

    url: str
    autocommit: bool = False
    isolation_level: str | None = None
    timeout: float | None = None
    options: dict[str, Any] | None = None
    ssl: SSLConfig | None = None
    dsn: DSNConfig | None = None
    source: str | None = None

    @classmethod
    def from_dsn(cls, dsn: str, **kwargs: Any) -> "ConnectionConfig":
        """
        Build a connection config by parsing the DSN string.

        Keyword arguments win over values found in the DSN query string.
        """

        parsed = parse_dsn(dsn)
        query = dict(parsed.query)

        parsed_autocommit = (
            _parse_bool(query.pop("autocommit"), key="autocommit") if "autocommit" in query else None
        )
        parsed_timeout = (
            _parse_number(query.pop("timeout"), key="timeout", kind=float) if "timeout" in query else None
        )
        parsed_isolation_level = query.pop("isolation_level", None)
        parsed_ssl = _parse_ssl(query)

        options: dict[str, Any] = {}
        for key, value in query.items():
            if key == "connect_timeout":
                options[key] = _parse_number(value, key=key, kind=int)
            else:
                options[key] = value
        options.update(kwargs.pop("options", None) or {})

        autocommit = kwargs.pop("autocommit", parsed_autocommit)
        return cls(
            url=dsn,
            dsn=parsed,
            autocommit=bool(autocommit),
            isolation_level=kwargs.pop("isolation_level", parsed_isolation_level),
            timeout=kwargs.pop("timeout", parsed_timeout),
            options=options or None,
            ssl=kwargs.pop("ssl", parsed_ssl),
            **kwargs,
        )

    @classmethod
    def from_env(cls, env_var: str, **kwargs: Any) -> "ConnectionConfig":
        """
        Build a config from an environment variable containing a DSN.
        """

        value = os.getenv(env_var)
        if not value:
            raise AdapterConfigurationError(f"Environment variable {env_var} is not set")
        return cls.from_dsn(value, source=env_var, **kwargs)

    @property
    def scheme(self) -> str:
        if self.dsn:
            return self.dsn.scheme
        return parse_dsn(self.url).scheme

    def redacted_dsn(self) -> str:
        """
        Return a DSN safe for logging (credentials removed).
        """

        if self.dsn:
            return self.dsn.redacted()
        return self.url

    def descriptive_label(self) -> str:
        redacted = self.redacted_dsn()
        if self.source:
            return f"{self.source} ({redacted})"
        return redacted


class DatabaseAdapter(Protocol):
    """
    A single connection to the backing store, as seen by mappers and transactions.
    """

    dialect: Dialect

    def connect(self, config: ConnectionConfig) -> Any:
        """
        Establish a connection handle using the supplied configuration.
        """

    def close(self) -> None:
        """
        Close underlying resources. Implementations should be idempotent.
        """

    def execute(self, sql: str, params: Sequence[Any] | None = None) -> Any:
        """
        Execute a single SQL statement returning a cursor-like object.
        """

    def begin(self) -> None:
        """
        Start a transaction.
        """

    def commit(self) -> None:
        """
        Commit the current transaction.
        """

    def rollback(self) -> None:
        """
        Roll back the current transaction.
        """


def adapter_for_config(config: ConnectionConfig) -> Callable[[], DatabaseAdapter]:
    """
    Return a factory building the adapter matching the DSN scheme of ``config``.
    """

    from .postgres import PostgresAdapter
    from .sqlite import SQLiteAdapter

    factories: dict[str, Callable[[], DatabaseAdapter]] = {
        "sqlite": SQLiteAdapter,
        "postgres": PostgresAdapter,
        "postgresql": PostgresAdapter,
    }
    scheme = config.scheme
    try:
        return factories[scheme]
    except KeyError as exc:
        raise AdapterConfigurationError(
            f"No adapter available for scheme '{scheme}' ({config.redacted_dsn()})"
        ) from exc

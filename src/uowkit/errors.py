"""
Error hierarchy shared across uowkit.

Lookups that find nothing return ``None``; exceptions are reserved for
misconfiguration and for failures of the backing store.
"""

from __future__ import annotations


class ConfigurationError(Exception):
    """Raised when uowkit components are wired together incorrectly."""


class MapperConfigurationError(ConfigurationError):
    """Raised when zero or several mappers claim the same entity type."""


class PersistenceError(RuntimeError):
    """Base error for failures raised while talking to the backing store."""


class TransactionError(PersistenceError):
    """Raised when a transaction scope is used out of order."""

"""
Persistence layer components: unit of work, identity map, connections and transactions.
"""

from .connection import ConnectionProvider
from .identity_map import IdentityMap
from .transaction import Transaction
from .unit_of_work import UnitOfWork

__all__ = ["ConnectionProvider", "IdentityMap", "Transaction", "UnitOfWork"]

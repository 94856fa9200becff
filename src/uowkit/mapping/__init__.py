"""
Entity mapper capability and the registry resolving mappers by entity type.
"""

from .base import EntityMapper
from .registry import MapperRegistry

__all__ = ["EntityMapper", "MapperRegistry"]

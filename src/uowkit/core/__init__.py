"""
Core building blocks: tracked entities and their state snapshots.
"""

from .entity import Entity, EntityState, new_identity

__all__ = ["Entity", "EntityState", "new_identity"]

"""
Ordered mapper registry with per-type resolution caching.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from ..errors import MapperConfigurationError
from ..utils import get_logger
from .base import EntityMapper


class MapperRegistry:
    """
    Resolves the single mapper responsible for an entity type.

    Resolution asks every registered mapper, in registration order, whether
    it ``handles`` the type. Exactly one must answer yes. The outcome is
    cached per type until the registry changes.
    """

    def __init__(self, mappers: Iterable[EntityMapper] = ()) -> None:
        self._mappers: List[EntityMapper] = []
        self._resolved: Dict[type, EntityMapper] = {}
        self.logger = get_logger("mapping.registry")
        for mapper in mappers:
            self.register(mapper)

    def register(self, mapper: EntityMapper) -> None:
        entity_type = getattr(mapper, "entity_type", None)
        if not isinstance(entity_type, type):
            raise MapperConfigurationError(
                f"Mapper {mapper.__class__.__name__} does not declare an entity_type."
            )
        self._mappers.append(mapper)
        self._resolved.clear()

    def mapper_for(self, entity_type: type) -> EntityMapper:
        cached = self._resolved.get(entity_type)
        if cached is not None:
            return cached

        matches = [mapper for mapper in self._mappers if mapper.handles(entity_type)]
        if not matches:
            raise MapperConfigurationError(
                f"No mapper registered for entity type '{entity_type.__name__}'."
            )
        if len(matches) > 1:
            names = ", ".join(repr(mapper) for mapper in matches)
            raise MapperConfigurationError(
                f"Entity type '{entity_type.__name__}' is claimed by several mappers: {names}."
            )

        mapper = matches[0]
        self._resolved[entity_type] = mapper
        self.logger.debug("Resolved %s to %r", entity_type.__name__, mapper)
        return mapper

    def __len__(self) -> int:
        return len(self._mappers)

    def __iter__(self):
        return iter(list(self._mappers))

"""Creation, grouping and cleanup of entities."""

from __future__ import annotations

from collections import defaultdict

from pillarsofself.entity import Entity


class EntityManager:
    """Owns entities; new ones become visible and dead ones vanish on update."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []
        self._entity_map: defaultdict[str, list[Entity]] = defaultdict(list)
        self._total_entities = 0
        self._to_add: list[Entity] = []

    def add_entity(self, tag: str) -> Entity:
        """Create an entity that joins the live lists at the next update."""
        entity = Entity(self._total_entities, tag)
        self._total_entities += 1
        self._to_add.append(entity)
        return entity

    def get_entities(self, tag: str | None = None) -> list[Entity]:
        """All live entities, or those with the given tag."""
        if tag is None:
            return self._entities
        return self._entity_map[tag]

    def update(self) -> None:
        """Drop destroyed entities, then admit the ones added since last time."""
        self._entities[:] = [e for e in self._entities if e.is_active]
        for group in self._entity_map.values():
            group[:] = [e for e in group if e.is_active]

        for entity in self._to_add:
            self._entities.append(entity)
            self._entity_map[entity.tag].append(entity)
        self._to_add.clear()
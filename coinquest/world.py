"""A world: the set of entities in a scene, with deferred removal."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Optional

from coinquest.entity import Entity


class World:
    """Holds entities and removes marked ones when asked."""

    def __init__(self) -> None:
        self._entities: set[Entity] = set()
        self._marked: set[Entity] = set()

    @property
    def entities(self) -> frozenset[Entity]:
        """All entities currently in the world."""
        return frozenset(self._entities)

    @property
    def marked_for_removal(self) -> frozenset[Entity]:
        """Entities waiting to be removed by ``delete_marked_entities``."""
        return frozenset(self._marked)

    def add(self) -> Entity:
        """Create a new entity in this world and return it."""
        entity = Entity(world=self)
        self._entities.add(entity)
        return entity

    def deserialize(self, data, parent: Optional[Entity] = None) -> None:
        """Add the entities of a JSON array, recursing into their children."""
        if not isinstance(data, (list, tuple)):
            return
        for entity_data in data:
            entity = self.add()
            entity.parent = parent
            entity.deserialize(entity_data)
            if isinstance(entity_data, Mapping) and "children" in entity_data:
                self.deserialize(entity_data["children"], entity)

    def deserialize_entity(self, data, parent: Optional[Entity] = None) -> Optional[Entity]:
        """Add one entity and its children from a JSON object; None if not an object."""
        if not isinstance(data, Mapping):
            return None
        entity = self.add()
        entity.parent = parent
        entity.deserialize(data)
        if "children" in data:
            self.deserialize(data["children"], entity)
        return entity

    def mark_for_removal(self, entity: Entity) -> None:
        """Mark an entity of this world, and its descendants, for removal."""
        if entity not in self._entities:
            return
        self._marked.add(entity)
        for child in [e for e in self._entities if e.parent is entity]:
            if child not in self._marked:
                self.mark_for_removal(child)

    def delete_marked_entities(self) -> None:
        """Remove every marked entity from the world."""
        for entity in self._marked:
            if entity in self._entities:
                self._entities.discard(entity)
                entity._world = None
        self._marked.clear()

    def clear(self) -> None:
        """Remove every entity."""
        self.delete_marked_entities()
        for entity in self._entities:
            entity._world = None
        self._entities.clear()

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities))

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities
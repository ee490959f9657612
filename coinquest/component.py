"""Base classes for data containers attached to entities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar


class Component(ABC):
    """Data attached to an entity; ``ID`` names the component type."""

    ID: ClassVar[str] = "Component"
    owner: Any = None

    @abstractmethod
    def deserialize(self, data: Mapping) -> None:
        """Read the component's data from a JSON-like mapping."""


class TagComponent(Component):
    """A component without data, used to mark an entity."""

    def deserialize(self, data: Mapping) -> None:
        """Tags hold no data, so nothing is read."""
        return None
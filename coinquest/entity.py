"""Entities: named, parented holders of a transform and a list of components."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Optional, TypeVar

import numpy as np

from coinquest.component import Component
from coinquest.components.camera import CameraComponent
from coinquest.components.gameplay import (
    CoinComponent,
    CollisionComponent,
    PlayerComponent,
    PostProcessComponent,
)
from coinquest.components.light import LightComponent, LightSpectrumComponent
from coinquest.components.mesh_renderer import MeshRendererComponent
from coinquest.components.movement import (
    FreeCameraControllerComponent,
    MovementComponent,
    PlayerMovementControllerComponent,
)
from coinquest.components.tags import (
    BlurTagComponent,
    HeartTagComponent,
    ObstacleTagComponent,
    PowerupTagComponent,
    WarnTagComponent,
)
from coinquest.transform import Transform

if TYPE_CHECKING:
    from coinquest.world import World

C = TypeVar("C", bound=Component)


class Entity:
    """An object in a world; its role is defined by the components it holds."""

    def __init__(self, world: Optional["World"] = None, name: str = "",
                 parent: Optional["Entity"] = None) -> None:
        self._world = world
        self._components: list[Component] = []
        self.name = name
        self.parent = parent
        self.local_transform = Transform()

    @property
    def world(self) -> Optional["World"]:
        """The world that owns this entity."""
        return self._world

    @property
    def components(self) -> tuple[Component, ...]:
        """The components held by this entity, in the order they were added."""
        return tuple(self._components)

    def _ancestors(self):
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def world_translation(self) -> np.ndarray:
        """Sum of this entity's position and the positions of all its ancestors."""
        total = np.array(self.local_transform.position, dtype=float)
        for ancestor in self._ancestors():
            total = ancestor.local_transform.position + total
        return total

    def local_to_world_matrix(self) -> np.ndarray:
        """Transform from this entity's local space to world space."""
        matrix = self.local_transform.to_mat4()
        for ancestor in self._ancestors():
            matrix = ancestor.local_transform.to_mat4() @ matrix
        return matrix

    def deserialize(self, data) -> None:
        """Read the name, transform and components from a JSON-like mapping."""
        if not isinstance(data, Mapping):
            return
        self.name = data.get("name", self.name)
        self.local_transform.deserialize(data)
        components = data.get("components")
        if isinstance(components, Sequence) and not isinstance(components, (str, bytes)):
            for component_data in components:
                deserialize_component(component_data, self)

    def add_component(self, component_type: type[C]) -> C:
        """Create a component of the given type, attach it and return it."""
        if not (isinstance(component_type, type) and issubclass(component_type, Component)):
            raise TypeError(f"{component_type!r} is not a component type")
        component = component_type()
        component.owner = self
        self._components.append(component)
        return component

    def get_component(self, component_type: type[C]) -> Optional[C]:
        """The first component that is an instance of the given type, or None."""
        return next((c for c in self._components if isinstance(c, component_type)), None)

    def get_component_at(self, index: int, component_type: type[C] = Component) -> Optional[C]:
        """The component at ``index`` if it is of the given type, else None."""
        if not 0 <= index < len(self._components):
            return None
        component = self._components[index]
        return component if isinstance(component, component_type) else None

    def delete_component(self, component_type: type[Component]) -> None:
        """Remove the first component that is an instance of the given type."""
        component = self.get_component(component_type)
        if component is not None:
            self.remove_component(component)

    def delete_component_at(self, index: int) -> None:
        """Remove the component at ``index``; out-of-range indices do nothing."""
        if 0 <= index < len(self._components):
            component = self._components.pop(index)
            component.owner = None

    def remove_component(self, component: Component) -> None:
        """Remove this exact component if the entity holds it."""
        for position, held in enumerate(self._components):
            if held is component:
                del self._components[position]
                component.owner = None
                return

    def __repr__(self) -> str:
        return f"Entity(name={self.name!r}, components={len(self._components)})"


_COMPONENT_TYPES: dict[str, type[Component]] = {
    cls.ID: cls
    for cls in (
        CameraComponent,
        FreeCameraControllerComponent,
        MovementComponent,
        MeshRendererComponent,
        LightComponent,
        PlayerComponent,
        PlayerMovementControllerComponent,
        CoinComponent,
        ObstacleTagComponent,
        PowerupTagComponent,
        HeartTagComponent,
        CollisionComponent,
        PostProcessComponent,
        BlurTagComponent,
        WarnTagComponent,
        LightSpectrumComponent,
    )
}


def deserialize_component(data, entity: Entity) -> Optional[Component]:
    """Add to ``entity`` the component named by ``data["type"]`` and read it.

    Unknown types are ignored and give None.
    """
    if not isinstance(data, Mapping):
        raise TypeError(f"component data must be an object, got {data!r}")
    component_type = _COMPONENT_TYPES.get(data.get("type", ""))
    if component_type is None:
        return None
    component = entity.add_component(component_type)
    component.deserialize(data)
    return component
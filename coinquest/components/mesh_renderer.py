"""Component that draws a named mesh with a named material."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from coinquest.assets import registry
from coinquest.component import Component
from coinquest.loaders import MATERIALS, MESHES


def _required_name(data: Mapping, key: str) -> str:
    if key not in data:
        raise KeyError(f"mesh renderer needs a {key!r} entry")
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, got {value!r}")
    return value


@dataclass(eq=False)
class MeshRendererComponent(Component):
    """A mesh and the material to draw it with, at the owner's transform."""

    ID: ClassVar[str] = "Mesh Renderer"

    mesh: Any = None
    material: Any = None

    def deserialize(self, data) -> None:
        """Look up the mesh and material by name among loaded assets.

        Names that are not loaded leave the field as None.
        """
        if not isinstance(data, Mapping):
            return
        self.mesh = registry(MESHES).get(_required_name(data, "mesh"))
        self.material = registry(MATERIALS).get(_required_name(data, "material"))
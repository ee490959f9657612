"""Load named meshes and materials from JSON-like asset descriptions."""

from __future__ import annotations

from collections.abc import Mapping

from coinquest.assets import registry
from coinquest.material import SAMPLERS, SHADERS, TEXTURES, create_material_from_type
from coinquest.mesh import load_obj

MESHES = "meshes"
MATERIALS = "materials"

_ALL_KINDS = (SHADERS, TEXTURES, SAMPLERS, MESHES, MATERIALS)


def load_meshes(data) -> None:
    """Load meshes given as ``{name: "path/to/model.obj", ...}``."""
    if not isinstance(data, Mapping):
        return
    meshes = registry(MESHES)
    for name, path in data.items():
        if not isinstance(path, str):
            raise TypeError(f"mesh {name!r} must be given as a path string, got {path!r}")
        meshes.register(name, load_obj(path))


def load_materials(data) -> None:
    """Load materials given as ``{name: {"type": ..., "shader": ..., ...}, ...}``.

    Shaders, textures and samplers that materials refer to must already be loaded.
    """
    if not isinstance(data, Mapping):
        return
    materials = registry(MATERIALS)
    for name, description in data.items():
        type_name = description.get("type", "") if isinstance(description, Mapping) else ""
        material = create_material_from_type(type_name)
        material.deserialize(description)
        materials.register(name, material)


def deserialize_all_assets(asset_data) -> None:
    """Load the ``meshes`` and ``materials`` sections of an asset description."""
    if not isinstance(asset_data, Mapping):
        return
    if "meshes" in asset_data:
        load_meshes(asset_data["meshes"])
    if "materials" in asset_data:
        load_materials(asset_data["materials"])


def clear_all_assets() -> None:
    """Forget every loaded asset of every kind."""
    for kind in _ALL_KINDS:
        registry(kind).clear()
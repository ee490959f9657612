"""Materials: a pipeline state, a shader and the uniforms a shader needs."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from coinquest.assets import registry
from coinquest.pipeline_state import PipelineState

SHADERS = "shaders"
TEXTURES = "textures"
SAMPLERS = "samplers"


def _read_vec4(data: Mapping, key: str, default: tuple) -> tuple[float, float, float, float]:
    if key not in data:
        return default
    values = tuple(float(v) for v in data[key])
    if len(values) != 4:
        raise ValueError(f"{key!r} must have 4 components, got {len(values)}")
    return values


def _read_name(data: Mapping, key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, got {value!r}")
    return value


@dataclass
class Material:
    """Pipeline state, shader and transparency flag shared by all materials."""

    pipeline_state: PipelineState = field(default_factory=PipelineState)
    shader: Any = None
    transparent: bool = False

    def deserialize(self, data) -> None:
        """Read the material; the shader is looked up by name among loaded shaders."""
        if not isinstance(data, Mapping):
            return
        if "pipelineState" in data:
            self.pipeline_state.deserialize(data["pipelineState"])
        shader_name = data["shader"]
        if not isinstance(shader_name, str):
            raise TypeError(f"'shader' must be a string, got {shader_name!r}")
        self.shader = registry(SHADERS).get(shader_name)
        transparent = data.get("transparent", False)
        if not isinstance(transparent, bool):
            raise TypeError(f"'transparent' must be a boolean, got {transparent!r}")
        self.transparent = transparent


@dataclass
class TintedMaterial(Material):
    """A material with a single tint color."""

    tint: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)

    def deserialize(self, data) -> None:
        super().deserialize(data)
        if not isinstance(data, Mapping):
            return
        self.tint = _read_vec4(data, "tint", (1.0, 1.0, 1.0, 1.0))


@dataclass
class TexturedMaterial(TintedMaterial):
    """A tinted material sampling a texture, discarding pixels below an alpha threshold."""

    texture: Any = None
    depth_texture: Any = None
    sampler: Any = None
    alpha_threshold: float = 0.0

    def deserialize(self, data) -> None:
        super().deserialize(data)
        if not isinstance(data, Mapping):
            return
        self.alpha_threshold = float(data.get("alphaThreshold", 0.0))
        self.texture = registry(TEXTURES).get(_read_name(data, "texture", ""))
        self.sampler = registry(SAMPLERS).get(_read_name(data, "sampler", ""))


@dataclass
class LitMaterial(TintedMaterial):
    """A tinted material with the texture maps used for lighting."""

    sampler: Any = None
    albedo_map: Any = None
    specular_map: Any = None
    ambient_occlusion_map: Any = None
    roughness_map: Any = None
    emissive_map: Any = None

    def deserialize(self, data) -> None:
        super().deserialize(data)
        if not isinstance(data, Mapping):
            return
        textures = registry(TEXTURES)
        self.sampler = registry(SAMPLERS).get(_read_name(data, "sampler", ""))
        self.albedo_map = textures.get(_read_name(data, "albedo", "albedo"))
        self.specular_map = textures.get(_read_name(data, "specular", "black"))
        self.emissive_map = textures.get(_read_name(data, "emissive", "black"))
        self.roughness_map = textures.get(_read_name(data, "roughness", "black"))
        self.ambient_occlusion_map = textures.get(
            _read_name(data, "ambient_occlusion", "black")
        )


_MATERIAL_TYPES: dict[str, type[Material]] = {
    "tinted": TintedMaterial,
    "textured": TexturedMaterial,
    "lit": LitMaterial,
}


def create_material_from_type(type_name: str) -> Material:
    """Return a new material of the named type; unknown names give a plain Material."""
    return _MATERIAL_TYPES.get(type_name, Material)()
"""Render pipeline options that a material carries: culling, depth, blending, masks."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TypeVar


class CullFace(IntEnum):
    """Which faces are culled."""

    GL_FRONT = 0x0404
    GL_BACK = 0x0405
    GL_FRONT_AND_BACK = 0x0408


class FrontFace(IntEnum):
    """Winding order that marks a face as front facing."""

    GL_CW = 0x0900
    GL_CCW = 0x0901


class CompareFunction(IntEnum):
    """Depth comparison functions."""

    GL_NEVER = 0x0200
    GL_LESS = 0x0201
    GL_EQUAL = 0x0202
    GL_LEQUAL = 0x0203
    GL_GREATER = 0x0204
    GL_NOTEQUAL = 0x0205
    GL_GEQUAL = 0x0206
    GL_ALWAYS = 0x0207


class BlendEquation(IntEnum):
    """How source and destination colors are combined."""

    GL_FUNC_ADD = 0x8006
    GL_MIN = 0x8007
    GL_MAX = 0x8008
    GL_FUNC_SUBTRACT = 0x800A
    GL_FUNC_REVERSE_SUBTRACT = 0x800B


class BlendFactor(IntEnum):
    """Factors applied to source and destination colors when blending."""

    GL_ZERO = 0
    GL_ONE = 1
    GL_SRC_COLOR = 0x0300
    GL_ONE_MINUS_SRC_COLOR = 0x0301
    GL_SRC_ALPHA = 0x0302
    GL_ONE_MINUS_SRC_ALPHA = 0x0303
    GL_DST_ALPHA = 0x0304
    GL_ONE_MINUS_DST_ALPHA = 0x0305
    GL_DST_COLOR = 0x0306
    GL_ONE_MINUS_DST_COLOR = 0x0307
    GL_SRC_ALPHA_SATURATE = 0x0308
    GL_CONSTANT_COLOR = 0x8001
    GL_ONE_MINUS_CONSTANT_COLOR = 0x8002
    GL_CONSTANT_ALPHA = 0x8003
    GL_ONE_MINUS_CONSTANT_ALPHA = 0x8004


E = TypeVar("E", bound=IntEnum)


def _read_bool(config: Mapping, key: str, current: bool) -> bool:
    value = config.get(key, current)
    if not isinstance(value, bool):
        raise TypeError(f"{key!r} must be a boolean, got {value!r}")
    return value


def _read_enum(config: Mapping, key: str, enum_type: type[E], current: E) -> E:
    """Look up a GL name; unknown or absent names keep the current value."""
    name = config.get(key, "")
    if not isinstance(name, str):
        raise TypeError(f"{key!r} must be a string, got {name!r}")
    return enum_type.__members__.get(name, current)


def _read_floats(config: Mapping, key: str, current: tuple) -> tuple[float, ...]:
    if key not in config:
        return current
    values = tuple(float(v) for v in config[key])
    if len(values) != len(current):
        raise ValueError(f"{key!r} must have {len(current)} components, got {len(values)}")
    return values


def _read_bools(config: Mapping, key: str, current: tuple) -> tuple[bool, ...]:
    if key not in config:
        return current
    values = tuple(config[key])
    if len(values) != len(current) or not all(isinstance(v, bool) for v in values):
        raise ValueError(f"{key!r} must hold {len(current)} booleans, got {values!r}")
    return values


@dataclass
class FaceCulling:
    enabled: bool = False
    culled_face: CullFace = CullFace.GL_BACK
    front_face: FrontFace = FrontFace.GL_CCW


@dataclass
class DepthTesting:
    enabled: bool = False
    function: CompareFunction = CompareFunction.GL_LEQUAL


@dataclass
class Blending:
    enabled: bool = False
    equation: BlendEquation = BlendEquation.GL_FUNC_ADD
    source_factor: BlendFactor = BlendFactor.GL_SRC_ALPHA
    destination_factor: BlendFactor = BlendFactor.GL_ONE_MINUS_SRC_ALPHA
    constant_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)


@dataclass
class PipelineState:
    """Pipeline options that shaders cannot control."""

    face_culling: FaceCulling = field(default_factory=FaceCulling)
    depth_testing: DepthTesting = field(default_factory=DepthTesting)
    blending: Blending = field(default_factory=Blending)
    color_mask: tuple[bool, bool, bool, bool] = (True, True, True, True)
    depth_mask: bool = True

    def deserialize(self, data) -> None:
        """Read options from a JSON-like mapping; absent keys keep their values."""
        if not isinstance(data, Mapping):
            return

        config = data.get("faceCulling")
        if isinstance(config, Mapping):
            culling = self.face_culling
            culling.enabled = _read_bool(config, "enabled", culling.enabled)
            culling.culled_face = _read_enum(config, "culledFace", CullFace, culling.culled_face)
            culling.front_face = _read_enum(config, "frontFace", FrontFace, culling.front_face)

        config = data.get("depthTesting")
        if isinstance(config, Mapping):
            depth = self.depth_testing
            depth.enabled = _read_bool(config, "enabled", depth.enabled)
            depth.function = _read_enum(config, "function", CompareFunction, depth.function)

        config = data.get("blending")
        if isinstance(config, Mapping):
            blend = self.blending
            blend.enabled = _read_bool(config, "enabled", blend.enabled)
            blend.equation = _read_enum(config, "equation", BlendEquation, blend.equation)
            blend.source_factor = _read_enum(
                config, "sourceFactor", BlendFactor, blend.source_factor
            )
            blend.destination_factor = _read_enum(
                config, "destinationFactor", BlendFactor, blend.destination_factor
            )
            blend.constant_color = _read_floats(config, "constantColor", blend.constant_color)

        self.color_mask = _read_bools(data, "colorMask", self.color_mask)
        self.depth_mask = _read_bool(data, "depthMask", self.depth_mask)
"""Light components, including one whose color cycles through hues."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional

from coinquest.component import Component

Vec3 = tuple[float, float, float]

# Approximately (1, 1, 1) / sqrt(3): the gray axis hue rotates around.
_HUE_AXIS: Vec3 = (0.57735, 0.57735, 0.57735)


class LightType(Enum):
    DIRECTIONAL = "directional"
    POINT = "point"
    SPOT = "spot"
    SKY = "sky"


@dataclass
class Attenuation:
    quadratic: float = 0.0
    linear: float = 0.0
    constant: float = 1.0


@dataclass
class SpotAngle:
    """Inner and outer cone angles in radians."""

    inner: float = 0.0
    outer: float = 0.0


@dataclass
class SkyLight:
    top_color: Vec3 = (0.0, 0.0, 0.0)
    middle_color: Vec3 = (0.0, 0.0, 0.0)
    bottom_color: Vec3 = (0.0, 0.0, 0.0)


def _read_vec3(data: Mapping, key: str, default: Vec3) -> Vec3:
    if key not in data:
        return default
    values = tuple(float(v) for v in data[key])
    if len(values) != 3:
        raise ValueError(f"{key!r} must have 3 components, got {len(values)}")
    return values


def _read_bool(data: Mapping, key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise TypeError(f"{key!r} must be a boolean, got {value!r}")
    return value


def _section(data: Mapping, key: str) -> Mapping:
    section = data.get(key, {})
    if not isinstance(section, Mapping):
        raise TypeError(f"{key!r} must be an object, got {section!r}")
    return section


def _read_attenuation(data: Mapping) -> Attenuation:
    section = _section(data, "attenuation")
    return Attenuation(
        quadratic=float(section.get("quadratic", 0.0)),
        linear=float(section.get("linear", 0.0)),
        constant=float(section.get("constant", 1.0)),
    )


@dataclass(eq=False)
class LightComponent(Component):
    """A light source; which fields matter depends on ``type_light``."""

    ID: ClassVar[str] = "Light"

    type_light: Optional[LightType] = None
    enabled: bool = True
    color: Vec3 = (1.0, 1.0, 1.0)
    direction: Vec3 = (0.0, 0.0, 0.0)
    attenuation: Attenuation = field(default_factory=Attenuation)
    spot_angle: SpotAngle = field(default_factory=SpotAngle)
    sky_light: SkyLight = field(default_factory=SkyLight)

    def deserialize(self, data) -> None:
        """Read the light; raises ValueError for an unknown ``typeLight``."""
        if not isinstance(data, Mapping):
            return
        type_name = data.get("typeLight", "")
        self.enabled = _read_bool(data, "enabled", self.enabled)
        self.color = _read_vec3(data, "color", self.color)

        if type_name == "directional":
            self.type_light = LightType.DIRECTIONAL
            self.direction = _read_vec3(data, "direction", self.direction)
        elif type_name == "point":
            self.type_light = LightType.POINT
            self.attenuation = _read_attenuation(data)
        elif type_name == "spot":
            self.type_light = LightType.SPOT
            self.direction = _read_vec3(data, "direction", self.direction)
            angles = _section(data, "spot_angle")
            self.spot_angle = SpotAngle(
                inner=math.radians(float(angles.get("inner", 0.0))),
                outer=math.radians(float(angles.get("outer", 0.0))),
            )
            self.attenuation = _read_attenuation(data)
        elif type_name == "sky":
            self.type_light = LightType.SKY
            sky = _section(data, "sky_light")
            black = (0.0, 0.0, 0.0)
            self.sky_light = SkyLight(
                top_color=_read_vec3(sky, "top_color", black),
                middle_color=_read_vec3(sky, "middle_color", black),
                bottom_color=_read_vec3(sky, "bottom_color", black),
            )
        else:
            raise ValueError(f"Unknown light type {type_name}")


def hue_shift(color, hue: float) -> Vec3:
    """Rotate an RGB color by ``hue`` radians around the gray axis."""
    r, g, b = (float(c) for c in color)
    kx, ky, kz = _HUE_AXIS
    cos_angle, sin_angle = math.cos(hue), math.sin(hue)
    cross = (ky * b - kz * g, kz * r - kx * b, kx * g - ky * r)
    dot = kx * r + ky * g + kz * b
    return tuple(
        c * cos_angle + x * sin_angle + k * dot * (1.0 - cos_angle)
        for c, x, k in zip((r, g, b), cross, _HUE_AXIS)
    )


@dataclass(eq=False)
class LightSpectrumComponent(LightComponent):
    """A light whose color cycles through hues over time."""

    ID: ClassVar[str] = "LightSpectrum"

    def get_color(self, time: float) -> Vec3:
        """The light's color shifted in hue by ``time`` radians."""
        return hue_shift(self.color, time)
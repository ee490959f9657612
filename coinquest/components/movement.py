"""Components that move their entity: plain motion, free camera and player control."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar

from coinquest.component import Component

Vec3 = tuple[float, float, float]


def _read_vec3(data: Mapping, key: str, default: Vec3) -> Vec3:
    if key not in data:
        return default
    raw = data[key]
    if isinstance(raw, (str, bytes)) or not hasattr(raw, "__iter__"):
        raise TypeError(f"{key!r} must be a list of 3 numbers, got {raw!r}")
    values = tuple(_as_float(key, v) for v in raw)
    if len(values) != 3:
        raise ValueError(f"{key!r} must have 3 components, got {len(values)}")
    return values


def _as_float(key: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number, got {value!r}")
    return float(value)


def _read_float(data: Mapping, key: str, default: float) -> float:
    return _as_float(key, data.get(key, default))


def _radians3(values: Vec3) -> Vec3:
    return tuple(math.radians(v) for v in values)


@dataclass(eq=False)
class MovementComponent(Component):
    """Linear and angular motion, with accelerations, limits and mass.

    Angular quantities are stored in radians and read from degrees.
    """

    ID: ClassVar[str] = "Movement"

    linear_velocity: Vec3 = (0.0, 0.0, 0.0)
    angular_velocity: Vec3 = (0.0, 0.0, 0.0)
    linear_acceleration: Vec3 = (0.0, 0.0, 0.0)
    angular_acceleration: Vec3 = (0.0, 0.0, 0.0)
    max_linear_velocity_component: float = 1000.0
    max_angular_velocity_component: float = 1000.0
    mass: float = 0.0

    def deserialize(self, data) -> None:
        """Read motion parameters; angular values are converted from degrees.

        The degree conversion is applied to the current value as well when a
        key is absent, exactly as the stored defaults are read back.
        """
        if not isinstance(data, Mapping):
            return
        self.linear_velocity = _read_vec3(data, "linearVelocity", self.linear_velocity)
        self.angular_velocity = _radians3(
            _read_vec3(data, "angularVelocity", self.angular_velocity)
        )
        self.linear_acceleration = _read_vec3(
            data, "linearAcceleration", self.linear_acceleration
        )
        self.angular_acceleration = _radians3(
            _read_vec3(data, "angularAcceleration", self.angular_acceleration)
        )
        self.max_linear_velocity_component = _read_float(
            data, "maxLinearVelocityComponent", self.max_linear_velocity_component
        )
        self.max_angular_velocity_component = math.radians(
            _read_float(data, "maxAngularVelocityComponent", self.max_angular_velocity_component)
        )
        self.mass = _read_float(data, "mass", self.mass)


@dataclass(eq=False)
class FreeCameraControllerComponent(Component):
    """Sensitivities for moving and rotating a free camera with mouse and keyboard."""

    ID: ClassVar[str] = "Free Camera Controller"

    rotation_sensitivity: float = 0.01
    fov_sensitivity: float = 0.3
    position_sensitivity: Vec3 = (3.0, 3.0, 3.0)
    speedup_factor: float = 5.0

    def deserialize(self, data) -> None:
        """Read sensitivities and the speedup factor; absent keys keep their values."""
        if not isinstance(data, Mapping):
            return
        self.rotation_sensitivity = _read_float(
            data, "rotationSensitivity", self.rotation_sensitivity
        )
        self.fov_sensitivity = _read_float(data, "fovSensitivity", self.fov_sensitivity)
        self.position_sensitivity = _read_vec3(
            data, "positionSensitivity", self.position_sensitivity
        )
        self.speedup_factor = _read_float(data, "speedupFactor", self.speedup_factor)


@dataclass(eq=False)
class PlayerMovementControllerComponent(Component):
    """Player control settings: sensitivities, sideways limit and jump speed."""

    ID: ClassVar[str] = "Player Movement Controller"

    rotation_sensitivity: float = 0.01
    fov_sensitivity: float = 0.3
    position_sensitivity: Vec3 = (3.0, 3.0, 3.0)
    speedup_factor: float = 5.0
    max_horizontal_distance: float = 2.0
    jump_speed: float = 5.0

    def deserialize(self, data) -> None:
        """Read the controller settings; absent keys keep their values."""
        if not isinstance(data, Mapping):
            return
        self.rotation_sensitivity = _read_float(
            data, "rotationSensitivity", self.rotation_sensitivity
        )
        self.fov_sensitivity = _read_float(data, "fovSensitivity", self.fov_sensitivity)
        self.position_sensitivity = _read_vec3(
            data, "positionSensitivity", self.position_sensitivity
        )
        self.speedup_factor = _read_float(data, "speedupFactor", self.speedup_factor)
        self.max_horizontal_distance = _read_float(
            data, "maxHorizontalDistance", self.max_horizontal_distance
        )
        self.jump_speed = _read_float(data, "jumpSpeed", self.jump_speed)
"""Translation, rotation and scale of an object relative to its parent."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import numpy as np

from coinquest import linalg


def _vec3(value) -> np.ndarray:
    arr = np.asarray(value, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got {value!r}")
    return arr.copy()


@dataclass(eq=False)
class Transform:
    """Position, euler rotation in radians (x: pitch, y: yaw, z: roll) and scale."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.rotation = _vec3(self.rotation)
        self.scale = _vec3(self.scale)

    def to_mat4(self) -> np.ndarray:
        """Matrix that scales, then rotates, then translates."""
        pitch, yaw, roll = self.rotation
        return (
            linalg.translate(self.position)
            @ linalg.yaw_pitch_roll(yaw, pitch, roll)
            @ linalg.scale(self.scale)
        )

    def deserialize(self, data: Mapping) -> None:
        """Read position, rotation (degrees) and scale; missing keys keep their values."""
        if not isinstance(data, Mapping):
            raise TypeError("transform data must be a mapping")
        if "position" in data:
            self.position = _vec3(data["position"])
        if "rotation" in data:
            self.rotation = np.radians(_vec3(data["rotation"]))
        if "scale" in data:
            self.scale = _vec3(data["scale"])
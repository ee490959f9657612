"""Camera component: the point of view a renderer draws the scene from."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

import numpy as np

from coinquest import linalg
from coinquest.component import Component


class CameraType(Enum):
    ORTHOGRAPHIC = "orthographic"
    PERSPECTIVE = "perspective"


@dataclass(eq=False)
class CameraComponent(Component):
    """Projection parameters; eye, center and up come from the owning entity."""

    ID: ClassVar[str] = "Camera"

    camera_type: CameraType = CameraType.PERSPECTIVE
    near: float = 0.01
    far: float = 100.0
    fov_y: float = math.radians(90.0)
    ortho_height: float = 1.0

    def deserialize(self, data) -> None:
        """Read camera parameters; fovY is given in degrees."""
        if not isinstance(data, Mapping):
            return
        if data.get("cameraType", "perspective") == "orthographic":
            self.camera_type = CameraType.ORTHOGRAPHIC
        else:
            self.camera_type = CameraType.PERSPECTIVE
        self.near = float(data.get("near", 0.01))
        self.far = float(data.get("far", 100.0))
        self.fov_y = math.radians(float(data.get("fovY", 90.0)))
        self.ortho_height = float(data.get("orthoHeight", 1.0))

    def view_matrix(self) -> np.ndarray:
        """View matrix built from the owner's local-to-world transform."""
        if self.owner is None:
            raise RuntimeError("camera is not attached to an entity")
        m = np.asarray(self.owner.local_to_world_matrix(), dtype=float)
        eye = (m @ np.array([0.0, 0.0, 0.0, 1.0]))[:3]
        center = (m @ np.array([0.0, 0.0, -1.0, 1.0]))[:3]
        up = (m @ np.array([0.0, 1.0, 0.0, 0.0]))[:3]
        return linalg.look_at(eye, center, up)

    def projection_matrix(self, viewport_size) -> np.ndarray:
        """Projection matrix for a viewport of (width, height) pixels.

        The aspect ratio is the whole-number quotient of width by height.
        """
        width, height = (int(v) for v in viewport_size)
        if height == 0:
            raise ValueError("viewport height must not be zero")
        aspect = float(math.trunc(width / height))
        if self.camera_type is CameraType.ORTHOGRAPHIC:
            half_height = self.ortho_height / 2
            half_width = self.ortho_height * aspect / 2
            return linalg.ortho(
                -half_width, half_width, -half_height, half_height, self.near, self.far
            )
        return linalg.perspective(self.fov_y, aspect, self.near, self.far)
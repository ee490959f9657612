import math

import numpy as np
import pytest

from coinquest.components.camera import CameraComponent, CameraType
from coinquest.transform import Transform


class _Owner:
    def __init__(self, transform):
        self.transform = transform

    def local_to_world_matrix(self):
        return self.transform.to_mat4()


def _apply(matrix, point):
    out = matrix @ np.array([*point, 1.0])
    return out[:3] / out[3]


def test_id():
    camera = CameraComponent()
    camera.deserialize({})
    assert camera.ID == "Camera"
    assert camera.camera_type is CameraType.PERSPECTIVE


def test_deserialize_defaults():
    camera = CameraComponent(camera_type=CameraType.ORTHOGRAPHIC, near=5.0)
    camera.deserialize({})
    assert camera.camera_type is CameraType.PERSPECTIVE
    assert camera.near == pytest.approx(0.01)
    assert camera.far == pytest.approx(100.0)
    assert camera.fov_y == pytest.approx(math.radians(90.0))
    assert camera.ortho_height == pytest.approx(1.0)


def test_deserialize_reads_values():
    camera = CameraComponent()
    camera.deserialize(
        {"cameraType": "orthographic", "near": 0.5, "far": 20, "fovY": 60, "orthoHeight": 4}
    )
    assert camera.camera_type is CameraType.ORTHOGRAPHIC
    assert camera.near == 0.5
    assert camera.far == 20.0
    assert camera.fov_y == pytest.approx(math.radians(60))
    assert camera.ortho_height == 4.0


def test_unknown_camera_type_is_perspective():
    camera = CameraComponent(camera_type=CameraType.ORTHOGRAPHIC)
    camera.deserialize({"cameraType": "fisheye"})
    assert camera.camera_type is CameraType.PERSPECTIVE


def test_deserialize_non_mapping_keeps_values():
    camera = CameraComponent(near=3.0)
    camera.deserialize([1, 2])
    assert camera.near == 3.0


def test_view_matrix_identity_for_untransformed_owner():
    camera = CameraComponent()
    camera.owner = _Owner(Transform())
    assert np.allclose(camera.view_matrix(), np.identity(4))


def test_view_matrix_inverts_owner_transform():
    transform = Transform(position=[1.0, 2.0, 3.0], rotation=[0.3, 0.7, 0.1])
    camera = CameraComponent()
    camera.owner = _Owner(transform)
    assert np.allclose(camera.view_matrix() @ transform.to_mat4(), np.identity(4))
    assert np.allclose(_apply(camera.view_matrix(), [1.0, 2.0, 3.0]), [0.0, 0.0, 0.0])


def test_view_matrix_without_owner_raises():
    with pytest.raises(RuntimeError):
        CameraComponent().view_matrix()


def test_orthographic_projection_maps_box_corners():
    camera = CameraComponent(
        camera_type=CameraType.ORTHOGRAPHIC, ortho_height=2.0, near=1.0, far=3.0
    )
    projection = camera.projection_matrix((2, 1))
    assert np.allclose(_apply(projection, [2.0, 1.0, -1.0]), [1.0, 1.0, -1.0])
    assert np.allclose(_apply(projection, [-2.0, -1.0, -3.0]), [-1.0, -1.0, 1.0])


def test_perspective_projection_maps_frustum_edges():
    camera = CameraComponent(near=1.0, far=10.0, fov_y=math.radians(90.0))
    projection = camera.projection_matrix((1, 1))
    assert np.allclose(_apply(projection, [1.0, 1.0, -1.0]), [1.0, 1.0, -1.0])
    assert np.allclose(_apply(projection, [0.0, 0.0, -10.0])[2], 1.0)


def test_aspect_ratio_is_truncated():
    camera = CameraComponent()
    assert np.allclose(camera.projection_matrix((3, 2)), camera.projection_matrix((1, 1)))


def test_zero_height_viewport_raises():
    with pytest.raises(ValueError):
        CameraComponent().projection_matrix((100, 0))
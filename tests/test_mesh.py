import math

import numpy as np
import pytest

from coinquest.mesh import Mesh, Vertex, load_obj, sphere

QUAD = """\
# a unit quad
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vt 0 0
vt 1 0
vt 1 1
vt 0 1
vn 0 0 1
f 1/1/1 2/2/1 3/3/1 4/4/1
"""


def _write(tmp_path, text):
    path = tmp_path / "model.obj"
    path.write_text(text, encoding="utf-8")
    return path


def test_vertex_equality_and_hash():
    a = Vertex(position=(1.0, 2.0, 3.0), color=(1, 2, 3, 4))
    b = Vertex(position=(1.0, 2.0, 3.0), color=(1, 2, 3, 4))
    assert a == b
    assert len({a, b}) == 1
    assert a != Vertex(position=(1.0, 2.0, 3.0))


def test_mesh_element_count():
    mesh = Mesh([Vertex()], [0, 0, 0])
    assert mesh.element_count == 3
    assert mesh.vertices == (Vertex(),)


def test_load_quad_is_triangulated(tmp_path):
    mesh = load_obj(_write(tmp_path, QUAD))
    assert len(mesh.vertices) == 4
    assert mesh.elements == (0, 1, 2, 0, 2, 3)
    assert mesh.vertices[2].tex_coord == (1.0, 1.0)
    assert mesh.vertices[2].normal == (0.0, 0.0, 1.0)
    assert all(v.color == (255, 255, 255, 255) for v in mesh.vertices)


def test_load_merges_identical_vertices(tmp_path):
    text = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\nf 1 2 3\n"
    mesh = load_obj(_write(tmp_path, text))
    assert len(mesh.vertices) == 3
    assert mesh.elements[:3] == mesh.elements[3:]


def test_load_negative_indices(tmp_path):
    text = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf -3 -2 -1\n"
    mesh = load_obj(_write(tmp_path, text))
    assert [v.position for v in mesh.vertices] == [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)]


def test_load_vertex_colors(tmp_path):
    text = "v 0 0 0 0.5 1 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"
    mesh = load_obj(_write(tmp_path, text))
    assert mesh.vertices[0].color == (127, 255, 0, 255)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_obj(tmp_path / "absent.obj")


@pytest.mark.parametrize(
    "text",
    ["v 0 0 0\nf 1 2 3\n", "v 0 0 0\nv 1 0 0\nf 1 2\n", "v 0 zero 0\n", "v 0 0 0\nf 0 1 1\n"],
)
def test_load_malformed_raises(tmp_path, text):
    with pytest.raises(ValueError):
        load_obj(_write(tmp_path, text))


@pytest.mark.parametrize("segments", [(4, 3), (16, 8)])
def test_sphere_counts(segments):
    mesh = sphere(segments)
    cols, rows = segments
    assert len(mesh.vertices) == (cols + 1) * (rows + 1)
    assert mesh.element_count == 6 * cols * rows
    assert all(0 <= e < len(mesh.vertices) for e in mesh.elements)


def test_sphere_vertices_on_unit_sphere():
    mesh = sphere((12, 6))
    for vertex in mesh.vertices:
        assert math.isclose(np.linalg.norm(vertex.position), 1.0, rel_tol=1e-9)
        assert vertex.position == vertex.normal
        assert vertex.color == (255, 255, 255, 255)


def test_sphere_triangles_face_outwards():
    mesh = sphere((10, 5))
    points = np.array([v.position for v in mesh.vertices])
    triangles = np.array(mesh.elements).reshape(-1, 3)
    outward = []
    for a, b, c in triangles:
        n = np.cross(points[b] - points[a], points[c] - points[a])
        outward.append(np.dot(n, points[a] + points[b] + points[c]))
    assert min(outward) >= -1e-9
    assert max(outward) > 0


def test_sphere_rejects_zero_segments():
    with pytest.raises(ValueError):
        sphere((0, 4))
"""Vertices, meshes, an OBJ reader and a sphere generator."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
Color = tuple[int, int, int, int]


@dataclass(frozen=True)
class Vertex:
    """A vertex with position, RGBA byte color, texture coordinate and normal."""

    position: Vec3 = (0.0, 0.0, 0.0)
    color: Color = (0, 0, 0, 0)
    tex_coord: Vec2 = (0.0, 0.0)
    normal: Vec3 = (0.0, 0.0, 0.0)


class Mesh:
    """Vertices plus the element indices forming its triangles."""

    def __init__(self, vertices, elements) -> None:
        self.vertices: tuple[Vertex, ...] = tuple(vertices)
        self.elements: tuple[int, ...] = tuple(int(e) for e in elements)

    @property
    def element_count(self) -> int:
        return len(self.elements)

    def __repr__(self) -> str:
        return f"Mesh(vertices={len(self.vertices)}, elements={self.element_count})"


def _floats(fields: list[str], minimum: int) -> list[float]:
    values = [float(f) for f in fields]
    if len(values) < minimum:
        raise ValueError(f"expected at least {minimum} numbers")
    return values


def _resolve(token: str, count: int) -> int | None:
    if token == "":
        return None
    index = int(token)
    if index > 0:
        return index - 1
    if index < 0:
        return count + index
    raise ValueError("OBJ indices start at 1")


def _pick(items: list, index: int | None, default):
    if index is None:
        return default
    if not 0 <= index < len(items):
        raise ValueError(f"index {index + 1} is out of range")
    return items[index]


def _color_byte(channel: float) -> int:
    return min(255, max(0, int(channel * 255)))


def load_obj(filename) -> Mesh:
    """Read a Wavefront OBJ file, merging identical vertices."""
    positions: list[Vec3] = []
    colors: list[Vec3] = []
    normals: list[Vec3] = []
    tex_coords: list[Vec2] = []
    corners: list[tuple[int, int | None, int | None]] = []

    with Path(filename).open(encoding="utf-8") as stream:
        for line_number, raw in enumerate(stream, start=1):
            line = raw.split("#", 1)[0].strip()
            if not line:
                continue
            keyword, *fields = line.split()
            try:
                if keyword == "v":
                    values = _floats(fields, 3)
                    positions.append(tuple(values[:3]))
                    colors.append(tuple(values[3:6]) if len(values) >= 6 else (1.0, 1.0, 1.0))
                elif keyword == "vn":
                    normals.append(tuple(_floats(fields, 3)[:3]))
                elif keyword == "vt":
                    values = _floats(fields, 1)
                    tex_coords.append((values[0], values[1] if len(values) > 1 else 0.0))
                elif keyword == "f":
                    face = []
                    for token in fields:
                        parts = (token.split("/") + ["", ""])[:3]
                        vertex_index = _resolve(parts[0], len(positions))
                        if vertex_index is None:
                            raise ValueError("face corner lacks a vertex index")
                        face.append(
                            (
                                vertex_index,
                                _resolve(parts[1], len(tex_coords)),
                                _resolve(parts[2], len(normals)),
                            )
                        )
                    if len(face) < 3:
                        raise ValueError("a face needs at least 3 corners")
                    for second, third in zip(face[1:], face[2:]):
                        corners.extend((face[0], second, third))
            except ValueError as exc:
                raise ValueError(f"{filename}:{line_number}: {exc}") from exc

    vertices: list[Vertex] = []
    elements: list[int] = []
    seen: dict[Vertex, int] = {}
    for vertex_index, tex_index, normal_index in corners:
        try:
            position = _pick(positions, vertex_index, None)
            vertex = Vertex(
                position=position,
                color=(*(_color_byte(c) for c in colors[vertex_index]), 255),
                tex_coord=_pick(tex_coords, tex_index, (0.0, 0.0)),
                normal=_pick(normals, normal_index, (0.0, 0.0, 0.0)),
            )
        except ValueError as exc:
            raise ValueError(f"{filename}: {exc}") from exc
        index = seen.get(vertex)
        if index is None:
            index = len(vertices)
            seen[vertex] = index
            vertices.append(vertex)
        elements.append(index)

    return Mesh(vertices, elements)


def sphere(segments) -> Mesh:
    """Unit sphere with (longitude, latitude) divisions; triangles are CCW from outside."""
    columns, rows = (int(s) for s in segments)
    if columns < 1 or rows < 1:
        raise ValueError("a sphere needs at least one segment in each direction")

    vertices: list[Vertex] = []
    for lat in range(rows + 1):
        v = lat / rows
        pitch = v * math.pi - math.pi / 2
        cos_pitch, sin_pitch = math.cos(pitch), math.sin(pitch)
        for lng in range(columns + 1):
            u = lng / columns
            yaw = u * 2 * math.pi
            normal = (cos_pitch * math.cos(yaw), sin_pitch, cos_pitch * math.sin(yaw))
            vertices.append(
                Vertex(position=normal, color=(255, 255, 255, 255), tex_coord=(u, v), normal=normal)
            )

    elements: list[int] = []
    for lat in range(1, rows + 1):
        start = lat * (columns + 1)
        below = start - columns - 1
        for lng in range(1, columns + 1):
            prev = lng - 1
            elements.extend(
                (lng + start, lng + below, prev + below, prev + below, prev + start, lng + start)
            )

    return Mesh(vertices, elements)
## vertex/index/normal buffers handed to a renderer

## Copyright (c) 2024 meshshape contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Mesh buffers produced by the shape classes.

A ``Mesh`` is an ordered vertex list, an ordered index list, a
per-vertex normal list and a ``Primitive`` tag telling a renderer how
the indices are to be read.  Meshes are built fresh for every query
and handed back by value.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

from meshshape.geom import cross, epsilon, mag, point, scale3, sub

Vec3 = Tuple[float, float, float]
TriTuple = Tuple[Vec3, Vec3, Vec3, Vec3]


class Primitive(Enum):
    """Topology tags understood by a rendering backend."""

    LINE_LOOP = "line_loop"
    LINE_STRIP = "line_strip"
    LINE_STRIP_ADJACENCY = "line_strip_adjacency"
    TRIANGLE_STRIP = "triangle_strip"
    TRIANGLES = "triangles"

    @classmethod
    def _missing_(cls, value):
        ## hyphenated and long-form spellings, e.g. "discrete-triangles"
        if not isinstance(value, str):
            return None
        key = value.strip().lower().replace("-", "_").replace(" ", "_")
        return _PRIMITIVE_ALIASES.get(key) or cls._value2member_map_.get(key)


_PRIMITIVE_ALIASES = {
    "closed_line_loop": Primitive.LINE_LOOP,
    "open_line_strip": Primitive.LINE_STRIP,
    "line_strip_with_adjacency": Primitive.LINE_STRIP_ADJACENCY,
    "discrete_triangles": Primitive.TRIANGLES,
}


class Mesh:
    """Vertex, index and normal buffers plus a topology tag."""

    def __init__(self, mode: Optional[Primitive] = None):
        self.mode = mode
        self.vertices: List[list] = []
        self.indices: List[int] = []
        self.normals: List[list] = []

    def __repr__(self):
        return "Mesh(mode={}, vertices={}, indices={})".format(
            self.mode, len(self.vertices), len(self.indices))

    def setMode(self, mode: Optional[Primitive]) -> None:
        self.mode = None if mode is None else Primitive(mode)

    def getMode(self) -> Optional[Primitive]:
        return self.mode

    def addVertex(self, v: Sequence[float]) -> None:
        self.vertices.append(point(v))

    def addVertices(self, verts: Sequence[Sequence[float]]) -> None:
        for v in verts:
            self.addVertex(v)

    def addNormal(self, n: Sequence[float]) -> None:
        self.normals.append(point(n))

    def addNormals(self, normals: Sequence[Sequence[float]]) -> None:
        for n in normals:
            self.addNormal(n)

    def addIndex(self, i: int) -> None:
        if i < 0:
            raise ValueError("negative mesh index: {}".format(i))
        self.indices.append(int(i))

    def addIndices(self, indices: Sequence[int]) -> None:
        for i in indices:
            self.addIndex(i)

    def getNumVertices(self) -> int:
        return len(self.vertices)

    def getNumIndices(self) -> int:
        return len(self.indices)

    def hasNormals(self) -> bool:
        return len(self.normals) > 0

    def clearNormals(self) -> None:
        self.normals = []

    def clear(self) -> None:
        """Drop all buffers; the topology tag is kept."""
        self.vertices = []
        self.indices = []
        self.normals = []

    def append(self, other: "Mesh") -> None:
        """Merge the buffers of ``other`` into this mesh.

        Indices of ``other`` are offset by the current vertex count.  When
        both meshes are triangle strips, the strips are joined with two
        degenerate bridging indices so that no triangle spans the seam.
        """

        offset = len(self.vertices)
        if self.mode is None:
            self.mode = other.mode
        if (self.mode is Primitive.TRIANGLE_STRIP
                and other.mode is Primitive.TRIANGLE_STRIP
                and self.indices and other.indices):
            self.indices.append(self.indices[-1])
            self.indices.append(other.indices[0] + offset)
        self.vertices.extend(list(v) for v in other.vertices)
        self.normals.extend(list(n) for n in other.normals)
        self.indices.extend(i + offset for i in other.indices)


def setNormal(mesh: Mesh, normal: Sequence[float]) -> None:
    """Replace the normals of ``mesh`` with ``normal`` on every vertex."""

    mesh.clearNormals()
    for _ in mesh.vertices:
        mesh.addNormal(normal)


def _triangle_indices(mesh: Mesh) -> Iterator[Tuple[int, int, int]]:
    idx = mesh.indices
    if mesh.mode is Primitive.TRIANGLES:
        for i in range(0, len(idx) - 2, 3):
            yield idx[i], idx[i + 1], idx[i + 2]
    elif mesh.mode is Primitive.TRIANGLE_STRIP:
        for i in range(len(idx) - 2):
            if i % 2 == 0:
                yield idx[i], idx[i + 1], idx[i + 2]
            else:
                yield idx[i + 1], idx[i], idx[i + 2]


def triangles(mesh: Mesh) -> Iterator[TriTuple]:
    """Yield triangles of ``mesh`` as ``(normal, v0, v1, v2)``.

    Strips are unrolled with alternating winding so every triangle keeps
    the orientation of the first one.  Normals are computed from the
    winding, not read from the normal buffer.  Degenerate triangles (zero
    area, such as strip bridges) are skipped silently.  Line topologies
    yield nothing.
    """

    for i0, i1, i2 in _triangle_indices(mesh):
        v0, v1, v2 = mesh.vertices[i0], mesh.vertices[i1], mesh.vertices[i2]
        n = cross(sub(v1, v0), sub(v2, v0))
        length = mag(n)
        if length <= epsilon * epsilon:
            continue
        n = scale3(n, 1.0 / length)
        yield ((n[0], n[1], n[2]),
               (v0[0], v0[1], v0[2]),
               (v1[0], v1[1], v1[2]),
               (v2[0], v2[1], v2[2]))


__all__ = [
    "Mesh",
    "Primitive",
    "setNormal",
    "triangles",
]

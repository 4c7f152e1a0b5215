## path tessellation for filled contour faces

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

"""Tessellation of planar closed paths into triangle meshes.

We delegate to ``mapbox-earcut`` (the fast ear clipping implementation
used by Mapbox GL) to keep the logic compact and reliable.  The
``PathTessellator`` collects move-to/line-to commands in 3D, projects
every subpath into the plane of the path, hands the 2D rings to earcut
and lifts the resulting triangles back onto the original 3D points.
The first subpath is the outer boundary; any further subpaths are
holes.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

try:
    import mapbox_earcut as _earcut
except ImportError as exc:  # pragma: no cover - import guard
    raise ImportError(
        "mapbox-earcut must be installed to tessellate contour faces"
    ) from exc

from meshshape.geom import (cross, dist, dot, epsilon, mag, normalize, point,
                            sub)
from meshshape.mesh import Mesh, Primitive

logger = logging.getLogger(__name__)

Point2D = Tuple[float, float]


def _earcut_indices(rings: Sequence[Sequence[Point2D]]) -> List[int]:
    """Run earcut over ``rings`` (outer first) and return flat indices
    into the concatenation of all rings."""

    flat: List[Point2D] = []
    ring_ends: List[int] = []
    for ring in rings:
        flat.extend(ring)
        ring_ends.append(len(flat))
    vertices = np.asarray(flat, dtype=np.float64).reshape(-1, 2)
    ring_array = np.asarray(ring_ends, dtype=np.uint32)
    return [int(i) for i in _earcut.triangulate_float64(vertices, ring_array)]


def _clean_loop(points: Sequence[list]) -> List[list]:
    loop: List[list] = []
    for p in points:
        if loop and dist(loop[-1], p) <= epsilon:
            continue
        loop.append(p)
    if len(loop) > 1 and dist(loop[0], loop[-1]) <= epsilon:
        loop.pop()
    return loop


def _xy_ring(points: Sequence[Sequence[float]]) -> List[Point2D]:
    loop = _clean_loop([point(p[0], p[1]) for p in points])
    return [(p[0], p[1]) for p in loop]


def triangulate_polygon(outer: Sequence[Sequence[float]],
                        holes: Optional[Sequence[Sequence[Sequence[float]]]] = None
                        ) -> List[List[Point2D]]:
    """Return counter-clockwise triangles covering ``outer`` minus any
    ``holes``, as lists of three ``(x, y)`` pairs.

    Only the XY coordinates of the points are used.  Loops with fewer
    than three distinct points are ignored.
    """

    rings = [_xy_ring(outer)]
    if len(rings[0]) < 3:
        return []
    for hole in holes or []:
        loop = _xy_ring(hole)
        if len(loop) >= 3:
            rings.append(loop)

    flat = [p for ring in rings for p in ring]
    indices = _earcut_indices(rings)
    tris: List[List[Point2D]] = []
    for i in range(0, len(indices) - 2, 3):
        a, b, c = flat[indices[i]], flat[indices[i + 1]], flat[indices[i + 2]]
        area2 = (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])
        if area2 < 0:
            b, c = c, b
        tris.append([a, b, c])
    return tris


def newell_normal(loop: Sequence[list]) -> list:
    """Return the unit normal of a planar loop by Newell's method, or the
    zero vector when the loop encloses no area."""

    n = [0.0, 0.0, 0.0, 1.0]
    count = len(loop)
    for i in range(count):
        a = loop[i]
        b = loop[(i + 1) % count]
        n[0] += (a[1] - b[1]) * (a[2] + b[2])
        n[1] += (a[2] - b[2]) * (a[0] + b[0])
        n[2] += (a[0] - b[0]) * (a[1] + b[1])
    return normalize(n)


def _plane_basis(normal: list) -> Tuple[list, list]:
    helper = point(1, 0, 0)
    if abs(dot(helper, normal)) > 0.9:
        helper = point(0, 1, 0)
    u = normalize(cross(helper, normal))
    v = cross(normal, u)
    return u, v


class PathTessellator:
    """Accumulate a planar path and fill it with triangles."""

    def __init__(self):
        self._subpaths: List[List[list]] = []
        self._open = False

    def __repr__(self):
        return "PathTessellator({} subpaths)".format(len(self._subpaths))

    def moveTo(self, p: Sequence[float]) -> None:
        """start a new subpath at ``p``"""
        self._subpaths.append([point(p)])
        self._open = True

    def lineTo(self, p: Sequence[float]) -> None:
        if not self._open:
            self.moveTo(p)
            return
        self._subpaths[-1].append(point(p))

    def close(self) -> None:
        """close the current subpath; the next ``lineTo`` starts a new one"""
        self._open = False

    def clear(self) -> None:
        self._subpaths = []
        self._open = False

    def getSubpaths(self) -> List[List[list]]:
        return [list(s) for s in self._subpaths]

    def tessellate(self, normal: Optional[Sequence[float]] = None) -> Mesh:
        """Return a ``TRIANGLES`` mesh filling the path.

        Every triangle is wound counter-clockwise about ``normal``; when no
        normal is given, the Newell normal of the outer subpath is used.
        Subpaths with fewer than three distinct points are ignored, and a
        path with no usable outer boundary gives an empty mesh.
        """

        mesh = Mesh(Primitive.TRIANGLES)
        loops = [_clean_loop(s) for s in self._subpaths]
        if not loops or len(loops[0]) < 3:
            logger.debug("nothing to tessellate: %r", self)
            return mesh
        loops = [loops[0]] + [l for l in loops[1:] if len(l) >= 3]

        if normal is None:
            n = newell_normal(loops[0])
        else:
            n = normalize(point(normal))
        if mag(n) < epsilon:
            logger.debug("degenerate path normal, nothing to tessellate")
            return mesh

        u, v = _plane_basis(n)
        rings = [[(dot(p, u), dot(p, v)) for p in loop] for loop in loops]
        verts = [p for loop in loops for p in loop]
        indices = _earcut_indices(rings)

        mesh.addVertices(verts)
        for i in range(0, len(indices) - 2, 3):
            i0, i1, i2 = indices[i], indices[i + 1], indices[i + 2]
            tn = cross(sub(verts[i1], verts[i0]), sub(verts[i2], verts[i0]))
            if dot(tn, n) < 0:
                i1, i2 = i2, i1
            mesh.addIndices((i0, i1, i2))
        return mesh

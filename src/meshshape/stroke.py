## outline, stroke and plate computation shared by every planar shape

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

"""outline, stroke and plate computation for **meshshape** shapes

These functions hold the geometry that every planar shape shares.  A
shape only has to supply its local vertex list (``getVertices()``),
its rotation/anchor transform (``transform()``), its normal
(``getNormal()``), whether it is closed (``isclosed()``) and the
topology tag of its raw outline (``getOutlineMode()``).

stroking
========

``strokeOutline()`` turns a boundary into a ribbon with an inner and
an outer width.  For every corner the two adjacent edges are offset
perpendicular to themselves, inside the shape's plane, and the offset
edges are intersected to give a mitered corner vertex.  The side that
counts as "inner" is fixed by the shape normal: walking the boundary
counter-clockwise about the normal, inner offsets go to the left.

Degenerate input is resolved locally and never raises:

- fewer than two boundary vertices gives an empty mesh
- a corner whose neighbours are colinear or coincident uses the shape
  normal as its rotation axis
- parallel offset edges use the end of the first offset edge, an
  unmitered join

Open boundaries have no neighbour beyond their ends.  The missing
neighbour is mirrored through the end point, so the end corner is a
straight run and takes the unmitered join.  Line-adjacency outlines
carry their own neighbours as first and last vertex; those two are not
offset themselves.
"""

import logging

from meshshape.geom import *
from meshshape.mesh import Mesh, Primitive, setNormal

logger = logging.getLogger(__name__)

STROKE_MODES = (Primitive.TRIANGLE_STRIP, Primitive.TRIANGLES)


def strokeMode(mode):
    """validate a stroke topology, accepting ``Primitive`` members or
    their names such as ``"triangle-strip"`` or ``"discrete-triangles"``"""
    try:
        m = Primitive(mode)
    except ValueError:
        raise ValueError('unsupported stroke topology: {}'.format(mode)) from None
    if m not in STROKE_MODES:
        raise ValueError('unsupported stroke topology: {}'.format(m))
    return m


def outline(shape,verts=None):
    """transformed vertices of ``shape`` in a mesh without topology.  If
    ``verts`` is given it replaces ``shape.getVertices()``"""
    if verts is None:
        verts = shape.getVertices()
    mesh = Mesh()
    mesh.addVertices(shape.transform(verts))
    return mesh


def planarOutline(shape,verts=None):
    """raw boundary of a planar shape, tagged with its outline mode and
    carrying the shape normal on every vertex"""
    mesh = outline(shape,verts)
    mesh.setMode(shape.getOutlineMode())
    setNormal(mesh,shape.getNormal())
    return mesh


def plate(shape):
    """plane ``[nx, ny, nz, d]`` supporting the boundary of ``shape``,
    such that ``dot(n, v) + d == 0`` for every boundary vertex ``v``"""
    n = shape.getNormal()
    verts = shape.getOutline().vertices
    d = -dot(n,verts[0]) if verts else 0.0
    return [n[0],n[1],n[2],d]


def quadFill(shape,verts=None):
    """fill a four-vertex boundary with a two-triangle strip.  Boundaries
    with any other vertex count get the strip tag and no indices"""
    mesh = planarOutline(shape,verts)
    mesh.setMode(Primitive.TRIANGLE_STRIP)
    if mesh.getNumVertices() == 4:
        mesh.addIndices((0,1,3,2))
    return mesh


def _mirror(p,about):
    return sub(scale3(about,2.0),p)


## return the neighbours of corner i.  Closed boundaries wrap, open
## ones mirror the existing neighbour through the end point.
def _corner(verts,i,closed):
    count = len(verts)
    v1 = verts[i]
    if closed:
        return verts[(i-1)%count],v1,verts[(i+1)%count]
    v0 = verts[i-1] if i > 0 else None
    v2 = verts[i+1] if i < count-1 else None
    if v0 is None:
        v0 = _mirror(v2,v1)
    if v2 is None:
        v2 = _mirror(v0,v1)
    return v0,v1,v2


def miter(v0,v1,v2,normal,width):
    """offset corner ``v1`` of the path ``v0, v1, v2`` by ``width``
    inside the plane with the given ``normal``.  Positive widths go to
    the left of the path as seen from the side ``normal`` points to."""

    e1 = sub(v1,v0)
    e2 = sub(v2,v1)
    axis = cross(e2,e1)
    if mag(axis) < epsilon:
        axis = normal
    s = sign(dot(normal,axis))
    axis = normalize(axis)

    o1 = scale3(normalize(cross(axis,e1)),s*width)
    o2 = scale3(normalize(cross(axis,e2)),s*width)
    p = intersect3D(add(v0,o1),add(v1,o1),add(v1,o2),add(v2,o2))
    if p is None:
        ## straight run or zero-length edge, no miter
        logger.debug("unmitered join at %s",vstr(v1))
        if mag(e1) < epsilon:
            return add(v1,o2)
        return add(v1,o1)
    return p


def strokeOutline(shape,inner,outer,mode=Primitive.TRIANGLE_STRIP):
    """return the ribbon following the boundary of ``shape``, ``inner``
    wide towards the interior and ``outer`` wide away from it, using the
    ``TRIANGLE_STRIP`` or ``TRIANGLES`` topology"""

    mode = strokeMode(mode)
    base = shape.getOutline()
    verts = base.vertices
    if len(verts) < 2:
        logger.debug("stroke of %r skipped, %d boundary vertices",
                     shape,len(verts))
        return Mesh()

    normal = shape.getNormal()
    closed = shape.isclosed()
    if base.mode is Primitive.LINE_STRIP_ADJACENCY:
        corners = range(1,len(verts)-1)
        closed = False
    else:
        corners = range(len(verts))

    mesh = Mesh(mode)
    for i in corners:
        v0,v1,v2 = _corner(verts,i,closed)
        mesh.addVertex(miter(v0,v1,v2,normal,inner))
        mesh.addVertex(miter(v0,v1,v2,normal,-outer))
    setNormal(mesh,normal)

    count = len(corners)
    if mode is Primitive.TRIANGLE_STRIP:
        for i in range(count):
            mesh.addIndices((2*i,2*i+1))
        if closed:
            mesh.addIndices((0,1))
    else:
        for i in range(count-1):
            b = 2*i
            mesh.addIndices((b,b+1,b+2,b+2,b+1,b+3))
        if closed and count > 1:
            b = 2*(count-1)
            mesh.addIndices((b,b+1,0,0,b+1,1))
    return mesh

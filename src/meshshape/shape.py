## abstract shape classes for meshshape

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

"""
Shape Base Classes
==================

``Shape`` owns an anchor point and a rotation, and turns the local
vertex list supplied by a subclass into world-space outline geometry.
``Shape2D`` adds everything a planar shape needs: a normal, a
supporting plane ("plate"), closure, raw outlines, stroked ribbons and
a generic face.  The geometry itself lives in ``meshshape.stroke``;
concrete shapes only supply ``getVertices()`` and their closure and
face policy.

Shapes are plain configurations.  Every query recomputes its result
from the current parameters; nothing is cached.
"""

from meshshape.geom import *
from meshshape.mesh import Mesh, Primitive
from meshshape.xform import AxisAngle, Quaternion, Translation
import meshshape.stroke as stroke

## the normal of an unrotated planar shape
FORWARD = [0.0,0.0,-1.0,1.0]


class Shape:
    """abstract base class for shapes with an anchor and a rotation"""

    def __init__(self):
        self.__anchor=point(0,0,0)
        self.__rotation=Quaternion()

    def __repr__(self):
        return '{}(anchor={})'.format(type(self).__name__,vstr(self.__anchor))

    ## the point rotations are applied about
    def setAnchor(self,p):
        self.__anchor=point(p)

    def getAnchor(self):
        return list(self.__anchor)

    def setRotation(self,degrees,axis):
        """replace the current rotation with ``degrees`` about ``axis``"""
        self.__rotation=AxisAngle(axis,degrees)

    def rotate(self,degrees,axis):
        """apply a further rotation of ``degrees`` about ``axis`` on top
        of the current one"""
        self.__rotation=AxisAngle(axis,degrees).mul(self.__rotation).normalized()

    def setOrientation(self,q):
        if not isinstance(q,Quaternion):
            raise ValueError('bad orientation passed to setOrientation(): {}'.format(q))
        self.__rotation=q.normalized()

    def getRotation(self):
        return Quaternion(self.__rotation.w,self.__rotation.x,
                          self.__rotation.y,self.__rotation.z)

    def getTransform(self):
        """4x4 matrix rotating about the anchor"""
        mat = Translation(self.__anchor)
        mat = mat.mul(self.__rotation.matrix())
        return mat.mul(Translation(self.__anchor,inverse=True))

    def transform(self,points):
        mat = self.getTransform()
        return [mat.mul(point(p)) for p in points]

    def getVertices(self):
        """ordered local vertices, before rotation and anchoring"""
        raise NotImplementedError('{} does not supply vertices'.format(type(self).__name__))

    def getOutline(self):
        return stroke.outline(self)

    def getFace(self):
        return Mesh()


class Shape2D(Shape):
    """abstract base class for planar shapes"""

    def __init__(self,closed=False):
        super().__init__()
        self._closed=bool(closed)

    def isclosed(self):
        return self._closed

    def getNormal(self):
        """the front-face direction, ``(0,0,-1)`` rotated with the shape"""
        return self.getRotation().rotate(FORWARD)

    def getPlate(self):
        return stroke.plate(self)

    def getOutlineMode(self):
        if self.isclosed():
            return Primitive.LINE_LOOP
        return Primitive.LINE_STRIP

    def getOutline(self,inner=None,outer=None,mode=Primitive.TRIANGLE_STRIP):
        """With no widths, return the raw boundary as a line loop or strip.
        Otherwise return a ribbon ``inner`` wide towards the interior and
        ``outer`` wide away from it, as a ``TRIANGLE_STRIP`` or
        ``TRIANGLES`` mesh.
        """
        if inner is None and outer is None:
            return stroke.planarOutline(self)
        return stroke.strokeOutline(self,inner or 0.0,outer or 0.0,mode)

    def getFace(self):
        return stroke.quadFill(self)

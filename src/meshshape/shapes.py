## concrete planar shapes for meshshape

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
Concrete Shapes
===============

Each class here supplies its local vertex list and its closure and
face policy; outlines, ribbons and plates come from ``Shape2D``.

- ``Rectangle`` -- four corners, closed; rect-mode ``CORNER`` places
  the stored position at the first corner, ``CENTER`` at the centroid
- ``Grid`` -- a rectangle subdivided ``u`` times across its width and
  ``v`` times across its height
- ``Arc`` -- ``resolution+1`` samples over an angle range, open or
  closed through its center (``PIE``) or straight back (``CHORD``)
- ``Circle`` -- a closed full-turn arc with ``resolution`` samples
- ``Line`` -- two end points, open
- ``Contour`` -- the points and closed flag of a ``Polyline``
- ``AdjacencyLine`` -- an open contour with an extra lead and trail
  point, for line-adjacency rendering

All closed boundaries run counter-clockwise about the shape normal, so
arcs sample ``center + r*(cos t, -sin t)`` in local coordinates.
"""

from enum import Enum

from meshshape.geom import *
from meshshape.mesh import Mesh, Primitive, setNormal
from meshshape.poly import AxisRectangle, Polyline
from meshshape.shape import Shape2D
from meshshape.triangulator import PathTessellator
import meshshape.stroke as stroke

DEFAULT_RESOLUTION = 32


class RectMode(Enum):
    CORNER = "corner"
    CENTER = "center"

CORNER = RectMode.CORNER
CENTER = RectMode.CENTER


class ArcClosure(Enum):
    PIE = "pie"
    CHORD = "chord"

PIE = ArcClosure.PIE
CHORD = ArcClosure.CHORD


def _checkresolution(resolution):
    if isinstance(resolution,bool) or not isinstance(resolution,int) or resolution < 1:
        raise ValueError('resolution must be a positive integer: {}'.format(resolution))
    return resolution


class Rectangle(Shape2D):
    """closed four-corner shape backed by an ``AxisRectangle``"""

    def __init__(self,x=0.0,y=0.0,width=0.0,height=0.0,mode=CORNER):
        super().__init__(closed=True)
        self.rect=AxisRectangle(x,y,width,height)
        self.setRectMode(mode)

    def __repr__(self):
        return '{}({},{},{},{},{})'.format(type(self).__name__,
                                           self.rect.x,self.rect.y,
                                           self.rect.width,self.rect.height,
                                           self.__mode.value)

    def setRectMode(self,mode):
        try:
            self.__mode=RectMode(mode)
        except ValueError:
            raise ValueError('bad rect mode: {}'.format(mode)) from None

    def getRectMode(self):
        return self.__mode

    def set(self,x,y,width,height):
        self.rect.set(x,y,width,height)

    def setPosition(self,p):
        self.rect.setPosition(p)

    def getPosition(self):
        return self.rect.getPosition()

    def setSize(self,width,height):
        self.rect.setSize(width,height)

    @property
    def width(self):
        return self.rect.width

    @property
    def height(self):
        return self.rect.height

    ## local position of the first corner
    def getOrigin(self):
        o = self.rect.getPosition()
        if self.__mode is CENTER:
            o = sub(o,point(self.rect.width/2.0,self.rect.height/2.0))
        return o

    def getVertices(self):
        o = self.getOrigin()
        w = self.rect.width
        h = self.rect.height
        return [o,
                add(o,point(0,h)),
                add(o,point(w,h)),
                add(o,point(w,0))]


class Grid(Rectangle):
    """rectangle subdivided ``u`` times across and ``v`` times up"""

    def __init__(self,x=0.0,y=0.0,width=0.0,height=0.0,u=0,v=0,mode=CORNER):
        super().__init__(x,y,width,height,mode)
        self.setDivision(u,v)

    def setDivision(self,u,v):
        for n in (u,v):
            if isinstance(n,bool) or not isinstance(n,int) or n < 0:
                raise ValueError('bad grid division: {}'.format(n))
        self.__u=u
        self.__v=v

    def getDivision(self):
        return self.__u,self.__v

    ## (u+2)*(v+2) lattice points, row by row from the origin corner
    def getVertices(self):
        o = self.getOrigin()
        corner = add(o,point(self.width,self.height))
        verts = []
        for j in range(self.__v+2):
            y = o[1] + (corner[1]-o[1])*j/(self.__v+1)
            for i in range(self.__u+2):
                x = o[0] + (corner[0]-o[0])*i/(self.__u+1)
                verts.append(point(x,y,o[2]))
        return verts

    def getPerimeter(self):
        return Rectangle.getVertices(self)

    def _cell(self,o,width,height):
        r = Rectangle(width=width,height=height)
        r.setPosition(o)
        r.setAnchor(self.getAnchor())
        r.setOrientation(self.getRotation())
        return r

    def getOutline(self,inner=None,outer=None,mode=Primitive.TRIANGLE_STRIP):
        """With no widths, return the perimeter loop.  Otherwise stroke the
        perimeter outwards by ``outer`` and every cell boundary by half of
        ``inner`` on each side, merged into one mesh."""
        if inner is None and outer is None:
            return stroke.planarOutline(self,self.getPerimeter())
        mode = stroke.strokeMode(mode)
        inner = inner or 0.0
        outer = outer or 0.0

        o = self.getOrigin()
        mesh = self._cell(o,self.width,self.height).getOutline(0.0,outer,mode)
        cw = self.width/(self.__u+1)
        ch = self.height/(self.__v+1)
        for j in range(self.__v+1):
            for i in range(self.__u+1):
                cell = self._cell(add(o,point(i*cw,j*ch)),cw,ch)
                mesh.append(cell.getOutline(inner/2.0,inner/2.0,mode))
        return mesh

    def getFace(self):
        return stroke.quadFill(self,self.getPerimeter())


class Arc(Shape2D):
    """circular arc over ``[start, end]`` degrees"""

    def __init__(self,center=None,radius=1.0,start=0.0,end=360.0,
                 resolution=DEFAULT_RESOLUTION,closed=False,closure=PIE):
        super().__init__(closed=closed)
        self.setCenter(point(0,0,0) if center is None else center)
        self.setRadius(radius)
        self.setAngle(start,end)
        self.setResolution(resolution)
        self.__closure=ArcClosure(closure)

    def setCenter(self,p):
        self.__center=point(p)

    def getCenter(self):
        return list(self.__center)

    def setRadius(self,r):
        if not isgoodnum(r) or r < 0:
            raise ValueError('negative radius not allowed for arc')
        self.__radius=r

    def getRadius(self):
        return self.__radius

    def setResolution(self,resolution):
        self.__resolution=_checkresolution(resolution)

    def getResolution(self):
        return self.__resolution

    def setAngle(self,start,end):
        if not (isgoodnum(start) and isgoodnum(end)):
            raise ValueError('bad arc angles: {}, {}'.format(start,end))
        self.__start=start
        self.__end=end

    def getAngle(self):
        return self.__start,self.__end

    def setClosed(self,closed,closure=None):
        """close or open the arc; ``closure`` optionally switches between
        ``PIE`` and ``CHORD``"""
        self._closed=bool(closed)
        if closure is not None:
            try:
                self.__closure=ArcClosure(closure)
            except ValueError:
                raise ValueError('bad arc closure: {}'.format(closure)) from None

    def getClosure(self):
        return self.__closure

    def _sample(self,degrees):
        rad = radians(degrees)
        r = self.__radius
        return add(self.__center,point(r*cos(rad),-r*sin(rad)))

    def getSamples(self):
        n = self.__resolution
        span = self.__end - self.__start
        return [self._sample(self.__start + span*k/n) for k in range(n+1)]

    def getVertices(self):
        verts = self.getSamples()
        if self.isclosed() and self.__closure is PIE:
            verts.append(list(self.__center))
        return verts

    def _fan(self,hub,ring,wrap=False):
        mesh = Mesh(Primitive.TRIANGLES)
        mesh.addVertices(self.transform([hub] + ring))
        for k in range(1,len(ring)):
            mesh.addIndices((0,k,k+1))
        if wrap:
            mesh.addIndices((0,len(ring),1))
        setNormal(mesh,self.getNormal())
        return mesh

    def getFace(self):
        """triangle fan from the center (``PIE``) or from the first sample
        (``CHORD``)"""
        samples = self.getSamples()
        if self.__closure is PIE:
            return self._fan(self.__center,samples)
        return self._fan(samples[0],samples[1:])


class Circle(Arc):
    """full circle of ``resolution`` samples, always closed"""

    def __init__(self,center=None,radius=1.0,resolution=DEFAULT_RESOLUTION):
        super().__init__(center,radius,0.0,360.0,resolution,closed=True)

    def setAngle(self,start,end):
        if (start,end) != (0.0,360.0):
            raise ValueError('a circle always spans 0 to 360 degrees')
        super().setAngle(start,end)

    def setClosed(self,closed,closure=None):
        if not closed:
            raise ValueError('a circle is always closed')
        if closure is not None and closure != PIE and closure != PIE.value:
            raise ValueError('a circle only closes through its center: {}'.format(closure))

    def getSamples(self):
        n = self.getResolution()
        return [self._sample(360.0*k/n) for k in range(n)]

    def getVertices(self):
        return self.getSamples()

    def getFace(self):
        """disk fan around the center"""
        return self._fan(self.getCenter(),self.getSamples(),wrap=True)


class Line(Shape2D):
    """open segment from ``a`` to ``b``"""

    def __init__(self,a=None,b=None):
        super().__init__(closed=False)
        self.setPoints(point(0,0,0) if a is None else a,
                       point(0,0,0) if b is None else b)

    def setPoints(self,a,b):
        self.__a=point(a)
        self.__b=point(b)

    def getPoints(self):
        return list(self.__a),list(self.__b)

    def getVertices(self):
        return [list(self.__a),list(self.__b)]

    def getFace(self):
        return Mesh()


class Contour(Shape2D):
    """free-form shape following a ``Polyline``"""

    def __init__(self,polyline=None):
        super().__init__()
        self.setPolyline(Polyline() if polyline is None else polyline)

    def setPolyline(self,polyline):
        if not isinstance(polyline,Polyline):
            raise ValueError('bad polyline passed to Contour: {}'.format(polyline))
        self.polyline=polyline

    def getPolyline(self):
        return self.polyline

    def isclosed(self):
        return self.polyline.isclosed()

    def setClosed(self,closed):
        self.polyline.setClosed(closed)

    def getVertices(self):
        return self.polyline.getVertices()

    def getFace(self):
        """tessellated fill of the boundary, or the generic quad fill when
        the contour has no points"""
        verts = self.getOutline().vertices
        if not verts:
            return stroke.quadFill(self)
        path = PathTessellator()
        path.moveTo(verts[0])
        for v in verts[1:]:
            path.lineTo(v)
        path.close()
        normal = self.getNormal()
        mesh = path.tessellate(normal)
        setNormal(mesh,normal)
        return mesh


class AdjacencyLine(Contour):
    """open contour with neighbour-only lead and trail points"""

    def __init__(self,polyline=None,lead=None,trail=None):
        super().__init__(polyline)
        self.setLead(lead)
        self.setTrail(trail)

    ## None extrapolates the lead/trail from the contour ends
    def setLead(self,p):
        self.__lead=None if p is None else point(p)

    def setTrail(self,p):
        self.__trail=None if p is None else point(p)

    def getLead(self):
        if self.__lead is not None:
            return list(self.__lead)
        return self._extrapolate(self.polyline.getVertices())

    def getTrail(self):
        if self.__trail is not None:
            return list(self.__trail)
        return self._extrapolate(self.polyline.getVertices()[::-1])

    ## mirror the second point through the first
    @staticmethod
    def _extrapolate(pts):
        if not pts:
            return None
        if len(pts) == 1:
            return list(pts[0])
        return sub(scale3(pts[0],2.0),pts[1])

    def isclosed(self):
        return False

    def setClosed(self,closed):
        if closed:
            raise ValueError('an adjacency line is always open')

    def getOutlineMode(self):
        return Primitive.LINE_STRIP_ADJACENCY

    def getVertices(self):
        pts = self.polyline.getVertices()
        lead = self.getLead()
        trail = self.getTrail()
        if lead is not None:
            pts.insert(0,lead)
        if trail is not None:
            pts.append(trail)
        return pts

    def getFace(self):
        return Mesh()

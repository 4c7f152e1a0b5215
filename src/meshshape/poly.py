## parameter sources for contour- and rectangle-family shapes

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
Parameter Sources
=================

``Polyline`` is an ordered list of points with a closed/open flag, and
``AxisRectangle`` is a stored position, width and height.  Neither
knows anything about rotation or meshes; the shape classes read them
once per query.
"""

from meshshape.geom import *


def _checkpoint(p):
    if not (isinstance(p,(list,tuple)) and 2 <= len(p) <= 4 and
            all(isgoodnum(x) for x in p)):
        raise ValueError('attempt to add a non point to Polyline: {}'.format(p))
    return point(p)


class Polyline:
    """ordered point list with a closed flag"""

    def __init__(self,points=None,closed=False):
        self.__points=[]
        self.__closed=bool(closed)
        if points is not None:
            self.addVertices(points)

    def __repr__(self):
        return 'Polyline({},closed={})'.format(vstr(self.__points),self.__closed)

    def __len__(self):
        return len(self.__points)

    def addVertex(self,p):
        self.__points.append(_checkpoint(p))

    def addVertices(self,points):
        for p in points:
            self.addVertex(p)

    ## set a point to a specified value, or append it when i is one
    ## past the end
    def setVertex(self,i,p):
        if i < len(self.__points):
            self.__points[i]=_checkpoint(p)
        elif i == len(self.__points):
            self.addVertex(p)
        else:
            raise ValueError('index out of range in Polyline.setVertex(): {}'.format(i))

    def clear(self):
        self.__points=[]

    def close(self):
        self.__closed=True

    def setClosed(self,closed):
        self.__closed=bool(closed)

    def isclosed(self):
        return self.__closed

    def size(self):
        return len(self.__points)

    def getVertices(self):
        """return a copy of the point list"""
        return [list(p) for p in self.__points]


class AxisRectangle:
    """stored position, width and height of an axis-aligned rectangle"""

    def __init__(self,x=0.0,y=0.0,width=0.0,height=0.0,z=0.0):
        self.z=z
        self.set(x,y,width,height)

    def __repr__(self):
        return 'AxisRectangle({},{},{},{})'.format(self.x,self.y,
                                                   self.width,self.height)

    def set(self,x,y,width,height):
        for v in (x,y,width,height):
            if not isgoodnum(v):
                raise ValueError('bad value passed to AxisRectangle.set(): {}'.format(v))
        if width < 0 or height < 0:
            raise ValueError('negative rectangle dimensions not allowed')
        self.x=x
        self.y=y
        self.width=width
        self.height=height

    def setSize(self,width,height):
        self.set(self.x,self.y,width,height)

    def setPosition(self,p):
        p = point(p)
        self.x=p[0]
        self.y=p[1]
        self.z=p[2]

    def getPosition(self):
        return point(self.x,self.y,self.z)

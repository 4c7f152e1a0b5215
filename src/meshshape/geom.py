## foundational vector and intersection kernel for meshshape
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

"""foundational vector and intersection kernel for **meshshape**

====================
OVERVIEW
====================

The meshshape.geom module provides the small amount of computational
geometry the shape classes need: homogeneous vector construction,
three-vector arithmetic, and infinite line/line intersection in the XY
plane and in 3D.  Everything here is a pure function; nothing keeps
state.

vectors and points
==================

Vectors are lists of four numbers, ``[x,y,z,w]``.  Points are vectors
that lie in the w>0 half-space, and the vector operations below ignore
``w`` and return results in the w=1 hyperplane.  ``vect()`` and
``point()`` will make a vector out of just about any plausible set of
arguments; unspecified z values are set to 0 and unspecified w values
to 1.

All of the following are points: ::

   pnt1 = point(0,0)
   pnt2 = point(2.0,-2.0,5.0)
   pnt3 = point((1.0,2.0,3.0))
   pnt4 = [1.0, 2.0, 3.0, 1.0]

line intersection
=================

- ``intersectXY(p0,p1,q0,q1)`` -- intersect the infinite line through
  ``p0``, ``p1`` with the infinite line through ``q0``, ``q1``, both
  lying in the same XY plane.  Returns ``None`` for parallel lines.

- ``intersect3D(p0,p1,q0,q1)`` -- the same operation for lines in
  space.  The second line is projected into the plane spanned by both
  line directions, so skew lines resolve to the point on the first
  line that is closest to the second.  Returns ``None`` for parallel
  or degenerate lines.

Both are used by the stroke code to find mitered corners, where two
offset edges are intersected to produce a single corner vertex.

"""

from math import *

## constants
epsilon=0.000005
pi2 = 2.0*pi

## operations on scalars
## -----------------------

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n,bool)) and isinstance(n,(int,float))

def close(a,b):
    """ are two scalars the same within epsilon
    """
    return abs(a-b) < epsilon

def sign(x):
    """ return -1, 0 or 1 according to the sign of ``x`` """
    if x > 0:
        return 1
    elif x < 0:
        return -1
    return 0

## operations on vectors
## ------------------------

def vect(a=False,b=False,c=False,d=False):
    """Convenience function for making a homogeneous coordinates 4 vector
from practically anything
    """
    r = [0,0,0,1]
    if isgoodnum(a):
        r[0]=a
        if isgoodnum(b):
            r[1]=b
            if isgoodnum(c):
                r[2]=c
                if isgoodnum(d):
                    r[3]=d
    elif isinstance(a,(tuple,list)):
        for i in range(min(4,len(a))):
            x=a[i]
            if isgoodnum(x):
                r[i]=x
    return r

def isvect(x):
    """
    check to see if argument is a proper vector for our purposes
    """
    return isinstance(x,list) and len(x) == 4 and isgoodnum(x[0]) and \
        isgoodnum(x[1]) and isgoodnum(x[2]) and isgoodnum(x[3])

def point(x=False,y=False,z=False,w=False):
    """Point creation from a point, a sequence of coordinates, or scalars"""
    if isinstance(x,(tuple,list)):
        r = vect(x)
    else:
        r = vect(x,y,z,w)
    if r[3] > 0:
        return r
    raise ValueError('bad w argument to point()')

def ispoint(x):
    """ is it a point?"""
    return isvect(x) and x[3] > 0.0

## determine if two vectors are the same, to within epsilon
def vclose(a,b):
    return close(mag(sub(a,b)),0)

## R^3 -> R^3 functions: ignore w component
## ------------------------------------------------
def add(a,b):
    """ 3 vector, `a + b`"""
    return [a[0]+b[0],a[1]+b[1],a[2]+b[2],1.0]

def sub(a,b):
    """ 3 vector, `a - b`"""
    return [a[0]-b[0],a[1]-b[1],a[2]-b[2],1.0]

def scale3(a,c):
    """ 3 vector, vector ''a'' times scalar ``c``, `a * c`"""
    return [a[0]*c,a[1]*c,a[2]*c,1.0]

def cross(a,b):
    """Compute the cross generalized product of a x b, assuming that both
    fall into the w=1 hyperplane

    """
    return [ a[1]*b[2] - a[2]*b[1],
             a[2]*b[0] - a[0]*b[2],
             a[0]*b[1] - a[1]*b[0],
             1.0 ]

def normalize(a):
    """ unit 3 vector in the direction of ``a``, or the zero vector if
    ``a`` has no length"""
    m = mag(a)
    if m < epsilon*epsilon:
        return [0.0,0.0,0.0,1.0]
    return scale3(a,1.0/m)

## linear interpolation between a and b, u=0 is a, u=1 is b
def lerp(a,b,u):
    return add(scale3(a,1.0-u),scale3(b,u))

## R^3 -> R functions -- ignore w component
## ----------------------------------------
def dot(a,b):
    """ 3 vector ``a`` dot ``b`` """
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]

def mag(a):
    """ compute the magnitude of 3 vector ``a``"""
    return sqrt(a[0]*a[0]+a[1]*a[1]+a[2]*a[2])

def dist(a,b):
    """ compute the euclidean distance between two 3 vector points ``a`` and ``b``"""
    return mag(sub(a,b))

# pretty printing string formatter for vectors and lists of vectors.
# Falls back to str() for anything else.
def vstr(a):
    if not isinstance(a,list):
        return str(a)
    if isvect(a):
        if abs(a[3]-1.0) > epsilon: # not in w=1
            return "[{}, {}, {}, {}]".format(a[0],a[1],a[2],a[3])
        elif abs(a[2]) > epsilon: # not in z=0
            return "[{}, {}, {}]".format(a[0],a[1],a[2])
        else: # in x-y plane
            return "[{}, {}]".format(a[0],a[1])
    if len(a) > 0 and all(isvect(x) for x in a):
        return "[" + ", ".join(vstr(x) for x in a) + "]"
    return str(a)


## line intersection
## ------------------

## Compute the intersection of the infinite lines p0-p1 and q0-q1
## that lie in the same x,y plane.  Ratios of signed areas give the
## parameter of the intersection along p0-p1.
def intersectXY(p0,p1,q0,q1):
    """Compute the intersection of the infinite line through ``p0`` and
    ``p1`` with the infinite line through ``q0`` and ``q1``, all of which
    lie in the same XY plane.  Returns ``None`` if the lines are
    parallel.
    """

    x1=p0[0]
    y1=p0[1]
    x2=p1[0]
    y2=p1[1]
    x3=q0[0]
    y3=q0[1]
    x4=q1[0]
    y4=q1[1]

    denom=(x1-x2)*(y3-y4)-(y1-y2)*(x3-x4)
    if abs(denom) < epsilon*epsilon:
        return None

    t = ((x1-x3)*(y3-y4) - (y1-y3)*(x3-x4))/denom
    return [x1 + t*(x2-x1), y1 + t*(y2-y1), p0[2], 1.0]

## Generalization of intersectXY() to lines in space.  The signed
## areas of the 2D case become triple products against the normal of
## the plane spanned by both line directions, which projects the
## second line into that plane.
def intersect3D(p0,p1,q0,q1):
    """Compute the intersection of the infinite line through ``p0`` and
    ``p1`` with the infinite line through ``q0`` and ``q1``.  If the
    lines are skew, return the point on the first line where the
    projection of the second line crosses it.  Returns ``None`` if the
    lines are parallel or either line has no direction.
    """

    da = sub(p1,p0)
    db = sub(q1,q0)
    n = cross(da,db)
    if mag(n) <= epsilon*mag(da)*mag(db):
        return None

    ## signed areas of the triangles (q0,q1,p0) and (q0,q1,p1), scaled
    ## by |n|
    s0 = dot(cross(db,sub(p0,q0)),n)
    s1 = dot(cross(db,sub(p1,q0)),n)
    w = s0 - s1
    if w == 0.0:
        return None

    return add(p0,scale3(da,s0/w))

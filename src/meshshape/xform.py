## matrix and quaternion transformations for 3D homogeneous
## coordinates in meshshape

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

"""matrix and quaternion transformations for **meshshape**

A matrix is represented as a list of four four vectors, rows first.
Because vectors are plain lists, ``Matrix.mul(x)`` with a vector
argument assumes a column vector, `Mx`.

Shape orientation is kept as a unit ``Quaternion``, which composes
without drift and converts to a ``Matrix`` when a full affine transform
(rotation about an anchor point) is needed.
"""

from math import *
import meshshape.geom as geom


class Matrix:
    """4x4 transformation matrix class for transforming homogemenous 3D coordinates"""

    def __init__(self,a=None):
        self.m = [[1,0,0,0],
                  [0,1,0,0],
                  [0,0,1,0],
                  [0,0,0,1]]

        if isinstance(a,Matrix):
            self.m = [list(r) for r in a.m]
        elif isinstance(a,(tuple,list)):
            if len(a) == 4 and all(isinstance(r,(tuple,list)) and len(r) == 4
                                   for r in a):
                vals = [x for r in a for x in r]
            elif len(a) == 16:
                vals = list(a)
            else:
                raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
            for ind,x in enumerate(vals):
                if not geom.isgoodnum(x):
                    raise ValueError('bad element in matrix initialization: {}'.format(x))
                self.m[ind//4][ind%4] = x
        elif a is not None:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

    def __repr__(self):
        return "Matrix({},{},{},{})".format(self.m[0],self.m[1],
                                            self.m[2],self.m[3])

    #return value indexed by i,j
    def get(self,i,j):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to get: {},{}'.format(i,j))
        return self.m[i][j]

    def getrow(self,i):
        if i < 0 or i > 3:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        return self.m[i]

    def getcol(self,j):
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        return [self.m[0][j],
                self.m[1][j],
                self.m[2][j],
                self.m[3][j]]

    # matrix multiply.  If x is a matrix, compute MX.  If x is a
    # vector, compute Mx.
    def mul(self,x):
        if isinstance(x,Matrix):
            result = Matrix()
            for i in range(4):
                for j in range(4):
                    result.m[i][j] = _dot4(self.getrow(i),x.getcol(j))
            return result
        elif geom.isvect(x):
            return [_dot4(self.getrow(i),x) for i in range(4)]

        raise ValueError('bad thing passed to mul(): {}'.format(x))


def _dot4(a,b):
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]+a[3]*b[3]


def _unitaxis(axis):
    m = geom.mag(axis)
    if m < geom.epsilon:
        raise ValueError('zero-length rotation axis not allowed')
    return geom.scale3(axis,1.0/m)


# return the generalized 4x4 arbitrary axis rotation matrix, angle in
# degrees
def Rotation(axis,angle,inverse=False):
    u = _unitaxis(axis)
    if inverse:
        angle *= -1.0
    rad = (angle%360.0)*geom.pi2/360.0

    ux = u[0]
    uy = u[1]
    uz = u[2]

    cang = cos(rad)
    cmin = 1.0-cang
    sang = sin(rad)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin-uz*sang, ux*uz*cmin+uy*sang,0],
         [uy*ux*cmin+uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang,0],
         [uz*ux*cmin-uy*sang, uz*uy*cmin+ux*sang, cang+uz*uz*cmin,0],
         [0,0,0,1]]

    return Matrix(R)

def Translation(delta,inverse=False):
    if inverse:
        delta = geom.scale3(delta,-1.0)
    T = [[1,0,0,delta[0]],
         [0,1,0,delta[1]],
         [0,0,1,delta[2]],
         [0,0,0,1]]
    return Matrix(T)


class Quaternion:
    """unit quaternion ``w + xi + yj + zk`` representing a 3D rotation"""

    def __init__(self,w=1.0,x=0.0,y=0.0,z=0.0):
        self.w = w
        self.x = x
        self.y = y
        self.z = z

    def __repr__(self):
        return "Quaternion({},{},{},{})".format(self.w,self.x,self.y,self.z)

    def __eq__(self,other):
        if not isinstance(other,Quaternion):
            return NotImplemented
        return (self.w,self.x,self.y,self.z) == \
            (other.w,other.x,other.y,other.z)

    def norm(self):
        return sqrt(self.w*self.w + self.x*self.x +
                    self.y*self.y + self.z*self.z)

    def normalized(self):
        n = self.norm()
        if n < geom.epsilon:
            raise ValueError('cannot normalize a zero quaternion')
        return Quaternion(self.w/n,self.x/n,self.y/n,self.z/n)

    def conjugate(self):
        return Quaternion(self.w,-self.x,-self.y,-self.z)

    ## Hamilton product, self * q.  The resulting rotation applies q
    ## first, then self.
    def mul(self,q):
        return Quaternion(
            self.w*q.w - self.x*q.x - self.y*q.y - self.z*q.z,
            self.w*q.x + self.x*q.w + self.y*q.z - self.z*q.y,
            self.w*q.y - self.x*q.z + self.y*q.w + self.z*q.x,
            self.w*q.z + self.x*q.y - self.y*q.x + self.z*q.w)

    def rotate(self,v):
        """rotate the 3 vector ``v``, returning a new vector in the w=1
        hyperplane"""
        ## v' = v + 2w(u x v) + 2u x (u x v), u the vector part
        u = [self.x,self.y,self.z,1.0]
        t = geom.scale3(geom.cross(u,v),2.0)
        return geom.add(geom.add(v,geom.scale3(t,self.w)),geom.cross(u,t))

    def matrix(self):
        """return the equivalent 4x4 rotation ``Matrix``"""
        w,x,y,z = self.w,self.x,self.y,self.z
        return Matrix([[1-2*(y*y+z*z), 2*(x*y-w*z), 2*(x*z+w*y), 0],
                       [2*(x*y+w*z), 1-2*(x*x+z*z), 2*(y*z-w*x), 0],
                       [2*(x*z-w*y), 2*(y*z+w*x), 1-2*(x*x+y*y), 0],
                       [0,0,0,1]])


## quaternion for a rotation of angle degrees about axis, right-handed
def AxisAngle(axis,angle):
    u = _unitaxis(axis)
    half = radians(angle)/2.0
    s = sin(half)
    return Quaternion(cos(half),u[0]*s,u[1]*s,u[2]*s)

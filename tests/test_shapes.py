from math import sqrt

import pytest

from meshshape.geom import close, cross, dot, mag, point, sub, vclose
from meshshape.mesh import Primitive, triangles
from meshshape.poly import Polyline
from meshshape.shape import FORWARD, Shape
from meshshape.shapes import (CENTER, CHORD, CORNER, PIE, AdjacencyLine, Arc,
                              Circle, Contour, Grid, Line, Rectangle)
from meshshape.xform import Rotation

DOWN = point(0, 0, -1)


def allclose(verts, expected):
    assert len(verts) == len(expected)
    for v, e in zip(verts, expected):
        assert vclose(v, point(e)), (v, e)


def area(mesh):
    total = 0.0
    for _, v0, v1, v2 in triangles(mesh):
        total += mag(cross(sub(point(v1), point(v0)),
                           sub(point(v2), point(v0)))) / 2.0
    return total


def assert_on_plate(shape):
    plate = shape.getPlate()
    n = plate[:3] + [1.0]
    assert vclose(n, shape.getNormal())
    for v in shape.getOutline().vertices:
        assert close(dot(n, v) + plate[3], 0.0)


class TestRectangle:
    def test_corner_mode(self):
        r = Rectangle(1, 2, 4, 2)
        assert r.getRectMode() is CORNER
        assert r.isclosed()
        allclose(r.getVertices(), [(1, 2), (1, 4), (5, 4), (5, 2)])

    def test_center_mode(self):
        r = Rectangle(0, 0, 4, 2, CENTER)
        allclose(r.getVertices(), [(-2, -1), (-2, 1), (2, 1), (2, -1)])
        r.setRectMode("corner")
        allclose(r.getVertices(), [(0, 0), (0, 2), (4, 2), (4, 0)])

    def test_bad_mode(self):
        with pytest.raises(ValueError):
            Rectangle(0, 0, 1, 1, "middle")

    def test_bad_size(self):
        with pytest.raises(ValueError):
            Rectangle(0, 0, -1, 1)

    def test_raw_outline(self):
        mesh = Rectangle(0, 0, 4, 2).getOutline()
        assert mesh.getMode() is Primitive.LINE_LOOP
        assert mesh.getNumIndices() == 0
        allclose(mesh.vertices, [(0, 0), (0, 2), (4, 2), (4, 0)])
        assert all(vclose(n, DOWN) for n in mesh.normals)

    def test_outline_is_repeatable(self):
        r = Rectangle(0, 0, 4, 2)
        r.setRotation(30, (1, 1, 0))
        assert r.getOutline().vertices == r.getOutline().vertices
        assert r.getOutline(1, 2).vertices == r.getOutline(1, 2).vertices

    def test_face(self):
        face = Rectangle(0, 0, 1, 1).getFace()
        assert face.getMode() is Primitive.TRIANGLE_STRIP
        assert face.indices == [0, 1, 3, 2]
        tris = list(triangles(face))
        assert len(tris) == 2
        for n, _, _, _ in tris:
            assert vclose(point(n), DOWN)
        assert close(area(face), 1.0)

    def test_size_and_position(self):
        r = Rectangle()
        r.set(1, 1, 2, 3)
        assert (r.width, r.height) == (2, 3)
        r.setSize(5, 6)
        r.setPosition(point(-1, -1))
        allclose(r.getVertices(), [(-1, -1), (-1, 5), (4, 5), (4, -1)])
        assert vclose(r.getPosition(), point(-1, -1))


class TestOrientation:
    def test_unrotated_normal(self):
        assert vclose(Rectangle().getNormal(), DOWN)

    @pytest.mark.parametrize("axis,angle", [((1, 0, 0), 90),
                                            ((0, 1, 0), 45),
                                            ((1, 1, 1), 120),
                                            ((0, 0, 1), 30)])
    def test_normal_follows_rotation(self, axis, angle):
        r = Rectangle(0, 0, 1, 1)
        r.setRotation(angle, axis)
        assert vclose(r.getNormal(), Rotation(axis, angle).mul(FORWARD))

    def test_quarter_turn_about_x(self):
        r = Rectangle(0, 0, 1, 1)
        r.setRotation(90, (1, 0, 0))
        assert vclose(r.getNormal(), point(0, 1, 0))

    def test_rotation_about_anchor(self):
        r = Rectangle(0, 0, 1, 1)
        r.setAnchor(point(1, 1))
        r.setRotation(180, (0, 0, 1))
        allclose(r.getOutline().vertices, [(2, 2), (2, 1), (1, 1), (1, 2)])

    def test_rotate_composes(self):
        a = Rectangle(0, 0, 2, 1)
        a.rotate(45, (0, 0, 1))
        a.rotate(45, (0, 0, 1))
        b = Rectangle(0, 0, 2, 1)
        b.setRotation(90, (0, 0, 1))
        allclose(a.getOutline().vertices, b.getOutline().vertices)

    def test_set_rotation_replaces(self):
        r = Rectangle(0, 0, 1, 1)
        r.setRotation(90, (1, 0, 0))
        r.setRotation(0, (0, 1, 0))
        assert vclose(r.getNormal(), DOWN)

    def test_bad_orientation(self):
        with pytest.raises(ValueError):
            Rectangle().setOrientation([1, 0, 0, 0])

    def test_rotated_stroke_is_rotated_ribbon(self):
        flat = Rectangle(0, 0, 4, 2).getOutline(0.5, 0.25).vertices
        r = Rectangle(0, 0, 4, 2)
        r.setRotation(30, (1, 2, 0))
        mat = r.getTransform()
        mesh = r.getOutline(0.5, 0.25)
        allclose(mesh.vertices, [mat.mul(v) for v in flat])
        assert all(vclose(n, r.getNormal()) for n in mesh.normals)

    def test_rotated_face_normals(self):
        r = Rectangle(0, 0, 1, 1)
        r.setRotation(60, (0, 1, 0))
        for n, _, _, _ in triangles(r.getFace()):
            assert vclose(point(n), r.getNormal())


class TestPlate:
    def test_rotated_rectangle(self):
        r = Rectangle(1, 1, 2, 3)
        r.setAnchor(point(0, 0, 2))
        r.setRotation(40, (1, 0, 1))
        assert_on_plate(r)

    def test_circle_grid_contour(self):
        c = Circle(point(1, 1, 1), 2.0, 8)
        c.setRotation(70, (0, 1, 0))
        assert_on_plate(c)
        g = Grid(0, 0, 3, 3, 2, 2)
        g.setRotation(10, (1, 0, 0))
        assert_on_plate(g)
        k = Contour(Polyline([(0, 0), (1, 3), (2, 1)], closed=True))
        k.setRotation(90, (0, 1, 0))
        assert_on_plate(k)


class TestGrid:
    def test_center_mode_shifts_lattice(self):
        corner = Grid(0, 0, 4, 2, 2, 1)
        center = Grid(0, 0, 4, 2, 2, 1, mode=CENTER)
        assert len(center.getVertices()) == (2 + 2) * (1 + 2)
        assert len(center.getVertices()) == len(corner.getVertices())
        shifted = [sub(v, point(2, 1)) for v in corner.getVertices()]
        allclose(center.getVertices(), shifted)
        allclose(center.getOutline().vertices,
                 [(-2, -1), (-2, 1), (2, 1), (2, -1)])

    def test_center_mode_cell_stroke(self):
        mesh = Grid(0, 0, 2, 2, 1, 1, mode=CENTER).getOutline(0.2, 0.0)
        assert mesh.getNumVertices() == 40
        assert vclose(mesh.vertices[0], point(-1, -1))
        assert vclose(mesh.vertices[8], point(-0.9, -0.9))
        assert vclose(mesh.vertices[9], point(-1.1, -1.1))

    def test_lattice(self):
        g = Grid(0, 0, 3, 3, 2, 2)
        verts = g.getVertices()
        assert len(verts) == 16
        assert vclose(verts[0], point(0, 0))
        assert vclose(verts[1], point(1, 0))
        assert vclose(verts[4], point(0, 1))
        assert vclose(verts[-1], point(3, 3))

    def test_raw_outline_is_perimeter(self):
        mesh = Grid(0, 0, 3, 3, 2, 2).getOutline()
        assert mesh.getMode() is Primitive.LINE_LOOP
        allclose(mesh.vertices, [(0, 0), (0, 3), (3, 3), (3, 0)])

    def test_stroke_counts(self):
        g = Grid(0, 0, 2, 2, 1, 1)
        strip = g.getOutline(0.2, 0.1)
        assert strip.getMode() is Primitive.TRIANGLE_STRIP
        assert strip.getNumVertices() == 40
        assert strip.getNumIndices() == 58
        tris = g.getOutline(0.2, 0.1, Primitive.TRIANGLES)
        assert tris.getNumIndices() == 120
        assert Grid(0, 0, 2, 2).getOutline(0.2, 0.1).getNumVertices() == 16

    def test_stroke_positions(self):
        mesh = Grid(0, 0, 2, 2, 1, 1).getOutline(0.2, 0.0)
        ## perimeter first, flush with the boundary on the inside
        assert vclose(mesh.vertices[0], point(0, 0))
        assert vclose(mesh.vertices[1], point(0, 0))
        ## then the first cell, split evenly around its lines
        assert vclose(mesh.vertices[8], point(0.1, 0.1))
        assert vclose(mesh.vertices[9], point(-0.1, -0.1))

    def test_face(self):
        face = Grid(0, 0, 3, 3, 2, 2).getFace()
        assert face.getNumVertices() == 4
        assert face.indices == [0, 1, 3, 2]

    @pytest.mark.parametrize("u,v", [(-1, 0), (0, 1.5), (True, 0)])
    def test_bad_division(self, u, v):
        with pytest.raises(ValueError):
            Grid(0, 0, 1, 1, u, v)


class TestArc:
    def quarter(self, **kw):
        return Arc(point(0, 0), 1.0, 0, 90, 2, **kw)

    def test_open(self):
        a = self.quarter()
        h = sqrt(2) / 2
        allclose(a.getVertices(), [(1, 0), (h, -h), (0, -1)])
        assert a.getOutline().getMode() is Primitive.LINE_STRIP

    def test_pie(self):
        a = self.quarter()
        a.setClosed(True)
        assert a.getClosure() is PIE
        verts = a.getVertices()
        assert len(verts) == 4
        assert vclose(verts[-1], point(0, 0))
        assert a.getOutline().getMode() is Primitive.LINE_LOOP

    def test_chord(self):
        a = self.quarter(closed=True, closure=CHORD)
        assert len(a.getVertices()) == 3
        assert a.getOutline().getMode() is Primitive.LINE_LOOP

    def test_pie_face(self):
        face = self.quarter(closed=True).getFace()
        assert face.getMode() is Primitive.TRIANGLES
        assert face.getNumVertices() == 4
        assert face.indices == [0, 1, 2, 0, 2, 3]
        for n, _, _, _ in triangles(face):
            assert vclose(point(n), DOWN)

    def test_chord_face(self):
        face = self.quarter(closed=True, closure="chord").getFace()
        assert face.getNumVertices() == 3
        assert face.indices == [0, 1, 2]

    def test_closed_stroke_counts(self):
        a = self.quarter(closed=True)
        mesh = a.getOutline(0.1, 0.1)
        assert mesh.getNumVertices() == 8
        assert mesh.getNumIndices() == 10

    def test_errors(self):
        a = self.quarter()
        with pytest.raises(ValueError):
            a.setRadius(-1)
        with pytest.raises(ValueError):
            a.setResolution(0)
        with pytest.raises(ValueError):
            a.setClosed(True, "bogus")


class TestCircle:
    def test_vertices(self):
        c = Circle(point(0, 0), 2.0, 4)
        assert c.isclosed()
        allclose(c.getVertices(), [(2, 0), (0, -2), (-2, 0), (0, 2)])
        assert c.getOutline().getMode() is Primitive.LINE_LOOP

    def test_face(self):
        face = Circle(point(0, 0), 2.0, 4).getFace()
        assert face.getNumVertices() == 5
        assert face.indices == [0, 1, 2, 0, 2, 3, 0, 3, 4, 0, 4, 1]
        assert close(area(face), 8.0)
        for n, _, _, _ in triangles(face):
            assert vclose(point(n), DOWN)

    def test_stroke_wraps(self):
        mesh = Circle(point(0, 0), 2.0, 4).getOutline(0.5, 0.5)
        assert mesh.getNumVertices() == 8
        assert mesh.indices[-2:] == [0, 1]

    def test_always_full_and_closed(self):
        c = Circle()
        with pytest.raises(ValueError):
            c.setClosed(False)
        with pytest.raises(ValueError):
            c.setAngle(0, 180)
        assert len(c.getVertices()) == 32

    def test_closure_is_always_pie(self):
        c = Circle()
        c.setClosed(True, PIE)
        assert c.getClosure() is PIE
        with pytest.raises(ValueError):
            c.setClosed(True, CHORD)
        with pytest.raises(ValueError):
            c.setClosed(True, "bogus")
        assert c.getClosure() is PIE


class TestLine:
    def test_outline(self):
        line = Line(point(0, 0), point(4, 0))
        assert not line.isclosed()
        mesh = line.getOutline()
        assert mesh.getMode() is Primitive.LINE_STRIP
        allclose(mesh.vertices, [(0, 0), (4, 0)])

    def test_no_face(self):
        face = Line(point(0, 0), point(4, 0)).getFace()
        assert face.getNumVertices() == 0


class TestContour:
    SQUARE = [(0, 0), (0, 2), (2, 2), (2, 0)]

    def test_closed_flag_follows_polyline(self):
        c = Contour(Polyline(self.SQUARE))
        assert c.getOutline().getMode() is Primitive.LINE_STRIP
        c.setClosed(True)
        assert c.getPolyline().isclosed()
        assert c.getOutline().getMode() is Primitive.LINE_LOOP

    def test_face(self):
        c = Contour(Polyline(self.SQUARE, closed=True))
        face = c.getFace()
        assert face.getMode() is Primitive.TRIANGLES
        assert face.getNumVertices() == 4
        assert close(area(face), 4.0)
        for n, _, _, _ in triangles(face):
            assert vclose(point(n), DOWN)
        assert all(vclose(n, DOWN) for n in face.normals)

    def test_rotated_face(self):
        c = Contour(Polyline(self.SQUARE, closed=True))
        c.setRotation(90, (0, 1, 0))
        face = c.getFace()
        assert close(area(face), 4.0)
        for n, _, _, _ in triangles(face):
            assert vclose(point(n), c.getNormal())

    def test_empty(self):
        c = Contour()
        face = c.getFace()
        assert face.getMode() is Primitive.TRIANGLE_STRIP
        assert face.getNumVertices() == 0
        assert face.getNumIndices() == 0
        assert c.getPlate() == [0.0, 0.0, -1.0, 0.0]

    def test_bad_polyline(self):
        with pytest.raises(ValueError):
            Contour([(0, 0), (1, 1)])


class TestAdjacencyLine:
    def test_default_neighbours(self):
        line = AdjacencyLine(Polyline([(0, 0), (1, 0), (2, 0)]))
        assert line.getOutlineMode() is Primitive.LINE_STRIP_ADJACENCY
        allclose(line.getVertices(),
                 [(-1, 0), (0, 0), (1, 0), (2, 0), (3, 0)])

    def test_explicit_neighbours(self):
        line = AdjacencyLine(Polyline([(0, 0), (1, 0)]),
                             lead=point(0, -1), trail=point(1, 1))
        allclose(line.getVertices(), [(0, -1), (0, 0), (1, 0), (1, 1)])
        mesh = line.getOutline(0.5, 0.5)
        assert mesh.getNumVertices() == 4

    def test_always_open(self):
        line = AdjacencyLine(Polyline([(0, 0), (1, 0)]))
        assert not line.isclosed()
        with pytest.raises(ValueError):
            line.setClosed(True)
        assert line.getFace().getNumVertices() == 0

    def test_empty(self):
        line = AdjacencyLine()
        assert line.getVertices() == []
        assert line.getOutline(1, 1).getNumVertices() == 0


def test_abstract_shape():
    s = Shape()
    with pytest.raises(NotImplementedError):
        s.getVertices()
    assert s.getFace().getNumVertices() == 0

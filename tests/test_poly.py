import pytest

from meshshape.geom import point
from meshshape.poly import AxisRectangle, Polyline


class TestPolyline:
    def test_points_and_flag(self):
        pl = Polyline([(0, 0), (1, 0), (1, 1, 2)])
        assert pl.size() == 3
        assert len(pl) == 3
        assert not pl.isclosed()
        assert pl.getVertices()[2] == [1, 1, 2, 1]
        pl.close()
        assert pl.isclosed()
        pl.setClosed(False)
        assert not pl.isclosed()

    def test_vertices_are_copies(self):
        pl = Polyline([point(0, 0), point(1, 0)])
        verts = pl.getVertices()
        verts[0][0] = 99
        assert pl.getVertices()[0] == [0, 0, 0, 1]

    def test_set_vertex(self):
        pl = Polyline([point(0, 0)])
        pl.setVertex(0, point(2, 2))
        pl.setVertex(1, point(3, 3))
        assert pl.getVertices() == [[2, 2, 0, 1], [3, 3, 0, 1]]
        with pytest.raises(ValueError):
            pl.setVertex(5, point(1, 1))
        pl.clear()
        assert pl.size() == 0

    def test_bad_points(self):
        pl = Polyline()
        for bad in ("xy", (1,), (1, "a"), 3.0, (1, True)):
            with pytest.raises(ValueError):
                pl.addVertex(bad)


class TestAxisRectangle:
    def test_storage(self):
        r = AxisRectangle(1, 2, 3, 4)
        assert (r.x, r.y, r.width, r.height) == (1, 2, 3, 4)
        assert r.getPosition() == [1, 2, 0.0, 1]
        r.setPosition(point(5, 6, 7))
        assert r.getPosition() == [5, 6, 7, 1]
        r.setSize(8, 9)
        assert (r.x, r.width, r.height) == (5, 8, 9)

    def test_bad_dimensions(self):
        with pytest.raises(ValueError):
            AxisRectangle(0, 0, -1, 1)
        with pytest.raises(ValueError):
            AxisRectangle(0, 0, 1, None)

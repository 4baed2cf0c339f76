import pytest

from tilegame.geometry import Vec2
from tilegame.polygon import Diagram, Polygon, Region, point_in_bounds


@pytest.fixture
def unit_square():
    return Polygon([Vec2(0.0, 0.0), Vec2(1.0, 0.0), Vec2(1.0, 1.0), Vec2(0.0, 1.0)])


@pytest.fixture
def degenerate():
    return Polygon([Vec2(0.0, 0.0), Vec2(0.0, 0.0), Vec2(0.0, 0.0)])


def test_centroid_regular_polygon(unit_square):
    centroid = unit_square.centroid()
    assert centroid.x == pytest.approx(0.5)
    assert centroid.y == pytest.approx(0.5)


def test_centroid_irregular_polygon():
    polygon = Polygon([Vec2(-3.0, -3.0), Vec2(3.0, -3.0), Vec2(3.0, 3.0), Vec2(-3.0, 3.0)])
    centroid = polygon.centroid()
    assert abs(centroid.x) < 1e-6 and abs(centroid.y) < 1e-6


def test_centroid_convex_polygon():
    polygon = Polygon([Vec2(-2.0, -2.0), Vec2(2.0, -2.0), Vec2(2.0, 2.0), Vec2(-2.0, 2.0)])
    assert polygon.centroid() == Vec2(0.0, 0.0)


def test_centroid_degenerate_polygon(degenerate):
    assert degenerate.centroid().is_nan()


def test_contains_point_convex_polygon(unit_square):
    assert unit_square.contains_point(Vec2(0.5, 0.5))
    assert not unit_square.contains_point(Vec2(2.0, 2.0))


def test_contains_point_on_edge(unit_square):
    assert unit_square.contains_point(Vec2(0.5, 0.5))
    assert not unit_square.contains_point(Vec2(1.5, 0.5))
    assert not unit_square.contains_point(Vec2(1.5, 1.5))


def test_contains_point_degenerate_polygon(degenerate):
    assert not degenerate.contains_point(Vec2(0.0, 0.0))


def test_too_few_vertices_rejected():
    with pytest.raises(ValueError):
        Polygon([Vec2(0.0, 0.0), Vec2(1.0, 0.0)])


def test_area_and_perimeter(unit_square):
    assert unit_square.double_area() == 2.0
    assert unit_square.area() == 1.0
    assert unit_square.perimeter() == 4.0


def test_clockwise_area_is_negative():
    polygon = Polygon([Vec2(0.0, 0.0), Vec2(0.0, 1.0), Vec2(1.0, 1.0), Vec2(1.0, 0.0)])
    assert polygon.area() == -1.0


def test_bounding_box():
    polygon = Polygon([Vec2(-1.0, 2.0), Vec2(3.0, -4.0), Vec2(0.5, 5.0)])
    assert polygon.bounding_box() == (Vec2(-1.0, -4.0), Vec2(3.0, 5.0))


def test_vertex_access(unit_square):
    assert unit_square.vertex(2) == Vec2(1.0, 1.0)
    assert unit_square.vertex(4) is None
    assert unit_square.vertex(-1) is None
    assert len(unit_square) == 4


def test_add_and_remove_vertex(unit_square):
    unit_square.add_vertex(Vec2(0.0, 0.0))
    assert len(unit_square) == 5
    unit_square.remove_vertex(Vec2(0.0, 0.0))
    assert unit_square.vertices == [Vec2(1.0, 0.0), Vec2(1.0, 1.0), Vec2(0.0, 1.0)]


def test_point_in_bounds():
    box = (Vec2(0.0, 0.0), Vec2(2.0, 2.0))
    assert point_in_bounds(Vec2(2.0, 0.0), box)
    assert not point_in_bounds(Vec2(2.1, 0.0), box)
    assert not point_in_bounds(Vec2(1.0, -0.1), box)


def test_region_delegates_to_polygon(unit_square):
    region = Region(unit_square)
    assert region.area() == 1.0
    assert region.vertices[1] == Vec2(1.0, 0.0)


def test_diagram_holds_regions(unit_square):
    diagram = Diagram(sites=[(0, 0)], regions=[Region(unit_square)])
    assert diagram.sites == [(0, 0)]
    assert diagram.regions[0].area() == 1.0
    assert Diagram().regions == []
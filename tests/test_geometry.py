import pytest

from vtiler.geometry import (
    G,
    Collection,
    Line,
    MultiLine,
    MultiPoint,
    MultiPoint3,
    MultiPolygon,
    Point,
    Point3,
    Polygon,
    new_line,
    new_line_from_pts,
    new_line_truncated_from_pts,
    new_multi_line,
    new_polygon,
)


def _flatten(pairs):
    return [c for pair in pairs for c in pair]


def test_new_line_pairs_points():
    line = new_line(0, 0, 5, 0, 5, 5, 0, 5)
    assert len(line) == 4
    assert line[0] == Point(0, 0)
    assert line[2] == Point(5, 5)
    assert line.subpoints() == list(line)


def test_new_line_odd_count_raises():
    with pytest.raises(ValueError):
        new_line(1, 2, 3)


def test_line_data_round_trip():
    line = new_line(10, 10, 20, 10, 20, 20)
    assert new_line(*_flatten(line.data())) == line


def test_line_data_is_a_copy():
    line = new_line(1, 1, 2, 2)
    data = line.data()
    data[0][0] = 99
    assert line[0] == Point(1, 1)


def test_new_line_from_pts_round_trip():
    line = new_line(4, 2, 6, 2, 8, 3)
    assert new_line_from_pts(*line) == line
    assert new_line_from_pts((4, 2), (6, 2), (8, 3)) == line


def test_new_line_truncated_from_pts():
    line = new_line_truncated_from_pts(Point(1.7, -2.7), (3.0, 4.9))
    assert line == [Point(1.0, -2.0), Point(3.0, 4.0)]


def test_truncation_keeps_integer_values():
    line = new_line(1, 1, 3, 1, 5, 3)
    assert new_line_truncated_from_pts(*line) == line


def test_multi_line_data_and_lines():
    ml = new_multi_line([10, 10, 20, 10, 20, 20], [10, 5, 20, 10, 15, 20])
    assert ml.lines() == [new_line(10, 10, 20, 10, 20, 20), new_line(10, 5, 20, 10, 15, 20)]
    assert MultiLine(new_line(*_flatten(d)) for d in ml.data()) == ml


def test_polygon_from_rings():
    outer = new_line(1, 1, 9, 1, 9, 9, 1, 9)
    inner = new_line(4, 2, 2, 4, 2, 6)
    polygon = new_polygon(outer, inner)
    assert polygon.sublines() == [outer, inner]
    assert polygon.data() == [outer.data(), inner.data()]


def test_multi_polygon_polygons():
    p1 = Polygon([new_line(10, 10, 20, 10, 20, 20, 10, 20)])
    p2 = Polygon([new_line(10, 10, 20, 10, 20, 20)])
    mp = MultiPolygon([p1, p2])
    assert mp.polygons() == [p1, p2]
    assert mp.data() == [p1.data(), p2.data()]


def test_type_names():
    assert Point(1, 2).get_type() == "Point"
    assert Point3(1, 2, 3).get_type() == "Point"
    assert new_line(1, 2).get_type() == "LineString"
    assert MultiLine().get_type() == "MultiLine"
    assert Polygon().get_type() == "Polygon"
    assert MultiPolygon().get_type() == "MultiPolygon"


def test_string_names():
    assert str(new_line(1, 2)) == "Line"
    assert str(MultiLine()) == "MultiLine"
    assert str(Polygon()) == "Polygon"
    assert str(MultiPolygon()) == "MultiPolygon"
    assert str(MultiPoint()) == "MultiPoint"
    assert str(MultiPoint3()) == "MultiPoint3"
    assert str(Collection()) == "Collection"


def test_point_string_format():
    assert str(Point(10, 10)) == "Point(10,10)"
    assert str(Point(1e6, 0.5)) == "Point(1e+06,0.5)"


def test_point3_accessors():
    pt = Point3(10, 20, 30)
    assert (pt.x, pt.y, pt.z) == (10, 20, 30)
    assert pt.data() == [10, 20, 30]


def test_multipoint_points():
    mp = MultiPoint([Point(10, 10), Point(20, 20)])
    assert mp.points() == [Point(10, 10), Point(20, 20)]
    mp3 = MultiPoint3([Point3(10, 10, 10), Point3(20, 20, 20)])
    assert mp3.points() == [Point3(10, 10, 10), Point3(20, 20, 20)]


def test_g_line_access():
    line = new_line(0, 0, 5, 5)
    g = G(line)
    assert g.is_line()
    assert not g.is_polygon()
    assert not g.is_point()
    assert g.as_line() is line


def test_g_wrong_type_raises():
    g = G(Point(1, 2))
    assert g.is_point()
    assert g.as_point() == Point(1, 2)
    with pytest.raises(TypeError):
        g.as_line()
    with pytest.raises(TypeError):
        g.as_polygon()
    with pytest.raises(TypeError):
        g.as_multi_polygon()


def test_g_unwraps_nested():
    polygon = Polygon([new_line(0, 0, 5, 0, 5, 5)])
    g = G(G(G(polygon)))
    assert g.is_polygon()
    assert g.as_polygon() is polygon
    mp = MultiPolygon([polygon])
    assert G(G(mp)).as_multi_polygon() is mp


def test_collection_geometries_wraps_each():
    line = new_line(0, 0, 1, 1)
    point = Point(3, 4)
    collection = Collection([line, point])
    wrapped = collection.geometries()
    assert [g.geometry for g in wrapped] == [line, point]
    assert wrapped[0].is_line()
    assert wrapped[1].is_point()
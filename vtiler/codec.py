"""JSON encoding and decoding of the plain geometry types."""

from __future__ import annotations

import json
from typing import Any, Callable

from vtiler.geometry import (
    Collection,
    Line,
    MultiLine,
    MultiPoint,
    MultiPoint3,
    MultiPolygon,
    Point,
    Point3,
    Polygon,
    _format_number,
    new_line,
)

__all__ = [
    "GeometryDecodeError",
    "marshal_json",
    "unmarshal_json",
    "map_as_geometry",
]


class GeometryDecodeError(ValueError):
    """Raised when a geometry cannot be built from its serialised form."""


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def _coords_point(pt: Any) -> str:
    return "[" + ",".join(_format_number(c) for c in pt) + "]"


def _coords_of(items: Any, inner: Callable[[Any], str]) -> str:
    return "[" + ",".join(inner(item) for item in items) + "]"


def _coords_line(line: Any) -> str:
    return _coords_of(line, _coords_point)


def _coords_polygon(polygon: Any) -> str:
    return _coords_of(polygon, _coords_line)


def _template(name: str, coords: str) -> str:
    return '{"type":"' + name + '","coordinates":' + coords + "}"


def _encode(geometry: Any) -> str | None:
    """Encode one geometry, or return None when it has no encoding."""
    if isinstance(geometry, Point3):
        return _template("Point3", _coords_point(geometry))
    if isinstance(geometry, Point):
        return _template("Point", _coords_point(geometry))
    if isinstance(geometry, MultiPoint):
        return _template("MultiPoint", _coords_line(geometry))
    if isinstance(geometry, MultiPoint3):
        return _template("MultiPoint3", _coords_line(geometry))
    if isinstance(geometry, Line):
        return _template("LineString", _coords_line(geometry))
    if isinstance(geometry, MultiLine):
        return _template("MultiLineString", _coords_polygon(geometry))
    if isinstance(geometry, Polygon):
        return _template("Polygon", _coords_polygon(geometry))
    if isinstance(geometry, MultiPolygon):
        return _template("MultiPolygon", _coords_of(geometry, _coords_polygon))
    if isinstance(geometry, Collection):
        # Members without an encoding are left out, but their separator stays.
        parts = (_encode(member) or "" for member in geometry)
        return '{"type":"GeometryCollection","geometries":[' + ",".join(parts) + "]}"
    return None


def marshal_json(geometry: Any) -> str:
    """Encode a geometry as a GeoJSON-like JSON string."""
    encoded = _encode(geometry)
    if encoded is None:
        raise TypeError(f"cannot encode geometry of type {type(geometry).__name__}")
    return encoded


# ---------------------------------------------------------------------------
# Decoding of the JSON form
# ---------------------------------------------------------------------------

_MISSING = object()


def _number(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise GeometryDecodeError(f"expected a number, got {value!r}")
    return float(value)


def _nested(raw: Any, depth: int) -> list:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise GeometryDecodeError(f"expected an array, got {raw!r}")
    if depth == 1:
        return [_number(v) for v in raw]
    return [_nested(v, depth - 1) for v in raw]


def _point(values: list[float]) -> Point:
    if len(values) < 2:
        raise GeometryDecodeError("not enough points for a Point")
    return Point(values[0], values[1])


def _point3(values: list[float]) -> Point3:
    if len(values) < 3:
        raise GeometryDecodeError("not enough points for a Point3")
    return Point3(values[0], values[1], values[2])


def _points(rows: list[list[float]]) -> list[Point]:
    return [_point(row) for row in rows]


def _decode(obj: Any) -> Any:
    if not isinstance(obj, dict):
        raise GeometryDecodeError(f"expected a JSON object, got {obj!r}")
    typ = obj.get("type")
    if typ is None:
        typ = ""
    if not isinstance(typ, str):
        raise GeometryDecodeError(f"geometry type must be a string, got {typ!r}")

    def coords(depth: int) -> list:
        raw = obj.get("coordinates", _MISSING)
        if raw is _MISSING:
            raise GeometryDecodeError("missing coordinates")
        return _nested(raw, depth)

    if typ == "Point":
        return _point(coords(1))
    if typ == "Point3":
        return _point3(coords(1))
    if typ == "MultiPoint":
        return MultiPoint(_points(coords(2)))
    if typ == "MultiPoint3":
        return MultiPoint3(_point3(row) for row in coords(2))
    if typ == "LineString":
        return Line(_points(coords(2)))
    if typ == "MultiLineString":
        return MultiLine(Line(_points(rows)) for rows in coords(3))
    if typ == "Polygon":
        return Polygon(Line(_points(rows)) for rows in coords(3))
    if typ == "MultiPolygon":
        return MultiPolygon(
            Polygon(Line(_points(rows)) for rows in lines) for lines in coords(4)
        )
    if typ == "GeometeryCollection":
        members = obj.get("geometries") or []
        if not isinstance(members, list):
            raise GeometryDecodeError("geometries must be an array")
        return Collection(_decode(member) for member in members)
    raise GeometryDecodeError(f"unknown Type ({typ})")


def unmarshal_json(data: str | bytes | bytearray) -> Any:
    """Decode a geometry from its JSON form."""
    try:
        obj = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise GeometryDecodeError(f"invalid JSON: {exc}") from exc
    return _decode(obj)


# ---------------------------------------------------------------------------
# Decoding of the generic mapping form
# ---------------------------------------------------------------------------


def _float_list(value: Any) -> list[float]:
    if not isinstance(value, list) or not all(
        isinstance(v, (int, float)) and not isinstance(v, bool) for v in value
    ):
        raise GeometryDecodeError(
            f"incorrect value type looking for float64 slice, not {value!r}"
        )
    return [float(v) for v in value]


def _type_of(mapping: dict, *wants: str) -> str:
    typ = mapping.get("type")
    if not isinstance(typ, str):
        raise GeometryDecodeError("was not able to convert type to string")
    if typ not in wants:
        raise GeometryDecodeError(
            f"expected all subtypes to be one of type ({','.join(wants)}), not {typ}"
        )
    return typ


def _map_line(value: Any) -> Line:
    try:
        vals = _float_list(value)
    except GeometryDecodeError as exc:
        raise GeometryDecodeError(f"incorrect values for line type: {exc}") from exc
    try:
        return new_line(*vals)
    except ValueError as exc:
        raise GeometryDecodeError(str(exc)) from exc


def _map_point(value: Any) -> Point:
    try:
        vals = _float_list(value)
    except GeometryDecodeError as exc:
        raise GeometryDecodeError(f"incorrect values for point type: {exc}") from exc
    if len(vals) < 2:
        raise GeometryDecodeError("not enough values for point type")
    return Point(vals[0], vals[1])


def _map_point3(value: Any) -> Point3:
    try:
        vals = _float_list(value)
    except GeometryDecodeError as exc:
        raise GeometryDecodeError(f"incorrect values for point3 type: {exc}") from exc
    if len(vals) < 3:
        raise GeometryDecodeError("not enough values for point3 type")
    return Point3(vals[0], vals[1], vals[2])


def _each_value(value: Any, want: str, build: Callable[[Any], Any]) -> list:
    if not isinstance(value, list):
        raise GeometryDecodeError("expected values to be a list")
    result = []
    for index, item in enumerate(value):
        if not isinstance(item, dict):
            raise GeometryDecodeError(f"expected v[{index}] to be a mapping")
        _type_of(item, want)
        result.append(build(item.get("value")))
    return result


def _map_polygon(value: Any) -> Polygon:
    return Polygon(_each_value(value, "linestring", _map_line))


def map_as_geometry(mapping: dict) -> Any:
    """Build a geometry from a ``{"type": ..., "value": ...}`` mapping."""
    typ = _type_of(
        mapping,
        "point",
        "point3",
        "linestring",
        "polygon",
        "multipolygon",
        "multipoint",
        "multiline",
    )
    value = mapping.get("value")
    if typ == "point":
        return _map_point(value)
    if typ == "point3":
        return _map_point3(value)
    if typ == "linestring":
        return _map_line(value)
    if typ == "polygon":
        return _map_polygon(value)
    if typ == "multipolygon":
        return MultiPolygon(_each_value(value, "polygon", _map_polygon))
    if typ == "multipoint":
        return MultiPoint(_each_value(value, "point", _map_point))
    return MultiLine(_each_value(value, "linestring", _map_line))
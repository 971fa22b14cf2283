"""Plain planar geometry types: points, lines, polygons and their multi forms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, NamedTuple

GEOMETRY_POINT = "Point"
GEOMETRY_LINE_STRING = "LineString"
GEOMETRY_POLYGON = "Polygon"
GEOMETRY_MULTI_POLYGON = "MultiPolygon"


def _format_number(value: float) -> str:
    """Format a float the way a shortest round-trip ``%v`` would."""
    v = float(value)
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "+Inf" if v > 0 else "-Inf"
    if v == 0:
        return "-0" if math.copysign(1.0, v) < 0 else "0"
    sign, raw_digits, exponent = Decimal(repr(v)).as_tuple()
    raw = "".join(str(d) for d in raw_digits)
    decimal_point = len(raw) + exponent
    digits = raw.rstrip("0") or "0"
    prefix = "-" if sign else ""
    exp = decimal_point - 1
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if exp < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp):02d}"
    if decimal_point <= 0:
        return f"{prefix}0.{'0' * -decimal_point}{digits}"
    if decimal_point >= len(digits):
        return prefix + digits + "0" * (decimal_point - len(digits))
    return f"{prefix}{digits[:decimal_point]}.{digits[decimal_point:]}"


def _xy(pt: Any) -> tuple[float, float]:
    """Return the x and y of anything with ``x``/``y`` attributes or a pair."""
    if hasattr(pt, "x") and hasattr(pt, "y"):
        return float(pt.x), float(pt.y)
    return float(pt[0]), float(pt[1])


class Point(NamedTuple):
    """A two dimensional point."""

    x: float
    y: float

    def data(self) -> list[float]:
        return [self.x, self.y]

    def get_type(self) -> str:
        return GEOMETRY_POINT

    def __str__(self) -> str:
        return f"Point({_format_number(self.x)},{_format_number(self.y)})"


class Point3(NamedTuple):
    """A three dimensional point."""

    x: float
    y: float
    z: float

    def data(self) -> list[float]:
        return [self.x, self.y, self.z]

    def get_type(self) -> str:
        return GEOMETRY_POINT

    def __str__(self) -> str:
        coords = ",".join(_format_number(c) for c in self)
        return f"Point3({coords})"


class MultiPoint(list):
    """A collection of two dimensional points."""

    def points(self) -> list[Point]:
        return list(self)

    def __str__(self) -> str:
        return "MultiPoint"


class MultiPoint3(list):
    """A collection of three dimensional points."""

    def points(self) -> list[Point3]:
        return list(self)

    def __str__(self) -> str:
        return "MultiPoint3"


class Line(list):
    """An ordered run of points."""

    def data(self) -> list[list[float]]:
        return [pt.data() for pt in self]

    def get_type(self) -> str:
        return GEOMETRY_LINE_STRING

    def subpoints(self) -> list[Point]:
        return list(self)

    def __str__(self) -> str:
        return "Line"


class MultiLine(list):
    """A collection of lines."""

    def data(self) -> list[list[list[float]]]:
        return [line.data() for line in self]

    def get_type(self) -> str:
        return "MultiLine"

    def lines(self) -> list[Line]:
        return list(self)

    def __str__(self) -> str:
        return "MultiLine"


class Polygon(list):
    """A polygon: an outer ring followed by any inner rings."""

    def data(self) -> list[list[list[float]]]:
        return [line.data() for line in self]

    def get_type(self) -> str:
        return GEOMETRY_POLYGON

    def sublines(self) -> list[Line]:
        return list(self)

    def __str__(self) -> str:
        return "Polygon"


class MultiPolygon(list):
    """A collection of polygons."""

    def data(self) -> list[list[list[list[float]]]]:
        return [polygon.data() for polygon in self]

    def get_type(self) -> str:
        return GEOMETRY_MULTI_POLYGON

    def polygons(self) -> list[Polygon]:
        return list(self)

    def __str__(self) -> str:
        return "MultiPolygon"


class Collection(list):
    """A heterogeneous collection of geometries."""

    def geometries(self) -> list[G]:
        return [G(geometry) for geometry in self]

    def __str__(self) -> str:
        return "Collection"


@dataclass
class G:
    """A wrapper around any geometry offering typed access."""

    geometry: Any

    def _base(self) -> Any:
        geometry = self.geometry
        while isinstance(geometry, G):
            geometry = geometry.geometry
        return geometry

    def _as(self, kind: type, name: str) -> Any:
        base = self._base()
        if not isinstance(base, kind):
            raise TypeError(f"Geo is not a {name}! : {type(base).__name__}")
        return base

    def is_line(self) -> bool:
        return isinstance(self._base(), Line)

    def as_line(self) -> Line:
        return self._as(Line, "Line")

    def is_polygon(self) -> bool:
        return isinstance(self._base(), Polygon)

    def as_polygon(self) -> Polygon:
        return self._as(Polygon, "Polygon")

    def as_multi_polygon(self) -> MultiPolygon:
        return self._as(MultiPolygon, "MultiPolygon")

    def is_point(self) -> bool:
        return isinstance(self._base(), Point)

    def as_point(self) -> Point:
        return self._as(Point, "Point")

    def __str__(self) -> str:
        return str(self._base())


def new_line(*args: float) -> Line:
    """Build a line from a flat run of x, y coordinate pairs."""
    if len(args) % 2:
        raise ValueError(f"new_line requires pairs of coordinates, got {len(args)} values")
    coords = [float(c) for c in args]
    return Line(Point(x, y) for x, y in zip(coords[::2], coords[1::2]))


def new_line_from_pts(*args: Any) -> Line:
    """Build a line from point-like values."""
    return Line(Point(*_xy(pt)) for pt in args)


def new_line_truncated_from_pts(*args: Any) -> Line:
    """Build a line from point-like values, truncating coordinates toward zero."""
    return Line(
        Point(float(math.trunc(x)), float(math.trunc(y)))
        for x, y in (_xy(pt) for pt in args)
    )


def new_multi_line(*args: Iterable[float]) -> MultiLine:
    """Build a multi line from several flat coordinate runs."""
    return MultiLine(new_line(*coords) for coords in args)


def new_polygon(main: Iterable[Any], *args: Iterable[Any]) -> Polygon:
    """Build a polygon from an outer ring and optional inner rings of points."""
    polygon = Polygon([new_line_from_pts(*main)])
    polygon.extend(new_line_from_pts(*ring) for ring in args)
    return polygon
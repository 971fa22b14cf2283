"""Integer bounding boxes grown from points and geometries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from vtiler.geometry import Line, MultiLine, MultiPoint, MultiPolygon, Point, Polygon

__all__ = ["MinMax", "merge_min_max", "min_max_point", "format_min_max"]


@dataclass
class MinMax:
    """An integer bounding box; empty until a point or box is added."""

    min_x: int = 0
    min_y: int = 0
    max_x: int = 0
    max_y: int = 0
    initialized: bool = False

    def min(self) -> tuple[int, int]:
        return self.min_x, self.min_y

    def max(self) -> tuple[int, int]:
        return self.max_x, self.max_y

    def width(self) -> int:
        return self.max_x - self.min_x

    def height(self) -> int:
        return self.max_y - self.min_y

    def sentinal_pts(self) -> list[list[int]]:
        """The four corners, clockwise from the minimum corner."""
        return [
            [self.min_x, self.min_y],
            [self.max_x, self.min_y],
            [self.max_x, self.max_y],
            [self.min_x, self.max_y],
        ]

    def merge(self, other: MinMax | None) -> MinMax:
        """Grow this box to cover ``other``; returns self."""
        if other is None or not other.initialized:
            return self
        if not self.initialized:
            self.min_x, self.min_y = other.min_x, other.min_y
            self.max_x, self.max_y = other.max_x, other.max_y
            self.initialized = True
            return self
        self.min_x = min(self.min_x, other.min_x)
        self.min_y = min(self.min_y, other.min_y)
        self.max_x = max(self.max_x, other.max_x)
        self.max_y = max(self.max_y, other.max_y)
        return self

    def merge_fn(self, fn: Callable[[], MinMax | None]) -> MinMax:
        return self.merge(fn())

    def add_point(self, x: int, y: int) -> MinMax:
        """Grow this box to cover the point; returns self."""
        if not self.initialized:
            self.min_x = self.max_x = x
            self.min_y = self.max_y = y
            self.initialized = True
            return self
        self.min_x = min(self.min_x, x)
        self.min_y = min(self.min_y, y)
        self.max_x = max(self.max_x, x)
        self.max_y = max(self.max_y, y)
        return self

    def _add_points(self, points: Iterable[Any]) -> None:
        for pt in points:
            self.add_point(int(pt[0]), int(pt[1]))

    def of_geometry(self, *args: Any) -> MinMax:
        """Grow this box to cover every point of the given geometries."""
        for geometry in args:
            if isinstance(geometry, Point):
                self._add_points([geometry])
            elif isinstance(geometry, (MultiPoint, Line)):
                self._add_points(geometry)
            elif isinstance(geometry, (MultiLine, Polygon)):
                for line in geometry:
                    self._add_points(line)
            elif isinstance(geometry, MultiPolygon):
                for polygon in geometry:
                    for line in polygon:
                        self._add_points(line)
        return self

    def is_zero(self) -> bool:
        return not self.initialized

    def expand_by(self, n: int) -> MinMax:
        self.min_x -= n
        self.min_y -= n
        self.max_x += n
        self.max_y += n
        self.initialized = True
        return self

    def __str__(self) -> str:
        return f"[{self.min_x} {self.min_y} , {self.max_x} {self.max_y}]"


def merge_min_max(first: MinMax | None, second: MinMax | None) -> MinMax:
    """Merge two optional boxes; a missing first box yields a fresh one."""
    if first is None:
        fresh = MinMax()
        return fresh.merge(second)
    return first.merge(second)


def min_max_point(box: MinMax | None, x: int, y: int) -> MinMax:
    """Add a point to an optional box, creating it when missing."""
    if box is None:
        box = MinMax()
    return box.add_point(x, y)


def format_min_max(box: MinMax | None) -> str:
    if box is None:
        return "(nil)[0 0 , 0 0]"
    return str(box)
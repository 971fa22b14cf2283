"""An SVG drawing surface for inspecting geometries, grids and regions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, TextIO

from vtiler.geometry import (
    Line,
    MultiLine,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    _format_number,
    _xy,
)
from vtiler.minmax import MinMax

__all__ = ["Canvas", "DEFAULT_SPACING"]

DEFAULT_SPACING = 10

_log = logging.getLogger(__name__)

_SVG_NAMESPACE = "http://www.w3.org/2000/svg"
_POINT_LABEL_STYLE = "text-anchor:middle;font-size:8;fill:white;stroke:black"

_XML_ESCAPES = {
    '"': "&#34;",
    "'": "&#39;",
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
}


def _escape_xml(text: str) -> str:
    return "".join(_XML_ESCAPES.get(ch, ch) for ch in text)


def _attributes(items: Iterable[str], end: str) -> str:
    """Join attribute strings; bare style strings are wrapped in ``style=``."""
    parts = (item if item.find("=") > 0 else f'style="{item}"' for item in items)
    return "".join(part + " " for part in parts) + end


@dataclass
class Canvas:
    """An SVG document written to a text stream as drawing proceeds."""

    board: MinMax = field(default_factory=MinMax)
    region: MinMax = field(default_factory=MinMax)
    writer: Optional[TextIO] = None

    # -- low level SVG elements ------------------------------------------

    def _write(self, text: str) -> None:
        if self.writer is None:
            raise RuntimeError("canvas has not been initialised with a writer")
        self.writer.write(text)

    def group(self, *args: str) -> None:
        """Open a ``<g>`` element with the given attributes."""
        self._write("<g " + _attributes(args, ">") + "\n")

    def gend(self) -> None:
        """Close the innermost ``<g>`` element."""
        self._write("</g>\n")

    def end(self) -> None:
        """Close the SVG document."""
        self._write("</svg>\n")

    def _gid(self, ident: str) -> None:
        self._write(f'<g id="{ident}">\n')

    def _gstyle(self, style: str) -> None:
        self._write(f'<g style="{style}">\n')

    def _circle(self, x: int, y: int, r: int, *styles: str) -> None:
        self._write(f'<circle cx="{x}" cy="{y}" r="{r}" ' + _attributes(styles, "/>\n"))

    def _text(self, x: int, y: int, text: str, *styles: str) -> None:
        self._write(
            f'<text x="{x}" y="{y}" '
            + _attributes(styles, ">")
            + _escape_xml(text)
            + "</text>\n"
        )

    def _line(self, x1: int, y1: int, x2: int, y2: int, *styles: str) -> None:
        self._write(
            f'<line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" ' + _attributes(styles, "/>\n")
        )

    def _rect(self, x: int, y: int, w: int, h: int, *styles: str) -> None:
        self._write(
            f'<rect x="{x}" y="{y}" width="{w}" height="{h}" ' + _attributes(styles, "/>\n")
        )

    def _path(self, d: str, *styles: str) -> None:
        self._write(f'<path d="{d}" ' + _attributes(styles, "/>\n"))

    # -- document ----------------------------------------------------------

    def init(self, writer: TextIO, width: int, height: int, grid: bool) -> Canvas:
        """Start the document on ``writer`` with a view around the board."""
        self.writer = writer
        board = self.board
        self._write(
            '<?xml version="1.0"?>\n'
            f'<svg width="{width}" height="{height}"\n'
            f'     viewBox="{int(board.min_x - 20)} {int(board.min_y - 20)} '
            f'{int(board.max_x + 20)} {int(board.max_y + 20)}"\n'
            f'     xmlns="{_SVG_NAMESPACE}">\n'
        )
        if grid:

            def draw(canvas: Canvas) -> None:
                canvas.draw_grid(10, False, "stroke:gray")
                canvas.draw_grid(100, True, "stroke:black")

            self.group_fn(['id="grid"'], draw)
        return self

    def group_fn(self, attrs: Iterable[str], fn: Callable[[Canvas], Any]) -> None:
        """Run ``fn`` inside a group carrying ``attrs``."""
        self.group(*attrs)
        fn(self)
        self.gend()

    def comment(self, text: str) -> Canvas:
        self._write("<!-- \n" + _escape_xml(text) + "\n -->")
        return self

    def commentf(self, fmt: str, *args: Any) -> Canvas:
        """Write a comment built with ``%`` formatting."""
        return self.comment(fmt % args if args else fmt)

    # -- grids and regions ---------------------------------------------------

    def _draw_grid(
        self,
        box: MinMax,
        n: int,
        label: bool,
        ident: str,
        style: str,
        point_style: str,
        origin_style: str,
    ) -> None:
        x, y, w, h = int(box.min_x), int(box.min_y), int(box.width()), int(box.height())
        self.group(f'id="{ident}"', f'style="{style}"')
        for i in range(x, x + w, n):
            self._line(i, y, i, y + h)
        for i in range(y, y + h, n):
            self._line(x, i, x + w, i)
        self.gend()
        if not label:
            return
        self.group(f'id="{ident}_origin"', f'style="{origin_style}"')
        self._line(0, y, 0, h)
        self._line(x, 0, w, 0)
        self.gend()
        self.group(f'id="{ident}_points"', f'style="{point_style}"')
        for i in range(x, w, n):
            self._circle(i, y, 2, "fill:black")
            self._text(i, y - 5, f"{i: 3d}")
        for i in range(x, h, n):
            self._circle(x, i, 2, "fill:black")
            self._text(x - 10, i + 2, f"{i: 3d}")
        self.gend()

    def draw_grid(self, n: int, label: bool, style: str) -> None:
        """Draw grid lines every ``n`` units across the board."""
        self._draw_grid(
            self.board, n, label, f"board_{n}", style, _POINT_LABEL_STYLE, "stroke:black"
        )

    def draw_region(self, with_grid: bool) -> None:
        """Shade the region, optionally with its own grid."""
        region = self.region
        self.group('id="region"', 'style="opacity:0.2"')
        self._rect(
            int(region.min_x),
            int(region.min_y),
            int(region.width()),
            int(region.height()),
            "stroke-dasharray:5,5;fill:red;opacity:0.3;;stroke:rgb(0,200,0)",
        )
        if with_grid:
            red_labels = "text-anchor:middle;font-size:8;fill:white;stroke:red"
            self._draw_grid(
                region, 10, False, "region_10", "stroke:red;opacity:0.2", red_labels, "stroke:red"
            )
            self._draw_grid(
                region, 100, True, "region_100", "stroke:red;opacity:0.3", red_labels, "stroke:red"
            )
        self.gend()

    # -- geometries ----------------------------------------------------------

    def draw_point(self, x: int, y: int, fill: str) -> None:
        self._gstyle(_POINT_LABEL_STYLE)
        self._circle(x, y, 1, "fill:" + fill)
        self._text(x, y + 5, f"({x} {y})")
        self.gend()

    def draw_polygon(
        self, polygon: Any, ident: str, style: str, point_style: str, draw_points: bool
    ) -> int:
        """Draw a polygon as one closed path; returns the number of points drawn."""
        self.group(f'id="{ident}"', 'style="opacity:1"')
        self._gid("polygon_path")
        path = ""
        count = 0
        for ring in polygon:
            pts = [_xy(pt) for pt in ring]
            if not pts:
                continue
            end = len(pts) - 1 if pts[0] == pts[-1] else len(pts)
            if end <= 0:
                continue
            for index, (x, y) in enumerate(pts[:end]):
                path += "M " if index == 0 else "L "
                path += f"{_format_number(x)} {_format_number(y)} "
                count += 1
            path += "Z "
        self.commentf("Point Count: %d", count)
        self._path(path, f'id="{ident}_{count}"', style)
        self.gend()
        self.gend()
        return count

    def draw_multi_polygon(
        self, multi_polygon: Any, ident: str, style: str, point_style: str, draw_points: bool
    ) -> int:
        self._gid(ident)
        count = sum(
            self.draw_polygon(polygon, f"{ident}_mp_{index}", style, point_style, draw_points)
            for index, polygon in enumerate(multi_polygon)
        )
        self.gend()
        return count

    def draw_line(
        self, line: Any, ident: str, style: str, point_style: str, draw_points: bool
    ) -> None:
        pts = [_xy(pt) for pt in line]
        self._gid(ident)
        self._gid(ident + "_line_path")
        path = "".join(
            ("M " if index == 0 else "L ") + f"{_format_number(x)} {_format_number(y)} "
            for index, (x, y) in enumerate(pts)
        )
        self._path(path, style)
        self.gend()
        if draw_points:
            self._gid(ident + "_points")
            marker_style = point_style or "fill:black"
            for px, py in pts:
                x, y = int(px), int(py)
                self._circle(x, y, 1, marker_style)
                self.group(
                    f'id="pt{x}_{y}" style="text-anchor:middle;font-size:8;'
                    'fill:white;stroke:black;opacity:0.7"'
                )
                self._text(x, y + 5, f"({x} {y})")
                self.gend()
            self.gend()
        self.gend()

    def draw_math_segments(self, segments: Iterable[Any], *args: str) -> None:
        """Draw each two-point segment as an SVG line."""
        segments = list(segments)
        _log.debug("Drawing lines(%d)", len(segments))
        for start, end in segments:
            x1, y1 = _xy(start)
            x2, y2 = _xy(end)
            self._line(int(x1), int(y1), int(x2), int(y2), *args)

    def draw_math_points(self, points: Iterable[Any], *args: str) -> None:
        """Draw the points joined as one open path."""
        pts = [_xy(pt) for pt in points]
        _log.debug("Drawing Points (%d)", len(pts))
        path = "".join(
            f"{'M' if index == 0 else 'L'} {_format_number(x)} {_format_number(y)} "
            for index, (x, y) in enumerate(pts)
        )
        self._path(path, *args)

    def draw_multi_line(
        self, multi_line: Any, ident: str, style: str, point_style: str, draw_points: bool
    ) -> None:
        self._gid(ident)
        for index, line in enumerate(multi_line):
            self.draw_line(line, f"{ident}_{index}", style, point_style, draw_points)
        self.gend()

    def draw_geometry(
        self, geometry: Any, ident: str, style: str, point_style: str, draw_points: bool
    ) -> int:
        """Draw any supported geometry; returns the polygon point count, if any."""
        count = 0
        if isinstance(geometry, MultiLine):
            self.draw_multi_line(geometry, "multiline_" + ident, style, point_style, draw_points)
        elif isinstance(geometry, MultiPolygon):
            count += self.draw_multi_polygon(
                geometry, "multipolygon_" + ident, style, point_style, draw_points
            )
        elif isinstance(geometry, Polygon):
            count += self.draw_polygon(
                geometry, "polygon_" + ident, style, point_style, draw_points
            )
        elif isinstance(geometry, Line):
            self.draw_line(geometry, "line_" + ident, style, point_style, draw_points)
        elif isinstance(geometry, Point):
            self._gid("point_" + ident)
            self.draw_point(int(geometry.x), int(geometry.y), point_style)
            self.gend()
        elif isinstance(geometry, MultiPoint):
            self._gid("multipoint_" + ident)
            for index, pt in enumerate(geometry):
                x, y = _xy(pt)
                self._gid(f"mp_{index}")
                self.draw_point(int(x), int(y), point_style)
                self.gend()
            self.gend()
        return count
# vtiler

Building blocks for working with vector map tiles: plain geometry types,
their JSON form, integer bounding boxes, two linked lists, an SVG writer for
looking at geometries while debugging, and a GeoJSON exporter that writes one
file per tile. The package has no runtime dependencies.

## Modules

- `vtiler.geometry`: `Point` and `Point3` (named tuples), and the list-based
  `MultiPoint`, `MultiPoint3`, `Line`, `MultiLine`, `Polygon`,
  `MultiPolygon` and `Collection`. Most have `data()` returning nested lists
  of floats, and `get_type()`. `G` wraps any geometry (unwrapping nested `G`s)
  and offers `is_line`, `as_line`, `is_polygon`, `as_polygon`,
  `as_multi_polygon`, `is_point` and `as_point`; the `as_*` methods raise
  `TypeError` on the wrong type. Constructors: `new_line(x0, y0, x1, y1, ...)`
  (raises `ValueError` on an odd number of values), `new_line_from_pts`,
  `new_line_truncated_from_pts`, `new_multi_line` and `new_polygon`.
- `vtiler.codec`: `marshal_json(geometry)` returns a compact JSON string such
  as `{"type":"Point","coordinates":[10,10]}` and raises `TypeError` for
  anything it cannot encode. `unmarshal_json(data)` decodes `Point`,
  `Point3`, `MultiPoint`, `MultiPoint3`, `LineString`, `MultiLineString`,
  `Polygon` and `MultiPolygon`, and a collection whose type is spelled
  `GeometeryCollection`. Note that `marshal_json` writes collections as
  `GeometryCollection`, which `unmarshal_json` does not accept.
  `map_as_geometry(mapping)` builds a geometry from nested
  `{"type": ..., "value": ...}` mappings with the lower-case types `point`,
  `point3`, `linestring`, `polygon`, `multipolygon`, `multipoint` and
  `multiline`. Input that cannot be decoded raises `GeometryDecodeError`, a
  `ValueError`.
- `vtiler.minmax`: `MinMax`, an integer bounding box that stays empty
  (`is_zero()`) until a point or box is added. It has `min`, `max`, `width`,
  `height`, `sentinal_pts` (the four corners), `merge`, `merge_fn`,
  `add_point`, `of_geometry` and `expand_by`; the growing methods change the
  box and return it. The functions `merge_min_max`, `min_max_point` and
  `format_min_max` also accept `None` for the box.
- `vtiler.dlist`: a doubly linked `List` of `Element` nodes, with `front`,
  `back`, `push_front`, `push_back`, `insert_before`, `insert_after`,
  `move_to_front`, `move_to_back`, `move_before`, `move_after`, `replace`,
  `remove`, `find_element_forward`, `find_element_backward` and
  `is_sentinel`. `len()` and iteration work; `Element.next` and
  `Element.prev` are `None` at the ends of a list.
- `vtiler.slist`: a circular singly linked `List` of `Element` nodes, where
  the back's `next` is the front. It has `front`, `back`, `is_in_list`,
  `get_before`, `push_front`, `push_back`, `insert_before`, `insert_after`,
  `remove`, `find_elements_between`, `for_each`, `for_each_idx` and `clear`.
  `caller_file_line()` returns `file:line` of the caller's caller.
  Both list modules have `slice_of_elements(*values)`.
- `vtiler.canvas`: `Canvas(board=MinMax(...), region=MinMax(...))`.
  `init(writer, width, height, grid)` starts an SVG document on a text
  stream. Then you can call `draw_point`, `draw_line`, `draw_multi_line`,
  `draw_polygon`, `draw_multi_polygon`, `draw_geometry`, `draw_grid`,
  `draw_region`, `draw_math_points`, `draw_math_segments`, `group`, `gend`,
  `group_fn`, `comment` and `commentf`. Call `end()` to close the document.
- `vtiler.exporter`: `Feature`, `Layer`, the abstract `Exporter`,
  `GeoJSONOptions` (file mode, directory mode, indentation) and
  `GeoJSONExporter` with `save_tile`, `save_tile_to_writer`, `extension` and
  `relative_tile_path`. Errors: `InvalidTileError`, `InvalidPathError` and
  `EmptyLayersError`, all `ValueError`s.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Geometry to JSON and back:

```python
from vtiler.geometry import new_line
from vtiler.codec import marshal_json, unmarshal_json

line = new_line(10, 10, 20, 10, 20, 20)
text = marshal_json(line)
# '{"type":"LineString","coordinates":[[10,10],[20,10],[20,20]]}'
assert unmarshal_json(text) == line
```

Bounding boxes:

```python
from vtiler.minmax import MinMax

box = MinMax()
box.add_point(10, 20)
box.add_point(30, 40)
print(box.width(), box.height())  # 20 20
print(box)                        # [10 20 , 30 40]
```

Drawing to SVG:

```python
import io
from vtiler.canvas import Canvas
from vtiler.geometry import new_line
from vtiler.minmax import MinMax

out = io.StringIO()
canvas = Canvas(board=MinMax(0, 0, 100, 100, True))
canvas.init(out, 400, 300, grid=True)
canvas.draw_geometry(new_line(0, 0, 30, 30), "demo", "stroke:green", "", True)
canvas.end()
svg_text = out.getvalue()
```

Exporting a tile:

```python
from types import SimpleNamespace
from vtiler.exporter import Feature, GeoJSONExporter, Layer
from vtiler.geometry import Point

exporter = GeoJSONExporter()
layer = Layer(name="places", features=[Feature(Point(0, 0), {"name": "origin"})])
tile = SimpleNamespace(z=10, x=512, y=512)
path = exporter.relative_tile_path(10, 512, 512)  # 10/512/512.geojson
exporter.save_tile([layer], tile, "tiles/" + path)
```

`tile` is any object with `z`, `x` and `y` attributes. `save_tile` creates
missing directories, writes a FeatureCollection with the tile's coordinates
under `properties`, and sets the file's mode. It raises `InvalidTileError` if
`tile` is `None` and `InvalidPathError` if the path is empty.
`save_tile_to_writer` writes the same collection, without the tile
properties, to a text stream. It raises `ValueError` if the stream is `None`.

## What this package does not do

It does not cut data into tiles, clip or simplify geometries, reproject
coordinates, or encode Mapbox vector tiles. It has no command-line program.
It gives you the pieces listed above. Deciding which features go into which
tile, and when to call the exporter, is left to your code.
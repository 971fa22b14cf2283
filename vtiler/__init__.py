"""Planar geometry types, JSON codec, bounding boxes, linked lists, SVG drawing and GeoJSON tile export."""

__version__ = "0.1.0"
__all__ = ["geometry", "codec", "minmax", "dlist", "slist", "canvas", "exporter"]
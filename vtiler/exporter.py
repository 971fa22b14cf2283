"""Layers of features and exporters that write tiles of them to disk."""

from __future__ import annotations

import json
import os
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, TextIO

from vtiler.codec import marshal_json

__all__ = [
    "InvalidTileError",
    "InvalidPathError",
    "EmptyLayersError",
    "Feature",
    "Layer",
    "Exporter",
    "GeoJSONOptions",
    "GeoJSONExporter",
    "DEFAULT_GEOJSON_OPTIONS",
    "DEFAULT_EXPORTER",
]


class InvalidTileError(ValueError):
    """Raised when no tile is given."""

    def __init__(self, message: str = "invalid tile") -> None:
        super().__init__(message)


class InvalidPathError(ValueError):
    """Raised when an empty output path is given."""

    def __init__(self, message: str = "invalid path") -> None:
        super().__init__(message)


class EmptyLayersError(ValueError):
    """Raised when there are no layers to work with."""

    def __init__(self, message: str = "empty layers") -> None:
        super().__init__(message)


@dataclass
class Feature:
    """A geometry with its properties."""

    geometry: Any
    properties: dict[str, Any] = field(default_factory=dict)


@dataclass
class Layer:
    """A named set of features in one spatial reference."""

    name: str
    features: list[Feature] = field(default_factory=list)
    srid: int = 0


class Exporter(ABC):
    """Writes the layers of a tile somewhere."""

    @abstractmethod
    def save_tile(self, layers: Iterable[Layer], tile: Any, path: str) -> None:
        """Write the layers of ``tile`` to ``path``."""

    @abstractmethod
    def extension(self) -> str:
        """The file extension of written tiles, without the dot."""

    @abstractmethod
    def relative_tile_path(self, zoom: int, x: int, y: int) -> str:
        """The path of a tile relative to the output directory."""


@dataclass(frozen=True)
class GeoJSONOptions:
    """File and directory permissions and layout of written GeoJSON."""

    file_mode: int = 0o644
    dir_mode: int = 0o755
    indent: bool = True


DEFAULT_GEOJSON_OPTIONS = GeoJSONOptions()


def _geometry_json(geometry: Any) -> Any:
    if geometry is None or isinstance(geometry, dict):
        return geometry
    return json.loads(marshal_json(geometry))


def _features(layers: Optional[Iterable[Layer]]) -> list[dict[str, Any]]:
    return [
        {
            "type": "Feature",
            "geometry": _geometry_json(feature.geometry),
            "properties": feature.properties,
        }
        for layer in layers or ()
        for feature in layer.features
    ]


class GeoJSONExporter(Exporter):
    """Writes each tile as a GeoJSON FeatureCollection; safe to share between threads."""

    def __init__(self, options: Optional[GeoJSONOptions] = None) -> None:
        self.options = options if options is not None else DEFAULT_GEOJSON_OPTIONS
        self._lock = threading.Lock()

    def _dump(self, data: dict[str, Any], stream: TextIO) -> None:
        if self.options.indent:
            json.dump(data, stream, indent=2, sort_keys=True, ensure_ascii=False)
        else:
            json.dump(data, stream, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
        stream.write("\n")

    def save_tile(self, layers: Iterable[Layer], tile: Any, path: str) -> None:
        """Write the layers to ``path``; ``tile`` must carry ``z``, ``x`` and ``y``."""
        with self._lock:
            if tile is None:
                raise InvalidTileError()
            if not path:
                raise InvalidPathError()
            directory = os.path.dirname(path) or "."
            os.makedirs(directory, mode=self.options.dir_mode, exist_ok=True)
            data = {
                "type": "FeatureCollection",
                "features": _features(layers),
                "properties": {"zoom": tile.z, "x": tile.x, "y": tile.y},
            }
            with open(path, "w", encoding="utf-8") as stream:
                self._dump(data, stream)
            os.chmod(path, self.options.file_mode)

    def extension(self) -> str:
        return "geojson"

    def relative_tile_path(self, zoom: int, x: int, y: int) -> str:
        return os.path.join(str(zoom), str(x), f"{y}.{self.extension()}")

    def save_tile_to_writer(self, layers: Iterable[Layer], tile: Any, writer: TextIO) -> None:
        """Write the layers as a FeatureCollection to a text stream."""
        if writer is None:
            raise ValueError("invalid writer")
        data = {"type": "FeatureCollection", "features": _features(layers)}
        self._dump(data, writer)


DEFAULT_EXPORTER: Exporter = GeoJSONExporter()
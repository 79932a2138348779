"""GeoJSON FeatureCollection decoding into shapely-backed features."""

import json
import logging
from dataclasses import dataclass, field
from typing import IO, Iterator

from shapely.errors import ShapelyError
from shapely.geometry import Polygon, shape
from shapely.geometry.base import BaseGeometry, BaseMultipartGeometry

from .errors import GeometryError, InputError

log = logging.getLogger(__name__)

NAME_KEYS = ("name", "NAME", "ADMIN", "admin")


@dataclass
class Feature:
    name: str
    geometry: BaseGeometry
    properties: dict = field(default_factory=dict)

    def rings(self) -> Iterator[list[tuple[float, float]]]:
        """Yield every coordinate ring as a fresh list of (lon, lat) degrees."""
        yield from _iter_rings(self.geometry)


def _iter_rings(geom: BaseGeometry) -> Iterator[list[tuple[float, float]]]:
    if geom.is_empty:
        return
    if isinstance(geom, Polygon):
        yield _ring(geom.exterior.coords)
        for hole in geom.interiors:
            yield _ring(hole.coords)
    elif isinstance(geom, BaseMultipartGeometry):
        # MultiPolygon, MultiLineString, MultiPoint, GeometryCollection
        for part in geom.geoms:
            yield from _iter_rings(part)
    else:
        # Point, LineString, LinearRing
        yield _ring(geom.coords)


def _ring(coords) -> list[tuple[float, float]]:
    return [(c[0], c[1]) for c in coords]


def _feature_name(properties: dict, index: int) -> str:
    for key in NAME_KEYS:
        value = properties.get(key)
        if value:
            return str(value)
    return f"feature-{index}"


def decode_collection(stream: IO) -> list[Feature]:
    """Decode a GeoJSON FeatureCollection from an open text or binary stream.

    Any feature whose geometry cannot be decoded aborts the whole decode.
    """
    try:
        data = json.load(stream)
    except (ValueError, UnicodeDecodeError) as exc:
        raise InputError(f"invalid GeoJSON: {exc}") from exc

    if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
        raise InputError("input is not a GeoJSON FeatureCollection")

    raw_features = data.get("features")
    if not isinstance(raw_features, list):
        raise InputError("FeatureCollection has no 'features' array")
    if not raw_features:
        raise InputError("No feature found")

    features = []
    for i, raw in enumerate(raw_features):
        if not isinstance(raw, dict):
            raise GeometryError(f"feature #{i} is not an object")
        properties = raw.get("properties") or {}
        name = _feature_name(properties, i)
        geometry = raw.get("geometry")
        if geometry is None:
            raise GeometryError(f"feature #{i} ({name}) has no geometry")
        try:
            geom = shape(geometry)
        except (ShapelyError, KeyError, TypeError, ValueError, IndexError) as exc:
            raise GeometryError(f"feature #{i} ({name}): {exc}") from exc
        features.append(Feature(name=name, geometry=geom, properties=properties))

    return features


def load_features(path: str) -> list[Feature]:
    """Open ``path`` and decode its FeatureCollection."""
    try:
        with open(path, "rb") as f:
            features = decode_collection(f)
    except OSError as exc:
        raise InputError(f"cannot read {path}: {exc}") from exc
    log.info("Loaded %d features from %s", len(features), path)
    return features

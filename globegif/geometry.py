"""Per-frame geometry: globe outline, projected rings, sub-path segmentation."""

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .features import Feature
from .projection import SEMI_MAJOR_AXIS, Projector, is_visible

Point = tuple[float, float]
Path = list[Point]


@dataclass(frozen=True)
class ViewTransform:
    """Projection-plane meters -> canvas pixels.

    The canvas origin sits at its center, the full ellipsoid diameter spans
    the canvas, and Y is flipped so north is up.
    """

    size: int
    radius: float = SEMI_MAJOR_AXIS

    @property
    def scale(self) -> float:
        return self.size / (2.0 * self.radius)

    def to_canvas(self, x: float, y: float) -> tuple[float, float]:
        half = self.size / 2.0
        return half + x * self.scale, half - y * self.scale

    def to_pixel(self, x: float, y: float) -> tuple[int, int]:
        cx, cy = self.to_canvas(x, y)
        return round(cx), round(cy)


@dataclass
class FrameGeometry:
    center_lon: float
    outline: list[Path] = field(default_factory=list)
    land: list[list[Path]] = field(default_factory=list)  # one entry per feature


def globe_outline(center_lon: float, step: float = 5.0) -> list[Point]:
    """Two meridians bounding the visible hemisphere, as (lon, lat) radians.

    Latitude runs -90..90 inclusive on the eastern limb, then 90 down to
    (but excluding) -90 on the western limb.
    """
    count = int(round(180.0 / step))
    east = math.radians(center_lon + 90.0)
    west = math.radians(center_lon - 90.0)

    ring = [(east, math.radians(-90.0 + i * step)) for i in range(count + 1)]
    ring += [(west, math.radians(90.0 - i * step)) for i in range(count)]
    return ring


def project_rings(feature: Feature, projector: Projector) -> Iterator[Path]:
    """Lazily yield each ring of ``feature`` converted to radians and projected."""
    for ring in feature.rings():
        yield projector.project([(math.radians(lon), math.radians(lat)) for lon, lat in ring])


def split_subpaths(ring: Iterable[Point]) -> list[Path]:
    """Break a projected ring at non-finite points.

    Each run of finite points becomes its own sub-path; no segment ever
    reaches into or across a non-finite run.
    """
    subpaths: list[Path] = []
    current: Path = []
    for point in ring:
        if is_visible(point):
            current.append(point)
        elif current:
            subpaths.append(current)
            current = []
    if current:
        subpaths.append(current)
    return subpaths


def suppress_redundant(path: Path, view: ViewTransform) -> Path:
    """Drop points landing on the same pixel as the previously kept point."""
    kept: Path = []
    previous = None
    for x, y in path:
        pixel = view.to_pixel(x, y)
        if pixel != previous:
            kept.append((x, y))
            previous = pixel
    return kept


def build_frame_geometry(features: list[Feature], projector: Projector,
                         view: ViewTransform,
                         outline_step: float = 5.0) -> FrameGeometry:
    """Project the outline and every feature for the projector's center longitude."""
    center = projector.center_lon
    outline = projector.project(globe_outline(center, outline_step))
    frame = FrameGeometry(center_lon=center, outline=split_subpaths(outline))

    for feature in features:
        paths: list[Path] = []
        for ring in project_rings(feature, projector):
            for sub in split_subpaths(ring):
                paths.append(suppress_redundant(sub, view))
        frame.land.append(paths)

    return frame

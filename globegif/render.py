"""Rotation sweep: one projected, rasterized, quantized frame per longitude."""

import logging
import math
from typing import Generator

from PIL import Image

from .animation import Animation
from .config import Settings
from .features import Feature
from .geometry import ViewTransform, build_frame_geometry
from .palette import quantize
from .projection import Projector
from .raster import render_frame

log = logging.getLogger(__name__)


def sweep_angles(start: float = 360.0, stop: float = 0.0, step: float = 3.0) -> list[float]:
    """Center longitudes from ``start`` down to ``stop`` inclusive."""
    if step <= 0:
        raise ValueError("step must be positive")
    if start < stop:
        return []
    count = math.floor((start - stop) / step + 1e-9) + 1
    return [start - i * step for i in range(count)]


def render_globe_frame(features: list[Feature], center_lon: float,
                       settings: Settings) -> Image.Image:
    """Project and paint one true-color frame centered on ``center_lon``."""
    projector = Projector(center_lon)
    view = ViewTransform(settings.size)
    geometry = build_frame_geometry(features, projector, view, settings.outline_step)
    return render_frame(geometry, view, settings.stroke_width)


def iter_frames(features: list[Feature],
                settings: Settings) -> Generator[tuple[float, Image.Image], None, None]:
    """Yield (center_lon, palette frame) in sweep order."""
    for lon in sweep_angles(settings.start, settings.stop, settings.step):
        frame = render_globe_frame(features, lon, settings)
        yield lon, quantize(frame)
        frame.close()


def render_animation(features: list[Feature], settings: Settings) -> Animation:
    """Run the whole sweep and collect the frames, in order, for encoding."""
    animation = Animation()
    for lon, frame in iter_frames(features, settings):
        animation.append(frame, settings.delay)
        log.debug("Rendered frame %d at lon_0=%g", len(animation), lon)
    log.info("Rendered %d frames", len(animation))
    return animation

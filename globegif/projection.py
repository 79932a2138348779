"""Orthographic projection: WGS84 lon/lat (radians) -> plane meters via pyproj."""

import logging
import math
import os

from pyproj import CRS, Transformer, datadir
from pyproj.enums import TransformDirection
from pyproj.exceptions import CRSError, ProjError

from .errors import ConfigError, ProjectionError

log = logging.getLogger(__name__)

SOURCE_CRS = "EPSG:4326"
SEMI_MAJOR_AXIS = 6378137.0      # meters
INVERSE_FLATTENING = 298.257223563


def configure_data_dir(path: str) -> None:
    """Point pyproj at a PROJ data directory. Call once, before any CRS is built."""
    if not os.path.isdir(path):
        raise ConfigError(f"PROJ data directory not found: {path}")
    datadir.set_data_dir(path)
    log.info("Using PROJ data directory %s", path)


def ortho_definition(center_lon: float, center_lat: float = 0.0) -> str:
    """PROJ string for an orthographic view centered on (center_lon, center_lat) degrees."""
    return (
        f"+proj=ortho +a={SEMI_MAJOR_AXIS} +rf={INVERSE_FLATTENING} "
        f"+towgs84=0,0,0,0,0,0,0 +lat_0={center_lat:f} +lon_0={center_lon:f}"
    )


def is_visible(point: tuple[float, float]) -> bool:
    """True when both projected coordinates are finite."""
    return math.isfinite(point[0]) and math.isfinite(point[1])


class Projector:
    """Projects WGS84 coordinates onto the orthographic plane.

    Origin is the view center.  X = east, Y = north, meters.  Points on the
    far hemisphere come back as non-finite pairs instead of extrapolated
    coordinates.
    """

    def __init__(self, center_lon: float, center_lat: float = 0.0):
        self.center_lon = center_lon
        self.center_lat = center_lat
        self.definition = ortho_definition(center_lon, center_lat)
        log.debug(self.definition)
        try:
            target = CRS.from_proj4(self.definition)
            self._transformer = Transformer.from_crs(SOURCE_CRS, target, always_xy=True)
        except (CRSError, ProjError) as exc:
            raise ProjectionError(f"invalid projection {self.definition!r}: {exc}") from exc

    def project(self, points: list[tuple[float, float]]) -> list[tuple[float, float]]:
        """Project a batch of (lon, lat) radian points; same length out."""
        if not points:
            return []
        lons = [p[0] for p in points]
        lats = [p[1] for p in points]
        try:
            xs, ys = self._transformer.transform(lons, lats, radians=True, errcheck=False)
        except ProjError as exc:
            raise ProjectionError(f"transform failed for {self.definition!r}: {exc}") from exc
        return list(zip(xs, ys))

    def unproject(self, points: list[tuple[float, float]]) -> list[tuple[float, float]]:
        """Inverse of :meth:`project`: plane meters back to (lon, lat) radians."""
        if not points:
            return []
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        try:
            lons, lats = self._transformer.transform(
                xs, ys, radians=True, errcheck=False,
                direction=TransformDirection.INVERSE,
            )
        except ProjError as exc:
            raise ProjectionError(f"inverse transform failed for {self.definition!r}: {exc}") from exc
        return list(zip(lons, lats))

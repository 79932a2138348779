"""Error taxonomy. Every failure is fatal for the whole run."""


class GlobeError(Exception):
    """Base class; ``stage`` names the pipeline stage that failed."""

    stage = "globe"


class ConfigError(GlobeError):
    stage = "config"


class InputError(GlobeError):
    stage = "input"


class GeometryError(GlobeError):
    stage = "geometry"


class ProjectionError(GlobeError):
    stage = "projection"


class OutputError(GlobeError):
    stage = "output"

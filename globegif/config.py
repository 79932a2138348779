"""Run settings, resolved once at startup from the environment and CLI flags."""

import os
from dataclasses import dataclass, replace
from typing import Mapping

from .errors import ConfigError

ENV_PREFIX = "GLOBEGIF_"


@dataclass(frozen=True)
class Settings:
    output: str = "earth.gif"
    size: int = 192            # square canvas edge, pixels
    start: float = 360.0       # first center longitude, degrees
    stop: float = 0.0          # last center longitude (inclusive)
    step: float = 3.0          # longitude decrement per frame
    delay: int = 1             # per-frame delay, hundredths of a second
    outline_step: float = 5.0  # latitude sampling of the globe outline
    stroke_width: int = 5
    proj_data: str | None = None  # PROJ data directory; None = pyproj's own

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from ``GLOBEGIF_*`` variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        base = cls()
        return cls(
            output=env.get(ENV_PREFIX + "OUTPUT", base.output),
            size=_positive(env, "SIZE", base.size, int),
            start=_number(env, "START", base.start),
            stop=_number(env, "STOP", base.stop),
            step=_positive(env, "STEP", base.step, float),
            delay=_positive(env, "DELAY", base.delay, int),
            outline_step=_positive(env, "OUTLINE_STEP", base.outline_step, float),
            stroke_width=_positive(env, "STROKE_WIDTH", base.stroke_width, int),
            proj_data=env.get(ENV_PREFIX + "PROJ_DATA") or None,
        )

    def with_overrides(self, **overrides) -> "Settings":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        for key in ("size", "step", "delay", "outline_step", "stroke_width"):
            if key in changes and changes[key] <= 0:
                raise ConfigError(f"{key} must be positive, got {changes[key]}")
        return replace(self, **changes)


def _number(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{ENV_PREFIX}{name} is not a number: {raw!r}") from exc


def _positive(env: Mapping[str, str], name: str, default, kind):
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw == "":
        return default
    try:
        value = kind(raw)
    except ValueError as exc:
        raise ConfigError(f"{ENV_PREFIX}{name} is not a valid {kind.__name__}: {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"{ENV_PREFIX}{name} must be positive, got {raw!r}")
    return value

"""Command line entry point: GeoJSON in, rotating-globe GIF out."""

import argparse
import logging
import sys

from .config import Settings
from .errors import GlobeError
from .features import load_features
from .logging_setup import configure_logging
from .projection import configure_data_dir
from .render import render_animation

log = logging.getLogger("globegif")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="globegif",
        description="Render a GeoJSON land dataset as an animated rotating globe GIF",
    )
    parser.add_argument("input", help="GeoJSON FeatureCollection to animate")
    parser.add_argument("-o", "--output", default=None,
                        help="Output GIF path (default: earth.gif, env GLOBEGIF_OUTPUT)")
    parser.add_argument("--size", type=int, default=None,
                        help="Canvas edge in pixels (default: 192)")
    parser.add_argument("--step", type=float, default=None,
                        help="Longitude step between frames in degrees (default: 3)")
    parser.add_argument("--delay", type=int, default=None,
                        help="Frame delay in hundredths of a second (default: 1)")
    parser.add_argument("--proj-data", default=None,
                        help="PROJ data directory (env GLOBEGIF_PROJ_DATA)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    return parser


def run(args: argparse.Namespace) -> None:
    settings = Settings.from_env().with_overrides(
        output=args.output,
        size=args.size,
        step=args.step,
        delay=args.delay,
        proj_data=args.proj_data,
    )
    if settings.proj_data:
        configure_data_dir(settings.proj_data)

    log.info(args.input)
    features = load_features(args.input)
    animation = render_animation(features, settings)
    animation.save(settings.output)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)
    try:
        run(args)
    except GlobeError as exc:
        log.error("%s failed: %s", exc.stage, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

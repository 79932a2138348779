"""Root logger configuration for the command line entry point."""

from __future__ import annotations

import logging


def configure_logging(level: int = logging.INFO, *, log_file: str | None = None) -> None:
    """
    Configure root logging with a readable format and an optional file sink.
    Silences noisy third-party loggers.
    """
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    datefmt = "%H:%M:%S"
    logging.basicConfig(level=level, format=fmt, datefmt=datefmt)

    for noisy in ("PIL", "pyproj"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter(fmt, datefmt))
        logging.getLogger().addHandler(fh)

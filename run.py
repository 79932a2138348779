#!/usr/bin/env python3
"""globegif - rotating globe GIF renderer.

Renders the GeoJSON file given on the command line as an animated
orthographic globe and writes it to earth.gif.
"""

import sys

from globegif.cli import main

if __name__ == "__main__":
    sys.exit(main())

"""Fixed 256-color palette shared by every frame, and nearest-color mapping."""

from functools import lru_cache

from PIL import Image


def _plan9() -> list[tuple[int, int, int]]:
    """The Plan 9 color map: 4 levels each of red, green, blue and value.

    Within each 16-entry (r, v) block, entries are rotated by ``v - r`` so
    indices match the standard Plan 9 table.
    """
    colors: list[tuple[int, int, int]] = [(0, 0, 0)] * 256
    i = 0
    for r in range(4):
        for v in range(4):
            j = v - r
            for g in range(4):
                for b in range(4):
                    den = max(r, g, b)
                    if den == 0:
                        c = 17 * v
                        color = (c, c, c)
                    else:
                        num = 17 * (4 * den + v)
                        color = (r * num // den, g * num // den, b * num // den)
                    colors[i + (j & 0x0f)] = color
                    j += 1
            i += 16
    return colors


PLAN9: list[tuple[int, int, int]] = _plan9()


@lru_cache(maxsize=1)
def palette_image() -> Image.Image:
    """A 1x1 ``P`` image carrying :data:`PLAN9`."""
    img = Image.new("P", (1, 1))
    img.putpalette([channel for color in PLAN9 for channel in color])
    return img


@lru_cache(maxsize=None)
def nearest_index(color: tuple[int, int, int]) -> int:
    """Index of the closest :data:`PLAN9` entry by squared RGB distance; lowest index wins ties."""
    r, g, b = color[:3]
    best, best_dist = 0, None
    for index, (pr, pg, pb) in enumerate(PLAN9):
        dist = (r - pr) ** 2 + (g - pg) ** 2 + (b - pb) ** 2
        if best_dist is None or dist < best_dist:
            best, best_dist = index, dist
            if dist == 0:
                break
    return best


def quantize(frame: Image.Image) -> Image.Image:
    """Map every pixel of ``frame`` to its nearest :data:`PLAN9` entry, undithered."""
    rgb = frame.convert("RGB")
    lookup = {color: nearest_index(color)
              for _, color in rgb.getcolors(rgb.width * rgb.height)}
    out = Image.new("P", rgb.size)
    out.putpalette(palette_image().getpalette())
    out.putdata([lookup[color] for color in rgb.getdata()])
    return out

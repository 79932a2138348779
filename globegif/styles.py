"""Paint styles: fill/stroke colors and stroke widths per layer."""

from dataclasses import dataclass

RGBA = tuple[int, int, int, int]

BACKGROUND: RGBA = (0xff, 0xff, 0xff, 0x00)  # transparent white


@dataclass(frozen=True)
class PaintStyle:
    fill: RGBA
    stroke: RGBA
    width: int   # pixels


STYLES: dict[str, PaintStyle] = {
    "ocean": PaintStyle((0x00, 0x66, 0xff, 0xff), (0xff, 0xff, 0xff, 0xff), 5),
    "land":  PaintStyle((0x00, 0x88, 0x22, 0xff), (0x22, 0x22, 0x22, 0xff), 5),
}


def get_style(layer: str, width: int | None = None) -> PaintStyle:
    style = STYLES[layer]
    if width is not None and width != style.width:
        return PaintStyle(style.fill, style.stroke, width)
    return style

"""Frame rasterization onto a Pillow RGBA canvas."""

from PIL import Image, ImageDraw

from .geometry import FrameGeometry, Path, ViewTransform
from .styles import BACKGROUND, RGBA, PaintStyle, get_style


class Canvas:
    """Path-building facade over ``ImageDraw``.

    Points are given in projection-plane meters and mapped through the
    current ``ViewTransform``.  ``fill_and_stroke`` paints every sub-path
    built since the last call, then clears the path.
    """

    def __init__(self, size: int, background: RGBA = BACKGROUND):
        self.size = size
        self.image = Image.new("RGBA", (size, size), background)
        self._draw = ImageDraw.Draw(self.image)
        self._view = ViewTransform(size)
        self._fill: RGBA = (0, 0, 0, 0xff)
        self._stroke: RGBA = (0, 0, 0, 0xff)
        self._width = 1
        self._subpaths: list[list[tuple[float, float]]] = []
        self._closed = False

    def set_transform(self, view: ViewTransform) -> None:
        self._view = view

    def set_fill_color(self, color: RGBA) -> None:
        self._fill = color

    def set_stroke_color(self, color: RGBA) -> None:
        self._stroke = color

    def set_line_width(self, width: int) -> None:
        self._width = width

    def apply_style(self, style: PaintStyle) -> None:
        self.set_fill_color(style.fill)
        self.set_stroke_color(style.stroke)
        self.set_line_width(style.width)

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append([self._view.to_canvas(x, y)])
        self._closed = False

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths:
            self.move_to(x, y)
            return
        if self._closed:
            # continue from the start of the closed sub-path
            self._subpaths.append([self._subpaths[-1][0]])
            self._closed = False
        self._subpaths[-1].append(self._view.to_canvas(x, y))

    def close(self) -> None:
        self._closed = bool(self._subpaths)

    def fill_and_stroke(self) -> None:
        for pts in self._subpaths:
            if len(pts) >= 3:
                self._draw.polygon(pts, fill=self._fill, outline=self._stroke, width=self._width)
            elif len(pts) == 2:
                self._draw.line(pts, fill=self._stroke, width=self._width)
            # a lone point has neither area nor length
        self._subpaths = []
        self._closed = False

    def add_path(self, path: Path) -> None:
        """move_to the first point, line_to the rest, then close."""
        x, y = path[0]
        self.move_to(x, y)
        for x, y in path[1:]:
            self.line_to(x, y)
        self.close()


def render_frame(geometry: FrameGeometry, view: ViewTransform,
                 stroke_width: int | None = None) -> Image.Image:
    """Paint background, ocean disk, then land, in that fixed order."""
    canvas = Canvas(view.size)
    canvas.set_transform(view)

    canvas.apply_style(get_style("ocean", stroke_width))
    for path in geometry.outline:
        canvas.add_path(path)
        canvas.fill_and_stroke()

    canvas.apply_style(get_style("land", stroke_width))
    for paths in geometry.land:
        for path in paths:
            canvas.add_path(path)
            canvas.fill_and_stroke()

    return canvas.image

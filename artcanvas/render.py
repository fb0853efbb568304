"""An in-memory raster surface backed by a Pillow image."""

from PIL import Image, ImageDraw


def _check_rgb(rgb) -> tuple[int, int, int]:
    values = tuple(rgb)
    if len(values) != 3 or not all(
        isinstance(v, int) and 0 <= v <= 255 for v in values
    ):
        raise ValueError(f"invalid colour {rgb!r}")
    return values


class RasterCanvas:
    """A drawing surface with a current colour, like a renderer."""

    def __init__(self, width, height, background=(255, 255, 255)):
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.background = _check_rgb(background)
        self.image = Image.new("RGB", (width, height), self.background)
        self._draw = ImageDraw.Draw(self.image)
        self.colour = (0, 0, 0)

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def set_colour(self, rgb) -> None:
        """Use ``rgb`` for subsequent drawing."""
        self.colour = _check_rgb(rgb)

    def draw_line(self, x1, y1, x2, y2) -> None:
        """Draw a one-pixel line including both end points."""
        self._draw.line([(x1, y1), (x2, y2)], fill=self.colour, width=1)

    def draw_point(self, x, y) -> None:
        """Draw a single pixel; points off the canvas are ignored."""
        self._draw.point((x, y), fill=self.colour)

    def fill_rect(self, x, y, w, h) -> None:
        """Fill a ``w`` by ``h`` rectangle whose top-left corner is (x, y)."""
        if w <= 0 or h <= 0:
            return
        self._draw.rectangle([x, y, x + w - 1, y + h - 1], fill=self.colour)

    def pixel(self, x, y) -> tuple[int, int, int]:
        """Colour of the pixel at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside the canvas")
        return tuple(self.image.getpixel((x, y)))

    def save(self, path) -> None:
        """Write the canvas to an image file."""
        self.image.save(path)
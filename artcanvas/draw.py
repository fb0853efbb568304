"""Drawing of the individual shapes that make up a fractal."""

import math
import random
from typing import Optional, Protocol

from .model import Draw

RGB = tuple[int, int, int]

TRANSPARENT = "transparent"
RANDOM = "random"
IMAGE_BOX_SIZE = 150

COLOURS: dict[str, RGB] = {
    "black": (0, 0, 0),
    "red": (255, 0, 0),
    "pink": (255, 192, 203),
    "fuchsia": (255, 0, 255),
    "purple": (128, 0, 128),
    "blue": (0, 0, 255),
    "navy": (0, 0, 128),
    "turquoise": (64, 224, 208),
    "green": (0, 255, 0),
    "lime": (173, 255, 47),
    "yellow": (255, 255, 0),
    "olive": (128, 128, 0),
    "gold": (240, 205, 17),
    "orange": (255, 165, 0),
    "grey": (128, 128, 128),
    "brown": (120, 30, 30),
    "white": (255, 255, 255),
}
COLOUR_NAMES = tuple(COLOURS)
RANDOM_SHAPES = ("square", "circle", "line", "triangle")


class Surface(Protocol):
    """Something that can be drawn on with a current colour."""

    def set_colour(self, rgb: RGB) -> None:
        """Use ``rgb`` for subsequent drawing."""

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw a one-pixel line including both end points."""

    def draw_point(self, x: int, y: int) -> None:
        """Draw a single pixel."""

    def fill_rect(self, x: int, y: int, w: int, h: int) -> None:
        """Fill a ``w`` by ``h`` rectangle whose top-left corner is (x, y)."""


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _rng(rng):
    return rng if rng is not None else random


def colour_rgb(name: str) -> Optional[RGB]:
    """RGB value of a named colour; ``None`` for transparent."""
    if name == TRANSPARENT:
        return None
    try:
        return COLOURS[name]
    except KeyError:
        raise ValueError(f"unknown colour {name!r}") from None


def choose_colour(fractal: Draw, iteration: int, rng=None) -> str:
    """Colour for the iteration, resolving and storing a random pick."""
    name = fractal.colour_at(iteration)
    if name == RANDOM:
        name = COLOUR_NAMES[_rng(rng).randrange(len(COLOUR_NAMES))]
        fractal.set_colour_at(iteration, name)
    return name


def choose_shape(fractal: Draw, iteration: int, rng=None) -> str:
    """Shape for the iteration, resolving and storing a random pick."""
    name = fractal.shape_at(iteration)
    if name == RANDOM:
        name = RANDOM_SHAPES[_rng(rng).randrange(len(RANDOM_SHAPES))]
        fractal.set_shape_at(iteration, name)
    return name


def draw_element(surface, fractal, x, y, size, angle, iteration, rng=None) -> bool:
    """Set the iteration's colour and draw its shape.

    Returns False when the colour is transparent and nothing was drawn.
    Unrecognised colour names keep the surface's current colour.
    """
    name = choose_colour(fractal, iteration, rng)
    if name == TRANSPARENT:
        return False
    try:
        surface.set_colour(colour_rgb(name))
    except ValueError:
        pass
    choose_shape(fractal, iteration, rng)
    draw_shape(surface, fractal, x, y, size, angle, iteration)
    return True


def draw_shape(surface, fractal, x, y, size, angle, iteration) -> bool:
    """Draw the iteration's shape; returns False for an unknown shape."""
    shape = fractal.shape_at(iteration)
    thickness = fractal.linethickness[iteration - 1]
    if shape == "square":
        draw_square(surface, x, y, size, angle)
    elif shape == "circle":
        fill_circle(surface, x, y, _cdiv(size, 2))
    elif shape == "line":
        draw_line(surface, x, y, size, angle, thickness)
    elif shape == "triangle":
        draw_triangle(surface, x, y, size, angle, thickness)
    elif shape == "image":
        draw_image_box(surface, x, y, size)
    else:
        return False
    return True


def draw_line(surface, x, y, size, angle, thickness) -> None:
    """Line centred at (x, y) reaching ``size`` each way along ``angle``."""
    s, c = math.sin(angle), math.cos(angle)
    thick_line(
        surface,
        int(x - size * s),
        int(y + size * c),
        int(x + size * s),
        int(y - size * c),
        thickness,
        angle,
    )


def draw_square(surface, x, y, length, angle) -> None:
    """Filled square centred at (x, y) with side ``length``."""
    s, c = math.sin(angle), math.cos(angle)
    thick_line(
        surface,
        int(x - length * s / 2.0),
        int(y + length * c / 2.0),
        int(x + length * s / 2.0),
        int(y - length * c / 2.0),
        length,
        angle,
    )


def fill_circle(surface, cx, cy, r) -> None:
    """Filled circle centred at (cx, cy) with radius ``r``."""
    for dy in range(1, int(r) + 1):
        dx = math.floor(math.sqrt(2.0 * r * dy - dy * dy))
        surface.draw_line(cx - dx, cy + r - dy, cx + dx, cy + r - dy)
        surface.draw_line(cx - dx, cy - r + dy, cx + dx, cy - r + dy)


def outline_circle(surface, cx, cy, r) -> None:
    """Outline of a circle centred at (cx, cy) with radius ``r``."""
    if r < 0:
        raise ValueError("radius must not be negative")
    dx = math.floor(math.sqrt(2.0 * r))
    surface.draw_line(cx - dx, cy + r, cx + dx, cy + r)
    surface.draw_line(cx - dx, cy - r, cx + dx, cy - r)
    for dy in range(1, int(r) + 1):
        dx = math.floor(math.sqrt(2.0 * r * dy - dy * dy))
        surface.draw_point(cx + dx, cy + r - dy)
        surface.draw_point(cx + dx, cy - r + dy)
        surface.draw_point(cx - dx, cy + r - dy)
        surface.draw_point(cx - dx, cy - r + dy)


def draw_triangle(surface, x, y, size, angle, thickness) -> None:
    """Outline of a triangle centred at (x, y)."""
    half = size / 2.0
    third = math.pi * (2.0 / 3.0)

    def corner(a):
        return int(x + half * math.sin(a)), int(y - half * math.cos(a))

    c1x, c1y = corner(angle)
    c2x, c2y = corner(angle + third)
    c3x, c3y = corner(angle - third)
    thick_line(surface, c1x, c1y, c2x, c2y, thickness, angle + third)
    thick_line(surface, c3x, c3y, c2x, c2y, thickness, angle - math.pi / 2.0)
    thick_line(surface, c1x, c1y, c3x, c3y, thickness, angle - third)


def thick_line(surface, xs, ys, xe, ye, thickness, angle) -> None:
    """Line from (xs, ys) to (xe, ye) widened to ``thickness`` pixels."""
    half = thickness / 2.0
    s, c = math.sin(angle), math.cos(angle)
    j1 = ys - half * s
    j2 = ye - half * s
    for step in range(max(0, math.ceil(thickness))):
        offset = -half + step
        i1 = xs + offset * c
        i2 = xe + offset * c
        surface.draw_line(int(i1), int(j1), int(i2), int(j2))
        j1 = ys + offset * s
        j2 = ye + offset * s
        surface.draw_line(int(i1), int(j1), int(i2), int(j2))


def draw_image_box(surface, x, y, size) -> tuple[int, int, int, int]:
    """Fill the frame an image element occupies; returns (x, y, w, h)."""
    box = (x - _cdiv(size, 2), y - _cdiv(size, 2), IMAGE_BOX_SIZE, IMAGE_BOX_SIZE)
    surface.set_colour((0, 0, 0))
    surface.fill_rect(*box)
    return box
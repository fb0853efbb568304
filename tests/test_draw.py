import random

import pytest

from artcanvas import draw
from artcanvas.model import Draw
from artcanvas.render import RasterCanvas


class Recorder:
    def __init__(self):
        self.calls = []

    def set_colour(self, rgb):
        self.calls.append(("colour", rgb))

    def draw_line(self, x1, y1, x2, y2):
        self.calls.append(("line", (x1, y1, x2, y2)))

    def draw_point(self, x, y):
        self.calls.append(("point", (x, y)))

    def fill_rect(self, x, y, w, h):
        self.calls.append(("rect", (x, y, w, h)))

    def of(self, kind):
        return [args for name, args in self.calls if name == kind]


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return self.value % n


class NoRng:
    def randrange(self, n):
        raise AssertionError("rng should not be used")


def test_colour_rgb_table_values():
    assert draw.colour_rgb("red") == (255, 0, 0)
    assert draw.colour_rgb("brown") == (120, 30, 30)
    assert draw.colour_rgb("transparent") is None


def test_colour_rgb_unknown():
    with pytest.raises(ValueError):
        draw.colour_rgb("mauve")


def test_choose_colour_random_is_stored():
    fractal = Draw()
    fractal.set_colour_at(1, "random")
    assert draw.choose_colour(fractal, 1, FixedRng(1)) == "red"
    assert fractal.colour_at(1) == "red"


def test_choose_colour_random_with_seeded_rng():
    rng = random.Random(5)
    for level in range(1, 11):
        fractal = Draw()
        fractal.set_colour_at(level, "random")
        name = draw.choose_colour(fractal, level, rng)
        assert name in draw.COLOUR_NAMES
        assert fractal.colour_at(level) == name


def test_choose_colour_fixed_name_untouched():
    fractal = Draw()
    fractal.set_colour_at(2, "blue")
    assert draw.choose_colour(fractal, 2, NoRng()) == "blue"


def test_choose_shape_random_order():
    fractal = Draw()
    fractal.set_shape_at(1, "random")
    assert draw.choose_shape(fractal, 1, FixedRng(3)) == "triangle"
    assert fractal.shape_at(1) == "triangle"


def test_draw_element_transparent_draws_nothing():
    fractal = Draw()
    fractal.set_colour_at(1, "transparent")
    fractal.set_shape_at(1, "line")
    surface = Recorder()
    assert draw.draw_element(surface, fractal, 10, 10, 5, 0.0, 1) is False
    assert surface.calls == []


def test_draw_element_sets_colour_then_draws():
    fractal = Draw()
    fractal.set_colour_at(1, "blue")
    fractal.set_shape_at(1, "line")
    fractal.linethickness[0] = 2
    surface = Recorder()
    assert draw.draw_element(surface, fractal, 50, 50, 10, 0.0, 1, NoRng()) is True
    assert surface.calls[0] == ("colour", (0, 0, 255))
    assert len(surface.of("line")) == 4


def test_draw_element_unknown_colour_keeps_current():
    fractal = Draw()
    fractal.set_colour_at(1, "mauve")
    fractal.set_shape_at(1, "square")
    surface = Recorder()
    assert draw.draw_element(surface, fractal, 50, 50, 4, 0.0, 1) is True
    assert surface.of("colour") == []
    assert len(surface.of("line")) == 8


def test_draw_shape_unknown_shape():
    fractal = Draw()
    fractal.set_shape_at(1, "hexagon")
    surface = Recorder()
    assert draw.draw_shape(surface, fractal, 0, 0, 10, 0.0, 1) is False
    assert surface.calls == []


def test_draw_shape_uses_iteration_level():
    fractal = Draw()
    fractal.set_shape_at(2, "circle")
    surface = Recorder()
    assert draw.draw_shape(surface, fractal, 30, 30, 10, 0.0, 2) is True
    lines = surface.of("line")
    assert len(lines) == 10
    assert all(y1 == y2 for _, y1, _, y2 in lines)


def test_draw_shape_bad_iteration():
    with pytest.raises(IndexError):
        draw.draw_shape(Recorder(), Draw(), 0, 0, 10, 0.0, 0)


def test_fill_circle_symmetric_horizontal_lines():
    surface = Recorder()
    draw.fill_circle(surface, 40, 60, 7)
    lines = surface.of("line")
    assert len(lines) == 14
    for x1, y1, x2, y2 in lines:
        assert y1 == y2
        assert x1 + x2 == 80
        assert 53 <= y1 <= 67


def test_fill_circle_zero_radius():
    surface = Recorder()
    draw.fill_circle(surface, 5, 5, 0)
    assert surface.calls == []


def test_outline_circle_counts():
    surface = Recorder()
    draw.outline_circle(surface, 20, 20, 4)
    assert len(surface.of("line")) == 2
    assert len(surface.of("point")) == 16


def test_outline_circle_negative_radius():
    with pytest.raises(ValueError):
        draw.outline_circle(Recorder(), 0, 0, -1)


def test_thick_line_zero_thickness():
    surface = Recorder()
    draw.thick_line(surface, 0, 0, 10, 10, 0, 0.3)
    assert surface.calls == []


@pytest.mark.parametrize("thickness", [1, 3, 6])
def test_thick_line_vertical_at_angle_zero(thickness):
    surface = Recorder()
    draw.thick_line(surface, 20, 10, 20, 40, thickness, 0.0)
    lines = surface.of("line")
    assert len(lines) == 2 * thickness
    assert all(x1 == x2 for x1, _, x2, _ in lines)


def test_draw_line_is_vertical_and_centred_at_angle_zero():
    surface = Recorder()
    draw.draw_line(surface, 100, 100, 20, 0.0, 1)
    lines = surface.of("line")
    assert len(lines) == 2
    for x1, y1, x2, y2 in lines:
        assert x1 == x2
        assert y1 + y2 == 200


def test_draw_triangle_draws_three_sides():
    surface = Recorder()
    draw.draw_triangle(surface, 50, 50, 30, 0.4, 2)
    assert len(surface.of("line")) == 12


def test_draw_image_box():
    surface = Recorder()
    box = draw.draw_image_box(surface, 70, 80, 0)
    assert box == (70, 80, 150, 150)
    assert surface.calls == [("colour", (0, 0, 0)), ("rect", (70, 80, 150, 150))]


def test_circle_on_raster_canvas():
    canvas = RasterCanvas(40, 40)
    fractal = Draw()
    fractal.set_colour_at(1, "red")
    fractal.set_shape_at(1, "circle")
    assert draw.draw_element(canvas, fractal, 20, 20, 16, 0.0, 1)
    assert canvas.pixel(20, 20) == (255, 0, 0)
    assert canvas.pixel(0, 0) == (255, 255, 255)
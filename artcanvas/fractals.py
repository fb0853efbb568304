"""Recursive fractal patterns built from the shapes in :mod:`artcanvas.draw`."""

import math
from dataclasses import dataclass

from .draw import draw_element
from .model import LEVELS, Draw

TREE_SPLITS = 2
TREE_ANGLE_RANGE = 1.0
STAR_SPLITS = 6
SIERPINSKI_TURN = (2 * math.pi) / 3.0


@dataclass
class Shape:
    """One element of a fractal: centre, size, height and rotation."""

    x: int
    y: int
    size: int
    height: int
    rotation: float


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _make_shape(x, y, size, height, angle) -> Shape:
    return Shape(int(x), int(y), int(size), int(height), angle)


def _check_limit(limit: int) -> None:
    if not 1 <= limit <= LEVELS:
        raise ValueError(f"iteration limit {limit} outside 1..{LEVELS}")


def _split(fractal: Draw, iteration: int) -> int:
    return fractal.splits[min(iteration, LEVELS - 1)]


def tree(fractal: Draw, surface, limit: int, rng=None) -> int:
    """Draw a branching tree; returns the number of elements placed."""
    _check_limit(limit)
    angle = fractal.angle
    quarter = _cdiv(fractal.size[0], 4)
    trunk = _make_shape(
        fractal.startx + quarter * math.sin(angle),
        fractal.starty - quarter * math.cos(angle),
        _cdiv(fractal.size[0], 2),
        _cdiv(fractal.height[0], 2),
        angle,
    )
    fractal.fill("splits", TREE_SPLITS)
    fractal.anglerange = TREE_ANGLE_RANGE

    first_split = fractal.splits[0]
    draw_element(
        surface, fractal, trunk.x, trunk.y,
        _cdiv(trunk.size, first_split), angle, 1, rng,
    )
    bx = int(trunk.x + (trunk.size * math.sin(angle)) / first_split)
    by = int(trunk.y - (trunk.size * math.cos(angle)) / first_split)
    return 1 + _tree_iterate(fractal, surface, trunk, 1, limit, angle, bx, by, rng)


def _tree_iterate(fractal, surface, current, iteration, limit, angle, bx, by, rng):
    if current.size < 2 or iteration == limit:
        return 0

    newsize = _cdiv(current.size, _split(fractal, iteration))
    iteration += 1
    splits = _split(fractal, iteration)
    spread = fractal.anglerange
    step = spread / splits

    branches = []
    for i in range(splits // 2):
        for newangle in (angle - spread / 2.0 + i * step,
                         angle + spread / 2.0 - i * step):
            cx = int(bx + newsize * math.sin(newangle))
            cy = int(by - newsize * math.cos(newangle))
            branch = Shape(cx, cy, newsize, _cdiv(current.height, splits), newangle)
            draw_element(surface, fractal, cx, cy, newsize, newangle, iteration, rng)
            branches.append(branch)

    count = len(branches)
    for branch in branches:
        turn = branch.rotation
        count += _tree_iterate(
            fractal, surface, branch, iteration, limit, turn,
            int(bx + math.sin(turn) * 2 * newsize),
            int(by - math.cos(turn) * 2 * newsize),
            rng,
        )
    return count


def sierpinski(fractal: Draw, surface, limit: int, rng=None) -> int:
    """Draw a Sierpinski pattern; returns the number of elements placed."""
    _check_limit(limit)
    shape = Shape(
        fractal.startx, fractal.starty,
        fractal.size[0], fractal.height[0], fractal.angle,
    )
    return _sierpinski_iterate(fractal, surface, shape, 1, limit, rng)


def _sierpinski_iterate(fractal, surface, current, iteration, limit, rng):
    if current.size < 2 or iteration == limit:
        draw_element(
            surface, fractal, current.x, current.y,
            _cdiv(current.size, 2), current.rotation, iteration, rng,
        )
        return 1

    quarter = _cdiv(current.size, 4)
    half_size = _cdiv(current.size, 2)
    half_height = _cdiv(current.height, 2)
    base = fractal.angle
    children = [
        _make_shape(
            current.x + quarter * math.sin(turn),
            current.y - quarter * math.cos(turn),
            half_size, half_height, turn,
        )
        for turn in (base, base - SIERPINSKI_TURN, base + SIERPINSKI_TURN)
    ]
    return sum(
        _sierpinski_iterate(fractal, surface, child, iteration + 1, limit, rng)
        for child in children
    )


def star(fractal: Draw, surface, limit: int, rng=None) -> int:
    """Draw a six-pointed star fractal; returns the number of elements placed."""
    _check_limit(limit)
    centre = _make_shape(
        fractal.startx, fractal.starty,
        _cdiv(fractal.size[0], 2), _cdiv(fractal.height[0], 2), fractal.angle,
    )
    fractal.fill("splits", STAR_SPLITS)
    return _star_iterate(fractal, surface, centre, 1, limit, fractal.angle, rng)


def _star_iterate(fractal, surface, current, iteration, limit, angle, rng):
    draw_element(
        surface, fractal, current.x, current.y, current.size, angle, iteration, rng
    )
    if current.size < 1 or iteration == limit:
        return 1

    iteration += 1
    splits = _split(fractal, iteration)
    root2 = math.sqrt(2)
    count = 1
    for i in range(splits):
        newangle = (i * 2.0 * math.pi) / splits + fractal.angle
        child = _make_shape(
            current.x + current.size * math.sin(newangle) / root2,
            current.y - current.size * math.cos(newangle) / root2,
            _cdiv(current.size, splits),
            _cdiv(current.height, splits),
            newangle,
        )
        count += _star_iterate(fractal, surface, child, iteration, limit, newangle, rng)
    return count


_FRACTALS = {
    "sierpinski": sierpinski,
    "tree": tree,
    "star": star,
}


def generate_fractal(fractal: Draw, surface, limit: int, rng=None) -> int:
    """Draw the fractal type chosen for ``limit`` iterations.

    Returns the number of elements placed; an unknown type draws nothing.
    """
    _check_limit(limit)
    builder = _FRACTALS.get(fractal.type[limit - 1])
    if builder is None:
        return 0
    return builder(fractal, surface, limit, rng)
"""The description of a fractal drawing: what to draw at each iteration."""

from dataclasses import dataclass, field
from typing import Any

LEVELS = 10
"""Number of iterations that carry their own settings."""

PER_LEVEL_FIELDS = (
    "type",
    "colour",
    "size",
    "linethickness",
    "shape",
    "height",
    "splits",
)


def _strings() -> list[str]:
    return [""] * LEVELS


def _ints() -> list[int]:
    return [0] * LEVELS


@dataclass
class Draw:
    """Everything needed to draw a fractal on the canvas.

    Per-iteration settings are lists of ``LEVELS`` entries; iteration numbers
    passed to the accessors start at 1.
    """

    iterations: int = 1
    type: list[str] = field(default_factory=_strings)
    colour: list[str] = field(default_factory=_strings)
    size: list[int] = field(default_factory=_ints)
    linethickness: list[int] = field(default_factory=_ints)
    shape: list[str] = field(default_factory=_strings)
    height: list[int] = field(default_factory=_ints)
    splits: list[int] = field(default_factory=_ints)
    angle: float = 0.0
    anglerange: float = 0.0
    startx: int = 0
    starty: int = 0
    endx: int = 0
    endy: int = 0
    move: str = ""

    def __post_init__(self) -> None:
        for name in PER_LEVEL_FIELDS:
            values = list(getattr(self, name))
            if len(values) != LEVELS:
                raise ValueError(
                    f"{name} needs {LEVELS} entries, got {len(values)}"
                )
            setattr(self, name, values)

    @staticmethod
    def _index(iteration: int) -> int:
        if not 1 <= iteration <= LEVELS:
            raise IndexError(f"iteration {iteration} outside 1..{LEVELS}")
        return iteration - 1

    def colour_at(self, iteration: int) -> str:
        """Colour name used for the given iteration."""
        return self.colour[self._index(iteration)]

    def shape_at(self, iteration: int) -> str:
        """Shape name used for the given iteration."""
        return self.shape[self._index(iteration)]

    def set_colour_at(self, iteration: int, colour: str) -> None:
        """Set the colour name for the given iteration."""
        self.colour[self._index(iteration)] = colour

    def set_shape_at(self, iteration: int, shape: str) -> None:
        """Set the shape name for the given iteration."""
        self.shape[self._index(iteration)] = shape

    def fill(self, field: str, value: Any) -> None:
        """Set every iteration's entry of a per-iteration field to ``value``."""
        if field not in PER_LEVEL_FIELDS:
            raise ValueError(f"{field!r} is not a per-iteration field")
        setattr(self, field, [value] * LEVELS)
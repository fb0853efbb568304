"""Two-word drawing instructions: validation, parsing and conversion."""

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from .model import Draw

WIN_WIDTH = 1024
WIN_HEIGHT = 600
MAX_LENGTH = 20
"""Instruction words must be shorter than this."""

INTEGER_MARK = "0"
"""Listed as an allowed word for actions that take a number."""


class InstructionError(ValueError):
    """An instruction that cannot be understood."""


class ActionWord(Enum):
    """The first word of an instruction: which attribute it sets."""

    COLOUR = "colour"
    MOVE = "move"
    SIZE = "size"
    SHAPE = "shape"
    STARTX = "startx"
    STARTY = "starty"
    ENDX = "endx"
    ENDY = "endy"
    TYPE = "type"
    ITERATIONS = "iterations"


_ALLOWED: dict[ActionWord, tuple[str, ...]] = {
    ActionWord.COLOUR: ("red", "green", "blue", "pink", "purple"),
    ActionWord.MOVE: ("up", "down", "left", "right"),
    ActionWord.SIZE: (INTEGER_MARK,),
    ActionWord.SHAPE: ("circle", "square", "line"),
    ActionWord.STARTX: (INTEGER_MARK,),
    ActionWord.STARTY: (INTEGER_MARK,),
    ActionWord.ENDX: (INTEGER_MARK,),
    ActionWord.ENDY: (INTEGER_MARK,),
    ActionWord.TYPE: ("triangle", "sierpinski"),
    ActionWord.ITERATIONS: (INTEGER_MARK,),
}

_INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Leading integer of ``text``, or 0 when it does not start with one."""
    match = _INTEGER_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def build_actions() -> dict[str, tuple[str, ...]]:
    """Map each action word to the second words it accepts, in order."""
    return {word.value: allowed for word, allowed in _ALLOWED.items()}


def validate_pair(first: str, second: str, actions=None) -> ActionWord:
    """Check one instruction and return its action word.

    The second word must be one listed for the action; any word starting with
    a non-zero integer is accepted for every action.
    """
    if actions is None:
        actions = build_actions()
    if first not in actions:
        raise InstructionError(f"{first!r}: your first word is not a valid function")
    if second in actions[first] or _atoi(second) != 0:
        return ActionWord(first)
    raise InstructionError(
        f"{second!r}: your second word is not valid with your chosen action {first!r}"
    )


@dataclass
class Program:
    """The drawing described by a sequence of instructions."""

    colour: str
    move: str
    size: int
    shape: str
    startx: int
    starty: int
    endx: int
    endy: int
    type: str
    iterations: int

    @classmethod
    def default(cls, canvas_x, canvas_y, canvas_w, canvas_h) -> "Program":
        """A small red square near the centre of the given canvas."""
        size = 10
        return cls(
            colour="red",
            move="up",
            size=size,
            shape="square",
            startx=canvas_x + canvas_w // 2 - size,
            starty=canvas_y + canvas_h // 2 - size,
            endx=WIN_WIDTH // 2 + 10,
            endy=WIN_HEIGHT // 2 + 10,
            type="triangle",
            iterations=1,
        )

    def apply(self, first: str, second: str) -> None:
        """Set the attribute named by ``first`` from ``second``."""
        try:
            word = ActionWord(first)
        except ValueError:
            raise InstructionError(f"{first!r} is not an action word") from None
        if word is ActionWord.SIZE:
            self.size = _atoi(second)
            # Keep the drawing centred on the same spot.
            self.startx -= self.size // 2
            self.starty -= self.size // 2
        elif word in (
            ActionWord.STARTX,
            ActionWord.STARTY,
            ActionWord.ENDX,
            ActionWord.ENDY,
            ActionWord.ITERATIONS,
        ):
            setattr(self, word.value, _atoi(second))
        else:
            setattr(self, word.value, second)

    def to_draw(self) -> Draw:
        """A fractal description using these settings at every iteration."""
        fractal = Draw(
            iterations=self.iterations,
            startx=self.startx,
            starty=self.starty,
            endx=self.endx,
            endy=self.endy,
            move=self.move,
        )
        fractal.fill("type", self.type)
        fractal.fill("colour", self.colour)
        fractal.fill("shape", self.shape)
        fractal.fill("size", self.size)
        fractal.fill("height", self.size)
        fractal.fill("linethickness", 1)
        return fractal


def parse_instructions(text: str) -> Program:
    """Apply whitespace-separated word pairs to the default program."""
    words = text.split()
    for word in words:
        if len(word) >= MAX_LENGTH:
            raise InstructionError(
                f"{word!r} is longer than {MAX_LENGTH - 1} characters"
            )
    if len(words) % 2:
        raise InstructionError("You have entered 1 instructions, you need 2.")
    actions = build_actions()
    program = Program.default(0, 0, WIN_WIDTH, WIN_HEIGHT)
    for first, second in zip(words[::2], words[1::2]):
        validate_pair(first, second, actions)
        program.apply(first, second)
    return program


def load_instructions(path) -> Program:
    """Read and parse an instruction file."""
    return parse_instructions(Path(path).read_text(encoding="utf-8"))
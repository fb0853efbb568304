"""Command line entry point: render an instruction file to an image."""

import argparse
import random
import sys

from .draw import draw_element
from .fractals import generate_fractal
from .instructions import WIN_HEIGHT, WIN_WIDTH, InstructionError, load_instructions
from .model import LEVELS
from .render import RasterCanvas


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="artcanvas",
        description="Draw the fractal described by an instruction file.",
    )
    parser.add_argument("instructions", help="file of two-word instructions")
    parser.add_argument("output", help="image file to write")
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for random colours and shapes"
    )
    return parser


def main(argv=None) -> int:
    """Run the command; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    rng = random.Random(args.seed)
    try:
        fractal = load_instructions(args.instructions).to_draw()
        canvas = RasterCanvas(WIN_WIDTH, WIN_HEIGHT)
        limit = max(1, min(fractal.iterations, LEVELS))
        if generate_fractal(fractal, canvas, limit, rng) == 0:
            draw_element(
                canvas, fractal, fractal.startx, fractal.starty,
                fractal.size[0], fractal.angle, 1, rng,
            )
        canvas.save(args.output)
    except (InstructionError, OSError, ValueError) as error:
        print(f"artcanvas: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
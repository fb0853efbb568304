# artcanvas

artcanvas draws fractal art: trees, six-pointed stars and Sierpinski
patterns built from lines, squares, circles and triangles in a choice of
named colours. Drawings go onto an in-memory raster canvas (backed by
Pillow) that can be saved as an image file. A small two-word instruction
language describes what to draw.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
artcanvas INSTRUCTIONS OUTPUT [--seed N]
```

`artcanvas` reads the instruction file `INSTRUCTIONS`, draws it on a
1024 × 600 white canvas and writes the image to `OUTPUT` (the format follows
the file extension, e.g. `.png`). `--seed` seeds the random choices made for
the colour or shape `random`.

The iteration count is clamped to 1–10. When the chosen `type` is
`sierpinski` the fractal is drawn; for any other type a single shape is drawn
at the start point. Invalid instructions or unreadable files print a message
to standard error and the command exits with status 1.

## Instruction files

An instruction file is a whitespace-separated sequence of pairs, an action
word followed by its value:

```
type sierpinski
colour blue
shape line
size 300
startx 512
starty 300
iterations 5
```

The accepted values are:

| action | values |
| --- | --- |
| `colour` | `red`, `green`, `blue`, `pink`, `purple` |
| `move` | `up`, `down`, `left`, `right` |
| `shape` | `circle`, `square`, `line` |
| `type` | `triangle`, `sierpinski` |
| `size`, `startx`, `starty`, `endx`, `endy`, `iterations` | `0` or an integer |

Any value starting with a non-zero integer is accepted for every action.
Words must be shorter than 20 characters and the words must pair up. Anything
else raises `artcanvas.instructions.InstructionError`.

Instructions are applied to `Program.default(...)`: a red square of size 10,
type `triangle`, one iteration. Setting `size` also shifts the start point
back by half the size.

```python
from artcanvas.instructions import parse_instructions, load_instructions

program = parse_instructions("type sierpinski\ncolour blue\nsize 200\n")
fractal = program.to_draw()  # an artcanvas.model.Draw
```

`validate_pair(first, second)` checks a single pair and returns its
`ActionWord`; `build_actions()` returns the table of accepted values.

## Library use

A `Draw` (in `artcanvas.model`) holds the settings for each of ten
iterations. It can be filled in directly, which also gives access to the
`tree` and `star` fractals and to the colours and shapes the instruction
language does not list:

```python
import random

from artcanvas.fractals import generate_fractal
from artcanvas.model import Draw
from artcanvas.render import RasterCanvas

fractal = Draw(startx=400, starty=550)
fractal.fill("type", "tree")
fractal.fill("colour", "green")
fractal.fill("shape", "line")
fractal.fill("size", 200)
fractal.fill("height", 200)
fractal.fill("linethickness", 2)

canvas = RasterCanvas(800, 600, (255, 255, 255))
placed = generate_fractal(fractal, canvas, 6, random.Random(1))
canvas.save("tree.png")
```

`generate_fractal` picks the fractal from the type of the last iteration
and returns the number of elements placed (0 for an unknown type). `tree`,
`star` and `sierpinski` can also be called directly.

In `artcanvas.draw`, `colour_rgb` looks up the seventeen named colours
(black, red, pink, fuchsia, purple, blue, navy, turquoise, green, lime,
yellow, olive, gold, orange, grey, brown, white). The colour `random` picks
one of them for an iteration and stores the pick; `transparent` skips
drawing. The shape `random` picks square, circle, line or triangle; `image`
fills a black 150 × 150 box. Lower-level helpers such as `draw_line`,
`draw_square`, `fill_circle`, `outline_circle`, `draw_triangle` and
`thick_line` draw on anything with the `Surface` methods `set_colour`,
`draw_line`, `draw_point` and `fill_rect`, which `RasterCanvas` provides
along with `pixel` and `save`.

## Screen layouts

`artcanvas.menu_layout` computes where the main menu, challenges menu and
help screen place their logo, buttons and pop-up text for a window size
(`main_menu_layout`, `challenges_menu_layout`, `help_screen_layout`,
`popup_area`), returning `Area` and `Rect` values. 
`artcanvas.interface_layout` does the same for the editing screen in
`Mode.CHALLENGE` or `Mode.CANVAS` (`interface_layout`, `divider_areas`),
with `InterfaceLayout.hit_test` naming the button or panel under a point.
`artcanvas.text` centres labels in fixed-width boxes
(`text_align_central`) and splits error messages over two lines
(`split_error_message`, `read_error_message`).

## What it does not do

There is no interactive window. The menus, text editor and challenge
screens exist only as layout calculations: nothing opens a window, shows
images, takes keyboard or mouse input, or checks whether a challenge has
been completed. Drawing happens only through the library or the
`artcanvas` command, onto an image.
"""Layout of the editing interface: toolbar, text editor, canvas and buttons."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .menu_layout import Area, Rect
from .text import text_align_central

RGB = tuple[int, int, int]

BUTTON_HEIGHT = 18
TEXT_ED_WIDTH = 3.015
PREV_NEXT_BUTTON = 4
CHALLENGE_FONT_SIZE = 16
MAX_CHALLENGE_LEN = 69

CANVAS_MODE_TEXTBOX = 20
CHALLENGE_MODE_TEXTBOX = 12
RESET_GENERATE_TEXTBOX = 16
PREV_NEXT_TEXTBOX = 9

TOOLBAR_GREY: RGB = (200, 200, 200)
BUTTON_LIGHT: RGB = (240, 240, 240)
BUTTON_RED: RGB = (241, 35, 65)
EDITOR_DARK: RGB = (43, 43, 39)
CANVAS_WHITE: RGB = (255, 255, 255)
DIVIDER_DARK: RGB = (20, 20, 20)
DIVIDER_BLACK: RGB = (0, 0, 0)

LABEL_COLOURS: dict[str, RGB] = {
    "menu_button": BUTTON_RED,
    "learn_button": BUTTON_RED,
    "help_button": BUTTON_RED,
    "reset_button": (255, 255, 255),
    "generate_button": (255, 255, 255),
    "current_challenge_text": (0, 0, 0),
    "previous_button": (255, 255, 255),
    "next_button": (255, 255, 255),
}
"""Colour of the text written on each labelled area."""

_CLICKABLE = (
    "menu_button",
    "learn_button",
    "help_button",
    "previous_button",
    "next_button",
    "reset_button",
    "generate_button",
    "text_editor_panel",
    "canvas",
)


class Mode(Enum):
    """Which kind of session the interface is showing."""

    CHALLENGE = 0
    CANVAS = 1


@dataclass
class InterfaceLayout:
    """The areas of the interface and the centred labels written on them."""

    mode: Mode
    areas: dict[str, Area] = field(default_factory=dict)
    labels: dict[str, str] = field(default_factory=dict)

    def __getitem__(self, name: str) -> Area:
        return self.areas[name]

    def __contains__(self, name: str) -> bool:
        return name in self.areas

    def hit_test(self, x: int, y: int) -> Optional[str]:
        """Name of the clickable area under (x, y), buttons before panels."""
        for name in _CLICKABLE:
            area = self.areas.get(name)
            if area is not None and area.rect.contains(x, y):
                return name
        return None


def _check_window(win_width: int, win_height: int) -> None:
    if win_width <= 0 or win_height <= 0:
        raise ValueError("window dimensions must be positive")


def interface_layout(win_width, win_height, mode, challenge_text="") -> InterfaceLayout:
    """Lay out the interface for a window of the given size.

    In challenge mode the toolbar spans the window and also holds the learn,
    previous and next buttons and the current challenge text, which must fit
    in ``MAX_CHALLENGE_LEN`` cells.
    """
    _check_window(win_width, win_height)
    mode = Mode(mode)
    challenge = mode is Mode.CHALLENGE
    layout = InterfaceLayout(mode)
    areas, labels = layout.areas, layout.labels

    editor_span = win_width / TEXT_ED_WIDTH
    bar_h = win_height // BUTTON_HEIGHT
    editor_w = int(editor_span)

    toolbar = Area(
        Rect(0, 0, win_width if challenge else editor_w, bar_h), TOOLBAR_GREY
    )
    areas["toolbar"] = toolbar

    # The editor panel's width sets the toolbar buttons' widths.
    text_editor = Area(
        Rect(0, bar_h, editor_w, win_height - bar_h - bar_h), EDITOR_DARK
    )

    menu_w = editor_w // 3 if challenge else editor_w // 2
    menu = Area(Rect(0, 0, menu_w, bar_h - 1), BUTTON_LIGHT)
    areas["menu_button"] = menu
    box = CHALLENGE_MODE_TEXTBOX if challenge else CANVAS_MODE_TEXTBOX
    labels["menu_button"] = text_align_central(
        "Levels" if challenge else "Menu", box
    )

    learn = Area(Rect(menu.rect.right, 0, menu_w, menu.rect.h), BUTTON_LIGHT)
    help_x = learn.rect.right if challenge else menu.rect.right + 1
    areas["help_button"] = Area(Rect(help_x, 0, menu_w, menu.rect.h), BUTTON_LIGHT)
    labels["help_button"] = text_align_central("Help", box)

    reset_h = win_height // BUTTON_HEIGHT
    areas["reset_button"] = Area(
        Rect(0, win_height - reset_h, int(editor_span / 2), reset_h), BUTTON_RED
    )
    labels["reset_button"] = text_align_central(
        "Reset" if challenge else "Clear", RESET_GENERATE_TEXTBOX
    )
    areas["generate_button"] = Area(
        Rect(
            int(editor_span / 2),
            win_height - reset_h,
            int(editor_span / 2 + 1),
            reset_h,
        ),
        BUTTON_RED,
    )
    labels["generate_button"] = text_align_central(
        "Generate", RESET_GENERATE_TEXTBOX
    )

    areas["text_editor_panel"] = text_editor

    if challenge:
        canvas_rect = Rect(
            int(editor_span + 1),
            bar_h,
            int(win_width - editor_span),
            win_height - bar_h,
        )
    else:
        canvas_rect = Rect(
            int(editor_span + 1), 0, int(win_width - editor_span), win_height
        )
    areas["canvas"] = Area(canvas_rect, CANVAS_WHITE)

    if challenge:
        areas["learn_button"] = learn
        labels["learn_button"] = text_align_central("Learn", CHALLENGE_MODE_TEXTBOX)

        step_w = int(editor_span / PREV_NEXT_BUTTON)
        previous = Area(
            Rect(editor_w + 1, 0, step_w, menu.rect.h), BUTTON_RED
        )
        current = Area(
            Rect(
                previous.rect.right,
                0,
                int(win_width - editor_span - step_w * 2),
                menu.rect.h,
            ),
            BUTTON_LIGHT,
        )
        areas["current_challenge"] = current
        areas["current_challenge_text"] = Area(
            Rect(
                current.rect.x,
                current.rect.y + current.rect.h // 5,
                current.rect.w,
                int(CHALLENGE_FONT_SIZE * 1.45),
            ),
            BUTTON_LIGHT,
        )
        labels["current_challenge_text"] = text_align_central(
            challenge_text, MAX_CHALLENGE_LEN
        )

        areas["previous_button"] = previous
        labels["previous_button"] = text_align_central("PREV", PREV_NEXT_TEXTBOX)
        areas["next_button"] = Area(
            Rect(current.rect.right, current.rect.y, step_w, menu.rect.h),
            BUTTON_RED,
        )
        labels["next_button"] = text_align_central("NEXT", PREV_NEXT_TEXTBOX)

    return layout


def divider_areas(layout: InterfaceLayout, win_width, win_height, mode) -> dict[str, Area]:
    """Thin dividing lines drawn between the sections of the interface."""
    _check_window(win_width, win_height)
    mode = Mode(mode)
    challenge = mode is Mode.CHALLENGE
    toolbar = layout["toolbar"].rect
    menu = layout["menu_button"].rect
    help_button = layout["help_button"].rect
    editor = layout["text_editor_panel"].rect
    reset = layout["reset_button"].rect
    generate = layout["generate_button"].rect

    dividers = {
        "toolbar_bottom_divider": Area(
            Rect(0, toolbar.h - 1, toolbar.w, 1), DIVIDER_DARK
        ),
    }
    if challenge:
        learn = layout["learn_button"].rect
        dividers["menu_learn_divider"] = Area(
            Rect(learn.x - 1, 0, 1, menu.h), DIVIDER_DARK
        )
    dividers["menu_help_divider"] = Area(
        Rect(help_button.x - 1, 0, 1, menu.h), DIVIDER_DARK
    )
    dividers["editor_canvas_divider"] = Area(
        Rect(editor.w, 0, 1, win_height), DIVIDER_DARK
    )
    dividers["reset_generate_divider"] = Area(
        Rect(generate.x - 1, generate.y, 1, generate.h), DIVIDER_BLACK
    )
    dividers["reset_generate_top_border"] = Area(
        Rect(reset.x, reset.y, reset.w * 2 + 1, 1), DIVIDER_BLACK
    )
    if challenge:
        previous = layout["previous_button"].rect
        following = layout["next_button"].rect
        dividers["prev_divider"] = Area(
            Rect(previous.right - 1, previous.y, 1, previous.h), DIVIDER_DARK
        )
        dividers["next_divider"] = Area(
            Rect(following.x - 1, following.y, 1, following.h), DIVIDER_DARK
        )
    return dividers
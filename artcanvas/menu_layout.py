"""Layout of the main menu, challenges menu and help screen."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

RGB = tuple[int, int, int]

LEFT_MARGIN = 15
TOP_MARGIN = 20
LOGO_WIDTH = 380
LOGO_HEIGHT = 131
MENU_BUTTON_WIDTH = 237
MENU_BUTTON_HEIGHT = 91
MENU_BUTTON_DIST = 20
BACK_BUTTON_WIDTH = 156
BACK_BUTTON_HEIGHT = 60
BACK_BUTTON_MARGIN = 60
MENU_POPUP_WIDTH = 600
MENU_POPUP_HEIGHT = 91

WHITE: RGB = (255, 255, 255)
PANEL_GREY: RGB = (230, 230, 230)
BUTTON_RED: RGB = (241, 14, 71)
BUTTON_GREY: RGB = (100, 90, 90)
HEADER_RED: RGB = (220, 100, 100)

IMAGE_DIR = "display/images"


class MenuChoice(IntEnum):
    """Buttons the user can press in the menus."""

    CANVAS = 1
    CHALLENGES = 2
    HELP_SCREEN = 3
    QUIT = 4
    BEGINNER = 5
    INTERMEDIATE = 6
    EXPERT = 7
    MAIN_MENU = 8
    BACK = 9


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle with its top-left corner at (x, y)."""

    x: int
    y: int
    w: int
    h: int

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @property
    def right(self) -> int:
        return self.x + self.w

    def contains(self, x: int, y: int) -> bool:
        """Whether the point lies inside the rectangle, edges included."""
        return self.x <= x <= self.right and self.y <= y <= self.bottom


@dataclass(frozen=True)
class Area:
    """A filled rectangle on screen, optionally covered by an image."""

    rect: Rect
    colour: RGB
    image: Optional[str] = None


def _image(name: str) -> str:
    return f"{IMAGE_DIR}/{name}.bmp"


def _check_window(win_width: int, win_height: int) -> None:
    if win_width <= 0 or win_height <= 0:
        raise ValueError("window dimensions must be positive")


def _button_below(above: Area, win_height: int, colour: RGB, image: str) -> Area:
    rect = Rect(
        above.rect.x,
        above.rect.bottom + win_height // MENU_BUTTON_DIST,
        MENU_BUTTON_WIDTH,
        MENU_BUTTON_HEIGHT,
    )
    return Area(rect, colour, _image(image))


def main_menu_layout(win_width: int, win_height: int) -> dict[str, Area]:
    """Areas of the main menu, keyed by name, in drawing order."""
    _check_window(win_width, win_height)
    left = win_width // LEFT_MARGIN
    background = Area(Rect(0, 0, win_width, win_height), WHITE)
    logo = Area(
        Rect(left, win_height // TOP_MARGIN, LOGO_WIDTH, LOGO_HEIGHT),
        PANEL_GREY,
        _image("artc_logo"),
    )
    canvas_button = Area(
        Rect(
            left,
            logo.rect.bottom + win_height // TOP_MARGIN,
            MENU_BUTTON_WIDTH,
            MENU_BUTTON_HEIGHT,
        ),
        BUTTON_RED,
        _image("canvas"),
    )
    challenges_button = _button_below(
        canvas_button, win_height, BUTTON_RED, "challenges"
    )
    menu_help_button = _button_below(
        challenges_button, win_height, BUTTON_RED, "help"
    )
    quit_button = _button_below(menu_help_button, win_height, BUTTON_GREY, "quit")
    return {
        "background": background,
        "logo": logo,
        "canvas_button": canvas_button,
        "challenges_button": challenges_button,
        "menu_help_button": menu_help_button,
        "quit_button": quit_button,
    }


def challenges_menu_layout(win_width: int, win_height: int) -> dict[str, Area]:
    """Areas of the challenges menu, keyed by name, in drawing order."""
    _check_window(win_width, win_height)
    background = Area(Rect(0, 0, win_width, win_height), WHITE)
    header = Area(
        Rect(
            win_width // LEFT_MARGIN,
            win_height // TOP_MARGIN,
            LOGO_WIDTH,
            LOGO_HEIGHT,
        ),
        HEADER_RED,
        _image("challenges_header"),
    )
    beginner = _button_below(header, win_height, BUTTON_RED, "beginner")
    intermediate = _button_below(beginner, win_height, BUTTON_RED, "intermediate")
    expert = _button_below(intermediate, win_height, BUTTON_RED, "expert")
    main_menu = _button_below(expert, win_height, BUTTON_GREY, "main_menu")
    return {
        "background": background,
        "header": header,
        "beginner": beginner,
        "intermediate": intermediate,
        "expert": expert,
        "main_menu": main_menu,
    }


def help_screen_layout(win_width: int, win_height: int) -> dict[str, Area]:
    """Areas of the help screen: the full-window text and a back button."""
    _check_window(win_width, win_height)
    help_screen = Area(
        Rect(0, 0, win_width, win_height), PANEL_GREY, _image("help_screen")
    )
    back_button = Area(
        Rect(
            win_width // BACK_BUTTON_MARGIN,
            win_height // BACK_BUTTON_MARGIN,
            BACK_BUTTON_WIDTH,
            BACK_BUTTON_HEIGHT,
        ),
        BUTTON_GREY,
        _image("back"),
    )
    return {"help_screen": help_screen, "back_button": back_button}


_POPUPS: dict[MenuChoice, tuple[str, str]] = {
    MenuChoice.CANVAS: ("canvas_button", "program_a_work_of_art"),
    MenuChoice.CHALLENGES: ("challenges_button", "learn_how_to_code"),
    MenuChoice.BEGINNER: ("beginner", "beginner_text"),
    MenuChoice.INTERMEDIATE: ("intermediate", "intermediate_text"),
    MenuChoice.EXPERT: ("expert", "expert_text"),
}


def popup_area(layout: dict[str, Area], hover, win_width: int) -> Optional[Area]:
    """Pop-up text shown beside the hovered button, or ``None`` if it has none.

    Raises ``KeyError`` when the layout lacks the hovered button.
    """
    try:
        choice = MenuChoice(hover)
    except ValueError:
        return None
    entry = _POPUPS.get(choice)
    if entry is None:
        return None
    button_name, image = entry
    button = layout[button_name]
    rect = Rect(
        button.rect.w + win_width // LEFT_MARGIN,
        button.rect.y,
        MENU_POPUP_WIDTH,
        MENU_POPUP_HEIGHT,
    )
    return Area(rect, PANEL_GREY, _image(image))
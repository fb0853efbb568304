"""Text layout helpers: centring strings in text boxes and wrapping messages."""

from pathlib import Path

ERROR_TEXTBOX = 45
ERROR_MESSAGE_PATH = Path("program_txt_files") / "error_message.txt"


def text_align_central(text: str, width: int) -> str:
    """Centre ``text`` in a box of ``width`` cells.

    The result holds ``width - 1`` characters, as the last cell of the box is
    reserved for the terminator.
    """
    if width < 1:
        raise ValueError("textbox width must be at least 1")
    if len(text) > width:
        raise ValueError(
            f"string of length {len(text)} too long for a textbox of {width}"
        )
    left = (width - len(text)) // 2
    full = " " * left + text + " " * (width - left - len(text))
    return full[: width - 1]


def split_error_message(message: str, width: int = ERROR_TEXTBOX) -> tuple[str, str]:
    """Split ``message`` over two lines of at most ``width - 1`` characters.

    A word crossing the end of the first line moves to the second line, and
    the first line is padded with spaces in its place. Text that does not fit
    on the two lines is dropped.
    """
    if width < 2:
        raise ValueError("textbox width must be at least 2")
    limit = width - 1
    top = message[:limit]
    remainder = message[limit:]
    if not remainder:
        return top, ""

    carried = ""
    if top[-1] != " " and " " in top:
        cut = top.rindex(" ")
        carried = top[cut + 1:]
        top = top[: cut + 1] + " " * len(carried)
    bottom = (carried + remainder)[:limit]
    return top, bottom


def read_error_message(path=ERROR_MESSAGE_PATH, width: int = ERROR_TEXTBOX) -> tuple[str, str]:
    """Read an error message file and return its two centred lines."""
    message = Path(path).read_text(encoding="utf-8")
    top, bottom = split_error_message(message, width)
    return text_align_central(top, width), text_align_central(bottom, width)
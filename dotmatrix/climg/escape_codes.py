"""ANSI escape sequences for terminal colours and the cursor."""

from typing import Tuple

RGBColor = Tuple[int, int, int]

ESC = "\x1b["

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
RESET_COLORS = "\x1b[0m"

FG_COLOR = tuple(f"{ESC}38;5;{i}m" for i in range(256))
BG_COLOR = tuple(f"{ESC}[48;5;{i}m" for i in range(256))


def fg_rgb(color: RGBColor) -> str:
    """Sequence selecting a 24-bit foreground colour."""
    r, g, b = color
    return f"{ESC}38;2;{r};{g};{b}m"


def bg_rgb(color: RGBColor) -> str:
    """Sequence selecting a 24-bit background colour."""
    r, g, b = color
    return f"{ESC}48;2;{r};{g};{b}m"


def _check_index(index: int) -> None:
    if not 0 <= index <= 0xFF:
        raise ValueError(f"palette index out of range: {index}")


def fg(index: int) -> str:
    """Sequence selecting a 256-colour foreground."""
    _check_index(index)
    return FG_COLOR[index]


def bg(index: int) -> str:
    """Sequence selecting a 256-colour background."""
    _check_index(index)
    return BG_COLOR[index]
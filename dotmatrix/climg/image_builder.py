"""Render RGBA frames as half-block characters with ANSI colour codes."""

import io
from dataclasses import dataclass
from typing import List, Sequence

from dotmatrix.climg.escape_codes import (
    ESC,
    HIDE_CURSOR,
    RESET_COLORS,
    SHOW_CURSOR,
    bg_rgb,
    fg_rgb,
)
from dotmatrix.climg.img_to_colors import Color, ColorBlock, to_colors

_BLACK: Color = (0, 0, 0)
_FULL = "\u2588"
_LOWER_HALF = "\u2584"
_UPPER_HALF = "\u2580"


@dataclass
class ImageBuilderConfig:
    """Options for an :class:`ImageBuilder`."""

    skip_unchanged: bool


class ImageBuilder:
    """Accumulates terminal output for a width x height image.

    Each character cell shows two pixel rows. With ``skip_unchanged`` only
    cells that differ from the previous frame are redrawn.
    """

    def __init__(self, width: int, height: int, config: ImageBuilderConfig) -> None:
        self.width = width
        self.height = height
        self.config = config
        self.cursor_x = 1
        self.cursor_y = 1
        self.current_fg: Color = _BLACK
        self.current_bg: Color = _BLACK
        self.current_img_buffer: List[ColorBlock] = [ColorBlock()] * (width * height // 2)
        self._buffer = io.StringIO()
        self._begin()

    def _reset(self) -> None:
        self._write_raw(RESET_COLORS)
        self._write_raw(SHOW_CURSOR)

    def _begin(self) -> None:
        self._buffer = io.StringIO()
        self._write_raw(HIDE_CURSOR)
        # Force a known colour state
        self._write_raw(fg_rgb(_BLACK))
        self._write_raw(bg_rgb(_BLACK))
        self.current_fg = _BLACK
        self.current_bg = _BLACK
        self._move_to_force(1, 1)

    def write(self, data: str) -> None:
        """Write one cell's worth of text and advance the cursor."""
        self._write_raw(data)
        self._step_write_head()

    def _write_raw(self, data: str) -> None:
        self._buffer.write(data)

    def build(self) -> str:
        """Return everything written so far and start a new frame."""
        self._reset()
        output = self._buffer.getvalue()
        self._begin()
        return output

    def move_to(self, x: int, y: int) -> None:
        """Move the cursor to column ``x``, row ``y`` unless already there."""
        if (self.cursor_x, self.cursor_y) == (x, y):
            return
        self._move_to_force(x, y)

    def _move_to_force(self, x: int, y: int) -> None:
        self.cursor_x = x
        self.cursor_y = y
        self._write_raw(f"{ESC}{y};{x}f")

    def _set_color_fg(self, color: Color) -> None:
        if self.current_fg != color:
            self._write_raw(fg_rgb(color))
        self.current_fg = color

    def _set_color_bg(self, color: Color) -> None:
        if self.current_bg != color:
            self._write_raw(bg_rgb(color))
        self.current_bg = color

    def _set_color(self, background: Color, foreground: Color) -> None:
        self._set_color_bg(background)
        self._set_color_fg(foreground)

    def _step_write_head(self) -> None:
        self.cursor_x += 1
        if self.cursor_x > self.width:
            self.move_to(1, self.cursor_y + 1)

    def _draw_full_block(self, color: Color) -> None:
        if self.current_fg == color:
            self.write(_FULL)
        elif self.current_bg == color:
            self.write(" ")
        else:
            self._set_color(self.current_bg, color)
            self.write(_FULL)

    def _draw_color(self, block: ColorBlock) -> None:
        top, bottom = block.top, block.bottom
        if top == bottom:
            self._draw_full_block(top)
        elif bottom == self.current_fg and top == self.current_bg:
            self.write(_LOWER_HALF)
        elif top == self.current_fg and bottom == self.current_bg:
            self.write(_UPPER_HALF)
        else:
            self._set_color(top, bottom)
            self.write(_LOWER_HALF)

    def draw_img(self, img_data: Sequence[int]) -> None:
        """Draw an RGBA frame of this builder's size."""
        colors = to_colors(img_data, self.width, self.height)
        if self.config.skip_unchanged:
            self._draw_diff(colors)
        else:
            self._draw_full(colors)

    def _draw_full(self, colors: List[ColorBlock]) -> None:
        for index, color in enumerate(colors):
            self.current_img_buffer[index] = color
            self._draw_color(color)

    def _draw_diff(self, colors: List[ColorBlock]) -> None:
        skipped_last = False
        for index, color in enumerate(colors):
            if self.current_img_buffer[index] == color:
                skipped_last = True
                self._step_write_head()
                continue
            self.current_img_buffer[index] = color
            if skipped_last:
                self._move_to_force(self.cursor_x, self.cursor_y)
                skipped_last = False
            self._draw_color(color)
"""Colour palette RAM for CGB mode."""

from dataclasses import dataclass, field
from typing import List

from dotmatrix.gameboy.bits import BIT_7
from dotmatrix.gameboy.ppu_types import RGBA, Pixel, PPUMode

_ENTRIES = 32
_BLACK: RGBA = (0, 0, 0, 255)


def _expand(channel: int) -> int:
    return ((channel << 3) | (channel >> 2)) & 0xFF


@dataclass
class ColorRamController:
    """Reads and writes palette data through an index/data register pair."""

    increment: bool = False
    index: int = 0
    data: List[int] = field(default_factory=lambda: [0] * _ENTRIES)
    colors: List[RGBA] = field(default_factory=lambda: [_BLACK] * _ENTRIES)

    def write_spec(self, value: int) -> None:
        self.increment = value & BIT_7 == BIT_7
        self.index = value % 64

    def read_spec(self) -> int:
        return (BIT_7 if self.increment else 0) | self.index

    def read_data(self) -> int:
        value = self.data[self.index >> 1]
        if self.index & 1 == 0:
            return (value & 0xFF00) >> 8
        return value & 0x00FF

    def write_data(self, value: int, ppu_mode: PPUMode) -> None:
        # Writes are blocked while the PPU is drawing
        if ppu_mode is not PPUMode.DRAW:
            slot = self.index >> 1
            current = self.data[slot]
            if self.index & 1 == 0:
                self.data[slot] = (current & 0xFF00) | (value & 0xFF)
            else:
                self.data[slot] = (current & 0x00FF) | ((value & 0xFF) << 8)
            self._update_color(slot)

        # The index advances on every write, whatever the mode
        if self.increment:
            self.index = (self.index + 1) & 0b0011_1111

    def _update_color(self, slot: int) -> None:
        color = self.data[slot]
        r = color & 0b11111
        g = (color >> 5) & 0b11111
        b = (color >> 10) & 0b11111
        self.colors[slot] = (_expand(r), _expand(g), _expand(b), 255)

    def get_color(self, palette: int, color: int) -> RGBA:
        return self.colors[palette * 4 + color]

    def color_of(self, pixel: Pixel) -> RGBA:
        return self.get_color(pixel.palette, pixel.color)
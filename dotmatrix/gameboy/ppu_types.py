"""Small value types shared by the picture processing unit."""

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Tuple

RGBA = Tuple[int, int, int, int]


class FetcherMode(Enum):
    """Which layer the background fetcher is reading."""

    BACKGROUND = auto()
    WINDOW = auto()


class GBMode(Enum):
    """Monochrome or colour hardware."""

    DMG = auto()
    CGB = auto()


class PPUMode(IntEnum):
    """PPU mode, valued as reported in the low bits of STAT."""

    HBLANK = 0
    VBLANK = 1
    OAM_SCAN = 2
    DRAW = 3


class VRAMBank(IntEnum):
    """One of the two video RAM banks."""

    BANK0 = 0
    BANK1 = 1


def vram_bank_from(value: int) -> VRAMBank:
    """Select a VRAM bank from the lowest bit of ``value``."""
    return VRAMBank(value & 1)


@dataclass(frozen=True)
class Pixel:
    """A pixel waiting in a FIFO.

    ``color`` is 0-3; ``palette`` is 0-7 on CGB and selects OBP0/OBP1 for DMG
    sprites; ``sprite_priority`` is the OAM index of the sprite it came from;
    ``background_priority`` holds the OBJ-to-BG priority bit.
    """

    color: int = 0
    palette: int = 0
    sprite_priority: int = 0
    background_priority: bool = False

    @classmethod
    def transparent(cls) -> "Pixel":
        """A transparent pixel with the lowest possible sprite priority."""
        return cls(color=0, palette=0, sprite_priority=40, background_priority=False)


class AddressingMode(Enum):
    """How background tile indices map to tile data addresses."""

    SIGNED = auto()
    UNSIGNED = auto()


class SpriteHeight(Enum):
    """8x16 (double) or 8x8 (single) sprites."""

    DOUBLE = auto()
    SINGLE = auto()


_DEFAULT_SHADES: Tuple[RGBA, RGBA, RGBA, RGBA] = (
    (0xFF, 0xFF, 0xFF, 0xFF),
    (0xAA, 0xAA, 0xAA, 0xFF),
    (0x55, 0x55, 0x55, 0xFF),
    (0x00, 0x00, 0x00, 0xFF),
)


@dataclass(frozen=True)
class DMGPalette:
    """The four RGBA shades used to display monochrome colour ids."""

    colors: Tuple[RGBA, RGBA, RGBA, RGBA] = _DEFAULT_SHADES

    def color_of(self, color_id: int) -> RGBA:
        """Return the shade for a colour id in 0-3."""
        if not 0 <= color_id < len(self.colors):
            raise IndexError(f"colour id out of range: {color_id}")
        return self.colors[color_id]
"""Tile attributes, tile data references and OAM sprites."""

from dataclasses import dataclass
from functools import total_ordering
from typing import NamedTuple, Optional, Sequence

from dotmatrix.gameboy.bits import BIT_4, BIT_5, BIT_6, BIT_7
from dotmatrix.gameboy.ppu_types import VRAMBank, vram_bank_from

# Priority and flip bits have the opposite sense for sprites
_SPRITE_INVERTED_BITS = 0b1110_0000


@dataclass(frozen=True)
class TileAttributes:
    """An attribute byte for a background tile or sprite."""

    byte: int = 0

    @property
    def bg_priority(self) -> bool:
        return self.byte & BIT_7 == BIT_7

    @property
    def vertical_flip(self) -> bool:
        return self.byte & BIT_6 == BIT_6

    @property
    def horizontal_flip(self) -> bool:
        return self.byte & BIT_5 == BIT_5

    @property
    def v_ram_bank(self) -> VRAMBank:
        return vram_bank_from((self.byte >> 3) & 1)

    @property
    def cgb_palette(self) -> int:
        return self.byte & 0b111

    @property
    def dmg_palette(self) -> int:
        return (self.byte & BIT_4) >> 3


class TileData(NamedTuple):
    """A tile's data address together with its attributes, if any."""

    index: int
    attributes: Optional[TileAttributes] = None


@total_ordering
@dataclass(eq=False)
class Sprite:
    """A sprite read from OAM.

    Sprites compare equal by position and OAM address, and order from the
    rightmost first, ties broken by the higher OAM address first.
    """

    addr: int
    x: int
    y: int
    tile_attributes: TileAttributes
    tile_index: int

    def _key(self):
        return (self.x, self.addr)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sprite):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "Sprite") -> bool:
        if not isinstance(other, Sprite):
            return NotImplemented
        return other._key() < self._key()

    def __hash__(self) -> int:
        return hash(self._key())


def sprite_from_oam(addr: int, data: Sequence[int]) -> Sprite:
    """Build a sprite from its four OAM bytes: y, x, tile index, attributes."""
    if len(data) != 4:
        raise ValueError(f"an OAM entry has 4 bytes, got {len(data)}")
    y, x, tile_index, attributes = data
    return Sprite(
        addr=addr,
        x=x,
        y=y,
        tile_attributes=TileAttributes(attributes ^ _SPRITE_INVERTED_BITS),
        tile_index=tile_index,
    )
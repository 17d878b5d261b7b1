"""The LCDC control register and the STAT status register."""

from dataclasses import dataclass
from enum import IntFlag

from dotmatrix.gameboy.bits import BIT_0, BIT_1, BIT_2, BIT_3, BIT_4, BIT_5, BIT_6, BIT_7
from dotmatrix.gameboy.ppu_types import AddressingMode, FetcherMode, PPUMode, SpriteHeight


class _LcdcFlags(IntFlag):
    BG_DISPLAY_ENABLE = BIT_0
    OBJ_DISPLAY_ENABLE = BIT_1
    OBJ_SIZE = BIT_2
    BG_TILE_MAP_DISPLAY_SELECT = BIT_3
    BG_AND_WINDOW_TILE_DATA_SELECT = BIT_4
    WINDOW_DISPLAY_ENABLE = BIT_5
    WINDOW_TILE_MAP_DISPLAY_SELECT = BIT_6
    DISPLAY_ENABLE = BIT_7


_WN_BG_ENABLED = _LcdcFlags.WINDOW_DISPLAY_ENABLE | _LcdcFlags.BG_DISPLAY_ENABLE


@dataclass
class Lcdc:
    """The LCD control register."""

    flags: _LcdcFlags = _LcdcFlags(0)

    def _has(self, flag: int) -> bool:
        return self.flags & flag == flag

    def read(self) -> int:
        return int(self.flags)

    def write(self, value: int) -> None:
        self.flags = _LcdcFlags(value & 0xFF)

    def obj_size(self) -> SpriteHeight:
        return SpriteHeight.DOUBLE if self._has(_LcdcFlags.OBJ_SIZE) else SpriteHeight.SINGLE

    def obj_enable(self) -> bool:
        return self._has(_LcdcFlags.OBJ_DISPLAY_ENABLE)

    def addressing_mode(self) -> AddressingMode:
        if self._has(_LcdcFlags.BG_AND_WINDOW_TILE_DATA_SELECT):
            return AddressingMode.SIGNED
        return AddressingMode.UNSIGNED

    def tile_map_offset(self, mode: FetcherMode) -> int:
        """Offset into VRAM of the tile map used by ``mode``."""
        if mode is FetcherMode.WINDOW:
            flag = _LcdcFlags.WINDOW_TILE_MAP_DISPLAY_SELECT
        else:
            flag = _LcdcFlags.BG_TILE_MAP_DISPLAY_SELECT
        return 0x1C00 if self._has(flag) else 0x1800

    def win_enabled(self) -> bool:
        return self._has(_WN_BG_ENABLED)

    def bg_enabled(self) -> bool:
        return self._has(_LcdcFlags.BG_DISPLAY_ENABLE)

    def display_enabled(self) -> bool:
        return self._has(_LcdcFlags.DISPLAY_ENABLE)


class Stat(IntFlag):
    """The LCD status register's interrupt enables and LY=LYC flag."""

    LYC_EQ_LY = BIT_2
    H_BLANK_IE = BIT_3
    V_BLANK_IE = BIT_4
    OAM_IE = BIT_5
    LYC_EQ_LY_IE = BIT_6
    UNUSED = BIT_7

    def read(self, enabled: bool) -> int:
        """Value read back; only the unused bit reads set while the LCD is off."""
        if enabled:
            return int(self) | int(Stat.UNUSED)
        return int(Stat.UNUSED)

    def int_enable(self, mode: PPUMode) -> bool:
        """Whether the STAT interrupt is enabled for ``mode``."""
        if mode is PPUMode.HBLANK:
            return bool(self & Stat.H_BLANK_IE)
        if mode is PPUMode.VBLANK:
            return bool(self & Stat.V_BLANK_IE)
        if mode is PPUMode.OAM_SCAN:
            return bool(self & Stat.OAM_IE)
        return False

    def lyc_eq_ly(self) -> bool:
        return bool(self & Stat.LYC_EQ_LY)

    def lyc_eq_ly_ie(self) -> bool:
        return bool(self & Stat.LYC_EQ_LY_IE)

    def with_lyc_eq_ly(self, value: bool) -> "Stat":
        """A copy with the LY=LYC flag set to ``value``."""
        bit = int(Stat.LYC_EQ_LY)
        if value:
            return Stat(int(self) | bit)
        return Stat(int(self) & ~bit & 0xFF)
"""Interrupt sources and their vectors."""

from enum import IntEnum

from dotmatrix.sm83.bits import BIT_0, BIT_1, BIT_2, BIT_3, BIT_4

_JUMP_ADDRESSES = {
    BIT_0: 0x40,
    BIT_1: 0x48,
    BIT_2: 0x50,
    BIT_3: 0x58,
    BIT_4: 0x60,
}


class Interrupt(IntEnum):
    """An interrupt, valued by its bit in the IE and IF registers."""

    VBLANK = BIT_0
    LCD_STAT = BIT_1
    TIMER = BIT_2
    SERIAL = BIT_3
    JOYPAD = BIT_4

    def jump_addr(self) -> int:
        """Address the CPU jumps to when servicing this interrupt."""
        return _JUMP_ADDRESSES[self.value]

    def flag_bit(self) -> int:
        """Bit mask of this interrupt in IE/IF."""
        return int(self.value)
"""The SM83 register file."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class Reg8(Enum):
    """8-bit registers, valued by their slot in the register file."""

    A = 0
    F = 1
    B = 2
    C = 3
    D = 4
    E = 5
    H = 6
    L = 7

    def __str__(self) -> str:
        return self.name.lower()


class Reg16(Enum):
    """16-bit registers and register pairs."""

    AF = 0
    BC = 1
    DE = 2
    HL = 3
    SP = 4
    PC = 5

    def __str__(self) -> str:
        return self.name.lower()


_PAIRS = {
    Reg16.AF: (Reg8.A, Reg8.F),
    Reg16.BC: (Reg8.B, Reg8.C),
    Reg16.DE: (Reg8.D, Reg8.E),
    Reg16.HL: (Reg8.H, Reg8.L),
}


@dataclass
class Registers:
    """Eight 8-bit registers plus the stack pointer and program counter."""

    cells: bytearray = field(default_factory=lambda: bytearray(8))
    pc: int = 0
    sp: int = 0

    def read(self, reg: Union[Reg8, Reg16]) -> int:
        if isinstance(reg, Reg8):
            return self.cells[reg.value]
        if isinstance(reg, Reg16):
            if reg is Reg16.SP:
                return self.sp
            if reg is Reg16.PC:
                return self.pc
            high, low = _PAIRS[reg]
            return (self.cells[high.value] << 8) | self.cells[low.value]
        raise TypeError(f"not a register: {reg!r}")

    def write(self, reg: Union[Reg8, Reg16], value: int) -> None:
        if isinstance(reg, Reg8):
            value &= 0xFF
            # The low nibble of F is hard-wired to zero
            self.cells[reg.value] = value & 0xF0 if reg is Reg8.F else value
            return
        if isinstance(reg, Reg16):
            value &= 0xFFFF
            if reg is Reg16.SP:
                self.sp = value
            elif reg is Reg16.PC:
                self.pc = value
            else:
                high, low = _PAIRS[reg]
                self.write(high, value >> 8)
                self.write(low, value & 0xFF)
            return
        raise TypeError(f"not a register: {reg!r}")

    def __str__(self) -> str:
        return "".join(
            f"{reg.name}:{self.read(reg):04X}\n"
            for reg in (Reg16.AF, Reg16.BC, Reg16.DE, Reg16.HL, Reg16.SP, Reg16.PC)
        )
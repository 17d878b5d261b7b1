"""Operand references used by decoded instructions."""

from dataclasses import dataclass
from typing import Union

from dotmatrix.sm83.registers import Reg8, Reg16

_MEMREF_NAMES = {
    0xFF04: "DIV",
    0xFF05: "TIMA",
    0xFF06: "TMA",
    0xFF07: "TAC",
    0xFF10: "NR10",
    0xFF11: "NR11",
    0xFF12: "NR12",
    0xFF14: "NR14",
    0xFF16: "NR21",
    0xFF17: "NR22",
    0xFF19: "NR24",
    0xFF1A: "NR30",
    0xFF1B: "NR31",
    0xFF1C: "NR32",
    0xFF1E: "NR33",
    0xFF20: "NR41",
    0xFF21: "NR42",
    0xFF22: "NR43",
    0xFF23: "NR44",
    0xFF24: "NR50",
    0xFF25: "NR51",
    0xFF26: "NR52",
    0xFF40: "LCDC",
    0xFF41: "STAT",
    0xFF42: "SCY",
    0xFF43: "SCX",
    0xFF44: "LY",
    0xFF45: "LYC",
    0xFF46: "DMA",
    0xFF47: "BGP",
    0xFF48: "OBP0",
    0xFF49: "OBP1",
    0xFF4A: "WY",
    0xFF4B: "WX",
    0xFF01: "SB",
    0xFF02: "SC",
    0xFF0F: "IF",
}


def format_memref(addr: int) -> str:
    """Name a known I/O register address, or give it as four hex digits."""
    return _MEMREF_NAMES.get(addr, f"{addr:04X}")


def _check_range(value: int, low: int, high: int, what: str) -> None:
    if not low <= value <= high:
        raise ValueError(f"{what} out of range: {value}")


@dataclass(frozen=True)
class RegU16:
    """A 16-bit register."""

    reg: Reg16

    def __str__(self) -> str:
        return str(self.reg)


@dataclass(frozen=True)
class MemU16:
    """A 16-bit value stored in memory at a fixed address."""

    addr: int

    def __post_init__(self) -> None:
        _check_range(self.addr, 0, 0xFFFF, "address")

    def __str__(self) -> str:
        return f"[${format_memref(self.addr)}]"


@dataclass(frozen=True)
class RawU16:
    """An immediate 16-bit value."""

    value: int

    def __post_init__(self) -> None:
        _check_range(self.value, 0, 0xFFFF, "16-bit value")

    def __str__(self) -> str:
        return f"${self.value:04X}"


ValueRefU16 = Union[RegU16, MemU16, RawU16]


@dataclass(frozen=True)
class RegU8:
    """An 8-bit register."""

    reg: Reg8

    def __str__(self) -> str:
        return str(self.reg)


@dataclass(frozen=True)
class MemU8:
    """A byte in memory whose address comes from a 16-bit operand."""

    addr: ValueRefU16

    def __str__(self) -> str:
        return f"[{self.addr}]"


@dataclass(frozen=True)
class RawU8:
    """An immediate byte."""

    value: int

    def __post_init__(self) -> None:
        _check_range(self.value, 0, 0xFF, "8-bit value")

    def __str__(self) -> str:
        return f"${self.value:02X}"


@dataclass(frozen=True)
class HighMemRaw:
    """A byte at 0xFF00 plus an immediate offset."""

    offset: int

    def __post_init__(self) -> None:
        _check_range(self.offset, 0, 0xFF, "offset")

    def __str__(self) -> str:
        return f"[${format_memref(self.offset + 0xFF00)}]"


@dataclass(frozen=True)
class HighMemReg:
    """A byte at 0xFF00 plus an offset held in a register."""

    reg: Reg8

    def __str__(self) -> str:
        return f"[{self.reg}]"


ValueRefU8 = Union[RegU8, MemU8, RawU8, HighMemRaw, HighMemReg]


@dataclass(frozen=True)
class Displacement:
    """A signed 8-bit offset."""

    value: int

    def __post_init__(self) -> None:
        _check_range(self.value, -128, 127, "displacement")

    def __str__(self) -> str:
        if self.value >= 0:
            return f"${self.value:02X}"
        return f"-${-self.value:02X}"


_U8_REFS = (RegU8, MemU8, RawU8, HighMemRaw, HighMemReg)
_U16_REFS = (RegU16, MemU16, RawU16)


def as_u8_ref(value) -> ValueRefU8:
    """Coerce a register, register pair or integer to an 8-bit operand.

    A 16-bit register becomes the byte it points at.
    """
    if isinstance(value, _U8_REFS):
        return value
    if isinstance(value, Reg8):
        return RegU8(value)
    if isinstance(value, Reg16):
        return MemU8(RegU16(value))
    if isinstance(value, int) and not isinstance(value, bool):
        return RawU8(value)
    raise TypeError(f"cannot make an 8-bit operand from {value!r}")


def as_u16_ref(value) -> ValueRefU16:
    """Coerce a 16-bit register or integer to a 16-bit operand."""
    if isinstance(value, _U16_REFS):
        return value
    if isinstance(value, Reg16):
        return RegU16(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return RawU16(value)
    raise TypeError(f"cannot make a 16-bit operand from {value!r}")
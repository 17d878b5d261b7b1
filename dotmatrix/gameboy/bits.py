"""Bit helpers for the Game Boy hardware models."""

from dotmatrix.sm83.bits import BIT_0, BIT_1, BIT_2, BIT_3, BIT_4, BIT_5, BIT_6, BIT_7

__all__ = [
    "BIT_0",
    "BIT_1",
    "BIT_2",
    "BIT_3",
    "BIT_4",
    "BIT_5",
    "BIT_6",
    "BIT_7",
    "interleave",
    "falling_edge",
]


def interleave(a: int, b: int) -> int:
    """Interleave two bytes into a 16-bit word.

    Bit ``i`` of ``a`` lands on bit ``2*i`` and bit ``i`` of ``b`` on bit
    ``2*i + 1``, which turns a tile row's low and high planes into 2-bit
    colour indices.
    """
    a &= 0xFF
    b &= 0xFF

    a = (a ^ (a << 4)) & 0x0F0F
    b = (b ^ (b << 4)) & 0x0F0F

    a = (a ^ (a << 2)) & 0x3333
    b = (b ^ (b << 2)) & 0x3333

    a = (a ^ (a << 1)) & 0x5555
    b = (b ^ (b << 1)) & 0x5555

    return (b << 1) | a


def falling_edge(from_value: int, to_value: int, mask: int) -> bool:
    """True if the bits in ``mask`` were all set before and are not all set after."""
    return from_value & mask == mask and to_value & mask != mask
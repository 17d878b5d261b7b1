"""Single-bit masks and 16-bit carry helpers for the SM83 core."""

BIT_0 = 0b0000_0001
BIT_1 = 0b0000_0010
BIT_2 = 0b0000_0100
BIT_3 = 0b0000_1000
BIT_4 = 0b0001_0000
BIT_5 = 0b0010_0000
BIT_6 = 0b0100_0000
BIT_7 = 0b1000_0000

_U16 = 0xFFFF


def activate_rightmost_zeros(x: int) -> int:
    """Set every zero bit to the right of the lowest set bit (16-bit wrapping)."""
    x &= _U16
    return x | ((x - 1) & _U16)


def test_add_carry_bit(bit: int, a: int, b: int) -> bool:
    """Return True if adding ``a`` and ``b`` carries out of ``bit``."""
    mask = activate_rightmost_zeros(1 << bit)
    return (a & mask) + (b & mask) > mask
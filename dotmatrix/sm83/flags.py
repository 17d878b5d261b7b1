"""CPU flag masks, branch conditions and the flag-access mixin."""

from abc import ABC, abstractmethod
from enum import Enum

from dotmatrix.sm83.bits import BIT_4, BIT_5, BIT_6, BIT_7

Z = BIT_7
N = BIT_6
H = BIT_5
C = BIT_4


class Condition(Enum):
    """Branch condition tested against the flag register."""

    NZ = "nz"
    Z = "z"
    NC = "nc"
    C = "c"
    ALWAYS = ""

    def __str__(self) -> str:
        return self.value


class Flags(ABC):
    """Mixin giving bit-level access to a flag byte."""

    @abstractmethod
    def read_flag_byte(self) -> int:
        """Return the raw flag byte."""

    @abstractmethod
    def write_flag_byte(self, value: int) -> None:
        """Store the raw flag byte."""

    def set_flag_to(self, flag: int, value: bool) -> None:
        if value:
            self.set_flag(flag)
        else:
            self.clear_flag(flag)

    def clear_flag(self, flag: int) -> None:
        self.write_flag_byte(self.read_flag_byte() & ~flag & 0xFF)

    def set_flag(self, flag: int) -> None:
        self.write_flag_byte(self.read_flag_byte() | flag)

    def get_flag(self, flag: int) -> bool:
        return self.read_flag_byte() & flag != 0
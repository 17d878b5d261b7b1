"""Banked work RAM for monochrome and colour hardware."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List

BANK_SIZE = 0x1000
_CGB_BANKS = 8


def _new_bank() -> bytearray:
    return bytearray(BANK_SIZE)


class WorkRam(ABC):
    """Work RAM seen as a fixed low bank and a switchable high bank."""

    @property
    def bank_number(self) -> int:
        """The bank mapped into the high half; always 1 unless switchable."""
        return 1

    @bank_number.setter
    def bank_number(self, bank: int) -> None:
        """Bank switching is ignored on hardware without it."""

    @property
    @abstractmethod
    def low_bank(self) -> bytearray:
        """The bank mapped at 0xC000-0xCFFF."""

    @property
    @abstractmethod
    def high_bank(self) -> bytearray:
        """The bank mapped at 0xD000-0xDFFF."""


@dataclass
class DmgWorkRam(WorkRam):
    """Two fixed 4 KiB banks."""

    bank_0: bytearray = field(default_factory=_new_bank)
    bank_1: bytearray = field(default_factory=_new_bank)

    @property
    def low_bank(self) -> bytearray:
        return self.bank_0

    @property
    def high_bank(self) -> bytearray:
        return self.bank_1


@dataclass
class CgbWorkRam(WorkRam):
    """Eight 4 KiB banks; banks 1-7 can be mapped into the high half."""

    bank: int = 1
    banks: List[bytearray] = field(
        default_factory=lambda: [_new_bank() for _ in range(_CGB_BANKS)]
    )

    @property
    def bank_number(self) -> int:
        return self.bank

    @bank_number.setter
    def bank_number(self, bank: int) -> None:
        # Selecting bank 0 maps bank 1 instead
        self.bank = max(bank & 0b111, 1)

    @property
    def low_bank(self) -> bytearray:
        return self.banks[0]

    @property
    def high_bank(self) -> bytearray:
        return self.banks[self.bank]
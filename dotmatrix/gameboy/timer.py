"""The DIV/TIMA/TMA/TAC timer block."""

from dataclasses import dataclass

from dotmatrix.sm83.bits import BIT_2
from dotmatrix.sm83.interrupt import Interrupt

# System-clock periods selected by the low two bits of TAC
_TAC_PERIODS = (1024, 16, 64, 256)
_TIMA_RELOAD_DELAY = 4


@dataclass
class Timer:
    """A 16-bit system counter whose falling edges drive TIMA."""

    system_clock: int = 0
    tima: int = 0
    tma: int = 0
    tac: int = 0
    tima_delay: int = 0

    @property
    def div(self) -> int:
        """The DIV register: the upper byte of the system counter."""
        return (self.system_clock >> 8) & 0xFF

    @property
    def enabled(self) -> bool:
        """Whether TAC enables TIMA counting."""
        return self.tac & BIT_2 != 0

    def _watched_bit(self) -> int:
        return _TAC_PERIODS[self.tac & 0b11] >> 1

    def reset_div(self) -> None:
        """Handle a write to DIV: clear the counter, ticking TIMA on a falling edge."""
        bit = self._watched_bit()
        if self.system_clock & bit == bit:
            self._increment_tima()
        self.system_clock = 0

    def _increment_tima(self) -> None:
        self.tima = (self.tima + 1) & 0xFF
        if self.tima == 0:
            self.tima_delay = _TIMA_RELOAD_DELAY

    def _step_clock(self) -> bool:
        before = self.system_clock
        self.system_clock = (self.system_clock + 1) & 0xFFFF
        after = self.system_clock

        bit = self._watched_bit()
        if before & bit and not after & bit and self.enabled:
            self._increment_tima()

        if self.tima_delay > 0:
            self.tima_delay -= 1
            if self.tima_delay == 0:
                self.tima = self.tma
                return True
        return False

    def step(self) -> int:
        """Advance one M-cycle (four clocks).

        Returns the interrupt bits to raise in IF: the timer bit if TIMA was
        reloaded, otherwise 0.
        """
        requested = False
        for _ in range(4):
            requested |= self._step_clock()
        return Interrupt.TIMER.flag_bit() if requested else 0
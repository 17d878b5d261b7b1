"""Architectural CPU state: registers, halt and interrupt control."""

from dataclasses import dataclass, field
from typing import Optional, Union

from dotmatrix.sm83.flags import Flags
from dotmatrix.sm83.interrupt import Interrupt
from dotmatrix.sm83.registers import Reg8, Reg16, Registers


@dataclass
class CPUState(Flags):
    """Registers plus halt state and the IME/IE/IF interrupt machinery."""

    registers: Registers = field(default_factory=Registers)
    halted: bool = False
    interrupt_master_enable: bool = False
    interrupt_enable: int = 0
    interrupt_request: int = 0
    ie_next: bool = False

    def read(self, reg: Union[Reg8, Reg16]) -> int:
        return self.registers.read(reg)

    def write(self, reg: Union[Reg8, Reg16], value: int) -> None:
        self.registers.write(reg, value)

    def read_flag_byte(self) -> int:
        return self.read(Reg8.F)

    def write_flag_byte(self, value: int) -> None:
        self.write(Reg8.F, value)

    def clear_interrupt_request(self, interrupt: int) -> None:
        self.interrupt_request &= ~interrupt & 0xFF

    def interrupt_pending(self) -> bool:
        return self.interrupt_request & self.interrupt_enable != 0

    def disable_interrupts(self) -> None:
        self.interrupt_master_enable = False
        self.ie_next = False

    def enable_interrupts(self) -> None:
        # Takes effect on the next tick, mirroring EI's one-instruction delay
        self.ie_next = True

    def get_pending_interrupt(self) -> Optional[Interrupt]:
        """Highest-priority requested and enabled interrupt, if IME is set."""
        if not self.interrupt_master_enable:
            return None
        requests = self.interrupt_enable & self.interrupt_request
        if not requests:
            return None
        lowest = requests & -requests
        try:
            return Interrupt(lowest)
        except ValueError:
            return None

    def ime(self) -> bool:
        return self.interrupt_master_enable

    def tick_ie_delay(self) -> None:
        self.interrupt_master_enable = self.ie_next
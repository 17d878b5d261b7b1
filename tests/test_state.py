from dotmatrix.sm83.flags import C, Z
from dotmatrix.sm83.interrupt import Interrupt
from dotmatrix.sm83.registers import Reg8, Reg16
from dotmatrix.sm83.state import CPUState


def _all_enabled():
    state = CPUState()
    state.interrupt_enable = 0xFF
    state.enable_interrupts()
    state.tick_ie_delay()
    return state


def test_enable_interrupts_is_delayed():
    state = CPUState()
    state.enable_interrupts()
    assert not state.ime()
    state.tick_ie_delay()
    assert state.ime()


def test_disable_interrupts_cancels_pending_enable():
    state = CPUState()
    state.enable_interrupts()
    state.disable_interrupts()
    state.tick_ie_delay()
    assert not state.ime()


def test_no_pending_interrupt_without_ime():
    state = CPUState()
    state.interrupt_enable = 0xFF
    state.interrupt_request = Interrupt.TIMER.flag_bit()
    assert state.interrupt_pending()
    assert state.get_pending_interrupt() is None


def test_lowest_bit_has_priority():
    state = _all_enabled()
    state.interrupt_request = Interrupt.TIMER.flag_bit() | Interrupt.VBLANK.flag_bit()
    assert state.get_pending_interrupt() is Interrupt.VBLANK


def test_requested_but_not_enabled():
    state = _all_enabled()
    state.interrupt_enable = Interrupt.JOYPAD.flag_bit()
    state.interrupt_request = Interrupt.SERIAL.flag_bit()
    assert not state.interrupt_pending()
    assert state.get_pending_interrupt() is None


def test_unused_bits_give_no_interrupt():
    state = _all_enabled()
    state.interrupt_request = 0b0010_0000
    assert state.interrupt_pending()
    assert state.get_pending_interrupt() is None


def test_clear_interrupt_request():
    state = CPUState()
    state.interrupt_request = Interrupt.TIMER.flag_bit() | Interrupt.SERIAL.flag_bit()
    state.clear_interrupt_request(Interrupt.TIMER.flag_bit())
    assert state.interrupt_request == Interrupt.SERIAL.flag_bit()


def test_flags_live_in_f_register():
    state = CPUState()
    state.set_flag(Z)
    state.set_flag(C)
    assert state.read(Reg8.F) == Z | C
    state.clear_flag(0xFF)
    assert state.read(Reg8.F) == 0


def test_register_access_delegates():
    state = CPUState()
    state.write(Reg16.HL, 0xC0DE)
    assert state.read(Reg16.HL) == 0xC0DE
    assert state.registers.read(Reg8.H) == 0xC0
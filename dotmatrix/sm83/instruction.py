"""Decoded instructions, opcode fields and the decode tables."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple

from dotmatrix.sm83.flags import Condition
from dotmatrix.sm83.registers import Reg8, Reg16
from dotmatrix.sm83.values import MemU8, RawU16, RegU8, RegU16


class ALUOperation(Enum):
    """Accumulator arithmetic and logic operations."""

    ADD = "add"
    ADC = "adc"
    SUB = "sub"
    SBC = "sbc"
    AND = "and"
    XOR = "xor"
    OR = "or"
    CP = "cp"

    def __str__(self) -> str:
        return self.value


class RotShiftOperation(Enum):
    """CB-prefixed rotate and shift operations."""

    RLC = "rlc"
    RRC = "rrc"
    RL = "rl"
    RR = "rr"
    SLA = "sla"
    SRA = "sra"
    SWAP = "swap"
    SRL = "srl"

    def __str__(self) -> str:
        return self.value


class Op(Enum):
    """Instruction kinds."""

    NOP = auto()
    STOP = auto()
    ERROR = auto()
    LD_8 = auto()
    LDH = auto()
    LD_16 = auto()
    INC_8 = auto()
    INC_16 = auto()
    DEC_8 = auto()
    DEC_16 = auto()
    JR = auto()
    ADD_16 = auto()
    ADD_SIGNED = auto()
    ALU_OP_8 = auto()
    HALT = auto()
    CALL = auto()
    POP = auto()
    PUSH = auto()
    JP = auto()
    RETI = auto()
    RET = auto()
    RST = auto()
    DI = auto()
    EI = auto()
    LD_HL_SP_DD = auto()
    RLCA = auto()
    RRCA = auto()
    RLA = auto()
    RRA = auto()
    DAA = auto()
    CPL = auto()
    SCF = auto()
    CCF = auto()
    BIT = auto()
    RES = auto()
    SET = auto()
    ROT = auto()
    INT = auto()
    LD_A_INC_HL = auto()
    LD_A_DEC_HL = auto()
    LD_INC_HL_A = auto()
    LD_DEC_HL_A = auto()


_FIXED_TEXT = {
    Op.NOP: "nop",
    Op.STOP: "stop",
    Op.HALT: "halt",
    Op.DI: "di",
    Op.EI: "ei",
    Op.RLCA: "rlca",
    Op.RRCA: "rrca",
    Op.RLA: "rla",
    Op.RRA: "rra",
    Op.DAA: "daa",
    Op.CPL: "cpl",
    Op.SCF: "scf",
    Op.CCF: "ccf",
    Op.INT: "int",
    Op.RETI: "reti",
    Op.LD_A_DEC_HL: "ld a, [hl-]",
    Op.LD_A_INC_HL: "ld a, [hl+]",
    Op.LD_DEC_HL_A: "ld [hl-], a",
    Op.LD_INC_HL_A: "ld [hl+], a",
}

_TWO_OPERAND = {
    Op.LD_8: "ld",
    Op.LDH: "ldh",
    Op.LD_16: "ld",
    Op.ADD_16: "add",
    Op.ADD_SIGNED: "add",
}

_ONE_OPERAND = {
    Op.INC_8: "inc",
    Op.INC_16: "inc",
    Op.DEC_8: "dec",
    Op.DEC_16: "dec",
    Op.POP: "pop",
    Op.PUSH: "push",
}

_CONDITIONAL = {Op.JR: "jr", Op.CALL: "call", Op.JP: "jp"}

_BIT_OPS = {Op.BIT: "bit", Op.RES: "res", Op.SET: "set"}


@dataclass(frozen=True)
class Instruction:
    """A decoded instruction: its kind and its operands."""

    op: Op
    args: tuple = ()

    def __str__(self) -> str:
        op, args = self.op, self.args
        if op in _FIXED_TEXT:
            return _FIXED_TEXT[op]
        if op is Op.ERROR:
            return f"error({args[0]})"
        if op in _TWO_OPERAND:
            return f"{_TWO_OPERAND[op]} {args[0]}, {args[1]}"
        if op in _ONE_OPERAND:
            return f"{_ONE_OPERAND[op]} {args[0]}"
        if op in _CONDITIONAL:
            condition, target = args
            name = _CONDITIONAL[op]
            if condition is Condition.ALWAYS:
                return f"{name} {target}"
            return f"{name} {condition}, {target}"
        if op is Op.RET:
            (condition,) = args
            return "ret" if condition is Condition.ALWAYS else f"ret {condition}"
        if op is Op.RST:
            (target,) = args
            if isinstance(target, RawU16):
                return f"rst ${target.value & 0xFF:02X}"
            return f"rst {target}"
        if op is Op.ALU_OP_8:
            return f"{args[0]} a, {args[1]}"
        if op in _BIT_OPS:
            return f"{_BIT_OPS[op]} {args[0]}, {args[1]}"
        if op is Op.ROT:
            return f"{args[0]} {args[1]}"
        if op is Op.LD_HL_SP_DD:
            return f"ld hl, sp + {args[0]}"
        raise ValueError(f"unknown instruction kind: {op!r}")


class Opcode(NamedTuple):
    """The x/z/y/p/q fields of an opcode byte."""

    x: int
    z: int
    y: int
    p: int
    q: int


def parse_opcode(raw: int) -> Opcode:
    """Split an opcode byte into its decoding fields."""
    return Opcode(
        x=(raw >> 6) & 0b11,
        z=raw & 0b111,
        y=(raw >> 3) & 0b111,
        p=(raw >> 4) & 0b11,
        q=(raw >> 3) & 0b1,
    )


R_TABLE = (
    RegU8(Reg8.B),
    RegU8(Reg8.C),
    RegU8(Reg8.D),
    RegU8(Reg8.E),
    RegU8(Reg8.H),
    RegU8(Reg8.L),
    MemU8(RegU16(Reg16.HL)),
    RegU8(Reg8.A),
)

RP_TABLE = (Reg16.BC, Reg16.DE, Reg16.HL, Reg16.SP)

CC_TABLE = (Condition.NZ, Condition.Z, Condition.NC, Condition.C)

ALU_TABLE = tuple(ALUOperation)

ROT_TABLE = tuple(RotShiftOperation)
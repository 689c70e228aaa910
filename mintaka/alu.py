from typing import NamedTuple
from .isa import AluOp
from .adder import add
from .logic import logic
from .shifter import shift
from .util import MASK_32
from .util import to_signed


class AluResult(NamedTuple):
    result: int
    zero: bool


def alu(op: AluOp, dat1: int, dat2: int) -> AluResult:
    """
    Compute ``op`` over two 32-bit operands.

    Shifts move ``dat2`` by the amount in the low 5 bits of ``dat1``.
    An undefined opcode behaves as ADD.
    """
    dat1 &= MASK_32
    dat2 &= MASK_32

    if op == AluOp.SUB:
        result = add(dat1, dat2, sub=True)
    elif op in (AluOp.AND, AluOp.OR, AluOp.XOR):
        result = logic(op, dat1, dat2)
    elif op == AluOp.SLT:
        result = int(to_signed(dat1) < to_signed(dat2))
    elif op == AluOp.SLTU:
        result = int(dat1 < dat2)
    elif op == AluOp.SLL:
        result = shift(dat2, dat1, direction=False, sign_ext=False)
    elif op == AluOp.SRL:
        result = shift(dat2, dat1, direction=True, sign_ext=False)
    elif op == AluOp.SRA:
        result = shift(dat2, dat1, direction=True, sign_ext=True)
    else:
        result = add(dat1, dat2)

    return AluResult(result, result == 0)

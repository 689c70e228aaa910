from .isa import Funct3
from .util import MASK_32
from .util import to_signed


def compare(op: int, dat1: int, dat2: int, enable: bool = True) -> bool:
    if not enable:
        return False

    dat1 &= MASK_32
    dat2 &= MASK_32

    if op == Funct3.BEQ:
        return dat1 == dat2
    elif op == Funct3.BNE:
        return dat1 != dat2
    elif op == Funct3.BLT:
        return to_signed(dat1) < to_signed(dat2)
    elif op == Funct3.BGE:
        return not to_signed(dat1) < to_signed(dat2)
    elif op == Funct3.BLTU:
        return dat1 < dat2
    elif op == Funct3.BGEU:
        return not dat1 < dat2
    return False

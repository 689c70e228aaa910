from typing import NamedTuple
from .isa import Funct3
from .util import MASK_32
from .util import signext


class StoreRequest(NamedTuple):
    addr: int
    byte_sel: int
    data: int


def format_store(addr: int, value: int, funct3: int) -> StoreRequest:
    """
    Place ``value`` in the byte lanes selected by the address offset.

    Unknown widths enable no byte.
    """
    offset  = addr & 0b11
    aligned = addr & ~0b11 & MASK_32

    if funct3 == Funct3.B:
        return StoreRequest(aligned, 0b0001 << offset, ((value & 0xFF) << (8 * offset)) & MASK_32)
    elif funct3 == Funct3.H:
        return StoreRequest(aligned, (0b0011 << offset) & 0b1111, ((value & 0xFFFF) << (8 * offset)) & MASK_32)
    elif funct3 == Funct3.W:
        return StoreRequest(aligned, 0b1111, value & MASK_32)
    return StoreRequest(aligned, 0b0000, 0)


def format_load(addr: int, data_r: int, funct3: int) -> int:
    """
    Extract the byte/half selected by the address offset from the raw word.

    Unknown widths load zero.
    """
    shifted = (data_r & MASK_32) >> (8 * (addr & 0b11))

    if funct3 == Funct3.B:
        return signext(shifted, 8)
    elif funct3 == Funct3.BU:
        return shifted & 0xFF
    elif funct3 == Funct3.H:
        return signext(shifted, 16)
    elif funct3 == Funct3.HU:
        return shifted & 0xFFFF
    elif funct3 == Funct3.W:
        return data_r & MASK_32
    return 0

XLEN    = 32
MASK_32 = 0xFFFF_FFFF


def signext(value: int, bits: int) -> int:
    """Sign-extend a ``bits``-wide value to a 32-bit pattern."""
    value &= (1 << bits) - 1
    if value & (1 << (bits - 1)):
        value -= 1 << bits
    return value & MASK_32


def to_signed(value: int) -> int:
    value &= MASK_32
    return value - (1 << XLEN) if value & 0x8000_0000 else value

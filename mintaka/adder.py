from .util import MASK_32


def add(dat1: int, dat2: int, sub: bool = False) -> int:
    # two's complement wrap-around. No overflow trap
    if sub:
        return (dat1 - dat2) & MASK_32
    return (dat1 + dat2) & MASK_32

from .util import MASK_32
from .util import to_signed


def shift(dat: int, shamt: int, direction: bool, sign_ext: bool) -> int:
    """
    Shift ``dat`` by the low 5 bits of ``shamt``.

    Args:
    - direction: True: right. False: left
    - sign_ext:  fill with the sign bit of ``dat`` (right shifts only)
    """
    shamt &= 0x1F
    dat   &= MASK_32
    if not direction:
        return (dat << shamt) & MASK_32
    if sign_ext:
        return (to_signed(dat) >> shamt) & MASK_32
    return dat >> shamt

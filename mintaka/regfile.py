from typing import Optional
from typing import Tuple
from .util import MASK_32


class RegisterFile:
    """
    32 x 32-bit general purpose registers.

    Two combinational read ports, one write port. A write is held until
    ``clock()``, so a read in the same cycle sees the old value.
    ``x0`` is hardwired to zero.
    """
    def __init__(self) -> None:
        self._gpr: list = [0] * 32
        self._pending: Optional[Tuple[int, int]] = None

    def read(self, index: int) -> int:
        return self._gpr[index & 0x1F]

    def write(self, index: int, value: int) -> None:
        index &= 0x1F
        if index == 0:
            self._pending = None
            return
        self._pending = (index, value & MASK_32)

    def clock(self) -> None:
        if self._pending is not None:
            index, value = self._pending
            self._gpr[index] = value
            self._pending = None

    def reset(self) -> None:
        self._gpr     = [0] * 32
        self._pending = None

    def dump(self) -> Tuple[int, ...]:
        return tuple(self._gpr)

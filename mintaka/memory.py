from typing import Iterable
from .util import MASK_32


class Memory:
    """
    Flat, byte-addressable memory. Addresses wrap to ``addr_width`` bits.
    """
    def __init__(self, addr_width: int = 16) -> None:
        if not 2 <= addr_width <= 32:
            raise ValueError(f'Invalid address width: {addr_width}. Valid range: 2..32')

        self.addr_width = addr_width
        self.size       = 1 << addr_width
        self.mem        = bytearray(self.size)

    def _mask(self, addr: int) -> int:
        return addr & (self.size - 1)

    def read_word(self, addr: int) -> int:
        return sum(self.mem[self._mask(addr + i)] << (8 * i) for i in range(4))

    def write_bytes(self, addr: int, value: int, byte_sel: int) -> None:
        value &= MASK_32
        for i in range(4):
            if byte_sel & (1 << i):
                self.mem[self._mask(addr + i)] = (value >> (8 * i)) & 0xFF

    def load(self, image: bytes, offset: int = 0) -> None:
        offset = self._mask(offset)
        if offset + len(image) > self.size:
            raise ValueError(f'Image of {len(image)} bytes does not fit at 0x{offset:x} (size: 0x{self.size:x})')
        self.mem[offset:offset + len(image)] = image

    def load_words(self, words: Iterable[int], offset: int = 0) -> None:
        self.load(b''.join((word & MASK_32).to_bytes(4, 'little') for word in words), offset)

    def clear(self) -> None:
        self.mem[:] = bytes(self.size)

import pytest
from mintaka.isa import Funct3
from mintaka.lsu import format_load
from mintaka.lsu import format_store
from mintaka.memory import Memory


@pytest.fixture
def mem():
    return Memory(addr_width=8)


def store_load(mem, addr, value, store_f3, load_f3):
    req = format_store(addr, value, store_f3)
    mem.write_bytes(req.addr, req.data, req.byte_sel)
    return format_load(addr, mem.read_word(addr & ~0b11), load_f3)


class TestStore:
    @pytest.mark.parametrize('offset', range(4))
    def test_byte_lanes(self, offset):
        req = format_store(0x40 + offset, 0x1234_56AB, Funct3.B)
        assert req.addr == 0x40
        assert req.byte_sel == 1 << offset
        assert req.data == 0xAB << (8 * offset)

    @pytest.mark.parametrize('offset', [0, 2])
    def test_half_lanes(self, offset):
        req = format_store(0x40 + offset, 0x1234_CDEF, Funct3.H)
        assert req.byte_sel == 0b0011 << offset
        assert req.data == 0xCDEF << (8 * offset)

    def test_word(self):
        assert format_store(0x43, 0xDEAD_BEEF, Funct3.W) == (0x40, 0b1111, 0xDEAD_BEEF)

    def test_unknown_width(self):
        assert format_store(0x40, 0xFFFF_FFFF, 0b011).byte_sel == 0


class TestLoad:
    def test_sign_extension(self):
        word = 0x80FF_7F80
        assert format_load(0, word, Funct3.B) == 0xFFFF_FF80
        assert format_load(0, word, Funct3.BU) == 0x80
        assert format_load(1, word, Funct3.B) == 0x7F
        assert format_load(2, word, Funct3.B) == 0xFFFF_FFFF
        assert format_load(2, word, Funct3.H) == 0xFFFF_80FF
        assert format_load(2, word, Funct3.HU) == 0x80FF
        assert format_load(0, word, Funct3.H) == 0x7F80
        assert format_load(0, word, Funct3.W) == word

    @pytest.mark.parametrize('funct3', [0b011, 0b110, 0b111])
    def test_unknown_width(self, funct3):
        assert format_load(0, 0xFFFF_FFFF, funct3) == 0


class TestRoundTrip:
    @pytest.mark.parametrize('offset', range(4))
    def test_byte(self, mem, offset):
        assert store_load(mem, 0x10 + offset, 0x5A, Funct3.B, Funct3.BU) == 0x5A
        assert store_load(mem, 0x10 + offset, 0xA5, Funct3.B, Funct3.B) == 0xFFFF_FFA5

    @pytest.mark.parametrize('offset', [0, 2])
    def test_half(self, mem, offset):
        assert store_load(mem, 0x20 + offset, 0x1234, Funct3.H, Funct3.HU) == 0x1234
        assert store_load(mem, 0x20 + offset, 0x8001, Funct3.H, Funct3.H) == 0xFFFF_8001
        assert store_load(mem, 0x20 + offset, 0x8001, Funct3.H, Funct3.HU) == 0x8001

    def test_word(self, mem):
        assert store_load(mem, 0x30, 0xCAFE_F00D, Funct3.W, Funct3.W) == 0xCAFE_F00D

    def test_neighbour_bytes_untouched(self, mem):
        mem.write_bytes(0x30, 0x4433_2211, 0b1111)
        store_load(mem, 0x31, 0xEE, Funct3.B, Funct3.B)
        assert mem.read_word(0x30) == 0x4433_EE11


class TestMemory:
    def test_invalid_width(self):
        with pytest.raises(ValueError):
            Memory(addr_width=1)

    def test_little_endian(self, mem):
        mem.load(bytes([0x11, 0x22, 0x33, 0x44]), offset=8)
        assert mem.read_word(8) == 0x4433_2211

    def test_address_wraps(self, mem):
        mem.write_bytes(0x100 + 4, 0xAABB_CCDD, 0b1111)
        assert mem.read_word(4) == 0xAABB_CCDD

    def test_load_overflow(self, mem):
        with pytest.raises(ValueError):
            mem.load(bytes(8), offset=0xFC)

    def test_load_words_and_clear(self, mem):
        mem.load_words([0x0000_0013, 0xDEAD_BEEF])
        assert mem.read_word(4) == 0xDEAD_BEEF
        mem.clear()
        assert mem.read_word(4) == 0

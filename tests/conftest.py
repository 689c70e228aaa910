import pytest
from mintaka.core import Mintaka
from mintaka.memory import Memory


@pytest.fixture
def imem():
    return Memory(addr_width=12)


@pytest.fixture
def dmem():
    return Memory(addr_width=12)


@pytest.fixture
def make_core(imem, dmem):
    def _make_core(program, **kwargs):
        imem.load_words(program)
        return Mintaka(imem, dmem, **kwargs)
    return _make_core

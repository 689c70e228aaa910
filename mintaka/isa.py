from amaranth.lib import data
from amaranth.lib import enum

"""
Unpriviledge ISA RV32I v2.1
"""


class Opcode:
    LUI    = 0b0110111
    AUIPC  = 0b0010111
    JAL    = 0b1101111
    JALR   = 0b1100111
    BRANCH = 0b1100011
    LOAD   = 0b0000011
    STORE  = 0b0100011
    OP_IMM = 0b0010011
    OP     = 0b0110011
    FENCE  = 0b0001111
    SYSTEM = 0b1110011


class Funct3:
    BEQ  = B  = ADD  = 0b000
    BNE  = H  = SLL  = 0b001
    _    = W  = SLT  = 0b010
    _    = _  = SLTU = 0b011
    BLT  = BU = XOR  = 0b100
    BGE  = HU = SR   = 0b101
    BLTU = _  = OR   = 0b110
    BGEU = _  = AND  = 0b111


class Funct7:
    SRL = ADD = 0b0000000
    SRA = SUB = 0b0100000


# fields shared by all the base formats. The immediate bits overlap these.
instruction_layout = data.StructLayout({
    'opcode': 7,
    'rd':     5,
    'funct3': 3,
    'rs1':    5,
    'rs2':    5,
    'funct7': 7
})


def get_field(instruction: int, name: str) -> int:
    field = instruction_layout[name]
    return (instruction >> field.offset) & ((1 << field.width) - 1)


class AluOp(enum.IntEnum, shape=4):
    ADD  = 0
    SUB  = 1
    AND  = 2
    OR   = 3
    XOR  = 4
    SLT  = 5
    SLTU = 6
    SLL  = 7
    SRL  = 8
    SRA  = 9


class SrcA(enum.IntEnum, shape=2):
    REG  = 0
    PC   = 1
    ZERO = 2


class SrcB(enum.IntEnum, shape=2):
    REG  = 0
    IMM  = 1
    FOUR = 2


class ImmFormat(enum.IntEnum, shape=3):
    I = 0  # noqa
    S = 1
    B = 2
    U = 3
    J = 4


class ResultSrc(enum.IntEnum, shape=2):
    ALU = 0
    MEM = 1
    PC4 = 2


class ForwardSel(enum.IntEnum, shape=2):
    NONE = 0
    WB   = 1
    MEM  = 2

# Minimal RV32I encoder used to build test programs
from mintaka.isa import Opcode
from mintaka.isa import Funct3
from mintaka.isa import Funct7


def r_type(opcode, rd, funct3, rs1, rs2, funct7):
    return (funct7 << 25) | (rs2 << 20) | (rs1 << 15) | (funct3 << 12) | (rd << 7) | opcode


def i_type(opcode, rd, funct3, rs1, imm):
    return ((imm & 0xFFF) << 20) | (rs1 << 15) | (funct3 << 12) | (rd << 7) | opcode


def s_type(opcode, funct3, rs1, rs2, imm):
    imm &= 0xFFF
    return ((imm >> 5) << 25) | (rs2 << 20) | (rs1 << 15) | (funct3 << 12) | ((imm & 0x1F) << 7) | opcode


def b_type(opcode, funct3, rs1, rs2, imm):
    imm &= 0x1FFF
    return (((imm >> 12) & 1) << 31) | (((imm >> 5) & 0x3F) << 25) | (rs2 << 20) | (rs1 << 15) | \
        (funct3 << 12) | (((imm >> 1) & 0xF) << 8) | (((imm >> 11) & 1) << 7) | opcode


def u_type(opcode, rd, imm):
    return (imm & 0xFFFFF000) | (rd << 7) | opcode


def j_type(opcode, rd, imm):
    imm &= 0x1FFFFF
    return (((imm >> 20) & 1) << 31) | (((imm >> 1) & 0x3FF) << 21) | (((imm >> 11) & 1) << 20) | \
        (((imm >> 12) & 0xFF) << 12) | (rd << 7) | opcode


def addi(rd, rs1, imm):
    return i_type(Opcode.OP_IMM, rd, Funct3.ADD, rs1, imm)


def slti(rd, rs1, imm):
    return i_type(Opcode.OP_IMM, rd, Funct3.SLT, rs1, imm)


def xori(rd, rs1, imm):
    return i_type(Opcode.OP_IMM, rd, Funct3.XOR, rs1, imm)


def slli(rd, rs1, shamt):
    return i_type(Opcode.OP_IMM, rd, Funct3.SLL, rs1, shamt)


def srli(rd, rs1, shamt):
    return i_type(Opcode.OP_IMM, rd, Funct3.SR, rs1, shamt)


def srai(rd, rs1, shamt):
    return i_type(Opcode.OP_IMM, rd, Funct3.SR, rs1, (Funct7.SRA << 5) | shamt)


def add(rd, rs1, rs2):
    return r_type(Opcode.OP, rd, Funct3.ADD, rs1, rs2, Funct7.ADD)


def sub(rd, rs1, rs2):
    return r_type(Opcode.OP, rd, Funct3.ADD, rs1, rs2, Funct7.SUB)


def sll(rd, rs1, rs2):
    return r_type(Opcode.OP, rd, Funct3.SLL, rs1, rs2, Funct7.ADD)


def sra(rd, rs1, rs2):
    return r_type(Opcode.OP, rd, Funct3.SR, rs1, rs2, Funct7.SRA)


def sltu(rd, rs1, rs2):
    return r_type(Opcode.OP, rd, Funct3.SLTU, rs1, rs2, 0)


def lui(rd, imm):
    return u_type(Opcode.LUI, rd, imm)


def auipc(rd, imm):
    return u_type(Opcode.AUIPC, rd, imm)


def jal(rd, imm):
    return j_type(Opcode.JAL, rd, imm)


def jalr(rd, rs1, imm):
    return i_type(Opcode.JALR, rd, 0, rs1, imm)


def beq(rs1, rs2, imm):
    return b_type(Opcode.BRANCH, Funct3.BEQ, rs1, rs2, imm)


def bne(rs1, rs2, imm):
    return b_type(Opcode.BRANCH, Funct3.BNE, rs1, rs2, imm)


def blt(rs1, rs2, imm):
    return b_type(Opcode.BRANCH, Funct3.BLT, rs1, rs2, imm)


def lw(rd, rs1, imm):
    return i_type(Opcode.LOAD, rd, Funct3.W, rs1, imm)


def lb(rd, rs1, imm):
    return i_type(Opcode.LOAD, rd, Funct3.B, rs1, imm)


def lbu(rd, rs1, imm):
    return i_type(Opcode.LOAD, rd, Funct3.BU, rs1, imm)


def lhu(rd, rs1, imm):
    return i_type(Opcode.LOAD, rd, Funct3.HU, rs1, imm)


def sw(rs2, rs1, imm):
    return s_type(Opcode.STORE, Funct3.W, rs1, rs2, imm)


def sh(rs2, rs1, imm):
    return s_type(Opcode.STORE, Funct3.H, rs1, rs2, imm)


def sb(rs2, rs1, imm):
    return s_type(Opcode.STORE, Funct3.B, rs1, rs2, imm)


NOP = addi(0, 0, 0)

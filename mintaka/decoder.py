from dataclasses import replace
from .isa import Opcode
from .isa import Funct3
from .isa import AluOp
from .isa import SrcA
from .isa import SrcB
from .isa import ImmFormat
from .isa import ResultSrc
from .isa import get_field
from .layout import ControlSignals
from .util import signext


def decode_immediate(instruction: int, fmt: ImmFormat) -> int:
    """
    Extract the immediate of ``instruction`` for the given format.

    All formats are sign-extended from bit 31, except U (upper 20 bits,
    low 12 bits in zero). B and J immediates are always even.
    Unknown formats decode as I.
    """
    def bits(hi: int, lo: int) -> int:
        return (instruction >> lo) & ((1 << (hi - lo + 1)) - 1)

    if fmt == ImmFormat.S:
        return signext((bits(31, 25) << 5) | bits(11, 7), 12)
    elif fmt == ImmFormat.B:
        imm = (bits(31, 31) << 12) | (bits(7, 7) << 11) | (bits(30, 25) << 5) | (bits(11, 8) << 1)
        return signext(imm, 13)
    elif fmt == ImmFormat.U:
        return bits(31, 12) << 12
    elif fmt == ImmFormat.J:
        imm = (bits(31, 31) << 20) | (bits(19, 12) << 12) | (bits(20, 20) << 11) | (bits(30, 21) << 1)
        return signext(imm, 21)
    return signext(bits(31, 20), 12)


_alu_funct3 = {
    Funct3.ADD:  AluOp.ADD,
    Funct3.SLL:  AluOp.SLL,
    Funct3.SLT:  AluOp.SLT,
    Funct3.SLTU: AluOp.SLTU,
    Funct3.XOR:  AluOp.XOR,
    Funct3.SR:   AluOp.SRL,
    Funct3.OR:   AluOp.OR,
    Funct3.AND:  AluOp.AND
}

_control_table = {
    Opcode.LUI:    ControlSignals(reg_write=True, src_a=SrcA.ZERO, src_b=SrcB.IMM, imm_format=ImmFormat.U),
    Opcode.AUIPC:  ControlSignals(reg_write=True, src_a=SrcA.PC, src_b=SrcB.IMM, imm_format=ImmFormat.U),
    Opcode.JAL:    ControlSignals(reg_write=True, jump=True, src_a=SrcA.PC, src_b=SrcB.FOUR,
                                  imm_format=ImmFormat.J, result_src=ResultSrc.PC4),
    Opcode.JALR:   ControlSignals(reg_write=True, jump=True, indirect=True, rs1_use=True, src_a=SrcA.PC,
                                  src_b=SrcB.FOUR, imm_format=ImmFormat.I, result_src=ResultSrc.PC4),
    Opcode.BRANCH: ControlSignals(branch=True, rs1_use=True, rs2_use=True, alu_op=AluOp.SUB, imm_format=ImmFormat.B),
    Opcode.LOAD:   ControlSignals(reg_write=True, mem_read=True, rs1_use=True, src_b=SrcB.IMM,
                                  result_src=ResultSrc.MEM),
    Opcode.STORE:  ControlSignals(mem_write=True, rs1_use=True, rs2_use=True, src_b=SrcB.IMM, imm_format=ImmFormat.S),
    Opcode.OP_IMM: ControlSignals(reg_write=True, rs1_use=True, src_b=SrcB.IMM),
    Opcode.OP:     ControlSignals(reg_write=True, rs1_use=True, rs2_use=True)
}


def decode(instruction: int) -> ControlSignals:
    """
    Generate the control bundle for ``instruction``.

    Total over any 32-bit word: opcodes outside the RV32I base set
    (FENCE and SYSTEM included) decode as a bubble.
    """
    opcode = get_field(instruction, 'opcode')
    ctrl   = _control_table.get(opcode)
    if ctrl is None:
        return ControlSignals.bubble()

    if opcode in (Opcode.OP_IMM, Opcode.OP):
        funct3 = get_field(instruction, 'funct3')
        alt    = bool(get_field(instruction, 'funct7') & 0b0100000)
        alu_op = _alu_funct3[funct3]
        # for OP_IMM, bit 30 belongs to the immediate except in shifts
        if alt and funct3 == Funct3.SR:
            alu_op = AluOp.SRA
        elif alt and funct3 == Funct3.ADD and opcode == Opcode.OP:
            alu_op = AluOp.SUB
        ctrl = replace(ctrl, alu_op=alu_op)

    return ctrl

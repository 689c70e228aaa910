from dataclasses import dataclass
from dataclasses import field
from .isa import AluOp
from .isa import SrcA
from .isa import SrcB
from .isa import ImmFormat
from .isa import ResultSrc


@dataclass(frozen=True)
class ControlSignals:
    """Control bundle generated at decode. Travels unchanged down the pipeline."""
    reg_write:  bool      = False
    mem_read:   bool      = False
    mem_write:  bool      = False
    branch:     bool      = False
    jump:       bool      = False
    indirect:   bool      = False  # jump target based on rs1 (JALR)
    rs1_use:    bool      = False
    rs2_use:    bool      = False
    alu_op:     AluOp     = AluOp.ADD
    src_a:      SrcA      = SrcA.REG
    src_b:      SrcB      = SrcB.REG
    imm_format: ImmFormat = ImmFormat.I
    result_src: ResultSrc = ResultSrc.ALU

    @classmethod
    def bubble(cls) -> 'ControlSignals':
        return cls()


# layout for pipeline stages.
# 'valid' is false for bubbles: a flushed/reset record never retires.
@dataclass(frozen=True)
class FDRecord:
    valid:       bool = False
    pc:          int  = 0
    pc4:         int  = 0
    instruction: int  = 0

    @classmethod
    def bubble(cls) -> 'FDRecord':
        return cls()


@dataclass(frozen=True)
class DXRecord:
    valid:       bool           = False
    pc:          int            = 0
    pc4:         int            = 0
    instruction: int            = 0
    gpr_rs1:     int            = 0
    gpr_rs2:     int            = 0
    gpr_rd:      int            = 0
    src_data1:   int            = 0
    src_data2:   int            = 0
    immediate:   int            = 0
    funct3:      int            = 0
    ctrl:        ControlSignals = field(default_factory=ControlSignals.bubble)

    @classmethod
    def bubble(cls) -> 'DXRecord':
        return cls()


@dataclass(frozen=True)
class XMRecord:
    valid:             bool           = False
    pc:                int            = 0
    pc4:               int            = 0
    instruction:       int            = 0
    gpr_rd:            int            = 0
    funct3:            int            = 0
    result:            int            = 0
    store_data:        int            = 0
    jmp_branch_target: int            = 0
    take_jmp_branch:   bool           = False
    ctrl:              ControlSignals = field(default_factory=ControlSignals.bubble)

    @classmethod
    def bubble(cls) -> 'XMRecord':
        return cls()


@dataclass(frozen=True)
class MWRecord:
    valid:       bool           = False
    pc:          int            = 0
    pc4:         int            = 0
    instruction: int            = 0
    gpr_rd:      int            = 0
    result:      int            = 0
    ld_result:   int            = 0
    ctrl:        ControlSignals = field(default_factory=ControlSignals.bubble)

    @classmethod
    def bubble(cls) -> 'MWRecord':
        return cls()

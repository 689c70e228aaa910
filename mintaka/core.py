from typing import Any
from typing import Tuple
from .alu import alu
from .adder import add
from .compare import compare
from .decoder import decode
from .decoder import decode_immediate
from .forwarding import forward
from .forwarding import load_use_hazard
from .isa import AluOp
from .isa import SrcA
from .isa import SrcB
from .isa import ResultSrc
from .isa import ForwardSel
from .isa import get_field
from .layout import FDRecord
from .layout import DXRecord
from .layout import XMRecord
from .layout import MWRecord
from .lsu import format_load
from .lsu import format_store
from .regfile import RegisterFile
from .stage import Stage
from .util import MASK_32
from .log import logger


_shift_ops = (AluOp.SLL, AluOp.SRL, AluOp.SRA)


class Mintaka:
    """
    Cycle-accurate model of a 5-stage RV32I core: F -> D -> X -> M -> W.

    Branches and jumps resolve in X; when taken, the two younger
    instructions (F->D and D->X) are killed on the same edge. No hazard
    stalls unless ``hazard_load_use_stall`` is set.

    Args:
    - imem: instruction memory. Must provide ``read_word(addr)``.
    - dmem: data memory. Must provide ``read_word(addr)`` and
      ``write_bytes(addr, value, byte_sel)``.
    """
    def __init__(self,
                 imem: Any,
                 dmem: Any,
                 # Core
                 core_reset_address: int = 0,
                 # Hazards
                 hazard_load_use_stall: bool = False,
                 # Data memory
                 dmem_clear_on_reset: bool = False,
                 # eat extra arguments. Do nothing with it
                 **kwargs
                 ) -> None:
        # ----------------------------------------------------------------------
        if len(kwargs) != 0:
            logger.warning('Got unused kwargs: %s', list(kwargs.keys()))

        if not callable(getattr(imem, 'read_word', None)):
            raise TypeError('Invalid instruction memory. Must provide "read_word"')
        for method in ('read_word', 'write_bytes') + (('clear',) if dmem_clear_on_reset else ()):
            if not callable(getattr(dmem, method, None)):
                raise TypeError(f'Invalid data memory. Must provide "{method}"')
        if not 0 <= core_reset_address <= MASK_32 or core_reset_address & 0b11:
            raise ValueError(f'Invalid reset address: 0x{core_reset_address:x}. Must be a word-aligned 32-bit value')

        self.imem                = imem
        self.dmem                = dmem
        self.reset_address       = core_reset_address
        self.load_use_stall      = hazard_load_use_stall
        self.dmem_clear_on_reset = dmem_clear_on_reset
        # ----------------------------------------------------------------------
        self.gprf = RegisterFile()
        self._f   = Stage('f', FDRecord)
        self._d   = Stage('d', DXRecord)
        self._x   = Stage('x', XMRecord)
        self._m   = Stage('m', MWRecord)

        self.reset()

    # --------------------------------------------------------------------------
    # introspection
    @property
    def pc(self) -> int:
        return self._pc

    @property
    def registers(self) -> Tuple[int, ...]:
        return self.gprf.dump()

    @property
    def fd(self) -> FDRecord:
        return self._f.endpoint

    @property
    def dx(self) -> DXRecord:
        return self._d.endpoint

    @property
    def xm(self) -> XMRecord:
        return self._x.endpoint

    @property
    def mw(self) -> MWRecord:
        return self._m.endpoint

    # --------------------------------------------------------------------------
    def reset(self) -> None:
        self._pc     = self.reset_address
        self.cycle   = 0
        self.instret = 0
        self.gprf.reset()
        for stage in (self._f, self._d, self._x, self._m):
            stage.reset()
        if self.dmem_clear_on_reset:
            self.dmem.clear()
        logger.info('Reset. PC = 0x%08x', self._pc)

    def run(self, cycles: int) -> int:
        for _ in range(cycles):
            self.step()
        return self.cycle

    def step(self) -> None:
        # every stage reads the pre-edge state of the pipeline registers
        fd = self._f.endpoint
        dx = self._d.endpoint
        xm = self._x.endpoint
        mw = self._m.endpoint
        # ----------------------------------------------------------------------
        # Write-back stage
        if mw.ctrl.result_src == ResultSrc.MEM:
            w_result = mw.ld_result
        elif mw.ctrl.result_src == ResultSrc.PC4:
            w_result = mw.pc4
        else:
            w_result = mw.result
        # ----------------------------------------------------------------------
        # Memory stage
        m_ld_result = 0
        m_store     = None
        if xm.ctrl.mem_read:
            data_r      = self.dmem.read_word(xm.result & ~0b11)
            m_ld_result = format_load(xm.result, data_r, xm.funct3)
        if xm.ctrl.mem_write:
            m_store = format_store(xm.result, xm.store_data, xm.funct3)
        # ----------------------------------------------------------------------
        # Execute stage
        fwd_rs1, fwd_rs2 = forward(dx.gpr_rs1, dx.gpr_rs2,
                                   xm.gpr_rd, xm.ctrl.reg_write,
                                   mw.gpr_rd, mw.ctrl.reg_write)
        rs1_data = self._select_source(fwd_rs1, dx.src_data1, xm.result, w_result)
        rs2_data = self._select_source(fwd_rs2, dx.src_data2, xm.result, w_result)

        if dx.ctrl.src_a == SrcA.PC:
            dat1 = dx.pc
        elif dx.ctrl.src_a == SrcA.ZERO:
            dat1 = 0
        else:
            dat1 = rs1_data

        if dx.ctrl.src_b == SrcB.IMM:
            dat2 = dx.immediate
        elif dx.ctrl.src_b == SrcB.FOUR:
            dat2 = 4
        else:
            dat2 = rs2_data

        # the ALU shifts its second operand
        if dx.ctrl.alu_op in _shift_ops:
            dat1, dat2 = dat2, dat1

        x_result = alu(dx.ctrl.alu_op, dat1, dat2).result
        cmp_ok   = compare(dx.funct3, rs1_data, rs2_data, enable=dx.ctrl.branch)

        if dx.ctrl.indirect:
            x_jmp_branch_target = add(rs1_data, dx.immediate) & ~1
        else:
            x_jmp_branch_target = add(dx.pc, dx.immediate)
        x_take_jmp_branch = (dx.ctrl.branch and cmp_ok) or dx.ctrl.jump
        # ----------------------------------------------------------------------
        # Decode stage
        instruction = fd.instruction
        ctrl        = decode(instruction)
        gpr_rs1     = get_field(instruction, 'rs1')
        gpr_rs2     = get_field(instruction, 'rs2')

        d_record = DXRecord(
            valid=fd.valid,
            pc=fd.pc,
            pc4=fd.pc4,
            instruction=instruction,
            gpr_rs1=gpr_rs1,
            gpr_rs2=gpr_rs2,
            gpr_rd=get_field(instruction, 'rd'),
            src_data1=self.gprf.read(gpr_rs1),
            src_data2=self.gprf.read(gpr_rs2),
            immediate=decode_immediate(instruction, ctrl.imm_format),
            funct3=get_field(instruction, 'funct3'),
            ctrl=ctrl
        )

        d_stall = self.load_use_stall and load_use_hazard(gpr_rs1, gpr_rs2, dx.gpr_rd, dx.ctrl.mem_read,
                                                          ctrl.rs1_use, ctrl.rs2_use)
        # ----------------------------------------------------------------------
        # Fetch stage
        f_record = FDRecord(
            valid=True,
            pc=self._pc,
            pc4=add(self._pc, 4),
            instruction=self.imem.read_word(self._pc) & MASK_32
        )

        if x_take_jmp_branch:
            next_pc = x_jmp_branch_target
            logger.debug('Cycle %d: jump/branch @ 0x%08x taken. Target = 0x%08x', self.cycle, dx.pc, next_pc)
        elif d_stall:
            next_pc = self._pc
            logger.debug('Cycle %d: load-use stall @ 0x%08x', self.cycle, fd.pc)
        else:
            next_pc = f_record.pc4
        # ----------------------------------------------------------------------
        # Pipeline registers
        self._f.clock(f_record, stall=d_stall, kill=x_take_jmp_branch)
        self._d.clock(d_record, kill=x_take_jmp_branch or d_stall)
        self._x.clock(XMRecord(
            valid=dx.valid,
            pc=dx.pc,
            pc4=dx.pc4,
            instruction=dx.instruction,
            gpr_rd=dx.gpr_rd,
            funct3=dx.funct3,
            result=x_result,
            store_data=rs2_data,
            jmp_branch_target=x_jmp_branch_target,
            take_jmp_branch=x_take_jmp_branch,
            ctrl=dx.ctrl
        ))
        self._m.clock(MWRecord(
            valid=xm.valid,
            pc=xm.pc,
            pc4=xm.pc4,
            instruction=xm.instruction,
            gpr_rd=xm.gpr_rd,
            result=xm.result,
            ld_result=m_ld_result,
            ctrl=xm.ctrl
        ))

        if m_store is not None:
            self.dmem.write_bytes(m_store.addr, m_store.data, m_store.byte_sel)
        if mw.ctrl.reg_write:
            self.gprf.write(mw.gpr_rd, w_result)
        self.gprf.clock()

        logger.debug('Cycle %d: PC = 0x%08x F/D = 0x%08x D/X = 0x%08x X/M = 0x%08x M/W = 0x%08x',
                     self.cycle, self._pc, fd.instruction, dx.instruction, xm.instruction, mw.instruction)

        self._pc      = next_pc
        self.cycle   += 1
        self.instret += int(mw.valid)

    @staticmethod
    def _select_source(sel: ForwardSel, reg_data: int, m_result: int, w_result: int) -> int:
        if sel == ForwardSel.MEM:
            return m_result
        elif sel == ForwardSel.WB:
            return w_result
        return reg_data

from typing import Tuple
from .isa import ForwardSel


def _select(rs: int, m_rd: int, m_we: bool, w_rd: int, w_we: bool) -> ForwardSel:
    if rs == 0:
        return ForwardSel.NONE
    if m_we and m_rd == rs:
        return ForwardSel.MEM  # most recent result
    if w_we and w_rd == rs:
        return ForwardSel.WB
    return ForwardSel.NONE


def forward(rs1: int, rs2: int,
            m_rd: int, m_we: bool,
            w_rd: int, w_we: bool) -> Tuple[ForwardSel, ForwardSel]:
    """
    Select the source of both operands in the execute stage.

    Forwards the ALU result sitting in X->M, not load data: a load followed
    by a dependent instruction gets a stale value unless the load-use stall
    is enabled in the core.
    """
    return (_select(rs1, m_rd, m_we, w_rd, w_we),
            _select(rs2, m_rd, m_we, w_rd, w_we))


def load_use_hazard(d_rs1: int, d_rs2: int, x_rd: int, x_load: bool,
                    d_rs1_use: bool = True, d_rs2_use: bool = True) -> bool:
    # decode reads the destination of a load that is still in execute.
    # rs fields of I/U/J words hold immediate bits: only count used sources
    if not x_load or x_rd == 0:
        return False
    return (d_rs1_use and x_rd == d_rs1) or (d_rs2_use and x_rd == d_rs2)

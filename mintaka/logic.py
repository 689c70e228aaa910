from .isa import AluOp


def logic(op: AluOp, dat1: int, dat2: int) -> int:
    if op == AluOp.XOR:
        return dat1 ^ dat2
    elif op == AluOp.OR:
        return dat1 | dat2
    elif op == AluOp.AND:
        return dat1 & dat2
    return 0

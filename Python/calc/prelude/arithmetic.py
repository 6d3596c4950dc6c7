import operator
from typing import Callable, Dict
from ..syntax.ast import BinOp, UnOp
from ..z3_ops import machine

BINARY_OPS: Dict[BinOp, Callable[[float, float], float]] = {
    BinOp.ADD: operator.add,
    BinOp.SUBTRACT: operator.sub,
    BinOp.MULTIPLY: operator.mul,
    BinOp.DIVIDE: machine.divide,
}

UNARY_OPS: Dict[UnOp, Callable[[float], float]] = {
    UnOp.NEGATE: operator.neg,
}

def apply_binary(op: BinOp, lhs: float, rhs: float) -> float:
    if op not in BINARY_OPS: raise RuntimeError(f"Unknown binary op: {op}")
    return BINARY_OPS[op](lhs, rhs)

def apply_unary(op: UnOp, operand: float) -> float:
    if op not in UNARY_OPS: raise RuntimeError(f"Unknown unary op: {op}")
    return UNARY_OPS[op](operand)

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

U64_MAX = (1 << 64) - 1

# ======================================
# Operators
# ======================================

class BinOp(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

class UnOp(Enum):
    NEGATE = "-"

# ======================================
# AST Nodes
# ======================================

class Expr: pass

@dataclass(frozen=True)
class BinaryOp(Expr):
    op: BinOp
    position: int
    lhs: "Node"
    rhs: "Node"
    def __repr__(self): return f"BinaryOp({self.op.value}@{self.position}, {self.lhs!r}, {self.rhs!r})"

@dataclass(frozen=True)
class UnaryOp(Expr):
    op: UnOp
    position: int
    operand: "Node"
    def __repr__(self): return f"UnaryOp({self.op.value}@{self.position}, {self.operand!r})"

@dataclass(frozen=True)
class Constant(Expr):
    position: int
    value: int
    def __post_init__(self):
        if not 0 <= self.value <= U64_MAX:
            raise ValueError(f"Constant out of unsigned 64-bit range: {self.value}")
    def __repr__(self): return f"Constant({self.value}@{self.position})"

Node = Union[BinaryOp, UnaryOp, Constant]

# ======================================
# Per-kind dispatch
# ======================================

def children(node: Node) -> List[Node]:
    if isinstance(node, BinaryOp): return [node.lhs, node.rhs]
    if isinstance(node, UnaryOp): return [node.operand]
    if isinstance(node, Constant): return []
    raise TypeError(f"Not an expression node: {node!r}")

def show_node(node: Node) -> str:
    """Display text of a single node: its operator symbol or its literal."""
    if isinstance(node, (BinaryOp, UnaryOp)): return node.op.value
    if isinstance(node, Constant): return str(node.value)
    raise TypeError(f"Not an expression node: {node!r}")

def show_expr(node: Node) -> str:
    """Fully parenthesized prefix rendering, handy in logs and test failures."""
    if isinstance(node, BinaryOp):
        return f"({node.op.value} {show_expr(node.lhs)} {show_expr(node.rhs)})"
    if isinstance(node, UnaryOp):
        return f"(neg {show_expr(node.operand)})"
    return show_node(node)

# Convenience constructors, mirroring the operator names

def add(position: int, lhs: Node, rhs: Node) -> BinaryOp:
    return BinaryOp(BinOp.ADD, position, lhs, rhs)

def subtract(position: int, lhs: Node, rhs: Node) -> BinaryOp:
    return BinaryOp(BinOp.SUBTRACT, position, lhs, rhs)

def multiply(position: int, lhs: Node, rhs: Node) -> BinaryOp:
    return BinaryOp(BinOp.MULTIPLY, position, lhs, rhs)

def divide(position: int, lhs: Node, rhs: Node) -> BinaryOp:
    return BinaryOp(BinOp.DIVIDE, position, lhs, rhs)

def negate(position: int, operand: Node) -> UnaryOp:
    return UnaryOp(UnOp.NEGATE, position, operand)

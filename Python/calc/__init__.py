from .lexing import Token, scan, show_tokens
from .syntax import BinaryOp, UnaryOp, Constant, Node, BinOp, UnOp
from .parser import parse, Partial
from .errors import ParseError, UnexpectedEof, UnexpectedToken, InvalidToken, InvalidGroup, FactorExpected, LiteralOverflow, NestingTooDeep
from .runtime import value
from .tree import TreeIterator, draw_tree
from .graph import dot
from .core import parse_text, evaluate, render_graph

__all__ = [
    "Token", "scan", "show_tokens",
    "BinaryOp", "UnaryOp", "Constant", "Node", "BinOp", "UnOp",
    "parse", "Partial",
    "ParseError", "UnexpectedEof", "UnexpectedToken", "InvalidToken",
    "InvalidGroup", "FactorExpected", "LiteralOverflow", "NestingTooDeep",
    "value", "TreeIterator", "draw_tree", "dot",
    "parse_text", "evaluate", "render_graph"
]

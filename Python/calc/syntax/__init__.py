from .ast import Expr, BinaryOp, UnaryOp, Constant, Node, BinOp, UnOp, children, show_node, show_expr

__all__ = ["Expr", "BinaryOp", "UnaryOp", "Constant", "Node", "BinOp", "UnOp", "children", "show_node", "show_expr"]

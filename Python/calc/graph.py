"""Graphviz DOT export of an expression tree."""

from .syntax.ast import Node, children, show_node
from .tree import TreeIterator

def dot(root: Node) -> str:
    pieces = [stmt(node) for node in TreeIterator(root)]
    return "strict graph {\n" + "\n".join(pieces) + "\n}"

def stmt(node: Node) -> str:
    """Node statement, followed by one edge statement naming every child."""
    buffer = f'  {node.position} [ label = "{show_node(node)}" ]'
    kids = children(node)
    if kids:
        ids = " ".join(str(child.position) for child in kids)
        buffer += f"\n  {node.position} -- {{ {ids} }}"
    return buffer

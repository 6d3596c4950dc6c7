from typing import Iterator, List, Tuple
from .syntax.ast import Node, children, show_node

class TreeIterator(Iterator[Node]):
    """
    Pre-order depth-first walk over an AST.

    Pending nodes live on an explicit stack, so deeply nested input never
    touches the interpreter's recursion limit. The walk is single-pass: once
    exhausted it stays exhausted.
    """

    def __init__(self, root: Node):
        self.stack: List[Node] = [root]

    def __iter__(self) -> "TreeIterator":
        return self

    def __next__(self) -> Node:
        if not self.stack:
            raise StopIteration
        node = self.stack.pop()
        # Reversed so the left child is popped first
        self.stack.extend(reversed(children(node)))
        return node

def draw_tree(root: Node) -> str:
    lines: List[str] = []
    # (node, prefix, is_last, is_root)
    stack: List[Tuple[Node, str, bool, bool]] = [(root, "", True, True)]

    while stack:
        node, prefix, is_last, is_root = stack.pop()

        if is_root:
            marker = ""
            child_indent = ""
        elif is_last:
            marker = "└── "
            child_indent = "    "
        else:
            marker = "├── "
            child_indent = "│   "

        lines.append(f"{prefix}{marker}{show_node(node)} @{node.position}")

        kids = children(node)
        for i in reversed(range(len(kids))):
            stack.append((kids[i], prefix + child_indent, i == len(kids) - 1, False))

    return "\n".join(lines) + "\n"

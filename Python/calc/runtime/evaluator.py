from typing import List, Tuple
from ..syntax import ast
from ..prelude import apply_binary, apply_unary

DEBUG_EVAL = False

def log(msg: str):
    if DEBUG_EVAL:
        print(f"[EVAL] {msg}")

def value(node: ast.Node) -> float:
    """
    Numeric value of `node`, left operand evaluated before the right one.

    Post-order over an explicit stack, so division (which may call into Z3)
    always runs at a shallow call depth however deep the tree is.
    """
    # (node, children already scheduled)
    pending: List[Tuple[ast.Node, bool]] = [(node, False)]
    results: List[float] = []

    while pending:
        current, expanded = pending.pop()
        if isinstance(current, ast.Constant):
            log(f"constant {current.value} @ {current.position}")
            results.append(float(current.value))
            continue
        if not expanded:
            kids = ast.children(current)
            pending.append((current, True))
            # Reversed so the left operand is finished first
            pending.extend((kid, False) for kid in reversed(kids))
            continue
        if isinstance(current, ast.UnaryOp):
            res = apply_unary(current.op, results.pop())
            log(f"{current.op.value} @ {current.position} -> {res}")
            results.append(res)
        else:
            rhs = results.pop()
            lhs = results.pop()
            res = apply_binary(current.op, lhs, rhs)
            log(f"{lhs} {current.op.value} {rhs} @ {current.position} -> {res}")
            results.append(res)

    return results.pop()

import sys
import math
import time
from typing import List, Optional

from . import lexing, graph
from .core import parse_text
from .errors import ParseError
from .runtime import evaluator as runtime_evaluator
from .syntax import ast
from .tree import TreeIterator, draw_tree

OPTIONS = {"dot", "debug"}

def format_value(v: float) -> str:
    if math.isnan(v): return "NaN"
    if math.isinf(v): return "inf" if v > 0 else "-inf"
    if v.is_integer(): return f"{v:.0f}"
    return repr(v)

def print_scanning_results(text: str):
    print("== Scanning ==")
    scan_start = time.time() * 1000
    tokens = list(lexing.scan(text))
    scan_end = time.time() * 1000
    print(f"  Tokens: {lexing.show_tokens(tokens)}")
    print(f"  Time: {int(scan_end - scan_start)}ms")
    print(f"  Found {len(tokens)} tokens")
    print()

def print_parsing_results(root: ast.Node, time_ms: int):
    print("== Parsing ==")
    for line in draw_tree(root).splitlines():
        print(f"  {line}")
    print(f"  Time: {time_ms}ms")
    print(f"  Found {sum(1 for _ in TreeIterator(root))} nodes")
    print()

def run(text: str, use_dot: bool, use_debug: bool) -> int:
    start = time.time() * 1000
    try:
        root = parse_text(text, debug=use_debug)
    except ParseError as e:
        print(f"Error: {e}")
        return 1
    parse_end = time.time() * 1000

    if use_debug:
        print()
        print_scanning_results(text)
        print_parsing_results(root, int(parse_end - start))

    if use_dot:
        print(graph.dot(root))
    else:
        if use_debug: print("== Evaluation ==")
        result = runtime_evaluator.value(root)
        if use_debug:
            print(f"  Time: {int(time.time() * 1000 - parse_end)}ms")
            print()
        print(format_value(result))

    if use_debug:
        print(f"Total time: {int(time.time() * 1000 - start)}ms")
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    options = set(args) & OPTIONS
    words = [a for a in args if a not in OPTIONS]
    if not words:
        print("Usage: python -m calc [dot] [debug] <expression...>")
        return 2

    use_dot = "dot" in options
    use_debug = "debug" in options
    text = " ".join(words)

    if use_debug:
        print("=== calc ===")
        print(f"Input: {text}")
        print(f"Output: {'graph' if use_dot else 'value'}")
        print()

    saved = runtime_evaluator.DEBUG_EVAL
    runtime_evaluator.DEBUG_EVAL = use_debug or saved
    try:
        return run(text, use_dot, use_debug)
    finally:
        runtime_evaluator.DEBUG_EVAL = saved

if __name__ == "__main__":
    sys.exit(main())

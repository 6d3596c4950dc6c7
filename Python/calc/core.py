from . import lexing, graph
from .errors import UnexpectedToken
from .parser import parse
from .runtime import evaluator
from .syntax import ast

def parse_text(text: str, debug: bool = False) -> ast.Node:
    """
    Scan and parse `text` as one complete expression.

    Raises `UnexpectedToken` when a well-formed expression is followed by
    further tokens, and any other `ParseError` the parser detects.
    """
    partial = parse(lexing.scan(text, debug), debug=debug)
    if not partial.exhausted:
        raise UnexpectedToken(partial.peek().position)
    return partial.node

def evaluate(text: str) -> float:
    return evaluator.value(parse_text(text))

def render_graph(text: str) -> str:
    return graph.dot(parse_text(text))

from typing import Iterable
from ..lexing import Token
from .engine import Parser, Partial

def parse(tokens: Iterable[Token], debug: bool = False) -> Partial:
    """Parse one expression from the front of `tokens`; leftovers stay in the Partial."""
    engine = Parser(list(tokens), debug=debug)
    return engine.run()

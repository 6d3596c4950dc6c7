from dataclasses import dataclass
from typing import List, Optional, Sequence
from ..lexing import Token, Digit, Plus, Minus, Star, Solidus, LeftParen, RightParen, Unrecognized, show_tokens
from ..syntax import ast
from ..errors import UnexpectedEof, InvalidToken, InvalidGroup, FactorExpected, LiteralOverflow, NestingTooDeep

@dataclass
class Partial:
    """A node built so far plus the index of the first token it did not consume."""
    node: ast.Node
    tokens: Sequence[Token]
    offset: int

    @property
    def remaining(self) -> Sequence[Token]:
        return self.tokens[self.offset:]

    @property
    def exhausted(self) -> bool:
        return self.offset >= len(self.tokens)

    def peek(self) -> Optional[Token]:
        return self.tokens[self.offset] if not self.exhausted else None

# ======================================
# Recursive Descent Engine
# ======================================

class Parser:
    """
    Recursive-descent parser over the grammar

        expression := term ( ('+' | '-') expression )?
        term       := factor ( ('*' | '/') term )?
        factor     := integer | '-' factor | '(' expression ')'

    The optional tails recurse into the same production instead of looping,
    so chains of equal-precedence operators group to the right:
    `8 - 3 - 2` is `8 - (3 - 2)`.
    """

    def __init__(self, tokens: Sequence[Token], debug: bool = False):
        self.tokens = tokens
        self.debug = debug

    def log(self, msg: str):
        if self.debug:
            print(f"[PARSE] {msg}")

    def peek(self, pos: int) -> Optional[Token]:
        return self.tokens[pos] if pos < len(self.tokens) else None

    def partial(self, node: ast.Node, offset: int) -> Partial:
        return Partial(node, self.tokens, offset)

    def run(self) -> Partial:
        if self.debug:
            self.log(f"tokens: {show_tokens(self.tokens)}")
        try:
            res = self.expression(0)
        except RecursionError as e:
            raise NestingTooDeep() from e
        if self.debug:
            self.log(f"parsed {ast.show_expr(res.node)}, {len(self.tokens) - res.offset} tokens left")
        return res

    def expression(self, pos: int) -> Partial:
        self.log(f"expression @ {pos}")
        term = self.term(pos)
        tok = self.peek(term.offset)
        if isinstance(tok, (Plus, Minus)):
            rest = self.expression(term.offset + 1)
            build = ast.add if isinstance(tok, Plus) else ast.subtract
            return self.partial(build(tok.position, term.node, rest.node), rest.offset)
        if isinstance(tok, Unrecognized):
            raise InvalidToken(tok.position)
        return term

    def term(self, pos: int) -> Partial:
        self.log(f"term @ {pos}")
        factor = self.factor(pos)
        tok = self.peek(factor.offset)
        if isinstance(tok, (Star, Solidus)):
            rest = self.term(factor.offset + 1)
            build = ast.multiply if isinstance(tok, Star) else ast.divide
            return self.partial(build(tok.position, factor.node, rest.node), rest.offset)
        if isinstance(tok, Unrecognized):
            raise InvalidToken(tok.position)
        return factor

    def integer(self, pos: int) -> Optional[Partial]:
        digits: List[Digit] = []
        while isinstance(self.peek(pos + len(digits)), Digit):
            digits.append(self.tokens[pos + len(digits)])
        if not digits:
            return None

        # Pure Python only: a C call this deep can mangle the RecursionError
        value = 0
        for d in digits:
            value = value * 10 + d.value
            if value > ast.U64_MAX:
                raise LiteralOverflow(digits[0].position)
        self.log(f"integer {value} @ {digits[0].position}")
        return self.partial(ast.Constant(digits[0].position, value), pos + len(digits))

    def factor(self, pos: int) -> Partial:
        integer = self.integer(pos)
        if integer is not None:
            return integer

        tok = self.peek(pos)
        if tok is None:
            raise UnexpectedEof()
        if isinstance(tok, Minus):
            self.log(f"negation @ {tok.position}")
            operand = self.factor(pos + 1)
            return self.partial(ast.negate(tok.position, operand.node), operand.offset)
        if isinstance(tok, LeftParen):
            self.log(f"group @ {tok.position}")
            inner = self.expression(pos + 1)
            close = self.peek(inner.offset)
            if close is None:
                raise UnexpectedEof()
            if not isinstance(close, RightParen):
                raise InvalidGroup(close.position)
            return self.partial(inner.node, inner.offset + 1)
        raise FactorExpected(tok.position)

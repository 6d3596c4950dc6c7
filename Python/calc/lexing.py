from typing import Dict, Iterable, Iterator, List, Type

# ======================================
# Token Definition
# ======================================

class Token:
    __slots__ = ("_s", "_position")

    def __init__(self, s: str, position: int):
        object.__setattr__(self, "_s", s)
        object.__setattr__(self, "_position", position)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def s(self) -> str:
        return self._s

    @property
    def position(self) -> int:
        return self._position

    @property
    def lexeme(self) -> str:
        return self._s

    @property
    def kind(self) -> str:
        return self.__class__.__name__

    def __repr__(self):
        return f"{self.__class__.__name__}({self.s!r}@{self.position})"

    def __eq__(self, other):
        return (isinstance(other, self.__class__)
                and self.s == other.s and self.position == other.position)

    def __hash__(self):
        return hash((self.__class__.__name__, self.s, self.position))

class Digit(Token):
    __slots__ = ()

    @property
    def value(self) -> int:
        return ord(self.s) - ord("0")

class Plus(Token): __slots__ = ()
class Minus(Token): __slots__ = ()
class Star(Token): __slots__ = ()
class Solidus(Token): __slots__ = ()
class LeftParen(Token): __slots__ = ()
class RightParen(Token): __slots__ = ()
class Unrecognized(Token): __slots__ = ()

# ======================================
# Scanner
# ======================================

SINGLE_CHAR_TOKENS: Dict[str, Type[Token]] = {
    "+": Plus,
    "-": Minus,
    "*": Star,
    "/": Solidus,
    "(": LeftParen,
    ")": RightParen,
}

WHITESPACE = {" ", "\t", "\n"}

DIGITS = "0123456789"

def scan(text: str, debug: bool = False) -> Iterator[Token]:
    """
    Lazily turn `text` into positioned tokens.

    Every digit is its own token; joining digit runs into numbers is left to
    the parser. Characters outside the grammar become `Unrecognized` tokens so
    that scanning itself never fails.
    """
    for pos, ch in enumerate(text):
        if ch in WHITESPACE:
            continue
        if ch in DIGITS:
            tok: Token = Digit(ch, pos)
        elif ch in SINGLE_CHAR_TOKENS:
            tok = SINGLE_CHAR_TOKENS[ch](ch, pos)
        else:
            tok = Unrecognized(ch, pos)
        if debug:
            print(f"[DEBUG] pos={pos}: char='{ch}' -> {tok.kind}".replace("\n", "\\n"))
        yield tok

# ======================================
# Unlexer
# ======================================

def unlex_token(tok: Token) -> str:
    return tok.lexeme

def show_tokens(tokens: Iterable[Token]) -> str:
    res: List[str] = []
    prev = None
    for t in tokens:
        # Keep digits of one literal together, space everything else apart
        if res and not (isinstance(t, Digit) and isinstance(prev, Digit)
                        and t.position == prev.position + 1):
            res.append(" ")
        res.append(unlex_token(t))
        prev = t
    return "".join(res)

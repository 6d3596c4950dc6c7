from typing import Optional

# ======================================
# Parse Errors
# ======================================

class ParseError(Exception):
    """Base of every error raised while turning text into an AST."""
    description = "Parse error"

    def __init__(self, position: Optional[int] = None):
        self.position = position
        super().__init__(str(self))

    def __str__(self):
        if self.position is None:
            return self.description
        return f"{self.description}: {self.position}"

    def __repr__(self):
        return f"{self.__class__.__name__}({self.position})"

    def __eq__(self, other):
        return type(self) is type(other) and self.position == other.position

    def __hash__(self):
        return hash((type(self).__name__, self.position))

class UnexpectedEof(ParseError):
    description = "Unexpected end of file"
    def __init__(self):
        super().__init__(None)

class UnexpectedToken(ParseError):
    description = "Unconsumed input"

class InvalidToken(ParseError):
    description = "Unrecognized token"

class InvalidGroup(ParseError):
    description = "Expected group close"

class FactorExpected(ParseError):
    description = "Expected integer, negation, or group"

class LiteralOverflow(ParseError):
    description = "Integer literal does not fit in 64 bits"

class NestingTooDeep(ParseError):
    description = "Expression nested too deeply"
    def __init__(self):
        super().__init__(None)

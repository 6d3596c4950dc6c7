from .engine import Parser, Partial
from .main import parse

__all__ = ["Parser", "Partial", "parse"]

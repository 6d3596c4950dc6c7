from .evaluator import value

__all__ = ["value"]

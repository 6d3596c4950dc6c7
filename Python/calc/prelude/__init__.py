from .arithmetic import BINARY_OPS, UNARY_OPS, apply_binary, apply_unary

__all__ = ["BINARY_OPS", "UNARY_OPS", "apply_binary", "apply_unary"]

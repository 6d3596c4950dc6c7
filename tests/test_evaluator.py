"""Tests for tree evaluation and the arithmetic tables behind it."""

import math

import pytest

from calc.prelude import apply_binary, apply_unary
from calc.runtime import evaluator
from calc.syntax import ast
from calc.syntax.ast import BinOp, Constant, UnOp


class TestValue:
    """Tests for evaluator.value() on hand-built trees."""

    def test_adds(self):
        assert evaluator.value(ast.add(0, Constant(1, 1), Constant(2, 2))) == 3.0

    def test_subtracts(self):
        assert evaluator.value(ast.subtract(0, Constant(1, 1), Constant(2, 2))) == -1.0

    def test_multiplies(self):
        assert evaluator.value(ast.multiply(0, Constant(1, 2), Constant(2, 3))) == 6.0

    def test_divides(self):
        assert evaluator.value(ast.divide(0, Constant(1, 6), Constant(2, 2))) == 3.0

    def test_negates(self):
        assert evaluator.value(ast.negate(0, Constant(1, 2))) == -2.0

    def test_returns_float(self):
        assert isinstance(evaluator.value(Constant(0, 3)), float)

    def test_large_constant_rounds_like_a_double(self):
        assert evaluator.value(Constant(0, 2**64 - 1)) == float(2**64 - 1)

    def test_positions_do_not_matter(self):
        a = ast.subtract(0, Constant(1, 9), Constant(2, 4))
        b = ast.subtract(40, Constant(17, 9), Constant(3, 4))
        assert evaluator.value(a) == evaluator.value(b) == 5.0

    def test_division_by_zero_is_infinite(self):
        assert evaluator.value(ast.divide(0, Constant(1, 1), Constant(2, 0))) == math.inf

    def test_zero_by_zero_is_nan(self):
        assert math.isnan(evaluator.value(ast.divide(0, Constant(1, 0), Constant(2, 0))))

    def test_rejects_non_nodes(self):
        with pytest.raises(TypeError):
            evaluator.value("1 + 2")

    def test_debug_log(self, capsys, monkeypatch):
        monkeypatch.setattr(evaluator, "DEBUG_EVAL", True)
        evaluator.value(ast.add(1, Constant(0, 1), Constant(2, 2)))
        out = capsys.readouterr().out
        assert "[EVAL] constant 1 @ 0" in out
        assert "[EVAL] 1.0 + 2.0 @ 1 -> 3.0" in out


class TestArithmetic:
    """Tests for the operator tables."""

    @pytest.mark.parametrize("op,expected", [
        (BinOp.ADD, 8.0),
        (BinOp.SUBTRACT, 4.0),
        (BinOp.MULTIPLY, 12.0),
        (BinOp.DIVIDE, 3.0),
    ])
    def test_binary(self, op, expected):
        assert apply_binary(op, 6.0, 2.0) == expected

    def test_unary(self):
        assert apply_unary(UnOp.NEGATE, 2.5) == -2.5

    def test_overflow_to_infinity(self):
        assert apply_binary(BinOp.MULTIPLY, 1e308, 10.0) == math.inf


class TestDeepTrees:
    """value() walks with an explicit stack."""

    def test_deep_negation(self):
        node = Constant(0, 1)
        for i in range(1, 20001):
            node = ast.negate(i, node)
        assert evaluator.value(node) == 1.0

    def test_deep_division_reaches_zero_divisor(self):
        # 1 / (1 / (... (1 / 0)))
        node = Constant(0, 0)
        for i in range(1, 5002):
            node = ast.divide(2 * i, Constant(2 * i + 1, 1), node)
        assert evaluator.value(node) == math.inf

    def test_left_operand_first(self, capsys, monkeypatch):
        monkeypatch.setattr(evaluator, "DEBUG_EVAL", True)
        evaluator.value(ast.subtract(1, ast.negate(0, Constant(5, 4)), Constant(2, 9)))
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "[EVAL] constant 4 @ 5",
            "[EVAL] - @ 0 -> -4.0",
            "[EVAL] constant 9 @ 2",
            "[EVAL] -4.0 - 9.0 @ 1 -> -13.0",
        ]

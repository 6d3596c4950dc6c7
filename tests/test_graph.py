"""Tests for the Graphviz DOT exporter."""

from calc.core import parse_text
from calc.graph import dot, stmt
from calc.syntax import ast
from calc.syntax.ast import Constant


class TestDot:
    """Tests for dot()."""

    def test_converts_to_dot_syntax(self):
        op = ast.add(0, Constant(1, 1), Constant(2, 2))
        assert dot(op) == (
            'strict graph {\n'
            '  0 [ label = "+" ]\n'
            '  0 -- { 1 2 }\n'
            '  1 [ label = "1" ]\n'
            '  2 [ label = "2" ]\n'
            '}'
        )

    def test_single_constant_has_no_edges(self):
        assert dot(Constant(0, 42)) == 'strict graph {\n  0 [ label = "42" ]\n}'

    def test_negation_and_nesting(self):
        root = parse_text("-(5 * 2) - 2")
        assert dot(root) == (
            'strict graph {\n'
            '  9 [ label = "-" ]\n'
            '  9 -- { 0 11 }\n'
            '  0 [ label = "-" ]\n'
            '  0 -- { 4 }\n'
            '  4 [ label = "*" ]\n'
            '  4 -- { 2 6 }\n'
            '  2 [ label = "5" ]\n'
            '  6 [ label = "2" ]\n'
            '  11 [ label = "2" ]\n'
            '}'
        )

    def test_division_label(self):
        assert '  1 [ label = "/" ]' in dot(parse_text("8/4"))

    def test_rendering_is_repeatable(self):
        root = parse_text("1 + (2 - 3) * 4 / 5 * 6")
        assert dot(root) == dot(root)


class TestStmt:
    """Tests for stmt()."""

    def test_leaf(self):
        assert stmt(Constant(3, 10)) == '  3 [ label = "10" ]'

    def test_unary(self):
        assert stmt(ast.negate(0, Constant(1, 2))) == '  0 [ label = "-" ]\n  0 -- { 1 }'

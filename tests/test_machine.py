"""Tests for the Z3-backed IEEE-754 division."""

import math

from calc.z3_ops.machine import divide


class TestDivide:
    """Tests for divide()."""

    def test_ordinary(self):
        assert divide(6.0, 4.0) == 1.5

    def test_positive_by_zero(self):
        assert divide(1.0, 0.0) == math.inf

    def test_negative_by_zero(self):
        assert divide(-1.0, 0.0) == -math.inf

    def test_positive_by_negative_zero(self):
        assert divide(1.0, -0.0) == -math.inf

    def test_zero_by_zero(self):
        assert math.isnan(divide(0.0, 0.0))

    def test_infinity_by_zero(self):
        assert divide(math.inf, 0.0) == math.inf

    def test_nan_by_zero(self):
        assert math.isnan(divide(math.nan, 0.0))

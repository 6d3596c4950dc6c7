import math
import z3

# ======================================
# IEEE-754 division
# ======================================

def divide(lhs: float, rhs: float) -> float:
    """Double-precision division with IEEE-754 results for a zero divisor."""
    if rhs != 0.0:
        return lhs / rhs
    # Python raises on x / 0.0, so the zero case goes through Z3's FP theory
    fps = z3.Float64()
    quotient = z3.fpDiv(z3.RNE(), z3.FPVal(lhs, fps), z3.FPVal(rhs, fps))
    return from_z3_fp(quotient)

def from_z3_fp(ref) -> float:
    simp = z3.simplify(ref)
    if z3.is_true(z3.simplify(z3.fpIsNaN(simp))):
        return math.nan
    if z3.is_true(z3.simplify(z3.fpIsInf(simp))):
        if z3.is_true(z3.simplify(z3.fpIsNegative(simp))):
            return -math.inf
        return math.inf
    raise RuntimeError(f"Z3 result not a special value: {simp}")

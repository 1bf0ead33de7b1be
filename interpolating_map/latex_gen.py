from __future__ import annotations

import sympy as sp

from .equation import FittedEquation


# ===========================================================================
# LaTeX generator
# ===========================================================================

class LaTeXGenerator:
    """Renders a fitted polynomial as `$$f(x) = ...$$`.

    Coefficients print as decimals rounded to *decimals* places, or as small
    fractions when *approx* is False.
    """

    def __init__(self, approx: bool = True, decimals: int = 3) -> None:
        self.approx = approx
        self.decimals = max(0, min(10, int(decimals)))

    def generate(self, equation: FittedEquation) -> str:
        try:
            return self._polynomial(equation)
        except (TypeError, ValueError, ArithmeticError):
            return self._fallback(equation)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _n(self, v: float) -> sp.Expr:
        """One coefficient as a rounded Float or a Rational (denominator <= 1000)."""
        if self.approx:
            return sp.Float(f"{v:.{self.decimals}f}")
        return sp.Rational(v).limit_denominator(1000)

    def _round_floats(self, expr: sp.Basic) -> sp.Basic:
        """Re-round Float leaves produced by symbolic arithmetic."""
        if isinstance(expr, sp.Float):
            return sp.Float(f"{float(expr):.{self.decimals}f}")
        if expr.args:
            return expr.func(*[self._round_floats(a) for a in expr.args])
        return expr

    def _wrap(self, expr: sp.Basic) -> str:
        if self.approx:
            return f"$$f(x) = {sp.latex(self._round_floats(expr))}$$"
        simplified = sp.nsimplify(expr, rational=False, tolerance=1e-6)
        return f"$$f(x) = {sp.latex(simplified)}$$"

    def _polynomial(self, equation: FittedEquation) -> str:
        x = sp.Symbol("x")
        expr: sp.Expr = sp.Integer(0)
        for power, c in enumerate(equation.coefficients):
            if abs(c) < 1e-14:
                continue
            expr += self._n(c) * x ** power
        return self._wrap(expr)

    @staticmethod
    def _fallback(equation: FittedEquation) -> str:
        return rf"$$f(x) \approx \text{{{equation.name}}}$$"

"""LaTeX rendering of fitted equations."""

from __future__ import annotations

import unittest

from interpolating_map import (
    EquationSettings,
    FittedEquation,
    LaTeXGenerator,
    LinearModel,
    QuadraticModel,
)


class LaTeXGeneratorTests(unittest.TestCase):
    def test_approx_mode_rounds_coefficients(self) -> None:
        equation = FittedEquation("Linear regression", (0.123456, 2.0))
        latex = LaTeXGenerator(approx=True, decimals=2).generate(equation)
        self.assertTrue(latex.startswith("$$f(x) = "))
        self.assertTrue(latex.endswith("$$"))
        self.assertIn("0.12", latex)
        self.assertNotIn("0.123", latex)

    def test_exact_mode_uses_fractions(self) -> None:
        equation = FittedEquation("Linear regression", (0.5, 0.5))
        latex = LaTeXGenerator(approx=False).generate(equation)
        self.assertIn(r"\frac{1}{2}", latex)

    def test_quadratic_term_rendered(self) -> None:
        equation = FittedEquation("Quadratic regression", (1.0, 2.0, 3.0))
        latex = LaTeXGenerator(approx=False).generate(equation)
        self.assertIn("x^{2}", latex)

    def test_decimals_are_clamped(self) -> None:
        self.assertEqual(LaTeXGenerator(decimals=42).decimals, 10)
        self.assertEqual(LaTeXGenerator(decimals=-3).decimals, 0)

    def test_model_settings_drive_rendering(self) -> None:
        model = QuadraticModel(EquationSettings(decimals=3, latex_approx=False))
        latex = model.equation_latex([(0.0, 1.0), (1.0, 4.0), (2.0, 9.0)])
        self.assertIn("x^{2}", latex)
        self.assertIn("2 x", latex)

    def test_linear_model_latex(self) -> None:
        latex = LinearModel().equation_latex([(1.0, 1.0), (3.0, 2.0)])
        self.assertTrue(latex.startswith("$$f(x) = "))
        self.assertIn("x", latex)


class EquationSettingsTests(unittest.TestCase):
    def test_rejects_out_of_range_decimals(self) -> None:
        with self.assertRaises(ValueError):
            EquationSettings(decimals=11)
        with self.assertRaises(ValueError):
            EquationSettings(decimals=-1)

    def test_rejects_non_integer_decimals(self) -> None:
        with self.assertRaises(ValueError):
            EquationSettings(decimals=2.5)  # type: ignore[arg-type]

    def test_fitted_equation_requires_coefficients(self) -> None:
        with self.assertRaises(ValueError):
            FittedEquation("empty", ())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

"""
Least-squares regression models — straight line and parabola.

Both models work from deviations about the sample means:

    SSxx   = Σ(x−x̄)²          SSxy   = Σ(x−x̄)(y−ȳ)
    SSxx²  = Σ(x−x̄)(x²−m₂)    SSx²x² = Σ(x²−m₂)²      SSx²y = Σ(x²−m₂)(y−ȳ)

where m₂ is the mean of x².  Every aggregate is recomputed from the points
handed to each call; models keep no state besides their display settings.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from .equation import FittedEquation, FloatArray, PointsLike, as_arrays
from .errors import DegenerateFitError, InsufficientDataError
from .latex_gen import LaTeXGenerator
from .settings import LINEAR_DECIMALS, QUADRATIC_DECIMALS, EquationSettings

logger = logging.getLogger(__name__)


# ===========================================================================
# Abstract base model
# ===========================================================================

class RegressionModel(ABC):
    """Turns a sample set into a prediction function, equation text and R².

    Implementations must be pure: the same multiset of points always yields
    the same coefficients and the points are never modified.
    """

    name: str = "Regression"
    MIN_SAMPLES: int = 2
    DEFAULT_DECIMALS: int = LINEAR_DECIMALS

    def __init__(self, settings: Optional[EquationSettings] = None) -> None:
        self._settings = settings or EquationSettings(decimals=self.DEFAULT_DECIMALS)

    @property
    def settings(self) -> EquationSettings:
        return self._settings

    def min_samples(self) -> int:
        return self.MIN_SAMPLES

    @abstractmethod
    def _solve(self, x: FloatArray, y: FloatArray) -> tuple[float, ...]:
        """Return ascending-power coefficients for sorted sample arrays."""
        raise NotImplementedError

    @abstractmethod
    def _format(self, coefficients: tuple[float, ...]) -> str:
        raise NotImplementedError

    def _require_samples(self, available: int) -> None:
        if available < self.MIN_SAMPLES:
            raise InsufficientDataError(self.MIN_SAMPLES, available)

    def coefficients(self, points: PointsLike) -> tuple[float, ...]:
        x, y = as_arrays(points)
        self._require_samples(len(x))
        return self._solve(x, y)

    def fit(self, points: PointsLike) -> FittedEquation:
        coefficients = self.coefficients(points)
        logger.debug("%s fit: coefficients=%s", self.name, coefficients)
        return FittedEquation(self.name, coefficients)

    def coefficient_of_determination(self, points: PointsLike) -> float:
        """R² = 1 − SSE/SST, with SSE taken from this model's own fit."""
        x, y = as_arrays(points)
        self._require_samples(len(x))
        equation = FittedEquation(self.name, self._solve(x, y))
        if float(np.ptp(y)) == 0.0:
            raise DegenerateFitError("all y values are identical; SST is zero")

        residuals = y - np.asarray(equation(x), dtype=np.float64)
        sse = float(np.sum(residuals ** 2))
        sst = float(np.sum((y - float(np.mean(y))) ** 2))
        if sst == 0.0:
            raise DegenerateFitError("SST is zero; R² is undefined")
        return 1.0 - sse / sst

    def equation_string(self, points: PointsLike) -> str:
        return self._format(self.coefficients(points))

    def equation_latex(self, points: PointsLike) -> str:
        generator = LaTeXGenerator(
            approx=self._settings.latex_approx, decimals=self._settings.decimals
        )
        return generator.generate(self.fit(points))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RegressionModel):
            return NotImplemented
        return type(self) is type(other) and self._settings == other._settings

    def __hash__(self) -> int:
        return hash((type(self), self._settings))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(settings={self._settings!r})"


# ===========================================================================
# Linear model  ŷ = a + b·x
# ===========================================================================

class LinearModel(RegressionModel):

    name = "Linear regression"
    MIN_SAMPLES = 2
    DEFAULT_DECIMALS = LINEAR_DECIMALS

    def _solve(self, x: FloatArray, y: FloatArray) -> tuple[float, ...]:
        if float(np.ptp(x)) == 0.0:
            raise DegenerateFitError("all x values are identical; SSxx is zero")

        x_mean = float(np.mean(x))
        y_mean = float(np.mean(y))
        dx = x - x_mean
        ss_xx = float(np.sum(dx * dx))
        if ss_xx == 0.0:
            raise DegenerateFitError("SSxx is zero; x values are too close together")
        ss_xy = float(np.sum(dx * (y - y_mean)))

        slope = ss_xy / ss_xx
        intercept = y_mean - slope * x_mean
        return intercept, slope

    def _format(self, coefficients: tuple[float, ...]) -> str:
        a, b = coefficients
        d = self._settings.decimals
        return f"f(x) = {a:.{d}f} + {b:.{d}f}x"


# ===========================================================================
# Quadratic model  ŷ = a + b·x + c·x²
# Solves the 2×2 normal equations in deviation form.
# ===========================================================================

class QuadraticModel(RegressionModel):

    name = "Quadratic regression"
    MIN_SAMPLES = 3
    DEFAULT_DECIMALS = QUADRATIC_DECIMALS

    def _solve(self, x: FloatArray, y: FloatArray) -> tuple[float, ...]:
        # x and x² are collinear whenever fewer than three distinct x exist.
        if np.unique(x).size < 3:
            raise DegenerateFitError(
                "need at least 3 distinct x values for a quadratic fit"
            )

        x2 = x * x
        x_mean = float(np.mean(x))
        x2_mean = float(np.mean(x2))
        y_mean = float(np.mean(y))

        dx = x - x_mean
        dx2 = x2 - x2_mean
        dy = y - y_mean

        ss_xx = float(np.sum(dx * dx))
        ss_xy = float(np.sum(dx * dy))
        ss_xx2 = float(np.sum(dx * dx2))
        ss_x2x2 = float(np.sum(dx2 * dx2))
        ss_x2y = float(np.sum(dx2 * dy))

        denominator = ss_xx * ss_x2x2 - ss_xx2 * ss_xx2
        if denominator == 0.0:
            raise DegenerateFitError("normal equations are singular")

        c = (ss_x2y * ss_xx - ss_xy * ss_xx2) / denominator
        b = (ss_xy * ss_x2x2 - ss_x2y * ss_xx2) / denominator
        a = y_mean - b * x_mean - c * x2_mean
        return a, b, c

    def _format(self, coefficients: tuple[float, ...]) -> str:
        a, b, c = coefficients
        d = self._settings.decimals
        return f"f(x) = {a:.{d}f} + {b:.{d}f}x + {c:.{d}f}x^2"

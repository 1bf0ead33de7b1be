"""Sorted sample map answering any-x queries through a swappable regression fit."""

from .equation import FittedEquation
from .errors import (
    CannotShrinkBelowMinimumError,
    DegenerateFitError,
    DuplicateKeyError,
    InsufficientDataError,
    InterpolationError,
)
from .interpolator import InterpolatingMap, InterpolatingMapBuilder
from .latex_gen import LaTeXGenerator
from .point_store import Point, PointStore
from .regression import LinearModel, QuadraticModel, RegressionModel
from .settings import EquationSettings

__all__ = [
    "CannotShrinkBelowMinimumError",
    "DegenerateFitError",
    "DuplicateKeyError",
    "EquationSettings",
    "FittedEquation",
    "InsufficientDataError",
    "InterpolatingMap",
    "InterpolatingMapBuilder",
    "InterpolationError",
    "LaTeXGenerator",
    "LinearModel",
    "Point",
    "PointStore",
    "QuadraticModel",
    "RegressionModel",
]

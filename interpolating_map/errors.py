"""Exception hierarchy raised by point stores, regression models and maps.

Every error derives from :class:`InterpolationError`, itself a ``ValueError``,
so callers can catch the whole family or treat them as bad input.
"""

from __future__ import annotations

from typing import Optional


class InterpolationError(ValueError):
    """Base class for all interpolating-map failures."""


class InsufficientDataError(InterpolationError):
    """Fewer samples than the regression model needs."""

    def __init__(self, required: int, available: int,
                 message: Optional[str] = None) -> None:
        super().__init__(
            message or f"need at least {required} data points, got {available}"
        )
        self.required = required
        self.available = available


class CannotShrinkBelowMinimumError(InsufficientDataError):
    """Removing a point would leave the model unable to refit."""

    def __init__(self, x: float, required: int) -> None:
        super().__init__(
            required,
            required,
            f"cannot remove x={x!r}: the model needs at least {required} data points",
        )
        self.x = x


class DegenerateFitError(InterpolationError):
    """The least-squares system is singular or R² is undefined."""


class DuplicateKeyError(InterpolationError):
    """Two supplied points share the same x."""

    def __init__(self, x: float) -> None:
        super().__init__(f"duplicate x value in supplied points: {x!r}")
        self.x = x

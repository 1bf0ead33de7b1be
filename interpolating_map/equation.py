from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Union

import numpy as np
from numpy.polynomial import Polynomial
from numpy.typing import NDArray

from .point_store import Point, PointStore

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

FloatArray = NDArray[np.floating[Any]]
PointsLike = Union[PointStore, Iterable[Point]]


def as_arrays(points: PointsLike) -> tuple[FloatArray, FloatArray]:
    """Return (x, y) float64 arrays ascending by x; *points* is not touched.

    Plain iterables are sorted first so aggregate sums run in the same order
    no matter how the caller listed the samples.
    """
    if isinstance(points, PointStore):
        return points.as_arrays()
    pairs = sorted((float(x), float(y)) for x, y in points)
    data = np.array(pairs, dtype=np.float64).reshape(-1, 2)
    return data[:, 0].copy(), data[:, 1].copy()


@dataclass(frozen=True, slots=True)
class FittedEquation:
    """A fitted polynomial in ascending-power coefficient order (a, b, c, ...)."""

    name: str
    coefficients: tuple[float, ...]
    polynomial: Polynomial = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.coefficients:
            raise ValueError("coefficients cannot be empty")
        object.__setattr__(
            self, "coefficients", tuple(float(c) for c in self.coefficients)
        )
        object.__setattr__(self, "polynomial", Polynomial(self.coefficients))

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def __call__(self, x: Any) -> Any:
        result = self.polynomial(x)
        if np.ndim(result) == 0:
            return float(result)
        return np.asarray(result, dtype=np.float64)

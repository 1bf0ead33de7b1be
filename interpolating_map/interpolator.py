"""
InterpolatingMap — a sorted sample set with a cached regression function.

Every mutation refits the bound model against a staged copy of the store and
only then swaps store and cached equation in together, so a failed call
leaves the map exactly as it was.

Concurrency
-----------
No internal locking.  Callers sharing one map across threads must serialise
every mutating call externally (one lock per instance), or treat maps as
immutable and hand each thread its own copy via ``fork_with``.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from .equation import FittedEquation
from .errors import (
    CannotShrinkBelowMinimumError,
    DuplicateKeyError,
    InsufficientDataError,
)
from .point_store import Point, PointStore
from .regression import LinearModel, RegressionModel

logger = logging.getLogger(__name__)


class InterpolatingMap:

    def __init__(self, model: RegressionModel, points: Iterable[Point] = ()) -> None:
        points = list(points)
        if len(points) < model.min_samples():
            raise InsufficientDataError(model.min_samples(), len(points))
        store = PointStore.from_unique(points)
        self._commit(model, store, model.fit(store))

    @classmethod
    def builder(cls) -> "InterpolatingMapBuilder":
        return InterpolatingMapBuilder()

    def _commit(self, model: RegressionModel, store: PointStore,
                equation: FittedEquation) -> None:
        self._model = model
        self._store = store
        self._equation = equation
        logger.debug("refit %s on %d points: %s",
                     model.name, store.size(), equation.coefficients)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def predict(self, x: Any) -> Any:
        return self._equation(x)

    def predict_with(self, x: Any, alternate_model: RegressionModel) -> Any:
        """One-shot prediction with another model; cached state is untouched."""
        return alternate_model.fit(self._store)(x)

    def exact_or_absent(self, x: float) -> Optional[float]:
        return self._store.exact_lookup(x)

    @property
    def regression_model(self) -> RegressionModel:
        return self._model

    def regression_equation(self) -> FittedEquation:
        return self._equation

    def equation_string(self) -> str:
        return self._model.equation_string(self._store)

    def equation_latex(self) -> str:
        return self._model.equation_latex(self._store)

    def coefficient_of_determination(self) -> float:
        return self._model.coefficient_of_determination(self._store)

    def dataset_size(self) -> int:
        return self._store.size()

    def minimum_dataset_size(self) -> int:
        return self._model.min_samples()

    def snapshot_points(self) -> list[Point]:
        return self._store.snapshot()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def put(self, *points: Point) -> None:
        """Insert or overwrite each point, then refit.

        Repeating an x within one call is rejected since the intended value
        would be ambiguous.
        """
        seen: set[float] = set()
        staged = self._store.copy()
        for x, y in points:
            key = float(x)
            if key in seen:
                raise DuplicateKeyError(key)
            seen.add(key)
            staged.insert_or_update(key, y)
        self._commit(self._model, staged, self._model.fit(staged))

    def remove(self, x: float) -> None:
        if x not in self._store:
            return
        if self._store.size() <= self._model.min_samples():
            raise CannotShrinkBelowMinimumError(x, self._model.min_samples())
        staged = self._store.copy()
        staged.delete(x)
        self._commit(self._model, staged, self._model.fit(staged))

    def fork_with(self, new_model: RegressionModel) -> "InterpolatingMap":
        return InterpolatingMap(new_model, self._store.snapshot())

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._store.size()

    def __contains__(self, x: object) -> bool:
        return x in self._store

    def __repr__(self) -> str:
        return (f"InterpolatingMap(model={self._model!r}, "
                f"points={self._store.snapshot()!r})")


class InterpolatingMapBuilder:
    """Collects a model and data points; validation happens in ``build``."""

    def __init__(self) -> None:
        self._model: Optional[RegressionModel] = None
        self._points: list[Point] = []

    def regression_model(self, model: RegressionModel) -> "InterpolatingMapBuilder":
        self._model = model
        return self

    def data_points(self, *points: Point) -> "InterpolatingMapBuilder":
        self._points.extend((float(x), float(y)) for x, y in points)
        return self

    def build(self) -> InterpolatingMap:
        model = self._model if self._model is not None else LinearModel()
        if len(self._points) < model.min_samples():
            raise InsufficientDataError(model.min_samples(), len(self._points))
        return InterpolatingMap(model, self._points)

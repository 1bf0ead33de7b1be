"""Sorted sample container keyed by x."""

from __future__ import annotations

import bisect
from typing import Iterable, Iterator, Optional

import numpy as np

from .errors import DuplicateKeyError

Point = tuple[float, float]


class PointStore:
    """Ordered mapping x -> y with unique keys, ascending by x.

    Keys are kept in a bisect-maintained list next to a plain dict, so exact
    lookups are O(1) and ordered iteration never has to re-sort.
    """

    __slots__ = ("_keys", "_values")

    def __init__(self, points: Iterable[Point] = ()) -> None:
        self._keys: list[float] = []
        self._values: dict[float, float] = {}
        for x, y in points:
            self.insert_or_update(x, y)

    @classmethod
    def from_unique(cls, points: Iterable[Point]) -> "PointStore":
        """Build a store, rejecting any x that appears twice."""
        store = cls()
        for x, y in points:
            if float(x) in store:
                raise DuplicateKeyError(float(x))
            store.insert_or_update(x, y)
        return store

    def insert_or_update(self, x: float, y: float) -> None:
        x, y = float(x), float(y)
        if x not in self._values:
            bisect.insort(self._keys, x)
        self._values[x] = y

    def delete(self, x: float) -> None:
        x = float(x)
        if x not in self._values:
            return
        del self._values[x]
        del self._keys[bisect.bisect_left(self._keys, x)]

    def exact_lookup(self, x: float) -> Optional[float]:
        return self._values.get(float(x))

    def size(self) -> int:
        return len(self._keys)

    def snapshot(self) -> list[Point]:
        return [(x, self._values[x]) for x in self._keys]

    def copy(self) -> "PointStore":
        clone = PointStore()
        clone._keys = list(self._keys)
        clone._values = dict(self._values)
        return clone

    def as_arrays(self) -> tuple[np.ndarray, np.ndarray]:
        """Return (x, y) as fresh float64 arrays, ascending by x."""
        x = np.array(self._keys, dtype=np.float64)
        y = np.array([self._values[k] for k in self._keys], dtype=np.float64)
        return x, y

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, x: object) -> bool:
        try:
            return float(x) in self._values  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False

    def __iter__(self) -> Iterator[Point]:
        return iter(self.snapshot())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointStore):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"PointStore({self.snapshot()!r})"

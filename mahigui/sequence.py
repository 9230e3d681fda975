"""Keyframe sequences interpolated with a tweening function."""

from __future__ import annotations

import bisect
from typing import Callable, Dict, Generic, List, Tuple, TypeVar

T = TypeVar("T")

Tween = Callable[[T, T, float], T]


def linear(a, b, t: float):
    """Linearly interpolate between ``a`` and ``b``."""
    return a + (b - a) * t


def _check_range(t: float) -> None:
    if not 0.0 <= t <= 1.0:
        raise ValueError(f"sequence time {t} is outside [0, 1]")


class Sequence(Generic[T]):
    """Keyframes on [0, 1], interpolated between neighbouring keys."""

    def __init__(self, tween: Tween = linear) -> None:
        self.tween = tween
        self._values: Dict[float, T] = {}
        self._stops: List[float] = []

    def __setitem__(self, t: float, value: T) -> None:
        _check_range(t)
        if t not in self._values:
            bisect.insort(self._stops, t)
        self._values[t] = value

    def __getitem__(self, t: float) -> T:
        _check_range(t)
        return self._values[t]

    def __call__(self, t: float) -> T:
        """Return the interpolated value at ``t``."""
        if 0.0 not in self._values or 1.0 not in self._values:
            raise ValueError("sequence needs keyframes at 0 and 1")
        _check_range(t)
        index = bisect.bisect_left(self._stops, t)
        stop_b = self._stops[index]
        if stop_b == t:
            return self._values[stop_b]
        stop_a = self._stops[index - 1]
        local = (t - stop_a) / (stop_b - stop_a)
        return self.tween(self._values[stop_a], self._values[stop_b], local)

    def __len__(self) -> int:
        return len(self._stops)

    def keys(self) -> Tuple[List[float], List[T]]:
        """Return the keyframe stops and their values in stop order."""
        return list(self._stops), [self._values[s] for s in self._stops]
"""Operations on arrays of numbers: storage by handle, intervals, slices, sorting."""

from __future__ import annotations

import itertools
import random
from collections.abc import Callable, Iterable, Sequence
from functools import reduce
from typing import Any, Optional

__all__ = [
    "array_set",
    "array_get",
    "array_apply",
    "array_interval",
    "array_slice",
    "array_sort",
    "array_grade",
    "array_random",
    "polynomial",
    "reverse",
]

_store: dict[int, list[float]] = {}
_next_handle = itertools.count(1)
_engine = random.Random()


def array_set(array: Iterable[float]) -> int:
    """Store a copy of the array and return a handle to it."""
    handle = next(_next_handle)
    _store[handle] = [float(v) for v in array]
    return handle


def array_get(handle: int) -> list[float]:
    """Return a copy of the array stored under handle."""
    try:
        return list(_store[handle])
    except KeyError:
        raise LookupError(f"no array stored under handle {handle}") from None


def array_apply(
    f: Callable[..., Any], x: Sequence[Any], y: Optional[Sequence[Any]] = None
) -> list[Any]:
    """Return [f(x_i)] when y is missing, otherwise the matrix [[f(x_i, y_j)]]."""
    if y is None:
        return [f(xi) for xi in x]
    return [[f(xi, yj) for yj in y] for xi in x]


def array_interval(start: float, stop: float, step: float) -> list[float]:
    """Return points from start to stop.

    A step of at most 1 is used as the increment; a larger step is the count
    of equally spaced points including both ends.
    """
    if not start < stop:
        raise ValueError("start must be less than stop")
    if not step > 0:
        raise ValueError("step must be positive")
    if step <= 1:
        count = int((stop - start) / step) + 1
        return [start + i * step for i in range(count)]
    dx = (stop - start) / (step - 1)
    return [start + i * dx for i in range(int(step))]


def array_slice(
    array: Sequence[float], start: int, stride: int, count: int
) -> list[float]:
    """Return array[start], array[start + stride], ... for count elements.

    A zero stride means 1; a zero count takes (len - start) // stride elements.
    """
    values = list(array)
    if not 0 <= start < len(values):
        raise ValueError(f"start {start} is outside an array of {len(values)}")
    if stride < 0 or count < 0:
        raise ValueError("stride and count must be non-negative")
    if stride == 0:
        stride = 1
    if count == 0:
        count = (len(values) - start) // stride
    last = start + (count - 1) * stride
    if count and last >= len(values):
        raise IndexError(f"slice reaches index {last} of an array of {len(values)}")
    return [values[start + j * stride] for j in range(count)]


def array_grade(array: Sequence[float], n: int) -> list[int]:
    """Return the indices that order the array.

    n == 0 grades ascending and n == -1 descending, over all elements. Other n
    grade only the first |n| positions, ascending for n > 0 and descending for
    n < 0; the remaining indices follow in their original order.
    """
    values = list(array)
    order = sorted(range(len(values)), key=values.__getitem__, reverse=n < 0)
    if n in (0, -1):
        return order
    k = abs(n)
    if k > len(values):
        raise ValueError(f"cannot grade {k} of {len(values)} elements")
    head = order[:k]
    chosen = set(head)
    return head + [i for i in range(len(values)) if i not in chosen]


def array_sort(array: Sequence[float], n: int) -> list[float]:
    """Return the array in ascending order.

    n == 0 or n == -1 sorts every element; any other n puts the |n| smallest
    elements first, in ascending order, followed by the rest in original order.
    """
    values = list(array)
    if n in (0, -1):
        return sorted(values)
    return [values[i] for i in array_grade(values, abs(n))]


def array_random(
    rows: int, columns: int, low: float = 0.0, high: float = 0.0
) -> list[list[float]]:
    """Return a rows x columns matrix of uniform numbers in [low, high).

    When low and high are both zero the range is [0, 1).
    """
    if rows < 0 or columns < 0:
        raise ValueError("rows and columns must be non-negative")
    if low == 0 and high == 0:
        high = 1.0
    width = high - low
    return [[low + width * _engine.random() for _ in range(columns)] for _ in range(rows)]


def polynomial(coefficients: Sequence[float], x: float) -> float:
    """Evaluate c[0] + c[1]*x + c[2]*x**2 + ... by Horner's method."""
    return reduce(lambda acc, c: c + x * acc, reversed(list(coefficients)), 0.0)


def reverse(array: Iterable[float]) -> list[float]:
    """Return the elements of the array in reverse order."""
    return list(reversed(list(array)))
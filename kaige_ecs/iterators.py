"""Iterator adaptors: a multi-way zip with size hints and a converting map."""

from __future__ import annotations

import operator
import sys
from functools import reduce
from typing import Any, Callable, Iterable, Iterator, Optional

SizeHint = tuple[int, Optional[int]]


def _min_hint(a: SizeHint, b: SizeHint) -> SizeHint:
    lower = min(a[0], b[0])
    if a[1] is not None and b[1] is not None:
        upper: Optional[int] = min(a[1], b[1])
    else:
        upper = a[1] if a[1] is not None else b[1]
    return lower, upper


def _size_hint(it: Any) -> SizeHint:
    hint = getattr(it, "size_hint", None)
    if callable(hint):
        return hint()
    try:
        n = len(it)
    except TypeError:
        n = operator.length_hint(it, -1)
        if n < 0:
            return (0, None)
    return (n, n)


class Zip:
    """Zips any number of iterables, stopping when the first one runs out.

    Iterators are advanced in order, so those before the exhausted one
    may have yielded one extra element.
    """

    def __init__(self, *iterables: Iterable[Any]) -> None:
        if not iterables:
            raise TypeError("Zip needs at least one iterable")
        self._iterators = tuple(iter(it) for it in iterables)

    def __iter__(self) -> Zip:
        return self

    def __next__(self) -> tuple:
        items = [next(it) for it in self._iterators]
        return tuple(items)

    def size_hint(self) -> SizeHint:
        """Return ``(lower, upper)`` bounds on the remaining length."""
        return reduce(
            lambda acc, it: _min_hint(_size_hint(it), acc),
            self._iterators,
            (sys.maxsize, None),
        )


def multizip(*args: Iterable[Any]) -> Zip:
    """Zip the given iterables into tuples."""
    return Zip(*args)


class MapInto:
    """Converts each item of an iterable with a target type or function."""

    def __init__(self, inner: Iterable[Any], target: Callable[[Any], Any]) -> None:
        self._inner: Iterator[Any] = iter(inner)
        self._target = target

    def __iter__(self) -> MapInto:
        return self

    def __next__(self) -> Any:
        return self._target(next(self._inner))

    def size_hint(self) -> SizeHint:
        return _size_hint(self._inner)
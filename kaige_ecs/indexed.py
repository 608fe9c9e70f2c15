"""Random-access iteration over one or more slices in lockstep."""

from __future__ import annotations

from typing import Any, Sequence


def _get(source: Any, i: int) -> Any:
    getter = getattr(source, "get_unchecked", None)
    if callable(getter):
        return getter(i)
    return source[i]


def _as_random_access(source: Any) -> Any:
    if callable(getattr(source, "split_at", None)):
        return source
    return _SliceView(source, 0, len(source))


class _SliceView:
    """A window onto a sequence that reads and writes through to it."""

    def __init__(self, base: Sequence[Any], start: int, stop: int) -> None:
        self._base = base
        self._start = start
        self._stop = stop

    def __len__(self) -> int:
        return self._stop - self._start

    def _offset(self, i: int) -> int:
        if not 0 <= i < len(self):
            raise IndexError(f"index {i} out of range for slice of length {len(self)}")
        return self._start + i

    def __getitem__(self, i: int) -> Any:
        return self._base[self._offset(i)]

    def __setitem__(self, i: int, value: Any) -> None:
        self._base[self._offset(i)] = value  # type: ignore[index]

    def split_at(self, index: int) -> tuple[_SliceView, _SliceView]:
        if not 0 <= index <= len(self):
            raise IndexError(f"split index {index} out of range for length {len(self)}")
        mid = self._start + index
        return _SliceView(self._base, self._start, mid), _SliceView(self._base, mid, self._stop)

    def __iter__(self):
        return (self._base[i] for i in range(self._start, self._stop))


class ZippedSlices:
    """Several random-access sources viewed as one source of tuples.

    Its length is that of the shortest source.
    """

    def __init__(self, *sources: Any) -> None:
        if not sources:
            raise TypeError("ZippedSlices needs at least one source")
        self._sources = tuple(_as_random_access(s) for s in sources)

    def __len__(self) -> int:
        return min(len(s) for s in self._sources)

    def __getitem__(self, index: int) -> tuple:
        return tuple(_get(s, index) for s in self._sources)

    def split_at(self, index: int) -> tuple[ZippedSlices, ZippedSlices]:
        """Split every source at ``index``."""
        pairs = [s.split_at(index) for s in self._sources]
        return (
            ZippedSlices(*(left for left, _ in pairs)),
            ZippedSlices(*(right for _, right in pairs)),
        )


class IndexedIter:
    """A double-ended, exact-size iterator over a random-access source."""

    def __init__(self, inner: Any) -> None:
        self._inner = _as_random_access(inner)
        self._len = len(self._inner)
        self._index = 0

    @classmethod
    def _from_parts(cls, inner: Any, length: int) -> IndexedIter:
        it = cls.__new__(cls)
        it._inner = inner
        it._len = length
        it._index = 0
        return it

    def __iter__(self) -> IndexedIter:
        return self

    def __next__(self) -> Any:
        if self._index < self._len:
            i = self._index
            self._index += 1
            return _get(self._inner, i)
        raise StopIteration

    def __len__(self) -> int:
        return self._len - self._index

    def size_hint(self) -> tuple[int, int]:
        n = len(self)
        return n, n

    def next_back(self) -> Any:
        """Take the next item from the back, or ``None`` when exhausted."""
        if self._index < self._len:
            self._len -= 1
            return _get(self._inner, self._len)
        return None

    def nth(self, n: int) -> Any:
        """Skip ``n`` items and return the next one, or ``None``."""
        if n < len(self):
            self._index += n + 1
            return _get(self._inner, self._index - 1)
        self._index = self._len
        return None

    def nth_back(self, n: int) -> Any:
        """Skip ``n`` items from the back and return the next one, or ``None``."""
        if n < len(self):
            self._len -= n + 1
            return _get(self._inner, self._len)
        return None

    def last(self) -> Any:
        """Return the last remaining item, or ``None``, consuming the iterator."""
        result = _get(self._inner, self._len - 1) if len(self) > 0 else None
        self._index = self._len
        return result

    def count(self) -> int:
        """Return the number of remaining items, consuming the iterator."""
        n = len(self)
        self._index = self._len
        return n

    def get_unchecked(self, i: int) -> Any:
        """Return the item at position ``i`` of the underlying source."""
        return _get(self._inner, i)

    def split_at(self, index: int) -> tuple[IndexedIter, IndexedIter]:
        """Split the remaining items into the first ``index`` and the rest."""
        remaining_len = len(self)
        if not 0 <= index <= remaining_len:
            raise IndexError(f"split index {index} out of range for length {remaining_len}")
        _, remaining = self._inner.split_at(self._index)
        left, right = remaining.split_at(index)
        return (
            IndexedIter._from_parts(left, index),
            IndexedIter._from_parts(right, remaining_len - index),
        )
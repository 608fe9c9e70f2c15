"""Read and write access declarations over a set of resources.

Items are kept in one list split into three segments: read-only items,
then items that are both read and written, then write-only items.
"""

from __future__ import annotations

from typing import Generic, Hashable, TypeVar

T = TypeVar("T")


class Permissions(Generic[T]):
    """Describes read and write access to resources."""

    def __init__(self) -> None:
        self._items: list[T] = []
        self._shared = 0  # index of the first shared item
        self._write = 0  # index of the first write-only item

    def _find(self, item: T) -> int | None:
        for index, existing in enumerate(self._items):
            if existing == item:
                return index
        return None

    def _swap(self, a: int, b: int) -> None:
        items = self._items
        items[a], items[b] = items[b], items[a]

    def _swap_remove(self, index: int) -> None:
        items = self._items
        last = items.pop()
        if index < len(items):
            items[index] = last

    def push(self, item: T) -> None:
        """Add a resource as both readable and writable."""
        index = self._find(item)
        if index is not None:
            if index < self._shared:
                self._swap(index, self._shared - 1)
                self._shared -= 1
            elif index > self._write:
                self._swap(index, self._write)
                self._write += 1
        else:
            self._items.append(item)
            self._swap(len(self._items) - 1, self._write)
            self._write += 1

    def push_read(self, item: T) -> None:
        """Add a resource as readable."""
        index = self._find(item)
        if index is not None:
            if index >= self._write:
                self._swap(index, self._write)
                self._write += 1
        else:
            self._items.append(item)
            self._swap(len(self._items) - 1, self._write)
            self._swap(self._write, self._shared)
            self._write += 1
            self._shared += 1

    def push_write(self, item: T) -> None:
        """Add a resource as writable."""
        index = self._find(item)
        if index is not None:
            if index < self._shared:
                self._swap(index, self._shared - 1)
                self._shared -= 1
        else:
            self._items.append(item)

    def remove(self, item: T) -> None:
        """Remove a resource entirely."""
        index = self._find(item)
        if index is None:
            return
        if index < self._shared:
            self._swap(index, self._shared - 1)
            self._shared -= 1
            index = self._shared
        if index < self._write:
            self._swap(index, self._write - 1)
            self._write -= 1
            index = self._write
        self._swap_remove(index)

    def remove_read(self, item: T) -> None:
        """Remove read access to a resource."""
        index = self._find(item)
        if index is None:
            return
        if index < self._shared:
            self._swap(index, self._shared - 1)
            self._shared -= 1
            self._swap(self._shared, self._write - 1)
            self._write -= 1
            self._swap_remove(self._write)
        elif index < self._write:
            self._swap(index, self._write - 1)
            self._write -= 1

    def remove_write(self, item: T) -> None:
        """Remove write access to a resource."""
        index = self._find(item)
        if index is None:
            return
        if index >= self._write:
            self._swap_remove(index)
        elif index >= self._shared:
            self._swap(index, self._shared)
            self._shared += 1

    def add(self, other: Permissions[T]) -> None:
        """Add every permission held by ``other`` to this set."""
        for item in other.reads_only():
            self.push_read(item)
        for item in other.readwrite():
            self.push(item)
        for item in other.writes_only():
            self.push_write(item)

    def subtract(self, other: Permissions[T]) -> None:
        """Remove every permission held by ``other`` from this set."""
        for item in other.readwrite():
            self.remove(item)
        for item in other.writes_only():
            self.remove_write(item)

    def reads(self) -> list[T]:
        """Resources afforded read access."""
        return self._items[: self._write]

    def writes(self) -> list[T]:
        """Resources afforded write access."""
        return self._items[self._shared :]

    def reads_only(self) -> list[T]:
        """Resources afforded read but not write access."""
        return self._items[: self._shared]

    def writes_only(self) -> list[T]:
        """Resources afforded write but not read access."""
        return self._items[self._write :]

    def readwrite(self) -> list[T]:
        """Resources afforded both read and write access."""
        return self._items[self._shared : self._write]

    def is_superset(self, other: Permissions[T]) -> bool:
        """Return whether every permission in ``other`` is held here."""
        for item in other.reads_only():
            index = self._find(item)
            if index is None or index >= self._write:
                return False
        for item in other.readwrite():
            index = self._find(item)
            if index is None or index < self._shared or index >= self._write:
                return False
        for item in other.writes_only():
            index = self._find(item)
            if index is None or index < self._shared:
                return False
        return True

    def is_disjoint(self, other: Permissions[T]) -> bool:
        """Return whether no permission in ``other`` is held here."""
        for item in other.reads_only():
            index = self._find(item)
            if index is not None and index < self._write:
                return False
        for item in other.readwrite():
            if self._find(item) is not None:
                return False
        for item in other.writes_only():
            index = self._find(item)
            if index is not None and index >= self._shared:
                return False
        return True

    def __repr__(self) -> str:
        reads = ", ".join(repr(x) for x in self.reads())
        writes = ", ".join(repr(x) for x in self.writes())
        return f"Permissions {{ reads: [{reads}], writes: [{writes}] }}"

    def __str__(self) -> str:
        reads = ", ".join(str(x) for x in self.reads())
        writes = ", ".join(str(x) for x in self.writes())
        return f"reads: [{reads}], writes: [{writes}]"
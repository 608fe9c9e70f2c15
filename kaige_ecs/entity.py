"""Entity identifiers, their allocation and their storage locations."""

from __future__ import annotations

import sys
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping

BLOCK_SIZE = 16
_U64_MAX = (1 << 64) - 1

_local = threading.local()


class _BlockCounter:
    """Hands out blocks of ids; the first block is skipped so no id is zero."""

    def __init__(self) -> None:
        self._next = BLOCK_SIZE
        self._lock = threading.Lock()

    def claim(self) -> int:
        with self._lock:
            start = self._next
            self._next += BLOCK_SIZE
            return start


_NEXT_ENTITY = _BlockCounter()


@dataclass(frozen=True)
class Entity:
    """An opaque, non-zero identifier for an entity."""

    id: int

    def __post_init__(self) -> None:
        if not 0 < self.id <= _U64_MAX:
            raise ValueError(f"entity id must be a non-zero 64-bit value, got {self.id}")

    def clone(self) -> Entity:
        """Return this entity, or its replacement under the active clone mappings."""
        mapping = getattr(_local, "mappings", None)
        if not mapping:
            return self
        return mapping.get(self, self)


@contextmanager
def clone_mappings(mapping: Mapping[Entity, Entity]) -> Iterator[dict]:
    """Make :meth:`Entity.clone` remap entities on this thread for the block."""
    previous = getattr(_local, "mappings", None)
    _local.mappings = dict(mapping)
    try:
        yield _local.mappings
    finally:
        _local.mappings = previous


class Allocate:
    """An endless iterator of new, unique entity ids."""

    def __init__(self) -> None:
        self._next = 0

    def __iter__(self) -> Allocate:
        return self

    def __next__(self) -> Entity:
        if self._next % BLOCK_SIZE == 0:
            self._next = _NEXT_ENTITY.claim()
        entity = Entity(self._next)
        self._next += 1
        return entity

    def size_hint(self) -> tuple[int, None]:
        return (sys.maxsize, None)


@dataclass(frozen=True)
class EntityLocation:
    """Where an entity's data is stored: an archetype and an index within it."""

    archetype: int
    component: int


class LocationMap:
    """A map from entities to their storage locations, kept in id blocks."""

    def __init__(self) -> None:
        self._len = 0
        self._blocks: dict[int, list[EntityLocation | None]] = {}

    def __len__(self) -> int:
        return self._len

    def is_empty(self) -> bool:
        return self._len == 0

    def contains(self, entity: Entity) -> bool:
        return self.get(entity) is not None

    def __contains__(self, entity: Entity) -> bool:
        return self.contains(entity)

    def insert(self, ids: Iterable[Entity], arch: int, base: int) -> list[EntityLocation]:
        """Place adjacent entities at ``base``, ``base + 1``, ... in ``arch``.

        Returns the locations that were replaced.
        """
        removed: list[EntityLocation] = []
        count = 0
        for offset, entity in enumerate(ids):
            block, idx = divmod(entity.id, BLOCK_SIZE)
            slots = self._blocks.get(block)
            if slots is None:
                slots = self._blocks[block] = [None] * BLOCK_SIZE
            previous = slots[idx]
            slots[idx] = EntityLocation(arch, base + offset)
            if previous is not None:
                removed.append(previous)
            count += 1
        self._len += count - len(removed)
        return removed

    def set(self, entity: Entity, location: EntityLocation) -> None:
        """Insert or update the location of one entity."""
        self.insert([entity], location.archetype, location.component)

    def get(self, entity: Entity) -> EntityLocation | None:
        block, idx = divmod(entity.id, BLOCK_SIZE)
        slots = self._blocks.get(block)
        return None if slots is None else slots[idx]

    def remove(self, entity: Entity) -> EntityLocation | None:
        """Remove an entity, returning its former location if it had one."""
        block, idx = divmod(entity.id, BLOCK_SIZE)
        slots = self._blocks.get(block)
        if slots is None:
            return None
        original = slots[idx]
        if original is not None:
            slots[idx] = None
            self._len -= 1
        return original

    def __repr__(self) -> str:
        entries = {
            Entity(block * BLOCK_SIZE + idx): loc
            for block, slots in self._blocks.items()
            for idx, loc in enumerate(slots)
            if loc is not None
        }
        return f"LocationMap({entries!r})"
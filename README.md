# kaige_ecs

Core pieces of an entity component system, in plain Python with no
dependencies outside the standard library.

## What is inside

- `kaige_ecs.entity`: opaque, non-zero `Entity` ids handed out in blocks of
  16 by the endless `Allocate` iterator; `Entity.clone()` and the
  `clone_mappings(mapping)` context manager for remapping ids on the current
  thread; `EntityLocation` (archetype index plus component index); and
  `LocationMap`, which maps entities to their storage location.
- `kaige_ecs.permissions`: `Permissions`, a set that records read-only,
  read-write and write-only access, can be combined with `add` and
  `subtract`, and answers `is_superset` and `is_disjoint`.
- `kaige_ecs.event`: the events `ArchetypeCreated`, `EntityInserted` and
  `EntityRemoved`; `LayoutFilter` and `EventSender`; and `Subscribers`,
  which delivers events to each `Subscriber` and drops those whose sender
  reports it is gone.
- `kaige_ecs.cons`: cons lists built from nested pairs, with `cons`,
  `prepend`, `append` and `flatten`.
- `kaige_ecs.iterators`: `Zip` / `multizip`, a multi-way zip with
  `size_hint()`, and `MapInto`, which converts each item with a callable.
- `kaige_ecs.indexed`: `ZippedSlices`, several sequences viewed as one
  sequence of tuples (as long as the shortest), and `IndexedIter`, a
  double-ended, exact-size iterator with `next_back`, `nth`, `nth_back`,
  `last`, `count` and `split_at`.

## Install

```
pip install .
pip install ".[test]"   # with the test tools
```

## Examples

```python
from kaige_ecs.entity import Allocate, LocationMap

alloc = Allocate()
a, b = next(alloc), next(alloc)

locations = LocationMap()
locations.insert([a, b], 0, 0)
assert len(locations) == 2
assert locations.get(b).component == 1
locations.remove(a)
assert not locations.contains(a)
```

```python
from kaige_ecs.permissions import Permissions

perms = Permissions()
perms.push_read(1)
perms.push_write(1)
assert perms.readwrite() == [1]
```

```python
from kaige_ecs.event import EntityInserted, EventSender, LayoutFilter, Subscriber, Subscribers
from kaige_ecs.entity import Entity

received = []
subs = Subscribers()
subs.push(Subscriber(LayoutFilter(lambda layout: "Pos" in layout), EventSender(received.append)))

assert len(subs.matches_layout(("Pos", "Rot"))) == 1
subs.send(EntityInserted(Entity(16), 0))
assert received == [EntityInserted(Entity(16), 0)]
```

A sender's callback that returns `False` marks the receiver as gone; it is
removed from `Subscribers` on that send.

```python
from kaige_ecs.cons import cons, append, flatten

lst = append(cons(1, 2, 3), 4)
assert flatten(lst) == (1, 2, 3, 4)
```

```python
from kaige_ecs.indexed import IndexedIter, ZippedSlices
from kaige_ecs.iterators import MapInto, multizip

it = IndexedIter(ZippedSlices([1, 2, 3], [4, 5, 6, 7]))
assert len(it) == 3
assert next(it) == (1, 4)
assert it.next_back() == (3, 6)

assert list(multizip([1, 2], "ab")) == [(1, "a"), (2, "b")]
assert list(MapInto(["1", "2"], int)) == [1, 2]
```

## What this package does not do

It provides the building blocks only. There is no world that stores
components, no archetype storage, no queries or filters over entities, no
resources, no command buffers and no scheduler for running systems. There is
no command-line tool.

## Tests

```
pytest
```
"""Entity events and the subscribers that receive them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence, Union

from .entity import Entity


@dataclass(frozen=True)
class ArchetypeCreated:
    """A new archetype has been created."""

    archetype: int


@dataclass(frozen=True)
class EntityInserted:
    """An entity has been inserted into an archetype."""

    entity: Entity
    archetype: int


@dataclass(frozen=True)
class EntityRemoved:
    """An entity has been removed from an archetype."""

    entity: Entity
    archetype: int


Event = Union[ArchetypeCreated, EntityInserted, EntityRemoved]


class LayoutFilter:
    """Decides whether an archetype layout is of interest.

    Without a predicate every layout matches.
    """

    def __init__(self, predicate: Callable[[tuple], bool] | None = None) -> None:
        self._predicate = predicate

    def matches_layout(self, components: Sequence[Any]) -> bool:
        if self._predicate is None:
            return True
        return bool(self._predicate(tuple(components)))


class EventSender:
    """Delivers events to a callback.

    The callback returning ``False`` means the receiver is gone.
    """

    def __init__(self, callback: Callable[[Event], Any]) -> None:
        self._callback = callback

    def send(self, event: Event) -> bool:
        """Send an event; return whether the receiver is still alive."""
        return self._callback(event) is not False


class Subscriber:
    """A layout filter paired with the sender that receives matching events."""

    def __init__(self, filter: Any, sender: Any) -> None:
        self.filter = filter
        self.sender = sender

    def is_interested(self, components: Sequence[Any]) -> bool:
        return bool(self.filter.matches_layout(components))

    def send(self, event: Event) -> bool:
        return bool(self.sender.send(event))


class Subscribers:
    """A collection of subscribers; dead ones are dropped on send."""

    def __init__(self, subscribers: Iterable[Subscriber] = ()) -> None:
        self._subscribers = list(subscribers)

    def push(self, subscriber: Subscriber) -> None:
        self._subscribers.append(subscriber)

    def send(self, event: Event) -> None:
        """Send to every subscriber, removing those whose sender has closed."""
        subs = self._subscribers
        for i in reversed(range(len(subs))):
            if not subs[i].send(event):
                last = subs.pop()
                if i < len(subs):
                    subs[i] = last

    def matches_layout(self, components: Sequence[Any]) -> Subscribers:
        """Return the subscribers interested in the given layout."""
        return Subscribers(s for s in self._subscribers if s.is_interested(components))

    def __len__(self) -> int:
        return len(self._subscribers)

    def __iter__(self):
        return iter(self._subscribers)

    def __repr__(self) -> str:
        return f"Subscribers(len={len(self._subscribers)})"
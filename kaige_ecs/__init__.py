"""Entity component system building blocks: entities, locations, permissions, events, cons lists and iterators."""

__version__ = "0.1.0"

__all__ = [
    "cons",
    "entity",
    "event",
    "indexed",
    "iterators",
    "permissions",
]
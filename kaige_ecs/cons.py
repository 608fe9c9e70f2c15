"""Heterogeneous cons lists built from nested pairs.

A cons list is either the empty tuple ``()`` or a pair ``(head, tail)``
whose tail is itself a cons list.
"""

from __future__ import annotations

from typing import Any

MAX_FLATTEN = 26

ConsList = tuple


def _check(lst: Any) -> None:
    if not isinstance(lst, tuple) or (lst != () and len(lst) != 2):
        raise TypeError(f"not a cons list: {lst!r}")


def _items(lst: ConsList) -> list:
    items = []
    node = lst
    while True:
        _check(node)
        if node == ():
            return items
        head, node = node
        items.append(head)


def cons(*args: Any) -> ConsList:
    """Build a cons list holding ``args`` in order."""
    result: ConsList = ()
    for item in reversed(args):
        result = (item, result)
    return result


def prepend(lst: ConsList, item: Any) -> ConsList:
    """Return a new cons list with ``item`` at the front."""
    _check(lst)
    return (item, lst)


def append(lst: ConsList, item: Any) -> ConsList:
    """Return a new cons list with ``item`` at the end."""
    return cons(*_items(lst), item)


def flatten(lst: ConsList) -> Any:
    """Turn a cons list into a flat value.

    The empty list flattens to ``()``, a single element to the element
    itself, and longer lists to a tuple of their elements.
    """
    items = _items(lst)
    if len(items) > MAX_FLATTEN:
        raise TypeError(f"cannot flatten a cons list of more than {MAX_FLATTEN} elements")
    if len(items) == 1:
        return items[0]
    return tuple(items)
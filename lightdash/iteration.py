"""
Iteration helpers.

Callbacks receive positional arguments mirroring the container they walk:
``fn(value, index, parent)`` for lists and ``fn(value, key, index, parent)``
for key/value entries.
"""

from typing import Any, Callable

from .traversal import descend_arrays, descend_containers, iter_leaves
from .values import own_entries


def for_each(arr: Any, fn: Callable[[Any, int, Any], Any]) -> None:
    """
    Calls ``fn(value, index, arr)`` for every element of *arr*.

    Example::

        a = [1, 2, 3]
        for_each(a, lambda val, index, arr: arr.__setitem__(index, val * index))
        # a == [0, 2, 6]
    """
    for index, value in enumerate(arr):
        fn(value, index, arr)


def for_each_deep(arr: Any, fn: Callable[[Any, int, Any], Any]) -> None:
    """
    Calls ``fn(value, index, parent)`` for every non-list value in a nested list.

    Nested lists are walked into instead of being handed to ``fn``; visitation
    is depth-first, left-to-right. ``parent`` is the innermost list holding the
    value, so ``fn`` can overwrite it in place::

        a = [2, 4, [1, 1, [16], 4]]
        for_each_deep(a, lambda val, index, parent: parent.__setitem__(index, index * val))
        # a == [0, 4, [0, 1, [0], 12]]
    """
    for value, index, _, parent in iter_leaves(arr, descend_arrays):
        fn(value, index, parent)


def for_each_entry(obj: Any, fn: Callable[[Any, Any, int, Any], Any]) -> None:
    """Calls ``fn(value, key, index, obj)`` for every entry of *obj*."""
    for index, (key, value) in enumerate(own_entries(obj)):
        fn(value, key, index, obj)


def for_each_entry_deep(obj: Any, fn: Callable[[Any, Any, int, Any], Any]) -> None:
    """
    Calls ``fn(value, key, index, parent)`` for every leaf entry of *obj*.

    Nested mappings and lists are walked into; everything else is a leaf.
    """
    for value, key, index, parent in iter_leaves(obj, descend_containers):
        fn(value, key, index, parent)


def for_times(start: float, stop: float, step: float, fn: Callable[[float], Any]) -> None:
    """
    Calls ``fn(i)`` for ``i = start, start + step, ...`` while ``i < stop``.

    :raises ValueError: If *step* is not positive.
    """
    if step <= 0:
        raise ValueError(f"'for_times' expects a positive step, got {step}")
    index = start
    while index < stop:
        fn(index)
        index += step

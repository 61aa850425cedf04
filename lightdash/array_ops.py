"""
Array helpers.

All functions return new lists and leave their inputs untouched. Callbacks
take ``(value, index, parent)``.
"""

import itertools
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from .predicates import is_empty, is_nil
from .traversal import clone_deep, descend_arrays, iter_leaves, rebuild

ArrayIterator = Callable[[Any, int, Any], Any]


def arr_clone(arr: Iterable[Any]) -> List[Any]:
    """Shallow copy of *arr* as a new list."""
    return list(arr)


def arr_clone_deep(arr: List[Any]) -> List[Any]:
    """
    Deep copy of a nested list.

    No list, mapping or other mutable container of the result is shared with
    *arr*.
    """
    return clone_deep(arr)


def arr_map(arr: List[Any], fn: ArrayIterator) -> List[Any]:
    """Returns ``[fn(value, index, arr) for each element]``."""
    return [fn(value, index, arr) for index, value in enumerate(arr)]


def arr_map_deep(arr: List[Any], fn: ArrayIterator) -> List[Any]:
    """
    Maps every non-list value of a nested list, keeping the nesting intact.

    ``fn`` receives the value, its index and the innermost input list holding
    it::

        arr_map_deep([2, 4, [1, 1, [16], 4]], lambda val, *_: val * 2)
        # [4, 8, [2, 2, [32], 8]]
    """
    return rebuild(arr, lambda value, index, _, parent, __: fn(value, index, parent), descend_arrays)


def arr_flatten_deep(arr: List[Any]) -> List[Any]:
    """
    Recursively flattens a list.

    Example::

        arr_flatten_deep([1, 2, [3, [[[5]]], [6, [6]]]])
        # [1, 2, 3, 5, 6, 6]
    """
    return [value for value, _, _, _ in iter_leaves(arr, descend_arrays)]


def arr_compact(arr: Iterable[Any]) -> List[Any]:
    """Drops nil and empty values. ``0`` and ``False`` are kept."""
    return [value for value in arr if not is_nil(value) and not is_empty(value)]


def arr_chunk(arr: List[Any], size: int) -> List[List[Any]]:
    """
    Splits *arr* into consecutive slices of *size* elements; the last may be shorter.

    Returns ``[]`` when *size* is below 1.
    """
    if size < 1:
        return []
    return [list(arr[start:start + size]) for start in range(0, len(arr), size)]


def arr_step(arr: List[Any], step: int) -> List[Any]:
    """Every *step*-th element, starting with the first. Returns ``[]`` when *step* is below 1."""
    if step < 1:
        return []
    return list(arr[::step])


class ValueCounts(Mapping):
    """
    Occurrence counts keyed by value, in first-seen order.

    Works like a ``Counter`` that also accepts unhashable values such as
    lists and dicts. Those are matched by ``==`` with a linear scan; hashable
    values go through a dict.
    """

    def __init__(self, values: Iterable[Any] = ()):
        self._slots: Dict[Any, int] = {}
        self._unhashable: List[Tuple[Any, int]] = []
        self._entries: List[List[Any]] = []
        for value in values:
            self.add(value)

    def _slot(self, value: Any) -> Optional[int]:
        try:
            return self._slots.get(value)
        except TypeError:
            for candidate, slot in self._unhashable:
                if candidate == value:
                    return slot
            return None

    def add(self, value: Any) -> None:
        slot = self._slot(value)
        if slot is None:
            slot = len(self._entries)
            self._entries.append([value, 0])
            try:
                self._slots[value] = slot
            except TypeError:
                self._unhashable.append((value, slot))
        self._entries[slot][1] += 1

    def __getitem__(self, value: Any) -> int:
        slot = self._slot(value)
        if slot is None:
            raise KeyError(value)
        return self._entries[slot][1]

    def __iter__(self) -> Iterator[Any]:
        return (value for value, _ in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        try:
            return len(self) == len(other) and all(other[value] == count for value, count in self._entries)
        except (KeyError, TypeError):  # missing or unhashable in other
            return False

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[tuple(entry) for entry in self._entries]!r})"


def arr_count(arr: Iterable[Any]) -> ValueCounts:
    """
    Counts how often each value occurs.

    Keys keep first-seen order. Example::

        arr_count(["b", "a", "b", [1], [1]])
        # ValueCounts([('b', 2), ('a', 1), ([1], 2)])
    """
    return ValueCounts(arr)


def _count_all(values: Iterable[Iterable[Any]]) -> ValueCounts:
    return arr_count(itertools.chain.from_iterable(values))


def arr_difference(arr: Iterable[Any], *values: Iterable[Any]) -> List[Any]:
    """
    Elements of *arr* that occur in none of the other iterables.

    Example::

        arr_difference([1, 2, 3], [1, "foo", 3])
        # [2]
    """
    counted = _count_all(values)
    return [item for item in arr if item not in counted]


def arr_intersection(arr: Iterable[Any], *values: Iterable[Any]) -> List[Any]:
    """
    Elements of *arr* that occur in at least one of the other iterables.

    Example::

        arr_intersection([1, 2, 3], ["foo"], [2, 0, 2])
        # [2]
    """
    counted = _count_all(values)
    return [item for item in arr if item in counted]


def arr_uniq(arr: Iterable[Any]) -> List[Any]:
    """Removes duplicates, keeping the first occurrence of each value."""
    return list(ValueCounts(arr))

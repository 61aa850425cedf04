"""
Equality helpers.

``is_same`` is the strict, shallow check; ``is_equal`` compares nested
structures entry by entry.
"""

from typing import Any, List, Set, Tuple

import numpy as np

from .values import ValueKind, kind_of, own_entries

_STRUCTURAL_KINDS = frozenset({
    ValueKind.ARRAY,
    ValueKind.SEQUENCE,
    ValueKind.MAPPING,
    ValueKind.SET,
    ValueKind.TYPED_ARRAY,
})


def is_same(a: Any, b: Any) -> bool:
    """True for the same object, or for equal primitives of the same kind."""
    if a is b:
        return True
    kind = kind_of(a)
    if kind is not kind_of(b) or kind in _STRUCTURAL_KINDS or kind is ValueKind.OBJECT:
        return False
    return a == b


def is_equal(a: Any, b: Any) -> bool:
    """
    Deeply compares two values.

    Values of different kinds are never equal, so ``1`` and ``True`` differ
    while ``1`` and ``1.0`` match. Mappings match when they hold the same keys
    with equal values, regardless of order; lists and other sequences match
    pairwise; sets match by membership; typed arrays by ``numpy.array_equal``.
    Plain objects match when ``==`` says so, or else when they are of the same
    class and their public attributes are deeply equal. Primitives and
    functions compare by ``==``.

    Self-referential structures are compared without revisiting a pair of
    containers that is already being compared.

    Example::

        is_equal([1, 2, [3, 4]], [1, 2, [3, 4]])  # True
        is_equal([1, 2, [3]], [1, 2, [4]])        # False
    """
    pending: List[Tuple[Any, Any]] = [(a, b)]
    seen: Set[Tuple[int, int]] = set()

    while pending:
        left, right = pending.pop()
        if left is right:
            continue

        kind = kind_of(left)
        if kind is not kind_of(right):
            return False
        if kind is ValueKind.OBJECT:
            if left == right:
                continue
            if type(left) is not type(right) or not hasattr(left, "__dict__"):
                return False
        elif kind not in _STRUCTURAL_KINDS:
            if not left == right:
                return False
            continue

        marker = (id(left), id(right))
        if marker in seen:
            continue
        seen.add(marker)

        if kind is ValueKind.TYPED_ARRAY:
            if not np.array_equal(np.asarray(left), np.asarray(right)):
                return False
        elif kind is ValueKind.OBJECT:
            left_entries = dict(own_entries(left))
            right_entries = dict(own_entries(right))
            if left_entries.keys() != right_entries.keys():
                return False
            for key, value in left_entries.items():
                pending.append((value, right_entries[key]))
        elif len(left) != len(right):
            return False
        elif kind is ValueKind.MAPPING:
            for key, value in left.items():
                if key not in right:
                    return False
                pending.append((value, right[key]))
        elif kind is ValueKind.SET:
            if left != right:
                return False
        else:
            pending.extend(zip(reversed(left), reversed(right)))

    return True

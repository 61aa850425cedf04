"""
Type predicates.

Each predicate takes a single value and returns a bool. None of them raise.
"""

import math
from collections.abc import Sized
from typing import Any, Union

from .values import (
    ARRAY_LIKE_KINDS,
    OBJECT_LIKE_KINDS,
    Undefined,
    ValueKind,
    kind_of,
    length_of,
    own_keys,
)


def is_type_of(value: Any, kind: Union[ValueKind, str]) -> bool:
    """
    Checks the kind of a value.

    :param value: Any value.
    :param kind: A ``ValueKind`` member or its string value, e.g. ``"string"``.
    :return: True if ``kind_of(value)`` matches.
    """
    if isinstance(kind, ValueKind):
        return kind_of(value) is kind
    return kind_of(value).value == kind


def is_instance_of(value: Any, cls: Any) -> bool:
    try:
        return isinstance(value, cls)
    except TypeError:
        return False


def is_undefined(value: Any) -> bool:
    return value is Undefined


def is_defined(value: Any) -> bool:
    return not is_undefined(value)


def is_nil(value: Any) -> bool:
    """True for ``None`` and ``Undefined``."""
    return is_undefined(value) or value is None


def is_object_like(value: Any) -> bool:
    """True for containers and plain objects; false for primitives and functions."""
    return kind_of(value) in OBJECT_LIKE_KINDS


def is_object(value: Any) -> bool:
    """True for every object-like value and for functions."""
    return is_object_like(value) or kind_of(value) is ValueKind.FUNCTION


def is_array(value: Any) -> bool:
    return kind_of(value) is ValueKind.ARRAY


def is_array_like(value: Any) -> bool:
    """True for lists, typed arrays and other sequences. Strings are not array-like."""
    return kind_of(value) in ARRAY_LIKE_KINDS


def is_array_typed(value: Any) -> bool:
    """True for ``numpy.ndarray`` and ``array.array`` instances."""
    return kind_of(value) is ValueKind.TYPED_ARRAY


def is_map(value: Any) -> bool:
    return kind_of(value) is ValueKind.MAPPING


def is_set(value: Any) -> bool:
    return kind_of(value) is ValueKind.SET


def is_primitive(value: Any) -> bool:
    return not is_object_like(value)


def is_number(value: Any) -> bool:
    return kind_of(value) is ValueKind.NUMBER


def is_string(value: Any) -> bool:
    return kind_of(value) is ValueKind.STRING


def is_boolean(value: Any) -> bool:
    return kind_of(value) is ValueKind.BOOLEAN


def is_symbol(value: Any) -> bool:
    """True for ``enum.Enum`` members."""
    return kind_of(value) is ValueKind.SYMBOL


def is_string_number(value: Any) -> bool:
    """
    Checks if a string or number represents a numeric value.

    ``"12"``, ``"-1.5e3"`` and ``"inf"`` qualify; ``"NaN"``, ``"foo"`` and
    non-string, non-number values do not.
    """
    if kind_of(value) not in (ValueKind.STRING, ValueKind.NUMBER):
        return False
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return False
    return not math.isnan(parsed)


def is_empty(value: Any) -> bool:
    """
    Checks if a container has no items or an object has no keys.

    Array-like values and strings are empty when their length is 0, other
    sized containers (mappings, sets) likewise, and plain objects when they
    expose no public attributes. Numbers, booleans and nil values are never
    empty.
    """
    kind = kind_of(value)
    if kind in ARRAY_LIKE_KINDS or kind is ValueKind.STRING:
        return length_of(value) == 0
    if kind in OBJECT_LIKE_KINDS:
        if isinstance(value, Sized):
            return len(value) == 0
        return len(own_keys(value)) == 0
    return False

"""
Lightdash Value Model
=====================

Every helper in the package dispatches on the *kind* of a value rather than
probing its shape ad hoc. ``kind_of`` classifies any Python object into one
member of the closed ``ValueKind`` union:

========================  ==================================================
kind                      matched by
========================  ==================================================
``UNDEFINED``             the ``Undefined`` sentinel (a missing lookup)
``NIL``                   ``None``
``BOOLEAN``               ``bool``
``NUMBER``                any ``numbers.Number`` (``bool`` excluded)
``STRING``                ``str``
``SYMBOL``                ``enum.Enum`` members
``ARRAY``                 ``list``
``TYPED_ARRAY``           ``numpy.ndarray`` and ``array.array``
``MAPPING``               any ``collections.abc.Mapping``
``SET``                   any ``collections.abc.Set``
``SEQUENCE``              any other ``collections.abc.Sequence``
``FUNCTION``              any other callable
``OBJECT``                everything else
========================  ==================================================
"""

from __future__ import annotations

import array
import enum
import numbers
from collections.abc import Mapping, Sequence, Set
from typing import Any, List, Tuple

import numpy as np


class ValueKind(enum.Enum):
    UNDEFINED = "undefined"
    NIL = "nil"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    SYMBOL = "symbol"
    FUNCTION = "function"
    ARRAY = "array"
    TYPED_ARRAY = "typed_array"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SET = "set"
    OBJECT = "object"


ARRAY_LIKE_KINDS = frozenset({ValueKind.ARRAY, ValueKind.TYPED_ARRAY, ValueKind.SEQUENCE})
OBJECT_LIKE_KINDS = ARRAY_LIKE_KINDS | {ValueKind.MAPPING, ValueKind.SET, ValueKind.OBJECT}


class _Undefined:
    """Singleton returned by lookups that found nothing."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Undefined"

    def __bool__(self) -> bool:
        return False


Undefined = _Undefined()

_TYPED_ARRAY_TYPES = (np.ndarray, array.array)


def kind_of(value: Any) -> ValueKind:
    """Return the ``ValueKind`` of *value*. Never raises."""
    if value is Undefined:
        return ValueKind.UNDEFINED
    if value is None:
        return ValueKind.NIL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, numbers.Number):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, enum.Enum):
        return ValueKind.SYMBOL
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, _TYPED_ARRAY_TYPES):
        return ValueKind.TYPED_ARRAY
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, Set):
        return ValueKind.SET
    if isinstance(value, Sequence):
        return ValueKind.SEQUENCE
    if callable(value):
        return ValueKind.FUNCTION
    return ValueKind.OBJECT


def length_of(value: Any) -> int:
    """Length of an array-like value or string; zero-dimensional arrays count as empty."""
    if isinstance(value, np.ndarray) and value.ndim == 0:
        return 0
    return len(value)


def own_keys(value: Any) -> List[Any]:
    """
    List the keys a value exposes to the object helpers.

    Mappings give their keys in insertion order, array-like values give
    their positional indices, plain objects give their public instance
    attributes. Anything else has no keys.
    """
    kind = kind_of(value)
    if kind is ValueKind.MAPPING:
        return list(value.keys())
    if kind in ARRAY_LIKE_KINDS:
        return list(range(length_of(value)))
    if kind is ValueKind.OBJECT and hasattr(value, "__dict__"):
        return [key for key in vars(value) if not key.startswith("_")]
    return []


def own_entries(value: Any) -> List[Tuple[Any, Any]]:
    """``(key, value)`` pairs for every key in ``own_keys(value)``."""
    if kind_of(value) is ValueKind.OBJECT:
        return [(key, getattr(value, key)) for key in own_keys(value)]
    return [(key, value[key]) for key in own_keys(value)]

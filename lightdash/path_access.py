"""
Path accessors.

Provides key lookup on a single level (``has_key``) and path walking
(``get_path``, ``has_path``) over nested mappings, sequences and plain
objects. Paths are key lists or path strings (see ``path_conversion``).
"""

import logging
import re
from typing import Any

from .exceptions import PathSyntaxError
from .path_conversion import PathKey, PathLike, to_path
from .values import ARRAY_LIKE_KINDS, Undefined, ValueKind, kind_of, length_of

logger = logging.getLogger(__name__)

_DIGITS_RE = re.compile(r"\d+")


def _as_index(key: Any) -> Any:
    """Non-negative integer for an int or digit-string key, else None."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key if key >= 0 else None
    if isinstance(key, str) and _DIGITS_RE.fullmatch(key):
        return int(key)
    return None


def _twin_key(key: Any) -> Any:
    """``0`` <-> ``"0"``; None when the key has no twin."""
    index = _as_index(key)
    if index is None:
        return None
    return str(index) if isinstance(key, int) else index


def lookup(target: Any, key: PathKey) -> Any:
    """
    Resolve one key on *target*.

    - Mappings: the key as given, then its int/str twin (``"0"`` / ``0``).
    - Array-like values and strings: non-negative in-range indices.
    - Plain objects: public attributes.
    - Anything else: nothing.

    :return: The value found, or ``Undefined``.
    """
    kind = kind_of(target)

    if kind is ValueKind.MAPPING:
        for candidate in (key, _twin_key(key)):
            if candidate is None:
                continue
            try:
                if candidate in target:
                    return target[candidate]
            except TypeError:  # unhashable key
                return Undefined
        return Undefined

    if kind in ARRAY_LIKE_KINDS or kind is ValueKind.STRING:
        index = _as_index(key)
        if index is not None and index < length_of(target):
            return target[index]
        return Undefined

    if kind is ValueKind.OBJECT and isinstance(key, str) and not key.startswith("_"):
        return getattr(target, key, Undefined)

    return Undefined


def has_key(target: Any, key: PathKey) -> bool:
    """
    Checks if *target* has a value under *key*.

    A key mapped to ``None`` exists.
    """
    return lookup(target, key) is not Undefined


def _resolve(target: Any, path: PathLike) -> Any:
    try:
        keys = to_path(path)
    except PathSyntaxError as e:
        logger.debug(f"Treating malformed path as unresolved: {e}")
        return Undefined
    current = target
    for key in keys:
        current = lookup(current, key)
        if current is Undefined:
            return Undefined
    return current


def get_path(target: Any, path: PathLike) -> Any:
    """
    Returns the value at *path* inside *target*, or None if a step is missing.

    Example::

        get_path({"a": {"b": 2, "c": [10, 20]}}, ["a", "c", "0"])  # 10
        get_path({"a": {"b": 2, "c": [10, 20]}}, "a.c[1]")         # 20
        get_path({"a": 1}, ["c"])                                   # None

    :param target: The value to walk.
    :param path: A list of keys or a path string. An empty path returns *target*;
                 a malformed path string resolves to None.
    """
    resolved = _resolve(target, path)
    if resolved is Undefined:
        logger.debug(f"Path {path!r} did not resolve")
        return None
    return resolved


def has_path(target: Any, path: PathLike) -> bool:
    """
    Checks if every step of *path* resolves inside *target*.

    A path ending on a ``None`` value exists.

    Example::

        has_path({"a": {"b": 2, "c": [10, 20]}}, ["a", "b"])  # True
        has_path({"a": 1}, ["c"])                              # False
        has_path({"a b": 1}, "a b")                            # False, not a valid path string
    """
    return _resolve(target, path) is not Undefined

"""
Path string utilities
=====================

This module provides the two conversions between the path notations the
accessors accept:

* ``string_to_path(text)``  -  parses a path string into a list of keys
  (e.g. ``'a.c[0]'`` -> ``['a', 'c', 0]``).

* ``path_to_string(path)``  -  the inverse: renders a list of keys as a path
  string.

Round-tripping through the printer is stable:

>>> path_to_string(string_to_path('users[0]["full name"]'))
'users.0["full name"]'

Any syntax error raises a ``PathSyntaxError`` that carries the offending
segment so callers can surface helpful messages.
"""

from __future__ import annotations

import functools
import logging
import re
from pathlib import Path
from typing import Any, List, Sequence, Union

from lark import Lark, Transformer
from lark.exceptions import LarkError, UnexpectedInput

from .exceptions import PathSyntaxError

logger = logging.getLogger(__name__)

PathKey = Union[str, int]
PathLike = Union[str, Sequence[PathKey]]

_NAME_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$\-]*")


class PathTransformer(Transformer):
    def start(self, items):
        return list(items)

    def name(self, items):
        return str(items[0])

    def number(self, items):
        return int(items[0])

    def quoted(self, items):
        s = items[0][1:-1]  # strip quotes
        return s.replace(r"\"", '"').replace(r"\'", "'").replace("\\\\", "\\")


@functools.lru_cache(maxsize=None)
def _get_parser() -> Lark:
    grammar_path = Path(__file__).parent / "grammar.lark"
    return Lark(grammar_path.read_text(), parser="lalr", start="start", transformer=PathTransformer())


def string_to_path(text: str) -> List[PathKey]:
    """Parse a path string into a list of keys.

    Parameters
    ----------
    text : str
        Dotted and bracketed notation, e.g. ``"a.b[0]"`` or ``"a['x.y']"``.

    Returns
    -------
    list[str | int]
        ``[]`` for an empty (or all-whitespace) string.

    Raises
    ------
    PathSyntaxError
        If the string does not follow the path grammar.
    """
    text = text.strip()
    if not text:
        return []
    try:
        return _get_parser().parse(text)
    except UnexpectedInput as e:
        pos = getattr(e, "pos_in_stream", None)
        segment = text[pos:] if pos is not None and pos >= 0 else text
        logger.debug(f"Rejected path string {text!r} at column {e.column}")
        raise PathSyntaxError("Unexpected token in path", path_segment=segment, path=text) from e
    except LarkError as e:
        logger.debug(f"Rejected path string {text!r}: {e}")
        raise PathSyntaxError("Malformed path", path=text) from e


def _quote(key: str) -> str:
    return '["' + key.replace("\\", "\\\\").replace('"', r"\"") + '"]'


def path_to_string(path: Sequence[PathKey]) -> str:
    """Render a list of keys as a path string.

    Names are dotted, integers use dotted digits, and any other key is
    written as a quoted bracket. ``[]`` renders as ``""``.

    Raises
    ------
    PathSyntaxError
        If a key is neither a string nor a non-negative integer.
    """
    result: List[str] = []

    for i, key in enumerate(path):
        if isinstance(key, bool) or not isinstance(key, (str, int)):
            raise PathSyntaxError("Path keys must be strings or integers.", path_segment=key, path=path)
        if isinstance(key, int):
            if key < 0:
                raise PathSyntaxError("Integer path keys must be non-negative.", path_segment=key, path=path)
            text = str(key)
        elif _NAME_RE.fullmatch(key):
            text = key
        else:
            result.append(_quote(key))
            continue
        if i > 0:
            result.append(".")
        result.append(text)

    return "".join(result)


def to_path(path: PathLike) -> List[PathKey]:
    """Normalize a path string or key sequence into a list of keys."""
    if isinstance(path, str):
        return string_to_path(path)
    return list(path)


def is_valid_path(text: Any) -> bool:
    """
    Checks if *text* is a string the path grammar accepts.

    Args:
        text: The candidate path string

    Returns:
        True if the path is valid, False otherwise
    """
    if not isinstance(text, str):
        logger.debug(f"Invalid path type: {type(text)}. Expected a string.")
        return False
    try:
        string_to_path(text)
        return True
    except PathSyntaxError:
        return False

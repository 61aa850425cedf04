"""
Lightdash Deep Traversal
========================

The deep helpers (``for_each_deep``, ``arr_map_deep``, ``arr_flatten_deep``,
``obj_map_deep``, the deep clones) all walk nested containers depth-first,
left-to-right. This module holds the single engine they share.

The walk keeps its own stack of frames instead of recursing, so nesting depth
is bounded by memory rather than by the interpreter's recursion limit. Each
frame snapshots the keys of its container when it is entered; leaf values are
re-read when visited, which lets callbacks overwrite the slot they were
handed. A container that shows up again while one of its own frames is still
active raises ``CyclicStructureError``.

Two entry points:

* ``iter_leaves(root, descend)`` yields ``(value, key, position, parent)``.
* ``rebuild(root, visit, descend)`` returns a new tree of the same shape with
  every leaf replaced by ``visit(value, key, position, source_parent,
  new_parent)``.
* ``clone_deep(value)`` builds on ``rebuild`` to deep-copy any value.

``descend`` decides which values are containers to walk into; everything
else is a leaf.
"""

import copy
import logging
from collections.abc import MutableMapping
from typing import Any, Callable, Iterator, List, Set, Tuple

from .exceptions import CyclicStructureError
from .values import OBJECT_LIKE_KINDS, Undefined, ValueKind, kind_of

logger = logging.getLogger(__name__)

Descend = Callable[[Any], bool]
LeafVisitor = Callable[[Any, Any, int, Any, Any], Any]


def descend_arrays(value: Any) -> bool:
    """Walk into lists only."""
    return kind_of(value) is ValueKind.ARRAY


def descend_containers(value: Any) -> bool:
    """Walk into lists and mappings."""
    return kind_of(value) in (ValueKind.ARRAY, ValueKind.MAPPING)


def shallow_copy(container: Any) -> Any:
    """New top-level container with the same entries; mapping types are preserved."""
    if isinstance(container, MutableMapping):
        return copy.copy(container)
    if kind_of(container) is ValueKind.MAPPING:
        return dict(container)
    return list(container)


def clone_leaf(value: Any, *_: Any) -> Any:
    """Leaf visitor for deep clones: primitives are kept, other objects are deep-copied."""
    if kind_of(value) in OBJECT_LIKE_KINDS:
        return copy.deepcopy(value)
    return value


def clone_deep(value: Any) -> Any:
    """
    Deep copy of *value*: lists and mappings are rebuilt on the traversal
    stack, any other root goes through ``clone_leaf`` whole.
    """
    if not descend_containers(value):
        return clone_leaf(value)
    return rebuild(value, clone_leaf, descend_containers)


def _child_keys(container: Any) -> List[Any]:
    if kind_of(container) is ValueKind.MAPPING:
        return list(container.keys())
    return list(range(len(container)))


def _read(container: Any, key: Any) -> Any:
    # Entries removed by a callback since the frame was entered are skipped.
    if kind_of(container) is ValueKind.MAPPING:
        return container[key] if key in container else Undefined
    return container[key] if key < len(container) else Undefined


class _Frame:
    __slots__ = ("source", "target", "key", "keys", "cursor")

    def __init__(self, source: Any, target: Any, key: Any):
        self.source = source
        self.target = target
        self.key = key
        self.keys = _child_keys(source)
        self.cursor = 0


def _enter(stack: List[_Frame], active: Set[int], source: Any, key: Any, target: Any = None) -> None:
    if id(source) in active:
        trail = [frame.key for frame in stack[1:]] + [key]
        logger.debug(f"Self-referential container reached via key trail {trail}")
        raise CyclicStructureError(
            "Cannot deeply traverse a self-referential structure.",
            container=source,
            trail=trail,
        )
    active.add(id(source))
    stack.append(_Frame(source, target, key))


def _advance(stack: List[_Frame], active: Set[int]) -> Tuple[_Frame, Any, int, Any]:
    """
    Move to the next live entry, popping exhausted frames.

    Returns ``(frame, key, position, value)``; ``frame`` is None once the walk
    is complete.
    """
    while stack:
        frame = stack[-1]
        if frame.cursor >= len(frame.keys):
            stack.pop()
            active.discard(id(frame.source))
            continue
        position = frame.cursor
        key = frame.keys[position]
        frame.cursor += 1
        value = _read(frame.source, key)
        if value is Undefined:
            continue
        return frame, key, position, value
    return None, None, -1, Undefined


def iter_leaves(root: Any, descend: Descend = descend_arrays) -> Iterator[Tuple[Any, Any, int, Any]]:
    """
    Yield every leaf below *root*, depth-first and left-to-right.

    :param root: A list or mapping.
    :param descend: Predicate selecting the values to walk into.
    :return: Iterator of ``(value, key, position, parent)`` tuples. ``key`` is
             the index for lists; ``position`` is the entry's ordinal within
             its parent.
    :raises CyclicStructureError: If a container contains itself.
    """
    stack: List[_Frame] = []
    active: Set[int] = set()
    _enter(stack, active, root, None)

    while True:
        frame, key, position, value = _advance(stack, active)
        if frame is None:
            return
        if descend(value):
            _enter(stack, active, value, key)
        else:
            yield value, key, position, frame.source


def rebuild(root: Any, visit: LeafVisitor, descend: Descend = descend_arrays) -> Any:
    """
    Build a new tree mirroring *root* with each leaf replaced by ``visit``'s result.

    Every container selected by ``descend`` is copied, so the result shares no
    walked container with the input. ``visit`` receives ``(value, key,
    position, source_parent, new_parent)``; ``new_parent`` already holds the
    original entries that have not been visited yet.

    :raises CyclicStructureError: If a container contains itself.
    """
    result = shallow_copy(root)
    stack: List[_Frame] = []
    active: Set[int] = set()
    _enter(stack, active, root, None, result)

    while True:
        frame, key, position, value = _advance(stack, active)
        if frame is None:
            return result
        if descend(value):
            child = shallow_copy(value)
            frame.target[key] = child
            _enter(stack, active, value, key, child)
        else:
            frame.target[key] = visit(value, key, position, frame.source, frame.target)

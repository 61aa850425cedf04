"""
Object helpers.

The ``obj_*`` functions work on mappings; ``obj_keys``, ``obj_values``,
``obj_entries`` and ``map_from_object`` also accept plain objects, whose
public instance attributes act as keys. Callbacks take
``(value, key, index, new_obj)``.
"""

from typing import Any, Callable, Dict, List, Mapping, Tuple

from .traversal import clone_deep, descend_containers, rebuild, shallow_copy
from .values import own_entries, own_keys

EntryIterator = Callable[[Any, Any, int, Any], Any]


def obj_keys(obj: Any) -> List[Any]:
    return own_keys(obj)


def obj_values(obj: Any) -> List[Any]:
    return [value for _, value in own_entries(obj)]


def obj_entries(obj: Any) -> List[Tuple[Any, Any]]:
    return own_entries(obj)


def obj_clone(obj: Mapping) -> Mapping:
    """Shallow copy of a mapping, keeping its type where it is mutable."""
    return shallow_copy(obj)


def obj_clone_deep(obj: Mapping) -> Mapping:
    """
    Deep copy of a nested mapping.

    Example::

        a = {"a": {"b": 2, "c": {"a": 10, "b": 20}}}
        b = obj_clone_deep(a)
        b["a"]["c"]["a"] = 123
        # a["a"]["c"]["a"] is still 10
    """
    return clone_deep(obj)


# The historic name of obj_clone_deep.
obj_from_deep = obj_clone_deep


def obj_map(obj: Mapping, fn: EntryIterator) -> Mapping:
    """
    Maps each value of *obj* with ``fn(value, key, index, new_obj)``.

    ``new_obj`` is the mapping being built; entries not yet visited still
    hold their original values.
    """
    result = shallow_copy(obj)
    for index, (key, value) in enumerate(own_entries(obj)):
        result[key] = fn(value, key, index, result)
    return result


def obj_map_deep(obj: Mapping, fn: EntryIterator) -> Mapping:
    """
    Maps every leaf value of a nested mapping, keeping the nesting intact.

    Nested mappings and lists are walked into rather than handed to ``fn``.
    ``fn`` receives ``(value, key, index, new_parent)`` where ``new_parent``
    is the copy of the container holding the value.
    """
    return rebuild(
        obj,
        lambda value, key, index, _, new_parent: fn(value, key, index, new_parent),
        descend_containers,
    )


def map_from_object(obj: Any) -> Dict[Any, Any]:
    """New dict built from the entries of a mapping or plain object."""
    return dict(own_entries(obj))

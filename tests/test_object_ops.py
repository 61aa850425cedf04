"""
Tests for the object helpers.
"""
from collections import OrderedDict
from dataclasses import dataclass
from types import MappingProxyType

import pytest

from lightdash import (
    CyclicStructureError,
    is_equal,
    map_from_object,
    obj_clone,
    obj_clone_deep,
    obj_entries,
    obj_from_deep,
    obj_keys,
    obj_map,
    obj_map_deep,
    obj_values,
)


@dataclass
class User:
    name: str
    age: int


class TestObjectEntries:
    """Test key/value/entry listing"""

    def setup_method(self):
        self.obj = {"a": 1, "b": {"c": 2}}

    def test_keys_values_entries(self):
        assert obj_keys(self.obj) == ["a", "b"]
        assert obj_values(self.obj) == [1, {"c": 2}]
        assert obj_entries(self.obj) == [("a", 1), ("b", {"c": 2})]

    def test_plain_objects_expose_public_attributes(self):
        user = User("Alice", 30)
        user._secret = "hidden"
        assert obj_keys(user) == ["name", "age"]
        assert obj_values(user) == ["Alice", 30]
        assert map_from_object(user) == {"name": "Alice", "age": 30}

    def test_sequences_expose_indices(self):
        assert obj_keys(["x", "y"]) == [0, 1]
        assert obj_entries(("x",)) == [(0, "x")]

    def test_primitives_have_no_keys(self):
        assert obj_keys(5) == []
        assert obj_entries(None) == []

    def test_map_from_object_returns_new_dict(self):
        result = map_from_object(self.obj)
        assert result == self.obj
        assert result is not self.obj
        assert map_from_object(MappingProxyType({"a": 1})) == {"a": 1}


class TestObjectClone:
    """Test shallow and deep clones"""

    def test_obj_clone_is_shallow(self):
        obj = {"a": {"b": 1}}
        clone = obj_clone(obj)
        assert clone == obj
        assert clone is not obj
        assert clone["a"] is obj["a"]

    def test_obj_clone_keeps_mapping_type(self):
        assert type(obj_clone(OrderedDict(a=1))) is OrderedDict
        assert obj_clone(MappingProxyType({"a": 1})) == {"a": 1}

    def test_obj_clone_deep(self):
        a = {"a": {"b": 2, "c": {"a": 10, "b": 20}}}
        b = obj_clone_deep(a)
        b["a"]["c"]["a"] = 123
        assert a == {"a": {"b": 2, "c": {"a": 10, "b": 20}}}
        assert b == {"a": {"b": 2, "c": {"a": 123, "b": 20}}}

    def test_obj_clone_deep_copies_nested_lists_and_objects(self):
        user = User("Alice", 30)
        a = {"items": [{"id": 1}], "owner": user, "tags": {"x"}}
        b = obj_clone_deep(a)
        assert is_equal(a, b)
        assert b["items"] is not a["items"]
        assert b["items"][0] is not a["items"][0]
        assert b["owner"] is not user
        assert b["owner"] == user
        assert b["tags"] is not a["tags"]

    def test_obj_clone_deep_of_tuple_and_set_roots(self):
        tags = {1, 2}
        clone = obj_clone_deep(tags)
        assert clone == tags
        assert clone is not tags

        pair = (1, [2])
        clone = obj_clone_deep(pair)
        assert clone == pair
        assert clone[1] is not pair[1]

    def test_obj_from_deep_alias(self):
        assert obj_from_deep is obj_clone_deep

    def test_obj_clone_deep_rejects_cycles(self):
        a = {"x": 1}
        a["self"] = {"again": a}
        with pytest.raises(CyclicStructureError):
            obj_clone_deep(a)


class TestObjectMap:
    """Test obj_map and obj_map_deep"""

    def test_obj_map(self):
        obj = {"a": 1, "b": 2}
        result = obj_map(obj, lambda val, key, index, new_obj: val * 10 + index)
        assert result == {"a": 10, "b": 21}
        assert obj == {"a": 1, "b": 2}

    def test_obj_map_hands_over_the_new_object(self):
        obj = {"a": 1, "b": 2}
        seen = []

        def fn(val, key, index, new_obj):
            seen.append(dict(new_obj))
            return val + 100

        result = obj_map(obj, fn)
        assert seen == [{"a": 1, "b": 2}, {"a": 101, "b": 2}]
        assert result == {"a": 101, "b": 102}

    def test_obj_map_deep(self):
        obj = {"a": 1, "b": {"c": 2, "d": [3, {"e": 4}]}}
        result = obj_map_deep(obj, lambda val, *_: val * 2)
        assert result == {"a": 2, "b": {"c": 4, "d": [6, {"e": 8}]}}
        assert obj == {"a": 1, "b": {"c": 2, "d": [3, {"e": 4}]}}

    def test_obj_map_deep_passes_keys(self):
        obj = {"a": {"b": 1, "c": 2}}
        result = obj_map_deep(obj, lambda val, key, index, parent: f"{key}{index}")
        assert result == {"a": {"b": "b0", "c": "c1"}}

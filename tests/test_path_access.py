"""
Tests for has_key, get_path and has_path.
"""
from dataclasses import dataclass

import numpy as np
import pytest

from lightdash import get_path, has_key, has_path


@dataclass
class Profile:
    theme: str
    tags: list


class TestHasKey:
    """Test single-level key lookup"""

    def test_mapping_keys(self):
        assert has_key({"a": 1}, "a")
        assert has_key({"a": None}, "a")
        assert not has_key({"a": 1}, "b")

    def test_digit_keys_match_their_twins(self):
        assert has_key({0: "x"}, "0")
        assert has_key({"0": "x"}, 0)
        assert not has_key({"a": 1}, 0)

    def test_sequence_indices(self):
        assert has_key([10, 20], 1)
        assert has_key([10, 20], "1")
        assert not has_key([10, 20], 2)
        assert not has_key([10, 20], -1)
        assert not has_key([10, 20], "x")
        assert has_key("abc", 2)
        assert has_key((1,), 0)
        assert has_key(np.array([1, 2]), 1)

    def test_object_attributes(self):
        profile = Profile("dark", [])
        assert has_key(profile, "theme")
        assert not has_key(profile, "missing")
        assert not has_key(profile, "__class__")

    def test_values_without_keys(self):
        assert not has_key(None, "a")
        assert not has_key(5, "real")
        assert not has_key({1, 2}, 1)
        assert not has_key({"a": 1}, ["unhashable"])


class TestGetPath:
    """Test path walking"""

    def setup_method(self):
        self.data = {
            "a": {"b": 2, "c": [10, 20]},
            "user": {"profile": Profile("dark", ["x", "y"]), "email": None},
            "odd key": {"x.y": 1},
        }

    def test_key_lists(self):
        assert get_path(self.data, ["a", "c", "0"]) == 10
        assert get_path(self.data, ["a", "c", 1]) == 20
        assert get_path(self.data, ["a", "b"]) == 2
        assert get_path({"a": 1}, ["c"]) is None

    def test_empty_path_returns_target(self):
        assert get_path(self.data, []) is self.data
        assert get_path(self.data, "") is self.data

    def test_path_strings(self):
        assert get_path(self.data, "a.c[1]") == 20
        assert get_path(self.data, "a.c.0") == 10
        assert get_path(self.data, "user.profile.theme") == "dark"
        assert get_path(self.data, "user.profile.tags[1]") == "y"
        assert get_path(self.data, '["odd key"]["x.y"]') == 1

    def test_missing_steps_return_none(self):
        assert get_path(self.data, "a.c[5]") is None
        assert get_path(self.data, "a.b.c") is None
        assert get_path(self.data, "user.email.domain") is None
        assert get_path(self.data, ["a", "c", "first"]) is None

    def test_malformed_path_string_returns_none(self):
        assert get_path(self.data, "a..b") is None
        assert get_path({"a b": 1}, "a b") is None
        assert get_path(self.data, "a.c[") is None
        assert get_path({"a b": 1}, ["a b"]) == 1

    def test_input_is_not_mutated(self):
        get_path(self.data, "a.c[0]")
        assert self.data["a"] == {"b": 2, "c": [10, 20]}


class TestHasPath:
    """Test path existence"""

    def setup_method(self):
        self.data = {"a": {"b": 2, "c": [10, 20]}, "n": None}

    def test_resolving_paths(self):
        assert has_path(self.data, ["a", "b"])
        assert has_path(self.data, "a.c[0]")
        assert has_path(self.data, [])

    def test_path_ending_on_none_exists(self):
        assert has_path(self.data, ["n"])
        assert not has_path(self.data, ["n", "x"])

    def test_missing_paths(self):
        assert not has_path(self.data, ["x"])
        assert not has_path(self.data, "a.c[2]")

    def test_malformed_path_string_does_not_exist(self):
        assert not has_path(self.data, "a..b")
        assert not has_path({"a b": 1}, "a b")

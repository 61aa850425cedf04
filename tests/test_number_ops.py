"""
Tests for the number helpers.
"""
import random

import pytest

from lightdash import (
    is_in_range,
    number_clamp,
    number_in_range,
    number_random_float,
    number_random_int,
)


class TestClampAndRange:

    @pytest.mark.parametrize("value,expected", [(-5, 0), (0, 0), (3, 3), (10, 10), (11, 10), (2.5, 2.5)])
    def test_number_clamp(self, value, expected):
        assert number_clamp(value, 0, 10) == expected

    def test_clamp_always_within_bounds(self):
        rng = random.Random(7)
        for _ in range(200):
            value = rng.uniform(-1000, 1000)
            assert -3.5 <= number_clamp(value, -3.5, 42) <= 42

    def test_number_in_range_is_inclusive(self):
        assert number_in_range(0, 0, 10)
        assert number_in_range(10, 0, 10)
        assert number_in_range(5.5, 0, 10)
        assert not number_in_range(-0.1, 0, 10)
        assert not number_in_range(10.1, 0, 10)

    def test_is_in_range_alias(self):
        assert is_in_range is number_in_range


class TestRandom:

    def test_random_float_stays_in_range(self):
        for _ in range(200):
            assert 2 <= number_random_float(2, 5) <= 5

    def test_random_float_defaults(self):
        for _ in range(50):
            assert 0 <= number_random_float() <= 1

    def test_random_int_covers_both_bounds(self):
        rng = random.Random(1)
        seen = {number_random_int(1, 3, rng=rng) for _ in range(300)}
        assert seen == {1, 2, 3}

    def test_random_int_rounds_float_bounds_inward(self):
        rng = random.Random(3)
        seen = {number_random_int(0.5, 2.5, rng=rng) for _ in range(300)}
        assert seen == {1, 2}
        assert all(isinstance(value, int) for value in seen)
        assert number_random_int(-1.5, -0.5, rng=rng) == -1

    def test_random_int_without_integer_in_bounds(self):
        with pytest.raises(ValueError):
            number_random_int(0.2, 0.8)

    def test_random_int_defaults(self):
        for _ in range(50):
            assert number_random_int() in (0, 1)

    def test_seeded_generator_is_reproducible(self):
        first = [number_random_float(0, 100, rng=random.Random(42)) for _ in range(3)]
        second = [number_random_float(0, 100, rng=random.Random(42)) for _ in range(3)]
        assert first == second

"""Tests for the random provider."""

import random

import pytest

from whimsy_shared.constants import PALETTE
from whimsy_shared.randomness import RandomProvider


class TestRandomInt:
    def test_single_value_range(self, provider):
        assert all(provider.random_int(5, 5) == 5 for _ in range(100))

    def test_two_value_range_hits_both_ends(self, provider):
        seen = {provider.random_int(0, 1) for _ in range(500)}
        assert seen == {0, 1}

    def test_bounds_are_inclusive(self, provider):
        values = [provider.random_int(-3, 3) for _ in range(2000)]
        assert min(values) == -3
        assert max(values) == 3

    def test_empty_range_rejected(self, provider):
        with pytest.raises(ValueError):
            provider.random_int(10, 9)

    def test_same_seed_same_sequence(self):
        a = RandomProvider(random.Random(7))
        b = RandomProvider(random.Random(7))
        assert [a.random_int(0, 100) for _ in range(20)] == [b.random_int(0, 100) for _ in range(20)]


class TestRandomColor:
    def test_color_comes_from_palette(self, provider):
        for _ in range(200):
            assert provider.random_color() in PALETTE

    def test_custom_palette(self, seeded_rng):
        rnd = RandomProvider(seeded_rng, palette=["#000000"])
        assert rnd.random_color() == "#000000"

    def test_empty_palette_rejected(self, seeded_rng):
        with pytest.raises(ValueError):
            RandomProvider(seeded_rng, palette=[])

"""Tests for RandomSelector."""

import random
from collections import Counter

from core.random_selector import RandomSelector


class TestSelect:
    def test_single_element(self):
        assert RandomSelector().select(["only.jpg"]) == "only.jpg"

    def test_result_is_member(self):
        keys = ["a.jpg", "b.jpg", "c.jpg"]
        selector = RandomSelector()
        for _ in range(200):
            assert selector.select(keys) in keys

    def test_seeded_rng_is_reproducible(self):
        keys = [f"{i}.jpg" for i in range(50)]
        a = RandomSelector(random.Random(42))
        b = RandomSelector(random.Random(42))
        assert [a.select(keys) for _ in range(20)] == [b.select(keys) for _ in range(20)]

    def test_uniform_distribution(self):
        keys = ["a.jpg", "b.jpg", "c.jpg", "d.jpg"]
        selector = RandomSelector(random.Random(1234))
        n = 8000
        counts = Counter(selector.select(keys) for _ in range(n))

        assert set(counts) == set(keys)
        expected = 1 / len(keys)
        for key in keys:
            assert abs(counts[key] / n - expected) < 0.03

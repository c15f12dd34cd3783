"""Tests for the random sample series."""

import random

from src.services.sample.generator import generate_random_series


def test_labels_are_sequential():
    series = generate_random_series(4, rng=random.Random(0))
    assert [p["x"] for p in series] == ["Point 1", "Point 2", "Point 3", "Point 4"]


def test_values_stay_in_range():
    series = generate_random_series(200, low=-100, high=99, rng=random.Random(3))
    values = [p["value"] for p in series]

    assert all(isinstance(v, int) for v in values)
    assert min(values) >= -100
    assert max(values) <= 99


def test_seeded_generator_is_repeatable():
    assert generate_random_series(5, rng=random.Random(42)) == generate_random_series(
        5, rng=random.Random(42)
    )


def test_zero_count_is_empty():
    assert generate_random_series(0) == []

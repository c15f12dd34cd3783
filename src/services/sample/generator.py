"""Random series generator for the built-in data endpoint."""

import random
from typing import Any


def generate_random_series(
    count: int,
    low: int = -100,
    high: int = 99,
    rng: random.Random | None = None,
) -> list[dict[str, Any]]:
    """Return ``count`` points labeled ``Point 1..count`` with integer values in ``[low, high]``."""
    rng = rng or random.Random()
    return [{"x": f"Point {i + 1}", "value": rng.randint(low, high)} for i in range(count)]

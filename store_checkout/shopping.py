"""Shopping models for visitors.

A visitor decides up front how many items it will pick (1 to 6) and then
spends one shopping step per item. Each step lasts a random whole number of
ticks between 50 and 75.

Both helpers take an optional `random.Random` so runs can be made
deterministic with a seed.
"""

from __future__ import annotations

import random

MIN_ITEMS = 1
MAX_ITEMS = 6

MIN_STEP_TICKS = 50
MAX_STEP_TICKS = 75


def sample_item_count(rng: random.Random | None = None) -> int:
    """Number of items a visitor will collect before queuing."""
    r = rng or random
    return r.randint(MIN_ITEMS, MAX_ITEMS)


def sample_shopping_delay(*, tick_ms: int, rng: random.Random | None = None) -> float:
    """Seconds spent picking a single item.

    Args:
        tick_ms: length of one tick in milliseconds (>= 0).
        rng: optional RNG (useful for deterministic tests).
    """
    if tick_ms < 0:
        raise ValueError("tick_ms must be >= 0")

    r = rng or random
    return r.randint(MIN_STEP_TICKS, MAX_STEP_TICKS) * tick_ms / 1000.0

from __future__ import annotations

# Service time helpers.
#
# A cashier scans one item at a time; every scan takes a random whole number
# of ticks between 10 and 20. The total time spent on a visitor is therefore
# the sum of one delay per item:
#   service_time_seconds = sum(sample_item_delay() for each item)

import random

MIN_SCAN_TICKS = 10
MAX_SCAN_TICKS = 20


def sample_item_delay(*, tick_ms: int, rng: random.Random | None = None) -> float:
    """Seconds spent scanning a single item."""
    if tick_ms < 0:
        raise ValueError("tick_ms must be >= 0")

    r = rng or random
    return r.randint(MIN_SCAN_TICKS, MAX_SCAN_TICKS) * tick_ms / 1000.0

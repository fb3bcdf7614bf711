import random

import pytest

from store_checkout.service_time import sample_item_delay


def test_item_delay_is_scaled_by_tick():
    rng = random.Random(5)
    delays = [sample_item_delay(tick_ms=100, rng=rng) for _ in range(200)]
    assert min(delays) >= 1.0
    assert max(delays) <= 2.0


def test_item_delay_zero_tick():
    assert sample_item_delay(tick_ms=0, rng=random.Random(1)) == 0.0


def test_item_delay_rejects_negative_tick():
    with pytest.raises(ValueError):
        sample_item_delay(tick_ms=-1)

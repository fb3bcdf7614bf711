import random
import threading

import pytest

from store_checkout.cashier import Cashier, CashierState
from store_checkout.errors import SimulationError
from store_checkout.line import Line
from store_checkout.observations import ObservationKind, RecordingReporter
from store_checkout.stats import StoreStats
from store_checkout.visitor import POISON_ID, Visitor, VisitorState


class SleepLog:
    """Stand-in for time.sleep that records durations without waiting."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        with self._lock:
            self.calls.append(seconds)


def test_visitor_shops_queues_and_exits_after_removal():
    stats = StoreStats(shopping=1, line_ids=[1])
    rec = RecordingReporter()
    line = Line(1, stats, reporter=rec)
    sleeps = SleepLog()
    v = Visitor(7, line, tick_ms=10, rng=random.Random(1), sleep=sleeps, reporter=rec)

    t = threading.Thread(target=v.run)
    t.start()

    # Act as the cashier.
    head = line.next_to_serve()
    assert head is v
    assert v.state is VisitorState.BEING_SERVED
    assert v.items == v.max_items
    line.complete_service()

    t.join(timeout=2)
    assert not t.is_alive()
    assert v.state is VisitorState.DONE

    assert len(sleeps.calls) == v.max_items
    assert all(0.5 <= s <= 0.75 for s in sleeps.calls)

    kinds = [o.kind for o in rec.observations]
    assert kinds == [
        ObservationKind.ENTERED_LINE,
        ObservationKind.SERVICE_STARTED,
        ObservationKind.SERVICE_COMPLETED,
        ObservationKind.VISITOR_EXITED,
    ]


def test_visitor_item_count_in_range():
    stats = StoreStats(shopping=0, line_ids=[1])
    line = Line(1, stats)
    rng = random.Random(42)
    counts = {Visitor(i, line, rng=rng).max_items for i in range(1, 200)}
    assert counts == {1, 2, 3, 4, 5, 6}


def test_poison_visitor_has_no_actor():
    line = Line(1, StoreStats(shopping=0, line_ids=[1]))
    p = Visitor.poison(line)
    assert p.visitor_id == POISON_ID
    assert p.is_poison
    assert p.state is VisitorState.QUEUED
    with pytest.raises(SimulationError):
        p.run()


def _queued(vid: int, line: Line, items: int) -> Visitor:
    v = Visitor(vid, line, max_items=items)
    v.items = items
    v.state = VisitorState.QUEUED
    return v


def test_cashier_spends_one_delay_per_item():
    stats = StoreStats(shopping=2, line_ids=[1])
    line = Line(1, stats)
    sleeps = SleepLog()
    cashier = Cashier(1, line, sleep=sleeps, item_delay=lambda: 0.01)

    line.insert(_queued(1, line, items=4))
    line.insert(_queued(2, line, items=2))
    cashier.poison()

    cashier.run()

    assert sleeps.calls == [0.01] * 6
    assert cashier.served_count == 2
    assert cashier.state is CashierState.TERMINATED
    assert cashier.current is None


def test_cashier_delays_are_reproducible_with_a_seed():
    def run_once() -> list[float]:
        line = Line(1, StoreStats(shopping=1, line_ids=[1]))
        sleeps = SleepLog()
        cashier = Cashier(1, line, tick_ms=30, rng=random.Random(9), sleep=sleeps)
        line.insert(_queued(1, line, items=5))
        cashier.poison()
        cashier.run()
        return sleeps.calls

    first = run_once()
    assert first == run_once()
    assert len(first) == 5
    assert all(0.3 <= s <= 0.6 for s in first)


def test_cashier_exits_on_poison_without_serving():
    rec = RecordingReporter()
    line = Line(1, StoreStats(shopping=0, line_ids=[1]))
    cashier = Cashier(3, line, reporter=rec)
    cashier.poison()
    cashier.run()

    assert cashier.served_count == 0
    [obs] = rec.observations
    assert obs.kind is ObservationKind.CASHIER_EXITED
    assert obs.cashier_id == 3
    assert obs.describe() == "[cashier 3] exits"

import queue

from store_checkout.observations import (
    ConsoleReporter,
    FanOutReporter,
    Observation,
    ObservationKind,
    QueueReporter,
    RecordingReporter,
)
from store_checkout.stats import StoreStats


def test_describe_line_event_includes_counters():
    stats = StoreStats(shopping=4, line_ids=[1, 2])
    snap = stats.enter_line(2)
    obs = Observation(ObservationKind.ENTERED_LINE, line_id=2, visitor_id=7, snapshot=snap)
    assert obs.describe() == "[line 2] visitor 7 entered | shopping=3 line=1 waiting=1 serving=0"


def test_describe_exits():
    assert Observation(ObservationKind.VISITOR_EXITED, visitor_id=4).describe() == "[visitor 4] exits"
    assert Observation(ObservationKind.CASHIER_EXITED, cashier_id=2).describe() == "[cashier 2] exits"


def test_console_reporter_prints_one_line_per_observation():
    printed = []
    reporter = ConsoleReporter(printer=printed.append)
    reporter(Observation(ObservationKind.CASHIER_EXITED, cashier_id=1))
    assert printed == ["[cashier 1] exits"]


def test_fan_out_forwards_to_every_reporter():
    rec = RecordingReporter()
    inbox: "queue.Queue[Observation]" = queue.Queue()
    fan = FanOutReporter([rec, QueueReporter(inbox)])
    obs = Observation(ObservationKind.VISITOR_EXITED, visitor_id=1)
    fan(obs)
    assert rec.observations == [obs]
    assert inbox.get_nowait() is obs

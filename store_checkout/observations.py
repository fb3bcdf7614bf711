"""Progress observations emitted at every state transition.

Lines, visitors and cashiers never print directly. They hand an `Observation`
to a reporter, which is any callable accepting one observation. This keeps the
simulation testable (record and inspect) and lets the GUI consume the same
stream as the console.

Line-level observations (entered/started/completed) are reported while the
line's lock is held, so for a given line the reported order is the order in
which the queue actually changed.
"""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable

from .stats import Snapshot


class ObservationKind(str, Enum):
    ENTERED_LINE = "entered_line"
    SERVICE_STARTED = "service_started"
    SERVICE_COMPLETED = "service_completed"
    VISITOR_EXITED = "visitor_exited"
    CASHIER_EXITED = "cashier_exited"


@dataclass(frozen=True)
class Observation:
    kind: ObservationKind
    line_id: int | None = None
    visitor_id: int | None = None
    cashier_id: int | None = None
    snapshot: Snapshot | None = None

    def describe(self) -> str:
        """Render a single human-readable line."""
        if self.kind is ObservationKind.VISITOR_EXITED:
            return f"[visitor {self.visitor_id}] exits"
        if self.kind is ObservationKind.CASHIER_EXITED:
            return f"[cashier {self.cashier_id}] exits"

        verb = {
            ObservationKind.ENTERED_LINE: "entered",
            ObservationKind.SERVICE_STARTED: "being served",
            ObservationKind.SERVICE_COMPLETED: "done",
        }[self.kind]
        s = self.snapshot
        counters = ""
        if s is not None:
            counters = (
                f" | shopping={s.shopping} line={s.waiting_in_line} "
                f"waiting={s.waiting_total} serving={s.serving}"
            )
        return f"[line {self.line_id}] visitor {self.visitor_id} {verb}{counters}"


Reporter = Callable[[Observation], None]


def null_reporter(observation: Observation) -> None:
    """Discard observations."""


class ConsoleReporter:
    """Print each observation on its own line."""

    def __init__(self, *, printer: Callable[[str], None] = print) -> None:
        self._printer = printer
        # Lines are printed from many threads at once.
        self._lock = threading.Lock()

    def __call__(self, observation: Observation) -> None:
        text = observation.describe()
        with self._lock:
            self._printer(text)


class RecordingReporter:
    """Keep every observation in arrival order."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: list[Observation] = []

    def __call__(self, observation: Observation) -> None:
        with self._lock:
            self._items.append(observation)

    @property
    def observations(self) -> list[Observation]:
        with self._lock:
            return list(self._items)

    def of_kind(self, kind: ObservationKind) -> list[Observation]:
        return [o for o in self.observations if o.kind is kind]


class QueueReporter:
    """Forward observations to a queue drained by another thread (the GUI)."""

    def __init__(self, inbox: "queue.Queue[Observation] | None" = None) -> None:
        self.inbox: "queue.Queue[Observation]" = inbox if inbox is not None else queue.Queue()

    def __call__(self, observation: Observation) -> None:
        self.inbox.put(observation)


class FanOutReporter:
    def __init__(self, reporters: Iterable[Reporter]) -> None:
        self._reporters = list(reporters)

    def __call__(self, observation: Observation) -> None:
        for r in self._reporters:
            r(observation)

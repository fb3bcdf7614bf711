from __future__ import annotations

# Visitor actor.
#
# A visitor's life in one thread:
# - shop: one timed step per item until it holds `max_items`
# - join its assigned line
# - block until the cashier removes it from the line
# - report that it exits
#
# The poison visitor (id POISON_ID) reuses this type so it can sit in a line,
# but it never shops, is never counted and has no thread of its own.

import random
import threading
import time
from enum import Enum
from typing import TYPE_CHECKING, Callable

from .errors import SimulationError
from .observations import Observation, ObservationKind, Reporter, null_reporter
from .shopping import sample_item_count, sample_shopping_delay

if TYPE_CHECKING:
    from .line import Line

POISON_ID = -1


class VisitorState(str, Enum):
    SHOPPING = "shopping"
    QUEUED = "queued"
    BEING_SERVED = "being_served"
    DONE = "done"


class Visitor:
    """One shopper, bound to the line it will join."""

    def __init__(
        self,
        visitor_id: int,
        line: Line,
        *,
        tick_ms: int = 0,
        max_items: int | None = None,
        rng: random.Random | None = None,
        sleep: Callable[[float], None] = time.sleep,
        reporter: Reporter = null_reporter,
    ) -> None:
        self.visitor_id = visitor_id
        self.line = line
        self.max_items = max_items if max_items is not None else sample_item_count(rng)
        self.items = 0
        self.state = VisitorState.SHOPPING

        self._tick_ms = tick_ms
        self._rng = rng
        self._sleep = sleep
        self._reporter = reporter

        # Set exactly once, by Line.complete_service().
        self._served = threading.Event()

    @classmethod
    def poison(cls, line: Line) -> Visitor:
        """Build the shutdown marker for `line`, already in the queued state."""
        v = cls(POISON_ID, line, max_items=0)
        v.state = VisitorState.QUEUED
        return v

    @property
    def is_poison(self) -> bool:
        return self.visitor_id == POISON_ID

    # -------------------- actor --------------------

    def run(self) -> None:
        """Shop, queue, wait to be served, exit."""
        if self.is_poison:
            raise SimulationError("the poison visitor has no actor")

        while self.items < self.max_items:
            self._sleep(sample_shopping_delay(tick_ms=self._tick_ms, rng=self._rng))
            self.items += 1

        self.state = VisitorState.QUEUED
        self.line.insert(self)
        self.line.await_completion(self)

        self.state = VisitorState.DONE
        self._reporter(
            Observation(
                kind=ObservationKind.VISITOR_EXITED,
                line_id=self.line.line_id,
                visitor_id=self.visitor_id,
            )
        )

    # -------------------- called by Line --------------------

    def start_service(self) -> None:
        self.state = VisitorState.BEING_SERVED

    def notify_served(self) -> None:
        self._served.set()

    def wait_served(self) -> None:
        self._served.wait()

    def __repr__(self) -> str:
        return f"Visitor(visitor_id={self.visitor_id}, items={self.items}, state={self.state.value})"

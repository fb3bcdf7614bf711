from __future__ import annotations

# Cashier actor.
#
# Each cashier owns exactly one line and loops:
# - wait for the next visitor at the head of its line
# - "scan" the visitor's items, one delay per item
# - remove the visitor from the line, which lets the visitor thread exit
#
# The loop ends when the head is the poison visitor. Poison is left in the
# line: nobody waits on it and the line is not used afterwards.

import random
import time
from enum import Enum
from typing import Callable

from .line import Line
from .observations import Observation, ObservationKind, Reporter, null_reporter
from .service_time import sample_item_delay
from .visitor import Visitor


class CashierState(str, Enum):
    IDLE = "idle"
    SERVING = "serving"
    TERMINATED = "terminated"


class Cashier:
    def __init__(
        self,
        cashier_id: int,
        line: Line,
        *,
        tick_ms: int = 0,
        rng: random.Random | None = None,
        sleep: Callable[[float], None] = time.sleep,
        reporter: Reporter = null_reporter,
        item_delay: Callable[[], float] | None = None,
    ) -> None:
        self.cashier_id = cashier_id
        self.line = line
        self.state = CashierState.IDLE
        self.current: Visitor | None = None
        self.served_count = 0

        self._sleep = sleep
        self._reporter = reporter
        if item_delay is None:

            def item_delay() -> float:
                return sample_item_delay(tick_ms=tick_ms, rng=rng)

        self._item_delay = item_delay

    def poison(self) -> None:
        """Queue the shutdown marker behind everyone else in this cashier's line."""
        self.line.insert(Visitor.poison(self.line))

    def run(self) -> None:
        while True:
            visitor = self.line.next_to_serve()
            if visitor.is_poison:
                break

            self.state = CashierState.SERVING
            self.current = visitor
            for _ in range(visitor.items):
                self._sleep(self._item_delay())

            self.line.complete_service()
            self.served_count += 1
            self.current = None
            self.state = CashierState.IDLE

        self.state = CashierState.TERMINATED
        self._reporter(
            Observation(
                kind=ObservationKind.CASHIER_EXITED,
                line_id=self.line.line_id,
                cashier_id=self.cashier_id,
            )
        )

    def __repr__(self) -> str:
        return f"Cashier(cashier_id={self.cashier_id}, state={self.state.value}, served={self.served_count})"

from __future__ import annotations

# Dashboard state, folded from the observation stream.
#
# Kept free of Tkinter so it can be tested headless; gui.py only renders it.

from dataclasses import dataclass

from .config import StoreConfig
from .observations import Observation, ObservationKind
from .stats import Snapshot


@dataclass
class LineRow:
    """What the table shows for one line."""

    line_id: int
    waiting: int = 0
    in_service: int | None = None
    served: int = 0
    cashier: str = "open"

    def values(self) -> tuple[str, str, str, str, str]:
        current = "-" if self.in_service is None else f"visitor {self.in_service}"
        return (f"Line {self.line_id}", str(self.waiting), current, str(self.served), self.cashier)


class DashboardModel:
    """UI-independent state folded from the observation stream."""

    def __init__(self, config: StoreConfig) -> None:
        self.config = config
        self.rows: dict[int, LineRow] = {lid: LineRow(lid) for lid in range(1, config.cashiers + 1)}
        self.latest: Snapshot | None = None
        self.visitors_done = 0

    def apply(self, obs: Observation) -> None:
        s = obs.snapshot
        # Lines report concurrently, so snapshots can arrive out of order.
        if s is not None and (self.latest is None or s.version > self.latest.version):
            self.latest = s
            for lid, waiting in s.waiting_by_line.items():
                self.rows[lid].waiting = waiting

        if obs.line_id is None:
            return
        row = self.rows[obs.line_id]

        if obs.kind is ObservationKind.SERVICE_STARTED:
            row.in_service = obs.visitor_id
        elif obs.kind is ObservationKind.SERVICE_COMPLETED:
            row.in_service = None
            row.served += 1
        elif obs.kind is ObservationKind.VISITOR_EXITED:
            self.visitors_done += 1
        elif obs.kind is ObservationKind.CASHIER_EXITED:
            row.cashier = "closed"

    def summary(self) -> str:
        s = self.latest
        shopping = self.config.visitors if s is None else s.shopping
        waiting = 0 if s is None else s.waiting_total
        serving = 0 if s is None else s.serving
        return (
            f"Shopping: {shopping} | Waiting: {waiting} | Serving: {serving} | "
            f"Left the store: {self.visitors_done}/{self.config.visitors}"
        )

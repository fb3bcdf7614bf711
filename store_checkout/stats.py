from __future__ import annotations

# Aggregate counters shared by every line.
#
# One StoreStats is built by the orchestrator and handed to each Line. It has
# its own lock, separate from any line's lock. Callers that already hold a
# line lock may take this one (line lock first, stats lock second); nothing
# ever blocks while holding it.

import threading
from dataclasses import dataclass
from typing import Iterable, Mapping


@dataclass(frozen=True)
class Snapshot:
    """Counter values captured atomically under the stats lock.

    `version` counts the transitions applied so far, so of two snapshots the
    one with the higher version is the more recent.
    """

    shopping: int
    waiting_total: int
    serving: int
    departed: int
    version: int
    waiting_by_line: Mapping[int, int]
    line_id: int | None = None

    @property
    def waiting_in_line(self) -> int | None:
        if self.line_id is None:
            return None
        return self.waiting_by_line[self.line_id]

    @property
    def in_store(self) -> int:
        """Visitors shopping, waiting or being served."""
        return self.shopping + self.waiting_total + self.serving

    @property
    def population(self) -> int:
        """Every visitor of the run, including those already served."""
        return self.in_store + self.departed


class StoreStats:
    """Process-wide shopping/waiting/serving counters."""

    def __init__(self, shopping: int, line_ids: Iterable[int]) -> None:
        if shopping < 0:
            raise ValueError("shopping must be >= 0")
        self._lock = threading.Lock()
        self._shopping = shopping
        self._waiting_total = 0
        self._serving = 0
        self._departed = 0
        self._version = 0
        self._waiting_by_line: dict[int, int] = {lid: 0 for lid in line_ids}

    # -------------------- transitions --------------------

    def enter_line(self, line_id: int) -> Snapshot:
        """A visitor stopped shopping and joined `line_id`."""
        with self._lock:
            self._version += 1
            self._shopping -= 1
            self._waiting_by_line[line_id] += 1
            self._waiting_total += 1
            return self._snapshot(line_id)

    def start_service(self, line_id: int) -> Snapshot:
        """The head of `line_id` moved from waiting to being served."""
        with self._lock:
            self._version += 1
            self._waiting_by_line[line_id] -= 1
            self._waiting_total -= 1
            self._serving += 1
            return self._snapshot(line_id)

    def finish_service(self, line_id: int) -> Snapshot:
        with self._lock:
            self._version += 1
            self._serving -= 1
            self._departed += 1
            return self._snapshot(line_id)

    # -------------------- reads --------------------

    def snapshot(self, line_id: int | None = None) -> Snapshot:
        with self._lock:
            return self._snapshot(line_id)

    def _snapshot(self, line_id: int | None) -> Snapshot:
        return Snapshot(
            shopping=self._shopping,
            waiting_total=self._waiting_total,
            serving=self._serving,
            departed=self._departed,
            version=self._version,
            waiting_by_line=dict(self._waiting_by_line),
            line_id=line_id,
        )

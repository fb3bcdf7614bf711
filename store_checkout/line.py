from __future__ import annotations

# Checkout line: the shared object between many visitors and one cashier.
#
# Protocol for one real visitor, in order:
#   visitor  -> insert(v)           append at the tail, count as waiting
#   cashier  -> next_to_serve()     block until something is unserved, peek head
#   cashier  -> complete_service()  pop head, wake that visitor
#   visitor  -> await_completion(v) returns once popped
#
# The head is peeked, not popped, by next_to_serve(). A visitor stays at the
# front of the line until its service is complete, so complete_service() is
# the single point where a visitor is "done".
#
# The poison visitor is appended and handed out like any other, but it never
# touches the counters, is never popped and nobody waits on it.

import threading
from collections import deque
from typing import TYPE_CHECKING

from .errors import LineStateError
from .observations import Observation, ObservationKind, Reporter, null_reporter
from .stats import Snapshot, StoreStats

if TYPE_CHECKING:
    from .visitor import Visitor


class Line:
    """FIFO queue of visitors guarded by its own lock."""

    def __init__(self, line_id: int, stats: StoreStats, *, reporter: Reporter = null_reporter) -> None:
        self.line_id = line_id
        self._stats = stats
        self._reporter = reporter

        self._queue: deque[Visitor] = deque()
        self._lock = threading.Lock()

        # Signalled once per insert; next_to_serve consumes one unit per call.
        self._available = threading.Condition(self._lock)
        self._unserved = 0

        self._in_service: Visitor | None = None

    # -------------------- visitor side --------------------

    def insert(self, visitor: Visitor) -> None:
        """Append `visitor` at the tail of the line."""
        if visitor.line is not self:
            raise LineStateError(
                self.line_id, f"visitor {visitor.visitor_id} belongs to line {visitor.line.line_id}"
            )

        with self._lock:
            self._queue.append(visitor)
            if not visitor.is_poison:
                snapshot = self._stats.enter_line(self.line_id)
                self._report(ObservationKind.ENTERED_LINE, visitor, snapshot)

            # Poison signals too, or an idle cashier would never wake up.
            self._unserved += 1
            self._available.notify()

    def await_completion(self, visitor: Visitor) -> None:
        """Block until `visitor` has been served and removed from this line."""
        if visitor.line is not self:
            raise LineStateError(self.line_id, f"visitor {visitor.visitor_id} is not in this line")
        visitor.wait_served()

    # -------------------- cashier side --------------------

    def next_to_serve(self) -> Visitor:
        """Block until a visitor is waiting, then return the head without removing it."""
        with self._available:
            if self._in_service is not None:
                raise LineStateError(
                    self.line_id, f"visitor {self._in_service.visitor_id} is still being served"
                )

            self._available.wait_for(lambda: self._unserved > 0)
            self._unserved -= 1

            head = self._queue[0]
            if not head.is_poison:
                head.start_service()
                self._in_service = head
                snapshot = self._stats.start_service(self.line_id)
                self._report(ObservationKind.SERVICE_STARTED, head, snapshot)
            return head

    def complete_service(self) -> Visitor:
        """Remove the visitor being served from the head and wake it up."""
        with self._lock:
            head = self._in_service
            if head is None:
                raise LineStateError(self.line_id, "no visitor is being served")

            snapshot = self._stats.finish_service(self.line_id)
            removed = self._queue.popleft()
            self._in_service = None
            self._report(ObservationKind.SERVICE_COMPLETED, removed, snapshot)

        # Exactly one wakeup per removal, outside the critical section.
        removed.notify_served()
        return removed

    # -------------------- inspection --------------------

    @property
    def waiting(self) -> int:
        """Visitors in this line not yet being served (poison excluded)."""
        return self._stats.snapshot(self.line_id).waiting_by_line[self.line_id]

    def visitor_ids(self) -> list[int]:
        """Ids currently in the line, head first."""
        with self._lock:
            return [v.visitor_id for v in self._queue]

    def __len__(self) -> int:
        with self._lock:
            return len(self._queue)

    def __repr__(self) -> str:
        return f"Line(line_id={self.line_id})"

    def _report(self, kind: ObservationKind, visitor: Visitor, snapshot: Snapshot) -> None:
        self._reporter(
            Observation(kind=kind, line_id=self.line_id, visitor_id=visitor.visitor_id, snapshot=snapshot)
        )

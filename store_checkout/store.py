from __future__ import annotations

# Store orchestrator.
#
# Builds N lines (sharing one StoreStats), N cashiers and M visitors, runs
# every actor on its own thread and shuts down in two phases:
# 1) join every visitor thread. A visitor only returns after its cashier
#    removed it, so afterwards no real visitor is left in any line.
# 2) poison each line once and join every cashier thread.
# Poison can therefore never overtake a real visitor in the same line.

import random
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Sequence

from .cashier import Cashier
from .config import StoreConfig
from .line import Line
from .observations import Reporter, null_reporter
from .stats import Snapshot, StoreStats
from .visitor import Visitor

LineChooser = Callable[[random.Random, Sequence[Line]], Line]


def choose_uniform(rng: random.Random, lines: Sequence[Line]) -> Line:
    """Pick a line uniformly at random."""
    return rng.choice(lines)


def _spawn(rng: random.Random) -> random.Random:
    return random.Random(rng.getrandbits(64))


@dataclass
class StoreResult:
    final: Snapshot
    served_by_cashier: dict[int, int] = field(default_factory=dict)
    assignments: dict[int, int] = field(default_factory=dict)  # visitor id -> line id
    elapsed_seconds: float = 0.0

    @property
    def total_served(self) -> int:
        return sum(self.served_by_cashier.values())


def run_store(
    config: StoreConfig,
    *,
    reporter: Reporter = null_reporter,
    rng: random.Random | None = None,
    sleep: Callable[[float], None] = time.sleep,
    choose_line: LineChooser = choose_uniform,
) -> StoreResult:
    """Run one complete simulation and return once every cashier has exited."""
    config.validate()
    if rng is None:
        rng = random.Random(config.seed)

    line_ids = range(1, config.cashiers + 1)
    stats = StoreStats(shopping=config.visitors, line_ids=line_ids)
    lines = [Line(lid, stats, reporter=reporter) for lid in line_ids]

    # Each actor gets its own generator, seeded here before any thread starts.
    cashiers = [
        Cashier(
            line.line_id,
            line,
            tick_ms=config.tick_ms,
            rng=_spawn(rng),
            sleep=sleep,
            reporter=reporter,
        )
        for line in lines
    ]
    visitors = [
        Visitor(
            vid,
            choose_line(rng, lines),
            tick_ms=config.tick_ms,
            rng=_spawn(rng),
            sleep=sleep,
            reporter=reporter,
        )
        for vid in range(1, config.visitors + 1)
    ]

    started = time.monotonic()

    cashier_threads = [
        threading.Thread(target=c.run, name=f"cashier-{c.cashier_id}") for c in cashiers
    ]
    visitor_threads = [
        threading.Thread(target=v.run, name=f"visitor-{v.visitor_id}") for v in visitors
    ]

    for t in cashier_threads:
        t.start()
    for t in visitor_threads:
        t.start()

    for t in visitor_threads:
        t.join()

    for c, t in zip(cashiers, cashier_threads):
        c.poison()
        t.join()

    return StoreResult(
        final=stats.snapshot(),
        served_by_cashier={c.cashier_id: c.served_count for c in cashiers},
        assignments={v.visitor_id: v.line.line_id for v in visitors},
        elapsed_seconds=time.monotonic() - started,
    )

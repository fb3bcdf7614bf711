from __future__ import annotations

# Simple GUI dashboard (Tkinter).
#
# Goal: show the same information as the console output, but live in a small
# window: the aggregate counters and one row per checkout line.
#
# Architecture:
# - The simulation runs on a background thread.
# - Tkinter must be updated from the main UI thread.
# - We therefore push observations into a Queue and poll it via
#   `root.after(...)`.

import queue
import threading
import tkinter as tk
from tkinter import ttk
from typing import Any, cast

from .config import StoreConfig
from .dashboard import DashboardModel
from .observations import (
    ConsoleReporter,
    FanOutReporter,
    Observation,
    QueueReporter,
    Reporter,
)
from .store import StoreResult, run_store


class DashboardApp:
    def __init__(self, *, config: StoreConfig, refresh_ms: int = 100, echo: bool = True) -> None:
        self.config = config
        self.refresh_ms = refresh_ms
        self.model = DashboardModel(config)

        self.root = tk.Tk()
        self.root.title("Store Checkout Dashboard")
        self.root.geometry("720x420")

        # Top info bar
        self.info_var = tk.StringVar(value="Starting...")
        info = ttk.Label(self.root, textvariable=self.info_var)
        info.pack(fill=cast(Any, tk.X), padx=10, pady=(10, 5))

        # Table of lines
        cols = ("line", "waiting", "in_service", "served", "cashier")
        self.tree = ttk.Treeview(self.root, columns=cols, show="headings", height=12)
        self.tree.heading("line", text="Line")
        self.tree.heading("waiting", text="Waiting")
        self.tree.heading("in_service", text="Being served")
        self.tree.heading("served", text="Served visitors")
        self.tree.heading("cashier", text="Cashier")

        self.tree.column("line", width=100, anchor=cast(Any, tk.W))
        self.tree.column("waiting", width=90, anchor=cast(Any, tk.E))
        self.tree.column("in_service", width=140, anchor=cast(Any, tk.W))
        self.tree.column("served", width=130, anchor=cast(Any, tk.E))
        self.tree.column("cashier", width=100, anchor=cast(Any, tk.W))

        self.tree.pack(fill=cast(Any, tk.BOTH), expand=True, padx=10, pady=10)

        help_text = (
            f"M={config.visitors} visitors, N={config.cashiers} cashiers, tick={config.tick_ms}ms"
        )
        ttk.Label(self.root, text=help_text).pack(fill=cast(Any, tk.X), padx=10, pady=(0, 10))

        # Observations from simulation threads
        self._queue_reporter = QueueReporter()
        self._inbox: "queue.Queue[Observation]" = self._queue_reporter.inbox
        reporters: list[Reporter] = [self._queue_reporter]
        if echo:
            reporters.append(ConsoleReporter())
        self._reporter = FanOutReporter(reporters)

        self._worker: threading.Thread | None = None
        self._result: StoreResult | None = None

        self.root.protocol("WM_DELETE_WINDOW", self.close)

    def start(self) -> None:
        self._worker = threading.Thread(target=self._simulate, name="store", daemon=True)
        self._worker.start()

        self._render()
        self.root.after(cast(Any, self.refresh_ms), self._drain_inbox)
        self.root.mainloop()

    def close(self) -> None:
        self.root.destroy()

    # -------------------- simulation thread --------------------

    def _simulate(self) -> None:
        self._result = run_store(self.config, reporter=self._reporter)

    # -------------------- UI thread polling --------------------

    def _drain_inbox(self) -> None:
        changed = False
        while True:
            try:
                obs = self._inbox.get_nowait()
            except queue.Empty:
                break
            self.model.apply(obs)
            changed = True

        if changed:
            self._render()

        finished = self._worker is not None and not self._worker.is_alive()
        if finished and self._inbox.empty():
            result = self._result
            if result is not None:
                self.info_var.set(
                    f"{self.model.summary()} | closed after {result.elapsed_seconds:0.1f}s"
                )
            return

        self.root.after(cast(Any, self.refresh_ms), self._drain_inbox)

    def _render(self) -> None:
        self.info_var.set(self.model.summary())

        for item in self.tree.get_children():
            self.tree.delete(item)

        for lid in sorted(self.model.rows):
            self.tree.insert("", cast(Any, tk.END), values=self.model.rows[lid].values())

from __future__ import annotations

# Single-entrypoint runner.
#
#     python -m store_checkout.app run --visitors M --cashiers N --tick T [--seed S] [--gui]
#
# Any of M, N, T left off the command line is prompted for on stdin.

import argparse

from .config import StoreConfig, prompt_config
from .observations import ConsoleReporter, null_reporter
from .store import StoreResult, run_store


def main() -> None:
    parser = argparse.ArgumentParser(description="Store checkout simulation - main entrypoint")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_run = sub.add_parser("run", help="Run visitors and cashiers until every line is drained")
    p_run.add_argument("--visitors", type=int, default=None, help="number of visitors, M (prompted if omitted)")
    p_run.add_argument("--cashiers", type=int, default=None, help="number of cashiers/lines, N (prompted if omitted)")
    p_run.add_argument("--tick", type=int, default=None, help="time scale in milliseconds (prompted if omitted)")
    p_run.add_argument("--seed", type=int, default=None)
    p_run.add_argument("--quiet", action="store_true", help="only print the final summary")
    p_run.add_argument("--gui", action="store_true", help="open Tkinter dashboard")

    args = parser.parse_args()

    if args.cmd == "run":
        config = prompt_config(
            visitors=args.visitors,
            cashiers=args.cashiers,
            tick_ms=args.tick,
            seed=args.seed,
        )

        if args.gui:
            from .gui import DashboardApp

            DashboardApp(config=config, echo=not args.quiet).start()
            return

        run(config, quiet=args.quiet)
        return


def run(config: StoreConfig, *, quiet: bool = False) -> StoreResult:
    reporter = null_reporter if quiet else ConsoleReporter()

    if not quiet:
        print(
            f"[store] started: visitors={config.visitors}, cashiers={config.cashiers}, "
            f"tick={config.tick_ms}ms, seed={config.seed}"
        )

    result = run_store(config, reporter=reporter)

    served = ", ".join(f"C{cid}={n}" for cid, n in sorted(result.served_by_cashier.items()))
    final = result.final
    print(
        f"[store] closed after {result.elapsed_seconds:0.2f}s: served {result.total_served} ({served}) | "
        f"shopping={final.shopping} waiting={final.waiting_total} serving={final.serving}"
    )
    return result


if __name__ == "__main__":
    main()

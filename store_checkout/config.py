from __future__ import annotations

# Startup configuration.
#
# A run needs three integers: visitors (M), cashiers/lines (N) and the tick
# length in milliseconds. They come from the command line; anything missing
# there is asked for on stdin, one prompt per value.
#
# Non-integer input is not caught: the ValueError from int() ends the program.

from dataclasses import dataclass
from typing import Callable

from .errors import InvalidConfiguration

PROMPTS: tuple[tuple[str, str], ...] = (
    ("visitors", "Number of visitors, M: "),
    ("cashiers", "Number of cashiers, N: "),
    ("tick_ms", "Time scale (milliseconds, recommend 30): "),
)


@dataclass(frozen=True)
class StoreConfig:
    visitors: int
    cashiers: int
    tick_ms: int
    seed: int | None = None

    def validate(self) -> StoreConfig:
        """Return self if every value is in range, else raise InvalidConfiguration."""
        if self.visitors < 0:
            raise InvalidConfiguration("visitors must be >= 0")
        if self.cashiers <= 0:
            raise InvalidConfiguration("cashiers must be > 0")
        if self.tick_ms < 0:
            raise InvalidConfiguration("tick_ms must be >= 0")
        return self


def prompt_config(
    *,
    visitors: int | None = None,
    cashiers: int | None = None,
    tick_ms: int | None = None,
    seed: int | None = None,
    input_fn: Callable[[str], str] = input,
) -> StoreConfig:
    """Fill in missing values interactively and build a validated config."""

    def ask(value: int | None, prompt: str) -> int:
        if value is not None:
            return value
        return int(input_fn(prompt).strip())

    prompts = dict(PROMPTS)
    return StoreConfig(
        visitors=ask(visitors, prompts["visitors"]),
        cashiers=ask(cashiers, prompts["cashiers"]),
        tick_ms=ask(tick_ms, prompts["tick_ms"]),
        seed=seed,
    ).validate()

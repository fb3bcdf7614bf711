"""Shared exception types.

Errors here are never retried: a bad configuration stops the run before any
thread starts, and a line protocol violation is a bug in the caller.
"""

from __future__ import annotations


class SimulationError(Exception):
    """Base class for all checkout simulation errors."""


class InvalidConfiguration(SimulationError, ValueError):
    """Startup parameters are out of range."""


class LineStateError(SimulationError):
    """A line operation was called in a state where it makes no sense."""

    def __init__(self, line_id: int, message: str) -> None:
        super().__init__(f"line {line_id}: {message}")
        self.line_id = line_id

"""Exceptions raised by the analytics engine."""

from __future__ import annotations


class InvalidRangeError(ValueError):
    """A week index or week range that breaks the caller contract."""

    def __init__(self, message: str, week_range: tuple | None = None) -> None:
        self.week_range = week_range
        super().__init__(message)

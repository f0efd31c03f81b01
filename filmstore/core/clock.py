"""Year sources used to compute a film's age."""
from __future__ import annotations

from datetime import date
from typing import Protocol


class YearSource(Protocol):
    """Anything that can tell the current calendar year."""

    def current_year(self) -> int:
        ...


class SystemClock:
    """Reads the year from the local calendar date."""

    def current_year(self) -> int:
        return date.today().year


class FixedClock:
    """Always reports the same year."""

    def __init__(self, year: int):
        self._year = year

    def current_year(self) -> int:
        return self._year

    def __repr__(self) -> str:
        return f"FixedClock({self._year})"

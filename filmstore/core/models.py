"""Domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .clock import SystemClock, YearSource


class FilmState(Enum):
    """Lifecycle state of a film relative to the database."""
    TRANSIENT = "transient"    # built in memory, never inserted
    PERSISTED = "persisted"    # has a database id


@dataclass
class Film:
    """A film as stored in the ``films`` table.

    ``id`` is not a constructor argument: it stays ``None`` until the
    persistence layer inserts the film or loads it from a row.
    """
    title: str
    year: int
    duration: int  # minutes
    id: Optional[int] = field(default=None, init=False)

    @property
    def state(self) -> FilmState:
        return FilmState.TRANSIENT if self.id is None else FilmState.PERSISTED

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def get_age(self, clock: Optional[YearSource] = None) -> int:
        """Years since release, according to ``clock`` (system clock by default)."""
        clock = clock or SystemClock()
        return clock.current_year() - self.year

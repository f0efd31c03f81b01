"""Exceptions raised by the film store."""
from __future__ import annotations

from typing import Optional


class FilmStoreError(Exception):
    """Base class for all film store errors."""


class DatabaseConnectionError(FilmStoreError):
    """The database could not be opened or the handle is closed."""


class StatementError(FilmStoreError):
    """A statement failed: malformed SQL or a constraint violation."""

    def __init__(self, message: str, sql: Optional[str] = None):
        super().__init__(message)
        self.sql = sql


class FilmNotFoundError(FilmStoreError):
    """No row matches the requested film id."""

    def __init__(self, film_id: int):
        super().__init__(f"Film not found: {film_id}")
        self.film_id = film_id


class FilmStateError(FilmStoreError):
    """An operation does not fit the film's lifecycle state."""

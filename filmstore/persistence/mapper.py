"""Data Mapper: film persistence kept outside the film object."""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..core.errors import FilmNotFoundError, FilmStateError
from ..core.models import Film
from ..core.protocols import Database

logger = logging.getLogger(__name__)

FilmFactory = Callable[[str, int, int], Film]

SELECT_ONE_SQL = "SELECT * FROM films WHERE films.id = :id"
SELECT_ALL_SQL = "SELECT * FROM films"
INSERT_SQL = (
    "INSERT INTO films (id, title, year, duration) "
    "VALUES (NULL, :title, :year, :duration)"
)
UPDATE_SQL = (
    "UPDATE films SET title = :title, year = :year, duration = :duration "
    "WHERE id = :id"
)
DELETE_SQL = "DELETE FROM films WHERE films.id = :id"


class FilmMapper:
    """Maps ``Film`` objects to rows of the ``films`` table.

    Implements the FilmRepository protocol. Values are always bound as
    named parameters, never formatted into the SQL text.
    """

    def __init__(self, database: Database, factory: Optional[FilmFactory] = None):
        """Initialize mapper.

        Args:
            database: Open database handle.
            factory: Builds a film from (title, year, duration). Defaults to
                ``Film``; the Active Record face passes its own class here.
        """
        self._database = database
        self._factory: FilmFactory = factory or Film

    @property
    def database(self) -> Database:
        return self._database

    def find(self, film_id: int) -> Optional[Film]:
        """Get film by id, or None if no row matches."""
        rows = self._database.query(SELECT_ONE_SQL, {"id": film_id})
        if not rows:
            return None
        return self._row_to_film(rows[0])

    def get(self, film_id: int) -> Film:
        """Get film by id.

        Raises:
            FilmNotFoundError: If no row matches.
        """
        film = self.find(film_id)
        if film is None:
            raise FilmNotFoundError(film_id)
        return film

    def find_all(self) -> list[Film]:
        """Get all films. No ORDER BY: the order is whatever the database returns."""
        return [self._row_to_film(row) for row in self._database.query(SELECT_ALL_SQL)]

    def save(self, film: Film) -> None:
        """Insert a transient film and assign the generated id to it.

        Raises:
            FilmStateError: If the film already has an id.
            StatementError: If the insert fails.
        """
        if film.is_persisted:
            raise FilmStateError(f"Film {film.id} is already persisted; use update()")
        cursor = self._database.execute(INSERT_SQL, self._params(film))
        film.id = cursor.lastrowid
        logger.debug("Inserted film %r with id %s", film.title, film.id)

    def update(self, film: Film) -> bool:
        """Overwrite the film's row with its current values.

        Returns:
            True if a row matched the film's id. A missing row is not an error.
        """
        self._require_persisted(film, "update")
        params = self._params(film)
        params["id"] = film.id
        cursor = self._database.execute(UPDATE_SQL, params)
        updated = cursor.rowcount > 0
        logger.debug("Updated film %s (%s)", film.id, "ok" if updated else "no matching row")
        return updated

    def delete(self, film: Film) -> bool:
        """Remove the film's row.

        Returns:
            True if a row was deleted.
        """
        self._require_persisted(film, "delete")
        cursor = self._database.execute(DELETE_SQL, {"id": film.id})
        deleted = cursor.rowcount > 0
        logger.debug("Deleted film %s (%s)", film.id, "ok" if deleted else "no matching row")
        return deleted

    def _row_to_film(self, row: Any) -> Film:
        """Convert database row to a persisted film."""
        film = self._factory(row["title"], row["year"], row["duration"])
        film.id = row["id"]
        return film

    @staticmethod
    def _params(film: Film) -> dict[str, Any]:
        return {"title": film.title, "year": film.year, "duration": film.duration}

    @staticmethod
    def _require_persisted(film: Film, action: str) -> None:
        if not film.is_persisted:
            raise FilmStateError(f"Cannot {action} a film that was never saved: {film.title!r}")

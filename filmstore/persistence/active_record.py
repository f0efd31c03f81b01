"""Active Record: films that load and persist themselves.

The SQL is shared with ``FilmMapper``; an ``ActiveFilm`` only carries the
database handle it was created with and hands itself to a mapper.
"""
from __future__ import annotations

from typing import Optional

from ..core.errors import FilmNotFoundError
from ..core.models import Film
from ..core.protocols import Database
from .mapper import FilmMapper


class ActiveFilm(Film):
    """A film bound to a database handle.

    Usage:
        film = ActiveFilm("Inception", 2010, 148, database=db)
        film.save()
        film.duration = 150
        film.update()
        ActiveFilm.get(db, film.id)
    """

    def __init__(self, title: str, year: int, duration: int, *, database: Database):
        super().__init__(title, year, duration)
        self._database = database

    @property
    def database(self) -> Database:
        return self._database

    # --- Instance persistence ---

    def save(self) -> None:
        """Insert this film and take the generated id."""
        self._mapper(self._database).save(self)

    def update(self) -> bool:
        """Write current values to this film's row."""
        return self._mapper(self._database).update(self)

    def delete(self) -> bool:
        """Remove this film's row."""
        return self._mapper(self._database).delete(self)

    # --- Finders ---

    @classmethod
    def find(cls, database: Database, film_id: int) -> Optional["ActiveFilm"]:
        return cls._mapper(database).find(film_id)

    @classmethod
    def get(cls, database: Database, film_id: int) -> "ActiveFilm":
        film = cls.find(database, film_id)
        if film is None:
            raise FilmNotFoundError(film_id)
        return film

    @classmethod
    def find_all(cls, database: Database) -> list["ActiveFilm"]:
        return cls._mapper(database).find_all()

    @classmethod
    def _mapper(cls, database: Database) -> FilmMapper:
        def factory(title: str, year: int, duration: int) -> "ActiveFilm":
            return cls(title, year, duration, database=database)
        return FilmMapper(database, factory=factory)


class ActiveRecordRepository:
    """FilmRepository backed by ``ActiveFilm``.

    Lets callers that only know the repository protocol use the Active
    Record variant. Plain ``Film`` objects are accepted; their id is kept
    in sync with the record that persisted them.
    """

    def __init__(self, database: Database):
        self._database = database

    @property
    def database(self) -> Database:
        return self._database

    def find(self, film_id: int) -> Optional[ActiveFilm]:
        return ActiveFilm.find(self._database, film_id)

    def get(self, film_id: int) -> ActiveFilm:
        return ActiveFilm.get(self._database, film_id)

    def find_all(self) -> list[ActiveFilm]:
        return ActiveFilm.find_all(self._database)

    def save(self, film: Film) -> None:
        record = self._as_record(film)
        record.save()
        if record is not film:
            film.id = record.id

    def update(self, film: Film) -> bool:
        return self._as_record(film).update()

    def delete(self, film: Film) -> bool:
        return self._as_record(film).delete()

    def _as_record(self, film: Film) -> ActiveFilm:
        if isinstance(film, ActiveFilm) and film.database is self._database:
            return film
        record = ActiveFilm(film.title, film.year, film.duration, database=self._database)
        record.id = film.id
        return record

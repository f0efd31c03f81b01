"""Protocol definitions (interfaces) for dependency injection."""
from __future__ import annotations

from abc import abstractmethod
from typing import Any, Mapping, Optional, Protocol, Sequence

from .models import Film


class Database(Protocol):
    """Interface for the database handle the repositories run on.

    Statements use named placeholders (``:name``) and values are always
    passed separately in ``params``.
    """

    @abstractmethod
    def execute(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Run one statement and commit. Returns a cursor exposing
        ``lastrowid`` and ``rowcount``."""
        ...

    @abstractmethod
    def query(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> Sequence[Any]:
        """Run a SELECT and return all rows, addressable by column name."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Release the connection."""
        ...


class FilmRepository(Protocol):
    """Interface for film persistence.

    Implementations:
    - FilmMapper: persistence in a separate mapper object (Data Mapper)
    - ActiveRecordRepository: persistence on the film itself (Active Record)
    """

    @abstractmethod
    def find(self, film_id: int) -> Optional[Film]:
        """Get film by id, or None if no row matches."""
        ...

    @abstractmethod
    def get(self, film_id: int) -> Film:
        """Get film by id. Raises FilmNotFoundError if no row matches."""
        ...

    @abstractmethod
    def find_all(self) -> list[Film]:
        """Get all films, in whatever order the database returns them."""
        ...

    @abstractmethod
    def save(self, film: Film) -> None:
        """Insert a transient film and assign its new id."""
        ...

    @abstractmethod
    def update(self, film: Film) -> bool:
        """Overwrite the row for a persisted film. Returns True if a row matched."""
        ...

    @abstractmethod
    def delete(self, film: Film) -> bool:
        """Remove the row for a persisted film. Returns True if a row was removed."""
        ...

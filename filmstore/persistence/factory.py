"""Repository construction by pattern name."""
from __future__ import annotations

from typing import Union

from ..core.config import StorePattern
from ..core.protocols import Database, FilmRepository
from .active_record import ActiveRecordRepository
from .mapper import FilmMapper


def create_repository(
    pattern: Union[StorePattern, str],
    database: Database,
) -> FilmRepository:
    """Create a film repository.

    Args:
        pattern: "data-mapper" or "active-record".
        database: Open database handle injected into the repository.

    Returns:
        Repository implementing the FilmRepository protocol.
    """
    pattern = StorePattern(pattern)
    if pattern == StorePattern.ACTIVE_RECORD:
        return ActiveRecordRepository(database)
    return FilmMapper(database)

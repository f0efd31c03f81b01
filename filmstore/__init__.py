"""Film storage with two data-access patterns: Active Record and Data Mapper.

Both patterns share one implementation of the SQL and take the database
handle by injection.
"""

__version__ = "1.0.0"

# Core exports
from .core.clock import FixedClock, SystemClock, YearSource
from .core.config import StoreConfig, StorePattern
from .core.errors import (
    DatabaseConnectionError,
    FilmNotFoundError,
    FilmStateError,
    FilmStoreError,
    StatementError,
)
from .core.models import Film, FilmState
from .core.protocols import Database, FilmRepository

# Persistence exports
from .persistence.active_record import ActiveFilm, ActiveRecordRepository
from .persistence.database import SQLiteDatabase, open_database
from .persistence.factory import create_repository
from .persistence.mapper import FilmMapper

# Logging exports
from .logging.rich_logger import FilmReporter

__all__ = [
    # Core
    "Film",
    "FilmState",
    "YearSource",
    "SystemClock",
    "FixedClock",
    "Database",
    "FilmRepository",
    "StoreConfig",
    "StorePattern",
    # Errors
    "FilmStoreError",
    "DatabaseConnectionError",
    "StatementError",
    "FilmNotFoundError",
    "FilmStateError",
    # Persistence
    "SQLiteDatabase",
    "open_database",
    "FilmMapper",
    "ActiveFilm",
    "ActiveRecordRepository",
    "create_repository",
    # Logging
    "FilmReporter",
]

"""Core domain models and protocols."""
from .clock import FixedClock, SystemClock, YearSource
from .config import StoreConfig, StorePattern
from .errors import (
    DatabaseConnectionError,
    FilmNotFoundError,
    FilmStateError,
    FilmStoreError,
    StatementError,
)
from .models import Film, FilmState
from .protocols import Database, FilmRepository

__all__ = [
    # Models
    "Film",
    "FilmState",
    # Clock
    "YearSource",
    "SystemClock",
    "FixedClock",
    # Protocols
    "Database",
    "FilmRepository",
    # Config
    "StoreConfig",
    "StorePattern",
    # Errors
    "FilmStoreError",
    "DatabaseConnectionError",
    "StatementError",
    "FilmNotFoundError",
    "FilmStateError",
]

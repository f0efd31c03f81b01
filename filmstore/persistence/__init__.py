"""Persistence layer."""
from .active_record import ActiveFilm, ActiveRecordRepository
from .database import SQLiteDatabase, open_database
from .factory import create_repository
from .mapper import FilmMapper

__all__ = [
    "SQLiteDatabase",
    "open_database",
    "FilmMapper",
    "ActiveFilm",
    "ActiveRecordRepository",
    "create_repository",
]

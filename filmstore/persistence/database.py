"""SQLite database handle used by the film repositories."""
from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from ..core.config import StoreConfig
from ..core.errors import DatabaseConnectionError, StatementError

logger = logging.getLogger(__name__)

FILMS_SCHEMA = """
    CREATE TABLE IF NOT EXISTS films (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT,
        year INTEGER,
        duration INTEGER
    )
"""


class SQLiteDatabase:
    """Thin wrapper over a ``sqlite3`` connection.

    Every statement is run with bound parameters and committed on its own;
    driver errors are re-raised as ``StatementError``.
    """

    def __init__(self, db_path: Union[Path, str], timeout: float = 5.0):
        """Open the database.

        Args:
            db_path: Path to SQLite database file, or ":memory:".
            timeout: Seconds to wait on a locked database.

        Raises:
            DatabaseConnectionError: If the file cannot be opened.
        """
        self._db_path = str(db_path)
        self._conn: Optional[sqlite3.Connection] = None
        try:
            self._conn = sqlite3.connect(self._db_path, timeout=timeout)
        except sqlite3.Error as e:
            logger.error("Cannot open database %s: %s", self._db_path, e)
            raise DatabaseConnectionError(f"Cannot open database {self._db_path}: {e}") from e
        self._conn.row_factory = sqlite3.Row
        logger.debug("Opened database %s", self._db_path)

    @property
    def path(self) -> str:
        return self._db_path

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def ensure_schema(self) -> None:
        """Create the films table if it doesn't exist."""
        self.execute(FILMS_SCHEMA)

    def execute(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> sqlite3.Cursor:
        """Run one statement with named parameters and commit.

        Raises:
            StatementError: If the driver rejects the statement or cannot
                bind one of the values.
        """
        conn = self._connection()
        try:
            cursor = conn.execute(sql, params or {})
            conn.commit()
        except (sqlite3.Error, OverflowError) as e:
            conn.rollback()
            logger.error("Statement failed: %s (%s)", e, " ".join(sql.split()))
            raise StatementError(str(e), sql=sql) from e
        return cursor

    def query(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> list[sqlite3.Row]:
        """Run a SELECT and return all rows."""
        conn = self._connection()
        try:
            return conn.execute(sql, params or {}).fetchall()
        except (sqlite3.Error, OverflowError) as e:
            logger.error("Query failed: %s (%s)", e, " ".join(sql.split()))
            raise StatementError(str(e), sql=sql) from e

    def close(self) -> None:
        """Close database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None
            logger.debug("Closed database %s", self._db_path)

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise DatabaseConnectionError(f"Database {self._db_path} is closed")
        return self._conn

    def __enter__(self) -> "SQLiteDatabase":
        return self

    def __exit__(self, *args) -> None:
        self.close()


def open_database(config: StoreConfig) -> SQLiteDatabase:
    """Open the database described by ``config``, creating the schema if asked."""
    database = SQLiteDatabase(config.db_path, timeout=config.timeout)
    if config.create_schema:
        database.ensure_schema()
    return database

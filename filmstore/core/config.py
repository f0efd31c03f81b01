"""Store configuration."""
from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

MEMORY_DB = ":memory:"


class StorePattern(str, Enum):
    """Which data-access pattern backs the repository."""
    DATA_MAPPER = "data-mapper"
    ACTIVE_RECORD = "active-record"


class StoreConfig(BaseModel):
    """Configuration for opening a film store.

    ``db_path``, ``pattern`` and ``timeout`` map to CLI flags; the CLI sets
    ``create_schema`` only for the commands that may create the database.
    """
    db_path: Path = Field(
        default=Path("films.sqlite"),
        description="Path to SQLite database (':memory:' for a throwaway store)"
    )
    pattern: StorePattern = Field(
        default=StorePattern.DATA_MAPPER,
        description="Data-access pattern: data-mapper or active-record"
    )
    create_schema: bool = Field(
        default=True,
        description="Create the films table on open if it is missing"
    )
    timeout: float = Field(
        default=5.0,
        gt=0,
        description="Seconds to wait on a locked database"
    )

    @field_validator("db_path")
    @classmethod
    def expand_db_path(cls, value: Path) -> Path:
        if str(value) == MEMORY_DB:
            return value
        return value.expanduser()

    @property
    def in_memory(self) -> bool:
        return str(self.db_path) == MEMORY_DB

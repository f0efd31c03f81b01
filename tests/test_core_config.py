"""Tests for store configuration."""
import pytest
from pathlib import Path

from pydantic import ValidationError

from filmstore.core.config import StoreConfig, StorePattern


class TestStorePattern:
    """Tests for StorePattern enum."""

    def test_values(self):
        """Test enum values."""
        assert StorePattern.DATA_MAPPER.value == "data-mapper"
        assert StorePattern.ACTIVE_RECORD.value == "active-record"


class TestStoreConfig:
    """Tests for StoreConfig."""

    def test_defaults(self):
        """Test default configuration values."""
        config = StoreConfig()

        assert config.db_path == Path("films.sqlite")
        assert config.pattern == StorePattern.DATA_MAPPER
        assert config.create_schema is True
        assert config.timeout == 5.0
        assert config.in_memory is False

    def test_pattern_from_string(self):
        """Test pattern accepts its CLI spelling."""
        config = StoreConfig(pattern="active-record")
        assert config.pattern == StorePattern.ACTIVE_RECORD

    def test_invalid_pattern(self):
        """Test unknown pattern is rejected."""
        with pytest.raises(ValidationError):
            StoreConfig(pattern="table-gateway")

    def test_path_expansion(self):
        """Test that ~ is expanded."""
        config = StoreConfig(db_path=Path("~/films.sqlite"))
        assert not str(config.db_path).startswith("~")

    def test_memory_path_kept(self):
        """Test ':memory:' is not treated as a file path."""
        config = StoreConfig(db_path=":memory:")

        assert str(config.db_path) == ":memory:"
        assert config.in_memory is True

    def test_timeout_must_be_positive(self):
        """Test timeout validation."""
        with pytest.raises(ValidationError):
            StoreConfig(timeout=0)

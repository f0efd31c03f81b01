"""Terminal output with Rich."""

from .rich_logger import FilmReporter, QuietReporter

__all__ = ["FilmReporter", "QuietReporter"]

"""Fixture storage for Serialcheck."""

from .store import FixtureStore
from .writer import write_fixture

__all__ = [
    "FixtureStore",
    "write_fixture",
]

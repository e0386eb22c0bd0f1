"""Database infrastructure for SQLite persistence."""

from src.infrastructure.database.connection import Database, init_database

__all__ = [
    "Database",
    "init_database",
]

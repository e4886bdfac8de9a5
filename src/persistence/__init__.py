"""Persistence layer for Alfred Ops."""

from .database import (
    DatabaseManager,
    normalize_database_url,
    setup_database,
    get_database,
    close_database,
    SQLITE_WARNING,
    MISSING_URL_MESSAGE,
)
from .schema_reset import SchemaResetter, SCHEMA_RESET_STATEMENTS

__all__ = [
    "DatabaseManager",
    "normalize_database_url",
    "setup_database",
    "get_database",
    "close_database",
    "SQLITE_WARNING",
    "MISSING_URL_MESSAGE",
    "SchemaResetter",
    "SCHEMA_RESET_STATEMENTS",
]

"""
Database connection setup for the Alfred MCP Server.

Chooses between PostgreSQL and a local SQLite file from NODE_ENV and
DATABASE_URL, verifies the connection, and keeps the resulting async engine.
The logger is passed in so callers and tests control where failures go.
"""

import logging
import ssl
from typing import Optional, List, Union

from sqlalchemy import inspect, text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine

from config import Settings, settings as default_settings
from src.utils import get_logger
from src.utils import AlfredOpsError, ConfigurationError, DatabaseError


SQLITE_WARNING = "Using SQLite for development - PostgreSQL recommended for production"
MISSING_URL_MESSAGE = "DATABASE_URL environment variable is required for unified Alfred MCP Server"

_POSTGRES_PREFIXES = ("postgres://", "postgresql://")


def normalize_database_url(url: str) -> str:
    """Point plain PostgreSQL URLs at the asyncpg driver; leave others untouched."""
    url = url.strip()
    for prefix in _POSTGRES_PREFIXES:
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix):]
    return url


def _insecure_ssl_context() -> ssl.SSLContext:
    # Hosted PostgreSQL requires TLS but presents certificates we can't verify
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


class DatabaseManager:
    """
    Sets up the database connection.

    Decision table for setup():
      NODE_ENV=test            -> mock database, no engine
      DATABASE_URL set         -> PostgreSQL
      production, no URL       -> ConfigurationError
      otherwise, no URL        -> SQLite fallback with a warning
    """

    def __init__(self, settings: Optional[Settings] = None, logger: Optional[logging.Logger] = None):
        self.settings = settings or default_settings
        self.logger = logger or get_logger("database.manager")

        self.engine: Optional[AsyncEngine] = None

    @property
    def dialect(self) -> Optional[str]:
        """Name of the active dialect ("sqlite", "postgresql"), None before setup."""
        return self.engine.dialect.name if self.engine else None

    async def setup(self) -> Union[AsyncEngine, bool]:
        """Set up the database connection and return the engine."""
        try:
            self.logger.info("Setting up database connection...")

            if self.settings.is_testing:
                self.logger.info("Using mock database for testing")
                return True

            database_url = self.settings.database_url

            if database_url:
                self.engine = self._create_postgres_engine(database_url)
            elif self.settings.is_production:
                raise ConfigurationError(MISSING_URL_MESSAGE, setting="DATABASE_URL")
            else:
                self.logger.warning(SQLITE_WARNING)
                self.engine = self._create_sqlite_engine()

            await self._verify_connection()

            self.logger.info("Database connection established successfully")
            return self.engine

        except Exception as e:
            self.logger.error(f"Database setup failed: {e}", exc_info=True)
            await self.close()
            if isinstance(e, AlfredOpsError):
                raise
            raise DatabaseError(f"Failed to set up database: {e}", operation="setup", original_exception=e) from e

    def _create_postgres_engine(self, database_url: str) -> AsyncEngine:
        connect_args = {}
        if self.settings.database_ssl:
            connect_args["ssl"] = _insecure_ssl_context()

        return create_async_engine(
            normalize_database_url(database_url),
            echo=self.settings.database_echo,
            pool_pre_ping=True,
            connect_args=connect_args,
        )

    def _create_sqlite_engine(self) -> AsyncEngine:
        storage = self.settings.sqlite_storage.expanduser()
        storage.parent.mkdir(parents=True, exist_ok=True)

        return create_async_engine(
            f"sqlite+aiosqlite:///{storage}",
            echo=self.settings.database_echo,
        )

    async def _verify_connection(self) -> None:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def list_tables(self) -> List[str]:
        """Names of the tables visible in the default schema."""
        if not self.engine:
            raise DatabaseError("Database not initialized", operation="list_tables")

        try:
            async with self.engine.connect() as conn:
                return await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        except Exception as e:
            self.logger.error(f"Listing tables failed: {e}")
            raise DatabaseError(f"Failed to list tables: {e}", operation="list_tables", original_exception=e) from e

    async def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        if self.engine:
            try:
                await self.engine.dispose()
                self.logger.info("Database connection closed")
            except Exception as e:
                self.logger.error(f"Error closing database: {e}")
        self.engine = None


_database_manager: Optional[DatabaseManager] = None


async def setup_database(
    settings: Optional[Settings] = None,
    logger: Optional[logging.Logger] = None
) -> Union[AsyncEngine, bool]:
    """Set up the shared database connection."""
    global _database_manager
    _database_manager = DatabaseManager(settings=settings, logger=logger)
    return await _database_manager.setup()


def get_database() -> Optional[AsyncEngine]:
    """Engine created by the last setup_database() call, if any."""
    return _database_manager.engine if _database_manager else None


async def close_database() -> None:
    global _database_manager
    if _database_manager:
        await _database_manager.close()
    _database_manager = None

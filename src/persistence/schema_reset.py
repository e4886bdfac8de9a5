"""
Destructive reset of the PostgreSQL public schema.

Drops every table, index and row in `public` and recreates the empty schema.
The statements run in autocommit mode, so a failure part-way through is not
rolled back: the schema can be left dropped but not recreated.
"""

import logging
from typing import Callable, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine

from src.persistence.database import normalize_database_url
from src.utils import get_logger
from src.utils import AlfredOpsError, ConfigurationError, DatabaseError


SCHEMA_RESET_STATEMENTS = (
    "DROP SCHEMA public CASCADE;",
    "CREATE SCHEMA public;",
    "GRANT ALL ON SCHEMA public TO public;",
)


class SchemaResetter:
    """Issues the schema reset statements against one database."""

    def __init__(
        self,
        database_url: Optional[str],
        logger: Optional[logging.Logger] = None,
        engine_factory: Callable[..., AsyncEngine] = create_async_engine
    ):
        self.database_url = database_url
        self.logger = logger or get_logger("database.schema_reset")
        self.engine_factory = engine_factory

    async def reset(self) -> None:
        """Drop and recreate the public schema."""
        if not self.database_url:
            raise ConfigurationError(
                "DATABASE_URL environment variable is required to clear the database",
                setting="DATABASE_URL"
            )

        self.logger.info("🗑️  Clearing PostgreSQL database...")
        engine = None
        try:
            engine = self.engine_factory(
                normalize_database_url(self.database_url),
                isolation_level="AUTOCOMMIT",
            )
            async with engine.connect() as conn:
                self.logger.info("✅ Connected to PostgreSQL")
                for statement in SCHEMA_RESET_STATEMENTS:
                    self.logger.debug(f"Executing: {statement}")
                    await conn.execute(text(statement))

            self.logger.info("✅ Database cleared successfully")

        except AlfredOpsError:
            raise
        except Exception as e:
            raise DatabaseError(f"Failed to clear database: {e}", operation="schema_reset", original_exception=e) from e
        finally:
            if engine is not None:
                await engine.dispose()

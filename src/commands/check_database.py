#!/usr/bin/env python3
"""
Check the database setup against the configured DATABASE_URL.

Runs the same setup path the server uses, then reports the dialect and the
tables that exist. Useful before pointing a deployment at a new database.
"""

import asyncio
import logging
from typing import Optional

from config import Settings, settings as default_settings
from src.persistence import DatabaseManager
from src.utils import setup_logging, get_logger, AsyncPerformanceLogger
from src.utils import AlfredOpsError
from src.utils import mask_database_url


async def check_database_setup(settings: Optional[Settings] = None, logger: Optional[logging.Logger] = None) -> bool:
    """Return False when there is no DATABASE_URL to check; raise on setup failures."""
    settings = settings or default_settings
    logger = logger or get_logger("commands.check_database")

    logger.info("🧪 Testing database setup...")

    if not settings.database_url:
        logger.warning("❌ No DATABASE_URL found in environment")
        logger.info("💡 Create a .env file with your PostgreSQL DATABASE_URL")
        return False

    logger.info(f"🔗 Using DATABASE_URL: {mask_database_url(settings.database_url)}")

    manager = DatabaseManager(settings=settings, logger=logger)
    try:
        async with AsyncPerformanceLogger(logger, "database setup check"):
            await manager.setup()
            tables = await manager.list_tables()

        logger.info(f"✅ Database setup completed successfully ({manager.dialect})")
        logger.info(f"📊 Found {len(tables)} tables" + (f": {', '.join(sorted(tables))}" if tables else ""))
        return True
    finally:
        await manager.close()


def main() -> int:
    setup_logging()
    logger = get_logger("commands.check_database")

    try:
        asyncio.run(check_database_setup(logger=logger))
    except AlfredOpsError as e:
        logger.error(f"❌ Database setup failed: {e.message}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

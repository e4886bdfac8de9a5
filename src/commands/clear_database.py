#!/usr/bin/env python3
"""
Clear the PostgreSQL database behind DATABASE_URL.

Drops and recreates the public schema. Every table, index and row in it is
destroyed; there is no confirmation prompt.
"""

import asyncio
import logging
from typing import Optional

from config import Settings, settings as default_settings
from src.persistence import SchemaResetter
from src.utils import setup_logging, get_logger
from src.utils import AlfredOpsError


async def clear_database(settings: Optional[Settings] = None, logger: Optional[logging.Logger] = None) -> None:
    settings = settings or default_settings
    resetter = SchemaResetter(settings.database_url, logger=logger)
    await resetter.reset()


def main() -> int:
    setup_logging()
    logger = get_logger("commands.clear_database")

    try:
        asyncio.run(clear_database(logger=logger))
    except AlfredOpsError as e:
        logger.error(f"❌ Failed to clear database: {e.message}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

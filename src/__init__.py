"""
Alfred Ops - operational scripts for the Alfred MCP Server

Debug trigger for the hosted API, PostgreSQL schema reset, and database
setup checks.
"""

__version__ = "1.0.0"
__description__ = "Operational scripts for the Alfred MCP Server"

from config.settings import settings

from src.client import AlfredClient
from src.persistence import DatabaseManager, SchemaResetter

from src.utils.logger import setup_logging, get_logger

__all__ = [
    "__version__",
    "__description__",
    "settings",
    "AlfredClient",
    "DatabaseManager",
    "SchemaResetter",
    "setup_logging",
    "get_logger",
]

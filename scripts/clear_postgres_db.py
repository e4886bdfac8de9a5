#!/usr/bin/env python3
"""
Drop and recreate the public schema of the database behind DATABASE_URL.

Usage:
  python scripts/clear_postgres_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.commands.clear_database import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
"""
Check the database setup against the configured DATABASE_URL.

Usage:
  python scripts/verify_database_setup.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.commands.check_database import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main())

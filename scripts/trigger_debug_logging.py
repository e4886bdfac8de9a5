#!/usr/bin/env python3
"""
Trigger debug logging on the hosted Alfred MCP Server.

Usage:
  python scripts/trigger_debug_logging.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.commands.debug_trigger import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main())

"""Pytest configuration and fixtures."""

import os
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest
from dotenv import load_dotenv

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Set test environment before anything imports config
load_dotenv(project_root / ".env.test")

os.environ["NODE_ENV"] = "test"
os.environ["JWT_SECRET"] = "test-jwt-secret-for-testing-only"
os.environ["OWNER_SETUP_KEY"] = "test-setup-key-123"


@pytest.fixture
def mock_logger():
    """Stand-in for the logging interface passed into components."""
    return Mock(spec=["debug", "info", "warning", "error", "log"])


@pytest.fixture
def make_settings(tmp_path):
    """Build Settings from explicit values, ignoring any .env file."""
    from config.settings import Settings

    def _make(**overrides):
        values = {
            "node_env": "test",
            "database_url": None,
            "sqlite_storage": tmp_path / "data" / "alfred.db",
            "log_colors": False,
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make

"""Utility functions and helpers."""

# Logging system
from .logger import (
    setup_logging,
    get_logger,
    log_context,
    AsyncPerformanceLogger,
)

# Exception classes
from .exceptions import (
    ErrorSeverity,
    ErrorCategory,
    AlfredOpsError,
    ConfigurationError,
    DatabaseError,
    AlfredAPIError,
    AuthenticationError,
    SessionError,
)

# Helper functions
from .helpers import (
    truncate_text,
    preview_text,
    mask_database_url,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "log_context",
    "AsyncPerformanceLogger",

    # Exceptions
    "ErrorSeverity",
    "ErrorCategory",
    "AlfredOpsError",
    "ConfigurationError",
    "DatabaseError",
    "AlfredAPIError",
    "AuthenticationError",
    "SessionError",

    # Helpers
    "truncate_text",
    "preview_text",
    "mask_database_url",
]

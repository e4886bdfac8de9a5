"""
Utility helper functions for Alfred Ops.
"""

from typing import Optional

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError


def truncate_text(text: str, max_length: int = 100) -> str:
    """Truncate text with ellipsis."""
    if len(text) <= max_length:
        return text
    return text[:max_length-3] + "..."


def preview_text(text: Optional[str], length: int = 100) -> str:
    """First `length` characters of a response, always followed by an ellipsis."""
    return f"{(text or '')[:length]}..."


def mask_database_url(url: str, visible: int = 30) -> str:
    """Render a database URL with its password hidden."""
    try:
        return make_url(url).render_as_string(hide_password=True)
    except (ArgumentError, ValueError):
        # Unparsable; show only the leading characters
        return url[:visible] + "..."

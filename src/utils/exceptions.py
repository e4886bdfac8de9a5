"""
Exception classes for Alfred Ops.

A single hierarchy for the scripts: configuration problems, database failures
and errors returned by the Alfred MCP Server API. Each error carries severity,
category and context so the top-level handlers can log it consistently.
"""

from typing import Optional, Dict, Any, List
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    CONFIGURATION = "configuration"
    DATABASE = "database"
    API = "api"
    AUTHENTICATION = "authentication"
    MCP = "mcp"
    SYSTEM = "system"


class AlfredOpsError(Exception):
    """
    Base exception for Alfred Ops.

    All script-specific exceptions inherit from this base class.
    Provides consistent error handling with context tracking.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.SYSTEM,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        recoverable: bool = True,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.severity = severity
        self.category = category
        self.context = context or {}
        self.suggestions = suggestions or []
        self.recoverable = recoverable
        self.original_exception = original_exception

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "severity": self.severity.value,
            "category": self.category.value,
            "context": self.context,
            "suggestions": self.suggestions,
            "recoverable": self.recoverable,
            "original_exception": str(self.original_exception) if self.original_exception else None
        }

    def __str__(self) -> str:
        base_msg = self.message
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg


class ConfigurationError(AlfredOpsError):
    """Exception raised when required configuration is missing or invalid."""

    def __init__(self, message: str, setting: Optional[str] = None, **kwargs):
        kwargs.setdefault('category', ErrorCategory.CONFIGURATION)
        kwargs.setdefault('severity', ErrorSeverity.HIGH)
        kwargs.setdefault('recoverable', False)
        if setting:
            kwargs.setdefault('context', {})['setting'] = setting
        super().__init__(message, **kwargs)


class DatabaseError(AlfredOpsError):
    """Exception raised when a database operation fails."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        kwargs.setdefault('category', ErrorCategory.DATABASE)
        kwargs.setdefault('severity', ErrorSeverity.HIGH)
        kwargs.setdefault('suggestions', [
            "Check that DATABASE_URL points at a reachable server",
            "Verify the database credentials",
        ])
        if operation:
            kwargs.setdefault('context', {})['operation'] = operation
        super().__init__(message, **kwargs)


class AlfredAPIError(AlfredOpsError):
    """Exception raised when the Alfred MCP Server returns an error response."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        endpoint: Optional[str] = None,
        body: Optional[str] = None,
        **kwargs
    ):
        kwargs.setdefault('category', ErrorCategory.API)
        context = kwargs.setdefault('context', {})
        if status_code is not None:
            context['status_code'] = status_code
        if endpoint:
            context['endpoint'] = endpoint
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.endpoint = endpoint
        self.body = body


class AuthenticationError(AlfredAPIError):
    """Exception raised when login fails or a call is made without a token."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('category', ErrorCategory.AUTHENTICATION)
        kwargs.setdefault('severity', ErrorSeverity.HIGH)
        kwargs.setdefault('recoverable', False)
        kwargs.setdefault('suggestions', [
            "Check ALFRED_EMAIL and ALFRED_PASSWORD",
            "Make sure the account is not locked",
        ])
        super().__init__(message, **kwargs)


class SessionError(AlfredAPIError):
    """Exception raised when an MCP session cannot be created or used."""

    def __init__(self, message: str, session_id: Optional[str] = None, **kwargs):
        kwargs.setdefault('category', ErrorCategory.MCP)
        if session_id:
            kwargs.setdefault('context', {})['session_id'] = session_id
        super().__init__(message, **kwargs)

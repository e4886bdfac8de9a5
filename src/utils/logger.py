"""
Logging configuration for Alfred Ops.

Loguru sinks for console and file output, with the standard library logging
module routed into loguru so every component can take a plain logging.Logger.
"""

import contextlib
import logging
import sys
import time
from typing import Optional
from contextvars import ContextVar

from loguru import logger as loguru_logger
from config import settings


# Context variables for request tracking
request_id_var: ContextVar[Optional[str]] = ContextVar('request_id', default=None)
session_id_var: ContextVar[Optional[str]] = ContextVar('session_id', default=None)


class AsyncPerformanceLogger:
    """Context manager for performance logging of async operations."""

    def __init__(
        self,
        logger: logging.Logger,
        operation: str,
        level: int = logging.INFO,
        **context_data
    ):
        self.logger = logger
        self.operation = operation
        self.level = level
        self.context_data = context_data
        self.start_time: Optional[float] = None
        self.duration: Optional[float] = None

    async def __aenter__(self):
        """Start performance monitoring."""
        self.start_time = time.time()
        self.logger.log(
            self.level,
            f"Started {self.operation}",
            extra={
                "operation": self.operation,
                "event": "start",
                **self.context_data
            }
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """End performance monitoring and log results."""
        if self.start_time is None:
            return
        self.duration = time.time() - self.start_time

        if exc_type is None:
            self.logger.log(
                self.level,
                f"Completed {self.operation} in {self.duration:.3f}s",
                extra={
                    "operation": self.operation,
                    "event": "complete",
                    "duration_seconds": self.duration,
                    "success": True,
                    **self.context_data
                }
            )
        else:
            self.logger.error(
                f"Failed {self.operation} after {self.duration:.3f}s: {exc_val}",
                extra={
                    "operation": self.operation,
                    "event": "error",
                    "duration_seconds": self.duration,
                    "success": False,
                    "error_type": exc_type.__name__,
                    **self.context_data
                }
            )


@contextlib.contextmanager
def log_context(request_id: Optional[str] = None, session_id: Optional[str] = None):
    """Context manager for setting logging context variables."""
    token_request = request_id_var.set(request_id) if request_id else None
    token_session = session_id_var.set(session_id) if session_id else None

    try:
        yield
    finally:
        if token_request:
            request_id_var.reset(token_request)
        if token_session:
            session_id_var.reset(token_session)


def setup_logging() -> None:
    """Set up logging configuration for the scripts."""

    loguru_logger.remove()  # Remove default handler
    loguru_logger.configure(extra={"request_id": None, "session_id": None})

    if settings.log_colors:
        console_format = (
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )
    else:
        console_format = (
            "{time:YYYY-MM-DD HH:mm:ss} | "
            "{level: <8} | "
            "{name}:{function}:{line} | "
            "{message}"
        )

    loguru_logger.add(
        sys.stdout,
        format=console_format,
        level=settings.log_level.value,
        colorize=settings.log_colors,
        backtrace=settings.debug,
        diagnose=settings.debug
    )

    if settings.log_file:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_format = (
            "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
            "{level: <8} | "
            "{name}:{function}:{line} | "
            "req_id:{extra[request_id]} | "
            "session_id:{extra[session_id]} | "
            "{message}"
        )

        loguru_logger.add(
            str(settings.log_file),
            format=file_format,
            level=settings.log_level.value,
            rotation=settings.log_max_size,
            retention=settings.log_backup_count,
            compression="gz",
            backtrace=settings.debug,
            diagnose=settings.debug,
            enqueue=True,
            serialize=False
        )

    # Configure standard library logging to use loguru
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # Set levels for specific loggers to reduce noise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING if not settings.database_echo else logging.INFO)


class InterceptHandler(logging.Handler):
    """Intercept standard library logs and redirect to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        """Emit log record through loguru."""

        try:
            level = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        loguru_logger.bind(
            request_id=request_id_var.get(),
            session_id=session_id_var.get(),
        ).opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(f"alfred_ops.{name}")

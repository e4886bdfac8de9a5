"""Configuration module for Alfred Ops."""

from .settings import settings, Settings, Environment, LogLevel

__all__ = ["settings", "Settings", "Environment", "LogLevel"]

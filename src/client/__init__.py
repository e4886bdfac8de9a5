"""Client for the Alfred MCP Server HTTP API."""

from .alfred_client import (
    AlfredClient,
    LOGIN_PATH,
    CONNECT_PATH,
    TEXT_PATH,
    DISCONNECT_PATH,
)
from .models import ClientInfo, LoginResponse, ConnectResponse, TextResponse

__all__ = [
    "AlfredClient",
    "LOGIN_PATH",
    "CONNECT_PATH",
    "TEXT_PATH",
    "DISCONNECT_PATH",
    "ClientInfo",
    "LoginResponse",
    "ConnectResponse",
    "TextResponse",
]

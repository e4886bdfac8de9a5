"""Request and response bodies of the Alfred MCP Server endpoints."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class ClientInfo(_ApiModel):
    """Identifies the caller when an MCP session is opened."""
    version: str = "1.0"
    name: str = "debug-test"


class LoginResponse(_ApiModel):
    token: Optional[str] = None
    message: Optional[str] = None
    user: Optional[Dict[str, Any]] = None


class ConnectResponse(_ApiModel):
    success: bool = True
    session_id: Optional[str] = Field(default=None, alias="sessionId")
    timestamp: Optional[str] = None


class TextResponse(_ApiModel):
    """Flattened AI reply returned by /api/v1/mcp/text."""
    success: bool = True
    session_id: Optional[str] = Field(default=None, alias="sessionId")
    request_id: Optional[str] = Field(default=None, alias="requestId")
    content: Optional[str] = None
    confidence: Optional[float] = None
    provider: Optional[str] = None
    timestamp: Optional[str] = None

    @property
    def content_length(self) -> int:
        return len(self.content or "")

"""
HTTP client for the Alfred MCP Server.

Covers the four endpoints the operational scripts use: login, opening an MCP
session, sending one text message, and closing the session. The token from a
successful login is sent as a bearer credential on every later call.
"""

import logging
from typing import Any, Dict, Optional, Union

import httpx
from pydantic import ValidationError

from src.client.models import ClientInfo, ConnectResponse, LoginResponse, TextResponse
from src.utils import get_logger
from src.utils import AlfredAPIError, AuthenticationError, SessionError


LOGIN_PATH = "/api/v1/auth/login"
CONNECT_PATH = "/api/v1/mcp/connect"
TEXT_PATH = "/api/v1/mcp/text"
DISCONNECT_PATH = "/api/v1/mcp/disconnect"


class AlfredClient:
    """Async client for the Alfred MCP Server HTTP API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.logger = logger or get_logger("client.alfred")
        self.token: Optional[str] = None

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

    async def __aenter__(self) -> "AlfredClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    def _auth_headers(self) -> Dict[str, str]:
        if not self.token:
            raise AuthenticationError("Not authenticated: login() must succeed before calling MCP endpoints")
        return {"Authorization": f"Bearer {self.token}"}

    async def _post(self, path: str, payload: Dict[str, Any], authenticated: bool = True) -> Dict[str, Any]:
        headers = self._auth_headers() if authenticated else {}

        self.logger.debug(f"POST {path}")
        response = await self._client.post(path, json=payload, headers=headers)

        if response.is_error:
            error_cls = AuthenticationError if response.status_code == 401 else AlfredAPIError
            raise error_cls(
                f"{path} returned HTTP {response.status_code}",
                status_code=response.status_code,
                endpoint=path,
                body=response.text,
            )

        return response.json()

    async def login(self, email: str, password: str) -> str:
        """Log in and remember the returned token."""
        data = await self._post(LOGIN_PATH, {"email": email, "password": password}, authenticated=False)
        login = LoginResponse.model_validate(data)

        if not login.token:
            raise AuthenticationError("Login response did not contain a token", endpoint=LOGIN_PATH)

        self.token = login.token
        return login.token

    async def connect(self, client_info: Union[ClientInfo, Dict[str, Any], None] = None) -> str:
        """Open an MCP session and return its id."""
        if isinstance(client_info, ClientInfo):
            client_info = client_info.model_dump()

        data = await self._post(CONNECT_PATH, {"clientInfo": client_info or {}})
        session = ConnectResponse.model_validate(data)

        if not session.session_id:
            raise SessionError("Connect response did not contain a sessionId", endpoint=CONNECT_PATH)
        return session.session_id

    async def send_text(
        self,
        session_id: str,
        text: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> TextResponse:
        """Send one text message to an open session."""
        data = await self._post(TEXT_PATH, {
            "sessionId": session_id,
            "text": text,
            "metadata": metadata or {},
        })
        try:
            return TextResponse.model_validate(data)
        except ValidationError as e:
            raise SessionError(f"Unexpected response from {TEXT_PATH}: {e}", session_id=session_id, endpoint=TEXT_PATH) from e

    async def disconnect(self, session_id: str) -> Dict[str, Any]:
        """Close an MCP session."""
        return await self._post(DISCONNECT_PATH, {"sessionId": session_id})

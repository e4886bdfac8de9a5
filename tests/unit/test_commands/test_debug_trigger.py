"""Tests for the debug trigger command."""

import json
from unittest.mock import patch, AsyncMock

import httpx
import pytest

from src.client import AlfredClient, LOGIN_PATH, CONNECT_PATH, TEXT_PATH, DISCONNECT_PATH
from src.commands import debug_trigger
from src.commands.debug_trigger import trigger_debug_logging, run
from src.utils import ConfigurationError
from src.utils.logger import request_id_var, session_id_var


pytestmark = pytest.mark.unit

BASE_URL = "https://alfred.example.test"


def make_handler(requests, overrides=None):
    responses = {
        LOGIN_PATH: lambda: httpx.Response(200, json={"token": "tok-1"}),
        CONNECT_PATH: lambda: httpx.Response(200, json={"success": True, "sessionId": "sess-1"}),
        TEXT_PATH: lambda: httpx.Response(200, json={"success": True, "provider": "openai", "content": "x" * 150}),
        DISCONNECT_PATH: lambda: httpx.Response(200, json={"success": True}),
    }
    responses.update(overrides or {})

    def handler(request):
        requests.append(request)
        return responses[request.url.path]()

    return handler


def logged(mock_method):
    return [c.args[0] for c in mock_method.call_args_list]


class TestTriggerDebugLogging:

    async def test_full_sequence(self, mock_logger):
        requests = []
        async with AlfredClient(BASE_URL, transport=httpx.MockTransport(make_handler(requests))) as client:
            result = await trigger_debug_logging(client, "owner@example.com", "pw", logger=mock_logger)

        assert result is True
        assert [r.url.path for r in requests] == [LOGIN_PATH, CONNECT_PATH, TEXT_PATH, DISCONNECT_PATH]
        for request in requests[1:]:
            assert request.headers["authorization"] == "Bearer tok-1"

        assert json.loads(requests[1].content) == {"clientInfo": {"version": "1.0", "name": "debug-test"}}
        assert json.loads(requests[2].content) == {
            "sessionId": "sess-1",
            "text": "Hello, this is a test message for debug logging.",
            "metadata": {"source": "debug-test"},
        }
        assert json.loads(requests[3].content) == {"sessionId": "sess-1"}

        info = logged(mock_logger.info)
        assert "✅ Authenticated" in info
        assert "✅ Session created: sess-1" in info
        assert "✅ Response from openai: 150 chars" in info
        assert f"Response preview: {'x' * 100}..." in info
        mock_logger.error.assert_not_called()

    async def test_custom_message_and_client_name(self, mock_logger):
        requests = []
        async with AlfredClient(BASE_URL, transport=httpx.MockTransport(make_handler(requests))) as client:
            await trigger_debug_logging(client, "a@b.c", "pw", message="ping", client_name="ops", logger=mock_logger)

        assert json.loads(requests[1].content)["clientInfo"]["name"] == "ops"
        assert json.loads(requests[2].content)["text"] == "ping"
        assert json.loads(requests[2].content)["metadata"] == {"source": "ops"}

    async def test_failed_message_still_disconnects(self, mock_logger):
        requests = []
        handler = make_handler(requests, {TEXT_PATH: lambda: httpx.Response(500, text="Failed to process text command")})
        async with AlfredClient(BASE_URL, transport=httpx.MockTransport(handler)) as client:
            result = await trigger_debug_logging(client, "a@b.c", "pw", logger=mock_logger)

        assert result is True
        assert requests[-1].url.path == DISCONNECT_PATH
        errors = logged(mock_logger.error)
        assert "❌ Request failed: 500" in errors
        assert "Error: Failed to process text command" in errors

    async def test_login_failure_is_logged_not_raised(self, mock_logger):
        requests = []
        handler = make_handler(requests, {LOGIN_PATH: lambda: httpx.Response(401, json={"error": "Authentication failed"})})
        async with AlfredClient(BASE_URL, transport=httpx.MockTransport(handler)) as client:
            result = await trigger_debug_logging(client, "a@b.c", "wrong", logger=mock_logger)

        assert result is False
        assert [r.url.path for r in requests] == [LOGIN_PATH]
        assert logged(mock_logger.error)[0].startswith("Test failed:")

    async def test_network_error_leaves_session_open(self, mock_logger):
        requests = []

        def boom():
            raise httpx.ConnectError("connection reset")

        handler = make_handler(requests, {TEXT_PATH: boom})
        async with AlfredClient(BASE_URL, transport=httpx.MockTransport(handler)) as client:
            result = await trigger_debug_logging(client, "a@b.c", "pw", logger=mock_logger)

        assert result is False
        assert DISCONNECT_PATH not in [r.url.path for r in requests]
        assert "connection reset" in logged(mock_logger.error)[0]

    async def test_unparsable_response_is_logged(self, mock_logger):
        requests = []
        handler = make_handler(requests, {LOGIN_PATH: lambda: httpx.Response(200, text="<html>oops</html>")})
        async with AlfredClient(BASE_URL, transport=httpx.MockTransport(handler)) as client:
            result = await trigger_debug_logging(client, "a@b.c", "pw", logger=mock_logger)

        assert result is False
        assert logged(mock_logger.error)[0].startswith("Test failed:")

    async def test_missing_content_reports_zero_chars(self, mock_logger):
        requests = []
        handler = make_handler(requests, {TEXT_PATH: lambda: httpx.Response(200, json={"success": True, "provider": "claude"})})
        async with AlfredClient(BASE_URL, transport=httpx.MockTransport(handler)) as client:
            await trigger_debug_logging(client, "a@b.c", "pw", logger=mock_logger)

        info = logged(mock_logger.info)
        assert "✅ Response from claude: 0 chars" in info
        assert "Response preview: ..." in info

    async def test_reply_is_logged_with_request_id(self, mock_logger):
        requests = []
        seen = []
        mock_logger.info.side_effect = lambda *args, **kwargs: seen.append((args[0], request_id_var.get(), session_id_var.get()))
        reply = {"success": True, "provider": "openai", "content": "ok", "requestId": "req-9"}
        handler = make_handler(requests, {TEXT_PATH: lambda: httpx.Response(200, json=reply)})
        async with AlfredClient(BASE_URL, transport=httpx.MockTransport(handler)) as client:
            await trigger_debug_logging(client, "a@b.c", "pw", logger=mock_logger)

        assert ("✅ Response from openai: 2 chars", "req-9", "sess-1") in seen
        assert ("🤖 Making AI request to trigger debug logging...", None, "sess-1") in seen
        assert request_id_var.get() is None


class TestRun:

    async def test_requires_credentials(self, make_settings, mock_logger):
        settings = make_settings(alfred_email=None, alfred_password=None)

        with pytest.raises(ConfigurationError, match="ALFRED_EMAIL and ALFRED_PASSWORD"):
            await run(settings=settings, logger=mock_logger)

    async def test_uses_configured_credentials(self, make_settings, mock_logger):
        settings = make_settings(
            alfred_email="owner@example.com",
            alfred_password="from-env",
            alfred_base_url=BASE_URL,
            debug_message="configured message",
        )

        with patch.object(debug_trigger, "trigger_debug_logging", new=AsyncMock(return_value=True)) as trigger:
            assert await run(settings=settings, logger=mock_logger) is True

        client, email, password = trigger.call_args.args
        assert isinstance(client, AlfredClient)
        assert client.base_url == BASE_URL
        assert (email, password) == ("owner@example.com", "from-env")
        assert trigger.call_args.kwargs["message"] == "configured message"


class TestMain:

    def test_main_returns_one_without_credentials(self, make_settings):
        settings = make_settings(alfred_email=None, alfred_password=None)

        with patch.object(debug_trigger, "setup_logging"), patch.object(debug_trigger, "default_settings", settings):
            assert debug_trigger.main() == 1

    def test_main_returns_zero_when_run_fails(self, make_settings):
        settings = make_settings(alfred_email="a@b.c", alfred_password="pw")

        with patch.object(debug_trigger, "setup_logging"), \
                patch.object(debug_trigger, "default_settings", settings), \
                patch.object(debug_trigger, "trigger_debug_logging", new=AsyncMock(return_value=False)):
            assert debug_trigger.main() == 0

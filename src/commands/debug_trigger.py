#!/usr/bin/env python3
"""
Trigger debug logging on the hosted Alfred MCP Server.

Logs in, opens an MCP session, sends one message and closes the session so
that the server's debug output shows up in the hosting dashboard. This is a
manual diagnostic: nothing is retried, and a failure between connect and
disconnect leaves the remote session open.
"""

import asyncio
import logging
from typing import Optional

import httpx

from config import Settings, settings as default_settings
from src.client import AlfredClient, ClientInfo
from src.utils import setup_logging, get_logger, log_context
from src.utils import AlfredOpsError, AlfredAPIError, ConfigurationError
from src.utils import preview_text, truncate_text


async def trigger_debug_logging(
    client: AlfredClient,
    email: str,
    password: str,
    message: str = "Hello, this is a test message for debug logging.",
    client_name: str = "debug-test",
    logger: Optional[logging.Logger] = None
) -> bool:
    """Run the login / connect / text / disconnect sequence once."""
    logger = logger or get_logger("commands.debug_trigger")
    logger.info("🔍 Triggering debug logging on Railway...")

    try:
        await client.login(email, password)
        logger.info("✅ Authenticated")

        session_id = await client.connect(ClientInfo(version="1.0", name=client_name))
        logger.info(f"✅ Session created: {session_id}")

        with log_context(session_id=session_id):
            logger.info("🤖 Making AI request to trigger debug logging...")
            try:
                reply = await client.send_text(session_id, message, metadata={"source": client_name})
                with log_context(request_id=reply.request_id):
                    logger.info(f"✅ Response from {reply.provider}: {reply.content_length} chars")
                    logger.info(f"Response preview: {preview_text(reply.content)}")
            except AlfredAPIError as e:
                if e.status_code is None:
                    raise
                logger.error(f"❌ Request failed: {e.status_code}")
                logger.error(f"Error: {truncate_text(e.body or '', 500)}")

            await client.disconnect(session_id)

        logger.info("✅ Debug logging should now be visible in Railway logs")
        logger.info("Check Railway dashboard > Deployments > Logs for debug output")
        return True

    except (AlfredOpsError, httpx.HTTPError, ValueError) as e:
        logger.error(f"Test failed: {e}")
        return False


async def run(settings: Optional[Settings] = None, logger: Optional[logging.Logger] = None) -> bool:
    """Run the debug trigger against the configured server."""
    settings = settings or default_settings
    logger = logger or get_logger("commands.debug_trigger")

    if not settings.has_alfred_credentials:
        raise ConfigurationError(
            "ALFRED_EMAIL and ALFRED_PASSWORD must be set to trigger debug logging",
            setting="ALFRED_EMAIL/ALFRED_PASSWORD"
        )

    async with AlfredClient(settings.alfred_base_url, timeout=settings.alfred_request_timeout) as client:
        return await trigger_debug_logging(
            client,
            settings.alfred_email,
            settings.alfred_password.get_secret_value(),
            message=settings.debug_message,
            client_name=settings.debug_client_name,
            logger=logger,
        )


def main() -> int:
    """Entry point. Exits 0 whatever the outcome of the run; 1 on missing configuration."""
    setup_logging()
    logger = get_logger("commands.debug_trigger")

    try:
        asyncio.run(run(logger=logger))
    except ConfigurationError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

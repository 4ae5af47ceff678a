"""Server lifespan: creates JiraClient and Dispatcher on startup, closes on shutdown."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from jira_bridge.dispatcher import Dispatcher
from jira_bridge.jira.client import JiraClient
from jira_bridge.logging.logger import setup_logger
from jira_bridge.settings import JiraSettings

_client: JiraClient | None = None
_dispatcher: Dispatcher | None = None
_settings: JiraSettings | None = None


def get_dispatcher() -> Dispatcher:
    """Return the active Dispatcher. Only valid during server lifespan."""
    if _dispatcher is None:
        raise RuntimeError("Dispatcher not initialized. Is the server running?")
    return _dispatcher


def get_settings() -> JiraSettings:
    """Return the loaded settings. Only valid during server lifespan."""
    if _settings is None:
        raise RuntimeError("Settings not loaded. Is the server running?")
    return _settings


@asynccontextmanager
async def lifespan(server) -> AsyncIterator[None]:  # noqa: ARG001
    """Async context manager that manages the JiraClient lifecycle."""
    global _client, _dispatcher, _settings

    _settings = JiraSettings()
    logger = setup_logger(level=_settings.log_level)
    logger.info(
        "Starting jira-bridge server (url=%s, read_only=%s)",
        _settings.url,
        _settings.read_only_mode,
    )

    _client = JiraClient(
        base_url=_settings.url,
        email=_settings.email,
        api_token=_settings.api_token,
        timeout=_settings.timeout,
        ssl_verify=_settings.ssl_verify,
    )
    _dispatcher = Dispatcher(_client, read_only=_settings.read_only_mode)

    try:
        yield
    finally:
        logger.info("Shutting down jira-bridge server")
        await _client.close()
        _client = None
        _dispatcher = None
        _settings = None

"""Shared Userback client, one per process, built from settings."""

import logging

from feedback_app.config import get_settings
from feedback_app.services.userback import UserbackClient

logger = logging.getLogger(__name__)

# Module-level shared client (created lazily, lives for the process lifetime)
_client: UserbackClient | None = None


def get_userback_client() -> UserbackClient:
    """Return the shared UserbackClient, creating it on first call."""
    global _client
    if _client is None or _client.is_closed:
        settings = get_settings()
        _client = UserbackClient(settings.userback_config())
        logger.debug("Created Userback client for %s", settings.userback_api_url)
    return _client


async def close_userback_client() -> None:
    """Close the shared client, if one was created."""
    global _client
    if _client is not None and not _client.is_closed:
        await _client.aclose()
    _client = None

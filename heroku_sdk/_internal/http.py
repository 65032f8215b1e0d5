"""Shared HTTP client configuration."""

import platform
import sys

import httpx

from heroku_sdk._version import __version__

DEFAULT_API_URL = "https://api.heroku.com"
DEFAULT_TIMEOUT = 30.0

USER_AGENT = f"heroku-sdk/{__version__} ({sys.platform}; {platform.machine() or 'unknown'})"


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    api_key: str | None = None,
) -> httpx.Client:
    """Create the default HTTP transport.

    The client carries no base URL: the service concatenates its own base URL
    with each path. Credentials are only attached when ``api_key`` is given.

    Args:
        timeout: Request timeout in seconds.
        api_key: Optional API key sent as a bearer token.

    Returns:
        Configured httpx.Client instance.
    """
    headers = {"User-Agent": USER_AGENT}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return httpx.Client(timeout=timeout, headers=headers)

"""Shared HTTP transport configuration."""

import httpx

from httpy._version import __version__

DEFAULT_TIMEOUT = 30.0
USER_AGENT = f"httpy/{__version__}"


def create_http_client(*, timeout: float = DEFAULT_TIMEOUT) -> httpx.Client:
    """Create the default httpx transport.

    Base URLs are resolved by httpy itself, so the transport never gets one.

    Args:
        timeout: Request timeout in seconds.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        headers={"User-Agent": USER_AGENT},
    )

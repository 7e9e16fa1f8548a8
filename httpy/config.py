"""Client settings and environment loading."""

import os

from pydantic import BaseModel, Field, ValidationError

from httpy._internal.http import DEFAULT_TIMEOUT
from httpy.exceptions import HttpyConfigError

DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)


class ClientSettings(BaseModel):
    """Settings for a StandardClient.

    Fields:
        base_url: Prefix applied to relative request URLs ("" for none)
        timeout: Request timeout in seconds, must be positive
        debug: Write dispatch details to stderr
    """

    base_url: str = ""
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    debug: bool = False

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """Create settings from environment variables.

        Optional environment variables:
            HTTPY_BASE_URL: Base URL for relative requests.
            HTTPY_TIMEOUT_MS: Request timeout in milliseconds.
            HTTPY_DEBUG: Set to "1" to enable debug logging.

        Returns:
            Validated ClientSettings.

        Raises:
            ValueError: If HTTPY_TIMEOUT_MS is not an integer.
            HttpyConfigError: If a value is out of range.
        """
        base_url = os.environ.get("HTTPY_BASE_URL", "")
        timeout_ms = int(os.environ.get("HTTPY_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))
        debug = os.environ.get("HTTPY_DEBUG", "") == "1"

        return build_settings(base_url=base_url, timeout=timeout_ms / 1000, debug=debug)


def build_settings(**values: object) -> ClientSettings:
    """Validate settings values, raising HttpyConfigError on failure."""
    try:
        return ClientSettings(**values)  # type: ignore[arg-type]
    except ValidationError as e:
        raise HttpyConfigError(f"Invalid client settings: {e}") from e

"""Public exceptions for httpy."""


class HttpyError(Exception):
    """Base exception for all httpy errors."""


class HttpyConfigError(HttpyError):
    """Configuration error (invalid settings or env values)."""


class HttpyEncodeError(HttpyError):
    """Request body could not be encoded."""


class HttpyRequestError(HttpyError):
    """Request could not be built or sent."""

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class HttpyTimeoutError(HttpyRequestError):
    """Request did not complete within its timeout."""


class HttpyDecodeError(HttpyError):
    """Response body could not be decoded."""

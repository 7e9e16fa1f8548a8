"""Client protocol and the default httpx-backed implementation."""

import re
import sys
import threading
from typing import Protocol

import httpx

from httpy._internal.http import DEFAULT_TIMEOUT, create_http_client
from httpy._internal.redaction import redact_headers
from httpy.config import ClientSettings
from httpy.exceptions import HttpyConfigError, HttpyRequestError, HttpyTimeoutError
from httpy.request import Request
from httpy.response import Response
from httpy.url import resolve_url

# RFC 7230 token characters.
_METHOD_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
_SUPPORTED_SCHEMES = ("http", "https")


class Client(Protocol):
    """Execution strategy that turns a Request into a Response.

    Test doubles only need to provide these three methods.
    """

    def set_base_url(self, url: str) -> None:
        """Set the prefix applied to relative request URLs."""
        ...

    def set_timeout(self, seconds: float) -> None:
        """Set the timeout used by subsequent requests."""
        ...

    def do(self, request: Request, *, timeout: float | None = None) -> Response:
        """Send `request`.

        If a base URL is set it is prepended to the request's URL, unless
        the request's URL is already fully qualified.
        """
        ...


class StandardClient:
    """Client backed by an httpx.Client.

    Base URL and timeout may be changed at any time, from any thread. Each
    call to `do` takes a snapshot of both, so a change never affects a
    request already in flight.
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        *,
        base_url: str = "",
        timeout: float | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: Transport to send requests through. A default one
                is created (and owned by this client) when omitted.
            base_url: Prefix applied to relative request URLs.
            timeout: Request timeout in seconds. Defaults to the timeout of
                `http_client` when given, otherwise to 30 seconds. A given
                `http_client` is never modified; the timeout is applied per
                request instead.
            debug: Enable debug logging to stderr.
        """
        if timeout is not None and timeout <= 0:
            raise HttpyConfigError(f"timeout must be positive, got {timeout!r}")

        self._owns_http = http_client is None
        if http_client is None:
            http_client = create_http_client(timeout=timeout or DEFAULT_TIMEOUT)

        self._http = http_client
        self._base_url = base_url
        self._timeout = httpx.Timeout(timeout) if timeout is not None else http_client.timeout
        self._debug = debug
        self._lock = threading.Lock()

    @classmethod
    def from_env(cls) -> "StandardClient":
        """Create a client from HTTPY_* environment variables.

        See `ClientSettings.from_env` for the variables read.
        """
        settings = ClientSettings.from_env()
        return cls(
            base_url=settings.base_url,
            timeout=settings.timeout,
            debug=settings.debug,
        )

    def __enter__(self) -> "StandardClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @property
    def base_url(self) -> str:
        with self._lock:
            return self._base_url

    @property
    def timeout(self) -> httpx.Timeout:
        with self._lock:
            return self._timeout

    @property
    def http_client(self) -> httpx.Client:
        """The underlying httpx transport."""
        return self._http

    def set_base_url(self, url: str) -> None:
        with self._lock:
            self._base_url = url

    def set_timeout(self, seconds: float) -> None:
        if seconds <= 0:
            raise HttpyConfigError(f"timeout must be positive, got {seconds!r}")
        timeout = httpx.Timeout(seconds)
        with self._lock:
            self._timeout = timeout
            if self._owns_http:
                self._http.timeout = timeout

    def close(self) -> None:
        """Close the underlying transport if this client created it."""
        if self._owns_http:
            self._http.close()

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[httpy] {message}", file=sys.stderr)

    def do(self, request: Request, *, timeout: float | None = None) -> Response:
        """Send `request` and return its response.

        Args:
            request: The request to send.
            timeout: Optional timeout in seconds for this call only. This is
                the only way to bound a call: a request in flight cannot be
                cancelled from another thread.

        Returns:
            The response. The caller owns its body and must close it.

        Raises:
            HttpyRequestError: If the request could not be built (invalid
                method, unparsable URL, unsupported scheme, unreadable body)
                or sent.
            HttpyTimeoutError: If the request timed out.
        """
        with self._lock:
            base_url = self._base_url
            call_timeout = self._timeout
        if timeout is not None:
            call_timeout = httpx.Timeout(timeout)

        method = request.method
        target = resolve_url(base_url, request.url)
        self._log_debug(f"{method} {target} headers={redact_headers(request.headers)}")

        http_request = self._build(request, method, target, call_timeout)

        try:
            raw = self._http.send(http_request, stream=True)
        except httpx.TimeoutException as e:
            self._log_debug(f"{method} {target} timed out")
            raise HttpyTimeoutError(
                f"{method} {target} timed out: {e}", method=method, url=target
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as e:
            self._log_debug(f"{method} {target} failed: {e}")
            raise HttpyRequestError(
                f"{method} {target} failed: {e}", method=method, url=target
            ) from e

        self._log_debug(f"{method} {target} -> {raw.status_code}")
        return Response(raw)

    def _build(
        self,
        request: Request,
        method: str,
        target: str,
        timeout: httpx.Timeout,
    ) -> httpx.Request:
        """Build the transport-level request, validating method and URL."""
        if not _METHOD_TOKEN.fullmatch(method):
            raise HttpyRequestError(f"Invalid method {method!r}", method=method, url=target)

        try:
            url = httpx.URL(target)
        except httpx.InvalidURL as e:
            raise HttpyRequestError(
                f"Invalid URL {target!r}: {e}", method=method, url=target
            ) from e
        if url.scheme not in _SUPPORTED_SCHEMES:
            raise HttpyRequestError(
                f"Unsupported protocol scheme {url.scheme!r} in {target!r}",
                method=method,
                url=target,
            )

        # List of pairs so multi-valued headers are appended, not replaced.
        headers = [
            (name, value) for name, values in request.headers.items() for value in values
        ]

        # Read what is left of the body so Content-Length matches what is sent.
        content: bytes | None = None
        if request.body is not None:
            try:
                content = request.body.read()
            except (OSError, ValueError) as e:
                raise HttpyRequestError(
                    f"Failed to read request body: {e}", method=method, url=target
                ) from e

        try:
            return self._http.build_request(
                method,
                url,
                headers=headers,
                content=content,
                timeout=timeout,
            )
        except (httpx.InvalidURL, ValueError) as e:
            raise HttpyRequestError(
                f"Invalid request {method} {target}: {e}", method=method, url=target
            ) from e


def new_client(
    http_client: httpx.Client | None = None,
    *,
    base_url: str = "",
    timeout: float | None = None,
) -> Client:
    """Create a client, using a default httpx transport if none is given."""
    return StandardClient(http_client, base_url=base_url, timeout=timeout)


_default_client: Client | None = None
_default_lock = threading.Lock()


def get_default_client() -> Client:
    """Return the process-wide default client.

    It is created with default settings on first use unless one was
    installed with `set_default_client`.
    """
    global _default_client
    with _default_lock:
        if _default_client is None:
            _default_client = StandardClient()
        return _default_client


def set_default_client(client: Client | None) -> Client | None:
    """Install `client` as the process-wide default.

    Passing None discards the current default, so a fresh one is created
    on next use.

    Returns:
        The previously installed default, if any.
    """
    global _default_client
    with _default_lock:
        previous = _default_client
        _default_client = client
        return previous

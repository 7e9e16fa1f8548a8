"""Fluent builder for outbound HTTP requests."""

import base64
import io
import json
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, BinaryIO
from urllib.parse import urlencode

from pydantic import BaseModel

from httpy.exceptions import HttpyEncodeError

if TYPE_CHECKING:
    from httpy.client import Client
    from httpy.response import Response

CONTENT_TYPE_HEADER = "Content-Type"
AUTHORIZATION_HEADER = "Authorization"

_BEARER_PREFIX = "bearer "


class Request:
    """A not-yet-sent HTTP request with a fluent builder API.

    Every setter mutates this instance and returns it, so calls can be
    chained. Requests are not copy-on-write and must not be mutated from
    several threads, or while being dispatched.

    The body is a single-read stream: dispatching the same request twice
    sends an exhausted body the second time.
    """

    def __init__(self, url: str, method: str) -> None:
        self._url = url
        self._method = method
        self._headers: dict[str, list[str]] = {}
        self._body: BinaryIO | None = None

    def __repr__(self) -> str:
        return f"<Request [{self._method} {self._url}]>"

    @property
    def url(self) -> str:
        """The configured URL, absolute or relative to a client base URL."""
        return self._url

    @property
    def method(self) -> str:
        """The configured HTTP method."""
        return self._method

    @property
    def headers(self) -> dict[str, list[str]]:
        """Header name to list of values."""
        return self._headers

    @property
    def body(self) -> BinaryIO | None:
        """The body stream, or None when no payload is sent."""
        return self._body

    def set_body(self, body: BinaryIO | bytes | None) -> "Request":
        """Set the body, replacing any previously set body.

        Args:
            body: A binary file-like object, raw bytes, or None to clear it.

        Returns:
            This request.
        """
        if isinstance(body, (bytes, bytearray)):
            body = io.BytesIO(bytes(body))
        self._body = body
        return self

    def set_content_type(self, value: str) -> "Request":
        """Set the Content-Type header, replacing previous values."""
        return self.set_header(CONTENT_TYPE_HEADER, value)

    def with_json(self, data: Any) -> "Request":
        """Set the body to `data` encoded as JSON.

        Pydantic models are dumped in JSON mode before encoding. Also sets
        the Content-Type header to "application/json".

        Raises:
            HttpyEncodeError: If `data` cannot be serialized.
        """
        if isinstance(data, BaseModel):
            data = data.model_dump(mode="json")
        try:
            payload = json.dumps(data)
        except (TypeError, ValueError) as e:
            raise HttpyEncodeError(f"Failed to encode JSON body: {e}") from e
        return self.set_body(payload.encode("utf-8")).set_content_type("application/json")

    def with_plain_text(self, text: str) -> "Request":
        """Set the body to `text` and the Content-Type header to "text/plain"."""
        return self.set_body(text.encode("utf-8")).set_content_type("text/plain")

    def with_form(self, values: Mapping[str, str | Sequence[str]]) -> "Request":
        """Set the body to URL-encoded form values.

        Multi-valued keys are encoded once per value. Keys are sorted.
        Also sets the Content-Type header to
        "application/x-www-form-urlencoded".
        """
        pairs: list[tuple[str, str]] = []
        for key in sorted(values):
            value = values[key]
            if isinstance(value, str):
                pairs.append((key, value))
            else:
                pairs.extend((key, v) for v in value)
        encoded = urlencode(pairs)
        return self.set_body(encoded.encode("ascii")).set_content_type(
            "application/x-www-form-urlencoded"
        )

    def with_bearer(self, token: str) -> "Request":
        """Set the Authorization header to a bearer token.

        A leading "Bearer " (any case) already present in `token` is
        stripped first, so the prefix is never doubled.
        """
        if token.lower().startswith(_BEARER_PREFIX):
            token = token[len(_BEARER_PREFIX):]
        return self.set_header(AUTHORIZATION_HEADER, f"Bearer {token}")

    def with_basic_auth(self, username: str, password: str) -> "Request":
        """Set the Authorization header to HTTP basic credentials."""
        credentials = f"{username}:{password}".encode("utf-8")
        value = base64.b64encode(credentials).decode("ascii")
        return self.set_header(AUTHORIZATION_HEADER, f"Basic {value}")

    def set_header(self, name: str, *values: str) -> "Request":
        """Replace all values of header `name`.

        Called without values, the header is removed.
        """
        if not values:
            self._headers.pop(name, None)
        else:
            self._headers[name] = list(values)
        return self

    def remove_header(self, name: str) -> "Request":
        """Remove header `name` if present."""
        return self.set_header(name)

    def do(self, client: "Client | None" = None, *, timeout: float | None = None) -> "Response":
        """Send this request.

        Args:
            client: Client to send through. Defaults to the process-wide
                default client.
            timeout: Optional per-call timeout in seconds, overriding the
                client's timeout. A sent request cannot be cancelled from
                another thread; the timeout is the only bound on the call.

        Returns:
            The response. The caller owns its body and must close it.

        Raises:
            HttpyRequestError: If the request could not be built or sent.
        """
        if client is None:
            from httpy.client import get_default_client

            client = get_default_client()
        return client.do(self, timeout=timeout)


def new_request(url: str, method: str) -> Request:
    """Return a new Request for the given url and method."""
    return Request(url, method)

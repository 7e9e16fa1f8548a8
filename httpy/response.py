"""Response wrapper adding JSON decoding to httpx responses."""

import json
from collections.abc import Iterator
from typing import Any, TypeVar, overload

import httpx
from pydantic import TypeAdapter, ValidationError

from httpy.exceptions import HttpyDecodeError

T = TypeVar("T")


class Response:
    """The response to a dispatched request.

    Wraps the raw httpx.Response without copying it. The body is streamed:
    the caller owns it and must consume or close it exactly once, either
    with `close()` or by using the response as a context manager.
    """

    def __init__(self, raw: httpx.Response) -> None:
        self._raw = raw
        self._body_consumed = False

    def __repr__(self) -> str:
        return f"<Response [{self._raw.status_code}]>"

    def __enter__(self) -> "Response":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @property
    def raw(self) -> httpx.Response:
        """The underlying httpx response."""
        return self._raw

    @property
    def status_code(self) -> int:
        return self._raw.status_code

    @property
    def reason_phrase(self) -> str:
        return self._raw.reason_phrase

    @property
    def headers(self) -> httpx.Headers:
        return self._raw.headers

    @property
    def url(self) -> str:
        return str(self._raw.url)

    def iter_bytes(self, chunk_size: int | None = None) -> Iterator[bytes]:
        """Stream the body in decoded chunks."""
        return self._raw.iter_bytes(chunk_size)

    def read(self) -> bytes:
        """Read and return the whole body."""
        return self._raw.read()

    def close(self) -> None:
        """Release the underlying connection."""
        self._raw.close()

    @overload
    def decode_json(self, dest: None = None) -> Any: ...

    @overload
    def decode_json(self, dest: type[T]) -> T: ...

    def decode_json(self, dest: Any = None) -> Any:
        """Decode the JSON body.

        The body is not cached, so a response can be decoded only once.
        The body is not closed on the caller's behalf.

        Args:
            dest: Optional target type (a pydantic model, dataclass, or typed
                container such as ``dict[str, str]``). When given, the decoded
                JSON is validated into an instance of it.

        Returns:
            The decoded JSON value, or an instance of `dest`.

        Raises:
            HttpyDecodeError: If the body was already consumed, is not valid
                JSON, or does not match `dest`.
        """
        if self._body_consumed:
            raise HttpyDecodeError("Response body already consumed")
        self._body_consumed = True

        try:
            content = b"".join(self._raw.iter_bytes())
        except (httpx.StreamError, httpx.HTTPError) as e:
            raise HttpyDecodeError(f"Failed to read response body: {e}") from e

        try:
            data = json.loads(content)
        except ValueError as e:
            raise HttpyDecodeError(f"Invalid JSON body: {e}") from e

        if dest is None:
            return data
        try:
            return TypeAdapter(dest).validate_python(data)
        except ValidationError as e:
            raise HttpyDecodeError(f"JSON body does not match {dest!r}: {e}") from e

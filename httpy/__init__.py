"""httpy: fluent HTTP request builder with pluggable clients.

Build a request with chained calls, then send it through a Client:

    import httpy

    resp = httpy.post("/api").with_bearer(token).with_json({"a": 1}).do(client)
    with resp:
        data = resp.decode_json()

Public API:
    Request, new_request - Request builder
    get, post, put, patch, delete - Method shortcuts
    Client, StandardClient, new_client - Execution strategies
    get_default_client, set_default_client - Process-wide default client
    Response - Response wrapper with decode_json
    resolve_url - Base URL joining
"""

from httpy._version import __version__
from httpy.client import (
    Client,
    StandardClient,
    get_default_client,
    new_client,
    set_default_client,
)
from httpy.config import ClientSettings
from httpy.exceptions import (
    HttpyConfigError,
    HttpyDecodeError,
    HttpyEncodeError,
    HttpyError,
    HttpyRequestError,
    HttpyTimeoutError,
)
from httpy.methods import delete, get, patch, post, put
from httpy.request import AUTHORIZATION_HEADER, CONTENT_TYPE_HEADER, Request, new_request
from httpy.response import Response
from httpy.url import resolve_url

__all__ = [
    "__version__",
    "AUTHORIZATION_HEADER",
    "CONTENT_TYPE_HEADER",
    "Client",
    "ClientSettings",
    "HttpyConfigError",
    "HttpyDecodeError",
    "HttpyEncodeError",
    "HttpyError",
    "HttpyRequestError",
    "HttpyTimeoutError",
    "Request",
    "Response",
    "StandardClient",
    "delete",
    "get",
    "get_default_client",
    "new_client",
    "new_request",
    "patch",
    "post",
    "put",
    "resolve_url",
    "set_default_client",
]

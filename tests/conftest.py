"""Shared fixtures for httpy tests."""

import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import httpx
import pytest

from httpy.client import set_default_client
from httpy.request import Request
from httpy.response import Response


class StubClient:
    """Deterministic, programmable Client for tests."""

    def __init__(self, response: Response | None = None) -> None:
        self.response = response or Response(httpx.Response(200))
        self.base_url = ""
        self.timeout: float | None = None
        self.requests: list[Request] = []
        self.timeouts: list[float | None] = []

    def set_base_url(self, url: str) -> None:
        self.base_url = url

    def set_timeout(self, seconds: float) -> None:
        self.timeout = seconds

    def do(self, request: Request, *, timeout: float | None = None) -> Response:
        self.requests.append(request)
        self.timeouts.append(timeout)
        return self.response


@pytest.fixture
def stub_client() -> StubClient:
    return StubClient()


@pytest.fixture(autouse=True)
def reset_default_client():
    """Discard any default client a test installed or created."""
    yield
    previous = set_default_client(None)
    close = getattr(previous, "close", None)
    if close is not None:
        close()


class _EchoHandler(BaseHTTPRequestHandler):
    """Echoes the received body and Content-Length as JSON."""

    def do_POST(self) -> None:
        length = self.headers.get("Content-Length")
        body = self.rfile.read(int(length)) if length else b""
        payload = json.dumps({"body": body.decode(), "content_length": length}).encode()
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, format: str, *args: object) -> None:
        pass


@pytest.fixture
def echo_server():
    """Run a local HTTP server and yield its base URL."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), _EchoHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()

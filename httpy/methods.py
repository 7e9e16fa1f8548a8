"""Shortcuts for building requests with a preset method."""

from httpy.request import Request


def get(url: str) -> Request:
    """Return a new GET request to `url`."""
    return Request(url, "GET")


def post(url: str) -> Request:
    """Return a new POST request to `url`."""
    return Request(url, "POST")


def put(url: str) -> Request:
    """Return a new PUT request to `url`."""
    return Request(url, "PUT")


def patch(url: str) -> Request:
    """Return a new PATCH request to `url`."""
    return Request(url, "PATCH")


def delete(url: str) -> Request:
    """Return a new DELETE request to `url`."""
    return Request(url, "DELETE")

"""Redaction of sensitive header values for debug output."""

from collections.abc import Mapping, Sequence

REDACT_HEADERS: frozenset[str] = frozenset({
    "authorization",
    "proxy-authorization",
    "cookie",
    "set-cookie",
    "x-api-key",
    "x-auth-token",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: Mapping[str, Sequence[str]]) -> dict[str, list[str]]:
    """Return a copy of a header multimap with sensitive values replaced.

    Header names are matched case-insensitively. The original mapping is
    never mutated.

    Args:
        headers: Header name to list of values.

    Returns:
        A new dictionary with sensitive values replaced by "[REDACTED]".
    """
    result: dict[str, list[str]] = {}
    for name, values in headers.items():
        if name.lower() in REDACT_HEADERS:
            result[name] = [REDACTED_VALUE for _ in values]
        else:
            result[name] = list(values)
    return result

"""Base URL resolution."""


def resolve_url(base: str, target: str) -> str:
    """Join a client base URL and a request URL.

    An empty base, or a target starting with "http", returns the target
    unchanged. Otherwise exactly one trailing slash is trimmed from the base
    and exactly one leading slash from the target before joining them with
    a single "/". No URL validation is performed.

    Examples:
        resolve_url("http://h/api/", "/values") -> "http://h/api/values"
        resolve_url("", "/api") -> "/api"
        resolve_url("http://a", "https://b/x") -> "https://b/x"
    """
    if not base or target.startswith("http"):
        return target
    if base.endswith("/"):
        base = base[:-1]
    if target.startswith("/"):
        target = target[1:]
    return f"{base}/{target}"

"""
Request building helpers.

Turns a RequestSpec into the URL, header list and body the transport
sends. Nothing here touches the network.
"""

import base64

from ..schemas.request import Auth, BasicAuth, BearerAuth, NoAuth, RequestSpec


# Only these methods ever carry a request body
METHODS_WITH_BODY = frozenset({"POST", "PUT", "PATCH"})


def assemble_url(url: str, query_lines: list[str]) -> str:
    """
    Append raw key=value lines to a URL as a query string.

    Blank lines and lines without "=" are discarded. No percent-encoding
    is applied.

    Example:
        >>> assemble_url("https://x.test/a", ["a=1", "b=2"])
        'https://x.test/a?a=1&b=2'
        >>> assemble_url("https://x.test/a?z=0", ["a=1"])
        'https://x.test/a?z=0&a=1'
    """
    pairs = [line for line in query_lines if line.strip() and "=" in line]
    if not pairs:
        return url

    separator = "&" if "?" in url else "?"
    return url + separator + "&".join(pairs)


def auth_header(auth: Auth) -> tuple[str, str] | None:
    """
    Build the Authorization header for an auth variant.

    Returns:
        ("Authorization", value) or None for NoAuth
    """
    if isinstance(auth, NoAuth):
        return None
    if isinstance(auth, BearerAuth):
        return "Authorization", f"Bearer {auth.token}"
    if isinstance(auth, BasicAuth):
        credentials = f"{auth.username}:{auth.password}".encode("utf-8")
        return "Authorization", f"Basic {base64.b64encode(credentials).decode('ascii')}"
    raise TypeError(f"Unsupported auth variant: {type(auth).__name__}")


def parse_header_line(line: str) -> tuple[str, str] | None:
    """Split a "Name: Value" line on the first colon, or None if there is none."""
    name, sep, value = line.partition(":")
    if not sep:
        return None
    return name.strip(), value.strip()


def build_headers(spec: RequestSpec) -> list[tuple[str, str]]:
    """
    Build the outgoing header list.

    The auth-derived Authorization header comes first, followed by every
    user header line in order. Duplicates are kept, including a second
    Authorization header.
    """
    headers: list[tuple[str, str]] = []

    derived = auth_header(spec.auth)
    if derived is not None:
        headers.append(derived)

    for line in spec.headers:
        parsed = parse_header_line(line)
        if parsed is not None:
            headers.append(parsed)

    return headers


def build_body(spec: RequestSpec) -> str | None:
    """Return the body to send, or None when the method must not carry one."""
    if spec.method in METHODS_WITH_BODY and spec.body:
        return spec.body
    return None

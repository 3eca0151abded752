"""
cURL command importer.

Reads a pasted cURL command line and recognises the flags that matter
for building a request: method, URL, headers, body and credentials.
Anything else on the command line is ignored.
"""

import base64
import binascii

from ..logging_config import get_logger
from ..schemas.request import (
    HTTP_METHODS,
    Auth,
    BasicAuth,
    BearerAuth,
    PartialRequestSpec,
)


logger = get_logger(__name__)


SEPARATORS = frozenset(" \t\n\r")
QUOTES = frozenset("'\"")

METHOD_FLAGS = frozenset({"-X", "--request"})
HEADER_FLAGS = frozenset({"-H", "--header"})
DATA_FLAGS = frozenset({"-d", "--data", "--data-raw", "--data-binary"})
USER_FLAGS = frozenset({"-u", "--user"})
VALUE_FLAGS = METHOD_FLAGS | HEADER_FLAGS | DATA_FLAGS | USER_FLAGS


def split_command(text: str) -> list[str]:
    """
    Split a command line into tokens.

    Whitespace separates tokens outside quotes. A quote opened with ' or "
    is closed only by the same character, and the quotes themselves are
    not part of the token. Unquoted backslashes are dropped wherever they
    appear; quoted ones are kept.

    Example:
        >>> split_command("curl -H 'A: b' https://x.test")
        ['curl', '-H', 'A: b', 'https://x.test']
    """
    tokens: list[str] = []
    current: list[str] = []
    in_token = False
    quote: str | None = None

    for ch in text:
        if quote is not None:
            if ch == quote:
                quote = None
            else:
                current.append(ch)
        elif ch in QUOTES:
            quote = ch
            in_token = True
        elif ch == "\\":
            continue
        elif ch in SEPARATORS:
            if in_token:
                tokens.append("".join(current))
                current = []
                in_token = False
        else:
            current.append(ch)
            in_token = True

    if in_token:
        tokens.append("".join(current))

    return tokens


def parse_method(value: str) -> str:
    """Match a method name case-insensitively, falling back to GET."""
    upper = value.upper()
    return upper if upper in HTTP_METHODS else "GET"


def parse_basic_credentials(encoded: str) -> BasicAuth | None:
    """Decode base64 "user:pass" credentials, or None if they don't decode."""
    try:
        decoded = base64.b64decode(encoded.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None

    username, sep, password = decoded.partition(":")
    if not sep:
        return None
    return BasicAuth(username=username, password=password)


def parse_authorization(value: str) -> Auth | None:
    """
    Turn an Authorization header value into an auth variant.

    Returns:
        BearerAuth or BasicAuth, or None when the value is not a
        recognised scheme
    """
    lowered = value.lower()
    if lowered.startswith("bearer "):
        return BearerAuth(token=value[len("bearer "):].strip())
    if lowered.startswith("basic "):
        return parse_basic_credentials(value[len("basic "):])
    return None


def import_curl(text: str) -> PartialRequestSpec | None:
    """
    Import a cURL command as a partial request.

    Flags are applied left to right, so a later flag overrides an
    earlier one of the same kind. -d promotes a GET to POST at the point
    it appears.

    Args:
        text: Pasted command line

    Returns:
        PartialRequestSpec, or None if the text is not a cURL command or
        has no http(s) URL
    """
    stripped = text.strip()
    if not stripped.startswith("curl"):
        logger.debug("curl_import_rejected", reason="not_curl")
        return None

    tokens = split_command(stripped)
    if not tokens or tokens[0] != "curl":
        logger.debug("curl_import_rejected", reason="not_curl")
        return None

    method = "GET"
    url: str | None = None
    headers: list[str] = []
    body: str | None = None
    auth: Auth | None = None

    position = 1
    while position < len(tokens):
        token = tokens[position]
        position += 1

        if token in VALUE_FLAGS:
            if position >= len(tokens):
                break
            value = tokens[position]
            position += 1

            if token in METHOD_FLAGS:
                method = parse_method(value)
            elif token in HEADER_FLAGS:
                name, sep, header_value = value.partition(":")
                if sep and name.strip().lower() == "authorization":
                    header_auth = parse_authorization(header_value.strip())
                    if header_auth is not None:
                        auth = header_auth
                    elif not header_value.strip().lower().startswith("basic "):
                        headers.append(value)
                else:
                    headers.append(value)
            elif token in DATA_FLAGS:
                body = value
                if method == "GET":
                    method = "POST"
            elif token in USER_FLAGS:
                username, sep, password = value.partition(":")
                if sep:
                    auth = BasicAuth(username=username, password=password)
        elif token.startswith(("http://", "https://")):
            url = token

    if url is None:
        logger.debug("curl_import_rejected", reason="no_url")
        return None

    return PartialRequestSpec(
        method=method,
        url=url,
        headers=headers or None,
        body=body or None,
        auth=auth,
    )

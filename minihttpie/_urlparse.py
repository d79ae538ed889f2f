from __future__ import annotations

import httpx

from ._exceptions import InvalidURL

MAX_PORT = 65535


def validate_url(url: str) -> str:
    """
    Check that `url` is an absolute URL and hand it back untouched.

    Parsing is left to `httpx.URL`; a scheme and a host are then required.
    """
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise InvalidURL(str(exc)) from exc

    if not parsed.scheme:
        raise InvalidURL(f"Relative URL without a base: {url!r}")
    if not parsed.raw_host:
        raise InvalidURL(f"Empty host: {url!r}")
    # httpx percent-encodes characters a hostname may not contain.
    if b"%" in parsed.raw_host:
        raise InvalidURL(f"Invalid hostname: {url!r}")
    if parsed.port is not None and parsed.port > MAX_PORT:
        raise InvalidURL(f"Invalid port: {parsed.port!r}")
    return url

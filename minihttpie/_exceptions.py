"""
Exception hierarchy:

    MiniHttpieError
    ├── ParseError
    │   ├── MalformedPair
    │   └── InvalidURL
    └── RenderError
        ├── HeaderDecodeError
        └── InvalidJSON

Transport failures are not wrapped: they surface as ``httpx.HTTPError``.
"""

from __future__ import annotations


class MiniHttpieError(Exception):
    """Base class for every error raised by minihttpie itself."""


class ParseError(MiniHttpieError):
    """A command-line argument could not be parsed."""


class MalformedPair(ParseError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Failed to parse {token!r}, expected 'key=value'.")
        self.token = token


class InvalidURL(ParseError):
    pass


class RenderError(MiniHttpieError):
    """The response could not be rendered."""


class HeaderDecodeError(RenderError):
    def __init__(self, name: str, value: bytes) -> None:
        super().__init__(f"Header {name!r} is not valid text: {value!r}")
        self.name = name
        self.value = value


class InvalidJSON(RenderError):
    def __init__(self, message: str, *, text: str = "") -> None:
        super().__init__(message)
        self.text = text

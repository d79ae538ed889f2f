# ruff: noqa: I001
import logging as _logging

from ._version import __description__, __title__, __version__
from ._config import ClientConfig
from ._exceptions import (
    HeaderDecodeError,
    InvalidJSON,
    InvalidURL,
    MalformedPair,
    MiniHttpieError,
    ParseError,
    RenderError,
)
from ._models import ContentType, KeyValuePair, build_body, parse_kv_pair
from ._urlparse import validate_url
from ._client import build_client, build_get, build_post, get, post, send
from ._render import RenderedResponse, render
from .cli import main

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

_EXCLUDED_FROM_ALL = {"cli", "main"}

__all__ = sorted(
    (
        member
        for member in list(vars().keys())
        if (
            not member.startswith("_")
            or member in ["__description__", "__title__", "__version__"]
        )
        and member not in _EXCLUDED_FROM_ALL
    ),
    key=str.casefold,
)

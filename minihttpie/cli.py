from __future__ import annotations

import logging
import sys
import typing

import click
import httpx

from . import _client
from ._config import ClientConfig
from ._exceptions import ParseError, RenderError
from ._models import KeyValuePair, parse_kv_pair
from ._render import render, render_error
from ._urlparse import validate_url
from ._version import __version__

logger = logging.getLogger("minihttpie.cli")

# ---------------------------------------------------------------------------
# Argument types
# ---------------------------------------------------------------------------


class URLParamType(click.ParamType):
    name = "url"

    def convert(
        self,
        value: typing.Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> str:
        try:
            return validate_url(value)
        except ParseError as exc:
            self.fail(str(exc), param, ctx)


class KeyValueParamType(click.ParamType):
    name = "key=value"

    def convert(
        self,
        value: typing.Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> KeyValuePair:
        if isinstance(value, KeyValuePair):
            return value
        try:
            return parse_kv_pair(value)
        except ParseError as exc:
            self.fail(str(exc), param, ctx)


URL = URLParamType()
KEY_VALUE = KeyValueParamType()

# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _use_color() -> bool:
    return sys.stdout.isatty()


def _run(send: typing.Callable[[httpx.Client], httpx.Response]) -> None:
    color = _use_color()
    try:
        with _client.build_client(ClientConfig()) as client:
            response = send(client)
            render(response, color=color)
    except (httpx.HTTPError, httpx.InvalidURL, RenderError) as exc:
        logger.error("%s: %s", type(exc).__name__, exc, exc_info=True)
        render_error(exc, color=color)
        sys.exit(1)


@click.group(help="A tiny HTTPie: send GET/POST requests and pretty-print the response.")
@click.version_option(__version__, prog_name="minihttpie")
def main() -> None:
    pass


@main.command(help="Send a GET request to URL.")
@click.version_option(__version__, prog_name="minihttpie")
@click.argument("url", type=URL)
def get(url: str) -> None:
    _run(lambda client: _client.get(client, url))


@main.command(help="Send a POST request to URL with a JSON body built from key=value pairs.")
@click.version_option(__version__, prog_name="minihttpie")
@click.argument("url", type=URL)
@click.argument("body", nargs=-1, type=KEY_VALUE)
def post(url: str, body: tuple[KeyValuePair, ...]) -> None:
    _run(lambda client: _client.post(client, url, body))

from __future__ import annotations

import logging
import typing

import httpx

from ._config import ClientConfig
from ._models import KeyValuePair, build_body

logger = logging.getLogger("minihttpie.client")


def build_client(
    config: ClientConfig | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """
    Create the `httpx.Client` that issues every request of the process.

    The default headers from `config` are attached here, once, so each
    request built from this client carries them.
    """
    config = config or ClientConfig()
    return httpx.Client(transport=transport, **config.client_kwargs())


def build_get(client: httpx.Client, url: str) -> httpx.Request:
    return client.build_request("GET", url)


def build_post(
    client: httpx.Client, url: str, pairs: typing.Iterable[KeyValuePair]
) -> httpx.Request:
    # httpx sets "Content-Type: application/json" for json= bodies.
    return client.build_request("POST", url, json=build_body(pairs))


def send(client: httpx.Client, request: httpx.Request) -> httpx.Response:
    """Send `request` and return the fully read response.

    Transport errors propagate as raised by httpx.
    """
    logger.debug("%s %s", request.method, request.url)
    response = client.send(request)
    logger.debug(
        "%s %s -> %d %s",
        request.method,
        request.url,
        response.status_code,
        response.reason_phrase,
    )
    return response


def get(client: httpx.Client, url: str) -> httpx.Response:
    return send(client, build_get(client, url))


def post(
    client: httpx.Client, url: str, pairs: typing.Iterable[KeyValuePair]
) -> httpx.Response:
    return send(client, build_post(client, url, pairs))

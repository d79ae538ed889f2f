from __future__ import annotations

import dataclasses
import json
import logging

import click
import httpx
from rich.console import Console
from rich.text import Text

from ._exceptions import HeaderDecodeError, InvalidJSON
from ._models import JSON_MEDIA_TYPE, ContentType

logger = logging.getLogger("minihttpie.render")

STATUS_STYLE = "blue"
HEADER_NAME_STYLE = "green"
JSON_STYLE = "cyan"

# ---------------------------------------------------------------------------
# Response snapshot
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class RenderedResponse:
    status_line: str
    headers: list[tuple[str, bytes]]
    raw_content_type: bytes | None
    text: str

    @classmethod
    def from_response(cls, response: httpx.Response) -> RenderedResponse:
        headers = [
            (name.decode("latin-1").lower(), value)
            for name, value in response.headers.raw
        ]
        raw_content_type = next(
            (value for name, value in headers if name == "content-type"), None
        )
        status_line = (
            f"{response.http_version} {response.status_code} "
            f"{response.reason_phrase}"
        ).rstrip()
        return cls(
            status_line=status_line,
            headers=headers,
            raw_content_type=raw_content_type,
            text=response.text,
        )

    @property
    def content_type(self) -> ContentType | None:
        if self.raw_content_type is None:
            return None
        return ContentType.from_header(
            decode_header_value("content-type", self.raw_content_type)
        )


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def decode_header_value(name: str, value: bytes) -> str:
    """Decode a header value that must be visible ASCII (tab allowed)."""
    if not all(byte == 0x09 or 0x20 <= byte < 0x7F for byte in value):
        raise HeaderDecodeError(name, value)
    return value.decode("ascii")


def quote_header_value(value: bytes) -> str:
    """
    Render raw header bytes double-quoted.

    Visible ASCII and tab pass through, ``"`` is backslash-escaped and any
    other byte is written as ``\\x`` followed by its unpadded hex value.
    """
    parts = ['"']
    for byte in value:
        if byte == 0x22:
            parts.append('\\"')
        elif byte == 0x09 or 0x20 <= byte < 0x7F:
            parts.append(chr(byte))
        else:
            parts.append(f"\\x{byte:x}")
    parts.append('"')
    return "".join(parts)


def format_header(name: str, value: bytes) -> str:
    return f"{name}: {quote_header_value(value)}"


def format_json(text: str) -> str:
    if not text.strip():
        return ""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidJSON(
            f"Response declared {JSON_MEDIA_TYPE} but the body is not valid "
            f"JSON: {exc}",
            text=text,
        ) from exc
    return json.dumps(data, indent=4, ensure_ascii=False)


def format_body(rendered: RenderedResponse) -> tuple[str, bool]:
    """Return the body text and whether it was formatted as JSON."""
    if rendered.content_type is ContentType.JSON:
        return format_json(rendered.text), True
    return rendered.text, False


# ---------------------------------------------------------------------------
# Writers
# ---------------------------------------------------------------------------


def _render_plain(rendered: RenderedResponse) -> None:
    click.echo(rendered.status_line)
    click.echo()
    for name, value in rendered.headers:
        click.echo(format_header(name, value))
    click.echo()
    body, _ = format_body(rendered)
    # color=True stops click from stripping escape sequences out of the body.
    click.echo(body, color=True)


def _render_rich(console: Console, rendered: RenderedResponse) -> None:
    console.print(Text(rendered.status_line, style=STATUS_STYLE))
    console.print()

    for name, value in rendered.headers:
        header_text = Text()
        header_text.append(name, style=HEADER_NAME_STYLE)
        header_text.append(": ")
        header_text.append(quote_header_value(value))
        console.print(header_text)

    console.print()

    body, is_json = format_body(rendered)
    if is_json:
        console.print(Text(body, style=JSON_STYLE))
    else:
        # Text() drops control codes; other bodies go out byte for byte.
        console.file.write(body + "\n")
        console.file.flush()


def render(
    response: httpx.Response,
    *,
    color: bool = False,
    console: Console | None = None,
) -> None:
    """
    Write `response` to standard output: status line, headers, body.

    Sections are written in order, so a failure while formatting the body
    leaves the status line and headers on screen.
    """
    rendered = RenderedResponse.from_response(response)
    logger.debug("rendering %s (color=%s)", rendered.status_line, color)
    if color:
        console = console or Console(highlight=False, soft_wrap=True)
        _render_rich(console, rendered)
    else:
        _render_plain(rendered)


def render_error(exc: BaseException, *, color: bool = False) -> None:
    message = f"{type(exc).__name__}: {exc}"
    if color:
        console = Console(stderr=True, highlight=False, soft_wrap=True)
        error_text = Text()
        error_text.append(type(exc).__name__, style="bold red")
        error_text.append(f": {exc}")
        console.print(error_text)
    else:
        click.echo(message, err=True)

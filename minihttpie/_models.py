from __future__ import annotations

import dataclasses
import enum
import typing

from ._exceptions import MalformedPair

JSON_MEDIA_TYPE = "application/json"


@dataclasses.dataclass(frozen=True)
class KeyValuePair:
    key: str
    value: str


def parse_kv_pair(token: str) -> KeyValuePair:
    """
    Parse a ``key=value`` command line token.

    Only the first ``=`` separates, so ``a=b=c`` gives the value ``b=c``.
    An empty value (``age=``) is valid, and so is an empty key (``=x``).
    """
    key, sep, value = token.partition("=")
    if not sep:
        raise MalformedPair(token)
    return KeyValuePair(key=key, value=value)


def build_body(pairs: typing.Iterable[KeyValuePair]) -> dict[str, str]:
    body: dict[str, str] = {}
    for pair in pairs:
        body[pair.key] = pair.value
    return body


class ContentType(enum.Enum):
    JSON = "json"
    OTHER = "other"

    @classmethod
    def from_header(cls, value: str | None) -> ContentType | None:
        """
        Classify a ``Content-Type`` header value; ``None`` when absent.

        Parameters count: ``application/json; charset=utf-8`` is ``OTHER``.
        """
        if value is None:
            return None
        parts = [part.strip() for part in value.lower().split(";")]
        media_type = ";".join(part for part in parts if part)
        if media_type == JSON_MEDIA_TYPE:
            return cls.JSON
        return cls.OTHER

from __future__ import annotations

import dataclasses
import typing

from ._version import __version__

POWERED_BY_HEADER = "X-POWERED"


@dataclasses.dataclass(frozen=True)
class ClientConfig:
    """
    Process-wide defaults, built once and attached to the client.

    The two headers are sent with every request the client issues.
    """

    powered_by: str = "Python"
    user_agent: str = f"minihttpie/{__version__}"
    follow_redirects: bool = True
    # None disables every httpx timeout.
    timeout: float | None = None

    def headers(self) -> dict[str, str]:
        return {
            POWERED_BY_HEADER: self.powered_by,
            "User-Agent": self.user_agent,
        }

    def client_kwargs(self) -> dict[str, typing.Any]:
        return {
            "headers": self.headers(),
            "follow_redirects": self.follow_redirects,
            "timeout": self.timeout,
        }

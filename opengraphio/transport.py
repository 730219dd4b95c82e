"""Pluggable async HTTP transport and its httpx-based default."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from opengraphio.errors import TransportError
from opengraphio.request import redact_url

logger = logging.getLogger(__name__)


@dataclass
class TransportResponse:
    """What the client needs from an HTTP response."""

    status_code: int
    content_type: str | None
    body: bytes


class Transport(Protocol):
    """Protocol every transport must implement."""

    async def get(self, url: str) -> TransportResponse:
        """Perform a single GET of *url*. Raises TransportError on failure."""
        ...


class HttpxTransport:
    """Transport backed by :class:`httpx.AsyncClient`.

    A caller-supplied *client* is used as is, with its own redirect and
    timeout settings, and is left open.  Otherwise a short-lived client is
    opened for each request using *timeout* (none by default) and
    *follow_redirects*.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float | None = None,
        follow_redirects: bool = True,
    ) -> None:
        self._client = client
        self.timeout = timeout
        self.follow_redirects = follow_redirects

    async def get(self, url: str) -> TransportResponse:
        try:
            if self._client is not None:
                response = await self._client.get(url)
            else:
                async with httpx.AsyncClient(
                    timeout=self.timeout,
                    follow_redirects=self.follow_redirects,
                ) as client:
                    response = await client.get(url)
        except httpx.HTTPError as exc:
            safe_url = redact_url(url)
            logger.debug("HTTP transport failure for %s: %s", safe_url, exc)
            raise TransportError(str(exc) or type(exc).__name__, url=safe_url) from exc

        return TransportResponse(
            status_code=response.status_code,
            content_type=response.headers.get("content-type"),
            body=response.content,
        )

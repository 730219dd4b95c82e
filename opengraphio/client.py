"""opengraphio.client - one-call access to the OpenGraph.io API.

Basic usage::

    import asyncio
    from opengraphio import ClientOptions, OpenGraphClient, SiteInfo

    async def main():
        client = OpenGraphClient(ClientOptions(app_id="xxxx"))
        result = await client.get_site_info("https://example.com/blog/post")
        if isinstance(result, SiteInfo):
            print(result.hybrid_graph.title)

    asyncio.run(main())

Other services::

    opts = ClientOptions(app_id="xxxx", service="extract", html_elements="h1,h2")
    result = await fetch_site_info("https://example.com", opts)
    for tag in result.tags:
        print(tag.tag_name, tag.inner_text)

Synchronous callers::

    result = fetch_site_info_sync("https://example.com", opts)
"""

from __future__ import annotations

import asyncio
import logging

from opengraphio.decoder import decode
from opengraphio.errors import DecodeError, EmptyResponseError
from opengraphio.models import ServiceResult
from opengraphio.options import ClientOptions
from opengraphio.request import build_request, redact_url
from opengraphio.transport import HttpxTransport, Transport

logger = logging.getLogger(__name__)


class OpenGraphClient:
    """Client bound to one set of :class:`ClientOptions`.

    Each call is independent: nothing is cached or shared between calls
    apart from the (immutable) options and the transport.
    """

    def __init__(self, options: ClientOptions, transport: Transport | None = None) -> None:
        self.options = options
        self.transport: Transport = transport or HttpxTransport()

    async def get_site_info(self, target_url: str) -> ServiceResult:
        """Fetch *target_url* through the configured service and decode the answer.

        Returns:
            :class:`SiteInfo`, :class:`ExtractInfo` or :class:`ScrapeInfo`,
            whichever schema the response matches first.

        Raises:
            :class:`TransportError`: Network, TLS or connection failure.
            :class:`EmptyResponseError`: The service returned no body.
            :class:`DecodeError`: The body matched no response schema.
        """
        request = build_request(target_url, self.options)
        safe_url = redact_url(request.full_url)
        logger.info("get_site_info: %s (service=%s)", safe_url, self.options.service)

        response = await self.transport.get(request.full_url)
        logger.debug(
            "Response %d (%s, %d bytes) from %s",
            response.status_code, response.content_type, len(response.body), safe_url,
        )

        if not response.body:
            raise EmptyResponseError(
                f"Data was not retrieved from request to {safe_url}",
                url=safe_url,
                status=response.status_code,
            )

        try:
            return decode(response.body, response.content_type)
        except DecodeError as exc:
            logger.warning(
                "Could not decode %d response from %s: %s",
                response.status_code, safe_url, exc,
            )
            exc.url = safe_url
            exc.status = response.status_code
            raise


async def fetch_site_info(
    target_url: str,
    options: ClientOptions,
    *,
    transport: Transport | None = None,
) -> ServiceResult:
    """Fetch and decode *target_url* with *options* in a single call.

    See :meth:`OpenGraphClient.get_site_info` for return value and errors.
    """
    return await OpenGraphClient(options, transport=transport).get_site_info(target_url)


def fetch_site_info_sync(
    target_url: str,
    options: ClientOptions,
    *,
    transport: Transport | None = None,
) -> ServiceResult:
    """Blocking wrapper around :func:`fetch_site_info`.

    Must not be called from inside a running event loop.
    """
    return asyncio.run(fetch_site_info(target_url, options, transport=transport))

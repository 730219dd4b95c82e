"""opengraphio - async Python client for the OpenGraph.io metadata API.

Quick usage::

    import asyncio
    from opengraphio import ClientOptions, fetch_site_info

    options = ClientOptions(app_id="xxxx")
    info = asyncio.run(fetch_site_info("https://example.com/blog/post", options))
    print(info.hybrid_graph.title)
    print(info.best("image"))

Service modes::

    ClientOptions(app_id="xxxx", service="extract", html_elements="h1, h2")
    ClientOptions(app_id="xxxx", service="scrape", full_render=True)

Low-level access::

    from opengraphio import build_request, decode

    full_url, params = build_request("https://example.com", options)
    result = decode(body_bytes, "application/json")
"""

from opengraphio.client import OpenGraphClient, fetch_site_info, fetch_site_info_sync
from opengraphio.decoder import decode
from opengraphio.errors import (
    ConfigurationError,
    DecodeError,
    EmptyResponseError,
    OpenGraphError,
    TransportError,
)
from opengraphio.models import (
    ExtractInfo,
    ExtractTag,
    HtmlInferred,
    HybridGraph,
    OpenGraph,
    OpenGraphImage,
    RequestInfo,
    ScrapeInfo,
    ServiceResult,
    SiteInfo,
)
from opengraphio.options import ClientOptions, Service
from opengraphio.request import build_request, encode_target_url
from opengraphio.transport import HttpxTransport, Transport, TransportResponse

__version__ = "0.1.0"
__all__ = [
    "ClientOptions",
    "ConfigurationError",
    "DecodeError",
    "EmptyResponseError",
    "ExtractInfo",
    "ExtractTag",
    "HtmlInferred",
    "HttpxTransport",
    "HybridGraph",
    "OpenGraph",
    "OpenGraphClient",
    "OpenGraphError",
    "OpenGraphImage",
    "RequestInfo",
    "ScrapeInfo",
    "Service",
    "ServiceResult",
    "SiteInfo",
    "Transport",
    "TransportError",
    "TransportResponse",
    "build_request",
    "decode",
    "encode_target_url",
    "fetch_site_info",
    "fetch_site_info_sync",
]

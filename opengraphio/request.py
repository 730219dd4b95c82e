"""Request URL construction for the OpenGraph.io API."""

from __future__ import annotations

from typing import NamedTuple
from urllib.parse import parse_qsl, quote, urlencode, urlparse, urlunparse

from opengraphio.options import ClientOptions

_REDACTED = "***"


class BuiltRequest(NamedTuple):
    """A ready-to-send request: full URL (with query) and its parameters."""

    full_url: str
    params: dict[str, str]


def encode_target_url(target_url: str) -> str:
    """Percent-encode *target_url* for use as a single path segment.

    Only ASCII letters, digits and ``-._~`` are left as is; every other byte
    of the UTF-8 encoding is escaped, including ``/``, ``:``, ``?`` and ``&``.
    """
    return quote(target_url, safe="")


def build_endpoint(target_url: str, options: ClientOptions) -> str:
    """Return ``https://<host>/api/<version>/<service>/<encoded target>``."""
    return (
        f"https://{options.host}/api/{options.version}/{options.service}/"
        f"{encode_target_url(target_url)}"
    )


def build_query_params(options: ClientOptions) -> dict[str, str]:
    """Return the query parameters for *options* in their fixed order.

    Flags that are off and values that are unset are left out entirely.
    """
    params: dict[str, str] = {
        "app_id": options.app_id,
        "cache_ok": "true" if options.cache_ok else "false",
    }
    if options.use_proxy:
        params["use_proxy"] = "true"
    if options.full_render:
        params["full_render"] = "true"
    if options.max_cache_age is not None:
        params["max_cache_age"] = str(options.max_cache_age)
    if options.accept_lang is not None:
        params["accept_lang"] = options.accept_lang
    if options.html_elements is not None:
        params["html_elements"] = options.html_elements
    return params


def build_request(target_url: str, options: ClientOptions) -> BuiltRequest:
    """Build the full request URL and query parameters for *target_url*.

    Example::

        >>> opts = ClientOptions(app_id="abc")
        >>> build_request("https://example.com/a?b=1", opts).full_url
        'https://opengraph.io/api/1.1/site/https%3A%2F%2Fexample.com%2Fa%3Fb%3D1?app_id=abc&cache_ok=true'
    """
    params = build_query_params(options)
    full_url = f"{build_endpoint(target_url, options)}?{urlencode(params, quote_via=quote)}"
    return BuiltRequest(full_url=full_url, params=params)


def redact_url(url: str) -> str:
    """Mask the ``app_id`` query value so *url* is safe to log."""
    parsed = urlparse(url)
    if not parsed.query:
        return url
    pairs = [
        (k, _REDACTED if k == "app_id" else v)
        for k, v in parse_qsl(parsed.query, keep_blank_values=True)
    ]
    return urlunparse(parsed._replace(query=urlencode(pairs, quote_via=quote, safe="*")))

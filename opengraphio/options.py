"""opengraphio.options - request options for the OpenGraph.io API.

Usage::

    from opengraphio.options import ClientOptions, Service

    options = ClientOptions(
        app_id="xxxx",
        service=Service.EXTRACT,
        html_elements="h1, h2",      # stored as "h1,h2"
    )

    # or from OPENGRAPH_* environment variables
    options = ClientOptions.from_env(full_render=True)
"""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from opengraphio.errors import ConfigurationError

DEFAULT_HOST = "opengraph.io"
DEFAULT_VERSION = "1.1"

_SIGNUP_HINT = (
    "app_id must be supplied when making requests to the API. "
    "Get a free app_id by signing up here: https://www.opengraph.io/"
)

_TRUE_VALUES: frozenset[str] = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES: frozenset[str] = frozenset({"false", "0", "no", "off"})


class Service(StrEnum):
    SITE    = "site"
    EXTRACT = "extract"
    SCRAPE  = "scrape"


def normalize_html_elements(value: str | None) -> str | None:
    """Strip every whitespace character from a comma-separated tag list."""
    if value is None:
        return None
    return "".join(value.split())


@dataclass(frozen=True)
class ClientOptions:
    """Immutable options shared by every request a client makes.

    Attributes:
        app_id:        OpenGraph.io application id (required, non-empty).
        cache_ok:      Allow the service to answer from its cache.
        service:       ``"site"`` | ``"extract"`` | ``"scrape"``.
        version:       API version segment of the endpoint path.
        use_proxy:     Ask the service to fetch the page through a proxy.
        full_render:   Ask the service to render JavaScript before extracting.
        max_cache_age: Maximum age in seconds of a cached answer.
        accept_lang:   Accept-Language the service sends to the target site.
        html_elements: Comma-separated tags for the extract service.
                       Whitespace is removed on construction.
        host:          API host name.
    """

    app_id: str
    cache_ok: bool = True
    service: str = Service.SITE.value
    version: str = DEFAULT_VERSION
    use_proxy: bool = False
    full_render: bool = False
    max_cache_age: int | None = None
    accept_lang: str | None = None
    html_elements: str | None = None
    host: str = DEFAULT_HOST

    def __post_init__(self) -> None:
        if not isinstance(self.app_id, str) or not self.app_id.strip():
            raise ConfigurationError(_SIGNUP_HINT)
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "service", str(self.service))
        object.__setattr__(
            self, "html_elements", normalize_html_elements(self.html_elements),
        )

    def replace(self, **changes: Any) -> ClientOptions:
        """Return a copy with *changes* applied (validated again)."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_env(cls, **overrides: Any) -> ClientOptions:
        """Build options from ``OPENGRAPH_*`` environment variables.

        Keyword *overrides* take precedence over the environment.

        Raises:
            ConfigurationError: If ``OPENGRAPH_APP_ID`` is missing (and not
                overridden) or a variable cannot be parsed.
        """
        values: dict[str, Any] = {"app_id": os.getenv("OPENGRAPH_APP_ID", "")}

        for field_name, env_var in (
            ("service", "OPENGRAPH_SERVICE"),
            ("version", "OPENGRAPH_API_VERSION"),
            ("accept_lang", "OPENGRAPH_ACCEPT_LANG"),
            ("html_elements", "OPENGRAPH_HTML_ELEMENTS"),
            ("host", "OPENGRAPH_HOST"),
        ):
            raw = os.getenv(env_var)
            if raw:
                values[field_name] = raw

        for field_name, env_var in (
            ("cache_ok", "OPENGRAPH_CACHE_OK"),
            ("use_proxy", "OPENGRAPH_USE_PROXY"),
            ("full_render", "OPENGRAPH_FULL_RENDER"),
        ):
            raw = os.getenv(env_var)
            if raw:
                values[field_name] = _parse_bool(env_var, raw)

        raw_age = os.getenv("OPENGRAPH_MAX_CACHE_AGE")
        if raw_age:
            try:
                values["max_cache_age"] = int(raw_age.strip())
            except ValueError as exc:
                raise ConfigurationError(
                    f"OPENGRAPH_MAX_CACHE_AGE must be an integer; got {raw_age!r}",
                ) from exc

        values.update(overrides)
        return cls(**values)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean; got {raw!r}")

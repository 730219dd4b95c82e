"""Exception hierarchy for the OpenGraph.io client.

Every failure a call can produce is an :class:`OpenGraphError`, so callers
can catch the whole family or a single cause::

    try:
        result = await fetch_site_info(url, options)
    except TransportError:
        ...   # network / TLS / connection failure
    except EmptyResponseError:
        ...   # the service answered with no body
    except DecodeError as exc:
        ...   # body matched none of the response schemas
"""

from __future__ import annotations


class OpenGraphError(RuntimeError):
    """Base class for all errors raised by this package."""


class ConfigurationError(OpenGraphError, ValueError):
    """Raised when :class:`~opengraphio.options.ClientOptions` are invalid."""


class TransportError(OpenGraphError):
    """Raised when the HTTP request itself fails.

    Attributes:
        url -- the (redacted) request URL that failed
    """

    def __init__(self, message: str, url: str = "") -> None:
        super().__init__(message)
        self.url = url


class EmptyResponseError(OpenGraphError):
    """Raised when the transport succeeded but returned no body.

    Attributes:
        url    -- the (redacted) request URL
        status -- HTTP status code of the empty response
    """

    def __init__(self, message: str, url: str = "", status: int = 0) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class DecodeError(OpenGraphError):
    """Raised when a response body matches none of the response schemas.

    Attributes:
        url    -- the (redacted) request URL ("" when decoding standalone)
        status -- HTTP status code (0 when decoding standalone)
        body   -- the raw body that could not be decoded
    """

    def __init__(
        self,
        message: str,
        url: str = "",
        status: int = 0,
        body: bytes | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status = status
        self.body = body

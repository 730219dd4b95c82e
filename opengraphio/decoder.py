"""Response decoding: raw body → SiteInfo | ExtractInfo | ScrapeInfo.

The service's JSON carries no type discriminator, so the shape is found by
trying each schema in :data:`RESPONSE_SCHEMAS` in order and keeping the
first match:

    SiteInfo → ExtractInfo → bare JSON string (ScrapeInfo)

A site payload that happens to include a ``tags`` key therefore stays a
:class:`~opengraphio.models.SiteInfo`.  ``text/plain`` bodies skip the JSON
path entirely and become :class:`~opengraphio.models.ScrapeInfo`.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from opengraphio.errors import DecodeError
from opengraphio.models import ExtractInfo, ScrapeInfo, ServiceResult, SiteInfo

logger = logging.getLogger(__name__)

NO_MATCHING_SCHEMA = "no matching response schema"
INVALID_TEXT_ENCODING = "invalid text encoding"


@dataclass(frozen=True)
class ResponseSchema:
    """A named matcher returning the decoded result, or ``None`` on mismatch."""

    name: str
    match: Callable[[Any], ServiceResult | None]


def _model_matcher(model: type[BaseModel]) -> Callable[[Any], ServiceResult | None]:
    def match(payload: Any) -> ServiceResult | None:
        if not isinstance(payload, dict):
            return None
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            logger.debug(
                "%s schema rejected payload: %d error(s)", model.__name__, exc.error_count(),
            )
            return None
    return match


def _match_scrape(payload: Any) -> ScrapeInfo | None:
    if isinstance(payload, str):
        return ScrapeInfo(text=payload)
    return None


# Order is significant: first match wins.
RESPONSE_SCHEMAS: tuple[ResponseSchema, ...] = (
    ResponseSchema("site", _model_matcher(SiteInfo)),
    ResponseSchema("extract", _model_matcher(ExtractInfo)),
    ResponseSchema("scrape", _match_scrape),
)


def media_type(content_type: str | None) -> str:
    """Return the lower-cased media type of a Content-Type header value."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def match_schema(payload: Any) -> ServiceResult | None:
    """Return *payload* decoded by the first matching schema, else ``None``."""
    for schema in RESPONSE_SCHEMAS:
        result = schema.match(payload)
        if result is not None:
            logger.debug("Response matched %s schema", schema.name)
            return result
    return None


def decode_text(body: bytes) -> ScrapeInfo:
    """Decode a ``text/plain`` body as UTF-8.

    Empty bytes give ``ScrapeInfo(text=None)``.

    Raises:
        DecodeError: If *body* is not valid UTF-8.
    """
    if not body:
        return ScrapeInfo(text=None)
    try:
        return ScrapeInfo(text=body.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise DecodeError(INVALID_TEXT_ENCODING, body=body) from exc


def decode(body: bytes, content_type: str | None = None) -> ServiceResult:
    """Decode a raw response *body* into one of the three result shapes.

    Args:
        body:         Raw response bytes.
        content_type: The response's Content-Type header, if any.  Only the
                      media type is considered; ``text/plain`` selects the
                      plain-text path regardless of charset parameters.

    Returns:
        :class:`SiteInfo`, :class:`ExtractInfo` or :class:`ScrapeInfo`.

    Raises:
        DecodeError: If the body is not valid JSON, matches none of the
            schemas, or is ``text/plain`` but not valid UTF-8.
    """
    if media_type(content_type) == "text/plain":
        return decode_text(body)

    try:
        payload = json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise DecodeError(NO_MATCHING_SCHEMA, body=body) from exc

    result = match_schema(payload)
    if result is None:
        raise DecodeError(NO_MATCHING_SCHEMA, body=body)
    return result

"""Pydantic schemas for the three OpenGraph.io response shapes."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr, field_validator

# Wire keys keep the service's mixed camelCase/snake_case spelling via
# aliases; attributes are snake_case and either name populates the model.
# Scalars are strict: a mistyped value rejects the schema instead of being
# coerced.
_WIRE_CONFIG = {"populate_by_name": True, "extra": "ignore"}


# ---------------------------------------------------------------------------
# site
# ---------------------------------------------------------------------------

class HybridGraph(BaseModel):
    """Best-effort merge of Open Graph tags and HTML inference."""

    model_config = _WIRE_CONFIG

    title: StrictStr | None = None
    description: StrictStr | None = None
    type: StrictStr | None = None
    image: StrictStr | None = None
    url: StrictStr | None = None
    favicon: StrictStr | None = None
    site_name: StrictStr | None = None
    article_published_time: StrictStr | None = Field(default=None, alias="articlePublishedTime")
    article_author: StrictStr | None = Field(default=None, alias="articleAuthor")


class OpenGraphImage(BaseModel):
    model_config = _WIRE_CONFIG

    url: StrictStr | None = None
    width: StrictInt | StrictStr | None = None
    height: StrictInt | StrictStr | None = None
    type: StrictStr | None = None
    alt: StrictStr | None = None


class OpenGraph(BaseModel):
    """Values taken verbatim from the page's ``og:*`` meta tags."""

    model_config = _WIRE_CONFIG

    title: StrictStr | None = None
    description: StrictStr | None = None
    type: StrictStr | None = None
    image: OpenGraphImage | None = None
    url: StrictStr | None = None
    site_name: StrictStr | None = None
    article_published_time: StrictStr | None = Field(default=None, alias="articlePublishedTime")
    article_author: StrictStr | None = Field(default=None, alias="articleAuthor")

    @field_validator("image", mode="before")
    @classmethod
    def wrap_bare_image_url(cls, v: Any) -> Any:
        if isinstance(v, str):
            return {"url": v}
        return v


class HtmlInferred(BaseModel):
    """Values the service inferred from the page's HTML."""

    model_config = _WIRE_CONFIG

    title: StrictStr | None = None
    description: StrictStr | None = None
    type: StrictStr | None = None
    image: StrictStr | None = None
    url: StrictStr | None = None
    favicon: StrictStr | None = None
    site_name: StrictStr | None = None
    images: list[StrictStr | None] | None = None


class RequestInfo(BaseModel):
    """Diagnostics the service echoes back about how it fetched the page."""

    model_config = _WIRE_CONFIG

    redirects: StrictInt | None = None
    host: StrictStr | None = None
    response_code: StrictInt | None = Field(default=None, alias="responseCode")
    cache_ok: StrictBool | None = None
    max_cache_age: StrictInt | None = None
    accept_lang: StrictStr | None = None
    url: StrictStr | None = None
    full_render: StrictBool | None = Field(default=None, alias="fullRender")
    use_proxy: StrictBool | None = Field(default=None, alias="useProxy")
    use_superior: StrictBool | None = Field(default=None, alias="useSuperior")
    response_content_type: StrictStr | None = Field(default=None, alias="responseContentType")


class SiteInfo(BaseModel):
    """Structured metadata returned by the ``site`` service."""

    service: ClassVar[str] = "site"
    model_config = _WIRE_CONFIG

    hybrid_graph: HybridGraph = Field(alias="hybridGraph")
    open_graph: OpenGraph = Field(alias="openGraph")
    html_inferred: HtmlInferred = Field(alias="htmlInferred")
    request_info: RequestInfo = Field(alias="requestInfo")
    accept_lang: StrictStr
    is_cache: StrictBool
    url: StrictStr

    def best(self, field: str) -> Any:
        """Return the first non-empty *field* across the three graphs.

        Graphs are consulted in the order hybridGraph, openGraph,
        htmlInferred.  A nested Open Graph image is reduced to its URL.
        Returns ``None`` when no graph has the field set.
        """
        for graph in (self.hybrid_graph, self.open_graph, self.html_inferred):
            value = getattr(graph, field, None)
            if isinstance(value, OpenGraphImage):
                value = value.url
            if value:
                return value
        return None


# ---------------------------------------------------------------------------
# extract
# ---------------------------------------------------------------------------

class ExtractTag(BaseModel):
    model_config = _WIRE_CONFIG

    tag_name: StrictStr = Field(alias="tag")
    inner_text: StrictStr = Field(alias="innerText")
    position: StrictInt


class ExtractInfo(BaseModel):
    """Tag/text pairs returned by the ``extract`` service."""

    service: ClassVar[str] = "extract"
    model_config = _WIRE_CONFIG

    tags: list[ExtractTag]
    concatenated_text: StrictStr = Field(alias="concatenatedText")


# ---------------------------------------------------------------------------
# scrape
# ---------------------------------------------------------------------------

class ScrapeInfo(BaseModel):
    """Raw page text returned by the ``scrape`` service."""

    service: ClassVar[str] = "scrape"

    text: StrictStr | None = None


ServiceResult = SiteInfo | ExtractInfo | ScrapeInfo

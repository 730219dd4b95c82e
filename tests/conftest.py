"""Shared pytest fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from opengraphio.errors import TransportError
from opengraphio.options import ClientOptions
from opengraphio.transport import TransportResponse

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _read_fixture(name: str) -> bytes:
    return (FIXTURES_DIR / name).read_bytes()


class FakeTransport:
    """Records requested URLs and replays a canned response (or error)."""

    def __init__(
        self,
        body: bytes = b"",
        content_type: str | None = "application/json",
        status_code: int = 200,
        error: Exception | None = None,
    ) -> None:
        self.response = TransportResponse(
            status_code=status_code, content_type=content_type, body=body,
        )
        self.error = error
        self.requested: list[str] = []

    async def get(self, url: str) -> TransportResponse:
        self.requested.append(url)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def site_body() -> bytes:
    return _read_fixture("site_response.json")


@pytest.fixture
def extract_body() -> bytes:
    return _read_fixture("extract_response.json")


@pytest.fixture
def site_payload(site_body: bytes) -> dict[str, Any]:
    return json.loads(site_body)


@pytest.fixture
def extract_payload(extract_body: bytes) -> dict[str, Any]:
    return json.loads(extract_body)


@pytest.fixture
def options() -> ClientOptions:
    return ClientOptions(app_id="test-app-id")


@pytest.fixture
def make_transport():
    return FakeTransport


@pytest.fixture
def failing_transport() -> FakeTransport:
    return FakeTransport(error=TransportError("Connection refused", url="https://opengraph.io/"))

"""
Pytest configuration for the roster query engine.

Provides fixtures for:
- The static seed roster and a fresh record store
- Settings overrides for the search service
- A mocked generative-text endpoint built on httpx.MockTransport
"""

from __future__ import annotations

import json
from typing import Callable, List

import httpx
import pytest

from roster.config import Settings
from roster.data.seed import seed_records
from roster.domain.models import PersonnelRecord
from roster.search.client import SearchClient
from roster.store import RecordStore

TEST_API_KEY = "test-key"
TEST_BASE_URL = "https://search.test/v1beta"


def envelope(text: str) -> dict:
    """Wrap answer text the way the generateContent endpoint does."""
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.

    Never reads the developer's real credential.
    """
    return Settings(
        search_api_key=TEST_API_KEY,
        search_base_url=TEST_BASE_URL,
        log_level="DEBUG",
    )


@pytest.fixture()
def records() -> List[PersonnelRecord]:
    """The fifty seed records, in seed order."""
    return seed_records()


@pytest.fixture()
def store() -> RecordStore:
    return RecordStore.from_seed()


@pytest.fixture()
def make_client(test_settings: Settings) -> Callable[..., SearchClient]:
    """
    Factory for a `SearchClient` whose HTTP calls hit an in-process handler.

    Pass `text` to answer every request with that model output, or `handler`
    for full control over the response. Captured requests are exposed on the
    returned client as `client.requests`.
    """

    def factory(text: str = "[]", handler=None, status_code: int = 200) -> SearchClient:
        requests: List[httpx.Request] = []

        def default_handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=envelope(text))

        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return (handler or default_handler)(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        client = SearchClient(settings=test_settings, http_client=http_client)
        client.requests = requests  # type: ignore[attr-defined]
        return client

    return factory


@pytest.fixture()
def answer_for() -> Callable[[List[PersonnelRecord]], str]:
    """Build a well-formed fenced answer listing the given records."""

    def render(chosen: List[PersonnelRecord]) -> str:
        body = json.dumps([record.to_wire() for record in chosen], indent=2)
        return f"```json\n{body}\n```"

    return render

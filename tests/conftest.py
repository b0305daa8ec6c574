"""Shared test fixtures for staticdatagen."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from staticdatagen.core.orchestrator import BuildOrchestrator, PageInput
from staticdatagen.locales import Translator
from staticdatagen.models.config import SiteDefaults

BASE_URL = "https://example.com"
FUTURE_EXPIRES = "2099-12-31T23:59:59Z"


@pytest.fixture
def defaults() -> SiteDefaults:
    """Provide site defaults with a base URL and English."""
    return SiteDefaults(base_url=BASE_URL, language="en")


@pytest.fixture
def translator() -> Translator:
    """Provide an English translator."""
    return Translator("en")


@pytest.fixture
def orchestrator(defaults: SiteDefaults) -> BuildOrchestrator:
    """Provide an inline (single-worker) orchestrator."""
    return BuildOrchestrator(defaults)


# ---------------------------------------------------------------------------
# Front-matter factories: shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_page_metadata() -> Callable[..., dict[str, str]]:
    """Factory fixture: a page's front matter with sensible defaults."""

    def _factory(**overrides: str) -> dict[str, str]:
        metadata = {
            "title": "Hello World",
            "description": "A first post about static sites.",
            "permalink": f"{BASE_URL}/hello",
            "date": "2024-02-20",
            "language": "en",
            "keywords": "static, site, generator",
            "author": "Jane Doe",
        }
        metadata.update(overrides)
        return metadata

    return _factory


@pytest.fixture
def make_feed_metadata() -> Callable[..., dict[str, str]]:
    """Factory fixture: channel front matter plus one item."""

    def _factory(**overrides: str) -> dict[str, str]:
        metadata = {
            "title": "Example Blog",
            "link": BASE_URL,
            "description": "News and notes from Example.",
            "language": "en",
            "pub_date": "Tue, 20 Feb 2024 15:15:15 GMT",
            "last_build_date": "2024-02-20T15:15:15Z",
            "ttl": "60",
            "item_title": "Hello World",
            "item_link": f"{BASE_URL}/hello",
            "item_description": "A first post.",
            "item_guid": f"{BASE_URL}/hello",
            "item_pub_date": "2024-02-20T15:15:15Z",
            "item_author": "jane@example.com (Jane Doe)",
        }
        metadata.update(overrides)
        return metadata

    return _factory


@pytest.fixture
def make_security_metadata() -> Callable[..., dict[str, str]]:
    """Factory fixture: ``security_*`` keys for a valid policy."""

    def _factory(**overrides: str) -> dict[str, str]:
        metadata = {
            "security_contact": "mailto:security@example.com",
            "security_expires": FUTURE_EXPIRES,
            "security_canonical": f"{BASE_URL}/.well-known/security.txt",
            "security_preferred_languages": "en, fr",
        }
        metadata.update(overrides)
        return metadata

    return _factory


@pytest.fixture
def make_news_metadata() -> Callable[..., dict[str, str]]:
    """Factory fixture: ``news_*`` keys for one article."""

    def _factory(**overrides: str) -> dict[str, str]:
        metadata = {
            "news_loc": f"{BASE_URL}/news/launch",
            "news_publication_name": "Example Times",
            "news_language": "en",
            "news_publication_date": "2024-02-20T15:15:15Z",
            "news_title": "Example launches",
            "news_keywords": "launch, example",
            "news_genres": "PressRelease, Blog",
        }
        metadata.update(overrides)
        return metadata

    return _factory


@pytest.fixture
def make_page() -> Callable[..., PageInput]:
    """Factory fixture: a ``PageInput`` with body and front matter."""

    def _factory(
        name: str = "posts/hello.md",
        content: str = "Hello python world",
        **metadata: Any,
    ) -> PageInput:
        return PageInput(name=name, content=content, metadata=metadata)

    return _factory

"""
Pytest Configuration and Shared Fixtures.

This module provides common fixtures for all tests:

- item_struct: A TikTok item node as embedded in page state
- make_page: Builder wrapping script/meta snippets in an HTML document
- universal_script / sigi_script / next_script: Script tags for each blob shape
- og_tags: Open Graph meta tags for the fallback extractor
"""

import json

import pytest
import structlog

from tokpulse.config.settings import get_settings

# Route structlog through stdlib logging so log lines never land on stdout
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.KeyValueRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=False,
)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings around every test so env overrides don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def item_struct() -> dict:
    """Return a sample item node."""
    return {
        "id": "7301234567890123456",
        "desc": "Morning routine #fyp",
        "video": {
            "playAddr": "https://v16.tiktokcdn.com/play.mp4",
            "downloadAddr": "https://v16.tiktokcdn.com/download.mp4",
            "cover": "https://p16.tiktokcdn.com/cover.jpeg",
            "dynamicCover": "https://p16.tiktokcdn.com/dynamic.webp",
        },
        "author": {
            "uniqueId": "jane",
            "nickname": "Jane Doe",
        },
    }


@pytest.fixture
def make_page():
    """Return a builder that wraps body snippets in a minimal page."""

    def build(*snippets: str) -> str:
        body = "\n".join(snippets)
        return (
            "<!DOCTYPE html><html><head><title>TikTok</title>"
            '<script src="/static/app.js"></script>'
            f"</head><body>{body}</body></html>"
        )

    return build


@pytest.fixture
def universal_script():
    """Return a builder for the rehydration blob script tag."""

    def build(item: dict) -> str:
        blob = {
            "__DEFAULT_SCOPE__": {
                "webapp.app-context": {"language": "en"},
                "webapp.video-detail": {"itemInfo": {"itemStruct": item}},
            }
        }
        return (
            '<script id="__UNIVERSAL_DATA_FOR_REHYDRATION__">'
            f"window.__UNIVERSAL_DATA_FOR_REHYDRATION__ = {json.dumps(blob)}"
            "</script>"
        )

    return build


@pytest.fixture
def sigi_script():
    """Return a builder for the global state blob script tag."""

    def build(*items: dict) -> str:
        blob = {
            "AppContext": {"lang": "en"},
            "ItemModule": {item["id"]: item for item in items},
        }
        return f"<script>window['SIGI_STATE'] = {json.dumps(blob)}</script>"

    return build


@pytest.fixture
def next_script():
    """Return a builder for the legacy framework-data script tag."""

    def build(item: dict) -> str:
        blob = {"props": {"pageProps": {"itemInfo": {"itemStruct": item}}}}
        return (
            '<script id="__NEXT_DATA__" type="application/json">'
            f"{json.dumps(blob)}"
            "</script>"
        )

    return build


@pytest.fixture
def og_tags() -> str:
    """Return Open Graph meta tags for the fallback extractor."""
    return (
        '<meta property="og:video" content="https://cdn.example/og.mp4">'
        '<meta property="og:image" content="https://cdn.example/og.jpg">'
        '<meta property="og:title" content="Tom &amp; Jerry &#39;live&#39;">'
        '<meta name="author" content="jane">'
    )

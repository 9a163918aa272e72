"""Integration test configuration.

Collectors run end to end against an ``httpx.MockTransport`` that serves
canned pages, so no request leaves the process.
"""

from typing import Callable

import httpx
import pytest
from tenacity import wait_none

from tokpulse.collectors.fetcher import PageFetcher


class PageServer:
    """Serves canned responses by URL and records every request."""

    def __init__(self):
        self.routes: dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, url: str, status: int = 200, text: str = "", headers=None) -> None:
        self.routes[url] = lambda request: httpx.Response(status, text=text, headers=headers)

    def add_handler(self, url: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.routes[url] = handler

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get(str(request.url))
        if handler is None:
            return httpx.Response(404, text="no route")
        return handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


@pytest.fixture
def page_server() -> PageServer:
    """Fresh canned-response server for each test."""
    return PageServer()


@pytest.fixture(autouse=True)
def no_retry_wait(monkeypatch):
    """Retry immediately so retry tests don't sleep."""
    monkeypatch.setattr(PageFetcher, "retry_wait", wait_none())

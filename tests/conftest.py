"""
Shared fixtures: fake aiohttp session for the catalog fetch and an
AsyncMock browser standing in for Playwright.
"""

import pytest
from unittest.mock import AsyncMock

from storybook_mcp.catalog import fetcher
from storybook_mcp.config import Config

STORYBOOK_URL = "http://localhost:6006/index.json"
PROPS_HTML = "<tr><td>prop</td></tr>"


class FakeResponse:
    def __init__(self, status=200, reason="OK", payload=None, json_error=None):
        self.status = status
        self.reason = reason
        self.payload = payload
        self.json_error = json_error

    async def json(self, content_type=None):
        if self.json_error is not None:
            raise self.json_error
        return self.payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Minimal aiohttp.ClientSession: records GETs, returns one response."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def get(self, url):
        self.requests.append(url)
        if self.error is not None:
            raise self.error
        return self.response

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


@pytest.fixture
def serve_catalog(monkeypatch):
    """Install a fake catalog response for every aiohttp session opened."""
    def _serve(payload=None, status=200, reason="OK", json_error=None, error=None):
        session = FakeSession(FakeResponse(status, reason, payload, json_error), error=error)
        monkeypatch.setattr(fetcher.aiohttp, "ClientSession", lambda *a, **k: session)
        return session
    return _serve


@pytest.fixture
def page():
    page = AsyncMock()
    page.eval_on_selector = AsyncMock(return_value=PROPS_HTML)
    page.evaluate = AsyncMock(return_value=None)
    return page


@pytest.fixture
def browser(page):
    browser = AsyncMock()
    browser.new_page = AsyncMock(return_value=page)
    return browser


@pytest.fixture
def launcher(browser):
    return AsyncMock(return_value=browser)


@pytest.fixture
def config():
    return Config(storybook_url=STORYBOOK_URL, settle_ms=0)


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "STORYBOOK_URL",
        "CUSTOM_TOOLS",
        "STORYBOOK_PROPS_SELECTOR",
        "STORYBOOK_SETTLE_MS",
        "STORYBOOK_HEADLESS",
        "STORYBOOK_MCP_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch

"""
Pytest configuration for integration tests

These run against a real headless Chromium and are skipped when Playwright
has no browser installed.
"""

import os

import pytest
import pytest_asyncio

from storybook_mcp.browser import BrowserSession, chromium_launcher


def pytest_configure(config):
    """Configure pytest"""
    os.environ['STORYBOOK_HEADLESS'] = 'true'


@pytest_asyncio.fixture
async def browser_page():
    """Provide a browser page for tests"""
    from playwright.async_api import async_playwright

    async with async_playwright() as p:
        try:
            browser = await p.chromium.launch(headless=True)
        except Exception as e:
            pytest.skip(f"Chromium not available: {e}")
        page = await browser.new_page()
        yield page
        await browser.close()


@pytest_asyncio.fixture
async def browser_session():
    """BrowserSession on a real Chromium, already launched"""
    session = BrowserSession(chromium_launcher(headless=True))
    try:
        page = await session.new_page()
    except Exception as e:
        await session.close()
        pytest.skip(f"Chromium not available: {e}")
    await page.close()
    yield session
    await session.close()

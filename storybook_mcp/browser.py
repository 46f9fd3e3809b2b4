"""
Browser capability used by the scraper and the custom tool executor.

The rest of the package only needs a launcher: an async callable returning an
object with ``new_page()`` and ``close()``, whose pages offer the Playwright
``Page`` methods ``goto``, ``wait_for_selector``, ``wait_for_timeout``,
``eval_on_selector``, ``evaluate`` and ``close``. Tests pass a fake launcher;
production uses Playwright Chromium.

Usage:
    session = BrowserSession(chromium_launcher(headless=True))
    try:
        async with open_page(session) as page:
            await page.goto(url)
    finally:
        await session.close()
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Callable, Optional

from .diagnostics import get_logger

logger = get_logger(__name__)

Launcher = Callable[[], Awaitable[Any]]

CHROMIUM_ARGS = [
    "--no-sandbox",
    "--disable-dev-shm-usage",
]


class PlaywrightBrowser:
    """Chromium browser that also stops its Playwright driver on close."""

    def __init__(self, playwright, browser):
        self._playwright = playwright
        self._browser = browser

    async def new_page(self):
        return await self._browser.new_page()

    async def close(self) -> None:
        try:
            await self._browser.close()
        finally:
            await self._playwright.stop()


def chromium_launcher(headless: bool = True) -> Launcher:
    """Launcher starting a fresh Playwright Chromium instance per call."""

    async def launch() -> PlaywrightBrowser:
        from playwright.async_api import async_playwright

        playwright = await async_playwright().start()
        try:
            browser = await playwright.chromium.launch(headless=headless, args=list(CHROMIUM_ARGS))
        except Exception:
            await playwright.stop()
            raise
        logger.debug(f"Chromium launched (headless={headless})")
        return PlaywrightBrowser(playwright, browser)

    return launch


class BrowserSession:
    """
    One browser for the duration of a single call.

    The browser is launched on the first ``new_page()`` so calls that never
    reach a page (e.g. every requested component is missing) never start one.
    """

    def __init__(self, launcher: Launcher):
        self._launcher = launcher
        self._browser: Optional[Any] = None

    @property
    def started(self) -> bool:
        return self._browser is not None

    async def new_page(self):
        if self._browser is None:
            self._browser = await self._launcher()
        return await self._browser.new_page()

    async def close(self) -> None:
        if self._browser is None:
            return
        browser, self._browser = self._browser, None
        try:
            await browser.close()
        except Exception as e:
            logger.warning(f"Failed to close browser: {e}")

    async def __aenter__(self) -> "BrowserSession":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


@asynccontextmanager
async def open_page(session: BrowserSession) -> AsyncIterator[Any]:
    """Open a page on the session and close it on every exit path."""
    page = await session.new_page()
    try:
        yield page
    finally:
        try:
            await page.close()
        except Exception as e:
            logger.warning(f"Failed to close page: {e}")

"""
Props table scraping.

Each requested component is resolved and rendered independently: a missing
component or a failed page becomes that component's section text, never an
exception, so one bad name cannot blank out the rest of the batch.
"""

from typing import Any, Dict, List, Sequence

from .browser import BrowserSession, open_page
from .catalog import CatalogAdapter
from .config import DEFAULT_PROPS_SELECTOR, DEFAULT_SETTLE_MS
from .diagnostics import get_logger
from .exceptions import NavigationError, NotFoundError
from .models import ToolResult

logger = get_logger(__name__)

OUTER_HTML = "el => el.outerHTML"


def not_found_message(name: str) -> str:
    return f'Component "{name}" not found in Storybook'


def format_section(name: str, body: str) -> str:
    return f"### {name}\n\n{body}"


class PropsScraper:
    """Extracts the rendered props table of components from their docs pages."""

    def __init__(
        self,
        session: BrowserSession,
        selector: str = DEFAULT_PROPS_SELECTOR,
        settle_ms: int = DEFAULT_SETTLE_MS,
    ):
        self.session = session
        self.selector = selector
        self.settle_ms = settle_ms

    async def fetch_props_html(self, url: str) -> str:
        """
        Render a docs page and return the props table markup.

        Raises:
            NavigationError: page failed to load or the table never appeared
        """
        async with open_page(self.session) as page:
            try:
                await page.goto(url)
                await page.wait_for_selector(self.selector)
                await page.wait_for_timeout(self.settle_ms)
                return await page.eval_on_selector(self.selector, OUTER_HTML)
            except Exception as e:
                raise NavigationError(str(e)) from e

    async def render_component(
        self,
        adapter: CatalogAdapter,
        doc: Dict[str, Any],
        name: str,
        base_url: str,
    ) -> str:
        """Section body for one component: table markup or error text."""
        try:
            url = adapter.resolve_doc_url(doc, name, base_url)
        except NotFoundError:
            url = None
        if not url:
            logger.info(f"Component not found: {name}")
            return not_found_message(name)

        logger.debug(f"Scraping props for {name} from {url}")
        try:
            return await self.fetch_props_html(url)
        except Exception as e:
            logger.warning(f"Props extraction failed for {name}: {e}")
            return str(e)

    async def get_components_props(
        self,
        adapter: CatalogAdapter,
        doc: Dict[str, Any],
        names: Sequence[str],
        base_url: str,
    ) -> ToolResult:
        sections: List[str] = []
        for name in names:
            body = await self.render_component(adapter, doc, name, base_url)
            sections.append(format_section(name, body))
        return ToolResult.from_text("\n\n".join(sections))

"""
Catalog fetching and version detection.

Usage:
    from storybook_mcp.catalog import load_catalog

    adapter, doc = await load_catalog("http://localhost:6006/index.json")
    names = adapter.list_components(doc)
"""

from typing import Any, Dict, Optional, Tuple

import aiohttp

from ..diagnostics import get_logger
from ..exceptions import CatalogDecodeError, FetchError
from . import v3, v5
from .base import CatalogAdapter

logger = get_logger(__name__)

FETCH_ERROR_PREFIX = "Failed to get component list"

ADAPTERS: Dict[int, CatalogAdapter] = {
    v3.VERSION: v3,
    v5.VERSION: v5,
}


def detect_version(doc: Any) -> int:
    """
    Read the version discriminator of a catalog document.

    ``v`` is checked before ``version``. Versions other than 3 and 5 are
    decoded as v5 when the document carries ``entries``.

    Raises:
        CatalogDecodeError: document is not an object or has an unknown shape
    """
    if not isinstance(doc, dict):
        raise CatalogDecodeError(f"Catalog must be a JSON object, got {type(doc).__name__}")
    version = doc.get("v", doc.get("version"))
    if isinstance(version, int) and version in ADAPTERS:
        return version
    if "entries" in doc:
        return v5.VERSION
    raise CatalogDecodeError(f"Unsupported catalog format (version={version!r})")


def adapter_for(doc: Any) -> CatalogAdapter:
    """Adapter module (``v3`` or ``v5``) matching the document's version."""
    return ADAPTERS[detect_version(doc)]


async def fetch_catalog(url: str, session: Optional[aiohttp.ClientSession] = None) -> Dict[str, Any]:
    """
    GET the catalog document.

    Args:
        url: catalog URL (``index.json`` or ``stories.json``)
        session: optional aiohttp session; a short-lived one is opened otherwise

    Raises:
        FetchError: on connection failure or non-2xx status
        CatalogDecodeError: body is not a recognised catalog
    """
    if session is None:
        async with aiohttp.ClientSession() as own_session:
            return await fetch_catalog(url, own_session)

    logger.debug(f"GET {url}")
    try:
        async with session.get(url) as resp:
            if not 200 <= resp.status < 300:
                raise FetchError(f"{FETCH_ERROR_PREFIX}: {resp.reason}")
            try:
                doc = await resp.json(content_type=None)
            except ValueError as e:
                raise CatalogDecodeError(f"Catalog at {url} is not valid JSON: {e}") from e
    except aiohttp.ClientError as e:
        raise FetchError(f"{FETCH_ERROR_PREFIX}: {e}") from e

    detect_version(doc)
    return doc


async def load_catalog(url: str) -> Tuple[CatalogAdapter, Dict[str, Any]]:
    """Fetch the catalog and pair it with its adapter."""
    doc = await fetch_catalog(url)
    adapter = adapter_for(doc)
    logger.debug(f"Catalog v{adapter.VERSION} loaded from {url}")
    return adapter, doc

"""
Component catalog: version adapters and fetching.

Both adapter modules satisfy the CatalogAdapter protocol:
    VERSION: int
    list_components(doc) -> List[str]
    resolve_doc_url(doc, name, base_url) -> Optional[str]
"""

from . import v3, v5
from .base import CatalogAdapter
from .fetcher import (
    FETCH_ERROR_PREFIX,
    adapter_for,
    detect_version,
    fetch_catalog,
    load_catalog,
)

__all__ = [
    "v3",
    "v5",
    "CatalogAdapter",
    "FETCH_ERROR_PREFIX",
    "adapter_for",
    "detect_version",
    "fetch_catalog",
    "load_catalog",
]

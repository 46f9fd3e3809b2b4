"""
Adapter for v5 catalogs (``index.json``); v4 indexes share the shape.

    {"v": 5, "entries": {"<entryId>": {"type": "docs" | "story", "title",
                                        "id", "name", "importPath", "tags"}}}
"""

from typing import Any, Dict, Iterator, List, Optional

from ..exceptions import NotFoundError
from .urls import docs_page_url

VERSION = 5


def _entries_map(doc: Any) -> Optional[Dict[str, Any]]:
    if not isinstance(doc, dict):
        return None
    entries = doc.get("entries")
    if not isinstance(entries, dict):
        return None
    return entries


def _docs_entries(entries: Dict[str, Any]) -> Iterator[Dict[str, Any]]:
    for entry in entries.values():
        if isinstance(entry, dict) and entry.get("type") == "docs":
            yield entry


def list_components(doc: Any) -> List[str]:
    """Distinct titles of docs entries, sorted; [] for a missing or malformed doc."""
    entries = _entries_map(doc)
    if entries is None:
        return []
    return sorted({
        entry["title"]
        for entry in _docs_entries(entries)
        if isinstance(entry.get("title"), str)
    })


def resolve_doc_url(doc: Any, name: str, base_url: str) -> Optional[str]:
    """
    Docs page URL for the docs entry titled ``name``.

    Returns:
        None when there is no usable catalog

    Raises:
        NotFoundError: the catalog is valid but no docs entry is titled ``name``
    """
    entries = _entries_map(doc)
    if entries is None:
        return None
    for entry in _docs_entries(entries):
        if entry.get("title") == name:
            return docs_page_url(entry, base_url)
    raise NotFoundError(f'Component "{name}" not found')

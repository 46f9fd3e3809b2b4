"""
Adapter for v3 catalogs (``stories.json``).

    {"v": 3, "stories": {"<storyId>": {"id", "title", "name", "importPath",
                                        "kind", "story", "parameters": {...}}}}
"""

from typing import Any, Dict, Iterator, List, Optional

from ..exceptions import NotFoundError
from .urls import docs_page_url

VERSION = 3


def _stories(doc: Any) -> Optional[Dict[str, Any]]:
    if not isinstance(doc, dict):
        return None
    stories = doc.get("stories")
    if not isinstance(stories, dict):
        return None
    return stories


def _entries(stories: Dict[str, Any]) -> Iterator[Dict[str, Any]]:
    for entry in stories.values():
        if isinstance(entry, dict):
            yield entry


def _is_listed(entry: Dict[str, Any]) -> bool:
    # docsOnly entries are left out of the listing.
    parameters = entry.get("parameters") or {}
    return not parameters.get("docsOnly", False)


def list_components(doc: Any) -> List[str]:
    """Distinct titles of listed entries, sorted; [] for a missing or malformed doc."""
    stories = _stories(doc)
    if stories is None:
        return []
    titles = {
        entry["title"]
        for entry in _entries(stories)
        if _is_listed(entry) and isinstance(entry.get("title"), str)
    }
    return sorted(titles)


def resolve_doc_url(doc: Any, name: str, base_url: str) -> Optional[str]:
    """
    Docs page URL for the entry whose title or kind equals ``name``.

    Returns:
        None when there is no usable catalog

    Raises:
        NotFoundError: the catalog is valid but nothing matches ``name``
    """
    stories = _stories(doc)
    if stories is None:
        return None
    for entry in _entries(stories):
        if entry.get("title") == name or entry.get("kind") == name:
            return docs_page_url(entry, base_url)
    raise NotFoundError(f'Component "{name}" not found')

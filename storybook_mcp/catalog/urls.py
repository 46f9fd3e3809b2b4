"""
Documentation page URLs for catalog entries.

Story ids look like ``components-button--primary``: the part before the last
``--`` names the component, the part after it names the story. The docs page
of a component lives under the same prefix with the ``docs`` suffix and is
rendered standalone by ``iframe.html`` in docs view mode.
"""

import re
from typing import Any, Dict, Optional
from urllib.parse import quote, urlsplit

DOCS_SUFFIX = "docs"


def docs_id_for(story_id: str) -> str:
    """Replace the story segment of an id with the docs suffix."""
    prefix, sep, _ = story_id.rpartition("--")
    if not sep:
        prefix = story_id
    return f"{prefix}--{DOCS_SUFFIX}"


def slugify_title(title: str) -> str:
    """Storybook-style id prefix for a title such as ``Components/Button``."""
    slug = re.sub(r"[\s/]+", "-", title.strip().lower())
    slug = re.sub(r"[^a-z0-9_-]", "", slug)
    return re.sub(r"-{2,}", "-", slug).strip("-")


def docs_page_url(entry: Dict[str, Any], base_url: str) -> Optional[str]:
    """
    Build the docs page URL for a matched entry.

    The page always lives at the origin of the catalog URL, so a catalog
    served at ``https://host/storybook/index.json`` yields
    ``https://host/iframe.html?...``.
    """
    story_id = entry.get("id")
    if not story_id:
        title = entry.get("title") or ""
        if not title:
            return None
        story_id = slugify_title(title)
    docs_id = docs_id_for(str(story_id))
    parts = urlsplit(base_url)
    return f"{parts.scheme}://{parts.netloc}/iframe.html?viewMode=docs&id={quote(docs_id, safe='-_.')}"

"""
Catalog adapter contract.

Adapters are plain modules (``v3``, ``v5``); they satisfy this protocol
structurally, so callers can type against it without a base class.
"""

from typing import Any, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class CatalogAdapter(Protocol):
    VERSION: int

    def list_components(self, doc: Any) -> List[str]:
        """Sorted distinct component titles; empty for a malformed document."""
        ...

    def resolve_doc_url(self, doc: Any, name: str, base_url: str) -> Optional[str]:
        """
        Docs page URL of component ``name``.

        Returns None without a usable document.

        Raises:
            NotFoundError: the document has no matching component
        """
        ...

"""Tests for catalog fetching and version detection."""

import json

import aiohttp
import pytest

from storybook_mcp.catalog import (
    CatalogAdapter,
    adapter_for,
    detect_version,
    fetch_catalog,
    load_catalog,
    v3,
    v5,
)
from storybook_mcp.exceptions import CatalogDecodeError, FetchError

STORYBOOK_URL = "http://localhost:6006/index.json"


class TestDetectVersion:

    def test_v_field(self):
        assert detect_version({"v": 3, "stories": {}}) == 3

    def test_version_field(self):
        assert detect_version({"version": 5, "entries": {}}) == 5

    def test_other_version_with_entries_is_v5(self):
        assert detect_version({"v": 4, "entries": {}}) == 5

    def test_unknown_shape_fails(self):
        with pytest.raises(CatalogDecodeError, match="Unsupported catalog format"):
            detect_version({"v": 7, "stories": {}})

    def test_non_object_fails(self):
        with pytest.raises(CatalogDecodeError):
            detect_version(["not", "a", "catalog"])

    def test_adapter_for(self):
        assert adapter_for({"v": 3, "stories": {}}) is v3
        assert adapter_for({"v": 5, "entries": {}}) is v5

    @pytest.mark.parametrize("adapter", [v3, v5])
    def test_adapters_satisfy_protocol(self, adapter):
        assert isinstance(adapter, CatalogAdapter)
        assert adapter.VERSION in (3, 5)


class TestFetchCatalog:

    @pytest.mark.asyncio
    async def test_returns_document(self, serve_catalog):
        doc = {"v": 5, "entries": {}}
        session = serve_catalog(doc)

        result = await fetch_catalog(STORYBOOK_URL)

        assert result == doc
        assert session.requests == [STORYBOOK_URL]

    @pytest.mark.asyncio
    async def test_uses_given_session(self, serve_catalog):
        session = serve_catalog({"v": 3, "stories": {}})

        await fetch_catalog(STORYBOOK_URL, session)

        assert session.requests == [STORYBOOK_URL]

    @pytest.mark.asyncio
    async def test_non_success_status(self, serve_catalog):
        serve_catalog(status=502, reason="Bad Gateway")

        with pytest.raises(FetchError, match="Failed to get component list: Bad Gateway"):
            await fetch_catalog(STORYBOOK_URL)

    @pytest.mark.asyncio
    async def test_connection_failure(self, serve_catalog):
        serve_catalog(error=aiohttp.ClientConnectionError("connection refused"))

        with pytest.raises(FetchError, match="connection refused"):
            await fetch_catalog(STORYBOOK_URL)

    @pytest.mark.asyncio
    async def test_invalid_json(self, serve_catalog):
        serve_catalog(json_error=json.JSONDecodeError("Expecting value", "<html>", 0))

        with pytest.raises(CatalogDecodeError, match="not valid JSON"):
            await fetch_catalog(STORYBOOK_URL)

    @pytest.mark.asyncio
    async def test_unrecognised_document(self, serve_catalog):
        serve_catalog({"hello": "world"})

        with pytest.raises(CatalogDecodeError):
            await fetch_catalog(STORYBOOK_URL)

    @pytest.mark.asyncio
    async def test_load_catalog_pairs_adapter(self, serve_catalog):
        serve_catalog({"v": 3, "stories": {}})

        adapter, doc = await load_catalog(STORYBOOK_URL)

        assert adapter is v3
        assert doc == {"v": 3, "stories": {}}

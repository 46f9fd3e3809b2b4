#!/usr/bin/env python3
"""
Storybook MCP server.

StorybookMCPServer is the object callers interact with: it owns the
configuration, creates one browser per call and routes tool names to the
catalog listing, the props scraper or a custom tool. ``start_stdio()`` serves
it over the MCP stdio transport.

Usage:
    server = StorybookMCPServer()          # reads STORYBOOK_URL, CUSTOM_TOOLS
    result = await server.get_component_list()
    print(result.text)
"""

from typing import Any, Dict, List, Optional, Sequence

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from .browser import BrowserSession, Launcher, chromium_launcher
from .catalog import load_catalog
from .config import Config
from .custom_tools import CustomToolExecutor
from .diagnostics import get_logger
from .exceptions import UnknownToolError
from .models import CustomToolDefinition, ToolResult
from .scraper import PropsScraper

logger = get_logger(__name__)

SERVER_NAME = "storybook-mcp"

LIST_COMPONENTS_TOOL = "getComponentList"
COMPONENTS_PROPS_TOOL = "getComponentsProps"

EMPTY_CATALOG_MESSAGE = "No components found in Storybook"

BUILTIN_TOOLS = [
    types.Tool(
        name=LIST_COMPONENTS_TOOL,
        description="Get a list of all components documented in Storybook",
        inputSchema={"type": "object", "properties": {}},
    ),
    types.Tool(
        name=COMPONENTS_PROPS_TOOL,
        description="Get the props table of one or more Storybook components",
        inputSchema={
            "type": "object",
            "properties": {
                "componentNames": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Component titles as returned by getComponentList",
                },
            },
            "required": ["componentNames"],
        },
    ),
]


class StorybookMCPServer:
    """
    Dispatch facade for the Storybook tools.

    Every call gets its own BrowserSession, closed when the call finishes
    whether it succeeded or not; nothing is shared between concurrent calls.
    """

    def __init__(self, config: Optional[Config] = None, launcher: Optional[Launcher] = None):
        """
        Initialize the server.

        Args:
            config: configuration; read from the environment when omitted
            launcher: browser launcher; Playwright Chromium when omitted

        Raises:
            ConfigError: STORYBOOK_URL is missing or CUSTOM_TOOLS is invalid
        """
        self.config = config if config is not None else Config.from_env()
        self._launcher = launcher or chromium_launcher(headless=self.config.headless)
        self.custom_tools: Dict[str, CustomToolDefinition] = {
            tool.name: tool for tool in self.config.custom_tools
        }
        logger.info(
            f"StorybookMCPServer initialized: url={self.config.storybook_url}, "
            f"custom_tools={len(self.custom_tools)}"
        )

    def _new_session(self) -> BrowserSession:
        return BrowserSession(self._launcher)

    # ============================================
    # Tools
    # ============================================

    async def get_component_list(self) -> ToolResult:
        adapter, doc = await load_catalog(self.config.storybook_url)
        names = adapter.list_components(doc)
        logger.info(f"Catalog lists {len(names)} components")
        return ToolResult.from_text("\n".join(names) if names else EMPTY_CATALOG_MESSAGE)

    async def get_components_props(self, names: Sequence[str]) -> ToolResult:
        adapter, doc = await load_catalog(self.config.storybook_url)
        async with self._new_session() as session:
            scraper = PropsScraper(
                session,
                selector=self.config.props_selector,
                settle_ms=self.config.settle_ms,
            )
            return await scraper.get_components_props(adapter, doc, names, self.config.storybook_url)

    async def execute_custom_tool(
        self,
        tool: CustomToolDefinition,
        args: Optional[Dict[str, Any]] = None,
    ) -> ToolResult:
        async with self._new_session() as session:
            return await CustomToolExecutor(session).execute(tool, args)

    # ============================================
    # Dispatch
    # ============================================

    def tool_definitions(self) -> List[types.Tool]:
        """Built-in tools followed by the configured custom tools."""
        tools = list(BUILTIN_TOOLS)
        for tool in self.custom_tools.values():
            tools.append(types.Tool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.input_schema(),
            ))
        return tools

    async def dispatch(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """
        Route a tool call by name.

        Raises:
            UnknownToolError: name is not a built-in or configured tool
        """
        arguments = arguments or {}
        if name == LIST_COMPONENTS_TOOL:
            return await self.get_component_list()
        if name == COMPONENTS_PROPS_TOOL:
            names = arguments.get("componentNames") or []
            if isinstance(names, str):
                names = [names]
            return await self.get_components_props(list(names))
        tool = self.custom_tools.get(name)
        if tool is None:
            raise UnknownToolError(f"Unknown tool: {name}")
        return await self.execute_custom_tool(tool, arguments)

    # ============================================
    # Transport
    # ============================================

    def build_mcp_server(self) -> Server:
        server = Server(SERVER_NAME)

        @server.list_tools()  # type: ignore
        async def list_tools() -> List[types.Tool]:
            return self.tool_definitions()

        @server.call_tool()  # type: ignore
        async def call_tool(name: str, arguments: Dict[str, Any]) -> List[types.TextContent]:
            try:
                result = await self.dispatch(name, arguments)
            except Exception as e:
                logger.error(f"Tool {name} failed: {e}")
                return [types.TextContent(type="text", text=f"Error: {e}")]
            return [types.TextContent(type="text", text=block.text) for block in result.content]

        return server

    async def start_stdio(self) -> None:
        """Serve the tools over stdio until the client disconnects."""
        server = self.build_mcp_server()
        logger.info("Starting Storybook MCP server on stdio")
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )

"""
storybook_mcp: Storybook component catalog over the Model Context Protocol.

Tools:
    getComponentList    - titles of all documented components
    getComponentsProps  - rendered props table per component
    <custom tools>      - page + handler pairs declared in CUSTOM_TOOLS
"""
from .config import Config
from .exceptions import (
    StorybookMCPError,
    ConfigError,
    FetchError,
    CatalogDecodeError,
    NotFoundError,
    NavigationError,
    EvaluationError,
    ExecutionError,
    UnknownToolError,
)
from .models import CustomToolDefinition, TextContent, ToolResult
from .server import StorybookMCPServer

__all__ = [
    "Config",
    "StorybookMCPServer",
    "CustomToolDefinition",
    "TextContent",
    "ToolResult",
    "StorybookMCPError",
    "ConfigError",
    "FetchError",
    "CatalogDecodeError",
    "NotFoundError",
    "NavigationError",
    "EvaluationError",
    "ExecutionError",
    "UnknownToolError",
]

__version__ = "1.0.0"

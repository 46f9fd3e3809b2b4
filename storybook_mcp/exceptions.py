"""
Storybook MCP exceptions
"""


class StorybookMCPError(Exception):
    """Base exception for the Storybook MCP server"""
    pass


class ConfigError(StorybookMCPError):
    """Missing or invalid configuration"""
    pass


class FetchError(StorybookMCPError):
    """Catalog could not be retrieved"""
    pass


class CatalogDecodeError(StorybookMCPError):
    """Catalog body is not a recognised index document"""
    pass


class NotFoundError(StorybookMCPError):
    """Component is absent from a valid catalog"""
    pass


class NavigationError(StorybookMCPError):
    """Browser failed to load or wait on a page"""
    pass


class EvaluationError(StorybookMCPError):
    """Script evaluation inside a page failed"""
    pass


class ExecutionError(StorybookMCPError):
    """Custom tool failed; carries the tool name"""

    def __init__(self, tool_name: str, message: str):
        self.tool_name = tool_name
        super().__init__(f'Failed to execute custom tool "{tool_name}": {message}')


class UnknownToolError(StorybookMCPError):
    """Tool name is neither built-in nor configured"""
    pass

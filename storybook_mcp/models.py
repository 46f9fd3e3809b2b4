"""
Data models shared by the catalog, scraper and custom tool paths.

ToolResult is the single shape every exposed tool returns:
    {"content": [{"type": "text", "text": "..."}]}
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List

from .exceptions import ConfigError


@dataclass
class TextContent:
    """One text block of a tool result"""
    text: str
    type: str = "text"


@dataclass
class ToolResult:
    """Result handed back to the transport; built fresh for every call"""
    content: List[TextContent] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "ToolResult":
        return cls(content=[TextContent(text=text)])

    @property
    def text(self) -> str:
        """Concatenated text of all content blocks."""
        return "\n".join(block.text for block in self.content)

    def to_dict(self) -> Dict[str, Any]:
        return {"content": [asdict(block) for block in self.content]}


@dataclass(frozen=True)
class CustomToolDefinition:
    """
    Declarative extraction tool: a target page plus a handler snippet.

    The handler is JavaScript source evaluated inside the page, never in
    this process. Argument names are bound as handler parameters.
    """
    name: str
    page: str
    handler: str
    description: str = ""
    parameters: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CustomToolDefinition":
        """
        Build a definition from its JSON form.

        Raises:
            ConfigError: if the entry is not an object or lacks a
                required string field
        """
        if not isinstance(data, dict):
            raise ConfigError(f"Custom tool definition must be an object, got {type(data).__name__}")
        for key in ("name", "page", "handler"):
            value = data.get(key)
            if not isinstance(value, str) or not value.strip():
                label = data.get("name") or "<unnamed>"
                raise ConfigError(f'Custom tool "{label}" is missing required field "{key}"')
        parameters = data.get("parameters") or {}
        if not isinstance(parameters, dict):
            raise ConfigError(f'Custom tool "{data["name"]}" has non-object "parameters"')
        return cls(
            name=data["name"].strip(),
            page=data["page"].strip(),
            handler=data["handler"],
            description=str(data.get("description") or ""),
            parameters=parameters,
        )

    def input_schema(self) -> Dict[str, Any]:
        """
        JSON schema for the tool's arguments.

        A ``parameters`` value that already declares a ``type`` is used as-is;
        otherwise it is treated as the ``properties`` map of an object schema.
        """
        if "type" in self.parameters:
            return dict(self.parameters)
        return {"type": "object", "properties": dict(self.parameters)}

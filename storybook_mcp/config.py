#!/usr/bin/env python3
import json
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from .exceptions import ConfigError
from .models import CustomToolDefinition

load_dotenv()

BUILTIN_TOOL_NAMES = ("getComponentList", "getComponentsProps")

DEFAULT_PROPS_SELECTOR = "table.docblock-argstable"
DEFAULT_SETTLE_MS = 1000


def env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ["true", "1", "yes"]


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def parse_custom_tools(raw: Optional[str]) -> List[CustomToolDefinition]:
    """
    Parse the CUSTOM_TOOLS JSON array.

    Args:
        raw: JSON text, or None/blank for no custom tools

    Returns:
        Tool definitions in declaration order

    Raises:
        ConfigError: on invalid JSON, invalid entries or duplicate names
    """
    if raw is None or not raw.strip():
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"CUSTOM_TOOLS is not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise ConfigError("CUSTOM_TOOLS must be a JSON array of tool definitions")

    tools = [CustomToolDefinition.from_dict(item) for item in data]
    seen = set(BUILTIN_TOOL_NAMES)
    for tool in tools:
        if tool.name in seen:
            raise ConfigError(f'Custom tool name "{tool.name}" is already in use')
        seen.add(tool.name)
    return tools


@dataclass
class Config:
    """Application configuration"""
    storybook_url: str
    custom_tools: List[CustomToolDefinition] = field(default_factory=list)
    props_selector: str = DEFAULT_PROPS_SELECTOR
    settle_ms: int = DEFAULT_SETTLE_MS
    headless: bool = True
    debug: bool = False

    def __post_init__(self):
        if not self.storybook_url or not self.storybook_url.strip():
            raise ConfigError("STORYBOOK_URL environment variable is required")
        self.storybook_url = self.storybook_url.strip()

    @classmethod
    def from_env(cls) -> "Config":
        """Read configuration from the process environment at call time."""
        return cls(
            storybook_url=os.getenv("STORYBOOK_URL", ""),
            custom_tools=parse_custom_tools(os.getenv("CUSTOM_TOOLS")),
            props_selector=os.getenv("STORYBOOK_PROPS_SELECTOR") or DEFAULT_PROPS_SELECTOR,
            settle_ms=_env_int("STORYBOOK_SETTLE_MS", DEFAULT_SETTLE_MS),
            headless=env_bool("STORYBOOK_HEADLESS", "true"),
            debug=env_bool("STORYBOOK_MCP_DEBUG", "false"),
        )

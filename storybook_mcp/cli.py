"""Process entrypoint: ``storybook-mcp`` / ``python -m storybook_mcp``."""

import asyncio
import sys

from .diagnostics import get_logger

logger = get_logger("storybook_mcp")


async def _serve() -> None:
    from .server import StorybookMCPServer

    await StorybookMCPServer().start_stdio()


def main() -> int:
    """Run the server; 0 on clean shutdown, 1 when startup fails."""
    try:
        asyncio.run(_serve())
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        logger.error(f"Failed to start Storybook MCP Server: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

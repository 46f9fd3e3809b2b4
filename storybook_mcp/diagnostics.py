import logging
import sys
from typing import Dict

from .config import env_bool


_LOGGER_CACHE: Dict[str, logging.Logger] = {}


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger.

    Respects STORYBOOK_MCP_DEBUG env var to set DEBUG/INFO level.
    Output goes to stderr; stdout carries the MCP stdio stream.
    Ensures we don't duplicate handlers across multiple imports.
    """
    lg = _LOGGER_CACHE.get(name)
    if lg:
        return lg
    lg = logging.getLogger(name)
    # Configure only if not configured yet
    if not lg.handlers:
        debug = env_bool("STORYBOOK_MCP_DEBUG", "false")
        level = logging.DEBUG if debug else logging.INFO
        lg.setLevel(level)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        fmt = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(fmt)
        lg.addHandler(handler)
        lg.propagate = False
    _LOGGER_CACHE[name] = lg
    return lg

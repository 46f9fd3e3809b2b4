"""
Custom tool execution.

A custom tool navigates to its page, waits for the network to go idle and
evaluates its handler inside the page. Whatever the handler returns is turned
into text by ``format_result``. Unlike the props batch, any failure here is
raised as ExecutionError: there is a single target and nothing to salvage.
"""

import json
import math
from typing import Any, Dict, Optional

from .browser import BrowserSession, open_page
from .diagnostics import get_logger
from .exceptions import EvaluationError, ExecutionError, NavigationError
from .models import CustomToolDefinition, ToolResult

logger = get_logger(__name__)

# Runs in the page. The handler is compiled as an expression when it parses as
# one, otherwise as a function body. Argument keys that are usable JavaScript
# identifiers become parameters; the whole mapping is always reachable as
# `args`. Handlers are compiled as async functions so they may use `await`.
# A handler written as a function expression is called with the mapping.
HANDLER_RUNNER = """
async ({ handler, args }) => {
  const AsyncFunction = (async () => {}).constructor;
  const bindable = (key) => {
    if (key === 'args' || !/^[A-Za-z_$][\\w$]*$/.test(key)) return false;
    try {
      new AsyncFunction(key, '');
      return true;
    } catch (err) {
      return false;
    }
  };
  const names = Object.keys(args).filter(bindable);
  const values = names.map((key) => args[key]);
  names.push('args');
  values.push(args);
  let fn;
  try {
    fn = new AsyncFunction(...names, `return (${handler}\\n);`);
  } catch (err) {
    if (!(err instanceof SyntaxError)) throw err;
    fn = new AsyncFunction(...names, handler);
  }
  const result = await fn(...values);
  return typeof result === 'function' ? await result(args) : result;
}
"""


def _stringify(value: Any) -> str:
    """String form of a scalar, following JavaScript's String()."""
    if value is None:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    if isinstance(value, (dict, list, tuple)):
        return _to_json(value)
    return str(value)


def _to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)


def format_result(value: Any) -> str:
    """
    Text form of a handler's return value.

    Sequences are joined line by line, mappings become compact JSON and
    anything else is stringified.
    """
    if isinstance(value, (list, tuple)):
        return "\n".join(_stringify(item) for item in value)
    if isinstance(value, dict):
        return _to_json(value)
    return _stringify(value)


class CustomToolExecutor:
    """Runs declared custom tools against their target pages."""

    def __init__(self, session: BrowserSession):
        self.session = session

    async def _run(self, tool: CustomToolDefinition, args: Dict[str, Any]) -> Any:
        async with open_page(self.session) as page:
            try:
                await page.goto(tool.page, wait_until="networkidle")
            except Exception as e:
                raise NavigationError(str(e)) from e
            try:
                return await page.evaluate(HANDLER_RUNNER, {"handler": tool.handler, "args": args})
            except Exception as e:
                raise EvaluationError(str(e)) from e

    async def execute(
        self,
        tool: CustomToolDefinition,
        args: Optional[Dict[str, Any]] = None,
    ) -> ToolResult:
        """
        Execute ``tool`` with ``args`` bound as handler parameters.

        Raises:
            ExecutionError: navigation, evaluation or page setup failed
        """
        logger.info(f"Executing custom tool {tool.name} on {tool.page}")
        try:
            value = await self._run(tool, dict(args or {}))
        except Exception as e:
            logger.error(f"Custom tool {tool.name} failed: {e}")
            raise ExecutionError(tool.name, str(e)) from e
        return ToolResult.from_text(format_result(value))

"""Route tool calls to handlers and render the reply text."""

from __future__ import annotations

import json
import logging

from cosmosmcp.models.tool import DispatchResponse, ToolResult
from cosmosmcp.services.tools.catalog import get_descriptor
from cosmosmcp.services.tools.context import ToolContext
from cosmosmcp.services.tools.registry import get_tool_handlers

logger = logging.getLogger(__name__)


class ToolDispatcher:
    """Dispatches named tool invocations. ``dispatch`` never raises."""

    def __init__(self, ctx: ToolContext) -> None:
        self._ctx = ctx

    async def dispatch(self, name: str, arguments: dict | None) -> DispatchResponse:
        arguments = arguments or {}
        handler = get_tool_handlers().get(name)
        descriptor = get_descriptor(name)
        if handler is None or descriptor is None:
            logger.warning("Unknown tool requested: %s", name)
            return DispatchResponse(f"Unknown tool: {name}", is_error=True)

        missing = descriptor.missing_arguments(arguments)
        if missing:
            logger.warning("Tool %s missing required argument(s): %s", name, missing)
            result = ToolResult.fail(f"Missing required argument(s): {', '.join(missing)}")
            return DispatchResponse(_render(result))

        logger.debug("Calling tool %s", name)
        try:
            result = await handler(self._ctx, arguments)
            return DispatchResponse(_render(result))
        except Exception as e:
            logger.exception("Tool %s execution failed unexpectedly", name)
            return DispatchResponse(f"Error occurred: {e}", is_error=True)


def _render(result: ToolResult) -> str:
    return json.dumps(result.to_dict(), indent=2, default=str)

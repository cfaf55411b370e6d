"""Handler type and the failure-to-envelope boundary shared by all tools."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from azure.core.exceptions import ResourceNotFoundError

from cosmosmcp.models.tool import ToolResult
from cosmosmcp.services.tools.context import ToolContext

logger = logging.getLogger(__name__)

ToolHandler = Callable[[ToolContext, dict], Coroutine[Any, Any, ToolResult]]


class NotFoundError(LookupError):
    """A referenced item, secret or certificate does not exist."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind} not found: {name}")
        self.kind = kind
        self.name = name


def tool_handler(action: str) -> Callable[[ToolHandler], ToolHandler]:
    """Turn any failure inside a handler into ``ToolResult.fail``.

    ``action`` completes the message ``"Failed to <action>: <error>"``.
    """

    def decorator(func: ToolHandler) -> ToolHandler:
        @functools.wraps(func)
        async def wrapper(ctx: ToolContext, arguments: dict) -> ToolResult:
            try:
                return await func(ctx, arguments)
            except NotFoundError as e:
                logger.warning("Error trying to %s: %s", action, e)
                return ToolResult.fail(f"Failed to {action}: {e}")
            except ResourceNotFoundError as e:
                logger.warning("Error trying to %s: %s", action, e)
                return ToolResult.fail(f"Failed to {action}: not found ({e.message})")
            except Exception as e:
                logger.error("Error trying to %s: %s", action, e, exc_info=True)
                return ToolResult.fail(f"Failed to {action}: {e}")

        return wrapper

    return decorator

"""Tool handlers exposed over MCP.

Each tool handler is a simple async function with signature:

    async def handle(ctx: ToolContext, arguments: dict) -> ToolResult

The registry maps tool names to handler functions and the catalog holds
the descriptors advertised to clients.
"""

from __future__ import annotations

from cosmosmcp.services.tools.catalog import get_tool_catalog
from cosmosmcp.services.tools.registry import get_tool_handlers

__all__ = ["get_tool_catalog", "get_tool_handlers"]

"""MCP server over stdio exposing the tool catalog."""

from __future__ import annotations

import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from cosmosmcp.models.tool import DispatchResponse, ToolDescriptor
from cosmosmcp.services.tools.catalog import get_tool_catalog
from cosmosmcp.services.tools.dispatcher import ToolDispatcher

logger = logging.getLogger(__name__)


def to_mcp_tool(descriptor: ToolDescriptor) -> Tool:
    return Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=descriptor.input_schema(),
    )


def to_call_tool_result(response: DispatchResponse) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=response.text)],
        isError=response.is_error,
    )


def create_server(dispatcher: ToolDispatcher, name: str, version: str) -> Server:
    """Build an MCP server whose tool calls go through ``dispatcher``."""
    app = Server(name, version=version)

    @app.list_tools()
    async def list_tools() -> list[Tool]:
        return [to_mcp_tool(d) for d in get_tool_catalog()]

    # Arguments are checked by the dispatcher, not the SDK
    @app.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict) -> CallToolResult:
        response = await dispatcher.dispatch(name, arguments)
        return to_call_tool_result(response)

    return app


async def run_stdio(app: Server) -> None:
    """Serve ``app`` on stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info("MCP stdio transport open")
        await app.run(read_stream, write_stream, app.create_initialization_options())

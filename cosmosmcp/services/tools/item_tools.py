"""Cosmos DB item tool handlers."""

from __future__ import annotations

from cosmosmcp.models.tool import ToolResult
from cosmosmcp.services.tools.base import NotFoundError, tool_handler
from cosmosmcp.services.tools.context import ToolContext


@tool_handler("update item")
async def handle_update_item(ctx: ToolContext, arguments: dict) -> ToolResult:
    item_id = arguments["id"]
    updates = arguments["updates"]
    if not isinstance(updates, dict):
        raise ValueError("updates must be an object")
    container = arguments.get("containerName", "")

    current = await ctx.cosmos.read_item(
        container, item_id, partition_key=arguments.get("partitionKey")
    )
    if current is None:
        raise NotFoundError("Item", item_id)

    merged = {**current, **updates}
    updated = await ctx.cosmos.replace_item(container, item_id, merged)
    return ToolResult.ok("Item updated successfully", item=updated)


@tool_handler("put item")
async def handle_put_item(ctx: ToolContext, arguments: dict) -> ToolResult:
    item = arguments["item"]
    if not isinstance(item, dict):
        raise ValueError("item must be an object")
    stored = await ctx.cosmos.upsert_item(arguments.get("containerName", ""), item)
    return ToolResult.ok("Item added successfully to container", item=stored)


@tool_handler("get item")
async def handle_get_item(ctx: ToolContext, arguments: dict) -> ToolResult:
    item_id = arguments["id"]
    item = await ctx.cosmos.read_item(
        arguments.get("containerName", ""),
        item_id,
        partition_key=arguments.get("partitionKey"),
    )
    if item is None:
        raise NotFoundError("Item", item_id)
    return ToolResult.ok("Item retrieved successfully", item=item)


@tool_handler("query container")
async def handle_query_container(ctx: ToolContext, arguments: dict) -> ToolResult:
    parameters = arguments.get("parameters")
    if parameters is not None and not isinstance(parameters, list):
        raise ValueError("parameters must be an array")
    items = await ctx.cosmos.query_items(
        arguments.get("containerName", ""), arguments["query"], parameters
    )
    return ToolResult.ok("Query executed successfully", items=items)

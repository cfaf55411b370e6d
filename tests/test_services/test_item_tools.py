"""Tests for Cosmos DB item tool handlers with a mocked store."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from azure.core.exceptions import ServiceRequestError

from cosmosmcp.services.tools.context import ToolContext
from cosmosmcp.services.tools.item_tools import (
    handle_get_item,
    handle_put_item,
    handle_query_container,
    handle_update_item,
)


@pytest.fixture
def mock_cosmos():
    return AsyncMock()


@pytest.fixture
def ctx(mock_cosmos):
    return ToolContext(cosmos=mock_cosmos, vault=AsyncMock())


class TestUpdateItem:
    @pytest.mark.asyncio
    async def test_merges_updates(self, ctx, mock_cosmos):
        mock_cosmos.read_item.return_value = {"id": "1", "a": 1, "b": 2}
        mock_cosmos.replace_item.side_effect = lambda container, item_id, body: body

        result = await handle_update_item(
            ctx, {"containerName": "tasks", "id": "1", "updates": {"b": 3}}
        )

        assert result.success is True
        assert result.payload["item"] == {"id": "1", "a": 1, "b": 3}
        mock_cosmos.read_item.assert_called_once_with("tasks", "1", partition_key=None)
        mock_cosmos.replace_item.assert_called_once_with(
            "tasks", "1", {"id": "1", "a": 1, "b": 3}
        )

    @pytest.mark.asyncio
    async def test_passes_partition_key(self, ctx, mock_cosmos):
        mock_cosmos.read_item.return_value = {"id": "1", "owner": "ana"}
        mock_cosmos.replace_item.return_value = {"id": "1", "owner": "ana"}
        await handle_update_item(
            ctx,
            {"containerName": "tasks", "id": "1", "updates": {}, "partitionKey": "ana"},
        )
        mock_cosmos.read_item.assert_called_once_with("tasks", "1", partition_key="ana")

    @pytest.mark.asyncio
    async def test_not_found(self, ctx, mock_cosmos):
        mock_cosmos.read_item.return_value = None

        result = await handle_update_item(
            ctx, {"containerName": "tasks", "id": "missing", "updates": {"b": 3}}
        )

        assert result.success is False
        assert "not found" in result.message
        assert result.message.startswith("Failed to update item")
        mock_cosmos.replace_item.assert_not_called()

    @pytest.mark.asyncio
    async def test_updates_must_be_object(self, ctx, mock_cosmos):
        result = await handle_update_item(
            ctx, {"containerName": "tasks", "id": "1", "updates": "b=3"}
        )
        assert result.success is False
        assert "updates must be an object" in result.message
        mock_cosmos.read_item.assert_not_called()

    @pytest.mark.asyncio
    async def test_replace_failure(self, ctx, mock_cosmos):
        mock_cosmos.read_item.return_value = {"id": "1"}
        mock_cosmos.replace_item.side_effect = ServiceRequestError("connection reset")

        result = await handle_update_item(
            ctx, {"containerName": "tasks", "id": "1", "updates": {"b": 3}}
        )

        assert result.success is False
        assert "connection reset" in result.message


class TestPutItem:
    @pytest.mark.asyncio
    async def test_put(self, ctx, mock_cosmos):
        item = {"id": "42", "title": "Write docs"}
        mock_cosmos.upsert_item.return_value = {**item, "_etag": "abc"}

        result = await handle_put_item(ctx, {"containerName": "tasks", "item": item})

        assert result.success is True
        assert result.message == "Item added successfully to container"
        assert result.payload["item"]["_etag"] == "abc"
        mock_cosmos.upsert_item.assert_called_once_with("tasks", item)

    @pytest.mark.asyncio
    async def test_item_must_be_object(self, ctx, mock_cosmos):
        result = await handle_put_item(ctx, {"containerName": "tasks", "item": [1, 2]})
        assert result.success is False
        mock_cosmos.upsert_item.assert_not_called()


class TestGetItem:
    @pytest.mark.asyncio
    async def test_found(self, ctx, mock_cosmos):
        mock_cosmos.read_item.return_value = {"id": "1", "a": 1}

        result = await handle_get_item(ctx, {"containerName": "tasks", "id": "1"})

        assert result.to_dict() == {
            "success": True,
            "message": "Item retrieved successfully",
            "item": {"id": "1", "a": 1},
        }

    @pytest.mark.asyncio
    async def test_not_found_is_failure(self, ctx, mock_cosmos):
        mock_cosmos.read_item.return_value = None

        result = await handle_get_item(ctx, {"containerName": "tasks", "id": "nope"})

        assert result.success is False
        assert "not found" in result.message
        assert "item" not in result.to_dict()

    @pytest.mark.asyncio
    async def test_empty_container_name_uses_default(self, ctx, mock_cosmos):
        mock_cosmos.read_item.return_value = {"id": "1"}
        await handle_get_item(ctx, {"id": "1"})
        mock_cosmos.read_item.assert_called_once_with("", "1", partition_key=None)


class TestQueryContainer:
    @pytest.mark.asyncio
    async def test_query(self, ctx, mock_cosmos):
        mock_cosmos.query_items.return_value = [{"id": "1"}, {"id": "2"}]
        params = [{"name": "@done", "value": False}]

        result = await handle_query_container(
            ctx,
            {
                "containerName": "tasks",
                "query": "SELECT * FROM c WHERE c.done = @done",
                "parameters": params,
            },
        )

        assert result.success is True
        assert result.payload["items"] == [{"id": "1"}, {"id": "2"}]
        mock_cosmos.query_items.assert_called_once_with(
            "tasks", "SELECT * FROM c WHERE c.done = @done", params
        )

    @pytest.mark.asyncio
    async def test_zero_rows(self, ctx, mock_cosmos):
        mock_cosmos.query_items.return_value = []

        result = await handle_query_container(
            ctx, {"containerName": "tasks", "query": "SELECT * FROM c WHERE false"}
        )

        assert result.to_dict() == {
            "success": True,
            "message": "Query executed successfully",
            "items": [],
        }

    @pytest.mark.asyncio
    async def test_parameters_must_be_array(self, ctx, mock_cosmos):
        result = await handle_query_container(
            ctx, {"containerName": "tasks", "query": "SELECT * FROM c", "parameters": {"x": 1}}
        )
        assert result.success is False
        mock_cosmos.query_items.assert_not_called()

    @pytest.mark.asyncio
    async def test_query_failure(self, ctx, mock_cosmos):
        mock_cosmos.query_items.side_effect = RuntimeError("syntax error near 'FORM'")

        result = await handle_query_container(
            ctx, {"containerName": "tasks", "query": "SELECT * FORM c"}
        )

        assert result.success is False
        assert result.message == "Failed to query container: syntax error near 'FORM'"

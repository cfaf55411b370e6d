"""Async Azure Cosmos DB wrapper."""

from __future__ import annotations

import logging
from typing import Any

from azure.core.exceptions import AzureError
from azure.cosmos.aio import ContainerProxy, CosmosClient, DatabaseProxy
from azure.cosmos.exceptions import CosmosResourceNotFoundError

logger = logging.getLogger(__name__)


class CosmosStore:
    """Thin wrapper around the async Cosmos DB client for one database.

    ``credential`` is either an account key or an async token credential.
    """

    def __init__(
        self,
        endpoint: str,
        credential: Any,
        database: str = "todos",
        default_container: str = "tasks",
        client: CosmosClient | None = None,
    ) -> None:
        self._client = client or CosmosClient(endpoint, credential=credential)
        self._db: DatabaseProxy = self._client.get_database_client(database)
        self._default_container = default_container
        logger.info("Cosmos DB client created: %s/%s", endpoint, database)

    @property
    def db(self) -> DatabaseProxy:
        return self._db

    def container(self, name: str = "") -> ContainerProxy:
        """Return a container proxy, falling back to the default container."""
        return self._db.get_container_client(name or self._default_container)

    async def read_item(
        self, container: str, item_id: str, partition_key: Any = None
    ) -> dict | None:
        """Read an item by ID. Returns None if it does not exist."""
        pk = item_id if partition_key is None else partition_key
        try:
            return await self.container(container).read_item(item=item_id, partition_key=pk)
        except CosmosResourceNotFoundError:
            return None

    async def replace_item(self, container: str, item_id: str, body: dict) -> dict:
        """Replace an existing item with ``body``."""
        return await self.container(container).replace_item(item=item_id, body=body)

    async def upsert_item(self, container: str, body: dict) -> dict:
        """Insert ``body`` or replace the item sharing its id and partition key."""
        return await self.container(container).upsert_item(body=body)

    async def query_items(
        self, container: str, query: str, parameters: list[dict] | None = None
    ) -> list[dict]:
        """Run a SQL query across partitions and collect every page."""
        pager = self.container(container).query_items(
            query=query, parameters=parameters or None
        )
        return [item async for item in pager]

    async def close(self) -> None:
        await self._client.close()
        logger.info("Cosmos DB client closed")

    async def ping(self) -> bool:
        """Check that the database is reachable with the current credential."""
        try:
            await self._db.read()
            return True
        except AzureError as e:
            logger.warning("Cosmos DB ping failed: %s", e)
            return False

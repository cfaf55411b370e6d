"""Static catalog of the tools advertised to MCP clients."""

from __future__ import annotations

from cosmosmcp.models.tool import ToolDescriptor, ToolParameter

_CONTAINER = ToolParameter("containerName", "string", "Name of the container", required=True)
_PARTITION_KEY = ToolParameter(
    "partitionKey", "", "Partition key value of the item (defaults to the item ID)"
)

UPDATE_ITEM = ToolDescriptor(
    name="update_item",
    description="Updates specific attributes of an item in an Azure Cosmos DB container",
    parameters=(
        _CONTAINER,
        ToolParameter("id", "string", "ID of the item to update", required=True),
        ToolParameter("updates", "object", "The updated attributes of the item", required=True),
        _PARTITION_KEY,
    ),
)

PUT_ITEM = ToolDescriptor(
    name="put_item",
    description="Inserts or replaces an item in an Azure Cosmos DB container",
    parameters=(
        _CONTAINER,
        ToolParameter("item", "object", "Item to insert into the container", required=True),
    ),
)

GET_ITEM = ToolDescriptor(
    name="get_item",
    description="Retrieves an item from an Azure Cosmos DB container by its ID",
    parameters=(
        _CONTAINER,
        ToolParameter("id", "string", "ID of the item to retrieve", required=True),
        _PARTITION_KEY,
    ),
)

QUERY_CONTAINER = ToolDescriptor(
    name="query_container",
    description="Queries an Azure Cosmos DB container using SQL-like syntax",
    parameters=(
        _CONTAINER,
        ToolParameter("query", "string", "SQL query string", required=True),
        ToolParameter(
            "parameters", "array",
            'Query parameters, e.g. [{"name": "@status", "value": "done"}]',
        ),
    ),
)

GET_SECRET = ToolDescriptor(
    name="get_secret",
    description="Retrieves a secret value from Azure Key Vault",
    parameters=(
        ToolParameter("secretName", "string", "Name of the secret", required=True),
    ),
)

CHECK_CERTIFICATE_EXPIRY = ToolDescriptor(
    name="check_certificate_expiry",
    description="Checks how many days remain before a certificate in Azure Key Vault expires",
    parameters=(
        ToolParameter("certificateName", "string", "Name of the certificate", required=True),
    ),
)

_CATALOG: tuple[ToolDescriptor, ...] = (
    PUT_ITEM,
    GET_ITEM,
    QUERY_CONTAINER,
    UPDATE_ITEM,
    GET_SECRET,
    CHECK_CERTIFICATE_EXPIRY,
)


def get_tool_catalog() -> tuple[ToolDescriptor, ...]:
    """Return the ordered, immutable tool catalog."""
    return _CATALOG


def get_descriptor(name: str) -> ToolDescriptor | None:
    for descriptor in _CATALOG:
        if descriptor.name == name:
            return descriptor
    return None

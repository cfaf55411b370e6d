"""Tool handler registry: maps tool names to async handler functions."""

from __future__ import annotations

from cosmosmcp.services.tools.base import ToolHandler

# Lazy-populated on first access to avoid circular imports
_HANDLERS: dict[str, ToolHandler] | None = None


def _build_registry() -> dict[str, ToolHandler]:
    """Build the tool name -> handler function mapping."""
    from cosmosmcp.services.tools import item_tools, vault_tools

    return {
        # --- Cosmos DB ---
        "update_item": item_tools.handle_update_item,
        "put_item": item_tools.handle_put_item,
        "get_item": item_tools.handle_get_item,
        "query_container": item_tools.handle_query_container,
        # --- Key Vault ---
        "get_secret": vault_tools.handle_get_secret,
        "check_certificate_expiry": vault_tools.handle_check_certificate_expiry,
    }


def get_tool_handlers() -> dict[str, ToolHandler]:
    """Get the tool handler registry (lazily initialized)."""
    global _HANDLERS
    if _HANDLERS is None:
        _HANDLERS = _build_registry()
    return _HANDLERS

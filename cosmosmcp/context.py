"""AppContext: wires config and the Azure clients together."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from cosmosmcp.config import AppConfig, load_config

if TYPE_CHECKING:
    from pathlib import Path

    from cosmosmcp.infra.cosmos.client import CosmosStore
    from cosmosmcp.infra.keyvault.client import KeyVault
    from cosmosmcp.services.tools.context import ToolContext
    from cosmosmcp.services.tools.dispatcher import ToolDispatcher

logger = logging.getLogger(__name__)


class StartupError(RuntimeError):
    """The server cannot start with the current configuration or connectivity."""


class AppContext:
    """Central wiring for the upstream clients.

    Call `initialize()` once before serving and `close()` on shutdown.
    """

    def __init__(self, config: AppConfig | None = None, config_path: Path | None = None) -> None:
        self.config = config or load_config(config_path)
        self._credential: Any = None
        self._cosmos: CosmosStore | None = None
        self._vault: KeyVault | None = None
        self._dispatcher: ToolDispatcher | None = None

    async def initialize(self) -> None:
        """Create the Cosmos DB and Key Vault clients and verify connectivity."""
        from azure.identity.aio import DefaultAzureCredential

        from cosmosmcp.infra.cosmos.client import CosmosStore
        from cosmosmcp.infra.keyvault.client import KeyVault

        missing = self.config.missing_settings()
        if missing:
            raise StartupError(f"Missing required settings: {', '.join(missing)}")

        self._credential = DefaultAzureCredential()
        cosmos_cfg = self.config.cosmos
        self._cosmos = CosmosStore(
            endpoint=cosmos_cfg.endpoint,
            credential=cosmos_cfg.key or self._credential,
            database=cosmos_cfg.database,
            default_container=cosmos_cfg.container,
        )
        self._vault = KeyVault(self.config.keyvault.uri, self._credential)

        if self.config.server.verify_on_start and not await self._cosmos.ping():
            raise StartupError(
                f"Cannot reach Cosmos DB database '{cosmos_cfg.database}' at {cosmos_cfg.endpoint}"
            )
        logger.info("AppContext initialized")

    async def close(self) -> None:
        """Close all connections."""
        if self._cosmos:
            await self._cosmos.close()
        if self._vault:
            await self._vault.close()
        if self._credential:
            await self._credential.close()
        logger.info("AppContext closed")

    @property
    def cosmos(self) -> CosmosStore:
        if self._cosmos is None:
            raise RuntimeError("AppContext not initialized. Call initialize() first.")
        return self._cosmos

    @property
    def vault(self) -> KeyVault:
        if self._vault is None:
            raise RuntimeError("AppContext not initialized. Call initialize() first.")
        return self._vault

    @property
    def tool_context(self) -> ToolContext:
        from cosmosmcp.services.tools.context import ToolContext

        return ToolContext(cosmos=self.cosmos, vault=self.vault)

    @property
    def dispatcher(self) -> ToolDispatcher:
        if self._dispatcher is None:
            from cosmosmcp.services.tools.dispatcher import ToolDispatcher

            self._dispatcher = ToolDispatcher(self.tool_context)
        return self._dispatcher

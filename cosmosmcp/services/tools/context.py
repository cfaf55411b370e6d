"""Tool execution context: shared dependencies for all tool handlers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cosmosmcp.infra.cosmos.client import CosmosStore
    from cosmosmcp.infra.keyvault.client import KeyVault


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ToolContext:
    """Dependency bundle passed to every tool handler.

    Built once at startup from the live clients; tests pass stand-ins.
    """

    cosmos: CosmosStore
    vault: KeyVault
    now: Callable[[], datetime] = field(default=_utcnow)

"""Key Vault tool handlers."""

from __future__ import annotations

import math
from datetime import datetime

from cosmosmcp.models.tool import ToolResult
from cosmosmcp.services.tools.base import tool_handler
from cosmosmcp.services.tools.context import ToolContext

SECONDS_PER_DAY = 24 * 60 * 60


@tool_handler("get secret")
async def handle_get_secret(ctx: ToolContext, arguments: dict) -> ToolResult:
    value = await ctx.vault.get_secret_value(arguments["secretName"])
    return ToolResult.ok("Secret retrieved successfully", secret=value)


def days_until(expires_on: datetime, now: datetime) -> int:
    """Whole days from ``now`` until ``expires_on``, rounded up."""
    return math.ceil((expires_on - now).total_seconds() / SECONDS_PER_DAY)


@tool_handler("check certificate expiry")
async def handle_check_certificate_expiry(ctx: ToolContext, arguments: dict) -> ToolResult:
    expires_on = await ctx.vault.get_certificate_expiry(arguments["certificateName"])
    if expires_on is None:
        raise ValueError("Expiry date is undefined")
    return ToolResult.ok(
        "Certificate expiry checked successfully",
        daysToExpiry=days_until(expires_on, ctx.now()),
    )

"""CLI handlers for inspecting the tool catalog."""

from __future__ import annotations

import json

import click

from cosmosmcp.services.tools.catalog import get_tool_catalog


@click.group("tools")
def tools_group():
    """Inspect the tools advertised to MCP clients."""
    pass


@tools_group.command("list")
@click.option("--json", "as_json", is_flag=True, help="Print the MCP input schemas as JSON")
def tools_list(as_json: bool):
    """List the available tools."""
    catalog = get_tool_catalog()
    if as_json:
        payload = [
            {"name": d.name, "description": d.description, "inputSchema": d.input_schema()}
            for d in catalog
        ]
        click.echo(json.dumps(payload, indent=2))
        return

    for d in catalog:
        click.echo(f"{d.name}: {d.description}")
        for p in d.parameters:
            marker = "*" if p.required else " "
            click.echo(f"  {marker} {p.name} ({p.type or 'any'}): {p.description}")

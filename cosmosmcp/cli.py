"""Click CLI definitions - main entry point."""

from __future__ import annotations

import logging
import sys

import click

from cosmosmcp.commands.config_cmd import config_group
from cosmosmcp.commands.serve_cmd import serve_command
from cosmosmcp.commands.tools_cmd import tools_group


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, debug: bool) -> None:
    """cosmosmcp - MCP server for Azure Cosmos DB and Key Vault."""
    level = logging.DEBUG if debug else logging.WARNING
    # stdout carries the MCP protocol; logs must stay on stderr
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug


cli.add_command(serve_command, "serve")
cli.add_command(tools_group, "tools")
cli.add_command(config_group, "config")


if __name__ == "__main__":
    cli()

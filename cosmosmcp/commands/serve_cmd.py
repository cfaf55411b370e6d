"""CLI handler for running the stdio MCP server."""

from __future__ import annotations

import asyncio

import click


def _run(coro):
    return asyncio.run(coro)


@click.command("serve")
@click.option(
    "--config", "config_path", type=click.Path(dir_okay=False),
    default=None, help="Path to config.toml",
)
def serve_command(config_path: str | None):
    """Run the MCP server on stdin/stdout."""

    async def _serve():
        from pathlib import Path

        from cosmosmcp.context import AppContext
        from cosmosmcp.server import create_server, run_stdio

        ctx = AppContext(config_path=Path(config_path) if config_path else None)
        try:
            try:
                await ctx.initialize()
            except Exception as e:
                click.echo(f"Fatal error running server: {e}", err=True)
                raise SystemExit(1) from e

            app = create_server(
                ctx.dispatcher, ctx.config.server.name, ctx.config.server.version
            )
            click.echo("Azure Cosmos DB Server running on stdio", err=True)
            await run_stdio(app)
        finally:
            await ctx.close()

    _run(_serve())

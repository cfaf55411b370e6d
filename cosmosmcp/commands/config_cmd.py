"""CLI handlers for config commands."""

from __future__ import annotations

import click

from cosmosmcp.config import DEFAULT_CONFIG_PATH, init_config, load_config


@click.group("config")
def config_group():
    """Manage configuration."""
    pass


@config_group.command("init")
def config_init():
    """Create default configuration file."""
    path = init_config()
    click.echo(f"Configuration created at: {path}")


@config_group.command("show")
def config_show():
    """Show current configuration."""
    config = load_config()
    click.echo(f"Config file: {config.config_path}")
    click.echo(f"  Cosmos DB: {config.cosmos.endpoint or '(not set)'}")
    click.echo(f"  Database: {config.cosmos.database}")
    click.echo(f"  Default container: {config.cosmos.container}")
    auth = "account key" if config.cosmos.key else "DefaultAzureCredential"
    click.echo(f"  Cosmos auth: {auth}")
    click.echo(f"  Key Vault: {config.keyvault.uri or '(not set)'}")
    click.echo(f"  Server: {config.server.name} {config.server.version}")

    missing = config.missing_settings()
    if missing:
        click.echo("\n  Missing:")
        for name in missing:
            click.echo(f"    {name}")


@config_group.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str):
    """Set a configuration value.

    Modifies the TOML config file. Key uses dot notation, e.g.:
    cosmos.database, keyvault.uri, server.verify_on_start
    """
    import tomli_w

    path = DEFAULT_CONFIG_PATH
    if not path.exists():
        click.echo("No config file found. Run 'cosmosmcp config init' first.", err=True)
        return

    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    with open(path, "rb") as f:
        data = tomllib.load(f)

    parts = key.split(".")
    target = data
    for part in parts[:-1]:
        target = target.setdefault(part, {})

    final_key = parts[-1]
    if value.lower() in ("true", "false"):
        target[final_key] = value.lower() == "true"
    else:
        target[final_key] = value

    with open(path, "wb") as f:
        tomli_w.dump(data, f)

    click.echo(f"Set {key} = {value}")

"""Configuration loading: TOML file + .env + environment variable overlay."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]


DEFAULT_CONFIG_DIR = Path.home() / ".config" / "cosmosmcp"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"


DEFAULT_CONFIG_TOML = """\
[cosmos]
# endpoint and key may also come from COSMOSDB_URI / COSMOSDB_KEY.
# Leave key empty to authenticate with DefaultAzureCredential.
endpoint = ""
key = ""
database = "todos"
container = "tasks"

[keyvault]
# Also read from KEYVAULT_URI
uri = ""

[server]
name = "cosmosdb-mcp-server"
version = "0.1.0"
verify_on_start = true
"""


@dataclass
class CosmosConfig:
    endpoint: str = ""
    key: str = ""
    database: str = "todos"
    container: str = "tasks"


@dataclass
class KeyVaultConfig:
    uri: str = ""


@dataclass
class ServerConfig:
    name: str = "cosmosdb-mcp-server"
    version: str = "0.1.0"
    verify_on_start: bool = True


@dataclass
class AppConfig:
    cosmos: CosmosConfig = field(default_factory=CosmosConfig)
    keyvault: KeyVaultConfig = field(default_factory=KeyVaultConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    config_path: Path = DEFAULT_CONFIG_PATH

    def missing_settings(self) -> list[str]:
        """Names of settings that must be set before the server can start."""
        missing = []
        if not self.cosmos.endpoint:
            missing.append("cosmos.endpoint (COSMOSDB_URI)")
        if not self.keyvault.uri:
            missing.append("keyvault.uri (KEYVAULT_URI)")
        return missing


def _env_overlay(config: AppConfig) -> None:
    """Override config values with environment variables where applicable."""
    if uri := os.environ.get("COSMOSDB_URI"):
        config.cosmos.endpoint = uri
    if key := os.environ.get("COSMOSDB_KEY"):
        config.cosmos.key = key
    if db := os.environ.get("COSMOSDB_DATABASE"):
        config.cosmos.database = db
    if container := os.environ.get("COSMOSDB_CONTAINER"):
        config.cosmos.container = container
    if vault := os.environ.get("KEYVAULT_URI"):
        config.keyvault.uri = vault


def load_config(config_path: Path | None = None, dotenv: bool = True) -> AppConfig:
    """Load configuration from TOML file with .env and env var overlay."""
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    path = config_path or DEFAULT_CONFIG_PATH

    if path.exists():
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    else:
        raw = tomllib.loads(DEFAULT_CONFIG_TOML)

    cosmos_raw = raw.get("cosmos", {})
    keyvault_raw = raw.get("keyvault", {})
    server_raw = raw.get("server", {})

    config = AppConfig(
        cosmos=CosmosConfig(
            endpoint=cosmos_raw.get("endpoint", ""),
            key=cosmos_raw.get("key", ""),
            database=cosmos_raw.get("database", "todos"),
            container=cosmos_raw.get("container", "tasks"),
        ),
        keyvault=KeyVaultConfig(
            uri=keyvault_raw.get("uri", ""),
        ),
        server=ServerConfig(
            name=server_raw.get("name", "cosmosdb-mcp-server"),
            version=server_raw.get("version", "0.1.0"),
            verify_on_start=server_raw.get("verify_on_start", True),
        ),
        config_path=path,
    )

    _env_overlay(config)
    return config


def init_config(config_path: Path | None = None) -> Path:
    """Create default config file."""
    path = config_path or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DEFAULT_CONFIG_TOML)
    return path

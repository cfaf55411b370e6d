"""Async Azure Key Vault wrapper for secrets and certificates."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from azure.keyvault.certificates.aio import CertificateClient
from azure.keyvault.secrets.aio import SecretClient

logger = logging.getLogger(__name__)


class KeyVault:
    """Secret and certificate access against a single vault."""

    def __init__(
        self,
        vault_url: str,
        credential: Any,
        secret_client: SecretClient | None = None,
        certificate_client: CertificateClient | None = None,
    ) -> None:
        self._secrets = secret_client or SecretClient(vault_url=vault_url, credential=credential)
        self._certificates = certificate_client or CertificateClient(
            vault_url=vault_url, credential=credential
        )
        logger.info("Key Vault clients created: %s", vault_url)

    async def get_secret_value(self, name: str) -> str | None:
        """Fetch the current version of a secret."""
        secret = await self._secrets.get_secret(name)
        return secret.value

    async def get_certificate_expiry(self, name: str) -> datetime | None:
        """Fetch the expiry timestamp of the current certificate version."""
        certificate = await self._certificates.get_certificate(name)
        return certificate.properties.expires_on

    async def close(self) -> None:
        await self._secrets.close()
        await self._certificates.close()
        logger.info("Key Vault clients closed")

"""Azure credential selection."""

from __future__ import annotations

from typing import Any

from azure.identity import ClientSecretCredential, DefaultAzureCredential

from light_stemcell.utils.config import AzureConfig
from light_stemcell.utils.logging import get_logger

logger = get_logger(__name__)


def get_credential(config: AzureConfig) -> Any:
    """Build a credential for the Azure SDK clients.

    Uses a service principal when tenant, client ID and secret are all
    configured, and ``DefaultAzureCredential`` otherwise.

    Args:
        config: Azure settings

    Returns:
        An azure-identity credential
    """
    if config.tenant_id and config.client_id and config.client_secret:
        logger.debug("Using ClientSecretCredential (tenant=%s, client=%s)", config.tenant_id, config.client_id)
        return ClientSecretCredential(
            tenant_id=config.tenant_id,
            client_id=config.client_id,
            client_secret=config.client_secret,
        )
    logger.debug("Using DefaultAzureCredential")
    return DefaultAzureCredential()

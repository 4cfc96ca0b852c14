"""Azure Storage blob store and storage account resolver."""

from __future__ import annotations

from typing import Any

from azure.core.exceptions import HttpResponseError, ResourceNotFoundError
from azure.mgmt.storage import StorageManagementClient
from azure.storage.blob import BlobServiceClient

from light_stemcell.models.storage import StorageAccount
from light_stemcell.utils.config import AzureConfig
from light_stemcell.utils.errors import ConfigurationError, StorageError
from light_stemcell.utils.logging import get_logger

logger = get_logger(__name__)


class AzureBlobStore:
    """Blob store backed by Azure Blob Storage.

    One ``BlobServiceClient`` is created per storage account and reused.
    Azure only accepts string metadata values, so values are converted
    with ``str`` on write.

    Example:
        store = AzureBlobStore(credential)
        metadata = store.get_blob_metadata("mystorage", "stemcell", "bosh-light-stemcell-x.vhd")
    """

    def __init__(self, credential: Any, endpoint_suffix: str = "blob.core.windows.net") -> None:
        """Initialize the blob store.

        Args:
            credential: An azure-identity credential or account key
            endpoint_suffix: Blob endpoint suffix of the Azure environment
        """
        self._credential = credential
        self._endpoint_suffix = endpoint_suffix
        self._service_clients: dict[str, Any] = {}

    def _get_service_client(self, storage_account_name: str) -> Any:
        client = self._service_clients.get(storage_account_name)
        if client is None:
            account_url = f"https://{storage_account_name}.{self._endpoint_suffix}"
            client = BlobServiceClient(account_url=account_url, credential=self._credential)
            self._service_clients[storage_account_name] = client
        return client

    def _get_blob_client(self, storage_account_name: str, container_name: str, blob_name: str) -> Any:
        service = self._get_service_client(storage_account_name)
        return service.get_blob_client(container=container_name, blob=blob_name)

    def create_empty_page_blob(
        self,
        storage_account_name: str,
        container_name: str,
        blob_name: str,
        size_in_kb: int,
        metadata: dict[str, Any],
    ) -> None:
        blob = self._get_blob_client(storage_account_name, container_name, blob_name)
        logger.info(
            "Creating empty page blob %s/%s in %s (%d KiB)",
            container_name,
            blob_name,
            storage_account_name,
            size_in_kb,
        )
        try:
            blob.create_page_blob(
                size=size_in_kb * 1024,
                metadata={str(k): str(v) for k, v in metadata.items()},
            )
        except HttpResponseError as e:
            raise StorageError(f"Failed to create blob {container_name}/{blob_name}: {e}", blob=blob_name) from e

    def get_blob_metadata(
        self, storage_account_name: str, container_name: str, blob_name: str
    ) -> dict[str, str] | None:
        blob = self._get_blob_client(storage_account_name, container_name, blob_name)
        try:
            properties = blob.get_blob_properties()
        except ResourceNotFoundError:
            logger.debug("Blob %s/%s not found in %s", container_name, blob_name, storage_account_name)
            return None
        except HttpResponseError as e:
            raise StorageError(f"Failed to read blob {container_name}/{blob_name}: {e}", blob=blob_name) from e
        return dict(properties.metadata or {})

    def delete_blob(self, storage_account_name: str, container_name: str, blob_name: str) -> None:
        blob = self._get_blob_client(storage_account_name, container_name, blob_name)
        logger.info("Deleting blob %s/%s in %s", container_name, blob_name, storage_account_name)
        try:
            blob.delete_blob()
        except ResourceNotFoundError:
            logger.debug("Blob %s/%s already deleted", container_name, blob_name)
        except HttpResponseError as e:
            raise StorageError(f"Failed to delete blob {container_name}/{blob_name}: {e}", blob=blob_name) from e


class StaticStorageAccountResolver:
    """Resolves the default storage account from configuration.

    When the configuration names the account but not its location, the
    location is looked up once with the storage management client and
    remembered.
    """

    def __init__(
        self,
        storage_account_name: str,
        location: str | None = None,
        storage_client: Any = None,
        resource_group: str | None = None,
    ) -> None:
        self._storage_account_name = storage_account_name
        self._location = location
        self._storage_client = storage_client
        self._resource_group = resource_group

    @classmethod
    def from_config(cls, config: AzureConfig, credential: Any = None) -> "StaticStorageAccountResolver":
        """Create a resolver from Azure settings.

        Raises:
            ConfigurationError: If no storage account is configured
        """
        if not config.storage_account_name:
            raise ConfigurationError(
                "A default storage account is required",
                config_key="azure.storage_account_name",
            )
        storage_client = None
        if not config.location and credential is not None and config.subscription_id:
            storage_client = StorageManagementClient(credential, config.subscription_id)
        return cls(
            config.storage_account_name,
            location=config.location,
            storage_client=storage_client,
            resource_group=config.resource_group,
        )

    def default_storage_account(self) -> StorageAccount:
        if self._location is None:
            self._location = self._lookup_location()
        return StorageAccount(name=self._storage_account_name, location=self._location)

    def _lookup_location(self) -> str:
        if self._storage_client is None or not self._resource_group:
            raise ConfigurationError(
                f"Cannot determine the location of storage account '{self._storage_account_name}'",
                config_key="azure.location",
            )
        try:
            account = self._storage_client.storage_accounts.get_properties(
                self._resource_group, self._storage_account_name
            )
        except HttpResponseError as e:
            raise StorageError(
                f"Failed to get properties of storage account '{self._storage_account_name}': {e}"
            ) from e
        logger.debug("Storage account %s is in %s", self._storage_account_name, account.location)
        return account.location

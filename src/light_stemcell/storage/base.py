"""Blob store and storage account protocols."""

from typing import Any, Protocol, runtime_checkable

from light_stemcell.models.storage import StorageAccount


@runtime_checkable
class BlobStore(Protocol):
    """Protocol for blob storage clients.

    The light stemcell manager only stores metadata, so the store needs
    to create empty page blobs, read their metadata and delete them.
    """

    def create_empty_page_blob(
        self,
        storage_account_name: str,
        container_name: str,
        blob_name: str,
        size_in_kb: int,
        metadata: dict[str, Any],
    ) -> None:
        """Create an empty page blob carrying metadata.

        Args:
            storage_account_name: Storage account name
            container_name: Blob container name
            blob_name: Blob name
            size_in_kb: Blob size in KiB
            metadata: Flat string-keyed metadata

        Raises:
            StorageError: If the blob cannot be created
        """
        ...

    def get_blob_metadata(
        self, storage_account_name: str, container_name: str, blob_name: str
    ) -> dict[str, str] | None:
        """Get the metadata of a blob.

        Returns:
            The metadata, or None if the blob does not exist

        Raises:
            StorageError: For errors other than a missing blob
        """
        ...

    def delete_blob(self, storage_account_name: str, container_name: str, blob_name: str) -> None:
        """Delete a blob.

        Raises:
            StorageError: If the blob cannot be deleted
        """
        ...


@runtime_checkable
class StorageAccountResolver(Protocol):
    """Protocol for looking up the default storage account."""

    def default_storage_account(self) -> StorageAccount:
        """Get the default storage account.

        Raises:
            ConfigurationError: If no default account can be determined
        """
        ...

"""Blob storage clients."""

from light_stemcell.storage.base import BlobStore, StorageAccountResolver
from light_stemcell.storage.azure import AzureBlobStore, StaticStorageAccountResolver

__all__ = [
    "BlobStore",
    "StorageAccountResolver",
    "AzureBlobStore",
    "StaticStorageAccountResolver",
]

"""Shared test fixtures for light-stemcell tests."""

import logging
from typing import Any
from unittest.mock import MagicMock

import pytest

from light_stemcell.core.manager import LightStemcellManager
from light_stemcell.utils import config as config_module
from light_stemcell.models.image import ImageVersion
from light_stemcell.models.storage import StorageAccount


class FakeBlobStore:
    """In-memory blob store that keeps metadata the way Azure does."""

    def __init__(self) -> None:
        self.blobs: dict[tuple[str, str, str], dict[str, str]] = {}
        self.sizes: dict[tuple[str, str, str], int] = {}
        self.deleted: list[tuple[str, str, str]] = []

    def create_empty_page_blob(
        self,
        storage_account_name: str,
        container_name: str,
        blob_name: str,
        size_in_kb: int,
        metadata: dict[str, Any],
    ) -> None:
        key = (storage_account_name, container_name, blob_name)
        self.blobs[key] = {str(k): str(v) for k, v in metadata.items()}
        self.sizes[key] = size_in_kb

    def get_blob_metadata(
        self, storage_account_name: str, container_name: str, blob_name: str
    ) -> dict[str, str] | None:
        metadata = self.blobs.get((storage_account_name, container_name, blob_name))
        return None if metadata is None else dict(metadata)

    def delete_blob(self, storage_account_name: str, container_name: str, blob_name: str) -> None:
        key = (storage_account_name, container_name, blob_name)
        self.blobs.pop(key, None)
        self.deleted.append(key)


class FakeStorageAccountResolver:
    """Resolver returning a fixed account."""

    def __init__(self, name: str = "defaultstorage", location: str = "eastus") -> None:
        self.account = StorageAccount(name=name, location=location)

    def default_storage_account(self) -> StorageAccount:
        return self.account


@pytest.fixture(autouse=True)
def isolate_global_state(monkeypatch):
    """Undo CLI side effects on the package logger and config."""
    logger = logging.getLogger("light_stemcell")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    monkeypatch.setattr(config_module, "_config", None)
    for var in config_module.ENV_OVERRIDES:
        monkeypatch.delenv(var, raising=False)
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def platform_image() -> dict[str, str]:
    """A platform image reference."""
    return {
        "publisher": "canonical",
        "offer": "ubuntu",
        "sku": "18.04",
        "version": "1.0.0",
    }


@pytest.fixture
def gallery_image() -> dict[str, str]:
    """A compute gallery image reference."""
    return {
        "gallery": "bosh_gallery",
        "definition": "ubuntu-jammy",
        "version": "1.2.3",
        "resource_group": "bosh-rg",
    }


@pytest.fixture
def stemcell_properties(platform_image: dict[str, str]) -> dict[str, Any]:
    """Stemcell properties as the director passes them."""
    return {
        "name": "bosh-azure-hyperv-ubuntu-bionic-go_agent",
        "version": "1.0.0",
        "os_type": "linux",
        "disk": "3072",
        "image": platform_image,
    }


@pytest.fixture
def blob_store() -> FakeBlobStore:
    """An empty in-memory blob store."""
    return FakeBlobStore()


@pytest.fixture
def resolver() -> FakeStorageAccountResolver:
    """A resolver for 'defaultstorage' in eastus."""
    return FakeStorageAccountResolver()


@pytest.fixture
def catalog() -> MagicMock:
    """An image catalog that knows version 1.0.0 in eastus."""
    catalog = MagicMock()
    catalog.list_platform_image_versions.return_value = [
        ImageVersion(name="1.0.0", id="X", location="eastus"),
    ]
    catalog.list_gallery_image_versions.return_value = [
        ImageVersion(name="1.2.3", id="gallery-version-id", location="eastus"),
    ]
    return catalog


@pytest.fixture
def manager(
    blob_store: FakeBlobStore,
    resolver: FakeStorageAccountResolver,
    catalog: MagicMock,
) -> LightStemcellManager:
    """A manager wired to the fakes."""
    return LightStemcellManager(blob_store, resolver, catalog)

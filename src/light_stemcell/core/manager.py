"""Light stemcell manager."""

from __future__ import annotations

import json
import logging
import uuid
from typing import Any

from light_stemcell.catalog.base import CatalogNotFoundError, ImageCatalog
from light_stemcell.core.image import parse_image_reference
from light_stemcell.core.stemcell_info import StemcellInfo
from light_stemcell.models.image import GalleryImage, ImageVersion, PlatformImage
from light_stemcell.storage.base import BlobStore, StorageAccountResolver
from light_stemcell.utils.config import (
    LIGHT_STEMCELL_PREFIX,
    STEMCELL_CONTAINER,
    LightStemcellConfig,
)
from light_stemcell.utils.errors import (
    ImageNotFoundError,
    InvalidImageError,
    StemcellNotFoundError,
)
from light_stemcell.utils.logging import get_logger_with_context

# Size of the placeholder blob that carries the metadata
METADATA_BLOB_SIZE_KB = 1


class LightStemcellManager:
    """Manages light stemcells.

    A light stemcell references a platform image or a compute gallery
    image instead of carrying a VHD. Only a small metadata blob is stored,
    in the default storage account, under ``<name>.vhd``.

    Example:
        manager = LightStemcellManager(blob_store, resolver, catalog)
        name = manager.create_stemcell({
            "name": "bosh-azure-hyperv-ubuntu-bionic-go_agent",
            "version": "1.0.0",
            "image": {
                "publisher": "canonical",
                "offer": "ubuntu",
                "sku": "18.04",
                "version": "1.0.0",
            },
        })
        info = manager.get_stemcell_info(name)
    """

    def __init__(
        self,
        blob_store: BlobStore,
        storage_account_resolver: StorageAccountResolver,
        image_catalog: ImageCatalog,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
        container: str = STEMCELL_CONTAINER,
        prefix: str = LIGHT_STEMCELL_PREFIX,
        strict_location: bool = False,
    ) -> None:
        """Initialize the manager.

        Args:
            blob_store: Client used to store metadata blobs
            storage_account_resolver: Supplies the default storage account
            image_catalog: Client used to list image versions
            logger: Logger for operation messages. Defaults to a logger whose
                records carry the default storage account and location
            container: Blob container for metadata blobs
            prefix: Prefix of generated stemcell names
            strict_location: Treat a version recorded in another location as not found.
                The catalog decides a version's location; ``AzureImageCatalog``
                reports a gallery version in every region it is replicated to
        """
        self._blob_store = blob_store
        self._image_catalog = image_catalog
        self._container = container
        self._prefix = prefix
        self._strict_location = strict_location

        default_storage_account = storage_account_resolver.default_storage_account()
        self._default_storage_account_name = default_storage_account.name
        self._default_location = default_storage_account.location

        self._logger = logger or get_logger_with_context(
            __name__,
            storage_account=self._default_storage_account_name,
            location=self._default_location,
        )

    @classmethod
    def from_config(
        cls,
        config: LightStemcellConfig,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> "LightStemcellManager":
        """Create a manager wired to the Azure clients.

        Args:
            config: Full configuration
            logger: Logger for operation messages

        Returns:
            Configured LightStemcellManager

        Raises:
            ConfigurationError: If required Azure settings are missing
        """
        from light_stemcell.catalog.azure import AzureImageCatalog
        from light_stemcell.storage.azure import AzureBlobStore, StaticStorageAccountResolver
        from light_stemcell.utils.credentials import get_credential

        credential = get_credential(config.azure)
        return cls(
            AzureBlobStore(credential, endpoint_suffix=config.azure.blob_endpoint_suffix),
            StaticStorageAccountResolver.from_config(config.azure, credential),
            AzureImageCatalog.from_config(config.azure, credential),
            logger=logger,
            container=config.stemcell.container,
            prefix=config.stemcell.prefix,
            strict_location=config.stemcell.strict_location,
        )

    @property
    def default_storage_account_name(self) -> str:
        return self._default_storage_account_name

    @property
    def default_location(self) -> str:
        return self._default_location

    def delete_stemcell(self, name: str) -> None:
        """Delete a stemcell. Missing stemcells are ignored.

        The stored image is not validated, so a stemcell with broken
        metadata can still be removed.

        Args:
            name: The name of the stemcell to delete
        """
        self._logger.info("delete_stemcell(%s)", name, extra={"stemcell": name})
        if self._read_metadata(name) is not None:
            self._blob_store.delete_blob(
                self._default_storage_account_name, self._container, self._blob_name(name)
            )

    def create_stemcell(self, stemcell_properties: dict[str, Any]) -> str:
        """Create a new light stemcell.

        The ``image`` property has one of two shapes:

        1. Platform image::

            {"publisher": ..., "offer": ..., "sku": ..., "version": ...}

        2. Compute gallery image::

            {"gallery": ..., "definition": ..., "version": ..., "resource_group": ...}

        The image is stored with its values as strings. Keys outside its
        variant are dropped.

        Args:
            stemcell_properties: The properties of the stemcell

        Returns:
            The name of the created stemcell

        Raises:
            InvalidImageError: If the image property is malformed
            ImageNotFoundError: If the image version is not found in the default location
        """
        self._logger.info("create_stemcell(%s)", stemcell_properties)
        image = parse_image_reference(stemcell_properties.get("image"))
        if self._find_image_version(self._default_location, image) is None:
            raise ImageNotFoundError(stemcell_properties.get("image"), self._default_location)

        stemcell_name = f"{self._prefix}-{uuid.uuid4()}"
        self._logger.info(
            "Uploading metadata for the light stemcell '%s' into the storage account '%s'",
            stemcell_name,
            self._default_storage_account_name,
            extra={"stemcell": stemcell_name},
        )
        metadata = dict(stemcell_properties)
        metadata["image"] = json.dumps(image.to_properties())
        self._blob_store.create_empty_page_blob(
            self._default_storage_account_name,
            self._container,
            self._blob_name(stemcell_name),
            METADATA_BLOB_SIZE_KB,
            metadata,
        )
        return stemcell_name

    def has_stemcell(self, location: str, name: str) -> bool:
        """Check if a stemcell exists and its image is available in a location.

        Args:
            location: The location to check the image version in
            name: The name of the stemcell

        Returns:
            True if the stemcell exists; False otherwise

        Raises:
            InvalidImageError: If the stored image property is malformed
        """
        self._logger.info("has_stemcell(%s, %s)", location, name, extra={"stemcell": name})
        metadata = self._get_metadata(name)
        if metadata is None:
            return False

        image = parse_image_reference(metadata["image"])
        return self._find_image_version(location, image) is not None

    def get_stemcell_info(self, name: str) -> StemcellInfo:
        """Get information about a stemcell.

        Args:
            name: The name of the stemcell

        Returns:
            StemcellInfo whose URI is the catalog ID of the image version

        Raises:
            StemcellNotFoundError: If the stemcell does not exist
            ImageNotFoundError: If the image version is not found in the default location
            InvalidImageError: If the stored image property is malformed
        """
        self._logger.info("get_stemcell_info(%s)", name, extra={"stemcell": name})
        metadata = self._get_metadata(name)
        if metadata is None:
            raise StemcellNotFoundError(name, self._default_storage_account_name)

        image = parse_image_reference(metadata["image"])
        version = self._find_image_version(self._default_location, image)
        if version is None:
            raise ImageNotFoundError(metadata.get("image"), self._default_location)
        return StemcellInfo(version.id, metadata)

    def _blob_name(self, name: str) -> str:
        return f"{name}.vhd"

    def _read_metadata(self, name: str) -> dict[str, Any] | None:
        return self._blob_store.get_blob_metadata(
            self._default_storage_account_name, self._container, self._blob_name(name)
        )

    def _get_metadata(self, name: str) -> dict[str, Any] | None:
        metadata = self._read_metadata(name)
        if metadata is None:
            return None

        metadata = dict(metadata)
        if "image" not in metadata:
            raise InvalidImageError(f"The light stemcell '{name}' has no image property", field="image")
        try:
            metadata["image"] = json.loads(metadata["image"])
        except (TypeError, ValueError) as e:
            raise InvalidImageError(
                f"The image property of the light stemcell '{name}' is not valid JSON: {e}",
                field="image",
            ) from e
        return metadata

    def _find_image_version(self, location: str, image: PlatformImage | GalleryImage) -> ImageVersion | None:
        versions = self._list_image_versions(location, image)

        version = next((v for v in versions if v.name == image.version), None)
        if version is None:
            self._logger.debug("The version '%s' of the image %s is not found", image.version, image)
            return None

        if version.location != location:
            self._logger.debug(
                "The version '%s' of the image %s is in the location '%s', not '%s'",
                image.version,
                image,
                version.location,
                location,
            )
            if self._strict_location:
                return None

        return version

    def _list_image_versions(self, location: str, image: PlatformImage | GalleryImage) -> list[ImageVersion]:
        try:
            if isinstance(image, PlatformImage):
                self._logger.debug(
                    "list_platform_image_versions(%s, %s, %s, %s)",
                    location,
                    image.publisher,
                    image.offer,
                    image.sku,
                )
                return self._image_catalog.list_platform_image_versions(
                    location, image.publisher, image.offer, image.sku
                )

            self._logger.debug(
                "list_gallery_image_versions(%s, %s, %s)", location, image.gallery, image.definition
            )
            return self._image_catalog.list_gallery_image_versions(location, image.gallery, image.definition)
        except CatalogNotFoundError:
            return []

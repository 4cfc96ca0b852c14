"""Base image catalog protocol and errors."""

from typing import Protocol, runtime_checkable

from light_stemcell.models.image import ImageVersion
from light_stemcell.utils.errors import CloudError


class CatalogError(CloudError):
    """Base exception for image catalog operations."""

    def __init__(self, message: str, code: str = "CATALOG_ERROR") -> None:
        super().__init__(message, code=code)


class CatalogNotFoundError(CatalogError):
    """Image, offer or gallery not found."""

    def __init__(self, reference: str) -> None:
        super().__init__(f"Image not found in catalog: {reference}", code="CATALOG_NOT_FOUND")
        self.reference = reference


@runtime_checkable
class ImageCatalog(Protocol):
    """Protocol for cloud image catalog clients.

    Catalog clients list the versions available for an image; callers
    match the version they need on their side.

    Example:
        class MyCatalog:
            def list_platform_image_versions(self, location, publisher, offer, sku):
                return [ImageVersion(name="1.0.0", id="...", location=location)]

            def list_gallery_image_versions(self, location, gallery, definition):
                return []
    """

    def list_platform_image_versions(
        self, location: str, publisher: str, offer: str, sku: str
    ) -> list[ImageVersion]:
        """List the versions of a platform image in a location.

        Args:
            location: Azure location, e.g. "eastus"
            publisher: Image publisher
            offer: Image offer
            sku: Image SKU

        Returns:
            Version records, possibly empty

        Raises:
            CatalogError: For errors other than a missing image
        """
        ...

    def list_gallery_image_versions(
        self, location: str, gallery: str, definition: str
    ) -> list[ImageVersion]:
        """List the versions of a compute gallery image.

        Args:
            location: Azure location the caller is interested in
            gallery: Compute gallery name
            definition: Gallery image definition name

        Returns:
            Version records, possibly empty

        Raises:
            CatalogError: For errors other than a missing image
        """
        ...

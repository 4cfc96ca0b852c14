"""Azure Compute image catalog client."""

from __future__ import annotations

from typing import Any

from azure.core.exceptions import HttpResponseError, ResourceNotFoundError
from azure.mgmt.compute import ComputeManagementClient

from light_stemcell.catalog.base import CatalogError, CatalogNotFoundError
from light_stemcell.models.image import ImageVersion
from light_stemcell.utils.config import AzureConfig
from light_stemcell.utils.errors import ConfigurationError
from light_stemcell.utils.logging import get_logger

logger = get_logger(__name__)


def _normalize_region(name: str) -> str:
    # Target regions come back as display names ("East US")
    return name.replace(" ", "").lower()


def _gallery_version_location(resource: Any, location: str) -> str:
    """Report a gallery version in the queried location when replicated there."""
    profile = getattr(resource, "publishing_profile", None)
    regions = getattr(profile, "target_regions", None) or []
    wanted = _normalize_region(location)
    if any(_normalize_region(region.name) == wanted for region in regions):
        return location
    return getattr(resource, "location", None) or location


class AzureImageCatalog:
    """Image catalog backed by the Azure Compute management API.

    Platform images are listed with ``virtual_machine_images.list``.
    Gallery images are listed with
    ``gallery_image_versions.list_by_gallery_image`` in the resource group
    the catalog was configured with. A gallery version is reported in the
    queried location when its publishing profile replicates it there, and
    in its own location otherwise.

    Example:
        catalog = AzureImageCatalog(compute_client, resource_group="bosh-rg")
        versions = catalog.list_platform_image_versions(
            "eastus", "canonical", "ubuntu", "18.04"
        )
    """

    def __init__(self, compute_client: Any, resource_group: str | None = None) -> None:
        """Initialize the catalog.

        Args:
            compute_client: An ``azure.mgmt.compute.ComputeManagementClient``
            resource_group: Resource group holding compute galleries
        """
        self._compute_client = compute_client
        self._resource_group = resource_group

    @classmethod
    def from_config(cls, config: AzureConfig, credential: Any) -> "AzureImageCatalog":
        """Create a catalog from Azure settings.

        Raises:
            ConfigurationError: If no subscription is configured
        """
        if not config.subscription_id:
            raise ConfigurationError(
                "An Azure subscription ID is required to query the image catalog",
                config_key="azure.subscription_id",
            )
        client = ComputeManagementClient(credential, config.subscription_id)
        return cls(client, resource_group=config.resource_group)

    def list_platform_image_versions(
        self, location: str, publisher: str, offer: str, sku: str
    ) -> list[ImageVersion]:
        reference = f"{publisher}:{offer}:{sku}"
        try:
            resources = self._compute_client.virtual_machine_images.list(
                location, publisher, offer, sku
            )
            return [self._to_version(r, getattr(r, "location", None) or location) for r in resources]
        except ResourceNotFoundError as e:
            logger.debug("Platform image %s not found in %s", reference, location)
            raise CatalogNotFoundError(reference) from e
        except HttpResponseError as e:
            raise CatalogError(f"Failed to list versions of {reference} in {location}: {e}") from e

    def list_gallery_image_versions(
        self, location: str, gallery: str, definition: str
    ) -> list[ImageVersion]:
        reference = f"{gallery}/{definition}"
        if not self._resource_group:
            raise ConfigurationError(
                "A resource group is required to list compute gallery images",
                config_key="azure.resource_group",
            )
        try:
            resources = self._compute_client.gallery_image_versions.list_by_gallery_image(
                self._resource_group, gallery, definition
            )
            return [self._to_version(r, _gallery_version_location(r, location)) for r in resources]
        except ResourceNotFoundError as e:
            logger.debug("Gallery image %s not found in %s", reference, self._resource_group)
            raise CatalogNotFoundError(reference) from e
        except HttpResponseError as e:
            raise CatalogError(f"Failed to list versions of {reference}: {e}") from e

    @staticmethod
    def _to_version(resource: Any, location: str) -> ImageVersion:
        return ImageVersion(
            name=resource.name,
            id=resource.id,
            location=location,
        )

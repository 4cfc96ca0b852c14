"""Cloud image catalog clients."""

from light_stemcell.catalog.base import (
    CatalogError,
    CatalogNotFoundError,
    ImageCatalog,
)
from light_stemcell.catalog.azure import AzureImageCatalog

__all__ = [
    "CatalogError",
    "CatalogNotFoundError",
    "ImageCatalog",
    "AzureImageCatalog",
]

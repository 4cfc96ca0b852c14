"""light-stemcell: light stemcell management for the BOSH Azure CPI.

A light stemcell references an image that already exists in Azure instead
of carrying a VHD:

- **Platform images**: marketplace images addressed by publisher, offer,
  sku and version
- **Compute gallery images**: images addressed by gallery, definition and
  version

Only a small metadata blob is stored in the default storage account.

Usage:
    from light_stemcell import LightStemcellManager, load_config

    manager = LightStemcellManager.from_config(load_config())
    name = manager.create_stemcell({
        "image": {"publisher": "canonical", "offer": "ubuntu", "sku": "18.04", "version": "1.0.0"},
    })
    manager.has_stemcell("eastus", name)
    info = manager.get_stemcell_info(name)
    manager.delete_stemcell(name)

CLI:
    light-stemcell create --image '{"publisher": "canonical", ...}'
    light-stemcell exists <name> --location eastus
    light-stemcell info <name>
    light-stemcell delete <name>
"""

__version__ = "0.1.0"

# Core classes
from light_stemcell.core.manager import LightStemcellManager
from light_stemcell.core.stemcell_info import StemcellInfo
from light_stemcell.core.image import parse_image_reference

# Models
from light_stemcell.models.image import GalleryImage, ImageVersion, PlatformImage
from light_stemcell.models.storage import StorageAccount

# Collaborators
from light_stemcell.catalog.base import ImageCatalog
from light_stemcell.storage.base import BlobStore, StorageAccountResolver

# Errors and config
from light_stemcell.utils.errors import (
    CloudError,
    ImageNotFoundError,
    InvalidImageError,
    StemcellNotFoundError,
)
from light_stemcell.utils.config import LightStemcellConfig, load_config

__all__ = [
    # Version
    "__version__",
    # Core
    "LightStemcellManager",
    "StemcellInfo",
    "parse_image_reference",
    # Models
    "GalleryImage",
    "ImageVersion",
    "PlatformImage",
    "StorageAccount",
    # Collaborators
    "ImageCatalog",
    "BlobStore",
    "StorageAccountResolver",
    # Errors
    "CloudError",
    "ImageNotFoundError",
    "InvalidImageError",
    "StemcellNotFoundError",
    # Config
    "LightStemcellConfig",
    "load_config",
]

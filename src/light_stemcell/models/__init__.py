"""Data models for light-stemcell.

All models are Pydantic BaseModel with frozen=True for immutability.
"""

from light_stemcell.models.common import ErrorDetail
from light_stemcell.models.image import (
    GalleryImage,
    ImageReference,
    ImageVersion,
    PlatformImage,
)
from light_stemcell.models.storage import StorageAccount

__all__ = [
    # Image
    "GalleryImage",
    "ImageReference",
    "ImageVersion",
    "PlatformImage",
    # Storage
    "StorageAccount",
    # Common
    "ErrorDetail",
]

"""Core light stemcell functionality."""

from light_stemcell.core.image import (
    is_compute_gallery_image,
    is_platform_image,
    parse_image_reference,
)
from light_stemcell.core.stemcell_info import StemcellInfo
from light_stemcell.core.manager import LightStemcellManager

__all__ = [
    "LightStemcellManager",
    "StemcellInfo",
    "is_compute_gallery_image",
    "is_platform_image",
    "parse_image_reference",
]

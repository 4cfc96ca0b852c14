"""Parsing of stemcell image references."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter

from light_stemcell.models.image import GalleryImage, ImageReference, PlatformImage
from light_stemcell.utils.errors import InvalidImageError

PLATFORM_IMAGE_KEYS = ("publisher", "offer", "sku")
GALLERY_IMAGE_KEYS = ("gallery", "definition")

_image_reference = TypeAdapter(ImageReference)


def _has_keys(data: Mapping[str, Any], keys: tuple[str, ...]) -> bool:
    return all(data.get(key) not in (None, "") for key in keys)


def is_platform_image(data: Any) -> bool:
    """Check whether an image mapping carries platform image coordinates."""
    return isinstance(data, Mapping) and _has_keys(data, PLATFORM_IMAGE_KEYS)


def is_compute_gallery_image(data: Any) -> bool:
    """Check whether an image mapping carries compute gallery coordinates."""
    return isinstance(data, Mapping) and _has_keys(data, GALLERY_IMAGE_KEYS)


def parse_image_reference(data: Any) -> PlatformImage | GalleryImage:
    """Parse the image property of a stemcell into one of its two variants.

    The image must name a version and carry the coordinates of exactly
    one variant. Scalar values are converted to strings, so the result
    renders back through ``to_properties()`` as a JSON-safe mapping.

    Args:
        data: The stemcell's ``image`` property

    Returns:
        PlatformImage or GalleryImage

    Raises:
        InvalidImageError: If the mapping is missing the version, matches
            neither variant, or matches both
    """
    if not isinstance(data, Mapping):
        raise InvalidImageError(
            f"The image property of the stemcell is invalid. Expected a mapping, got {type(data).__name__}",
            field="image",
        )

    if data.get("version") in (None, ""):
        raise InvalidImageError(
            "The image property of the stemcell is invalid. It should contain a 'version' key",
            field="version",
        )

    platform = is_platform_image(data)
    gallery = is_compute_gallery_image(data)

    if platform and gallery:
        raise InvalidImageError(
            "The image property of the stemcell is invalid. It should not contain both "
            "'publisher, offer, sku' and 'gallery, definition'",
            field="image",
        )

    if platform:
        fields = {key: data[key] for key in PLATFORM_IMAGE_KEYS}
        fields["kind"] = "platform"
    elif gallery:
        fields = {key: data[key] for key in GALLERY_IMAGE_KEYS}
        fields["kind"] = "gallery"
        if data.get("resource_group"):
            fields["resource_group"] = data["resource_group"]
    else:
        raise InvalidImageError(
            "The image property of the stemcell is invalid. It should contain either "
            "'publisher, offer, sku' or 'gallery, definition'",
            field="image",
        )

    # Callers may hand us numbers or dates, e.g. from YAML
    fields["version"] = data["version"]
    return _image_reference.validate_python(
        {key: value if key == "kind" else str(value) for key, value in fields.items()}
    )

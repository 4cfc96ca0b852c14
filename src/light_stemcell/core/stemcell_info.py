"""StemcellInfo class describing a resolved stemcell."""

from __future__ import annotations

from typing import Any

from light_stemcell.core.image import (
    is_compute_gallery_image,
    is_platform_image,
    parse_image_reference,
)
from light_stemcell.models.image import GalleryImage, PlatformImage

# Default root disk sizes in MiB when the stemcell does not declare one
LINUX_DEFAULT_IMAGE_SIZE = 3 * 1024
WINDOWS_DEFAULT_IMAGE_SIZE = 128 * 1024


class StemcellInfo:
    """Pairs a stemcell's image URI or ID with its stored metadata.

    For a light stemcell the URI is the catalog ID of the resolved image
    version; the metadata is whatever the director passed to
    create_stemcell, with ``image`` as a mapping.

    Example:
        info = manager.get_stemcell_info("bosh-light-stemcell-...")
        print(info.uri)
        print(info.image_reference.version)
    """

    def __init__(self, uri: str, metadata: dict[str, Any]) -> None:
        """Initialize with a URI and metadata.

        Args:
            uri: Image URI or catalog ID
            metadata: Stemcell metadata
        """
        self._uri = uri
        self._metadata = metadata

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def metadata(self) -> dict[str, Any]:
        return self._metadata

    @property
    def name(self) -> str | None:
        return self._metadata.get("name")

    @property
    def version(self) -> str | None:
        version = self._metadata.get("version")
        return None if version is None else str(version)

    @property
    def os_type(self) -> str:
        """Operating system type, lower-cased. Defaults to linux."""
        os_type = self._metadata.get("os_type")
        return str(os_type).lower() if os_type else "linux"

    @property
    def disk_size(self) -> int | None:
        """Declared root disk size in MiB, if any."""
        disk = self._metadata.get("disk")
        return None if disk is None else int(disk)

    @property
    def image(self) -> Any:
        return self._metadata.get("image")

    @property
    def image_size(self) -> int:
        """Root disk size in MiB, falling back to the OS default."""
        if self.disk_size is not None:
            return self.disk_size
        return WINDOWS_DEFAULT_IMAGE_SIZE if self.is_windows else LINUX_DEFAULT_IMAGE_SIZE

    @property
    def is_light_stemcell(self) -> bool:
        return self.image is not None

    @property
    def is_windows(self) -> bool:
        return self.os_type == "windows"

    @property
    def is_platform_image(self) -> bool:
        return is_platform_image(self.image)

    @property
    def is_compute_gallery_image(self) -> bool:
        return is_compute_gallery_image(self.image)

    @property
    def image_reference(self) -> PlatformImage | GalleryImage:
        """The parsed image reference.

        Raises:
            InvalidImageError: If the image property is malformed
        """
        return parse_image_reference(self.image)

    def __str__(self) -> str:
        return (
            f"StemcellInfo(uri={self.uri}, name={self.name}, version={self.version}, "
            f"os_type={self.os_type}, image={self.image})"
        )

    def __repr__(self) -> str:
        return f"StemcellInfo(uri='{self.uri}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StemcellInfo):
            return NotImplemented
        return self.uri == other.uri and self.metadata == other.metadata

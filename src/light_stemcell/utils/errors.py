"""Error types for the light stemcell CPI."""

from __future__ import annotations

from typing import Any, NoReturn

from light_stemcell.models.common import ErrorDetail


class CloudError(Exception):
    """Base exception for cloud operations.

    Every failure surfaced to the CPI dispatch layer is a CloudError, so
    callers can catch one type and report it to the director.
    """

    def __init__(self, message: str, code: str = "CLOUD_ERROR", details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_error_detail(self) -> ErrorDetail:
        """Convert to ErrorDetail model."""
        return ErrorDetail(code=self.code, message=self.message, details=self.details)


class InvalidImageError(CloudError):
    """The image property of a stemcell is malformed."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="INVALID_IMAGE", details=details)


class StemcellNotFoundError(CloudError):
    """Stemcell metadata was not found."""

    def __init__(self, name: str, storage_account: str):
        super().__init__(
            f"The light stemcell '{name}' does not exist in the storage account '{storage_account}'",
            code="STEMCELL_NOT_FOUND",
            details={"name": name, "storage_account": storage_account},
        )


class ImageNotFoundError(CloudError):
    """No catalog version matches the stemcell's image."""

    def __init__(self, image: Any, location: str):
        super().__init__(
            f"Cannot find the light stemcell ({image}) in the location '{location}'",
            code="IMAGE_NOT_FOUND",
            details={"location": location},
        )


class ConfigurationError(CloudError):
    """Configuration error."""

    def __init__(self, message: str, config_key: str | None = None):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details)


class StorageError(CloudError):
    """Blob storage operation failed."""

    def __init__(self, message: str, blob: str | None = None):
        details = {"blob": blob} if blob else {}
        super().__init__(message, code="STORAGE_ERROR", details=details)


def cloud_error(message: str) -> NoReturn:
    """Raise a generic CloudError.

    Args:
        message: Error message

    Raises:
        CloudError: Always
    """
    raise CloudError(message)

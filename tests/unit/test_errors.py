"""Unit tests for the errors module."""

import pytest

from light_stemcell.catalog.base import CatalogError, CatalogNotFoundError
from light_stemcell.utils.errors import (
    CloudError,
    ConfigurationError,
    ImageNotFoundError,
    InvalidImageError,
    StemcellNotFoundError,
    StorageError,
    cloud_error,
)


class TestCloudError:
    """Tests for base CloudError."""

    def test_basic_error(self):
        """Test basic error creation."""
        error = CloudError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "CLOUD_ERROR"
        assert error.details == {}

    def test_to_error_detail(self):
        """Test conversion to ErrorDetail model."""
        error = CloudError("Test error", code="TEST_ERROR", details={"key": "value"})
        detail = error.to_error_detail()

        assert detail.code == "TEST_ERROR"
        assert detail.message == "Test error"
        assert detail.details == {"key": "value"}
        assert str(detail) == "[TEST_ERROR] Test error"

    def test_cloud_error_helper(self):
        """Test the raise helper."""
        with pytest.raises(CloudError, match="boom"):
            cloud_error("boom")


class TestSubclasses:
    """Tests for specific CloudError subclasses."""

    def test_invalid_image(self):
        """Test InvalidImageError records the field."""
        error = InvalidImageError("bad image", field="version")
        assert isinstance(error, CloudError)
        assert error.code == "INVALID_IMAGE"
        assert error.details == {"field": "version"}

    def test_stemcell_not_found(self):
        """Test StemcellNotFoundError message."""
        error = StemcellNotFoundError("bosh-light-stemcell-abc", "mystorage")
        assert error.code == "STEMCELL_NOT_FOUND"
        assert str(error) == (
            "The light stemcell 'bosh-light-stemcell-abc' does not exist in the storage account 'mystorage'"
        )

    def test_image_not_found(self):
        """Test ImageNotFoundError message."""
        error = ImageNotFoundError({"publisher": "canonical"}, "eastus")
        assert error.code == "IMAGE_NOT_FOUND"
        assert "Cannot find the light stemcell" in str(error)
        assert "'eastus'" in str(error)

    def test_configuration_error(self):
        """Test ConfigurationError records the key."""
        error = ConfigurationError("missing", config_key="azure.location")
        assert error.code == "CONFIG_ERROR"
        assert error.details["config_key"] == "azure.location"

    def test_storage_error(self):
        """Test StorageError records the blob."""
        error = StorageError("failed", blob="x.vhd")
        assert error.code == "STORAGE_ERROR"
        assert error.details["blob"] == "x.vhd"

    def test_catalog_errors(self):
        """Test catalog errors are cloud errors."""
        error = CatalogNotFoundError("canonical:ubuntu:18.04")
        assert isinstance(error, CatalogError)
        assert isinstance(error, CloudError)
        assert error.code == "CATALOG_NOT_FOUND"
        assert error.reference == "canonical:ubuntu:18.04"
        assert CatalogError("x").code == "CATALOG_ERROR"

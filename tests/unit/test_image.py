"""Unit tests for image reference parsing."""

import datetime
import json

import pytest
from pydantic import TypeAdapter

from light_stemcell.core.image import (
    is_compute_gallery_image,
    is_platform_image,
    parse_image_reference,
)
from light_stemcell.models.image import GalleryImage, ImageReference, ImageVersion, PlatformImage
from light_stemcell.utils.errors import InvalidImageError


class TestParseImageReference:
    """Tests for parse_image_reference."""

    def test_platform_image(self, platform_image):
        """Test platform coordinates parse to a PlatformImage."""
        image = parse_image_reference(platform_image)
        assert isinstance(image, PlatformImage)
        assert image.kind == "platform"
        assert image.publisher == "canonical"
        assert image.offer == "ubuntu"
        assert image.sku == "18.04"
        assert image.version == "1.0.0"

    def test_gallery_image(self, gallery_image):
        """Test gallery coordinates parse to a GalleryImage."""
        image = parse_image_reference(gallery_image)
        assert isinstance(image, GalleryImage)
        assert image.kind == "gallery"
        assert image.gallery == "bosh_gallery"
        assert image.definition == "ubuntu-jammy"
        assert image.version == "1.2.3"
        assert image.resource_group == "bosh-rg"

    def test_gallery_image_without_resource_group(self):
        """Test the gallery resource group is optional."""
        image = parse_image_reference({"gallery": "g", "definition": "d", "version": "1"})
        assert isinstance(image, GalleryImage)
        assert image.resource_group is None

    def test_missing_version(self, platform_image):
        """Test a missing version is rejected."""
        del platform_image["version"]
        with pytest.raises(InvalidImageError) as exc_info:
            parse_image_reference(platform_image)
        assert "It should contain a 'version' key" in str(exc_info.value)
        assert exc_info.value.details["field"] == "version"

    def test_empty_version(self, gallery_image):
        """Test an empty version is rejected."""
        gallery_image["version"] = ""
        with pytest.raises(InvalidImageError):
            parse_image_reference(gallery_image)

    def test_version_checked_before_variant(self):
        """Test the version error wins over an unknown shape."""
        with pytest.raises(InvalidImageError) as exc_info:
            parse_image_reference({"foo": "bar"})
        assert "'version'" in str(exc_info.value)

    def test_neither_variant(self):
        """Test a version alone does not classify."""
        with pytest.raises(InvalidImageError) as exc_info:
            parse_image_reference({"version": "1.0.0", "publisher": "canonical"})
        assert "either 'publisher, offer, sku' or 'gallery, definition'" in str(exc_info.value)

    def test_both_variants(self, platform_image):
        """Test an image matching both variants is rejected."""
        platform_image.update({"gallery": "g", "definition": "d"})
        with pytest.raises(InvalidImageError) as exc_info:
            parse_image_reference(platform_image)
        assert "both" in str(exc_info.value)

    @pytest.mark.parametrize("value", [None, "canonical:ubuntu:18.04:1.0.0", ["a"], 42])
    def test_not_a_mapping(self, value):
        """Test non-mapping values are rejected."""
        with pytest.raises(InvalidImageError):
            parse_image_reference(value)

    def test_numeric_values_become_strings(self):
        """Test YAML numbers are coerced to strings."""
        image = parse_image_reference(
            {"publisher": "canonical", "offer": "ubuntu", "sku": 18.04, "version": 1}
        )
        assert image.sku == "18.04"
        assert image.version == "1"

    def test_to_properties(self, platform_image, gallery_image):
        """Test variants render back to their property mappings."""
        assert parse_image_reference(platform_image).to_properties() == platform_image
        assert parse_image_reference(gallery_image).to_properties() == gallery_image

    def test_date_version_renders_as_json(self):
        """Test a YAML date version renders back to a JSON-safe mapping."""
        image = parse_image_reference(
            {"gallery": "g", "definition": "d", "version": datetime.date(2024, 1, 1)}
        )
        assert image.version == "2024-01-01"
        assert json.loads(json.dumps(image.to_properties())) == {
            "gallery": "g",
            "definition": "d",
            "version": "2024-01-01",
        }

    def test_str(self, platform_image, gallery_image):
        """Test readable string forms."""
        assert str(parse_image_reference(platform_image)) == "canonical:ubuntu:18.04:1.0.0"
        assert str(parse_image_reference(gallery_image)) == "bosh_gallery/ubuntu-jammy/1.2.3"


class TestVariantChecks:
    """Tests for is_platform_image and is_compute_gallery_image."""

    def test_platform(self, platform_image):
        assert is_platform_image(platform_image)
        assert not is_compute_gallery_image(platform_image)

    def test_gallery(self, gallery_image):
        assert is_compute_gallery_image(gallery_image)
        assert not is_platform_image(gallery_image)

    def test_not_mapping(self):
        assert not is_platform_image(None)
        assert not is_compute_gallery_image("gallery")


class TestImageModels:
    """Tests for the image models."""

    def test_discriminated_union(self):
        """Test the tagged union validates by kind."""
        adapter = TypeAdapter(ImageReference)
        image = adapter.validate_python(
            {"kind": "gallery", "gallery": "g", "definition": "d", "version": "1"}
        )
        assert isinstance(image, GalleryImage)

    def test_models_are_frozen(self, platform_image):
        """Test image models are immutable."""
        image = parse_image_reference(platform_image)
        with pytest.raises(Exception):
            image.version = "2.0.0"

    def test_image_version(self):
        """Test ImageVersion fields."""
        version = ImageVersion(name="1.0.0", id="/subscriptions/x/images/1.0.0", location="eastus")
        assert version.name == "1.0.0"
        assert version.location == "eastus"

"""Image-related data models."""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class PlatformImage(BaseModel):
    """A marketplace image published by Azure or a third party."""

    model_config = {"frozen": True}

    kind: Literal["platform"] = "platform"
    publisher: str = Field(description="Image publisher")
    offer: str = Field(description="Image offer")
    sku: str = Field(description="Image SKU")
    version: str = Field(description="Image version")

    def to_properties(self) -> dict[str, Any]:
        """Render as the plain mapping used in stemcell properties."""
        return self.model_dump(exclude={"kind"})

    def __str__(self) -> str:
        return f"{self.publisher}:{self.offer}:{self.sku}:{self.version}"


class GalleryImage(BaseModel):
    """An image version stored in an Azure compute gallery."""

    model_config = {"frozen": True}

    kind: Literal["gallery"] = "gallery"
    gallery: str = Field(description="Compute gallery name")
    definition: str = Field(description="Gallery image definition name")
    version: str = Field(description="Gallery image version")
    resource_group: str | None = Field(default=None, description="Resource group of the gallery")

    def to_properties(self) -> dict[str, Any]:
        """Render as the plain mapping used in stemcell properties."""
        return self.model_dump(exclude={"kind"}, exclude_none=True)

    def __str__(self) -> str:
        return f"{self.gallery}/{self.definition}/{self.version}"


ImageReference = Annotated[Union[PlatformImage, GalleryImage], Field(discriminator="kind")]


class ImageVersion(BaseModel):
    """An image version record returned by the image catalog."""

    model_config = {"frozen": True}

    name: str = Field(description="Version name, e.g. '1.0.0'")
    id: str = Field(description="Cloud resource ID of the image version")
    location: str = Field(description="Location the version is available in")

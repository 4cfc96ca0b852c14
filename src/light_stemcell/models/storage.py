"""Storage-related data models."""

from pydantic import BaseModel, Field


class StorageAccount(BaseModel):
    """A storage account that holds stemcell metadata blobs."""

    model_config = {"frozen": True}

    name: str = Field(description="Storage account name")
    location: str = Field(description="Location of the storage account")

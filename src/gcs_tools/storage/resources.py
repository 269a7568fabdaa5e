"""JSON resource shapes returned by the storage API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ObjectResource(BaseModel):
    """Metadata for a single stored object.

    Only ``name`` is required; the API omits fields it was not asked for.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Object name within its bucket")
    bucket: Optional[str] = Field(None, description="Name of the owning bucket")
    size: Optional[int] = Field(None, description="Content length in bytes")
    content_type: Optional[str] = Field(None, alias="contentType")
    generation: Optional[str] = Field(None, description="Object generation")
    md5_hash: Optional[str] = Field(None, alias="md5Hash")
    updated: Optional[str] = Field(None, description="RFC 3339 modification time")


class ObjectName(BaseModel):
    """A listing item trimmed down to its name."""

    name: str


class ObjectFolderList(BaseModel):
    """One page of a delimited object listing."""

    model_config = ConfigDict(populate_by_name=True)

    items: Optional[list[ObjectName]] = None
    prefixes: Optional[list[str]] = None
    next_page_token: Optional[str] = Field(None, alias="nextPageToken")

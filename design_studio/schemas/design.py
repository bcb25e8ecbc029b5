"""Design schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from design_studio.models.enums import ItemType


class DesignCreate(BaseModel):
    """Create a new design.

    The mobile client posts camelCase keys; snake_case is accepted too.
    """

    model_config = ConfigDict(populate_by_name=True)

    item_type: ItemType = Field(..., alias="itemType")
    color: str = Field(..., min_length=1, max_length=64)
    style: str | None = Field(None, max_length=255)
    text_overlay: str | None = Field(None, alias="text", max_length=500)
    image_url: str | None = Field(None, alias="imageUrl", max_length=500)


class DesignResponse(BaseModel):
    """Design response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    item_type: ItemType
    color: str
    style: str | None
    text_overlay: str | None
    image_url: str | None
    created_at: datetime


class DesignEnvelope(BaseModel):
    """Single design wrapper returned on creation."""

    design: DesignResponse


class DesignListResponse(BaseModel):
    """All designs of the current user, newest first."""

    designs: list[DesignResponse]

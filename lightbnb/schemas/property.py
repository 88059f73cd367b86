"""
Pydantic schemas for property requests and responses.
Monetary amounts in these schemas are in cents unless the field name says otherwise.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class PropertyBase(BaseModel):
    """Base property schema with the fourteen listing fields."""

    owner_id: int = Field(..., description="ID of the owning user")

    title: str = Field(..., min_length=1, max_length=255, examples=["Speed lamp"])
    description: str = Field(..., description="Listing description")
    thumbnail_photo_url: str = Field(..., max_length=255)
    cover_photo_url: str = Field(..., max_length=255)

    cost_per_night: int = Field(
        ...,
        ge=0,
        description="Nightly cost in cents",
        examples=[10000]
    )

    street: str = Field(..., max_length=255)
    city: str = Field(..., max_length=255, examples=["Vancouver"])
    province: str = Field(..., max_length=255)
    post_code: str = Field(..., max_length=255)
    country: str = Field(..., max_length=255)

    parking_spaces: int = Field(0, ge=0)
    number_of_bathrooms: int = Field(0, ge=0)
    number_of_bedrooms: int = Field(0, ge=0)


class PropertyCreate(PropertyBase):
    """Schema for creating a new property."""


class PropertyResponse(PropertyBase):
    """Schema for a stored property."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    active: bool = True


class PropertyListing(PropertyResponse):
    """A property as returned by search, with its average review rating."""

    average_rating: Optional[float] = Field(
        None,
        description="Average review rating, null when the property has no reviews"
    )


class PropertyListResponse(BaseModel):
    """Schema for property search results."""

    properties: List[PropertyListing]

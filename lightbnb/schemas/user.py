"""
Pydantic schemas for user requests and responses.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    """Schema for registering a new user."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="User's display name",
        examples=["Devin Sanders"]
    )

    email: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["devin@example.com"]
    )

    password: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Password, stored as given"
    )


class UserResponse(BaseModel):
    """Schema for user responses. The password is never returned."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str

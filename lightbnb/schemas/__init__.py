"""
Pydantic schemas for request/response validation.
"""

# User schemas
from .user import (
    UserCreate,
    UserResponse,
)

# Property schemas
from .property import (
    PropertyBase,
    PropertyCreate,
    PropertyResponse,
    PropertyListing,
    PropertyListResponse,
)

# Reservation schemas
from .reservation import (
    ReservationResponse,
    ReservationListResponse,
)

__all__ = [
    # User
    "UserCreate",
    "UserResponse",

    # Property
    "PropertyBase",
    "PropertyCreate",
    "PropertyResponse",
    "PropertyListing",
    "PropertyListResponse",

    # Reservation
    "ReservationResponse",
    "ReservationListResponse",
]

"""
Pydantic schemas for reservation responses.
"""

from pydantic import BaseModel
from typing import List, Optional
from datetime import date
from lightbnb.schemas.property import PropertyResponse


class ReservationResponse(BaseModel):
    """A past reservation with the reserved property and its average rating."""

    id: int
    property_id: int
    guest_id: int
    start_date: date
    end_date: date
    property: PropertyResponse
    average_rating: Optional[float] = None


class ReservationListResponse(BaseModel):
    reservations: List[ReservationResponse]

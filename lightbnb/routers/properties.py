"""
Property API endpoints: filtered search and listing creation.
"""

from fastapi import APIRouter, Depends, status, Query
from typing import Optional

from lightbnb.config import settings
from lightbnb.repositories.property import PropertyRepository, PropertySearchFilters
from lightbnb.schemas.property import (
    PropertyCreate,
    PropertyResponse,
    PropertyListing,
    PropertyListResponse,
)
from lightbnb.utils.dependencies import get_property_repository


router = APIRouter(prefix="/properties", tags=["Properties"])


@router.get(
    "",
    response_model=PropertyListResponse,
    status_code=status.HTTP_200_OK,
    summary="Search properties",
    description="List properties cheapest first, optionally filtered by city, nightly price, rating and owner"
)
async def list_properties(
    city: Optional[str] = Query(None, description="Case-insensitive substring of the city"),
    minimum_price_per_night: Optional[float] = Query(None, ge=0, description="Lowest nightly price in dollars"),
    maximum_price_per_night: Optional[float] = Query(None, ge=0, description="Highest nightly price in dollars"),
    minimum_rating: Optional[float] = Query(None, ge=0, le=5, description="Lowest average review rating"),
    owner_id: Optional[int] = Query(None, description="Only properties owned by this user"),
    limit: int = Query(settings.default_result_limit, ge=1, le=settings.max_result_limit),
    property_repository: PropertyRepository = Depends(get_property_repository)
) -> PropertyListResponse:
    """
    Search property listings.

    Returns:
        {"properties": [...]} with each property's average rating
    """
    filters = PropertySearchFilters(
        city=city,
        minimum_price_per_night=minimum_price_per_night,
        maximum_price_per_night=maximum_price_per_night,
        minimum_rating=minimum_rating,
        owner_id=owner_id
    )

    properties = await property_repository.list_properties(filters, limit=limit)
    return PropertyListResponse(
        properties=[PropertyListing.model_validate(record) for record in properties]
    )


@router.post(
    "",
    response_model=PropertyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create property"
)
async def create_property(
    property_data: PropertyCreate,
    property_repository: PropertyRepository = Depends(get_property_repository)
) -> PropertyResponse:
    created = await property_repository.create_property(property_data.model_dump())
    return PropertyResponse.model_validate(created[0])

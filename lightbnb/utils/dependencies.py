"""
FastAPI dependencies that hand each request its repositories.
Every repository shares the request's session, checked out of the pool by get_db.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lightbnb.database import get_db
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository


async def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    """Get a user repository bound to the request session."""
    return UserRepository(db)


async def get_property_repository(db: AsyncSession = Depends(get_db)) -> PropertyRepository:
    """Get a property repository bound to the request session."""
    return PropertyRepository(db)


async def get_reservation_repository(db: AsyncSession = Depends(get_db)) -> ReservationRepository:
    """Get a reservation repository bound to the request session."""
    return ReservationRepository(db)

"""
Reservation repository: past stays, scoped either to a guest or to a property owner.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview
from lightbnb.config import settings
from typing import List, Dict, Any
from datetime import date
import logging

logger = logging.getLogger(__name__)


class ReservationRepository(BaseRepository[Reservation]):
    """
    Repository for reservations.

    Both listings return completed reservations only (end date before today),
    earliest start first, each joined with its property and that property's
    average rating.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Reservation, db)

    async def list_reservations_for_guest(
        self,
        guest_id: int,
        limit: int = settings.default_result_limit
    ) -> List[Dict[str, Any]]:
        """
        Get all past reservations made by a guest.

        Args:
            guest_id: The id of the guest user
            limit: Maximum number of reservations to return

        Returns:
            List of reservation records
        """
        return await self._list_past_reservations(Reservation.guest_id == guest_id, limit, f"guest {guest_id}")

    async def list_reservations_for_owner(
        self,
        owner_id: int,
        limit: int = settings.default_result_limit
    ) -> List[Dict[str, Any]]:
        """
        Get all past reservations made at properties owned by a user.

        Args:
            owner_id: The id of the owning user
            limit: Maximum number of reservations to return

        Returns:
            List of reservation records
        """
        return await self._list_past_reservations(Property.owner_id == owner_id, limit, f"owner {owner_id}")

    async def _list_past_reservations(self, scope, limit: int, description: str) -> List[Dict[str, Any]]:
        # "Today" is the application clock, not the store session's CURRENT_DATE
        try:
            average_rating = func.avg(PropertyReview.rating).label("average_rating")
            query = (
                select(Reservation, Property, average_rating)
                .join(Property, Property.id == Reservation.property_id)
                .outerjoin(PropertyReview, PropertyReview.property_id == Property.id)
                .where(scope, Reservation.end_date < date.today())
                .group_by(Reservation.id, Property.id)
                .order_by(Reservation.start_date.asc(), Reservation.id.asc())
                .limit(limit)
            )

            result = await self.db.execute(query)
            reservations = []
            for reservation, property_obj, rating in result.all():
                record = reservation.to_dict()
                record["property"] = property_obj.to_dict()
                record["average_rating"] = float(rating) if rating is not None else None
                reservations.append(record)

            logger.debug(f"Retrieved {len(reservations)} past reservations for {description}")
            return reservations
        except Exception as e:
            logger.error(f"Failed to list reservations for {description}: {e}")
            raise

"""
Property repository for listing search and creation.
Search composes optional filters into one aggregated query ordered by nightly cost.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_, func
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.property import Property, PROPERTY_FIELDS
from lightbnb.models.review import PropertyReview
from lightbnb.config import settings
from typing import Optional, List, Dict, Any, Union
from decimal import Decimal, ROUND_HALF_UP
import logging

logger = logging.getLogger(__name__)

Number = Union[int, float, Decimal, str]


def to_cents(amount: Number) -> int:
    """Convert a price in major currency units to the stored minor units."""
    cents = Decimal(str(amount)) * 100
    return int(cents.to_integral_value(rounding=ROUND_HALF_UP))


class PropertySearchFilters:
    """Data class for property search filters. Prices are in major units."""

    def __init__(
        self,
        city: Optional[str] = None,
        minimum_price_per_night: Optional[Number] = None,
        maximum_price_per_night: Optional[Number] = None,
        minimum_rating: Optional[Number] = None,
        owner_id: Optional[int] = None
    ):
        self.city = city
        self.minimum_price_per_night = minimum_price_per_night
        self.maximum_price_per_night = maximum_price_per_night
        self.minimum_rating = minimum_rating
        self.owner_id = owner_id

    @classmethod
    def from_options(cls, options: Optional[Dict[str, Any]]) -> "PropertySearchFilters":
        """Build filters from a raw options mapping, ignoring unknown and empty keys."""
        options = options or {}
        known = ("city", "minimum_price_per_night", "maximum_price_per_night", "minimum_rating", "owner_id")
        return cls(**{
            key: options[key]
            for key in known
            if options.get(key) not in (None, "")
        })

    def __repr__(self) -> str:
        active = {k: v for k, v in vars(self).items() if v is not None}
        return f"<PropertySearchFilters({active})>"


class PropertyRepository(BaseRepository[Property]):
    """
    Repository for property listings.
    Every listing row carries the average rating of its reviews.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Property, db)

    async def list_properties(
        self,
        filters: Optional[Union[PropertySearchFilters, Dict[str, Any]]] = None,
        limit: int = settings.default_result_limit
    ) -> List[Dict[str, Any]]:
        """
        Get properties matching the filters, cheapest first.

        Args:
            filters: PropertySearchFilters or a raw options mapping
            limit: Maximum number of rows to return

        Returns:
            List of property records, each with an "average_rating" key
            (None for unreviewed properties). Empty when nothing matches.
        """
        if not isinstance(filters, PropertySearchFilters):
            filters = PropertySearchFilters.from_options(filters)

        try:
            average_rating = func.avg(PropertyReview.rating)
            query = (
                select(Property, average_rating.label("average_rating"))
                .outerjoin(PropertyReview, PropertyReview.property_id == Property.id)
            )

            conditions = self._build_filter_conditions(filters)
            if conditions:
                query = query.where(and_(*conditions))

            query = query.group_by(Property.id)

            # Applied after aggregation
            if filters.minimum_rating is not None:
                query = query.having(average_rating >= float(filters.minimum_rating))

            query = query.order_by(Property.cost_per_night.asc(), Property.id.asc()).limit(limit)

            result = await self.db.execute(query)
            properties = [
                self._to_record(property_obj, rating)
                for property_obj, rating in result.all()
            ]

            logger.debug(f"Property search {filters!r} returned {len(properties)} results")
            return properties
        except Exception as e:
            logger.error(f"Failed to list properties: {e}")
            raise

    def _build_filter_conditions(self, filters: PropertySearchFilters) -> List:
        """
        Build SQLAlchemy filter conditions from search filters.
        Only filters that are set contribute a condition.

        Args:
            filters: PropertySearchFilters instance

        Returns:
            List of SQLAlchemy conditions
        """
        conditions = []

        # City filter (case-insensitive partial match)
        if filters.city is not None:
            conditions.append(Property.city.ilike(f"%{filters.city}%"))

        # Price range filters, stored in cents
        if filters.minimum_price_per_night is not None:
            conditions.append(Property.cost_per_night >= to_cents(filters.minimum_price_per_night))
        if filters.maximum_price_per_night is not None:
            conditions.append(Property.cost_per_night <= to_cents(filters.maximum_price_per_night))

        if filters.owner_id is not None:
            conditions.append(Property.owner_id == filters.owner_id)

        return conditions

    async def create_property(self, property_data: Dict[str, Any]) -> List[Property]:
        """
        Add a property.

        Args:
            property_data: Mapping with all fourteen listing fields;
                cost_per_night already in cents

        Returns:
            List holding the inserted property

        Raises:
            KeyError: If a listing field is missing
            Exception: If database operation fails
        """
        values = {field: property_data[field] for field in PROPERTY_FIELDS}

        created_property = await self.insert_returning(values)
        logger.info(f"Created property: {created_property.title} (ID: {created_property.id})")
        return [created_property]

    @staticmethod
    def _to_record(property_obj: Property, average_rating: Any) -> Dict[str, Any]:
        record = property_obj.to_dict()
        record["average_rating"] = float(average_rating) if average_rating is not None else None
        return record

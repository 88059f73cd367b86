"""
Base repository class with the lookups and inserts shared by every table.
Provides generic database operations that can be extended by specific repositories.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, insert
from lightbnb.database import Base
from typing import TypeVar, Generic, Optional, Dict, Any, Type
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository class providing common operations.
    Uses async SQLAlchemy for all database operations; failures are logged and re-raised.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize repository with model class and database session.

        Args:
            model: SQLAlchemy model class
            db: Async database session checked out of the pool
        """
        self.model = model
        self.db = db

    async def insert_returning(self, values: Dict[str, Any]) -> ModelType:
        """
        Insert one row and return it in the same round trip.

        Args:
            values: Column values for the new row

        Returns:
            The inserted row as a model instance, generated id included

        Raises:
            Exception: If database operation fails; the session is rolled back
        """
        try:
            stmt = insert(self.model).values(**values).returning(self.model)
            result = await self.db.scalars(stmt)
            db_obj = result.one()
            await self.db.commit()
            logger.debug(f"Created {self.model.__name__} with id: {db_obj.id}")
            return db_obj
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to create {self.model.__name__}: {e}")
            raise

    async def get_by_id(self, id: int) -> Optional[ModelType]:
        """
        Get a record by its primary key.

        Returns:
            Model instance if found, None otherwise
        """
        return await self.get_by_field("id", id)

    async def get_by_field(self, field: str, value: Any) -> Optional[ModelType]:
        """
        Get the first record whose field equals value.

        Args:
            field: Field name to search by
            value: Value to search for

        Returns:
            Model instance if found, None otherwise
        """
        if not hasattr(self.model, field):
            raise ValueError(f"Field '{field}' does not exist on {self.model.__name__}")

        try:
            query = select(self.model).where(getattr(self.model, field) == value).limit(1)
            result = await self.db.execute(query)
            obj = result.scalars().first()

            if obj:
                logger.debug(f"Retrieved {self.model.__name__} by {field}: {value}")
            else:
                logger.debug(f"{self.model.__name__} with {field}={value} not found")

            return obj
        except Exception as e:
            logger.error(f"Failed to get {self.model.__name__} by {field}={value}: {e}")
            raise

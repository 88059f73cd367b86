"""
PropertyReview model.
Reviews are only read in aggregate (average rating) by the data access layer.
"""

from sqlalchemy import Integer, SmallInteger, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base
from typing import Optional


class PropertyReview(Base):
    __tablename__ = "property_reviews"

    guest_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    reservation_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("reservations.id", ondelete="CASCADE"),
        nullable=False
    )

    rating: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)
    message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<PropertyReview(id={self.id}, property_id={self.property_id}, rating={self.rating})>"

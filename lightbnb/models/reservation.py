"""
Reservation model linking a guest to a property for a date range.
"""

from sqlalchemy import Date, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base
from datetime import date


class Reservation(Base):
    """A guest's stay at a property between start_date and end_date."""

    __tablename__ = "reservations"

    start_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    guest_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    def __repr__(self) -> str:
        return f"<Reservation(id={self.id}, property_id={self.property_id}, guest_id={self.guest_id})>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "property_id": self.property_id,
            "guest_id": self.guest_id,
            "start_date": self.start_date,
            "end_date": self.end_date,
        }

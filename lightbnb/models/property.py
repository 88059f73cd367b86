"""
Property model for rental listings.
Handles listing details, address and nightly cost in cents.
"""

from sqlalchemy import String, Text, Integer, Boolean, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base


# Columns supplied when a listing is created, in insert order
PROPERTY_FIELDS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)


class Property(Base):
    """
    Property model for short-term rental listings.
    cost_per_night is stored in minor currency units (cents).
    """

    __tablename__ = "properties"

    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="ID of the user who owns this property"
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    thumbnail_photo_url: Mapped[str] = mapped_column(String(255), nullable=False)
    cover_photo_url: Mapped[str] = mapped_column(String(255), nullable=False)

    cost_per_night: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Nightly cost in cents"
    )

    parking_spaces: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_bathrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_bedrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Address
    country: Mapped[str] = mapped_column(String(255), nullable=False)
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    province: Mapped[str] = mapped_column(String(255), nullable=False)
    post_code: Mapped[str] = mapped_column(String(255), nullable=False)

    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        """String representation of the property."""
        return f"<Property(id={self.id}, title={self.title[:30]}, cost_per_night={self.cost_per_night})>"

    def to_dict(self) -> dict:
        """Convert property to a plain record."""
        result = {"id": self.id}
        for field in PROPERTY_FIELDS:
            result[field] = getattr(self, field)
        result["active"] = self.active
        return result


# Listing search filters on city and orders by cost
city_cost_index = Index(
    "idx_properties_city_cost",
    Property.city,
    Property.cost_per_night,
)

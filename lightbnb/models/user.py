"""
User model for LightBnB accounts.
Users are both guests (through reservations) and owners (through properties).
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base


class User(Base):
    """
    A registered user.
    The password is stored as given; hashing, if any, happens before it reaches the store.
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name"
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="User email address - the lookup key, unique"
    )

    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Opaque password string"
    )

    def __repr__(self) -> str:
        """String representation of the user."""
        return f"<User(id={self.id}, email={self.email})>"

    def to_dict(self) -> dict:
        """
        Convert user to dictionary (excluding the password).

        Returns:
            Dictionary representation of user
        """
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
        }

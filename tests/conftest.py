"""
Test configuration and fixtures for LightBnB.
Provides an isolated database per test, repository fixtures and test data factories.
"""

import pytest
import os
import uuid
from datetime import date, timedelta
from typing import AsyncGenerator, Optional
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession

from lightbnb.main import app
from lightbnb.database import Database, get_db
from lightbnb.models.user import User
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository


# In-memory SQLite unless pointed at a Postgres test database
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Create an isolated database with a fresh schema."""
    db = Database(TEST_DATABASE_URL, application_name="lightbnb_test")
    await db.create_tables()
    yield db
    await db.drop_tables()
    await db.close()


@pytest.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with database.session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()
            await session.close()


@pytest.fixture
async def async_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client with database session override."""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


# Repository fixtures
@pytest.fixture
def user_repository(db_session: AsyncSession) -> UserRepository:
    return UserRepository(db_session)


@pytest.fixture
def property_repository(db_session: AsyncSession) -> PropertyRepository:
    return PropertyRepository(db_session)


@pytest.fixture
def reservation_repository(db_session: AsyncSession) -> ReservationRepository:
    return ReservationRepository(db_session)


# Test data factories
class UserFactory:
    """Factory for creating test users."""

    @staticmethod
    def create_user_data(
        name: str = "Test User",
        email: Optional[str] = None,
        password: str = "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u."
    ) -> dict:
        return {
            "name": name,
            "email": email or f"test{uuid.uuid4().hex[:8]}@example.com",
            "password": password,
        }

    @staticmethod
    async def create_user(user_repo: UserRepository, **kwargs) -> User:
        """Create a test user in the database."""
        return await user_repo.create_user(UserFactory.create_user_data(**kwargs))


class PropertyFactory:
    """Factory for creating test properties."""

    @staticmethod
    def create_property_data(
        owner_id: int,
        title: str = "Test Property",
        cost_per_night: int = 10000,
        city: str = "Test City",
        **overrides
    ) -> dict:
        """Create property data dictionary with all listing fields."""
        data = {
            "owner_id": owner_id,
            "title": title,
            "description": "A beautiful test property",
            "thumbnail_photo_url": "https://images.example.com/thumb.jpg",
            "cover_photo_url": "https://images.example.com/cover.jpg",
            "cost_per_night": cost_per_night,
            "street": "123 Test Street",
            "city": city,
            "province": "BC",
            "post_code": "V5K 0A1",
            "country": "Canada",
            "parking_spaces": 1,
            "number_of_bathrooms": 1,
            "number_of_bedrooms": 2,
        }
        data.update(overrides)
        return data

    @staticmethod
    async def create_property(property_repo: PropertyRepository, owner_id: int, **kwargs) -> Property:
        """Create a test property in the database."""
        created = await property_repo.create_property(
            PropertyFactory.create_property_data(owner_id, **kwargs)
        )
        return created[0]


class ReservationFactory:
    """Factory for reservations and reviews, written straight through the session."""

    @staticmethod
    async def create_reservation(
        db: AsyncSession,
        property_id: int,
        guest_id: int,
        start_days_ago: int = 30,
        nights: int = 3
    ) -> Reservation:
        start_date = date.today() - timedelta(days=start_days_ago)
        reservation = Reservation(
            property_id=property_id,
            guest_id=guest_id,
            start_date=start_date,
            end_date=start_date + timedelta(days=nights),
        )
        db.add(reservation)
        await db.commit()
        return reservation

    @staticmethod
    async def create_review(
        db: AsyncSession,
        property_id: int,
        guest_id: int,
        rating: int
    ) -> PropertyReview:
        """Create a review, backed by a past reservation of the same guest."""
        reservation = await ReservationFactory.create_reservation(
            db, property_id, guest_id, start_days_ago=400
        )
        review = PropertyReview(
            property_id=property_id,
            guest_id=guest_id,
            reservation_id=reservation.id,
            rating=rating,
            message="Test review",
        )
        db.add(review)
        await db.commit()
        return review


# Common test fixtures
@pytest.fixture
async def test_owner(user_repository: UserRepository) -> User:
    """Create a user who owns properties."""
    return await UserFactory.create_user(user_repository, name="Owner Person", email="owner@test.com")


@pytest.fixture
async def test_guest(user_repository: UserRepository) -> User:
    """Create a user who makes reservations."""
    return await UserFactory.create_user(user_repository, name="Guest Person", email="guest@test.com")


@pytest.fixture
async def test_listings(
    db_session: AsyncSession,
    property_repository: PropertyRepository,
    test_owner: User,
    test_guest: User
) -> dict:
    """
    Create a small catalogue owned by test_owner, reviewed by test_guest.
    Costs are in cents, ratings one per review.
    """
    catalogue = [
        ("Harbour Loft", "Vancouver", 10000, [5, 4]),
        ("Lakeside Cabin", "Vancouver", 25000, [3]),
        ("Downtown Studio", "Toronto", 7500, [2, 3]),
        ("Plateau Walkup", "Montreal", 15000, []),
        ("North Shore Suite", "North Vancouver", 6000, [4]),
    ]

    listings = {}
    for title, city, cost, ratings in catalogue:
        property_obj = await PropertyFactory.create_property(
            property_repository,
            owner_id=test_owner.id,
            title=title,
            city=city,
            cost_per_night=cost
        )
        for rating in ratings:
            await ReservationFactory.create_review(db_session, property_obj.id, test_guest.id, rating)
        listings[title] = property_obj
    return listings


# Utility functions for tests
def assert_property_matches(record, data: dict):
    """Assert that a property record carries every listing field from data."""
    for field, value in data.items():
        actual = record[field] if isinstance(record, dict) else getattr(record, field)
        assert actual == value, f"{field}: {actual!r} != {value!r}"

"""
Tests for the error taxonomy, error response formatting and settings.
"""

import json
import pytest
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError, OperationalError

from lightbnb.config import Settings
from lightbnb.services.error_handler import ErrorHandlerService
from lightbnb.utils.exceptions import (
    ConflictError,
    DuplicateEmailError,
    NotFoundError,
    UserNotFoundError,
)


class TestExceptions:
    """Test custom exception classes."""

    def test_duplicate_email_is_conflict(self):
        exc = DuplicateEmailError("a@b.com")

        assert isinstance(exc, ConflictError)
        assert exc.status_code == 409
        assert exc.error_code == "CONFLICT"
        assert exc.email == "a@b.com"

    def test_user_not_found(self):
        exc = UserNotFoundError("7")

        assert isinstance(exc, NotFoundError)
        assert exc.status_code == 404
        assert exc.detail == "User not found with ID: 7"


class TestErrorHandlerService:
    """Test error handler service functionality."""

    def test_format_error_response(self):
        response = ErrorHandlerService.format_error_response(
            error_code="TEST_ERROR",
            message="Test error message",
            details=[{"field": "test", "message": "Test field error"}],
            request_id="test123"
        )

        assert response["error"]["code"] == "TEST_ERROR"
        assert response["error"]["message"] == "Test error message"
        assert response["error"]["request_id"] == "test123"
        assert response["error"]["details"][0]["field"] == "test"
        assert response["error"]["timestamp"].endswith("Z")

    def test_handle_api_exception(self):
        response = ErrorHandlerService.handle_api_exception(NotFoundError("Property", "12"))

        assert response.status_code == 404
        response_data = json.loads(response.body)
        assert response_data["error"]["code"] == "NOT_FOUND"
        assert response_data["error"]["message"] == "Property not found with ID: 12"

    def test_handle_integrity_error(self):
        exc = IntegrityError("INSERT INTO users", {}, Exception("UNIQUE constraint failed: users.email"))
        response = ErrorHandlerService.handle_database_error(exc)

        assert response.status_code == 409
        response_data = json.loads(response.body)
        assert response_data["error"]["code"] == "INTEGRITY_ERROR"
        assert response_data["error"]["message"] == "Constraint violation: Duplicate value for unique field"

    def test_handle_operational_error_hides_details(self):
        exc = OperationalError("SELECT 1", {}, Exception("connection refused on 10.0.0.5"))
        response = ErrorHandlerService.handle_database_error(exc)

        assert response.status_code == 500
        response_data = json.loads(response.body)
        assert response_data["error"]["code"] == "DATABASE_ERROR"
        assert "10.0.0.5" not in response_data["error"]["message"]

    def test_handle_unexpected_error(self):
        response = ErrorHandlerService.handle_unexpected_error(RuntimeError("boom"))

        assert response.status_code == 500
        assert json.loads(response.body)["error"]["code"] == "INTERNAL_SERVER_ERROR"


class TestSettings:
    """Test settings construction."""

    def test_database_url_built_from_components(self):
        settings = Settings(
            _env_file=None,
            database_url="",
            postgres_user="alice",
            postgres_password="pw",
            postgres_host="db.internal",
            postgres_port=6543,
            postgres_db="rentals"
        )

        assert settings.database_url == "postgresql+asyncpg://alice:pw@db.internal:6543/rentals"

    def test_plain_postgres_url_uses_async_driver(self):
        settings = Settings(_env_file=None, database_url="postgresql://u:p@h:5432/d")

        assert settings.database_url == "postgresql+asyncpg://u:p@h:5432/d"

    def test_invalid_environment(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, environment="moon")

    def test_environment_flags(self):
        settings = Settings(_env_file=None, environment="testing")

        assert settings.is_testing
        assert not settings.is_production
        assert settings.default_result_limit == 10

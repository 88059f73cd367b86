"""
Custom exception classes for LightBnB.
Provides structured error handling with appropriate HTTP status codes.
"""

from typing import Any, Dict, Optional
from fastapi import HTTPException, status


class APIException(HTTPException):
    """Base API exception class."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code


class NotFoundError(APIException):
    """Resource not found exception."""

    def __init__(self, resource: str, resource_id: Optional[str] = None):
        detail = f"{resource} not found"
        if resource_id:
            detail += f" with ID: {resource_id}"

        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code="NOT_FOUND"
        )


class ConflictError(APIException):
    """Resource conflict exception."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
            error_code="CONFLICT"
        )


class UserNotFoundError(NotFoundError):
    """User not found exception."""

    def __init__(self, user_id: Optional[str] = None):
        super().__init__("User", user_id)


class DuplicateResourceError(ConflictError):
    """Duplicate resource exception."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} with identifier '{identifier}' already exists")


class DuplicateEmailError(DuplicateResourceError):
    """Raised when a user is created with an email that is already registered."""

    def __init__(self, email: str):
        super().__init__("User", email)
        self.email = email

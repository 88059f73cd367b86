"""
Utility modules for LightBnB.
"""

from lightbnb.utils.exceptions import (
    APIException,
    NotFoundError,
    ConflictError,
    UserNotFoundError,
    DuplicateResourceError,
    DuplicateEmailError,
)

__all__ = [
    "APIException",
    "NotFoundError",
    "ConflictError",
    "UserNotFoundError",
    "DuplicateResourceError",
    "DuplicateEmailError",
]

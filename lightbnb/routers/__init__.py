"""
API route handlers for LightBnB.
"""

from .properties import router as properties_router
from .users import router as users_router

__all__ = ["properties_router", "users_router"]

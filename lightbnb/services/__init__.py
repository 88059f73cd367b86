"""
Service layer for LightBnB.
"""

from lightbnb.services.error_handler import ErrorHandlerService

__all__ = ["ErrorHandlerService"]

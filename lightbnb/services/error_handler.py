"""
Error handling service for consistent error response formatting and logging.
Turns exceptions raised below the web layer into JSON error envelopes.
"""

from typing import Dict, Any, Optional, List
from datetime import datetime, timezone
from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from pydantic import ValidationError as PydanticValidationError
from lightbnb.utils.exceptions import APIException
import logging
import uuid

logger = logging.getLogger(__name__)


class ErrorHandlerService:
    """
    Formats errors consistently across the application.
    Every response body has the shape {"error": {"code", "message", "timestamp", ...}}.
    """

    @staticmethod
    def format_error_response(
        error_code: str,
        message: str,
        details: Optional[List[Dict[str, Any]]] = None,
        request_id: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Format error response in a consistent structure.

        Args:
            error_code: Error code identifier
            message: Human-readable error message
            details: Optional list of detailed error information
            request_id: Optional request identifier for tracking

        Returns:
            Formatted error response dictionary
        """
        response = {
            "error": {
                "code": error_code,
                "message": message,
                "timestamp": ErrorHandlerService._get_current_timestamp(),
            }
        }

        if details:
            response["error"]["details"] = details

        if request_id:
            response["error"]["request_id"] = request_id

        return response

    @staticmethod
    def handle_api_exception(
        exception: APIException,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """Handle custom API exceptions with structured response."""
        request_id = ErrorHandlerService._generate_request_id()

        logger.warning(
            f"API Exception [{request_id}]: {exception.error_code} - {exception.detail}",
            extra={
                "error_code": exception.error_code,
                "status_code": exception.status_code,
                "request_id": request_id,
                "path": request.url.path if request else None
            }
        )

        error_response = ErrorHandlerService.format_error_response(
            error_code=exception.error_code or "API_ERROR",
            message=exception.detail,
            request_id=request_id
        )

        return JSONResponse(
            status_code=exception.status_code,
            content=error_response,
            headers=exception.headers
        )

    @staticmethod
    def handle_validation_error(
        exception: "RequestValidationError | PydanticValidationError",
        request: Optional[Request] = None
    ) -> JSONResponse:
        """
        Handle request and Pydantic validation errors with detailed field information.

        Args:
            exception: Validation error carrying an errors() list
            request: Optional FastAPI request object

        Returns:
            JSON response with validation error details
        """
        request_id = ErrorHandlerService._generate_request_id()

        validation_details = []
        for error in exception.errors():
            field_path = " -> ".join(str(loc) for loc in error["loc"])
            validation_details.append({
                "field": field_path,
                "message": error["msg"],
                "type": error["type"],
            })

        logger.warning(
            f"Validation Error [{request_id}]: {len(validation_details)} field errors",
            extra={
                "error_count": len(validation_details),
                "request_id": request_id,
                "path": request.url.path if request else None,
            }
        )

        error_response = ErrorHandlerService.format_error_response(
            error_code="VALIDATION_ERROR",
            message="Request validation failed",
            details=validation_details,
            request_id=request_id
        )

        return JSONResponse(
            status_code=422,
            content=error_response
        )

    @staticmethod
    def handle_database_error(
        exception: SQLAlchemyError,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """
        Handle database errors that the repositories let through.

        Args:
            exception: SQLAlchemy error
            request: Optional FastAPI request object

        Returns:
            JSON response with database error information
        """
        request_id = ErrorHandlerService._generate_request_id()

        if isinstance(exception, IntegrityError):
            error_code = "INTEGRITY_ERROR"
            message = "Data integrity constraint violation"
            status_code = 409

            constraint_info = ErrorHandlerService._extract_constraint_info(exception)
            if constraint_info:
                message = f"Constraint violation: {constraint_info}"
        else:
            error_code = "DATABASE_ERROR"
            message = "Database operation failed"
            status_code = 500

        logger.error(
            f"Database Error [{request_id}]: {error_code} - {str(exception)}",
            extra={
                "error_code": error_code,
                "request_id": request_id,
                "path": request.url.path if request else None,
                "exception_type": type(exception).__name__
            },
            exc_info=True
        )

        # Internal database details stay in the log
        error_response = ErrorHandlerService.format_error_response(
            error_code=error_code,
            message=message,
            request_id=request_id
        )

        return JSONResponse(
            status_code=status_code,
            content=error_response
        )

    @staticmethod
    def handle_http_exception(
        exception: HTTPException,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """Handle plain FastAPI/Starlette HTTP exceptions, e.g. unknown routes."""
        request_id = ErrorHandlerService._generate_request_id()

        logger.warning(
            f"HTTP Exception [{request_id}]: {exception.status_code} - {exception.detail}",
            extra={
                "status_code": exception.status_code,
                "request_id": request_id,
                "path": request.url.path if request else None
            }
        )

        error_response = ErrorHandlerService.format_error_response(
            error_code=f"HTTP_{exception.status_code}",
            message=str(exception.detail),
            request_id=request_id
        )

        return JSONResponse(
            status_code=exception.status_code,
            content=error_response,
            headers=exception.headers
        )

    @staticmethod
    def handle_unexpected_error(
        exception: Exception,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """Handle unexpected errors without exposing internals."""
        request_id = ErrorHandlerService._generate_request_id()

        logger.error(
            f"Unexpected Error [{request_id}]: {type(exception).__name__} - {str(exception)}",
            extra={
                "request_id": request_id,
                "path": request.url.path if request else None,
                "exception_type": type(exception).__name__,
            },
            exc_info=True
        )

        error_response = ErrorHandlerService.format_error_response(
            error_code="INTERNAL_SERVER_ERROR",
            message="An unexpected error occurred. Please try again later.",
            request_id=request_id
        )

        return JSONResponse(
            status_code=500,
            content=error_response
        )

    @staticmethod
    def _generate_request_id() -> str:
        """Generate a unique request ID for error tracking."""
        return str(uuid.uuid4())[:8]

    @staticmethod
    def _get_current_timestamp() -> str:
        """Get current timestamp in ISO format."""
        return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")

    @staticmethod
    def _extract_constraint_info(exception: IntegrityError) -> Optional[str]:
        """
        Extract constraint information from integrity error.

        Args:
            exception: SQLAlchemy integrity error

        Returns:
            Constraint information string or None
        """
        error_msg = str(exception.orig).lower()

        if "unique constraint" in error_msg:
            return "Duplicate value for unique field"
        elif "foreign key constraint" in error_msg:
            return "Referenced record does not exist"
        elif "not null constraint" in error_msg:
            return "Required field cannot be empty"
        elif "check constraint" in error_msg:
            return "Value does not meet validation requirements"

        return None

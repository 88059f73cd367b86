"""
FastAPI application entry point.
Main application setup and configuration.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from lightbnb.config import settings
from lightbnb.database import get_database, test_database_connection
from lightbnb.routers import properties_router, users_router
from lightbnb.utils.exceptions import APIException
from lightbnb.services.error_handler import ErrorHandlerService

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    db_connected = await test_database_connection()
    if not db_connected:
        logger.error("Failed to connect to database on startup")

    yield

    logger.info("Shutting down application")
    await get_database().close()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Users, property listings and reservations for a short-term rental site.",
    openapi_tags=[
        {
            "name": "Users",
            "description": "User registration, lookups and reservation history"
        },
        {
            "name": "Properties",
            "description": "Property search and listing creation"
        },
        {
            "name": "Health",
            "description": "Service and database status"
        }
    ],
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(users_router, prefix=settings.api_prefix)
app.include_router(properties_router, prefix=settings.api_prefix)


# Global exception handlers using ErrorHandlerService
@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    """Handle custom API exceptions with structured error responses."""
    return ErrorHandlerService.handle_api_exception(exc, request)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle FastAPI request validation errors with detailed field information."""
    return ErrorHandlerService.handle_validation_error(exc, request)


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """Handle database errors with appropriate error responses."""
    return ErrorHandlerService.handle_database_error(exc, request)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions raised by routing, e.g. unknown paths."""
    return ErrorHandlerService.handle_http_exception(exc, request)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with secure error responses."""
    return ErrorHandlerService.handle_unexpected_error(exc, request)


@app.get("/", tags=["Health"])
async def root():
    """Basic service information."""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "environment": settings.environment,
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Report whether the database is reachable."""
    db_connected = await test_database_connection()
    return {
        "status": "healthy" if db_connected else "unhealthy",
        "database": "connected" if db_connected else "disconnected",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "lightbnb.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )

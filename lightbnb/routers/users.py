"""
User API endpoints: registration, lookups and reservation history.
Caller identity is taken from the path; there is no session handling here.
"""

from fastapi import APIRouter, Depends, status, Query, Path
from pydantic import EmailStr

from lightbnb.config import settings
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.schemas.user import UserCreate, UserResponse
from lightbnb.schemas.reservation import ReservationResponse, ReservationListResponse
from lightbnb.utils.dependencies import get_user_repository, get_reservation_repository
from lightbnb.utils.exceptions import NotFoundError, UserNotFoundError


router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register user",
    description="Create a user. Responds 409 when the email is already registered."
)
async def create_user(
    user_data: UserCreate,
    user_repository: UserRepository = Depends(get_user_repository)
) -> UserResponse:
    user = await user_repository.create_user(user_data.model_dump())
    return UserResponse.model_validate(user)


@router.get(
    "/by-email",
    response_model=UserResponse,
    summary="Find user by email"
)
async def get_user_by_email(
    email: EmailStr = Query(..., description="Exact email address"),
    user_repository: UserRepository = Depends(get_user_repository)
) -> UserResponse:
    user = await user_repository.get_user_by_email(email)
    if user is None:
        raise NotFoundError("User", email)
    return UserResponse.model_validate(user)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user"
)
async def get_user(
    user_id: int = Path(..., description="User ID"),
    user_repository: UserRepository = Depends(get_user_repository)
) -> UserResponse:
    user = await user_repository.get_user_by_id(user_id)
    if user is None:
        raise UserNotFoundError(str(user_id))
    return UserResponse.model_validate(user)


@router.get(
    "/{user_id}/reservations",
    response_model=ReservationListResponse,
    summary="Past reservations made by a guest"
)
async def list_guest_reservations(
    user_id: int = Path(..., description="Guest user ID"),
    limit: int = Query(settings.default_result_limit, ge=1, le=settings.max_result_limit),
    reservation_repository: ReservationRepository = Depends(get_reservation_repository)
) -> ReservationListResponse:
    reservations = await reservation_repository.list_reservations_for_guest(user_id, limit=limit)
    return ReservationListResponse(
        reservations=[ReservationResponse.model_validate(record) for record in reservations]
    )


@router.get(
    "/{user_id}/property-reservations",
    response_model=ReservationListResponse,
    summary="Past reservations at properties the user owns"
)
async def list_owner_reservations(
    user_id: int = Path(..., description="Owner user ID"),
    limit: int = Query(settings.default_result_limit, ge=1, le=settings.max_result_limit),
    reservation_repository: ReservationRepository = Depends(get_reservation_repository)
) -> ReservationListResponse:
    reservations = await reservation_repository.list_reservations_for_owner(user_id, limit=limit)
    return ReservationListResponse(
        reservations=[ReservationResponse.model_validate(record) for record in reservations]
    )

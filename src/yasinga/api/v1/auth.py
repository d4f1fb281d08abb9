"""Authentication endpoints for user registration, login, and token management."""

from fastapi import APIRouter, Depends, status

from yasinga.api.deps import get_auth_service, get_current_user
from yasinga.models.user import User
from yasinga.schemas.auth import (
    CurrentUser,
    LoginRequest,
    RefreshRequest,
    TokenPair,
    UserRegister,
    UserResponse,
)
from yasinga.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    description="Create a business owner account with email and password.",
)
async def register(
    data: UserRegister,
    auth_service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    """
    Register a new user account.

    Raises:
        400: Email already registered or invalid input
    """
    user = await auth_service.register(data)
    return UserResponse.model_validate(user)


@router.post(
    "/login",
    response_model=TokenPair,
    summary="User login",
    description="Authenticate with email and password to receive JWT tokens.",
)
async def login(
    data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenPair:
    """
    Authenticate user and return JWT tokens.

    Returns:
        Access token and refresh token

    Raises:
        401: Invalid credentials
        403: User account deactivated
    """
    return await auth_service.login(email=data.email, password=data.password)


@router.post(
    "/refresh",
    response_model=TokenPair,
    summary="Refresh access token",
    description="Get new token pair using a valid refresh token.",
)
async def refresh(
    data: RefreshRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenPair:
    return await auth_service.refresh_tokens(data.refresh_token)


@router.get(
    "/me",
    response_model=CurrentUser,
    summary="Get current user",
    description="Get authenticated user's profile information.",
)
async def get_me(
    current_user: User = Depends(get_current_user),
) -> CurrentUser:
    return CurrentUser.model_validate(current_user)

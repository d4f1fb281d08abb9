"""Authentication service with business logic."""

from fastapi import HTTPException, status
from jose import JWTError

from yasinga.core.security import (
    create_access_token,
    create_refresh_token,
    get_user_id_from_token,
    hash_password,
    verify_password,
)
from yasinga.models.user import User
from yasinga.repositories.user import UserRepository
from yasinga.schemas.auth import TokenPair, UserRegister


class AuthService:
    """Service for authentication operations."""

    def __init__(self, user_repo: UserRepository):
        """
        Initialize authentication service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def register(self, data: UserRegister) -> User:
        """
        Register a new user.

        Args:
            data: Validated registration payload

        Returns:
            Created user object

        Raises:
            HTTPException: If email already exists
        """
        if await self.user_repo.email_exists(data.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already registered",
            )

        user = User(
            email=data.email,
            password_hash=hash_password(data.password),
            first_name=data.first_name,
            last_name=data.last_name,
            business_phone_number=data.business_phone_number,
            personal_phone_number=data.personal_phone_number,
        )
        return await self.user_repo.create(user)

    async def login(self, email: str, password: str) -> TokenPair:
        """
        Authenticate user and return JWT tokens.

        Raises:
            HTTPException: If credentials are invalid or the account is deactivated
        """
        user = await self.user_repo.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Incorrect email or password",
            )

        if not user.is_active:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="User account is deactivated",
            )

        return TokenPair(
            access_token=create_access_token(user.id),
            refresh_token=create_refresh_token(user.id),
        )

    async def refresh_tokens(self, refresh_token: str) -> TokenPair:
        """
        Generate new token pair using refresh token.

        Raises:
            HTTPException: If refresh token is invalid or the user is gone/deactivated
        """
        try:
            user_id = get_user_id_from_token(refresh_token, expected_type="refresh")
        except (JWTError, ValueError):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or expired refresh token",
            )

        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="User not found",
            )

        if not user.is_active:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="User account is deactivated",
            )

        return TokenPair(
            access_token=create_access_token(user.id),
            refresh_token=create_refresh_token(user.id),
        )

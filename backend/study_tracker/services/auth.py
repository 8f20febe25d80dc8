"""
Study Tracker - Authentication Service
Business logic for user registration, login, and token issue
"""
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from study_tracker.core.config import settings
from study_tracker.core.security import (
    create_access_token,
    get_password_hash,
    verify_password,
)
from study_tracker.models.user import User
from study_tracker.schemas.user import TokenResponse, UserCreate


class AuthenticationError(Exception):
    """Base authentication error."""
    pass


class InvalidCredentialsError(AuthenticationError):
    """Invalid email or password."""
    pass


class EmailAlreadyRegisteredError(AuthenticationError):
    """Registration attempted with an email that already has an account."""
    pass


class AuthService:
    """Service for authentication operations."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def register_user(self, user_data: UserCreate) -> User:
        """
        Register a new user.
        
        Raises:
            EmailAlreadyRegisteredError: If the email already has an account
        """
        email = user_data.email.lower()
        existing = await self.db.execute(select(User).where(User.email == email))
        if existing.scalar_one_or_none():
            raise EmailAlreadyRegisteredError("Email already registered")
        
        user = User(
            email=email,
            hashed_password=get_password_hash(user_data.password),
            first_name=user_data.first_name,
            last_name=user_data.last_name,
        )
        self.db.add(user)
        await self.db.flush()
        return user
    
    async def authenticate(self, email: str, password: str) -> User:
        """
        Authenticate user with email and password.
        
        Raises:
            InvalidCredentialsError: If credentials are invalid or the account is inactive
        """
        result = await self.db.execute(select(User).where(User.email == email.lower()))
        user = result.scalar_one_or_none()
        
        if not user or not verify_password(password, user.hashed_password):
            raise InvalidCredentialsError("Invalid email or password")
        if not user.is_active:
            raise InvalidCredentialsError("Account is deactivated")
        return user
    
    def create_token(self, user: User) -> TokenResponse:
        """Issue an access token for a user."""
        return TokenResponse(
            access_token=create_access_token(subject=str(user.id)),
            expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        )
    
    async def get_user_by_id(self, user_id: str | uuid.UUID) -> User | None:
        """Get user by ID."""
        if isinstance(user_id, str):
            try:
                user_id = uuid.UUID(user_id)
            except ValueError:
                return None
        return await self.db.get(User, user_id)

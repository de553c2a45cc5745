import logging
from typing import TYPE_CHECKING, Optional, Tuple

from portfolio.core.errors import AuthenticationError, MissingFieldsError
from portfolio.core.security import create_access_token
from portfolio.domains.identity.entities import User, normalize_email

if TYPE_CHECKING:
    from portfolio.db.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class IdentityService:
    """Сервис аутентификации администратора"""

    def __init__(self, users: "UserRepository"):
        self.users = users

    async def authenticate_user(self, email: str, password: str) -> Optional[User]:
        """Аутентификация пользователя; None при любой ошибке учётных данных"""
        user = await self.users.get_by_email(normalize_email(email))

        if not user or not user.authenticate(password):
            return None

        return user

    async def login(self, email: Optional[str], password: Optional[str]) -> Tuple[str, User]:
        """Вход пользователя и создание JWT токена"""
        if not email or not email.strip() or not password:
            raise MissingFieldsError("Email and password are required")

        user = await self.authenticate_user(email, password)

        if not user:
            logger.info("Rejected login attempt for %s", email)
            raise AuthenticationError("Invalid credentials")

        return create_access_token(data=user.token_claims()), user

    async def create_user(self, email: str, password: str, role: str = "admin") -> User:
        """Создание пользователя (используется CLI)"""
        if not email or not password:
            raise ValueError("Email and password are required")

        if await self.users.email_exists(normalize_email(email)):
            raise ValueError("Email already registered")

        user = User.create_user(email=email, password=password, role=role)
        return await self.users.create(user)

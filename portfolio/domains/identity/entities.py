import uuid
from datetime import datetime, timezone
from typing import Optional

from portfolio.core.security import get_password_hash, verify_password


class User:
    """Учётная запись администратора сайта"""

    def __init__(
        self,
        id: uuid.UUID,
        email: str,
        password_hash: str,
        role: str = "admin",
        created_at: Optional[datetime] = None,
    ):
        self.id = id
        self.email = email
        self.password_hash = password_hash
        self.role = role
        self.created_at = created_at or datetime.now(timezone.utc)

    def authenticate(self, password: str) -> bool:
        """Проверка пароля пользователя"""
        return verify_password(password, self.password_hash)

    def token_claims(self) -> dict:
        """Данные, которые попадают в JWT"""
        return {"sub": str(self.id), "email": self.email, "role": self.role}

    @classmethod
    def create_user(cls, email: str, password: str, role: str = "admin") -> "User":
        """Создание нового пользователя с хешированием пароля"""
        return cls(
            id=uuid.uuid4(),
            email=normalize_email(email),
            password_hash=get_password_hash(password),
            role=role,
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email}, role={self.role})"


def normalize_email(email: str) -> str:
    return email.strip().lower()

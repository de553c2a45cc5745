from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from portfolio.db.models.user import User as UserModel
from portfolio.db.repositories.base import Repository
from portfolio.domains.identity.entities import User


class UserRepository(Repository):
    """Репозиторий для работы с пользователями"""

    name = "users"

    async def create(self, user: User) -> User:
        """Создание нового пользователя"""
        db_user = UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            role=user.role,
        )

        async with self.session() as session:
            session.add(db_user)
            try:
                await session.commit()
            except IntegrityError:
                await session.rollback()
                raise ValueError("User with this email already exists")
            await session.refresh(db_user)
            return self._to_domain(db_user)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Получение пользователя по email"""
        async with self.session() as session:
            result = await session.execute(select(UserModel).where(UserModel.email == email))
            db_user = result.scalar_one_or_none()
            return self._to_domain(db_user) if db_user else None

    async def email_exists(self, email: str) -> bool:
        """Проверка существования email"""
        async with self.session() as session:
            result = await session.execute(select(UserModel.id).where(UserModel.email == email))
            return result.scalar_one_or_none() is not None

    def _to_domain(self, db_user: UserModel) -> User:
        """Преобразование модели БД в доменную сущность"""
        return User(
            id=db_user.id,
            email=db_user.email,
            password_hash=db_user.password_hash,
            role=db_user.role,
            created_at=db_user.created_at,
        )

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker

from portfolio.core.errors import StoreError


class Repository:
    """Базовый репозиторий: каждая операция получает собственную сессию"""

    name = "rows"

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        try:
            async with self.session_factory() as session:
                yield session
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as exc:
            # ошибки подключения asyncpg приходят без обёртки SQLAlchemy
            raise StoreError(f"Query on {self.name} failed") from exc

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from portfolio.core.config import settings

# Базовый класс для моделей
Base = declarative_base()

engine = create_async_engine(settings.database_url, echo=settings.database_echo, pool_pre_ping=True)

SessionLocal = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


def get_session_factory():
    """Фабрика сессий для репозиториев; каждая операция открывает свою сессию"""
    return SessionLocal

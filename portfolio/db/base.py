import uuid

from sqlalchemy import UUID, Column, DateTime
from sqlalchemy.sql import func

from portfolio.core.db import Base


class BaseModel(Base):
    __abstract__ = True

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

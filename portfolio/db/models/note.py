from sqlalchemy import JSON, UUID, Column, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from portfolio.db.base import BaseModel


class Category(BaseModel):
    __tablename__ = "categories"

    name = Column(String(100), nullable=False)
    description = Column(Text)

    notes = relationship("Note", back_populates="category")


class Note(BaseModel):
    __tablename__ = "notes"

    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False, default="")
    excerpt = Column(Text)
    tags = Column(JSON, nullable=False, default=list)
    category_id = Column(UUID(as_uuid=True), ForeignKey("categories.id", ondelete="SET NULL"))

    # Relationships
    category = relationship("Category", back_populates="notes")

from sqlalchemy import JSON, Boolean, Column, String, Text

from portfolio.db.base import BaseModel


class Project(BaseModel):
    __tablename__ = "projects"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    tech_stack = Column(JSON, nullable=False, default=list)
    github_url = Column(String(500))
    demo_url = Column(String(500))
    image_url = Column(String(500))
    category = Column(String(100), nullable=False, default="")
    status = Column(String(50), nullable=False, default="completed")
    featured = Column(Boolean, nullable=False, default=False)

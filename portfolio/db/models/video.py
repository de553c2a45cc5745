from sqlalchemy import Column, Integer, String, Text

from portfolio.db.base import BaseModel


class Video(BaseModel):
    __tablename__ = "videos"

    title = Column(String(255), nullable=False)
    description = Column(Text)
    video_url = Column(String(500), nullable=False)
    thumbnail_url = Column(String(500))
    views = Column(Integer, nullable=False, default=0)

from sqlalchemy import Column, String, Text

from portfolio.db.base import BaseModel


class ContactMessage(BaseModel):
    __tablename__ = "contact_messages"

    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(String(255))
    message = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default="unread", index=True)

from typing import Optional

from pydantic import BaseModel


class ContactSubmission(BaseModel):
    """Форма обратной связи; обязательность полей проверяет сервис"""
    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None


class ContactResponse(BaseModel):
    success: bool = True
    message: str = "Message sent successfully"

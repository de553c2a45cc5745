from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

DEFAULT_SUBJECT = "Contact Form Submission"


@dataclass
class ContactMessage:
    id: UUID
    name: str
    email: str
    message: str
    subject: Optional[str] = None
    status: str = "unread"
    created_at: Optional[datetime] = None

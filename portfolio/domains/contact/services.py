import logging
from typing import TYPE_CHECKING

from portfolio.core.errors import MissingFieldsError, StoreError
from portfolio.domains.contact.entities import DEFAULT_SUBJECT, ContactMessage
from portfolio.domains.contact.schemas import ContactSubmission

if TYPE_CHECKING:
    from portfolio.db.repositories.contact_repository import ContactMessageRepository

logger = logging.getLogger(__name__)


def _clean(value):
    return value.strip() if value else ""


class ContactService:
    """Сервис приёма сообщений с формы обратной связи"""

    def __init__(self, messages: "ContactMessageRepository"):
        self.messages = messages

    async def submit(self, submission: ContactSubmission) -> ContactMessage:
        """Проверка обязательных полей и сохранение сообщения как непрочитанного"""
        name = _clean(submission.name)
        email = _clean(submission.email)
        message = _clean(submission.message)

        if not name or not email or not message:
            raise MissingFieldsError("Name, email, and message are required")

        try:
            saved = await self.messages.create(
                name=name,
                email=email,
                subject=_clean(submission.subject) or DEFAULT_SUBJECT,
                message=message,
            )
        except StoreError as exc:
            raise StoreError("Failed to save message") from exc

        logger.info("Stored contact message %s", saved.id)
        return saved

from sqlalchemy import func, select

from portfolio.db.models.contact import ContactMessage as ContactMessageModel
from portfolio.db.repositories.base import Repository
from portfolio.domains.contact.entities import ContactMessage


class ContactMessageRepository(Repository):
    """Репозиторий сообщений обратной связи"""

    name = "contact_messages"

    async def create(self, name: str, email: str, subject: str, message: str) -> ContactMessage:
        """Сохранение нового сообщения со статусом unread"""
        row = ContactMessageModel(name=name, email=email, subject=subject, message=message, status="unread")

        async with self.session() as session:
            session.add(row)
            await session.commit()
            await session.refresh(row)
            return self._to_domain(row)

    async def count_unread(self) -> int:
        async with self.session() as session:
            result = await session.execute(
                select(func.count())
                .select_from(ContactMessageModel)
                .where(ContactMessageModel.status == "unread")
            )
            return result.scalar_one()

    def _to_domain(self, row: ContactMessageModel) -> ContactMessage:
        return ContactMessage(
            id=row.id,
            name=row.name,
            email=row.email,
            subject=row.subject,
            message=row.message,
            status=row.status,
            created_at=row.created_at,
        )

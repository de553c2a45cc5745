from typing import List

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from portfolio.db.models.note import Category as CategoryModel
from portfolio.db.models.note import Note as NoteModel
from portfolio.db.repositories.base import Repository
from portfolio.domains.content.entities import Category, Note


def _category_to_domain(row: CategoryModel) -> Category:
    return Category(id=row.id, name=row.name, description=row.description)


class NoteRepository(Repository):
    """Репозиторий заметок"""

    name = "notes"

    async def list_all(self) -> List[Note]:
        """Заметки с категорией, новые первыми"""
        async with self.session() as session:
            result = await session.execute(
                select(NoteModel)
                .options(selectinload(NoteModel.category))
                .order_by(NoteModel.created_at.desc())
            )
            return [self._to_domain(row) for row in result.scalars().all()]

    async def count(self) -> int:
        async with self.session() as session:
            result = await session.execute(select(func.count()).select_from(NoteModel))
            return result.scalar_one()

    def _to_domain(self, row: NoteModel) -> Note:
        return Note(
            id=row.id,
            title=row.title,
            content=row.content or "",
            excerpt=row.excerpt,
            tags=list(row.tags or []),
            created_at=row.created_at,
            category=_category_to_domain(row.category) if row.category else None,
        )


class CategoryRepository(Repository):
    """Репозиторий категорий заметок"""

    name = "categories"

    async def list_all(self) -> List[Category]:
        async with self.session() as session:
            result = await session.execute(select(CategoryModel).order_by(CategoryModel.name))
            return [_category_to_domain(row) for row in result.scalars().all()]

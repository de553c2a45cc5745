from typing import List

from sqlalchemy import func, select

from portfolio.db.models.project import Project as ProjectModel
from portfolio.db.repositories.base import Repository
from portfolio.domains.content.entities import Project


class ProjectRepository(Repository):
    """Репозиторий проектов"""

    name = "projects"

    async def list_all(self) -> List[Project]:
        """Все проекты: сначала избранные, затем новые"""
        async with self.session() as session:
            result = await session.execute(
                select(ProjectModel).order_by(ProjectModel.featured.desc(), ProjectModel.created_at.desc())
            )
            return [self._to_domain(row) for row in result.scalars().all()]

    async def count(self) -> int:
        async with self.session() as session:
            result = await session.execute(select(func.count()).select_from(ProjectModel))
            return result.scalar_one()

    def _to_domain(self, row: ProjectModel) -> Project:
        return Project(
            id=row.id,
            title=row.title,
            description=row.description or "",
            tech_stack=list(row.tech_stack or []),
            github_url=row.github_url,
            demo_url=row.demo_url,
            image_url=row.image_url,
            category=row.category or "",
            status=row.status or "",
            featured=bool(row.featured),
            created_at=row.created_at,
        )

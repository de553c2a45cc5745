from typing import List

from sqlalchemy import func, select

from portfolio.db.models.video import Video as VideoModel
from portfolio.db.repositories.base import Repository
from portfolio.domains.content.entities import Video


class VideoRepository(Repository):
    """Репозиторий видео"""

    name = "videos"

    async def list_all(self) -> List[Video]:
        async with self.session() as session:
            result = await session.execute(select(VideoModel).order_by(VideoModel.created_at.desc()))
            return [self._to_domain(row) for row in result.scalars().all()]

    async def count(self) -> int:
        async with self.session() as session:
            result = await session.execute(select(func.count()).select_from(VideoModel))
            return result.scalar_one()

    async def total_views(self) -> int:
        """Сумма просмотров по всем видео (NULL считается как 0)"""
        async with self.session() as session:
            result = await session.execute(select(func.coalesce(func.sum(VideoModel.views), 0)))
            return int(result.scalar_one())

    def _to_domain(self, row: VideoModel) -> Video:
        return Video(
            id=row.id,
            title=row.title,
            description=row.description,
            video_url=row.video_url,
            thumbnail_url=row.thumbnail_url,
            views=row.views or 0,
            created_at=row.created_at,
        )

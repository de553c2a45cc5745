import asyncio
from typing import TYPE_CHECKING

from portfolio.core.errors import StoreError
from portfolio.domains.admin.schemas import DashboardStats

if TYPE_CHECKING:
    from portfolio.db.repositories.contact_repository import ContactMessageRepository
    from portfolio.db.repositories.note_repository import NoteRepository
    from portfolio.db.repositories.project_repository import ProjectRepository
    from portfolio.db.repositories.video_repository import VideoRepository


class AdminStatsService:
    """Сервис статистики для панели администратора"""

    def __init__(
        self,
        projects: "ProjectRepository",
        notes: "NoteRepository",
        videos: "VideoRepository",
        messages: "ContactMessageRepository",
    ):
        self.projects = projects
        self.notes = notes
        self.videos = videos
        self.messages = messages

    async def get_stats(self) -> DashboardStats:
        """Пять независимых запросов параллельно; ошибка любого из них означает ошибку всего"""
        try:
            projects, notes, videos, unread, total_views = await asyncio.gather(
                self.projects.count(),
                self.notes.count(),
                self.videos.count(),
                self.messages.count_unread(),
                self.videos.total_views(),
            )
        except StoreError as exc:
            raise StoreError("Failed to fetch stats") from exc

        return DashboardStats(
            projects=projects,
            notes=notes,
            videos=videos,
            messages=unread,
            total_views=total_views,
        )

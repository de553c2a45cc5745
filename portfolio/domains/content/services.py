import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Awaitable, List, TypeVar

from portfolio.core.errors import StoreError
from portfolio.domains.content.entities import CategorySummary, Note, Project, Video

if TYPE_CHECKING:
    from portfolio.db.repositories.note_repository import CategoryRepository, NoteRepository
    from portfolio.db.repositories.project_repository import ProjectRepository
    from portfolio.db.repositories.video_repository import VideoRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class ProjectsPage:
    featured: List[Project] = field(default_factory=list)
    others: List[Project] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.featured and not self.others


@dataclass
class NotesPage:
    notes: List[Note] = field(default_factory=list)
    categories: List[CategorySummary] = field(default_factory=list)


class ContentService:
    """Сервис публичных страниц: проекты, заметки, видео"""

    def __init__(
        self,
        projects: "ProjectRepository",
        notes: "NoteRepository",
        categories: "CategoryRepository",
        videos: "VideoRepository",
    ):
        self.projects = projects
        self.notes = notes
        self.categories = categories
        self.videos = videos

    async def _rows_or_empty(self, query: Awaitable[List[T]], what: str) -> List[T]:
        """Ошибка чтения логируется, страница показывает пустое состояние"""
        try:
            return await query
        except StoreError:
            logger.exception("Error fetching %s", what)
            return []

    async def get_projects_page(self) -> ProjectsPage:
        """Проекты, разделённые на избранные и остальные"""
        projects = await self._rows_or_empty(self.projects.list_all(), "projects")
        return ProjectsPage(
            featured=[p for p in projects if p.featured],
            others=[p for p in projects if not p.featured],
        )

    async def get_notes_page(self) -> NotesPage:
        """Заметки и категории запрашиваются параллельно"""
        notes, categories = await asyncio.gather(
            self._rows_or_empty(self.notes.list_all(), "notes"),
            self._rows_or_empty(self.categories.list_all(), "categories"),
        )

        summaries = [
            CategorySummary(
                category=category,
                note_count=sum(1 for note in notes if note.category and note.category.id == category.id),
            )
            for category in categories
        ]
        return NotesPage(notes=notes, categories=summaries)

    async def get_videos(self) -> List[Video]:
        """Видео, новые первыми"""
        return await self._rows_or_empty(self.videos.list_all(), "videos")

from portfolio.db.repositories.user_repository import UserRepository
from portfolio.db.repositories.project_repository import ProjectRepository
from portfolio.db.repositories.note_repository import CategoryRepository, NoteRepository
from portfolio.db.repositories.video_repository import VideoRepository
from portfolio.db.repositories.contact_repository import ContactMessageRepository

__all__ = [
    "UserRepository",
    "ProjectRepository",
    "NoteRepository",
    "CategoryRepository",
    "VideoRepository",
    "ContactMessageRepository",
]

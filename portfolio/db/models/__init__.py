from portfolio.db.models.user import User
from portfolio.db.models.project import Project
from portfolio.db.models.note import Category, Note
from portfolio.db.models.video import Video
from portfolio.db.models.contact import ContactMessage

__all__ = [
    "User",
    "Project",
    "Category",
    "Note",
    "Video",
    "ContactMessage",
]

from portfolio.domains.content.entities import Category, CategorySummary, Note, Project, Video
from portfolio.domains.content.services import ContentService, NotesPage, ProjectsPage

__all__ = [
    "Category", "CategorySummary", "Note", "Project", "Video",
    "ContentService", "NotesPage", "ProjectsPage",
]

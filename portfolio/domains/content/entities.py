from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID

SUMMARY_LENGTH = 150
VISIBLE_TAGS = 3


@dataclass
class Project:
    id: UUID
    title: str
    description: str
    category: str
    status: str
    created_at: datetime
    tech_stack: List[str] = field(default_factory=list)
    github_url: Optional[str] = None
    demo_url: Optional[str] = None
    image_url: Optional[str] = None
    featured: bool = False

    @property
    def is_completed(self) -> bool:
        return self.status == "completed"


@dataclass
class Category:
    id: UUID
    name: str
    description: Optional[str] = None


@dataclass
class CategorySummary:
    category: Category
    note_count: int


@dataclass
class Note:
    id: UUID
    title: str
    content: str
    created_at: datetime
    excerpt: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    category: Optional[Category] = None

    def summary(self) -> str:
        """Анонс заметки или начало текста, если анонса нет"""
        if self.excerpt:
            return self.excerpt
        return self.content[:SUMMARY_LENGTH] + "..."

    def visible_tags(self) -> List[str]:
        return self.tags[:VISIBLE_TAGS]

    def hidden_tag_count(self) -> int:
        return max(len(self.tags) - VISIBLE_TAGS, 0)


@dataclass
class Video:
    id: UUID
    title: str
    video_url: str
    created_at: datetime
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    views: int = 0

    def formatted_views(self) -> str:
        return format_views(self.views)


def format_views(views: int) -> str:
    """Компактное число просмотров: 1.2M, 3.4K или само число"""
    if views >= 1_000_000:
        return f"{views / 1_000_000:.1f}M"
    if views >= 1_000:
        return f"{views / 1_000:.1f}K"
    return str(views)


def format_date(value: datetime) -> str:
    """Дата в формате ``January 5, 2025``"""
    return f"{value:%B} {value.day}, {value.year}"

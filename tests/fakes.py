"""In-memory stand-ins for the repositories, used through dependency overrides."""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

from portfolio.core.errors import StoreError
from portfolio.domains.contact.entities import ContactMessage
from portfolio.domains.content.entities import Category, Note, Project, Video
from portfolio.domains.identity.entities import User

BASE_TIME = datetime(2025, 1, 5, 12, 0, tzinfo=timezone.utc)

ADMIN_EMAIL = "admin@portfolio.dev"
ADMIN_PASSWORD = "s3cret-Passw0rd"


def make_project(title: str = "Churn Model", *, featured: bool = False, days_ago: int = 0, **kwargs) -> Project:
    defaults = dict(
        description="Predicts customer churn.",
        category="Machine Learning",
        status="completed",
        tech_stack=["Python", "scikit-learn"],
    )
    defaults.update(kwargs)
    return Project(
        id=uuid.uuid4(),
        title=title,
        featured=featured,
        created_at=BASE_TIME - timedelta(days=days_ago),
        **defaults,
    )


def make_category(name: str = "Deep Learning", description: str | None = None) -> Category:
    return Category(id=uuid.uuid4(), name=name, description=description)


def make_note(title: str = "Attention Is All You Need", *, days_ago: int = 0, **kwargs) -> Note:
    defaults = dict(content="Transformers replace recurrence with attention.", tags=[])
    defaults.update(kwargs)
    return Note(id=uuid.uuid4(), title=title, created_at=BASE_TIME - timedelta(days=days_ago), **defaults)


def make_video(title: str = "Stay Curious", *, views: int = 0, days_ago: int = 0, **kwargs) -> Video:
    defaults = dict(video_url="https://example.com/video.mp4")
    defaults.update(kwargs)
    return Video(
        id=uuid.uuid4(),
        title=title,
        views=views,
        created_at=BASE_TIME - timedelta(days=days_ago),
        **defaults,
    )


class _FakeRepository:
    def __init__(self, rows=None, fail: bool = False):
        self.rows = list(rows or [])
        self.fail = fail

    def _check(self):
        if self.fail:
            raise StoreError(f"{type(self).__name__} unavailable")


class FakeProjectRepository(_FakeRepository):
    async def list_all(self):
        self._check()
        return sorted(self.rows, key=lambda p: (p.featured, p.created_at), reverse=True)

    async def count(self):
        self._check()
        return len(self.rows)


class FakeNoteRepository(_FakeRepository):
    async def list_all(self):
        self._check()
        return sorted(self.rows, key=lambda n: n.created_at, reverse=True)

    async def count(self):
        self._check()
        return len(self.rows)


class FakeCategoryRepository(_FakeRepository):
    async def list_all(self):
        self._check()
        return sorted(self.rows, key=lambda c: c.name)


class FakeVideoRepository(_FakeRepository):
    async def list_all(self):
        self._check()
        return sorted(self.rows, key=lambda v: v.created_at, reverse=True)

    async def count(self):
        self._check()
        return len(self.rows)

    async def total_views(self):
        self._check()
        return sum(v.views or 0 for v in self.rows)


class FakeContactMessageRepository(_FakeRepository):
    async def create(self, name, email, subject, message):
        self._check()
        row = ContactMessage(
            id=uuid.uuid4(),
            name=name,
            email=email,
            subject=subject,
            message=message,
            status="unread",
            created_at=datetime.now(timezone.utc),
        )
        self.rows.append(row)
        return row

    async def count_unread(self):
        self._check()
        return sum(1 for row in self.rows if row.status == "unread")


class FakeUserRepository(_FakeRepository):
    async def get_by_email(self, email):
        self._check()
        return next((u for u in self.rows if u.email == email), None)

    async def email_exists(self, email):
        return await self.get_by_email(email) is not None

    async def create(self, user: User):
        self._check()
        if any(u.email == user.email for u in self.rows):
            raise ValueError("User with this email already exists")
        self.rows.append(user)
        return user


class FakeStore:
    """All fake tables of one test, shared by every service the app builds."""

    def __init__(self):
        self.projects = FakeProjectRepository()
        self.notes = FakeNoteRepository()
        self.categories = FakeCategoryRepository()
        self.videos = FakeVideoRepository()
        self.messages = FakeContactMessageRepository()
        self.users = FakeUserRepository()

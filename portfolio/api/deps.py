from fastapi import Depends
from sqlalchemy.orm import sessionmaker

from portfolio.core.db import get_session_factory
from portfolio.db.repositories import (
    CategoryRepository,
    ContactMessageRepository,
    NoteRepository,
    ProjectRepository,
    UserRepository,
    VideoRepository,
)
from portfolio.domains.admin.services import AdminStatsService
from portfolio.domains.contact.services import ContactService
from portfolio.domains.content.services import ContentService
from portfolio.domains.identity.services import IdentityService


def get_identity_service(factory: sessionmaker = Depends(get_session_factory)) -> IdentityService:
    return IdentityService(UserRepository(factory))


def get_contact_service(factory: sessionmaker = Depends(get_session_factory)) -> ContactService:
    return ContactService(ContactMessageRepository(factory))


def get_content_service(factory: sessionmaker = Depends(get_session_factory)) -> ContentService:
    return ContentService(
        projects=ProjectRepository(factory),
        notes=NoteRepository(factory),
        categories=CategoryRepository(factory),
        videos=VideoRepository(factory),
    )


def get_admin_stats_service(factory: sessionmaker = Depends(get_session_factory)) -> AdminStatsService:
    return AdminStatsService(
        projects=ProjectRepository(factory),
        notes=NoteRepository(factory),
        videos=VideoRepository(factory),
        messages=ContactMessageRepository(factory),
    )

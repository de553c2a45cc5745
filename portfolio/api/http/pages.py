import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from portfolio.api.deps import get_admin_stats_service, get_content_service
from portfolio.core.auth import get_optional_user
from portfolio.core.errors import StoreError
from portfolio.domains.admin.schemas import DashboardStats
from portfolio.domains.admin.services import AdminStatsService
from portfolio.domains.content.entities import format_date, format_views
from portfolio.domains.content.services import ContentService
from portfolio.domains.identity.schemas import UserOut
from portfolio.site import (
    CONTACT_METHODS,
    NAV_LINKS,
    QUICK_ACTIONS,
    SERVICES,
    SITE_DESCRIPTION,
    SITE_TITLE,
    SKILLS,
    WORKING_HOURS,
)

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "templates"))
templates.env.filters["format_date"] = format_date
templates.env.filters["format_views"] = format_views
templates.env.globals.update(site_title=SITE_TITLE, site_description=SITE_DESCRIPTION, nav_links=NAV_LINKS)

router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)


@router.get("/")
async def home(request: Request):
    """Главная страница"""
    return templates.TemplateResponse(request, "home.html", {"skills": SKILLS, "services": SERVICES})


@router.get("/projects")
async def projects(request: Request, content_service: ContentService = Depends(get_content_service)):
    """Страница проектов"""
    page = await content_service.get_projects_page()
    return templates.TemplateResponse(request, "projects.html", {"page": page})


@router.get("/notes")
async def notes(request: Request, content_service: ContentService = Depends(get_content_service)):
    """Страница заметок с категориями"""
    page = await content_service.get_notes_page()
    return templates.TemplateResponse(request, "notes.html", {"page": page})


@router.get("/videos")
async def videos(request: Request, content_service: ContentService = Depends(get_content_service)):
    """Страница видео"""
    items = await content_service.get_videos()
    return templates.TemplateResponse(request, "videos.html", {"videos": items})


@router.get("/contact")
async def contact(request: Request):
    """Страница контактов с формой"""
    return templates.TemplateResponse(
        request,
        "contact.html",
        {"contact_methods": CONTACT_METHODS, "working_hours": WORKING_HOURS},
    )


@router.get("/admin/login")
async def admin_login(request: Request, current_user: Optional[UserOut] = Depends(get_optional_user)):
    """Форма входа в админку"""
    if current_user:
        return RedirectResponse("/admin/dashboard", status_code=303)
    return templates.TemplateResponse(request, "admin/login.html", {})


@router.get("/admin/dashboard")
async def admin_dashboard(
    request: Request,
    current_user: Optional[UserOut] = Depends(get_optional_user),
    stats_service: AdminStatsService = Depends(get_admin_stats_service),
):
    """Панель администратора со сводной статистикой"""
    if current_user is None:
        return RedirectResponse("/admin/login", status_code=303)

    try:
        stats = await stats_service.get_stats()
    except StoreError:
        logger.exception("Error fetching stats")
        stats = DashboardStats()

    return templates.TemplateResponse(
        request,
        "admin/dashboard.html",
        {"user": current_user, "stats": stats, "quick_actions": QUICK_ACTIONS},
    )

from portfolio.api.http.health import router as health_router
from portfolio.api.http.auth import router as auth_router
from portfolio.api.http.contact import router as contact_router
from portfolio.api.http.admin import router as admin_router
from portfolio.api.http.pages import router as pages_router

__all__ = [
    "health_router",
    "auth_router",
    "contact_router",
    "admin_router",
    "pages_router",
]

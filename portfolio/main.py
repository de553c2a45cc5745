import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from portfolio.api.errors import register_error_handlers
from portfolio.api.http import admin_router, auth_router, contact_router, health_router, pages_router
from portfolio.core.config import settings
from portfolio.core.db import engine
from portfolio.core.logging import configure_logging

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


class NoCacheStaticFiles(StaticFiles):
    """Статика без кэширования для разработки"""

    async def get_response(self, path: str, scope):
        response = await super().get_response(path, scope)
        if response:
            response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
            response.headers["Pragma"] = "no-cache"
            response.headers["Expires"] = "0"
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Portfolio site starting (environment=%s)", settings.environment)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    configure_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title="Portfolio",
        description="Personal portfolio: projects, notes, videos and contact form",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    static_class = StaticFiles if settings.is_production else NoCacheStaticFiles
    app.mount("/static", static_class(directory=str(STATIC_DIR)), name="static")

    register_error_handlers(app)

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(contact_router)
    app.include_router(admin_router)
    app.include_router(pages_router)

    return app


app = create_app()

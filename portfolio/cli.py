"""CLI for the portfolio site: database setup, admin accounts, dev server."""

from __future__ import annotations

import asyncio
import logging
import sys

import click

from portfolio.core.config import settings
from portfolio.core.logging import configure_logging

logger = logging.getLogger(__name__)


def _identity_service():
    from portfolio.core.db import SessionLocal
    from portfolio.db.repositories import UserRepository
    from portfolio.domains.identity.services import IdentityService

    return IdentityService(UserRepository(SessionLocal))


async def _create_tables() -> None:
    import portfolio.db.models  # noqa: F401  registers the tables on Base.metadata
    from portfolio.core.db import Base, engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()


@click.group()
@click.version_option(version="1.0.0")
def cli() -> None:
    """Portfolio site management commands."""
    configure_logging(settings.log_level, settings.log_format)


@cli.command("init-db")
def init_db() -> None:
    """Create all tables that do not exist yet (use Alembic for upgrades)."""
    asyncio.run(_create_tables())
    click.echo("Database tables created")


@cli.command("create-admin")
@click.option("--email", prompt=True, help="Login email of the new user")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True, help="Login password")
@click.option("--role", default="admin", show_default=True, help="Role stored on the user")
def create_admin(email: str, password: str, role: str) -> None:
    """Create a user that can sign in to the admin dashboard."""
    service = _identity_service()
    try:
        user = asyncio.run(service.create_user(email=email, password=password, role=role))
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(f"Created {user.role} user {user.email} ({user.id})")


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: str, port: int, reload: bool) -> None:
    """Run the site with uvicorn."""
    import uvicorn

    uvicorn.run("portfolio.main:app", host=host, port=port, reload=reload, log_config=None)


if __name__ == "__main__":
    cli()

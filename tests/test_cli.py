"""Tests for the ``portfolio`` CLI."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from portfolio import cli as cli_module
from portfolio.domains.identity.services import IdentityService
from tests.fakes import FakeUserRepository

pytestmark = pytest.mark.unit


@pytest.fixture
def users(monkeypatch) -> FakeUserRepository:
    repo = FakeUserRepository()
    monkeypatch.setattr(cli_module, "_identity_service", lambda: IdentityService(repo))
    return repo


def test_create_admin(users):
    result = CliRunner().invoke(
        cli_module.cli, ["create-admin", "--email", " Owner@Example.com ", "--password", "pw123456"]
    )

    assert result.exit_code == 0, result.output
    assert "Created admin user owner@example.com" in result.output
    assert len(users.rows) == 1
    assert users.rows[0].authenticate("pw123456")


def test_create_admin_rejects_duplicate(users):
    runner = CliRunner()
    args = ["create-admin", "--email", "owner@example.com", "--password", "pw123456"]
    runner.invoke(cli_module.cli, args)

    result = runner.invoke(cli_module.cli, args)

    assert result.exit_code == 1
    assert "Email already registered" in result.output
    assert len(users.rows) == 1


def test_create_admin_with_custom_role(users):
    result = CliRunner().invoke(
        cli_module.cli,
        ["create-admin", "--email", "editor@example.com", "--password", "pw", "--role", "editor"],
    )

    assert result.exit_code == 0, result.output
    assert users.rows[0].role == "editor"

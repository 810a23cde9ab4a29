"""Tests for the health endpoint and admin CLI."""

import pytest
from click.testing import CliRunner
from httpx import AsyncClient
from sqlalchemy.orm import sessionmaker

from custody_ledger import cli as cli_module
from custody_ledger.db.models import Officer, Prison


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.fixture
def runner(db, monkeypatch) -> CliRunner:
    monkeypatch.setattr(cli_module, "SessionLocal", sessionmaker(bind=db.get_bind()))
    return CliRunner()


def test_create_prison_and_officer(runner, db):
    result = runner.invoke(
        cli_module.cli,
        ["create-prison", "--name", "Luzira Upper", "--code", "LUZ", "--capacity", "1700"],
    )
    assert result.exit_code == 0, result.output

    prison = db.query(Prison).filter_by(code="LUZ").one()
    assert prison.capacity == 1700

    result = runner.invoke(
        cli_module.cli,
        [
            "create-officer",
            "--prison-id", str(prison.id),
            "--name", "Jane Akello",
            "--badge", "B-200",
        ],
    )
    assert result.exit_code == 0, result.output
    assert db.query(Officer).filter_by(badge_number="B-200").count() == 1


def test_duplicate_prison_code_exits_nonzero(runner, prison):
    result = runner.invoke(
        cli_module.cli, ["create-prison", "--name", "Copy", "--code", prison.code]
    )
    assert result.exit_code == 1
    assert "Error" in result.output

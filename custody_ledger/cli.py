"""CLI tools for ledger administration."""

from uuid import UUID

import click

from custody_ledger.core.errors import LedgerError
from custody_ledger.db.base import Base
from custody_ledger.db.enums import PrisonType
from custody_ledger.db.session import SessionLocal, engine
from custody_ledger.schemas.facilities import OfficerCreate, PrisonCreate
from custody_ledger.services import facility_service

import custody_ledger.db.models  # noqa: F401


@click.group()
def cli():
    """Custody ledger CLI tools."""
    pass


@cli.command()
def create_db():
    """
    Create all tables on the configured database.

    For local development and SQLite; production databases use alembic.

    Example:
        python -m custody_ledger.cli create-db
    """
    Base.metadata.create_all(engine)
    click.echo("✓ Tables created")


@cli.command()
@click.option("--name", required=True, help="Prison name")
@click.option("--code", required=True, help="Unique prison code")
@click.option(
    "--type",
    "prison_type",
    type=click.Choice([t.value for t in PrisonType]),
    default=PrisonType.MAIN.value,
    show_default=True,
)
@click.option("--region", default=None)
@click.option("--capacity", type=int, default=None)
def create_prison(name: str, code: str, prison_type: str, region: str | None, capacity: int | None):
    """
    Register a prison.

    Example:
        python -m custody_ledger.cli create-prison --name "Luzira Upper" --code LUZ
    """
    db = SessionLocal()
    try:
        prison = facility_service.create_prison(
            db,
            PrisonCreate(
                name=name, code=code, type=prison_type, region=region, capacity=capacity
            ),
        )
        db.commit()
        click.echo(f"✓ Created prison: {name}")
        click.echo(f"  ID: {prison.id}")
        click.echo(f"  Code: {prison.code}")
    except LedgerError as e:
        db.rollback()
        click.echo(f"❌ Error: {e}")
        raise SystemExit(1)
    finally:
        db.close()


@cli.command()
@click.option("--prison-id", required=True, type=click.UUID, help="Prison the officer serves in")
@click.option("--name", required=True, help="Officer name")
@click.option("--badge", required=True, help="Unique badge number")
@click.option("--rank", default=None)
def create_officer(prison_id: UUID, name: str, badge: str, rank: str | None):
    """
    Register an officer.

    Example:
        python -m custody_ledger.cli create-officer --prison-id <uuid> --name "J. Okello" --badge B-100
    """
    db = SessionLocal()
    try:
        officer = facility_service.create_officer(
            db,
            OfficerCreate(prison_id=prison_id, name=name, badge_number=badge, rank=rank),
        )
        db.commit()
        click.echo(f"✓ Created officer: {name}")
        click.echo(f"  ID: {officer.id}")
        click.echo(f"  Badge: {officer.badge_number}")
    except LedgerError as e:
        db.rollback()
        click.echo(f"❌ Error: {e}")
        raise SystemExit(1)
    finally:
        db.close()


if __name__ == "__main__":
    cli()

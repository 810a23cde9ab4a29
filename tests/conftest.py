"""
Test configuration and fixtures.

Provides:
- In-memory SQLite database, rebuilt for each test
- HTTPX AsyncClient bound to the app with the test session
- Registered prison, court, offense, officer and inmate
- Local blob storage rooted in a temp directory
"""
import os
import uuid
from datetime import date
from typing import AsyncGenerator, Generator

# Use an in-memory database for the app engine (health check)
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("STORAGE_BACKEND", "local")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from custody_ledger.core.config import settings
from custody_ledger.core.deps import get_db
from custody_ledger.db.base import Base
from custody_ledger.db.models import Court, Inmate, Offense, Officer, Prison
from custody_ledger.db.session import enable_sqlite_foreign_keys
from custody_ledger.main import app
from custody_ledger.schemas.facilities import (
    CourtCreate,
    OffenseCreate,
    OfficerCreate,
    PrisonCreate,
)
from custody_ledger.schemas.inmate import InmateCreate
from custody_ledger.services import facility_service, inmate_service

import custody_ledger.db.models  # noqa: F401


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """
    Fresh schema per test on a single shared in-memory connection.

    App code may commit freely; the database is discarded afterwards.
    """
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()

    yield session

    session.close()
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(autouse=True)
def local_storage(tmp_path, monkeypatch) -> str:
    """Point the local blob backend at a per-test directory."""
    path = str(tmp_path / "blobs")
    monkeypatch.setattr(settings, "STORAGE_BACKEND", "local")
    monkeypatch.setattr(settings, "LOCAL_STORAGE_PATH", path)
    return path


# =============================================================================
# Domain Fixtures
# =============================================================================

@pytest.fixture
def prison(db: Session) -> Prison:
    prison = facility_service.create_prison(
        db, PrisonCreate(name="Luzira Upper", code="LUZ", type="main", region="Central")
    )
    db.commit()
    return prison


@pytest.fixture
def other_prison(db: Session) -> Prison:
    prison = facility_service.create_prison(
        db, PrisonCreate(name="Kitalya", code="KIT", type="main", region="Central")
    )
    db.commit()
    return prison


@pytest.fixture
def court(db: Session) -> Court:
    court = facility_service.create_court(
        db, CourtCreate(name="Buganda Road", type="chief_magistrate", district="Kampala")
    )
    db.commit()
    return court


@pytest.fixture
def offense(db: Session) -> Offense:
    offense = facility_service.create_offense(
        db, OffenseCreate(name="Theft", act="Penal Code Act", section="254", category="felony")
    )
    db.commit()
    return offense


@pytest.fixture
def officer(db: Session, prison: Prison) -> Officer:
    officer = facility_service.create_officer(
        db,
        OfficerCreate(
            prison_id=prison.id, name="Okello James", badge_number="B-100", rank="Sergeant"
        ),
    )
    db.commit()
    return officer


def make_inmate_payload(prison_id: uuid.UUID, offense_id: uuid.UUID, /, **overrides) -> dict:
    payload = {
        "first_name": "John",
        "last_name": "Mukasa",
        "prison_number": f"LUZ/2024/{uuid.uuid4().hex[:6]}",
        "national_id": "CM900101ABCD",
        "dob": date(1990, 1, 1),
        "gender": "male",
        "inmate_type": "remand",
        "prison_id": prison_id,
        "case_number": "CR-123/2024",
        "offense_id": offense_id,
        "admission_date": date(2024, 3, 1),
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def inmate_payload(prison: Prison, offense: Offense):
    """Factory for valid inmate registration payloads at `prison`."""
    def _make(**overrides) -> dict:
        return make_inmate_payload(prison.id, offense.id, **overrides)
    return _make


@pytest.fixture
def inmate(db: Session, prison: Prison, offense: Offense) -> Inmate:
    inmate = inmate_service.register_inmate(
        db,
        InmateCreate(**make_inmate_payload(prison.id, offense.id, prison_number="LUZ/2024/001")),
    )
    db.commit()
    return inmate


# =============================================================================
# Client Fixtures
# =============================================================================

@pytest.fixture(scope="function")
async def client(db: Session) -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient for the app, sharing the test database session."""
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as c:
        yield c

    app.dependency_overrides.clear()

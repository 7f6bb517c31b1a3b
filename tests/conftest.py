"""Pytest Fixtures und Test-Konfiguration"""
import pytest
from datetime import date
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.config import settings
from app.database import Base
from app.dependencies import get_storage
from app.main import app
from app.rate_limit import limiter
from app.services.database_storage import DatabaseStorage
from app.services.memory_storage import MemoryStorage
from app.services.storage import Storage


@pytest.fixture(scope="function")
def db_session() -> Session:
    """
    Erstellt eine temporäre In-Memory-SQLite-Datenbank für Tests
    Jeder Test bekommt eine frische, isolierte Datenbank
    """
    # In-Memory SQLite für schnelle Tests
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Alle Tabellen erstellen
    Base.metadata.create_all(bind=engine)

    # Session erstellen
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(params=["memory", "database"])
def storage(request) -> Storage:
    """Jeder Storage-Test läuft gegen beide Implementierungen"""
    if request.param == "memory":
        return MemoryStorage()
    return DatabaseStorage(request.getfixturevalue("db_session"))


@pytest.fixture(autouse=True)
def open_auth_mode(monkeypatch):
    """Standard: offener Modus, kein Rate-Limit"""
    monkeypatch.setattr(settings, "auth_mode", "open")
    monkeypatch.setattr(limiter, "enabled", False)


@pytest.fixture
def session_auth_mode(monkeypatch):
    """Session-Modus: /api Routen nur mit Login"""
    monkeypatch.setattr(settings, "auth_mode", "session")


@pytest.fixture
def client(storage: Storage):
    """
    TestClient mit überschriebenem Storage.
    Ohne `with`, damit der Lifespan (Seeding, Migrationen) nicht läuft.
    """
    def override_get_storage():
        yield storage

    app.dependency_overrides[get_storage] = override_get_storage
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def sample_event(storage: Storage):
    """Erstellt ein Beispiel-Event über drei Tage"""
    return storage.create_event({
        "name": "Community Park Cleanup",
        "date": "May 1, 2024 to May 3, 2024",
        "raw_dates": "2024-05-01|2024-05-02|2024-05-03",
        "time": "9:00 AM - 12:00 PM",
        "location": "Riverside Park",
    })


@pytest.fixture
def sample_volunteers(storage: Storage, sample_event):
    """Drei Helfer, einer davon eingecheckt"""
    data = [
        {"name": "Sarah Johnson", "email": "sarah.j@example.com", "team": "North Area"},
        {"name": "Michael Chen", "email": "michael.c@example.com", "team": "South Area",
         "checked_in": True, "checked_in_by": "Volunteer Admin"},
        {"name": "Jessica Smith", "email": "jessica.s@example.com", "role": "Registration"},
    ]
    return [storage.create_volunteer({**v, "event_id": sample_event.id}) for v in data]


@pytest.fixture
def sample_shifts(storage: Storage, sample_event):
    """Schichten an zwei Tagen, absichtlich unsortiert angelegt"""
    data = [
        {"shift_date": date(2024, 5, 1), "title": "Afternoon", "start_time": "1:00 PM", "end_time": "5:00 PM"},
        {"shift_date": date(2024, 5, 2), "title": "Early", "start_time": "7:00 AM", "end_time": "9:00 AM"},
        {"shift_date": date(2024, 5, 1), "title": "Late Morning", "start_time": "10:00 AM", "end_time": "12:00 PM"},
        {"shift_date": date(2024, 5, 1), "title": "Morning", "start_time": "9:00 AM", "end_time": "11:00 AM"},
    ]
    return [storage.create_shift({**s, "event_id": sample_event.id}) for s in data]


@pytest.fixture
def sample_roles(storage: Storage, sample_event):
    """Erstellt Beispiel-Rollen"""
    return [
        storage.create_role({"name": "Registration", "description": "Anmeldung", "event_id": sample_event.id}),
        storage.create_role({"name": "First Aid", "event_id": sample_event.id}),
        storage.create_role({"name": "Clean-up Crew", "event_id": sample_event.id}),
    ]

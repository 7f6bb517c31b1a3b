"""Datenbank-Setup und Session-Management"""
from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from app.config import settings

# SQLAlchemy Engine erstellen mit Connection Pooling
engine_kwargs = {
    "echo": settings.debug,
    "pool_pre_ping": True,  # Teste Connection vor Verwendung
    "pool_recycle": 3600,  # Recycle Connections nach 1 Stunde
}

# SQLite-spezifische Konfiguration
if "sqlite" in settings.database_url:
    engine_kwargs["connect_args"] = {
        "check_same_thread": False,  # Erlaube Thread-Sharing (notwendig für FastAPI)
        "timeout": 30,  # Warte bis zu 30 Sekunden auf DB-Lock
    }
else:
    engine_kwargs["pool_size"] = 10
    engine_kwargs["max_overflow"] = 20

engine = create_engine(settings.database_url, **engine_kwargs)

# Session-Factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Basis-Klasse für alle Models
Base = declarative_base()


def get_db():
    """
    Stellt eine Datenbank-Session bereit und schließt sie nach der Anfrage.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session):
    """
    Context Manager für atomare Datenbank-Transaktionen.

    Verwendung:
        with transaction(db):
            db.query(ShiftRole).filter(...).delete()
            db.delete(role)
        # Auto-commit bei Erfolg, auto-rollback bei Exception
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


def init_db():
    """
    Erstellt alle Tabellen (create_all).

    Für bestehende Produktiv-Datenbanken stattdessen Alembic verwenden
    (AUTO_MIGRATE=true oder `alembic upgrade head`).
    """
    from app.models import user, event, volunteer, shift, role, shift_role  # noqa: F401
    Base.metadata.create_all(bind=engine)

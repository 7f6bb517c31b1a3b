"""Dependencies für FastAPI - Storage-Auswahl und Session-Authentifizierung"""
from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator, Optional

from fastapi import Depends, Request, HTTPException, status

from app.config import settings
from app.database import SessionLocal
from app.models import User
from app.services.storage import Storage
from app.services.memory_storage import MemoryStorage
from app.services.database_storage import DatabaseStorage


@lru_cache(maxsize=None)
def get_memory_storage() -> MemoryStorage:
    """Prozessweite In-Memory-Instanz (nur Einzelprozess-Betrieb)"""
    return MemoryStorage()


@contextmanager
def open_storage() -> Iterator[Storage]:
    """
    Öffnet den per Konfiguration gewählten Storage.

    Bei STORAGE_BACKEND=database wird eine eigene Session geöffnet und
    danach geschlossen. Für Startup-Code und Skripte außerhalb von Requests.
    """
    if not settings.uses_database:
        yield get_memory_storage()
        return

    db = SessionLocal()
    try:
        yield DatabaseStorage(db)
    finally:
        db.close()


def get_storage() -> Iterator[Storage]:
    """
    Dependency für FastAPI-Routen.
    Stellt den Storage bereit und schließt die DB-Session nach der Anfrage.
    """
    with open_storage() as storage:
        yield storage


def get_current_user(request: Request, storage: Storage = Depends(get_storage)) -> Optional[User]:
    """
    Holt den angemeldeten Benutzer aus der Session.

    Returns:
        User oder None wenn niemand angemeldet ist

    Note:
        Invalidiert die Session wenn der Benutzer nicht mehr existiert
    """
    user_id = request.session.get("user_id")
    if not user_id:
        return None

    user = storage.get_user(user_id)
    if user is None:
        request.session.pop("user_id", None)
    return user


def require_authenticated_user(user: Optional[User] = Depends(get_current_user)) -> Optional[User]:
    """
    Schützt /api Routen im Session-Modus.

    Im offenen Modus (AUTH_MODE=open) ist keine Anmeldung nötig.

    Raises:
        HTTPException (401): Session-Modus ohne angemeldeten Benutzer
    """
    if settings.auth_mode == "open":
        return user

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Nicht angemeldet. Bitte melden Sie sich an."
        )
    return user


def resolve_checked_in_by(user: Optional[User], requested_by: Optional[str]) -> str:
    """
    Bestimmt, wer den Check-in durchführt.

    Session-Modus: Anzeigename des angemeldeten Benutzers (Body wird ignoriert).
    Offener Modus: checkedInBy aus dem Request-Body (Pflicht).

    Raises:
        HTTPException (401): Session-Modus ohne Benutzer
        HTTPException (400): Offener Modus ohne checkedInBy
    """
    if settings.auth_mode == "session":
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Nicht angemeldet. Bitte melden Sie sich an."
            )
        return user.display_name

    if not requested_by:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="checkedInBy muss angegeben werden"
        )
    return requested_by

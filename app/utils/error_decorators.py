"""Decorator für konsistentes Error-Handling in API-Routern"""
import logging
from functools import wraps
from typing import Callable

from fastapi import HTTPException

from app.utils.error_handler import handle_db_exception

logger = logging.getLogger(__name__)


def handle_route_errors(entity_name: str, operation: str = "Loading"):
    """
    Decorator für einheitliches Error-Handling in API-Routen.

    - HTTPException (404, 401, ...) wird unverändert durchgereicht
    - ValidationError / ValueError: 400 mit Meldung
    - Datenbank- und unerwartete Fehler: 500 mit allgemeiner Meldung,
      Details nur im Log

    Args:
        entity_name: Name der Entity für Logging (z.B. "volunteer", "shift")
        operation: Operation-Beschreibung (z.B. "Creating", "Deleting")

    Usage:
        @router.post("/events/{event_id}/shifts", status_code=201)
        @handle_route_errors("shift", "Creating")
        async def create_shift(event_id: int, payload: ShiftCreate, storage: Storage = Depends(get_storage)):
            ...
    """
    def decorator(func: Callable):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                return handle_db_exception(e, f"{operation} {entity_name}")

        return wrapper
    return decorator

"""Shifts Router - Schichten eines Events"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.dependencies import get_storage, require_authenticated_user
from app.models import Shift
from app.schemas import ShiftCreate, ShiftUpdate, ShiftResponse
from app.services.storage import Storage
from app.utils.datetime_utils import parse_iso_date, time_to_minutes
from app.utils.error_decorators import handle_route_errors
from app.utils.validators import Validators

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["shifts"], dependencies=[Depends(require_authenticated_user)])


def shift_sort_key(shift: Shift):
    """Sortierung nach Datum, dann Startzeit in Minuten seit Mitternacht"""
    return shift.shift_date, time_to_minutes(shift.start_time), shift.id


def _get_shift_or_404(storage: Storage, shift_id: int) -> Shift:
    shift = storage.get_shift(shift_id)
    if not shift:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Schicht nicht gefunden")
    return shift


@router.get("/events/{event_id}/shifts", response_model=List[ShiftResponse])
@handle_route_errors("shifts", "Loading")
async def list_shifts(event_id: int, storage: Storage = Depends(get_storage)):
    """Schichten eines Events, chronologisch sortiert"""
    shifts = sorted(storage.get_shifts(event_id), key=shift_sort_key)
    return [ShiftResponse.model_validate(shift) for shift in shifts]


@router.post("/events/{event_id}/shifts", response_model=ShiftResponse, status_code=status.HTTP_201_CREATED)
@handle_route_errors("shift", "Creating")
async def create_shift(event_id: int, payload: ShiftCreate, storage: Storage = Depends(get_storage)):
    """Legt eine Schicht an"""
    if not storage.get_event(event_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event nicht gefunden")

    shift = storage.create_shift({**payload.model_dump(), "event_id": event_id})
    return ShiftResponse.model_validate(shift)


@router.get("/events/{event_id}/shifts/date/{shift_date}", response_model=List[ShiftResponse])
@handle_route_errors("shifts", "Loading")
async def list_shifts_by_date(event_id: int, shift_date: str, storage: Storage = Depends(get_storage)):
    """Schichten eines Events an einem Tag (YYYY-MM-DD)"""
    day = parse_iso_date(shift_date)
    shifts = sorted(storage.get_shifts_by_date(event_id, day), key=shift_sort_key)
    return [ShiftResponse.model_validate(shift) for shift in shifts]


@router.get("/shifts/{shift_id}", response_model=ShiftResponse)
@handle_route_errors("shift", "Loading")
async def get_shift(shift_id: int, storage: Storage = Depends(get_storage)):
    """Einzelne Schicht"""
    return ShiftResponse.model_validate(_get_shift_or_404(storage, shift_id))


@router.put("/shifts/{shift_id}", response_model=ShiftResponse)
@handle_route_errors("shift", "Updating")
async def update_shift(shift_id: int, payload: ShiftUpdate, storage: Storage = Depends(get_storage)):
    """Aktualisiert die übergebenen Felder einer Schicht"""
    shift = _get_shift_or_404(storage, shift_id)
    updates = payload.model_dump(exclude_unset=True, exclude_none=True)

    # Zeitraum gegen gespeicherte Werte prüfen, bevor etwas geschrieben wird
    Validators.validate_time_range(
        updates.get("start_time", shift.start_time),
        updates.get("end_time", shift.end_time)
    )

    shift = storage.update_shift(shift_id, updates)
    logger.info(f"Shift {shift_id} updated")
    return ShiftResponse.model_validate(shift)


@router.delete("/shifts/{shift_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_route_errors("shift", "Deleting")
async def delete_shift(shift_id: int, storage: Storage = Depends(get_storage)):
    """Löscht eine Schicht samt ihrer Rollen-Zuordnungen"""
    if not storage.delete_shift(shift_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Schicht nicht gefunden")
    logger.info(f"Shift {shift_id} deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

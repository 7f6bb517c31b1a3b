"""Volunteers Router - Helferliste, Check-in per Liste und QR-Code"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.dependencies import get_storage, require_authenticated_user, get_current_user, resolve_checked_in_by
from app.models import User, Volunteer
from app.schemas import VolunteerCreate, VolunteerUpdate, VolunteerResponse, CheckInRequest, QrCheckInRequest
from app.services.qrcode_service import QRCodeService
from app.services.storage import Storage
from app.utils.error_decorators import handle_route_errors

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["volunteers"], dependencies=[Depends(require_authenticated_user)])


def matches_search(volunteer: Volunteer, search: str) -> bool:
    """Suchbegriff in Name, E-Mail, Rolle oder Team (ohne Groß-/Kleinschreibung)"""
    needle = search.strip().lower()
    if not needle:
        return True
    haystack = (volunteer.name, volunteer.email, volunteer.role, volunteer.team)
    return any(value and needle in value.lower() for value in haystack)


def _get_volunteer_or_404(storage: Storage, volunteer_id: int) -> Volunteer:
    volunteer = storage.get_volunteer(volunteer_id)
    if not volunteer:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Helfer nicht gefunden")
    return volunteer


@router.get("/events/{event_id}/volunteers", response_model=List[VolunteerResponse])
@handle_route_errors("volunteers", "Loading")
async def list_volunteers(
    event_id: int,
    search: Optional[str] = None,
    storage: Storage = Depends(get_storage)
):
    """Helfer eines Events, optional gefiltert"""
    volunteers = storage.get_volunteers(event_id)
    if search:
        volunteers = [v for v in volunteers if matches_search(v, search)]
    return [VolunteerResponse.model_validate(v) for v in volunteers]


@router.post(
    "/events/{event_id}/volunteers",
    response_model=VolunteerResponse,
    status_code=status.HTTP_201_CREATED
)
@handle_route_errors("volunteer", "Creating")
async def create_volunteer(event_id: int, payload: VolunteerCreate, storage: Storage = Depends(get_storage)):
    """Registriert einen Helfer für ein Event"""
    if not storage.get_event(event_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event nicht gefunden")

    volunteer = storage.create_volunteer({**payload.model_dump(), "event_id": event_id})
    return VolunteerResponse.model_validate(volunteer)


@router.get("/volunteers/{volunteer_id}", response_model=VolunteerResponse)
@handle_route_errors("volunteer", "Loading")
async def get_volunteer(volunteer_id: int, storage: Storage = Depends(get_storage)):
    """Einzelner Helfer"""
    return VolunteerResponse.model_validate(_get_volunteer_or_404(storage, volunteer_id))


@router.patch("/volunteers/{volunteer_id}", response_model=VolunteerResponse)
@handle_route_errors("volunteer", "Updating")
async def update_volunteer(
    volunteer_id: int,
    payload: VolunteerUpdate,
    user: Optional[User] = Depends(get_current_user),
    storage: Storage = Depends(get_storage)
):
    """
    Aktualisiert Helferdaten.

    checkedIn=false setzt den Check-in zurück. checkedIn=true auf einem
    noch nicht eingecheckten Helfer läuft wie der Check-in-Endpunkt und
    braucht einen checkedInBy (im Session-Modus der angemeldete Benutzer).
    """
    volunteer = _get_volunteer_or_404(storage, volunteer_id)
    updates = payload.model_dump(exclude_unset=True)
    requested_by = updates.pop("checked_in_by", None)

    if updates.get("checked_in") and not volunteer.checked_in:
        updates["checked_in_by"] = resolve_checked_in_by(user, requested_by)

    volunteer = storage.update_volunteer(volunteer_id, updates)
    logger.info(f"Volunteer {volunteer_id} updated")
    return VolunteerResponse.model_validate(volunteer)


@router.delete("/volunteers/{volunteer_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_route_errors("volunteer", "Deleting")
async def delete_volunteer(volunteer_id: int, storage: Storage = Depends(get_storage)):
    """Entfernt einen Helfer"""
    if not storage.delete_volunteer(volunteer_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Helfer nicht gefunden")
    logger.info(f"Volunteer {volunteer_id} deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/volunteers/{volunteer_id}/check-in", response_model=VolunteerResponse)
@handle_route_errors("volunteer", "Checking in")
async def check_in_volunteer(
    volunteer_id: int,
    payload: Optional[CheckInRequest] = None,
    user: Optional[User] = Depends(get_current_user),
    storage: Storage = Depends(get_storage)
):
    """Checkt einen Helfer aus der Liste ein"""
    checked_in_by = resolve_checked_in_by(user, payload.checked_in_by if payload else None)

    volunteer = storage.check_in_volunteer(volunteer_id, checked_in_by)
    if not volunteer:
        logger.warning(f"Check-in failed: volunteer {volunteer_id} not found")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Helfer nicht gefunden")

    logger.info(f"Volunteer {volunteer_id} checked in by '{checked_in_by}'")
    return VolunteerResponse.model_validate(volunteer)


@router.get("/volunteers/{volunteer_id}/qr-code")
@handle_route_errors("volunteer QR code", "Generating")
async def get_volunteer_qr_code(volunteer_id: int, storage: Storage = Depends(get_storage)):
    """QR-Code (PNG) für den Check-in eines Helfers"""
    volunteer = _get_volunteer_or_404(storage, volunteer_id)
    png = QRCodeService.generate_volunteer_qr_code(volunteer.id)
    return Response(
        content=png,
        media_type="image/png",
        headers={"Content-Disposition": f'inline; filename="volunteer-{volunteer.id}.png"'}
    )


@router.post("/check-in/qr", response_model=VolunteerResponse)
@handle_route_errors("volunteer", "Checking in by QR code")
async def check_in_by_qr_code(
    payload: QrCheckInRequest,
    user: Optional[User] = Depends(get_current_user),
    storage: Storage = Depends(get_storage)
):
    """Checkt einen Helfer über den gescannten QR-Code ein"""
    volunteer_id = QRCodeService.parse_volunteer_payload(payload.code)
    checked_in_by = resolve_checked_in_by(user, payload.checked_in_by)

    volunteer = storage.check_in_volunteer(volunteer_id, checked_in_by)
    if not volunteer:
        logger.warning(f"QR check-in failed: volunteer {volunteer_id} not found")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Helfer nicht gefunden")

    logger.info(f"Volunteer {volunteer_id} checked in by QR code ('{checked_in_by}')")
    return VolunteerResponse.model_validate(volunteer)

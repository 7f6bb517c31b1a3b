"""Events Router - Events anlegen, auflisten und Statistik"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies import get_storage, require_authenticated_user
from app.schemas import EventCreate, EventUpdate, EventResponse, EventWithVolunteerCount, EventStats
from app.services.storage import Storage
from app.utils.error_decorators import handle_route_errors

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["events"], dependencies=[Depends(require_authenticated_user)])


@router.get("/events", response_model=List[EventWithVolunteerCount])
@handle_route_errors("events", "Loading")
async def list_events(storage: Storage = Depends(get_storage)):
    """Alle Events inklusive Anzahl der Helfer"""
    events = storage.get_events()
    logger.debug(f"Found {len(events)} events")

    # Eine Abfrage pro Event, bei der Größenordnung unkritisch
    return [
        EventWithVolunteerCount(
            **EventResponse.model_validate(event).model_dump(),
            volunteer_count=len(storage.get_volunteers(event.id)),
        )
        for event in events
    ]


@router.get("/events/{event_id}", response_model=EventResponse)
@handle_route_errors("event", "Loading")
async def get_event(event_id: int, storage: Storage = Depends(get_storage)):
    """Einzelnes Event"""
    event = storage.get_event(event_id)
    if not event:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event nicht gefunden")
    return EventResponse.model_validate(event)


@router.post("/events", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
@handle_route_errors("event", "Creating")
async def create_event(payload: EventCreate, storage: Storage = Depends(get_storage)):
    """Legt ein Event an (date wird aus rawDates abgeleitet, falls vorhanden)"""
    event = storage.create_event(payload.model_dump())
    logger.info(f"Event {event.id} ('{event.name}') created for {event.date}")
    return EventResponse.model_validate(event)


@router.patch("/events/{event_id}", response_model=EventResponse)
@handle_route_errors("event", "Updating")
async def update_event(event_id: int, payload: EventUpdate, storage: Storage = Depends(get_storage)):
    """Aktualisiert die übergebenen Felder eines Events"""
    event = storage.update_event(event_id, payload.model_dump(exclude_unset=True))
    if not event:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event nicht gefunden")
    logger.info(f"Event {event_id} updated")
    return EventResponse.model_validate(event)


@router.get("/events/{event_id}/stats", response_model=EventStats)
@handle_route_errors("event stats", "Loading")
async def get_event_stats(event_id: int, storage: Storage = Depends(get_storage)):
    """Check-in Statistik {total, checkedIn, pending}"""
    return EventStats(**storage.get_event_stats(event_id))

"""Roles Router - Rollen eines Events"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.dependencies import get_storage, require_authenticated_user
from app.schemas import RoleCreate, RoleUpdate, RoleResponse
from app.services.storage import Storage
from app.utils.error_decorators import handle_route_errors

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["roles"], dependencies=[Depends(require_authenticated_user)])


@router.get("/events/{event_id}/roles", response_model=List[RoleResponse])
@handle_route_errors("roles", "Loading")
async def list_roles(event_id: int, storage: Storage = Depends(get_storage)):
    """Rollen eines Events"""
    return [RoleResponse.model_validate(role) for role in storage.get_roles(event_id)]


@router.post("/events/{event_id}/roles", response_model=RoleResponse, status_code=status.HTTP_201_CREATED)
@handle_route_errors("role", "Creating")
async def create_role(event_id: int, payload: RoleCreate, storage: Storage = Depends(get_storage)):
    """Legt eine Rolle an"""
    if not storage.get_event(event_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event nicht gefunden")

    role = storage.create_role({**payload.model_dump(), "event_id": event_id})
    return RoleResponse.model_validate(role)


@router.get("/roles/{role_id}", response_model=RoleResponse)
@handle_route_errors("role", "Loading")
async def get_role(role_id: int, storage: Storage = Depends(get_storage)):
    """Einzelne Rolle"""
    role = storage.get_role(role_id)
    if not role:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Rolle nicht gefunden")
    return RoleResponse.model_validate(role)


@router.patch("/roles/{role_id}", response_model=RoleResponse)
@handle_route_errors("role", "Updating")
async def update_role(role_id: int, payload: RoleUpdate, storage: Storage = Depends(get_storage)):
    """Aktualisiert Name und/oder Beschreibung einer Rolle"""
    role = storage.update_role(role_id, payload.model_dump(exclude_unset=True))
    if not role:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Rolle nicht gefunden")
    logger.info(f"Role {role_id} updated")
    return RoleResponse.model_validate(role)


@router.delete("/roles/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_route_errors("role", "Deleting")
async def delete_role(role_id: int, storage: Storage = Depends(get_storage)):
    """Löscht eine Rolle und alle ihre Schicht-Zuordnungen"""
    if not storage.delete_role(role_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Rolle nicht gefunden")
    logger.info(f"Role {role_id} deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

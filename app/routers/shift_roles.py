"""Shift-Roles Router - Zuordnung von Rollen zu Schichten"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.dependencies import get_storage, require_authenticated_user
from app.schemas import RoleResponse, ShiftRoleCreate, ShiftRolesReplace, ShiftRoleResponse, ShiftRoleWithRole
from app.services.storage import Storage, AssignedRole
from app.utils.error_decorators import handle_route_errors

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["shift-roles"], dependencies=[Depends(require_authenticated_user)])


def to_response(assigned: AssignedRole) -> ShiftRoleWithRole:
    """AssignedRole -> {id, shiftId, roleId, role}"""
    return ShiftRoleWithRole(
        id=assigned.shift_role.id,
        shift_id=assigned.shift_role.shift_id,
        role_id=assigned.shift_role.role_id,
        role=RoleResponse.model_validate(assigned.role),
    )


def _ensure_shift_exists(storage: Storage, shift_id: int) -> None:
    if not storage.get_shift(shift_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Schicht nicht gefunden")


@router.get("/shifts/{shift_id}/roles", response_model=List[ShiftRoleWithRole])
@handle_route_errors("shift roles", "Loading")
async def list_shift_roles(shift_id: int, storage: Storage = Depends(get_storage)):
    """Rollen einer Schicht"""
    _ensure_shift_exists(storage, shift_id)
    return [to_response(assigned) for assigned in storage.get_shift_roles(shift_id)]


@router.post("/shift-roles", response_model=ShiftRoleResponse, status_code=status.HTTP_201_CREATED)
@handle_route_errors("shift role", "Assigning")
async def assign_role_to_shift(payload: ShiftRoleCreate, storage: Storage = Depends(get_storage)):
    """Ordnet eine Rolle einer Schicht zu (idempotent)"""
    _ensure_shift_exists(storage, payload.shift_id)
    if not storage.get_role(payload.role_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Rolle nicht gefunden")

    shift_role = storage.assign_role_to_shift(payload.shift_id, payload.role_id)
    logger.info(f"Role {payload.role_id} assigned to shift {payload.shift_id}")
    return ShiftRoleResponse.model_validate(shift_role)


@router.put("/shifts/{shift_id}/roles", response_model=List[ShiftRoleWithRole])
@handle_route_errors("shift roles", "Replacing")
async def replace_shift_roles(shift_id: int, payload: ShiftRolesReplace, storage: Storage = Depends(get_storage)):
    """Ersetzt alle Rollen einer Schicht in einem Schritt"""
    _ensure_shift_exists(storage, shift_id)
    missing = [role_id for role_id in set(payload.role_ids) if not storage.get_role(role_id)]
    if missing:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Rolle(n) nicht gefunden: {', '.join(str(r) for r in sorted(missing))}"
        )

    assigned = storage.replace_shift_roles(shift_id, payload.role_ids)
    return [to_response(a) for a in assigned]


@router.delete("/shifts/{shift_id}/roles/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_route_errors("shift role", "Removing")
async def remove_role_from_shift(shift_id: int, role_id: int, storage: Storage = Depends(get_storage)):
    """Entfernt eine Rolle von einer Schicht"""
    if not storage.remove_role_from_shift(shift_id, role_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Zuordnung nicht gefunden")
    logger.info(f"Role {role_id} removed from shift {shift_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

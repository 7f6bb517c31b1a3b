"""Pydantic Schemas für Schicht-Rollen-Zuordnungen"""
from typing import List
from pydantic import Field

from app.schemas.base import ApiModel
from app.schemas.role import RoleResponse


class ShiftRoleCreate(ApiModel):
    """Rolle einer Schicht zuordnen"""
    shift_id: int = Field(..., gt=0)
    role_id: int = Field(..., gt=0)


class ShiftRolesReplace(ApiModel):
    """Alle Rollen einer Schicht atomar ersetzen"""
    role_ids: List[int] = Field(default_factory=list)


class ShiftRoleResponse(ApiModel):
    """Schema für die Antwort"""
    id: int
    shift_id: int
    role_id: int


class ShiftRoleWithRole(ShiftRoleResponse):
    """Zuordnung inklusive vollständiger Rolle"""
    role: RoleResponse

"""Pydantic Schemas für Validierung"""
from app.schemas.user import LoginRequest, UserUpdate, UserResponse
from app.schemas.event import EventCreate, EventUpdate, EventResponse, EventWithVolunteerCount, EventStats
from app.schemas.volunteer import (
    VolunteerCreate,
    VolunteerUpdate,
    VolunteerResponse,
    CheckInRequest,
    QrCheckInRequest,
)
from app.schemas.shift import ShiftCreate, ShiftUpdate, ShiftResponse
from app.schemas.role import RoleCreate, RoleUpdate, RoleResponse
from app.schemas.shift_role import ShiftRoleCreate, ShiftRolesReplace, ShiftRoleResponse, ShiftRoleWithRole

__all__ = [
    "LoginRequest",
    "UserUpdate",
    "UserResponse",
    "EventCreate",
    "EventUpdate",
    "EventResponse",
    "EventWithVolunteerCount",
    "EventStats",
    "VolunteerCreate",
    "VolunteerUpdate",
    "VolunteerResponse",
    "CheckInRequest",
    "QrCheckInRequest",
    "ShiftCreate",
    "ShiftUpdate",
    "ShiftResponse",
    "RoleCreate",
    "RoleUpdate",
    "RoleResponse",
    "ShiftRoleCreate",
    "ShiftRolesReplace",
    "ShiftRoleResponse",
    "ShiftRoleWithRole",
]

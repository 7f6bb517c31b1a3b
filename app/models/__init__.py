"""SQLAlchemy Models für den Helferplaner"""
from app.models.user import User
from app.models.event import Event
from app.models.volunteer import Volunteer
from app.models.shift import Shift
from app.models.role import Role
from app.models.shift_role import ShiftRole

__all__ = [
    "User",
    "Event",
    "Volunteer",
    "Shift",
    "Role",
    "ShiftRole",
]

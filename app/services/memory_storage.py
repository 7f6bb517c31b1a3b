"""In-Memory Storage (nur für Einzelprozess-Betrieb, Demo und Tests)"""
import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Type

from app.models import User, Event, Volunteer, Shift, Role, ShiftRole
from app.services.storage import Storage, AssignedRole, apply_check_in_rules
from app.utils.datetime_utils import get_utc_timestamp, to_day

logger = logging.getLogger(__name__)


class MemoryStorage(Storage):
    """
    Storage auf Basis von Dicts (id -> Model-Instanz).

    Die Instanzen sind transiente SQLAlchemy-Models ohne Session, damit beide
    Storage-Varianten dieselben Objekttypen liefern. Column-Defaults greifen
    ohne Session nicht und werden hier explizit gesetzt.
    """

    def __init__(self):
        self._tables: Dict[Type, Dict[int, Any]] = {
            User: {},
            Event: {},
            Volunteer: {},
            Shift: {},
            Role: {},
            ShiftRole: {},
        }
        self._next_ids: Dict[Type, int] = {model: 1 for model in self._tables}

    # ===== Hilfsfunktionen =====
    def _insert(self, model: Type, values: Dict[str, Any]):
        record_id = self._next_ids[model]
        self._next_ids[model] += 1
        record = model(id=record_id, **values)
        self._tables[model][record_id] = record
        return record

    def _update(self, model: Type, record_id: int, values: Dict[str, Any]):
        record = self._tables[model].get(record_id)
        if record is None:
            return None
        for key, value in values.items():
            setattr(record, key, value)
        return record

    def _delete(self, model: Type, record_id: int) -> bool:
        return self._tables[model].pop(record_id, None) is not None

    def _all(self, model: Type, **filters) -> List[Any]:
        return [
            record for record in self._tables[model].values()
            if all(getattr(record, key) == value for key, value in filters.items())
        ]

    # ===== Users =====
    def get_user(self, user_id: int) -> Optional[User]:
        return self._tables[User].get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        matches = self._all(User, username=username)
        return matches[0] if matches else None

    def create_user(self, data: Dict[str, Any]) -> User:
        now = get_utc_timestamp()
        user = self._insert(User, {"created_at": now, "updated_at": now, **data})
        logger.info(f"Created user {user.id} ('{user.username}')")
        return user

    def update_user(self, user_id: int, data: Dict[str, Any]) -> Optional[User]:
        return self._update(User, user_id, {**data, "updated_at": get_utc_timestamp()})

    # ===== Events =====
    def get_events(self) -> List[Event]:
        return self._all(Event)

    def get_event(self, event_id: int) -> Optional[Event]:
        return self._tables[Event].get(event_id)

    def create_event(self, data: Dict[str, Any]) -> Event:
        event = self._insert(Event, {"raw_dates": None, **data})
        logger.info(f"Created event {event.id} ('{event.name}')")
        return event

    def update_event(self, event_id: int, data: Dict[str, Any]) -> Optional[Event]:
        return self._update(Event, event_id, data)

    # ===== Volunteers =====
    def get_volunteers(self, event_id: int) -> List[Volunteer]:
        return self._all(Volunteer, event_id=event_id)

    def get_volunteer(self, volunteer_id: int) -> Optional[Volunteer]:
        return self._tables[Volunteer].get(volunteer_id)

    def create_volunteer(self, data: Dict[str, Any]) -> Volunteer:
        values = apply_check_in_rules({"checked_in": False, **data})
        values.setdefault("check_in_time", None)
        values.setdefault("checked_in_by", None)
        volunteer = self._insert(Volunteer, values)
        logger.info(f"Created volunteer {volunteer.id} for event {volunteer.event_id}")
        return volunteer

    def update_volunteer(self, volunteer_id: int, data: Dict[str, Any]) -> Optional[Volunteer]:
        volunteer = self.get_volunteer(volunteer_id)
        if volunteer is None:
            return None
        return self._update(Volunteer, volunteer_id, apply_check_in_rules(data, volunteer.checked_in))

    def delete_volunteer(self, volunteer_id: int) -> bool:
        return self._delete(Volunteer, volunteer_id)

    # ===== Shifts =====
    def get_shifts(self, event_id: int) -> List[Shift]:
        return self._all(Shift, event_id=event_id)

    def get_shift(self, shift_id: int) -> Optional[Shift]:
        return self._tables[Shift].get(shift_id)

    def get_shifts_by_date(self, event_id: int, shift_date: date) -> List[Shift]:
        day = to_day(shift_date)
        return [shift for shift in self.get_shifts(event_id) if to_day(shift.shift_date) == day]

    def create_shift(self, data: Dict[str, Any]) -> Shift:
        values = {"description": None, "max_volunteers": 0, **data}
        values["shift_date"] = to_day(values["shift_date"])
        shift = self._insert(Shift, values)
        logger.info(f"Created shift {shift.id} for event {shift.event_id} on {shift.shift_date}")
        return shift

    def update_shift(self, shift_id: int, data: Dict[str, Any]) -> Optional[Shift]:
        values = dict(data)
        if values.get("shift_date") is not None:
            values["shift_date"] = to_day(values["shift_date"])
        return self._update(Shift, shift_id, values)

    def delete_shift(self, shift_id: int) -> bool:
        for shift_role in self._all(ShiftRole, shift_id=shift_id):
            self._delete(ShiftRole, shift_role.id)
        return self._delete(Shift, shift_id)

    # ===== Roles =====
    def get_roles(self, event_id: int) -> List[Role]:
        return self._all(Role, event_id=event_id)

    def get_role(self, role_id: int) -> Optional[Role]:
        return self._tables[Role].get(role_id)

    def create_role(self, data: Dict[str, Any]) -> Role:
        role = self._insert(Role, {"description": None, **data})
        logger.info(f"Created role {role.id} ('{role.name}') for event {role.event_id}")
        return role

    def update_role(self, role_id: int, data: Dict[str, Any]) -> Optional[Role]:
        return self._update(Role, role_id, data)

    def delete_role(self, role_id: int) -> bool:
        for shift_role in self._all(ShiftRole, role_id=role_id):
            self._delete(ShiftRole, shift_role.id)
        return self._delete(Role, role_id)

    # ===== ShiftRoles =====
    def get_shift_roles(self, shift_id: int) -> List[AssignedRole]:
        assigned = []
        for shift_role in self._all(ShiftRole, shift_id=shift_id):
            role = self.get_role(shift_role.role_id)
            if role is not None:
                assigned.append(AssignedRole(shift_role, role))
        return assigned

    def assign_role_to_shift(self, shift_id: int, role_id: int) -> ShiftRole:
        existing = self._all(ShiftRole, shift_id=shift_id, role_id=role_id)
        if existing:
            return existing[0]
        return self._insert(ShiftRole, {"shift_id": shift_id, "role_id": role_id})

    def remove_role_from_shift(self, shift_id: int, role_id: int) -> bool:
        existing = self._all(ShiftRole, shift_id=shift_id, role_id=role_id)
        if not existing:
            return False
        return self._delete(ShiftRole, existing[0].id)

    def replace_shift_roles(self, shift_id: int, role_ids: Iterable[int]) -> List[AssignedRole]:
        wanted = set(role_ids)
        for shift_role in self._all(ShiftRole, shift_id=shift_id):
            if shift_role.role_id not in wanted:
                self._delete(ShiftRole, shift_role.id)
        for role_id in sorted(wanted):
            self.assign_role_to_shift(shift_id, role_id)
        return self.get_shift_roles(shift_id)

    # ===== Sonstiges =====
    def is_empty(self) -> bool:
        return not self._tables[Event]

"""Persistenter Storage auf Basis einer SQLAlchemy-Session"""
import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Type

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.database import transaction
from app.models import User, Event, Volunteer, Shift, Role, ShiftRole
from app.services.storage import Storage, AssignedRole, apply_check_in_rules
from app.utils.datetime_utils import to_day

logger = logging.getLogger(__name__)


class DatabaseStorage(Storage):
    """
    Storage-Implementierung über die Datenbank.

    Eine Instanz pro Request (bzw. pro Session). Mehrteilige Schreibvorgänge
    (Rolle löschen, Schicht löschen, Zuordnungen ersetzen) laufen in einer
    Transaktion.
    """

    def __init__(self, db: Session):
        self.db = db

    # ===== Hilfsfunktionen =====
    def _get(self, model: Type, record_id: int):
        return self.db.get(model, record_id)

    def _insert(self, model: Type, values: Dict[str, Any]):
        with transaction(self.db):
            record = model(**values)
            self.db.add(record)
        self.db.refresh(record)
        return record

    def _update(self, model: Type, record_id: int, values: Dict[str, Any]):
        record = self._get(model, record_id)
        if record is None:
            return None
        with transaction(self.db):
            for key, value in values.items():
                setattr(record, key, value)
        self.db.refresh(record)
        return record

    def _delete(self, model: Type, record_id: int) -> bool:
        record = self._get(model, record_id)
        if record is None:
            return False
        with transaction(self.db):
            self.db.delete(record)
        return True

    # ===== Users =====
    def get_user(self, user_id: int) -> Optional[User]:
        return self._get(User, user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def create_user(self, data: Dict[str, Any]) -> User:
        user = self._insert(User, data)
        logger.info(f"Created user {user.id} ('{user.username}')")
        return user

    def update_user(self, user_id: int, data: Dict[str, Any]) -> Optional[User]:
        return self._update(User, user_id, data)

    # ===== Events =====
    def get_events(self) -> List[Event]:
        return self.db.query(Event).order_by(Event.id).all()

    def get_event(self, event_id: int) -> Optional[Event]:
        return self._get(Event, event_id)

    def create_event(self, data: Dict[str, Any]) -> Event:
        event = self._insert(Event, data)
        logger.info(f"Created event {event.id} ('{event.name}')")
        return event

    def update_event(self, event_id: int, data: Dict[str, Any]) -> Optional[Event]:
        return self._update(Event, event_id, data)

    # ===== Volunteers =====
    def get_volunteers(self, event_id: int) -> List[Volunteer]:
        return self.db.query(Volunteer).filter(
            Volunteer.event_id == event_id
        ).order_by(Volunteer.id).all()

    def get_volunteer(self, volunteer_id: int) -> Optional[Volunteer]:
        return self._get(Volunteer, volunteer_id)

    def create_volunteer(self, data: Dict[str, Any]) -> Volunteer:
        volunteer = self._insert(Volunteer, apply_check_in_rules({"checked_in": False, **data}))
        logger.info(f"Created volunteer {volunteer.id} for event {volunteer.event_id}")
        return volunteer

    def update_volunteer(self, volunteer_id: int, data: Dict[str, Any]) -> Optional[Volunteer]:
        volunteer = self.get_volunteer(volunteer_id)
        if volunteer is None:
            return None
        return self._update(Volunteer, volunteer_id, apply_check_in_rules(data, volunteer.checked_in))

    def delete_volunteer(self, volunteer_id: int) -> bool:
        return self._delete(Volunteer, volunteer_id)

    def get_event_stats(self, event_id: int) -> Dict[str, int]:
        total = self.db.query(Volunteer).filter(Volunteer.event_id == event_id).count()
        checked_in = self.db.query(Volunteer).filter(
            Volunteer.event_id == event_id,
            Volunteer.checked_in == True  # noqa: E712
        ).count()
        return {"total": total, "checked_in": checked_in, "pending": total - checked_in}

    # ===== Shifts =====
    def get_shifts(self, event_id: int) -> List[Shift]:
        return self.db.query(Shift).filter(Shift.event_id == event_id).order_by(Shift.id).all()

    def get_shift(self, shift_id: int) -> Optional[Shift]:
        return self._get(Shift, shift_id)

    def get_shifts_by_date(self, event_id: int, shift_date: date) -> List[Shift]:
        # shift_date ist eine Date-Spalte, Vergleich damit immer auf Tagesebene
        return self.db.query(Shift).filter(
            Shift.event_id == event_id,
            Shift.shift_date == to_day(shift_date)
        ).order_by(Shift.id).all()

    def create_shift(self, data: Dict[str, Any]) -> Shift:
        values = dict(data)
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
        shift = self.get_shift(shift_id)
        if shift is None:
            return False
        with transaction(self.db):
            self.db.query(ShiftRole).filter(ShiftRole.shift_id == shift_id).delete(synchronize_session=False)
            self.db.delete(shift)
        logger.info(f"Deleted shift {shift_id} including its role assignments")
        return True

    # ===== Roles =====
    def get_roles(self, event_id: int) -> List[Role]:
        return self.db.query(Role).filter(Role.event_id == event_id).order_by(Role.id).all()

    def get_role(self, role_id: int) -> Optional[Role]:
        return self._get(Role, role_id)

    def create_role(self, data: Dict[str, Any]) -> Role:
        role = self._insert(Role, data)
        logger.info(f"Created role {role.id} ('{role.name}') for event {role.event_id}")
        return role

    def update_role(self, role_id: int, data: Dict[str, Any]) -> Optional[Role]:
        return self._update(Role, role_id, data)

    def delete_role(self, role_id: int) -> bool:
        role = self.get_role(role_id)
        if role is None:
            return False
        with transaction(self.db):
            removed = self.db.query(ShiftRole).filter(
                ShiftRole.role_id == role_id
            ).delete(synchronize_session=False)
            self.db.delete(role)
        logger.info(f"Deleted role {role_id} and {removed} shift assignment(s)")
        return True

    # ===== ShiftRoles =====
    def get_shift_roles(self, shift_id: int) -> List[AssignedRole]:
        rows = self.db.query(ShiftRole, Role).join(
            Role, Role.id == ShiftRole.role_id
        ).filter(
            ShiftRole.shift_id == shift_id
        ).order_by(ShiftRole.id).all()
        return [AssignedRole(shift_role, role) for shift_role, role in rows]

    def _find_shift_role(self, shift_id: int, role_id: int) -> Optional[ShiftRole]:
        return self.db.query(ShiftRole).filter(
            ShiftRole.shift_id == shift_id,
            ShiftRole.role_id == role_id
        ).first()

    def assign_role_to_shift(self, shift_id: int, role_id: int) -> ShiftRole:
        existing = self._find_shift_role(shift_id, role_id)
        if existing is not None:
            return existing
        try:
            return self._insert(ShiftRole, {"shift_id": shift_id, "role_id": role_id})
        except IntegrityError:
            # Paar wurde zwischenzeitlich angelegt (Unique-Constraint)
            logger.warning(f"Shift role ({shift_id}, {role_id}) already exists, returning existing row")
            existing = self._find_shift_role(shift_id, role_id)
            if existing is None:
                raise
            return existing

    def remove_role_from_shift(self, shift_id: int, role_id: int) -> bool:
        existing = self._find_shift_role(shift_id, role_id)
        if existing is None:
            return False
        with transaction(self.db):
            self.db.delete(existing)
        return True

    def replace_shift_roles(self, shift_id: int, role_ids: Iterable[int]) -> List[AssignedRole]:
        wanted = set(role_ids)
        with transaction(self.db):
            current = self.db.query(ShiftRole).filter(ShiftRole.shift_id == shift_id).all()
            current_ids = {shift_role.role_id for shift_role in current}
            for shift_role in current:
                if shift_role.role_id not in wanted:
                    self.db.delete(shift_role)
            for role_id in sorted(wanted - current_ids):
                self.db.add(ShiftRole(shift_id=shift_id, role_id=role_id))
        logger.info(f"Replaced role assignments of shift {shift_id}: {sorted(wanted)}")
        return self.get_shift_roles(shift_id)

    # ===== Sonstiges =====
    def is_empty(self) -> bool:
        return self.db.query(Event.id).first() is None

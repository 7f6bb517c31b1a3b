"""Storage-Schnittstelle für alle Entities (Speicher- und Datenbank-Variante)"""
import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Dict, Iterable, List, NamedTuple, Optional

from app.models import User, Event, Volunteer, Shift, Role, ShiftRole
from app.utils.datetime_utils import get_utc_timestamp

logger = logging.getLogger(__name__)


class AssignedRole(NamedTuple):
    """ShiftRole-Zeile zusammen mit der vollständigen Rolle"""
    shift_role: ShiftRole
    role: Role


def apply_check_in_rules(values: Dict[str, Any], was_checked_in: bool = False) -> Dict[str, Any]:
    """
    Erzwingt die Check-in Invariante auf einem Create/Update-Dict.

    - checked_in=False: check_in_time und checked_in_by werden geleert
    - checked_in=True ohne Zeitpunkt: check_in_time wird auf jetzt gesetzt
      (außer der Helfer war bereits eingecheckt)
    - Wechsel auf eingecheckt braucht checked_in_by
    - checked_in=None wird wie "nicht gesetzt" behandelt

    Args:
        values: Felder, die geschrieben werden sollen (wird kopiert)
        was_checked_in: Bisheriger Status (nur bei Updates relevant)

    Returns:
        Bereinigtes Dict

    Raises:
        ValueError: checked_in=True ohne checked_in_by bei einem neuen Check-in
    """
    values = dict(values)
    if values.get("checked_in") is None:
        values.pop("checked_in", None)
        return values

    if not values["checked_in"]:
        values["check_in_time"] = None
        values["checked_in_by"] = None
    elif not was_checked_in:
        if not values.get("checked_in_by"):
            raise ValueError("checkedInBy muss angegeben werden")
        if not values.get("check_in_time"):
            values["check_in_time"] = get_utc_timestamp()

    return values


def count_check_ins(volunteers: Iterable[Volunteer]) -> Dict[str, int]:
    """
    Zählt Helfer eines Events nach Check-in Status.

    Returns:
        {"total", "checked_in", "pending"} mit pending = total - checked_in
    """
    volunteers = list(volunteers)
    total = len(volunteers)
    checked_in = sum(1 for v in volunteers if v.checked_in)
    return {"total": total, "checked_in": checked_in, "pending": total - checked_in}


class Storage(ABC):
    """
    Einheitliche CRUD- und Abfrage-Schnittstelle über alle Entities.

    "Nicht gefunden" ist ein normales Ergebnis (None bzw. False), kein Fehler.
    Unerwartete Backend-Fehler werden als Exception weitergereicht.
    update_* führt nur die übergebenen Felder zusammen und legt nie neu an.
    """

    # ===== Users =====
    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]:
        ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    @abstractmethod
    def create_user(self, data: Dict[str, Any]) -> User:
        ...

    @abstractmethod
    def update_user(self, user_id: int, data: Dict[str, Any]) -> Optional[User]:
        ...

    # ===== Events =====
    @abstractmethod
    def get_events(self) -> List[Event]:
        ...

    @abstractmethod
    def get_event(self, event_id: int) -> Optional[Event]:
        ...

    @abstractmethod
    def create_event(self, data: Dict[str, Any]) -> Event:
        ...

    @abstractmethod
    def update_event(self, event_id: int, data: Dict[str, Any]) -> Optional[Event]:
        ...

    # ===== Volunteers =====
    @abstractmethod
    def get_volunteers(self, event_id: int) -> List[Volunteer]:
        ...

    @abstractmethod
    def get_volunteer(self, volunteer_id: int) -> Optional[Volunteer]:
        ...

    @abstractmethod
    def create_volunteer(self, data: Dict[str, Any]) -> Volunteer:
        ...

    @abstractmethod
    def update_volunteer(self, volunteer_id: int, data: Dict[str, Any]) -> Optional[Volunteer]:
        ...

    @abstractmethod
    def delete_volunteer(self, volunteer_id: int) -> bool:
        ...

    def check_in_volunteer(self, volunteer_id: int, checked_in_by: str) -> Optional[Volunteer]:
        """Setzt checked_in, check_in_time (jetzt) und checked_in_by gemeinsam"""
        return self.update_volunteer(volunteer_id, {
            "checked_in": True,
            "check_in_time": get_utc_timestamp(),
            "checked_in_by": checked_in_by,
        })

    def get_event_stats(self, event_id: int) -> Dict[str, int]:
        """Check-in Statistik: {"total", "checked_in", "pending"}"""
        return count_check_ins(self.get_volunteers(event_id))

    # ===== Shifts =====
    @abstractmethod
    def get_shifts(self, event_id: int) -> List[Shift]:
        ...

    @abstractmethod
    def get_shift(self, shift_id: int) -> Optional[Shift]:
        ...

    @abstractmethod
    def get_shifts_by_date(self, event_id: int, shift_date: date) -> List[Shift]:
        ...

    @abstractmethod
    def create_shift(self, data: Dict[str, Any]) -> Shift:
        ...

    @abstractmethod
    def update_shift(self, shift_id: int, data: Dict[str, Any]) -> Optional[Shift]:
        ...

    @abstractmethod
    def delete_shift(self, shift_id: int) -> bool:
        ...

    # ===== Roles =====
    @abstractmethod
    def get_roles(self, event_id: int) -> List[Role]:
        ...

    @abstractmethod
    def get_role(self, role_id: int) -> Optional[Role]:
        ...

    @abstractmethod
    def create_role(self, data: Dict[str, Any]) -> Role:
        ...

    @abstractmethod
    def update_role(self, role_id: int, data: Dict[str, Any]) -> Optional[Role]:
        ...

    @abstractmethod
    def delete_role(self, role_id: int) -> bool:
        """Löscht erst alle ShiftRoles der Rolle, dann die Rolle selbst"""
        ...

    # ===== ShiftRoles =====
    @abstractmethod
    def get_shift_roles(self, shift_id: int) -> List[AssignedRole]:
        ...

    @abstractmethod
    def assign_role_to_shift(self, shift_id: int, role_id: int) -> ShiftRole:
        """Idempotent: existiert das Paar bereits, wird die vorhandene Zeile zurückgegeben"""
        ...

    @abstractmethod
    def remove_role_from_shift(self, shift_id: int, role_id: int) -> bool:
        ...

    @abstractmethod
    def replace_shift_roles(self, shift_id: int, role_ids: Iterable[int]) -> List[AssignedRole]:
        """Ersetzt alle Zuordnungen einer Schicht durch role_ids (atomar)"""
        ...

    # ===== Sonstiges =====
    @abstractmethod
    def is_empty(self) -> bool:
        """True wenn noch kein Event existiert (für das Demo-Daten-Seeding)"""
        ...

"""Geführte Einrichtung eines Events (Event, Schichten, Rollen, Zuordnung)"""
import enum
import logging
from typing import Any, Dict, Iterable, List, Optional

from app.client.api_client import VolunteerApiClient
from app.client.assignment_editor import ShiftRoleAssignmentEditor

logger = logging.getLogger(__name__)


class SetupStage(str, enum.Enum):
    """Schritte der Event-Einrichtung in fester Reihenfolge"""
    CREATE_EVENT = "create_event"
    CREATE_SHIFTS = "create_shifts"
    CREATE_ROLES = "create_roles"
    ASSIGN_ROLES = "assign_roles"
    EVENT_CONFIRMATION = "event_confirmation"


_STAGE_ORDER = list(SetupStage)


class FlowError(Exception):
    """Schritt in falscher Reihenfolge aufgerufen"""


class EventSetupFlow:
    """
    Führt durch die Einrichtung eines neuen Events.

    Jeder Schritt ruft die API auf und geht nur bei Erfolg zum nächsten
    Schritt weiter. Der Fortschritt existiert nur im Client.
    """

    def __init__(self, api: VolunteerApiClient):
        self.api = api
        self.stage = SetupStage.CREATE_EVENT
        self.event: Optional[Dict[str, Any]] = None
        self.shifts: List[Dict[str, Any]] = []
        self.roles: List[Dict[str, Any]] = []
        self.editor: Optional[ShiftRoleAssignmentEditor] = None

    def _expect(self, stage: SetupStage) -> None:
        if self.stage != stage:
            raise FlowError(f"Schritt '{stage.value}' nicht möglich, aktueller Schritt: '{self.stage.value}'")

    def _advance(self) -> None:
        self.stage = _STAGE_ORDER[_STAGE_ORDER.index(self.stage) + 1]
        logger.debug(f"Setup flow advanced to {self.stage.value}")

    def create_event(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self._expect(SetupStage.CREATE_EVENT)
        self.event = self.api.create_event(data)
        self._advance()
        return self.event

    def create_shifts(self, shifts: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Legt alle Schichten an (z.B. pro Event-Tag) und lädt die sortierte Liste"""
        self._expect(SetupStage.CREATE_SHIFTS)
        for data in shifts:
            self.api.create_shift(self.event["id"], data)
        self.shifts = self.api.list_shifts(self.event["id"])
        self._advance()
        return self.shifts

    def create_roles(self, roles: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
        self._expect(SetupStage.CREATE_ROLES)
        self.roles = [self.api.create_role(self.event["id"], data) for data in roles]
        self.editor = ShiftRoleAssignmentEditor(self.api, self.event["id"])
        self.editor.load()
        self._advance()
        return self.roles

    def assign_roles(self, atomic: bool = False) -> Dict[int, set]:
        """
        Speichert die im Editor vorgenommenen Zuordnungen.

        Args:
            atomic: save_atomic() statt save() verwenden
        """
        self._expect(SetupStage.ASSIGN_ROLES)
        if atomic:
            self.editor.save_atomic()
        else:
            self.editor.save()
        self._advance()
        return self.editor.assignments

    def confirmation(self) -> Dict[str, Any]:
        """Zusammenfassung des eingerichteten Events"""
        self._expect(SetupStage.EVENT_CONFIRMATION)
        return {
            "event": self.api.get_event(self.event["id"]),
            "shifts": self.api.list_shifts(self.event["id"]),
            "roles": self.api.list_roles(self.event["id"]),
            "assignments": {
                shift["id"]: self.api.get_shift_roles(shift["id"])
                for shift in self.shifts
            },
        }

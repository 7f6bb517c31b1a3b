"""Lokaler Editor für die Zuordnung von Rollen zu Schichten"""
import logging
from typing import Dict, Iterable, Set

from app.client.api_client import VolunteerApiClient

logger = logging.getLogger(__name__)


class ShiftRoleAssignmentEditor:
    """
    Hält die Zuordnung shift_id -> {role_id} lokal und synchronisiert sie
    mit dem Server.

    save() ersetzt alle Zuordnungen per Löschen und Neuanlegen,
    save_atomic() nutzt stattdessen PUT /api/shifts/{id}/roles.
    Nach beiden entspricht der Serverstand dem lokalen Stand.
    """

    def __init__(self, api: VolunteerApiClient, event_id: int):
        self.api = api
        self.event_id = event_id
        self.assignments: Dict[int, Set[int]] = {}

    @property
    def shift_ids(self) -> Iterable[int]:
        return sorted(self.assignments)

    def load(self) -> Dict[int, Set[int]]:
        """Lädt die Zuordnungen aller Schichten des Events"""
        self.assignments = {}
        for shift in self.api.list_shifts(self.event_id):
            current = self.api.get_shift_roles(shift["id"])
            self.assignments[shift["id"]] = {row["roleId"] for row in current}
        logger.debug(f"Loaded role assignments for {len(self.assignments)} shifts of event {self.event_id}")
        return self.assignments

    def toggle(self, shift_id: int, role_id: int) -> bool:
        """
        Schaltet die Zuordnung lokal um.

        Returns:
            True wenn die Rolle danach zugeordnet ist
        """
        roles = self.assignments.setdefault(shift_id, set())
        if role_id in roles:
            roles.remove(role_id)
            return False
        roles.add(role_id)
        return True

    def is_assigned(self, shift_id: int, role_id: int) -> bool:
        return role_id in self.assignments.get(shift_id, set())

    def save(self) -> None:
        """Löscht alle Zuordnungen auf dem Server und legt die lokalen neu an"""
        for shift_id in self.shift_ids:
            for row in self.api.get_shift_roles(shift_id):
                self.api.remove_role(shift_id, row["roleId"])

        for shift_id in self.shift_ids:
            for role_id in sorted(self.assignments[shift_id]):
                self.api.assign_role(shift_id, role_id)

        logger.info(f"Saved role assignments for {len(self.assignments)} shifts of event {self.event_id}")

    def save_atomic(self) -> None:
        """Ersetzt die Zuordnungen jeder Schicht mit einem Aufruf"""
        for shift_id in self.shift_ids:
            self.api.replace_shift_roles(shift_id, self.assignments[shift_id])
        logger.info(f"Replaced role assignments for {len(self.assignments)} shifts of event {self.event_id}")

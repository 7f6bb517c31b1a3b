"""Python-Client für die Helferplaner-API (Event-Einrichtung und Rollen-Zuordnung)"""
from app.client.api_client import VolunteerApiClient, ApiError
from app.client.assignment_editor import ShiftRoleAssignmentEditor
from app.client.setup_flow import EventSetupFlow, SetupStage, FlowError

__all__ = [
    "VolunteerApiClient",
    "ApiError",
    "ShiftRoleAssignmentEditor",
    "EventSetupFlow",
    "SetupStage",
    "FlowError",
]

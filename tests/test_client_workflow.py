"""Tests für den API-Client, den Zuordnungs-Editor und die Event-Einrichtung"""
import pytest

from app.client import (
    ApiError,
    EventSetupFlow,
    FlowError,
    SetupStage,
    ShiftRoleAssignmentEditor,
    VolunteerApiClient,
)


@pytest.fixture
def api(client):
    """API-Client über den TestClient"""
    return VolunteerApiClient(client=client)


def server_assignments(api, shift_ids):
    return {shift_id: {row["roleId"] for row in api.get_shift_roles(shift_id)} for shift_id in shift_ids}


@pytest.mark.integration
class TestApiClient:
    """VolunteerApiClient gegen die App"""

    def test_create_and_fetch_event(self, api):
        """Test: Event anlegen und laden"""
        event = api.create_event({
            "name": "Food Drive",
            "rawDates": ["2023-05-20"],
            "time": "10:00 AM - 2:00 PM",
            "location": "Community Center",
        })
        assert api.get_event(event["id"])["date"] == "May 20, 2023"
        assert [e["name"] for e in api.list_events()] == ["Food Drive"]

    def test_error_raises_api_error(self, api):
        """Test: Nicht-2xx wird zu ApiError mit Status und Detail"""
        with pytest.raises(ApiError) as exc_info:
            api.get_event(999)
        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Event nicht gefunden"

    def test_delete_returns_none(self, api, sample_volunteers):
        """Test: 204-Antworten liefern None"""
        assert api.delete_volunteer(sample_volunteers[0].id) is None

    def test_qr_code_bytes(self, api, sample_volunteers):
        """Test: QR-Code als PNG-Bytes"""
        assert api.get_volunteer_qr_code(sample_volunteers[0].id).startswith(b"\x89PNG")

    def test_check_in_and_stats(self, api, sample_event, sample_volunteers):
        """Test: Check-in über den Client"""
        volunteer = api.check_in(sample_volunteers[0].id, "Desk 1")
        assert volunteer["checkedIn"] is True
        assert api.get_event_stats(sample_event.id)["checkedIn"] == 2


@pytest.mark.integration
class TestAssignmentEditor:
    """ShiftRoleAssignmentEditor"""

    def test_load_reads_server_state(self, api, storage, sample_event, sample_shifts, sample_roles):
        """Test: load() übernimmt die vorhandenen Zuordnungen"""
        storage.assign_role_to_shift(sample_shifts[0].id, sample_roles[0].id)

        editor = ShiftRoleAssignmentEditor(api, sample_event.id)
        editor.load()

        assert set(editor.assignments) == {s.id for s in sample_shifts}
        assert editor.is_assigned(sample_shifts[0].id, sample_roles[0].id)
        assert not editor.is_assigned(sample_shifts[1].id, sample_roles[0].id)

    def test_toggle(self, api, sample_event, sample_shifts, sample_roles):
        """Test: toggle() schaltet lokal um"""
        editor = ShiftRoleAssignmentEditor(api, sample_event.id)
        editor.load()
        shift_id, role_id = sample_shifts[0].id, sample_roles[0].id

        assert editor.toggle(shift_id, role_id) is True
        assert editor.is_assigned(shift_id, role_id)
        assert editor.toggle(shift_id, role_id) is False
        assert not editor.is_assigned(shift_id, role_id)
        # Noch nichts gespeichert
        assert api.get_shift_roles(shift_id) == []

    @pytest.mark.parametrize("atomic", [False, True])
    def test_save_matches_local_state(self, api, storage, sample_event, sample_shifts, sample_roles, atomic):
        """Test: Nach dem Speichern entspricht der Server dem lokalen Stand"""
        storage.assign_role_to_shift(sample_shifts[0].id, sample_roles[0].id)
        storage.assign_role_to_shift(sample_shifts[1].id, sample_roles[1].id)

        editor = ShiftRoleAssignmentEditor(api, sample_event.id)
        editor.load()
        editor.toggle(sample_shifts[0].id, sample_roles[0].id)  # entfernen
        editor.toggle(sample_shifts[0].id, sample_roles[2].id)  # hinzufügen
        editor.toggle(sample_shifts[2].id, sample_roles[1].id)  # hinzufügen

        if atomic:
            editor.save_atomic()
        else:
            editor.save()

        shift_ids = [s.id for s in sample_shifts]
        assert server_assignments(api, shift_ids) == {
            shift_id: editor.assignments[shift_id] for shift_id in shift_ids
        }
        assert server_assignments(api, [sample_shifts[0].id])[sample_shifts[0].id] == {sample_roles[2].id}


@pytest.mark.integration
class TestEventSetupFlow:
    """EventSetupFlow über alle Schritte"""

    def test_full_flow(self, api):
        """Test: Event, Schichten, Rollen, Zuordnung, Bestätigung"""
        flow = EventSetupFlow(api)
        assert flow.stage == SetupStage.CREATE_EVENT

        event = flow.create_event({
            "name": "Charity Run",
            "rawDates": ["2024-06-05", "2024-06-06"],
            "time": "7:00 AM - 10:00 AM",
            "location": "Downtown Plaza",
        })
        assert event["date"] == "June 5, 2024 to June 6, 2024"
        assert flow.stage == SetupStage.CREATE_SHIFTS

        shifts = flow.create_shifts([
            {"shiftDate": "2024-06-06", "title": "Finish Line", "startTime": "8:00 AM", "endTime": "10:00 AM"},
            {"shiftDate": "2024-06-05", "title": "Water Station", "startTime": "10:00 AM", "endTime": "11:00 AM"},
            {"shiftDate": "2024-06-05", "title": "Start Line", "startTime": "7:00 AM", "endTime": "9:00 AM"},
        ])
        assert [s["title"] for s in shifts] == ["Start Line", "Water Station", "Finish Line"]
        assert flow.stage == SetupStage.CREATE_ROLES

        roles = flow.create_roles([{"name": "Marshal"}, {"name": "First Aid"}])
        assert flow.stage == SetupStage.ASSIGN_ROLES

        flow.editor.toggle(shifts[0]["id"], roles[0]["id"])
        flow.editor.toggle(shifts[0]["id"], roles[1]["id"])
        flow.editor.toggle(shifts[2]["id"], roles[1]["id"])
        flow.assign_roles()
        assert flow.stage == SetupStage.EVENT_CONFIRMATION

        summary = flow.confirmation()
        assert summary["event"]["name"] == "Charity Run"
        assert len(summary["shifts"]) == 3
        assert {r["roleId"] for r in summary["assignments"][shifts[0]["id"]]} == {roles[0]["id"], roles[1]["id"]}
        assert summary["assignments"][shifts[1]["id"]] == []

    def test_out_of_order_step(self, api):
        """Test: Schritt in falscher Reihenfolge"""
        flow = EventSetupFlow(api)
        with pytest.raises(FlowError):
            flow.create_roles([{"name": "Marshal"}])
        assert flow.stage == SetupStage.CREATE_EVENT

    def test_failed_step_does_not_advance(self, api):
        """Test: API-Fehler lässt den Schritt unverändert"""
        flow = EventSetupFlow(api)
        with pytest.raises(ApiError) as exc_info:
            flow.create_event({"name": "X", "time": "9", "location": "Park"})
        assert exc_info.value.status_code == 400
        assert flow.stage == SetupStage.CREATE_EVENT

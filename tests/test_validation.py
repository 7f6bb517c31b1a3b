"""Tests für Pydantic-Validierung (Events, Helfer, Schichten, Rollen)"""
import pytest
from datetime import date
from pydantic import ValidationError

from app.schemas import (
    EventCreate,
    EventUpdate,
    VolunteerCreate,
    VolunteerUpdate,
    ShiftCreate,
    ShiftUpdate,
    RoleCreate,
    RoleUpdate,
    ShiftRoleCreate,
    ShiftRolesReplace,
    LoginRequest,
)


@pytest.mark.unit
class TestEventValidation:
    """Tests für Event-Schemas und die abgeleitete Datumsanzeige"""

    def test_single_day(self):
        """Test: Ein Tag wird als "May 1, 2024" angezeigt"""
        event = EventCreate(name="Cleanup", rawDates="2024-05-01", time="9:00 AM", location="Park")
        assert event.date == "May 1, 2024"
        assert event.raw_dates == "2024-05-01"

    def test_consecutive_days(self):
        """Test: Lückenloser Zeitraum wird als "X to Y" angezeigt"""
        event = EventCreate(
            name="Festival",
            raw_dates=["2024-05-03", "2024-05-01", "2024-05-02"],
            time="All day",
            location="Park",
        )
        assert event.date == "May 1, 2024 to May 3, 2024"
        assert event.raw_dates == "2024-05-01|2024-05-02|2024-05-03"

    def test_non_consecutive_days(self):
        """Test: Einzelne Tage werden als Liste angezeigt"""
        event = EventCreate(name="Series", rawDates="2024-05-01|2024-05-03", time="9", location="Park")
        assert event.date == "May 1, 2024, May 3, 2024"

    def test_duplicate_days_removed(self):
        """Test: Doppelte Tage zählen einmal"""
        event = EventCreate(name="X", rawDates="2024-05-01|2024-05-01", time="9", location="Park")
        assert event.raw_dates == "2024-05-01"
        assert event.date == "May 1, 2024"

    def test_raw_dates_override_date(self):
        """Test: Mit rawDates wird ein übergebenes date ignoriert"""
        event = EventCreate(name="X", date="irgendwann", rawDates="2024-06-05", time="9", location="Plaza")
        assert event.date == "June 5, 2024"

    def test_free_text_date_without_raw_dates(self):
        """Test: Ohne rawDates bleibt der Anzeige-String erhalten"""
        event = EventCreate(name="Food Drive", date=" May 20, 2023 ", time="10:00 AM", location="Center")
        assert event.date == "May 20, 2023"
        assert event.raw_dates is None

    def test_missing_date(self):
        """Test: Weder date noch rawDates"""
        with pytest.raises(ValidationError) as exc_info:
            EventCreate(name="X", time="9", location="Park")
        assert "Datum oder rawDates" in str(exc_info.value)

    def test_invalid_raw_date(self):
        """Test: Ungültiges ISO-Datum in rawDates"""
        with pytest.raises(ValidationError):
            EventCreate(name="X", rawDates="2024-13-01", time="9", location="Park")

    def test_empty_name(self):
        """Test: Leerer Name ist ungültig"""
        with pytest.raises(ValidationError) as exc_info:
            EventCreate(name="   ", date="May 1, 2024", time="9", location="Park")
        assert "Name darf nicht leer sein" in str(exc_info.value)

    def test_update_derives_date(self):
        """Test: Update mit rawDates setzt auch date"""
        update = EventUpdate(rawDates=["2024-07-01", "2024-07-02"])
        assert update.model_dump(exclude_unset=True, exclude_none=True) == {
            "raw_dates": "2024-07-01|2024-07-02",
            "date": "July 1, 2024 to July 2, 2024",
        }

    def test_update_free_text_date_clears_raw_dates(self):
        """Test: date ohne rawDates leert die Datumsliste"""
        update = EventUpdate(date=" June 9, 2030 ")
        assert update.model_dump(exclude_unset=True) == {"date": "June 9, 2030", "raw_dates": None}

    def test_update_rejects_null_required_text(self):
        """Test: null auf name, date, time oder location"""
        for field in ("name", "date", "time", "location"):
            with pytest.raises(ValidationError):
                EventUpdate(**{field: None})

    def test_update_clear_raw_dates(self):
        """Test: rawDates="" leert nur die Datumsliste"""
        update = EventUpdate(rawDates="")
        assert update.model_dump(exclude_unset=True) == {"raw_dates": None}


@pytest.mark.unit
class TestVolunteerValidation:
    """Tests für Helfer-Schemas"""

    def test_valid_volunteer(self):
        """Test: Gültiger Helfer mit camelCase-Feldern"""
        volunteer = VolunteerCreate(
            name="Sarah Johnson",
            email="sarah.j@example.com",
            phone="(555) 123-4567",
            shirtSize="Medium",
            dietaryNeeds="Vegetarian",
        )
        assert volunteer.shirt_size == "Medium"
        assert volunteer.checked_in is False

    def test_invalid_email(self):
        """Test: Ungültige E-Mail-Adresse"""
        with pytest.raises(ValidationError) as exc_info:
            VolunteerCreate(name="X", email="not-an-email")
        assert "Ungültige E-Mail-Adresse" in str(exc_info.value)

    def test_missing_email(self):
        """Test: E-Mail ist Pflicht"""
        with pytest.raises(ValidationError):
            VolunteerCreate(name="X", email="  ")

    def test_invalid_phone(self):
        """Test: Buchstaben in der Telefonnummer"""
        with pytest.raises(ValidationError) as exc_info:
            VolunteerCreate(name="X", email="x@example.com", phone="call me")
        assert "Ungültige Telefonnummer" in str(exc_info.value)

    def test_empty_optional_text_becomes_none(self):
        """Test: Leere optionale Felder werden zu None"""
        volunteer = VolunteerCreate(name="X", email="x@example.com", team="  ")
        assert volunteer.team is None

    def test_update_only_set_fields(self):
        """Test: Update enthält nur übergebene Felder"""
        update = VolunteerUpdate(team="Kitchen")
        assert update.model_dump(exclude_unset=True) == {"team": "Kitchen"}

    def test_update_rejects_null_name_and_email(self):
        """Test: Pflichtfelder können nicht per null geleert werden"""
        with pytest.raises(ValidationError) as exc_info:
            VolunteerUpdate(name=None)
        assert "Name darf nicht leer sein" in str(exc_info.value)

        with pytest.raises(ValidationError) as exc_info:
            VolunteerUpdate(email=None)
        assert "E-Mail darf nicht leer sein" in str(exc_info.value)

    def test_update_nullable_fields_accept_null(self):
        """Test: Optionale Felder dürfen geleert werden"""
        update = VolunteerUpdate(team=None, phone=None)
        assert update.model_dump(exclude_unset=True) == {"team": None, "phone": None}

    def test_checked_in_requires_checked_in_by(self):
        """Test: checkedIn=true ohne checkedInBy ist ungültig"""
        with pytest.raises(ValidationError) as exc_info:
            VolunteerCreate(name="X", email="x@example.com", checkedIn=True)
        assert "checkedInBy muss angegeben werden" in str(exc_info.value)

        volunteer = VolunteerCreate(name="X", email="x@example.com", checkedIn=True, checkedInBy="Admin")
        assert volunteer.checked_in_by == "Admin"


@pytest.mark.unit
class TestShiftValidation:
    """Tests für Schicht-Schemas"""

    def test_valid_shift(self):
        """Test: Gültige Schicht, Datum als String"""
        shift = ShiftCreate(shiftDate="2024-05-01", title="Morning", startTime="9:00 AM", endTime="12:00 PM")
        assert shift.shift_date == date(2024, 5, 1)
        assert shift.max_volunteers == 0

    def test_datetime_string_truncated(self):
        """Test: ISO-Zeitstempel wird auf den Tag reduziert"""
        shift = ShiftCreate(
            shiftDate="2024-05-01T00:00:00.000Z", title="Morning", startTime="9:00 AM", endTime="10:00 AM"
        )
        assert shift.shift_date == date(2024, 5, 1)

    def test_24h_times(self):
        """Test: 24h-Format wird akzeptiert"""
        shift = ShiftCreate(shiftDate="2024-05-01", title="Late", startTime="18:00", endTime="22:30")
        assert shift.end_time == "22:30"

    def test_end_before_start(self):
        """Test: Endzeit vor Startzeit"""
        with pytest.raises(ValidationError) as exc_info:
            ShiftCreate(shiftDate="2024-05-01", title="X", startTime="1:00 PM", endTime="10:00 AM")
        assert "Endzeit muss nach der Startzeit liegen" in str(exc_info.value)

    def test_invalid_time_label(self):
        """Test: Unlesbare Uhrzeit"""
        with pytest.raises(ValidationError) as exc_info:
            ShiftCreate(shiftDate="2024-05-01", title="X", startTime="morgens", endTime="10:00 AM")
        assert "Startzeit muss eine gültige Uhrzeit sein" in str(exc_info.value)

    def test_invalid_date(self):
        """Test: Ungültiges Datum"""
        with pytest.raises(ValidationError) as exc_info:
            ShiftCreate(shiftDate="01.05.2024", title="X", startTime="9:00 AM", endTime="10:00 AM")
        assert "YYYY-MM-DD" in str(exc_info.value)

    def test_negative_max_volunteers(self):
        """Test: max_volunteers darf nicht negativ sein"""
        with pytest.raises(ValidationError):
            ShiftCreate(shiftDate="2024-05-01", title="X", startTime="9:00 AM", endTime="10:00 AM",
                        maxVolunteers=-1)

    def test_partial_update(self):
        """Test: Teil-Update nur mit Endzeit"""
        update = ShiftUpdate(endTime="3:00 PM")
        assert update.model_dump(exclude_unset=True) == {"end_time": "3:00 PM"}


@pytest.mark.unit
class TestRoleAndAssignmentValidation:
    """Tests für Rollen, Zuordnungen und Login"""

    def test_role_description_optional(self):
        """Test: Leere Beschreibung wird zu None"""
        role = RoleCreate(name="First Aid", description="")
        assert role.description is None

    def test_role_update_normalizes_description(self):
        """Test: Update trimmt die Beschreibung wie beim Anlegen"""
        assert RoleUpdate(description="  ").description is None
        assert RoleUpdate(description=" Erste Hilfe ").description == "Erste Hilfe"

    def test_role_update_rejects_null_name(self):
        """Test: name=null beim Update"""
        with pytest.raises(ValidationError):
            RoleUpdate(name=None)

    def test_shift_role_requires_positive_ids(self):
        """Test: IDs müssen positiv sein"""
        with pytest.raises(ValidationError):
            ShiftRoleCreate(shiftId=0, roleId=1)

    def test_replace_defaults_to_empty(self):
        """Test: Ohne roleIds werden alle Rollen entfernt"""
        assert ShiftRolesReplace().role_ids == []

    def test_login_username_stripped(self):
        """Test: Benutzername wird getrimmt"""
        assert LoginRequest(username=" admin ", password="secret").username == "admin"

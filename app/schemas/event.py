"""Pydantic Schemas für Event"""
from typing import List, Optional, Union
from pydantic import Field, field_validator, model_validator

from app.schemas.base import ApiModel
from app.utils.datetime_utils import parse_raw_dates, join_raw_dates, format_event_dates
from app.utils.validators import Validators


def _normalize_raw_dates(v: Union[str, List[str], None]) -> Optional[str]:
    """Akzeptiert "2024-05-01|2024-05-02" oder ["2024-05-01", ...]"""
    if v is None:
        return None
    if isinstance(v, list):
        v = "|".join(v)
    days = parse_raw_dates(v)
    if not days:
        return None
    return join_raw_dates(days)


class EventCreate(ApiModel):
    """
    Schema für das Erstellen eines Events

    Entweder raw_dates (kanonisch) oder ein freier Anzeige-String date.
    Mit raw_dates wird date immer daraus abgeleitet.
    """
    name: str = Field(..., min_length=1, max_length=200)
    date: Optional[str] = Field(None, max_length=500)
    raw_dates: Optional[Union[str, List[str]]] = None
    time: str = Field(..., min_length=1, max_length=100)
    location: str = Field(..., min_length=1, max_length=200)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validiert den Namen"""
        return Validators.validate_required_text(v, "Name")

    @field_validator('location')
    @classmethod
    def validate_location(cls, v: str) -> str:
        """Validiert den Ort"""
        return Validators.validate_required_text(v, "Ort")

    @field_validator('time')
    @classmethod
    def validate_time(cls, v: str) -> str:
        """Validiert die Zeitangabe"""
        return Validators.validate_required_text(v, "Uhrzeit")

    @field_validator('raw_dates')
    @classmethod
    def validate_raw_dates(cls, v: Union[str, List[str], None]) -> Optional[str]:
        """Normalisiert die Datumsliste (sortiert, ohne Duplikate)"""
        return _normalize_raw_dates(v)

    @model_validator(mode='after')
    def derive_display_date(self) -> 'EventCreate':
        """Leitet date aus raw_dates ab"""
        if self.raw_dates:
            self.date = format_event_dates(parse_raw_dates(self.raw_dates))
        elif not self.date or not self.date.strip():
            raise ValueError("Datum oder rawDates muss angegeben werden")
        else:
            self.date = self.date.strip()
        return self


class EventUpdate(ApiModel):
    """
    Schema für das Aktualisieren eines Events

    raw_dates bleibt die Quelle für date: neue raw_dates überschreiben
    date, ein date ohne raw_dates macht das Event zum Freitext-Datum
    (raw_dates wird geleert). raw_dates null oder "" leert die Liste und
    behält den bisherigen Anzeige-String.
    """
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    date: Optional[str] = Field(None, min_length=1, max_length=500)
    raw_dates: Optional[Union[str, List[str]]] = None
    time: Optional[str] = Field(None, min_length=1, max_length=100)
    location: Optional[str] = Field(None, min_length=1, max_length=200)

    @field_validator('name', 'date', 'location', 'time')
    @classmethod
    def validate_text(cls, v: Optional[str]) -> str:
        """Pflichtfelder dürfen beim Update nicht geleert werden"""
        return Validators.validate_required_text(v)

    @field_validator('raw_dates')
    @classmethod
    def validate_raw_dates(cls, v: Union[str, List[str], None]) -> Optional[str]:
        """Normalisiert die Datumsliste"""
        return _normalize_raw_dates(v)

    @model_validator(mode='after')
    def derive_display_date(self) -> 'EventUpdate':
        """Hält date und raw_dates synchron"""
        if self.raw_dates:
            self.date = format_event_dates(parse_raw_dates(self.raw_dates))
        elif 'date' in self.model_fields_set and 'raw_dates' not in self.model_fields_set:
            self.raw_dates = None
        return self


class EventResponse(ApiModel):
    """Schema für die Antwort"""
    id: int
    name: str
    date: str
    raw_dates: Optional[str] = None
    time: str
    location: str


class EventWithVolunteerCount(EventResponse):
    """Event-Liste mit Anzahl der Helfer"""
    volunteer_count: int


class EventStats(ApiModel):
    """Check-in Statistik eines Events (total = checked_in + pending)"""
    total: int
    checked_in: int
    pending: int

"""Pydantic Schemas für Shift"""
from datetime import date, datetime
from typing import Optional, Union
from pydantic import Field, field_validator, model_validator

from app.schemas.base import ApiModel
from app.utils.datetime_utils import to_day
from app.utils.validators import Validators


def _to_shift_date(v: Union[str, date, datetime]) -> date:
    """Schichtdatum auf den Kalendertag reduzieren (Uhrzeit wird ignoriert)"""
    try:
        return to_day(v)
    except ValueError:
        raise ValueError("Schichtdatum muss im Format YYYY-MM-DD vorliegen")


class ShiftCreate(ApiModel):
    """Schema für das Erstellen einer Schicht (event_id kommt aus dem Pfad)"""
    shift_date: Union[date, datetime, str]
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    start_time: str = Field(..., min_length=1, max_length=20)
    end_time: str = Field(..., min_length=1, max_length=20)
    max_volunteers: int = Field(0, ge=0)

    @field_validator('shift_date')
    @classmethod
    def validate_shift_date(cls, v: Union[date, datetime, str]) -> date:
        """Validiert das Schichtdatum"""
        return _to_shift_date(v)

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Validiert den Titel"""
        return Validators.validate_required_text(v, "Titel")

    @field_validator('start_time')
    @classmethod
    def validate_start_time(cls, v: str) -> str:
        """Validiert die Startzeit"""
        return Validators.validate_time_label(v, "Startzeit")

    @field_validator('end_time')
    @classmethod
    def validate_end_time(cls, v: str) -> str:
        """Validiert die Endzeit"""
        return Validators.validate_time_label(v, "Endzeit")

    @model_validator(mode='after')
    def validate_time_range(self) -> 'ShiftCreate':
        """Endzeit muss nach der Startzeit liegen"""
        Validators.validate_time_range(self.start_time, self.end_time)
        return self


class ShiftUpdate(ApiModel):
    """
    Schema für das Aktualisieren einer Schicht

    Ist nur eine der beiden Zeiten gesetzt, prüft der Router den Zeitraum
    gegen den gespeicherten Wert.
    """
    shift_date: Optional[Union[date, datetime, str]] = None
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    start_time: Optional[str] = Field(None, min_length=1, max_length=20)
    end_time: Optional[str] = Field(None, min_length=1, max_length=20)
    max_volunteers: Optional[int] = Field(None, ge=0)

    @field_validator('shift_date')
    @classmethod
    def validate_shift_date(cls, v: Optional[Union[date, datetime, str]]) -> Optional[date]:
        """Validiert das Schichtdatum"""
        if v is None:
            return None
        return _to_shift_date(v)

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        """Validiert den Titel"""
        if v is None:
            return None
        return Validators.validate_required_text(v, "Titel")

    @field_validator('start_time', 'end_time')
    @classmethod
    def validate_time(cls, v: Optional[str]) -> Optional[str]:
        """Validiert Uhrzeit-Labels"""
        if v is None:
            return None
        return Validators.validate_time_label(v)


class ShiftResponse(ApiModel):
    """Schema für die Antwort"""
    id: int
    event_id: int
    shift_date: date
    title: str
    description: Optional[str] = None
    start_time: str
    end_time: str
    max_volunteers: int

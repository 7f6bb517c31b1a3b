"""Pydantic Schemas für Volunteer und Check-in"""
from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator, model_validator

from app.schemas.base import ApiModel
from app.utils.datetime_utils import naive_utc_to_aware
from app.utils.validators import Validators


class VolunteerCreate(ApiModel):
    """
    Schema für das Erstellen eines Helfers

    event_id kommt aus dem Pfad (/api/events/{event_id}/volunteers).
    """
    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., max_length=200)
    phone: Optional[str] = Field(None, max_length=50)
    role: Optional[str] = Field(None, max_length=100)
    team: Optional[str] = Field(None, max_length=100)
    shirt_size: Optional[str] = Field(None, max_length=20)
    dietary_needs: Optional[str] = None
    checked_in: bool = False
    check_in_time: Optional[datetime] = None
    checked_in_by: Optional[str] = Field(None, max_length=200)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validiert den Namen"""
        return Validators.validate_required_text(v, "Name")

    @field_validator('email')
    @classmethod
    def validate_email(cls, v: str) -> str:
        """E-Mail ist Pflicht und muss gültig sein"""
        email = Validators.validate_email(v)
        if email is None:
            raise ValueError("E-Mail darf nicht leer sein")
        return email

    @field_validator('phone')
    @classmethod
    def validate_phone(cls, v: Optional[str]) -> Optional[str]:
        """Validiert die Telefonnummer"""
        return Validators.validate_phone(v)

    @field_validator('role', 'team', 'shirt_size', 'dietary_needs', 'checked_in_by')
    @classmethod
    def strip_optional(cls, v: Optional[str]) -> Optional[str]:
        """Leere Strings werden zu None"""
        return Validators.validate_optional_text(v)

    @model_validator(mode='after')
    def require_checked_in_by(self) -> 'VolunteerCreate':
        """Ein eingecheckter Helfer braucht immer checkedInBy"""
        if self.checked_in and not self.checked_in_by:
            raise ValueError("checkedInBy muss angegeben werden")
        return self


class VolunteerUpdate(ApiModel):
    """Schema für das Aktualisieren eines Helfers (nur gesetzte Felder)"""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    email: Optional[str] = Field(None, max_length=200)
    phone: Optional[str] = Field(None, max_length=50)
    role: Optional[str] = Field(None, max_length=100)
    team: Optional[str] = Field(None, max_length=100)
    shirt_size: Optional[str] = Field(None, max_length=20)
    dietary_needs: Optional[str] = None
    checked_in: Optional[bool] = None
    checked_in_by: Optional[str] = Field(None, max_length=200)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: Optional[str]) -> str:
        """Name darf geändert, aber nicht per null geleert werden"""
        return Validators.validate_required_text(v, "Name")

    @field_validator('email')
    @classmethod
    def validate_email(cls, v: Optional[str]) -> str:
        """E-Mail bleibt Pflicht, null wird abgelehnt"""
        email = Validators.validate_email(v)
        if email is None:
            raise ValueError("E-Mail darf nicht leer sein")
        return email

    @field_validator('phone')
    @classmethod
    def validate_phone(cls, v: Optional[str]) -> Optional[str]:
        """Validiert die Telefonnummer"""
        return Validators.validate_phone(v)

    @field_validator('role', 'team', 'shirt_size', 'dietary_needs', 'checked_in_by')
    @classmethod
    def strip_optional(cls, v: Optional[str]) -> Optional[str]:
        """Leere Strings werden zu None"""
        return Validators.validate_optional_text(v)


class VolunteerResponse(ApiModel):
    """Schema für die Antwort"""
    id: int
    event_id: int
    name: str
    email: str
    phone: Optional[str] = None
    role: Optional[str] = None
    team: Optional[str] = None
    shirt_size: Optional[str] = None
    dietary_needs: Optional[str] = None
    checked_in: bool
    check_in_time: Optional[datetime] = None
    checked_in_by: Optional[str] = None

    @field_validator('check_in_time')
    @classmethod
    def ensure_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """SQLite liefert naive Timestamps, diese sind UTC"""
        return naive_utc_to_aware(v)


class CheckInRequest(ApiModel):
    """Check-in per Liste. checked_in_by ist nur im offenen Modus relevant."""
    checked_in_by: Optional[str] = Field(None, max_length=200)

    @field_validator('checked_in_by')
    @classmethod
    def strip_checked_in_by(cls, v: Optional[str]) -> Optional[str]:
        """Leere Strings werden zu None"""
        return Validators.validate_optional_text(v)


class QrCheckInRequest(CheckInRequest):
    """Check-in per gescanntem QR-Code"""
    code: str = Field(..., min_length=1, max_length=200)

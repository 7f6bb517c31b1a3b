"""Pydantic Schemas für Role"""
from typing import Optional
from pydantic import Field, field_validator

from app.schemas.base import ApiModel
from app.utils.validators import Validators


class RoleCreate(ApiModel):
    """Schema für das Erstellen einer Rolle (event_id kommt aus dem Pfad)"""
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validiert den Namen"""
        return Validators.validate_required_text(v, "Name")

    @field_validator('description')
    @classmethod
    def validate_description(cls, v: Optional[str]) -> Optional[str]:
        """Leere Beschreibung wird zu None"""
        return Validators.validate_optional_text(v)


class RoleUpdate(ApiModel):
    """Schema für das Aktualisieren einer Rolle (nur gesetzte Felder)"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: Optional[str]) -> str:
        """Name darf gesetzt, aber nicht per null geleert werden"""
        return Validators.validate_required_text(v, "Name")

    @field_validator('description')
    @classmethod
    def validate_description(cls, v: Optional[str]) -> Optional[str]:
        """Leere Beschreibung wird zu None"""
        return Validators.validate_optional_text(v)


class RoleResponse(ApiModel):
    """Schema für die Antwort"""
    id: int
    event_id: int
    name: str
    description: Optional[str] = None

"""Pydantic Schemas für User und Login"""
from typing import Optional
from pydantic import Field, field_validator

from app.schemas.base import ApiModel
from app.utils.validators import Validators


class LoginRequest(ApiModel):
    """Login-Daten (erster Login legt den Benutzer an)"""
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1, max_length=200)

    @field_validator('username')
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validiert den Benutzernamen"""
        return Validators.validate_required_text(v, "Benutzername")


class UserUpdate(ApiModel):
    """Schema für das Aktualisieren des eigenen Profils"""
    email: Optional[str] = Field(None, max_length=200)
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    profile_image_url: Optional[str] = Field(None, max_length=500)

    @field_validator('email')
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        """Validiert die E-Mail-Adresse"""
        return Validators.validate_email(v)


class UserResponse(ApiModel):
    """Schema für die Antwort (ohne Passwort)"""
    id: int
    username: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    display_name: str

"""Zentrale Validierungs-Funktionen für wiederverwendbare Logik"""
import re
from typing import Optional

from app.utils.datetime_utils import time_to_minutes


class Validators:
    """Sammlung von wiederverwendbaren Validierungs-Funktionen"""

    EMAIL_PATTERN = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    PHONE_PATTERN = r'^[0-9+()\-./ ]{3,50}$'

    @staticmethod
    def validate_email(email: Optional[str]) -> Optional[str]:
        """
        Validiert eine E-Mail-Adresse.

        Returns:
            Bereinigte E-Mail (stripped) oder None

        Raises:
            ValueError: Wenn E-Mail ungültig ist
        """
        if email and email.strip():
            if not re.match(Validators.EMAIL_PATTERN, email.strip()):
                raise ValueError("Ungültige E-Mail-Adresse")
            return email.strip()
        return None

    @staticmethod
    def validate_phone(phone: Optional[str]) -> Optional[str]:
        """Validiert eine Telefonnummer (Ziffern, Leerzeichen, +()-./)"""
        if phone and phone.strip():
            if not re.match(Validators.PHONE_PATTERN, phone.strip()):
                raise ValueError("Ungültige Telefonnummer")
            return phone.strip()
        return None

    @staticmethod
    def validate_required_text(text: str, field_name: str = "Feld") -> str:
        """
        Validiert einen Pflicht-Text (darf nicht leer sein).

        Raises:
            ValueError: Wenn Text leer ist
        """
        if not text or not text.strip():
            raise ValueError(f"{field_name} darf nicht leer sein")
        return text.strip()

    @staticmethod
    def validate_optional_text(text: Optional[str]) -> Optional[str]:
        """Trimmt optionalen Text, leere Strings werden zu None"""
        if text is None or not text.strip():
            return None
        return text.strip()

    @staticmethod
    def validate_time_label(label: str, field_name: str = "Uhrzeit") -> str:
        """
        Validiert ein Uhrzeit-Label ("9:00 AM", "14:30").

        Raises:
            ValueError: Wenn das Label nicht geparst werden kann
        """
        label = Validators.validate_required_text(label, field_name)
        try:
            time_to_minutes(label)
        except ValueError:
            raise ValueError(f"{field_name} muss eine gültige Uhrzeit sein (z.B. 9:00 AM)")
        return label

    @staticmethod
    def validate_time_range(start_time: str, end_time: str) -> None:
        """
        Prüft dass end_time nach start_time liegt.

        Raises:
            ValueError: Wenn Ende nicht nach Beginn liegt
        """
        if time_to_minutes(end_time) <= time_to_minutes(start_time):
            raise ValueError("Endzeit muss nach der Startzeit liegen")

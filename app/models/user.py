"""User (Organisator) Model"""
from sqlalchemy import Column, Integer, String, DateTime

from app.database import Base
from app.utils.datetime_utils import get_utc_timestamp


class User(Base):
    """
    Organisator bzw. Administrator, der Events anlegt und Helfer eincheckt
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # werkzeug Passwort-Hash

    # Profil (optional)
    email = Column(String(200), nullable=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    profile_image_url = Column(String(500), nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=get_utc_timestamp, nullable=False)
    updated_at = Column(DateTime, default=get_utc_timestamp, onupdate=get_utc_timestamp, nullable=False)

    @property
    def display_name(self) -> str:
        """Name für checked_in_by: "Vorname Nachname" oder der Benutzername"""
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.username or "Admin"

    def __repr__(self):
        return f"<User {self.username}>"

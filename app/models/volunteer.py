"""Volunteer (Helfer) Model"""
from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey, Boolean

from app.database import Base


class Volunteer(Base):
    """
    Repräsentiert einen Helfer, der genau einem Event zugeordnet ist

    Check-in Invariante: checked_in=False bedeutet check_in_time und
    checked_in_by sind None. Beim Einchecken werden beide gemeinsam gesetzt.
    """
    __tablename__ = "volunteers"

    id = Column(Integer, primary_key=True, index=True)

    # Kontaktdaten
    name = Column(String(200), nullable=False, index=True)
    email = Column(String(200), nullable=False, index=True)
    phone = Column(String(50), nullable=True)

    # Einsatz
    role = Column(String(100), nullable=True)  # Freitext-Label, keine FK auf roles
    team = Column(String(100), nullable=True)
    shirt_size = Column(String(20), nullable=True)
    dietary_needs = Column(Text, nullable=True)

    # Check-in Status
    checked_in = Column(Boolean, default=False, nullable=False, index=True)
    check_in_time = Column(DateTime, nullable=True)
    checked_in_by = Column(String(200), nullable=True)

    # Foreign Key
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)

    def __repr__(self):
        status = "eingecheckt" if self.checked_in else "offen"
        return f"<Volunteer {self.name} ({status})>"

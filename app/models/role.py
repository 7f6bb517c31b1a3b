"""Role (Aufgabe) Model"""
from sqlalchemy import Column, Integer, String, Text, ForeignKey

from app.database import Base


class Role(Base):
    """
    Repräsentiert eine Aufgabe (z.B. Anmeldung, Erste Hilfe, Essensausgabe)
    Event-spezifisch: Jedes Event hat eigene Rollen
    """
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)

    # Foreign Key
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)

    def __repr__(self):
        return f"<Role {self.name}>"

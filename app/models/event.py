"""Event Model"""
from sqlalchemy import Column, Integer, String, Text

from app.database import Base
from app.utils.datetime_utils import parse_raw_dates


class Event(Base):
    """
    Repräsentiert ein Event, für das Helfer benötigt werden (z.B. Park-Aufräumaktion)

    `date` ist der Anzeige-String, `raw_dates` die kanonische Liste der Tage
    (pipe-getrennte ISO-Daten). Ist raw_dates gesetzt, wird date daraus abgeleitet.
    """
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, index=True)
    date = Column(String(500), nullable=False)  # z.B. "May 1, 2024 to May 3, 2024"
    raw_dates = Column(Text, nullable=True)  # z.B. "2024-05-01|2024-05-02|2024-05-03"
    time = Column(String(100), nullable=False)  # z.B. "9:00 AM - 12:00 PM"
    location = Column(String(200), nullable=False)

    @property
    def dates(self):
        """Event-Tage als sortierte Liste von date-Objekten"""
        return parse_raw_dates(self.raw_dates)

    def __repr__(self):
        return f"<Event {self.name} ({self.date})>"

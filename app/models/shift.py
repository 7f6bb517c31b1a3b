"""Shift (Schicht) Model"""
from sqlalchemy import Column, Integer, String, Date, Text, ForeignKey

from app.database import Base


class Shift(Base):
    """
    Zeitfenster an einem Event-Tag, in dem Helfer arbeiten
    """
    __tablename__ = "shifts"

    id = Column(Integer, primary_key=True, index=True)
    shift_date = Column(Date, nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    start_time = Column(String(20), nullable=False)  # Label, z.B. "9:00 AM"
    end_time = Column(String(20), nullable=False)
    max_volunteers = Column(Integer, default=0, nullable=False)  # 0 = unbegrenzt

    # Foreign Key
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)

    def __repr__(self):
        return f"<Shift {self.title} {self.shift_date} {self.start_time}-{self.end_time}>"

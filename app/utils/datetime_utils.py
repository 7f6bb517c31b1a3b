"""
Datetime Utilities für konsistentes Zeit-Handling

Strategie:
- Timestamps (check_in_time, created_at): UTC
- Business Dates (Event-Tage, shift_date): reine Kalenderdaten ohne Zeitzone
- Uhrzeiten von Schichten: Anzeige-Labels ("9:00 AM", "14:30"), für Vergleiche
  immer in Minuten seit Mitternacht umrechnen
"""
import re
from datetime import datetime, date, timezone
from typing import Iterable, List, Optional, Union
import logging

logger = logging.getLogger(__name__)

RAW_DATES_SEPARATOR = "|"

_TIME_LABEL_PATTERN = re.compile(
    r'^\s*(?P<hour>\d{1,2})(?::(?P<minute>\d{2}))?\s*(?P<meridiem>[AaPp][Mm])?\s*$'
)


def utcnow() -> datetime:
    """
    Gibt die aktuelle UTC-Zeit zurück (timezone-aware).

    Ersetzt datetime.utcnow() (deprecated in Python 3.12).
    """
    return datetime.now(timezone.utc)


def naive_utc_to_aware(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Konvertiert naive UTC datetime zu timezone-aware UTC datetime.

    SQLite liefert DateTime-Spalten ohne Zeitzone zurück, auch wenn
    ein aware Timestamp gespeichert wurde.
    """
    if dt is None or dt.tzinfo is not None:
        return dt

    return dt.replace(tzinfo=timezone.utc)


# Für SQLAlchemy default Funktionen
def get_utc_timestamp() -> datetime:
    """
    Wrapper für utcnow() zur Verwendung in SQLAlchemy Column defaults.

    Verwendung:
        created_at = Column(DateTime, default=get_utc_timestamp)
    """
    return utcnow()


def to_day(value: Union[date, datetime, str]) -> date:
    """
    Reduziert einen Datums-/Zeitwert auf den Kalendertag.

    Args:
        value: date, datetime oder ISO-String ("2024-05-01" oder "2024-05-01T10:00:00")

    Returns:
        date ohne Uhrzeit-Anteil

    Raises:
        ValueError: Wenn der String kein ISO-Datum ist
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def parse_iso_date(value: str) -> date:
    """
    Parst ein ISO-Datum (YYYY-MM-DD), optional mit Zeit-Anteil.

    Raises:
        ValueError: Bei ungültigem Format
    """
    text = (value or "").strip()
    if not text:
        raise ValueError("Datum darf nicht leer sein")
    try:
        if len(text) > 10:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        raise ValueError(f"Ungültiges Datum '{value}' (Format: YYYY-MM-DD)")


def time_to_minutes(label: str) -> int:
    """
    Rechnet ein Uhrzeit-Label in Minuten seit Mitternacht um.

    Unterstützt 12h-Format ("9:00 AM", "12:30 PM", "7 PM") und 24h-Format ("14:30").

    Raises:
        ValueError: Wenn das Label keine gültige Uhrzeit ist
    """
    match = _TIME_LABEL_PATTERN.match(label or "")
    if not match:
        raise ValueError(f"Ungültige Uhrzeit '{label}'")

    hour = int(match.group("hour"))
    minute = int(match.group("minute") or 0)
    meridiem = match.group("meridiem")

    if minute > 59:
        raise ValueError(f"Ungültige Uhrzeit '{label}'")

    if meridiem:
        if not 1 <= hour <= 12:
            raise ValueError(f"Ungültige Uhrzeit '{label}'")
        is_pm = meridiem.upper() == "PM"
        # 12 AM = Mitternacht, 12 PM = Mittag
        hour = hour % 12 + (12 if is_pm else 0)
    elif hour > 23:
        raise ValueError(f"Ungültige Uhrzeit '{label}'")

    return hour * 60 + minute


def parse_raw_dates(raw_dates: Optional[str]) -> List[date]:
    """
    Parst die maschinenlesbare Datumsliste eines Events ("2024-05-01|2024-05-02").

    Returns:
        Sortierte Liste ohne Duplikate (leer bei None/leerem String)
    """
    if not raw_dates:
        return []
    parts = [part for part in raw_dates.split(RAW_DATES_SEPARATOR) if part.strip()]
    return sorted({to_day(part) for part in parts})


def join_raw_dates(dates: Iterable[date]) -> str:
    """Serialisiert Event-Tage als sortierte, pipe-getrennte ISO-Liste"""
    return RAW_DATES_SEPARATOR.join(d.isoformat() for d in sorted(set(dates)))


def format_display_date(value: date) -> str:
    """Formatiert ein Datum als "May 1, 2024" """
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def format_event_dates(dates: Iterable[date]) -> str:
    """
    Leitet den Anzeige-String eines Events aus seinen Tagen ab.

    - ein Tag: "May 1, 2024"
    - lückenloser Zeitraum: "May 1, 2024 to May 5, 2024"
    - sonst: Komma-Liste "May 1, 2024, May 3, 2024"
    """
    days = sorted(set(dates))
    if not days:
        return ""
    if len(days) == 1:
        return format_display_date(days[0])

    is_consecutive = all(
        (later - earlier).days == 1 for earlier, later in zip(days, days[1:])
    )
    if is_consecutive:
        return f"{format_display_date(days[0])} to {format_display_date(days[-1])}"

    return ", ".join(format_display_date(d) for d in days)
